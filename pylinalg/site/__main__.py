"""
Run the homepage server: python -m pylinalg.site

Environment:
    PYLINALG_PAGE       page file (default: the bundled page)
    PYLINALG_HOST       bind address (default 127.0.0.1)
    PYLINALG_PORT       port (default 5000)
    LOG_LEVEL           log level (default INFO)
    PYLINALG_JSON_LOGS  "true" for JSON log lines
"""

import os

from pylinalg.site.app import create_app
from pylinalg.site.logging_config import setup_logging


def main():
    setup_logging()
    app = create_app()
    host = os.environ.get("PYLINALG_HOST", "127.0.0.1")
    port = int(os.environ.get("PYLINALG_PORT", 5000))
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
