"""
HTTP surface of the project homepage.

Creates the Flask app; ``/`` and the legacy ``/index.php`` both serve
the rendered page.
"""

import logging
import os

from flask import Flask, Response

from pylinalg.site.renderer import ENCODING, render_page

log = logging.getLogger("pylinalg.site")

DEFAULT_PAGE = os.path.join(os.path.dirname(__file__), "templates", "index.html")

CONTENT_TYPE = f"text/html; charset={ENCODING}"


def create_app(config=None):
    """
    Application factory.

    Args:
        config: Overrides for app.config. PAGE_PATH selects the page
            file (default: PYLINALG_PAGE env or the bundled page).
    """
    app = Flask(__name__)
    app.config["PAGE_PATH"] = os.environ.get("PYLINALG_PAGE", DEFAULT_PAGE)
    if config:
        app.config.update(config)

    def index():
        page = app.config["PAGE_PATH"]
        try:
            body = render_page(page)
        except OSError:
            log.exception("Rendering %s failed", page,
                          extra={"route": "/", "status": 500, "page": page})
            raise
        return Response(body, status=200, content_type=CONTENT_TYPE)

    app.add_url_rule("/", "index", index, methods=["GET"])
    app.add_url_rule("/index.php", "index_php", index, methods=["GET"])

    log.debug("App created, page=%s", app.config["PAGE_PATH"])
    return app
