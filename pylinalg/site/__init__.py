"""
Project homepage.

Public API:
    create_app(config) -> Flask app
    render_page(path) -> bytes
"""

from pylinalg.site.app import create_app
from pylinalg.site.renderer import format_timestamp, last_modified, render_page

__all__ = [
    "create_app",
    "render_page",
    "last_modified",
    "format_timestamp",
]
