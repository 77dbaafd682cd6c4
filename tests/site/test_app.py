"""
Tests for the homepage Flask app.
"""

import logging

import pytest

from pylinalg.site.app import CONTENT_TYPE, create_app
from pylinalg.site.renderer import PLACEHOLDER


@pytest.fixture
def client():
    app = create_app({"TESTING": True})
    return app.test_client()


class TestRoutes:

    def test_index(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["Content-Type"] == CONTENT_TYPE
        assert b"PyLinAlg" in resp.data
        assert PLACEHOLDER.encode("ascii") not in resp.data
        assert b"Last modification:</strong> " in resp.data

    def test_legacy_index_php(self, client):
        assert client.get("/index.php").data == client.get("/").data

    def test_post_not_allowed(self, client):
        assert client.post("/").status_code == 405

    def test_unknown_route(self, client):
        assert client.get("/docs/missing").status_code == 404

    def test_stylesheet(self, client):
        resp = client.get("/static/common.css")
        assert resp.status_code == 200
        resp.close()


class TestConfiguration:

    def test_custom_page(self, tmp_path):
        page = tmp_path / "page.html"
        page.write_text("hello " + PLACEHOLDER, encoding="iso-8859-1")
        app = create_app({"TESTING": True, "PAGE_PATH": str(page)})
        body = app.test_client().get("/").data
        assert body.startswith(b"hello ")
        assert PLACEHOLDER.encode("ascii") not in body

    def test_page_from_environment(self, tmp_path, monkeypatch):
        page = tmp_path / "env.html"
        page.write_text("from env", encoding="iso-8859-1")
        monkeypatch.setenv("PYLINALG_PAGE", str(page))
        app = create_app({"TESTING": True})
        assert app.config["PAGE_PATH"] == str(page)
        assert app.test_client().get("/").data == b"from env"

    def test_missing_page_is_server_error(self, tmp_path, caplog):
        app = create_app({"PAGE_PATH": str(tmp_path / "gone.html")})
        with caplog.at_level(logging.ERROR, logger="pylinalg.site"):
            resp = app.test_client().get("/")
        assert resp.status_code == 500
        assert any("Rendering" in r.getMessage() for r in caplog.records)
