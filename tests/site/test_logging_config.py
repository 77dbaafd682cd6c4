"""
Tests for the logging setup of the homepage server.
"""

import json
import logging
import logging.handlers
import sys

import pytest

from pylinalg.site.logging_config import (
    HumanFormatter,
    JSONFormatter,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(msg="page served", exc_info=None, **extra):
    record = logging.getLogger("pylinalg.site").makeRecord(
        "pylinalg.site", logging.INFO, __file__, 10, msg, (), exc_info,
        extra=extra,
    )
    return record


class TestJSONFormatter:

    def test_fields(self):
        entry = json.loads(JSONFormatter().format(make_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "pylinalg.site"
        assert entry["msg"] == "page served"

    def test_extra_fields(self):
        record = make_record(route="/", status=200, duration_ms=1.5)
        entry = json.loads(JSONFormatter().format(record))
        assert entry["route"] == "/"
        assert entry["status"] == 200
        assert entry["duration_ms"] == 1.5
        assert "page" not in entry

    def test_exception(self):
        try:
            raise OSError("disk gone")
        except OSError:
            record = make_record(exc_info=sys.exc_info())
        entry = json.loads(JSONFormatter().format(record))
        assert "disk gone" in entry["exception"]


class TestHumanFormatter:

    def test_line(self):
        line = HumanFormatter().format(make_record())
        assert "[I] pylinalg.site: page served" in line


class TestSetupLogging:

    def test_explicit_arguments(self):
        setup_logging(level="debug", json_logs=True)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert logging.getLogger("werkzeug").level == logging.WARNING

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("PYLINALG_JSON_LOGS", "yes")
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_human_by_default(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("PYLINALG_JSON_LOGS", raising=False)
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert isinstance(root.handlers[0].formatter, HumanFormatter)

    def test_log_file(self, tmp_path):
        path = tmp_path / "site.log"
        setup_logging(level="INFO", json_logs=False, log_file=str(path))
        root = logging.getLogger()
        file_handlers = [h for h in root.handlers
                         if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(file_handlers) == 1
        logging.getLogger("pylinalg.site").info("written")
        file_handlers[0].flush()
        lines = path.read_text().splitlines()
        assert json.loads(lines[-1])["msg"] == "written"
