"""
Tests for the homepage renderer.
"""

import os
from datetime import datetime

import pytest

from pylinalg.site.renderer import (
    PLACEHOLDER,
    format_timestamp,
    last_modified,
    render_page,
)

STAMP = datetime(2024, 3, 5, 14, 7)


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "index.html"
    path.write_text(f"<p>Last modification: {PLACEHOLDER}</p>",
                    encoding="iso-8859-1")
    ts = STAMP.timestamp()
    os.utime(path, (ts, ts))
    return path


class TestFormatTimestamp:

    def test_zero_padded(self):
        assert format_timestamp(datetime(2009, 1, 2, 3, 4)) == \
            '02.01.2009, 03:04'

    def test_afternoon(self):
        assert format_timestamp(STAMP) == '05.03.2024, 14:07'


class TestRenderPage:

    def test_last_modified(self, page):
        assert last_modified(page).replace(second=0, microsecond=0) == STAMP

    def test_placeholder_replaced(self, page):
        assert render_page(page) == \
            b'<p>Last modification: 05.03.2024, 14:07</p>'

    def test_latin1_round_trip(self, tmp_path):
        path = tmp_path / "page.html"
        path.write_bytes(b'Gr\xf6\xdfe ' + PLACEHOLDER.encode('ascii'))
        body = render_page(path)
        assert body.startswith(b'Gr\xf6\xdfe ')
        assert PLACEHOLDER.encode('ascii') not in body

    def test_page_without_placeholder(self, tmp_path):
        path = tmp_path / "plain.html"
        path.write_text("<p>static</p>", encoding="iso-8859-1")
        assert render_page(path) == b'<p>static</p>'

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            render_page(tmp_path / "missing.html")

    def test_repeated_renders_identical(self, page):
        assert render_page(page) == render_page(page)

    def test_touch_updates_timestamp(self, page):
        before = render_page(page)
        ts = datetime(2023, 11, 14, 22, 13).timestamp()
        os.utime(page, (ts, ts))
        after = render_page(page)
        assert after != before
        assert after == b'<p>Last modification: 14.11.2023, 22:13</p>'
        assert render_page(page) == after
