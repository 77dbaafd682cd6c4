"""
Page renderer for the project homepage.

The page is a fixed HTML document with one placeholder for the time the
page file was last modified. Every render stats the file once and does
one substitution; nothing is cached.
"""

from __future__ import annotations

import os
from datetime import datetime

PLACEHOLDER = '{{ last_modified }}'
TIMESTAMP_FORMAT = '%d.%m.%Y, %H:%M'
ENCODING = 'iso-8859-1'


def last_modified(path: str | os.PathLike) -> datetime:
    """
    Modification time of the page file, in local time.

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be stat'ed
    """
    return datetime.fromtimestamp(os.stat(path).st_mtime)


def format_timestamp(dt: datetime) -> str:
    """DD.MM.YYYY, HH:MM, independent of the locale."""
    return f"{dt.day:02d}.{dt.month:02d}.{dt.year:04d}, " \
        f"{dt.hour:02d}:{dt.minute:02d}"


def render_page(path: str | os.PathLike) -> bytes:
    """
    Read the page and insert its modification time.

    Returns:
        The document encoded as ISO-8859-1
    """
    stamp = format_timestamp(last_modified(path))
    with open(path, encoding=ENCODING) as f:
        text = f.read()
    return text.replace(PLACEHOLDER, stamp).encode(ENCODING)
