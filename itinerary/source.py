"""
Calendar input.

Supplies the lines of a calendar either from a local file or, when the
location starts with http:// or https://, from a web server (shared calendar
links are usually published that way).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import requests

from itinerary.errors import InputFileUnreadable


logger = logging.getLogger(__name__)

HTTP_TIMEOUT = 30


def _is_url(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


def _fetch(url: str) -> str:
    logger.debug("Fetching calendar from %s", url)
    try:
        resp = requests.get(url, timeout=HTTP_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise InputFileUnreadable(f"Cannot download {url}: {exc}") from exc
    return resp.text


def read_lines(location: str | Path) -> List[str]:
    """
    Return all lines of the calendar at `location` (path or URL).

    Line terminators are kept; the parser strips them itself.
    """
    loc = str(location)
    if _is_url(loc):
        return _fetch(loc).splitlines(keepends=True)

    try:
        text = Path(loc).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileUnreadable(f"Cannot read {loc}: {exc}") from exc

    logger.debug("Read %d bytes from %s", len(text), loc)
    return text.splitlines(keepends=True)
