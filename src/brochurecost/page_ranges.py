"""Parsing of free-form colored page specifications such as ``"1, 3-5, 7"``."""

from __future__ import annotations

import logging
import re
from typing import Optional, Set

from .models import PageSet

logger = logging.getLogger(__name__)

ALLOWED_PATTERN = re.compile(r"^[0-9,\-\s]*$")
LEADING_INT_PATTERN = re.compile(r"^\s*(?P<digits>\d+)")


class PageRangeError(ValueError):
    """Base class for page specification errors."""


class InvalidCharactersError(PageRangeError):
    """Raised when the text contains anything besides digits, commas, hyphens and whitespace."""

    def __init__(self, text: str) -> None:
        super().__init__("Invalid characters. Allowed: digits, comma, hyphen.")
        self.text = text


class InvalidRangeError(PageRangeError):
    def __init__(self, token: str) -> None:
        super().__init__(f'Invalid range: "{token}"')
        self.token = token


class PageOutOfBoundsError(PageRangeError):
    def __init__(self, value: int, max_page: int) -> None:
        super().__init__(f"Page {value} exceeds the total page count ({max_page}).")
        self.value = value
        self.max_page = max_page


def _leading_int(text: str) -> Optional[int]:
    match = LEADING_INT_PATTERN.match(text)
    if match is None:
        return None
    return int(match.group("digits"))


def _parse_range(token: str, max_page: int) -> range:
    parts = token.split("-")
    start = _leading_int(parts[0])
    end = _leading_int(parts[1])
    if start is None or end is None or start > end:
        raise InvalidRangeError(token)
    if end > max_page:
        raise PageOutOfBoundsError(max(start, max_page + 1), max_page)
    return range(start, end + 1)


def parse_color_pages(text: str, max_page: int) -> PageSet:
    """Parse ``text`` into the set of colored page numbers.

    Tokens are comma separated and either a single page (``"7"``) or an
    inclusive range (``"3-5"``). Empty tokens are ignored, and so are single
    tokens without a number. Range endpoints that are not numbers are an error.

    Raises
    ------
    InvalidCharactersError
        ``text`` contains characters other than digits, commas, hyphens or whitespace.
    InvalidRangeError
        A range endpoint is missing or the range runs backwards.
    PageOutOfBoundsError
        A page exceeds ``max_page``; reports the first offending page.
    """

    if not ALLOWED_PATTERN.match(text):
        raise InvalidCharactersError(text)

    pages: Set[int] = set()
    tokens = [token.strip() for token in text.split(",")]
    for token in tokens:
        if not token:
            continue
        if "-" in token:
            pages.update(_parse_range(token, max_page))
            continue
        number = _leading_int(token)
        if number is None:
            logger.debug("Skipping non-numeric page token %r", token)
            continue
        if number > max_page:
            raise PageOutOfBoundsError(number, max_page)
        pages.add(number)

    # Page 0 passes the syntax check but never names a printed page.
    pages.discard(0)
    return frozenset(pages)


__all__ = [
    "InvalidCharactersError",
    "InvalidRangeError",
    "PageOutOfBoundsError",
    "PageRangeError",
    "parse_color_pages",
]
