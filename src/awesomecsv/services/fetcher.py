"""HTTP fetching and HTML parsing for primary and linked pages."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import requests
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from awesomecsv.errors import HTTPStatusError, MalformedDocumentError, PageConnectionError

__all__ = [
    "DEFAULT_HEADERS",
    "build_session",
    "fetch_document",
    "open_page",
    "parse_document",
]

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/129.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


def build_session() -> requests.Session:
    """Return a :class:`requests.Session` carrying :data:`DEFAULT_HEADERS`."""

    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    return session


@contextmanager
def open_page(
    url: str, session: requests.Session, *, timeout: float | None = None
) -> Iterator[requests.Response]:
    """Issue ``GET url`` and yield the response once it answered ``200 OK``.

    The response is closed when the block exits, and before raising
    :class:`HTTPStatusError` for any other status.
    """

    logger.info("Fetching URL: %s", url)
    try:
        response = session.get(url, timeout=timeout, stream=True)
    except requests.RequestException as exc:
        raise PageConnectionError(url) from exc

    if response.status_code != 200:
        response.close()
        raise HTTPStatusError(url, response.status_code, response.reason or "")

    try:
        yield response
    finally:
        response.close()


def parse_document(content: bytes | str) -> BeautifulSoup:
    """Parse ``content`` into a tree that supports CSS selectors."""

    try:
        return BeautifulSoup(content, "lxml")
    except (ParserRejectedMarkup, TypeError, ValueError) as exc:
        raise MalformedDocumentError(f"Failed to parse the HTML document: {exc}") from exc


def fetch_document(
    url: str, session: requests.Session, *, timeout: float | None = None
) -> BeautifulSoup:
    """Fetch ``url`` and return the parsed document."""

    with open_page(url, session, timeout=timeout) as response:
        try:
            content = response.content
        except requests.RequestException as exc:
            raise PageConnectionError(url) from exc
        return parse_document(content)
