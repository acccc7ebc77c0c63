"""Exception hierarchy for the awesome-csv scraper.

All errors raised by the fetch, parse and write stages derive from
:class:`ScrapeError` so callers can catch broadly or specifically.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "EmptyResultError",
    "HTTPStatusError",
    "MalformedDocumentError",
    "PageConnectionError",
    "ScrapeError",
    "WriteError",
]


class ScrapeError(Exception):
    """Base class for all scraper exceptions."""


class PageConnectionError(ScrapeError):
    """Raised when a connection to the target page cannot be established."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Failed to connect to the target page: {url}")


class HTTPStatusError(ScrapeError):
    """
    Raised when a page answers with anything other than ``200 OK``.

    Attributes
    ----------
    url         : The requested URL.
    status_code : Numeric HTTP status returned by the server.
    reason      : Reason phrase returned by the server (may be empty).
    """

    def __init__(self, url: str, status_code: int, reason: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP Error {status_code}: {reason or 'unknown'} ({url})")


class MalformedDocumentError(ScrapeError):
    """Raised when a response body cannot be parsed as HTML."""


class EmptyResultError(ScrapeError):
    """Raised when there are no entries to write."""


class WriteError(ScrapeError):
    """Raised on filesystem errors while writing the output file."""

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")
