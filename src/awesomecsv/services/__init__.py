"""Service layer entry points for awesome-csv."""

from __future__ import annotations

from .extractor import EntryExtractor  # noqa: F401
from .fetcher import fetch_document, open_page, parse_document  # noqa: F401
from .writer import write_entries  # noqa: F401

__all__ = ["EntryExtractor", "fetch_document", "open_page", "parse_document", "write_entries"]
