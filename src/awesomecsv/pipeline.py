"""End-to-end scrape: primary page, per-link ratings, CSV output."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from awesomecsv.config import ScraperConfig
from awesomecsv.services.extractor import EntryExtractor
from awesomecsv.services.fetcher import build_session, fetch_document
from awesomecsv.services.writer import write_entries

__all__ = ["run"]

logger = logging.getLogger(__name__)


def run(config: ScraperConfig, session: requests.Session | None = None) -> Path:
    """Scrape ``config.primary_url`` and write the CSV to ``config.output_path``.

    Errors fetching the primary page, an empty result and write failures
    propagate as :class:`~awesomecsv.errors.ScrapeError` subclasses.
    """

    if session is None:
        with build_session() as owned_session:
            return run(config, session=owned_session)

    soup = fetch_document(str(config.primary_url), session, timeout=config.request_timeout)

    entries = EntryExtractor(config, session=session).extract(soup)
    path = write_entries(config.output_path, entries)

    logger.info("CSV file has been created successfully.")
    return path
