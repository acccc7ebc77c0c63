"""Entry extraction: turns the primary page into rated :class:`Entry` records."""

from __future__ import annotations

import logging
from typing import List

import requests
from bs4 import BeautifulSoup, Tag

from awesomecsv.config import ScraperConfig
from awesomecsv.errors import ScrapeError
from awesomecsv.models import Entry, RatingLookup
from awesomecsv.services.fetcher import build_session, fetch_document

__all__ = ["EntryExtractor"]

logger = logging.getLogger(__name__)


class EntryExtractor:
    """Walks the curated links of a page and rates each one from its own page."""

    def __init__(self, config: ScraperConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self._session = session or build_session()

    fetch_document = staticmethod(fetch_document)

    def extract(self, soup: BeautifulSoup) -> List[Entry]:
        """Return one :class:`Entry` per matching anchor, in document order.

        Rating failures never abort the pass: the affected entry carries
        :data:`~awesomecsv.models.UNAVAILABLE_RATING` instead.
        """

        entries: List[Entry] = []
        unavailable = 0
        for anchor in soup.select(self._config.link_selector):
            href = anchor.get("href")
            if not href:
                continue

            lookup = self.lookup_rating(href)
            if not lookup.available:
                unavailable += 1
            entries.append(
                Entry.from_anchor(
                    source_url=href,
                    title=anchor.get_text().strip(),
                    description=self._parent_text(anchor),
                    lookup=lookup,
                )
            )

        logger.info(
            "Extracted %d entries (%d without rating)", len(entries), unavailable
        )
        return entries

    def lookup_rating(self, url: str) -> RatingLookup:
        """Fetch ``url`` and read the rating element's text."""

        try:
            soup = self.fetch_document(url, self._session, timeout=self._config.request_timeout)
        except ScrapeError as exc:
            logger.warning("Failed to get rating for %s: %s", url, exc)
            return RatingLookup.unavailable(url, str(exc))

        element = soup.select_one(self._config.rating_selector)
        value = element.get_text().strip() if element is not None else ""
        if not value:
            reason = f"no text at {self._config.rating_selector!r}"
            logger.warning("Failed to get rating for %s: %s", url, reason)
            return RatingLookup.unavailable(url, reason)

        return RatingLookup.found(url, value)

    @staticmethod
    def _parent_text(anchor: Tag) -> str:
        parent = anchor.parent
        if parent is None:
            return ""
        return parent.get_text().strip()
