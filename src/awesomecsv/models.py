"""Domain models used across the application."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict

__all__ = ["ENTRY_FIELDNAMES", "UNAVAILABLE_RATING", "Entry", "RatingLookup"]

#: Placeholder written in the ``rating`` column when enrichment failed.
UNAVAILABLE_RATING = "N/A"

#: CSV header, in column order.
ENTRY_FIELDNAMES: Tuple[str, ...] = ("sourceURL", "title", "description", "rating")


class RatingLookup(BaseModel):
    """Outcome of reading the rating from a linked page."""

    model_config = ConfigDict(frozen=True)

    url: str
    value: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def found(cls, url: str, value: str) -> "RatingLookup":
        return cls(url=url, value=value)

    @classmethod
    def unavailable(cls, url: str, error: str) -> "RatingLookup":
        return cls(url=url, error=error)

    @property
    def available(self) -> bool:
        return bool(self.value)

    def as_text(self) -> str:
        """Return the rating text, or :data:`UNAVAILABLE_RATING`."""

        return self.value if self.available else UNAVAILABLE_RATING


class Entry(BaseModel):
    """One discovered link together with its rating."""

    model_config = ConfigDict(frozen=True)

    source_url: str
    title: str = ""
    description: str = ""
    rating: str = UNAVAILABLE_RATING

    @classmethod
    def from_anchor(
        cls, source_url: str, title: str, description: str, lookup: RatingLookup
    ) -> "Entry":
        return cls(
            source_url=source_url,
            title=title,
            description=description,
            rating=lookup.as_text(),
        )

    def as_row(self) -> Dict[str, str]:
        """Return the entry keyed by :data:`ENTRY_FIELDNAMES`."""

        return dict(
            zip(ENTRY_FIELDNAMES, (self.source_url, self.title, self.description, self.rating))
        )
