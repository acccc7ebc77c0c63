"""Configuration models and helpers for the awesome-csv scraper."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import soupsieve
from pydantic import BaseModel, Field, HttpUrl, ValidationError, field_validator

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_LINK_SELECTOR",
    "DEFAULT_OUTPUT_PATH",
    "DEFAULT_PRIMARY_URL",
    "DEFAULT_RATING_SELECTOR",
    "ScraperConfig",
]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "data" / "scraper.json"

DEFAULT_PRIMARY_URL = "https://github.com/avelino/awesome-go"
DEFAULT_LINK_SELECTOR = '.markdown-body ul li a[href^="https://github.com/"]'
DEFAULT_RATING_SELECTOR = "#repo-stars-counter-star"
DEFAULT_OUTPUT_PATH = Path("libraries.csv")


class ScraperConfig(BaseModel):
    """Everything the pipeline needs to know about the page it scrapes."""

    primary_url: HttpUrl = Field(
        default=DEFAULT_PRIMARY_URL,
        validate_default=True,
        description="Page listing the curated links",
    )
    link_selector: str = Field(
        default=DEFAULT_LINK_SELECTOR,
        min_length=1,
        description=(
            "CSS selector matching the anchors to extract. The href prefix filter "
            "is part of the selector."
        ),
    )
    rating_selector: str = Field(
        default=DEFAULT_RATING_SELECTOR,
        min_length=1,
        description="CSS selector of the element holding the rating on each linked page",
    )
    output_path: Path = Field(
        default=DEFAULT_OUTPUT_PATH, description="Where the CSV file is written"
    )
    request_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. ``None`` waits indefinitely.",
    )

    @field_validator("link_selector", "rating_selector")
    @classmethod
    def _check_selector(cls, value: str) -> str:
        try:
            soupsieve.compile(value)
        except soupsieve.SelectorSyntaxError as exc:
            raise ValueError(f"Invalid CSS selector {value!r}: {exc}") from exc
        return value

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> "ScraperConfig":
        """Load configuration data from a JSON file."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Configuration file not found: {config_path}") from exc
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in configuration file: {config_path}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Configuration file is invalid: {config_path}\n{exc}") from exc

    def dump(self, path: Path | str | None = None) -> None:
        """Persist the configuration back to disk as JSON."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")

    def with_overrides(self, **overrides: Any) -> "ScraperConfig":
        """Return a validated copy with every non-``None`` override applied."""

        data = self.model_dump(mode="json")
        data.update({key: value for key, value in overrides.items() if value is not None})
        return type(self).model_validate(data)
