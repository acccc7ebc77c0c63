"""Command line entry point for the awesome-csv scraper."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from awesomecsv.config import DEFAULT_CONFIG_PATH, ScraperConfig
from awesomecsv.errors import ScrapeError
from awesomecsv.pipeline import run

__all__ = ["CONFIG_ENV_VAR", "build_parser", "load_config", "main"]

CONFIG_ENV_VAR = "AWESOMECSV_CONFIG"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="awesome-csv",
        description="Scrape a curated link list and write titles, descriptions and ratings to CSV.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"JSON configuration file (default: ${CONFIG_ENV_VAR} or {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("--url", dest="primary_url", help="Page listing the curated links")
    parser.add_argument("--output", dest="output_path", type=Path, help="CSV file to write")
    parser.add_argument(
        "--timeout",
        dest="request_timeout",
        type=float,
        help="Per-request timeout in seconds (default: wait indefinitely)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_config(path: Path | None) -> ScraperConfig:
    """Resolve the configuration file, falling back to built-in defaults.

    An explicitly requested file must exist; the default location is optional.
    """

    if path is None and os.environ.get(CONFIG_ENV_VAR):
        path = Path(os.environ[CONFIG_ENV_VAR])
    if path is not None:
        return ScraperConfig.from_file(path)
    if DEFAULT_CONFIG_PATH.exists():
        return ScraperConfig.from_file(DEFAULT_CONFIG_PATH)
    return ScraperConfig()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scraper and return the process exit status."""

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = load_config(args.config).with_overrides(
            primary_url=args.primary_url,
            output_path=args.output_path,
            request_timeout=args.request_timeout,
        )
    except (FileNotFoundError, ValueError) as exc:
        logging.error("Could not load scraper configuration: %s", exc)
        return 1

    try:
        run(config)
    except ScrapeError as exc:
        logging.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
