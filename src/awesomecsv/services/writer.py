"""CSV serialization of extracted entries."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Sequence

from awesomecsv.errors import EmptyResultError, WriteError
from awesomecsv.models import ENTRY_FIELDNAMES, Entry

__all__ = ["write_entries"]

logger = logging.getLogger(__name__)


def write_entries(path: Path | str, entries: Sequence[Entry]) -> Path:
    """Write ``entries`` to ``path`` as UTF-8 CSV with a header row.

    Raises :class:`EmptyResultError` without touching the filesystem when
    ``entries`` is empty. A failure halfway through leaves the partially
    written file in place.
    """

    path = Path(path)
    if not entries:
        raise EmptyResultError(f"No entries to write to {path}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="", encoding="utf-8") as fp:
            writer = csv.DictWriter(fp, fieldnames=ENTRY_FIELDNAMES)
            writer.writeheader()
            for entry in entries:
                writer.writerow(entry.as_row())
    except OSError as exc:
        raise WriteError(path, f"Failed to write the output CSV file ({exc})") from exc

    logger.debug("Wrote %d rows to %s", len(entries), path)
    return path
