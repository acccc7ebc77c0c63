from __future__ import annotations

import csv
from pathlib import Path

import pytest

from awesomecsv.errors import EmptyResultError, WriteError
from awesomecsv.models import ENTRY_FIELDNAMES, Entry
from awesomecsv.services.writer import write_entries

ENTRIES = [
    Entry(
        source_url="https://github.com/acme/one",
        title="one",
        description='He said, "hi"',
        rating="1.2k",
    ),
    Entry(
        source_url="https://github.com/acme/two",
        title="two",
        description="two\nspans lines",
        rating="N/A",
    ),
    Entry(source_url="https://github.com/acme/three", title="three", description="", rating="7"),
]


def _read_rows(path: Path) -> list[list[str]]:
    with path.open(newline="", encoding="utf-8") as fp:
        return list(csv.reader(fp))


def test_write_entries_round_trips(tmp_path: Path) -> None:
    path = write_entries(tmp_path / "libraries.csv", ENTRIES)

    rows = _read_rows(path)

    assert len(rows) == len(ENTRIES) + 1
    assert rows[0] == ["sourceURL", "title", "description", "rating"]
    assert rows[1:] == [
        [entry.source_url, entry.title, entry.description, entry.rating] for entry in ENTRIES
    ]


def test_write_entries_quotes_delimiters_and_quotes(tmp_path: Path) -> None:
    path = write_entries(tmp_path / "libraries.csv", ENTRIES[:1])

    text = path.read_text(encoding="utf-8")

    assert text.splitlines()[0] == ",".join(ENTRY_FIELDNAMES)
    assert '"He said, ""hi"""' in text
    assert _read_rows(path)[1][2] == 'He said, "hi"'


def test_write_entries_rejects_empty_input_without_creating_file(tmp_path: Path) -> None:
    path = tmp_path / "out" / "libraries.csv"

    with pytest.raises(EmptyResultError):
        write_entries(path, [])

    assert not path.exists()
    assert not path.parent.exists()


def test_write_entries_truncates_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "libraries.csv"
    path.write_text("stale,data\n" * 50, encoding="utf-8")

    write_entries(path, ENTRIES[2:])

    assert _read_rows(path) == [list(ENTRY_FIELDNAMES), [ENTRIES[2].source_url, "three", "", "7"]]


def test_write_entries_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "libraries.csv"

    assert write_entries(str(path), ENTRIES) == path
    assert path.exists()


def test_write_entries_wraps_os_errors(tmp_path: Path) -> None:
    with pytest.raises(WriteError) as excinfo:
        write_entries(tmp_path, ENTRIES)

    assert excinfo.value.path == tmp_path
    assert isinstance(excinfo.value.__cause__, OSError)
