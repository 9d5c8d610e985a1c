"""Source table readers for ingestion.

This module loads the Statpedia CSV exports into ragged raw rows.
Column meaning stays positional; helpers here read cells safely.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path

from core.constants import (
    CHARACTERS_SOURCE_FILE_NAME,
    ROW_SNIPPET_LENGTH,
    TRACKS_SOURCE_FILE_NAME,
    VEHICLES_SOURCE_FILE_NAME,
)
from core.errors import KartStatsIngestError
from core.types import RawRow


@dataclass(frozen=True)
class SourceTables:
    """The three raw source tables of one ingest run."""

    characters: list[RawRow]
    vehicles: list[RawRow]
    tracks: list[RawRow]


def read_source_tables(source_dir: Path) -> SourceTables:
    """Load all three source tables from a directory.

    Args:
        source_dir: Directory holding the CSV exports.

    Returns:
        Raw rows for characters, vehicles, and tracks.

    Raises:
        KartStatsIngestError: If any table is missing or unreadable.
    """
    return SourceTables(
        characters=read_source_rows(source_dir / CHARACTERS_SOURCE_FILE_NAME),
        vehicles=read_source_rows(source_dir / VEHICLES_SOURCE_FILE_NAME),
        tracks=read_source_rows(source_dir / TRACKS_SOURCE_FILE_NAME),
    )


def read_source_rows(csv_path: Path) -> list[RawRow]:
    """Read one CSV export into raw rows.

    Args:
        csv_path: Path to a CSV file.

    Returns:
        Rows in file order; row lengths may differ.

    Raises:
        KartStatsIngestError: If the file is missing, undecodable, or malformed.
    """
    if not csv_path.is_file():
        raise KartStatsIngestError(
            f"Failed to read source table at {csv_path}: file does not exist. "
            "Export the Statpedia sheet to CSV and retry ingest."
        )
    try:
        with csv_path.open(encoding="utf-8-sig", newline="") as handle:
            return [list(row) for row in csv.reader(handle)]
    except UnicodeDecodeError as error:
        raise KartStatsIngestError(
            f"Failed to decode source table at {csv_path}: {error.reason}. "
            "Re-export the sheet as UTF-8 CSV."
        ) from error
    except csv.Error as error:
        raise KartStatsIngestError(
            f"Malformed CSV in source table at {csv_path}: {error}. "
            "Re-export the sheet and retry ingest."
        ) from error


def cell_at(row: RawRow, column: int) -> str | None:
    """Return the cell at a column, or None past the end of a short row."""
    if column < len(row):
        return row[column]
    return None


def stripped_cell(row: RawRow, column: int) -> str:
    """Return the trimmed cell text, empty for an absent cell."""
    cell = cell_at(row, column)
    return cell.strip() if cell else ""


def row_snippet(row: RawRow) -> str:
    """Render a short single-line preview of a row for error messages."""
    text = ",".join(row)
    if len(text) <= ROW_SNIPPET_LENGTH:
        return text
    return text[: ROW_SNIPPET_LENGTH - 3] + "..."
