"""Section-scoped track parser for the surface-coverage sheet.

Tracks live between a start marker row and a stop marker row on a sheet
that also carries headers, averages, and explanatory notes. This module
scans that region and builds one track record per data row.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import (
    ADJUSTED_ROAD_COLUMN,
    ADJUSTED_ROUGH_COLUMN,
    ADJUSTED_WATER_COLUMN,
    COVERAGE_NEUTRAL_COLUMN,
    COVERAGE_OFF_ROAD_COLUMN,
    COVERAGE_ROAD_COLUMN,
    COVERAGE_ROUGH_COLUMN,
    COVERAGE_WATER_COLUMN,
    DEFAULT_COVERAGE_TOLERANCE,
    TRACK_HEADER_TOKENS,
    TRACK_INFO_GLYPH,
    TRACK_NAME_COLUMN,
    TRACK_SECTION_START_MARKER,
    TRACK_SECTION_STOP_MARKER,
    TRACK_SKIP_PATTERNS,
    UNKNOWN_CUP,
)
from core.errors import KartStatsIngestError
from core.logging_config import get_logger
from core.lookup_tables import LookupTables
from core.types import RawRow, SurfaceCoverage, TerrainCoverage, TrackRecord
from ingest.input_reader import cell_at, row_snippet, stripped_cell
from transforms.coverage import normalize_terrain, parse_percent
from transforms.display_names import normalize_display_name
from transforms.slugs import to_id

_LOGGER = get_logger(__name__)


def parse_tracks(
    rows: Iterable[RawRow],
    lookups: LookupTables,
    coverage_tolerance: float = DEFAULT_COVERAGE_TOLERANCE,
) -> list[TrackRecord]:
    """Parse track rows between the section start and stop markers.

    Args:
        rows: Raw surface-coverage table rows.
        lookups: Lookup tables supplying cups and display names.
        coverage_tolerance: Allowed deviation of a surface sum from 100.

    Returns:
        Track records in table order.

    Raises:
        KartStatsIngestError: If the start marker is missing or a
            percentage cell is unparseable.
    """
    tracks: list[TrackRecord] = []
    in_section = False
    section_found = False
    for row_index, row in enumerate(rows):
        name_cell = stripped_cell(row, TRACK_NAME_COLUMN)
        if name_cell == TRACK_SECTION_START_MARKER:
            in_section = True
            section_found = True
            continue
        if name_cell == TRACK_SECTION_STOP_MARKER:
            break
        if not in_section or is_skippable_track_name(name_cell):
            continue
        tracks.append(_build_track(row, row_index, name_cell, lookups, coverage_tolerance))
    if not section_found:
        raise KartStatsIngestError(
            f"Track section start marker '{TRACK_SECTION_START_MARKER}' not found in "
            "surface coverage table. Check the sheet layout and retry ingest."
        )
    _LOGGER.info("tracks_parsed", record_count=len(tracks))
    return tracks


def is_skippable_track_name(name: str) -> bool:
    """Return whether an in-section name cell is a header, note, or summary row."""
    if not name:
        return True
    lowered = name.lower()
    if lowered in TRACK_HEADER_TOKENS:
        return True
    if name.startswith(TRACK_INFO_GLYPH):
        return True
    return any(pattern in lowered for pattern in TRACK_SKIP_PATTERNS)


def parse_surface_coverage(row: RawRow, row_index: int) -> SurfaceCoverage:
    """Read the five raw surface-coverage columns of a track row."""
    return SurfaceCoverage(
        road=_percent_at(row, COVERAGE_ROAD_COLUMN, row_index),
        rough=_percent_at(row, COVERAGE_ROUGH_COLUMN, row_index),
        water=_percent_at(row, COVERAGE_WATER_COLUMN, row_index),
        neutral=_percent_at(row, COVERAGE_NEUTRAL_COLUMN, row_index),
        off_road=_percent_at(row, COVERAGE_OFF_ROAD_COLUMN, row_index),
    )


def parse_terrain_coverage(row: RawRow, row_index: int) -> TerrainCoverage:
    """Read the adjusted road/rough/water columns and renormalize them."""
    return normalize_terrain(
        _percent_at(row, ADJUSTED_ROAD_COLUMN, row_index),
        _percent_at(row, ADJUSTED_ROUGH_COLUMN, row_index),
        _percent_at(row, ADJUSTED_WATER_COLUMN, row_index),
    )


def _build_track(
    row: RawRow,
    row_index: int,
    source_name: str,
    lookups: LookupTables,
    coverage_tolerance: float,
) -> TrackRecord:
    name = normalize_display_name(source_name, lookups.display_names)
    surface_coverage = parse_surface_coverage(row, row_index)
    if abs(surface_coverage.total - 100) > coverage_tolerance:
        _LOGGER.warning(
            "surface_coverage_out_of_tolerance",
            track=name,
            row_index=row_index,
            total=round(surface_coverage.total, 2),
            tolerance=coverage_tolerance,
        )
    return TrackRecord(
        id=to_id(name),
        name=name,
        cup=_lookup_cup(name, row_index, lookups),
        surface_coverage=surface_coverage,
        terrain_coverage=parse_terrain_coverage(row, row_index),
    )


def _lookup_cup(name: str, row_index: int, lookups: LookupTables) -> str:
    cup = lookups.cups.get(name)
    if cup is not None:
        return cup
    _LOGGER.warning("track_cup_unknown", track=name, row_index=row_index, cup=UNKNOWN_CUP)
    return UNKNOWN_CUP


def _percent_at(row: RawRow, column: int, row_index: int) -> float:
    cell = cell_at(row, column)
    try:
        return parse_percent(cell)
    except ValueError as error:
        raise KartStatsIngestError(
            f"Unparseable percentage in surface coverage table at row index {row_index}, "
            f"column index {column}: {cell!r}. Row: {row_snippet(row)!r}. "
            "Fix the source sheet and retry ingest."
        ) from error
