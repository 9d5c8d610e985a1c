"""Stat-row/name-row pairing parser for characters and vehicles.

The character and vehicle sheets carry no schema markers. A row holding
a numeric speed value is a stat row, and the row right after it lists up
to four names sharing those stats. This module makes that convention an
explicit two-state scanner and builds typed records from each pairing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re
from typing import Callable, Iterable

from core.constants import (
    ACCELERATION_COLUMN,
    COIN_CURVE_COLUMN,
    HANDLING_ROAD_COLUMN,
    HANDLING_ROUGH_COLUMN,
    HANDLING_WATER_COLUMN,
    MINI_TURBO_COLUMN,
    NAME_COLUMNS,
    SPEED_ROAD_COLUMN,
    SPEED_ROUGH_COLUMN,
    SPEED_WATER_COLUMN,
    UNTAGGED_VEHICLE_TAG,
    VEHICLE_CLASS_COLUMN,
    VEHICLE_HEADER_TOKEN,
    VEHICLE_TAG_COLUMN,
    WEIGHT_COLUMN,
)
from core.errors import KartStatsIngestError
from core.logging_config import get_logger
from core.lookup_tables import LookupTables
from core.types import (
    CharacterRecord,
    RawRow,
    StatBlock,
    TerrainStats,
    VehicleCategory,
    VehicleRecord,
)
from ingest.input_reader import cell_at, row_snippet, stripped_cell
from transforms.display_names import normalize_display_name
from transforms.slugs import to_id

_LOGGER = get_logger(__name__)

_LEADING_INT_RE = re.compile(r"\s*[+-]?\d")

_STAT_COLUMNS = (
    ("speed.road", SPEED_ROAD_COLUMN),
    ("speed.rough", SPEED_ROUGH_COLUMN),
    ("speed.water", SPEED_WATER_COLUMN),
    ("acceleration", ACCELERATION_COLUMN),
    ("miniTurbo", MINI_TURBO_COLUMN),
    ("weight", WEIGHT_COLUMN),
    ("coinCurve", COIN_CURVE_COLUMN),
    ("handling.road", HANDLING_ROAD_COLUMN),
    ("handling.rough", HANDLING_ROUGH_COLUMN),
    ("handling.water", HANDLING_WATER_COLUMN),
)


class ScanState(Enum):
    """Scanner position within the two-row protocol."""

    SEEKING_STAT_ROW = "seeking_stat_row"
    SEEKING_NAME_ROW = "seeking_name_row"


@dataclass(frozen=True)
class StatGroup:
    """One stat row paired with the names listed under it.

    Attributes:
        row_index: Zero-based index of the stat row.
        stat_row: The stat row itself, for per-table extras like class and tag.
        stats: Stat block shared by every name.
        names: Trimmed non-empty names from the following row.
    """

    row_index: int
    stat_row: RawRow
    stats: StatBlock
    names: tuple[str, ...]


@dataclass(frozen=True)
class _PendingStatRow:
    row_index: int
    row: RawRow
    stats: StatBlock


class RowPairingScanner:
    """Explicit two-state scanner over stat-row/name-row pairs."""

    def __init__(
        self,
        table_name: str,
        skip_row: Callable[[RawRow], bool] | None = None,
    ) -> None:
        """Create a scanner for one source table.

        Args:
            table_name: Table label used in errors and log events.
            skip_row: Optional predicate for rows to ignore entirely.
        """
        self._table_name = table_name
        self._skip_row = skip_row or (lambda row: False)

    def scan(self, rows: Iterable[RawRow]) -> list[StatGroup]:
        """Pair every stat row with the name row right after it.

        A stat row whose following row holds no names emits nothing and is
        logged. If that following row is itself a stat row it starts a new
        pairing.

        Args:
            rows: Raw rows in table order.

        Returns:
            Stat groups in table order.

        Raises:
            KartStatsIngestError: If a stat row holds an unparseable stat cell.
        """
        groups: list[StatGroup] = []
        state = ScanState.SEEKING_STAT_ROW
        pending: _PendingStatRow | None = None
        for row_index, row in enumerate(rows):
            if self._skip_row(row):
                continue
            if state is ScanState.SEEKING_NAME_ROW and pending is not None:
                names = read_names(row)
                state = ScanState.SEEKING_STAT_ROW
                if names:
                    groups.append(
                        StatGroup(
                            row_index=pending.row_index,
                            stat_row=pending.row,
                            stats=pending.stats,
                            names=names,
                        )
                    )
                    pending = None
                    continue
                self._warn_without_names(pending)
                pending = None
            if is_stat_row(row):
                pending = _PendingStatRow(
                    row_index=row_index,
                    row=row,
                    stats=read_stat_block(row, row_index, self._table_name),
                )
                state = ScanState.SEEKING_NAME_ROW
        if pending is not None:
            self._warn_without_names(pending)
        return groups

    def _warn_without_names(self, pending: _PendingStatRow) -> None:
        _LOGGER.warning(
            "stat_row_without_names",
            table=self._table_name,
            row_index=pending.row_index,
            row=row_snippet(pending.row),
        )


def is_stat_row(row: RawRow) -> bool:
    """Return whether the speed-road cell starts with an integer.

    Cells like ``"12*"`` still mark a stat row so that
    :func:`read_stat_block` rejects them with a located error.
    """
    cell = cell_at(row, SPEED_ROAD_COLUMN)
    return cell is not None and _LEADING_INT_RE.match(cell) is not None


def read_stat_block(row: RawRow, row_index: int, table_name: str) -> StatBlock:
    """Read the ten stat fields of a stat row.

    Args:
        row: Stat row.
        row_index: Zero-based row index for error context.
        table_name: Table label for error context.

    Returns:
        Parsed stat block.

    Raises:
        KartStatsIngestError: If any stat cell is not an integer.
    """
    values: dict[str, int] = {}
    for field_name, column in _STAT_COLUMNS:
        cell = cell_at(row, column)
        value = _parse_int(cell)
        if value is None:
            raise KartStatsIngestError(
                f"Unparseable {field_name} stat in {table_name} table at "
                f"row index {row_index}, column index {column}: {cell!r}. "
                f"Row: {row_snippet(row)!r}. Fix the source sheet and retry ingest."
            )
        values[field_name] = value
    return StatBlock(
        speed=TerrainStats(
            road=values["speed.road"],
            rough=values["speed.rough"],
            water=values["speed.water"],
        ),
        handling=TerrainStats(
            road=values["handling.road"],
            rough=values["handling.rough"],
            water=values["handling.water"],
        ),
        acceleration=values["acceleration"],
        mini_turbo=values["miniTurbo"],
        weight=values["weight"],
        coin_curve=values["coinCurve"],
    )


def read_names(row: RawRow) -> tuple[str, ...]:
    """Return trimmed non-empty cells from the fixed name columns."""
    names = (stripped_cell(row, column) for column in NAME_COLUMNS)
    return tuple(name for name in names if name)


def parse_characters(rows: Iterable[RawRow], lookups: LookupTables) -> list[CharacterRecord]:
    """Parse the characters table into records.

    Args:
        rows: Raw character table rows.
        lookups: Lookup tables supplying display-name corrections.

    Returns:
        One record per listed name, in table order.

    Raises:
        KartStatsIngestError: If a stat cell is unparseable.
    """
    groups = RowPairingScanner("characters").scan(rows)
    characters: list[CharacterRecord] = []
    for group in groups:
        for source_name in group.names:
            name = normalize_display_name(source_name, lookups.display_names)
            characters.append(CharacterRecord(id=to_id(name), name=name, stats=group.stats))
    _LOGGER.info("characters_parsed", stat_rows=len(groups), record_count=len(characters))
    return characters


def parse_vehicles(rows: Iterable[RawRow], lookups: LookupTables) -> list[VehicleRecord]:
    """Parse the vehicles table into records.

    Args:
        rows: Raw vehicle table rows.
        lookups: Lookup tables supplying display-name corrections.

    Returns:
        One record per listed name, in table order.

    Raises:
        KartStatsIngestError: If a stat cell is unparseable.
    """
    groups = RowPairingScanner("vehicles", skip_row=is_vehicle_header_row).scan(rows)
    vehicles: list[VehicleRecord] = []
    for group in groups:
        class_label = stripped_cell(group.stat_row, VEHICLE_CLASS_COLUMN)
        tag = _resolve_vehicle_tag(group, class_label)
        category = classify_vehicle(class_label, group.names[0])
        for source_name in group.names:
            name = normalize_display_name(source_name, lookups.display_names)
            vehicles.append(
                VehicleRecord(
                    id=to_id(name),
                    name=name,
                    tag=tag,
                    category=category,
                    stats=group.stats,
                )
            )
    _LOGGER.info("vehicles_parsed", stat_rows=len(groups), record_count=len(vehicles))
    return vehicles


def is_vehicle_header_row(row: RawRow) -> bool:
    """Return whether a vehicles row is the repeated column header."""
    return stripped_cell(row, VEHICLE_CLASS_COLUMN).lower() == VEHICLE_HEADER_TOKEN


def classify_vehicle(class_label: str, first_name: str) -> VehicleCategory:
    """Infer the vehicle category from its class label, then its first name.

    Args:
        class_label: Class-label cell of the stat row.
        first_name: First name listed for the stat row.

    Returns:
        ``bike``, ``atv``, or the default ``kart``.
    """
    label = class_label.lower()
    if "bike" in label:
        return "bike"
    if "atv" in label:
        return "atv"
    name = first_name.lower()
    if "bike" in name or "chopper" in name:
        return "bike"
    if "atv" in name:
        return "atv"
    return "kart"


def _resolve_vehicle_tag(group: StatGroup, class_label: str) -> str:
    raw_tag = stripped_cell(group.stat_row, VEHICLE_TAG_COLUMN).lower()
    if raw_tag:
        return to_id(raw_tag)
    fallback = to_id(class_label) or UNTAGGED_VEHICLE_TAG
    _LOGGER.warning(
        "vehicle_tag_missing",
        row_index=group.row_index,
        class_label=class_label,
        fallback_tag=fallback,
    )
    return fallback


def _parse_int(cell: str | None) -> int | None:
    if cell is None:
        return None
    try:
        return int(cell.strip())
    except ValueError:
        return None
