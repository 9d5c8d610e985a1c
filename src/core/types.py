"""Shared typed models.

This module defines immutable data models used by the ingest parsers,
the dataset assembler, and the CLI to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

RawRow = list[str]
VehicleCategory = Literal["kart", "bike", "atv"]


@dataclass(frozen=True)
class TerrainStats:
    """Per-surface stat triple.

    Attributes:
        road: Value on paved surfaces.
        rough: Value on coarse terrain.
        water: Value on liquid surfaces.
    """

    road: int
    rough: int
    water: int


@dataclass(frozen=True)
class StatBlock:
    """Racing stats shared by every name under one stat row.

    Attributes:
        speed: Speed by surface type.
        handling: Handling by surface type.
        acceleration: Acceleration level.
        mini_turbo: Mini-turbo level.
        weight: Weight level.
        coin_curve: Coin curve level.
    """

    speed: TerrainStats
    handling: TerrainStats
    acceleration: int
    mini_turbo: int
    weight: int
    coin_curve: int


@dataclass(frozen=True)
class CharacterRecord:
    """Playable character with its stat block."""

    id: str
    name: str
    stats: StatBlock


@dataclass(frozen=True)
class VehicleRecord:
    """Vehicle body with its stat group tag and category."""

    id: str
    name: str
    tag: str
    category: VehicleCategory
    stats: StatBlock


@dataclass(frozen=True)
class SurfaceCoverage:
    """Raw surface coverage percentages for one track."""

    road: float
    rough: float
    water: float
    neutral: float
    off_road: float

    @property
    def total(self) -> float:
        """Sum of all five surface percentages."""
        return self.road + self.rough + self.water + self.neutral + self.off_road


@dataclass(frozen=True)
class TerrainCoverage:
    """Road/rough/water coverage renormalized to sum to 100."""

    road: float
    rough: float
    water: float


@dataclass(frozen=True)
class TrackRecord:
    """Race track with cup and coverage breakdowns."""

    id: str
    name: str
    cup: str
    surface_coverage: SurfaceCoverage
    terrain_coverage: TerrainCoverage


@dataclass(frozen=True)
class Dataset:
    """Assembled collections sharing one data version stamp.

    Attributes:
        data_version: Generation date stamp, ``YYYY-MM-DD``.
        characters: Parsed character records.
        vehicles: Parsed vehicle records.
        tracks: Parsed track records.
    """

    data_version: str
    characters: tuple[CharacterRecord, ...]
    vehicles: tuple[VehicleRecord, ...]
    tracks: tuple[TrackRecord, ...]


@dataclass(frozen=True)
class IngestOptions:
    """Ingest command options.

    Attributes:
        data_version: Optional explicit version stamp; today's UTC date if omitted.
    """

    data_version: str | None = None
