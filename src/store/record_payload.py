"""Shared JSON serialization for parsed records.

This module converts typed records into the camelCase payloads
persisted in collection documents and read back by the query layer.
"""

from __future__ import annotations

from core.types import (
    CharacterRecord,
    StatBlock,
    TerrainStats,
    TrackRecord,
    VehicleRecord,
)


def character_to_payload(record: CharacterRecord) -> dict[str, object]:
    """Serialize a character record into a JSON-safe payload."""
    return {"id": record.id, "name": record.name, **stat_block_to_payload(record.stats)}


def vehicle_to_payload(record: VehicleRecord) -> dict[str, object]:
    """Serialize a vehicle record into a JSON-safe payload."""
    return {
        "id": record.id,
        "name": record.name,
        "tag": record.tag,
        "category": record.category,
        **stat_block_to_payload(record.stats),
    }


def track_to_payload(record: TrackRecord) -> dict[str, object]:
    """Serialize a track record into a JSON-safe payload."""
    surface = record.surface_coverage
    terrain = record.terrain_coverage
    return {
        "id": record.id,
        "name": record.name,
        "cup": record.cup,
        "surfaceCoverage": {
            "road": surface.road,
            "rough": surface.rough,
            "water": surface.water,
            "neutral": surface.neutral,
            "offRoad": surface.off_road,
        },
        "terrainCoverage": {
            "road": terrain.road,
            "rough": terrain.rough,
            "water": terrain.water,
        },
    }


def stat_block_to_payload(stats: StatBlock) -> dict[str, object]:
    """Serialize a stat block into its flattened payload fields."""
    return {
        "speed": _terrain_stats_payload(stats.speed),
        "handling": _terrain_stats_payload(stats.handling),
        "acceleration": stats.acceleration,
        "miniTurbo": stats.mini_turbo,
        "weight": stats.weight,
        "coinCurve": stats.coin_curve,
    }


def _terrain_stats_payload(stats: TerrainStats) -> dict[str, int]:
    return {"road": stats.road, "rough": stats.rough, "water": stats.water}
