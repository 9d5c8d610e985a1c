"""Percentage parsing and terrain renormalization.

This module converts raw coverage cells into numbers, tolerating the
decimal-comma convention some spreadsheet locales export, and rescales
the road/rough/water subset of a track's surface mix to 100.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
import math

from core.types import TerrainCoverage

_TWO_PLACES = Decimal("0.01")


def parse_percent(cell: str | None) -> float:
    """Parse a percentage cell such as ``"47%"`` or ``"47,5%"``.

    Args:
        cell: Raw cell text; ``None`` for an absent cell.

    Returns:
        Parsed percentage, ``0.0`` for an absent or blank cell.

    Raises:
        ValueError: If the cell holds non-numeric text.
    """
    if cell is None:
        return 0.0
    text = cell.strip()
    if not text:
        return 0.0
    text = text.removesuffix("%").strip().replace(",", ".")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite percentage '{cell}'")
    return value


def normalize_terrain(road: float, rough: float, water: float) -> TerrainCoverage:
    """Rescale road/rough/water so the three sum to 100.

    Neutral and off-road portions are excluded from the result; a zero
    total means coverage is undefined.

    Args:
        road: Adjusted road percentage.
        rough: Adjusted rough percentage.
        water: Adjusted water percentage.

    Returns:
        Renormalized coverage rounded to two places, or all zeros.
    """
    total = road + rough + water
    if total == 0:
        return TerrainCoverage(road=0.0, rough=0.0, water=0.0)
    scale = 100 / total
    return TerrainCoverage(
        road=round_half_away(road * scale),
        rough=round_half_away(rough * scale),
        water=round_half_away(water * scale),
    )


def round_half_away(value: float) -> float:
    """Round to two decimal places, halves away from zero."""
    return float(Decimal(str(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
