"""Unit tests for percentage parsing and terrain renormalization."""

from __future__ import annotations

import pytest

from transforms.coverage import normalize_terrain, parse_percent, round_half_away


@pytest.mark.parametrize(
    ("cell", "expected"),
    [
        ("47%", 47.0),
        ("47,5%", 47.5),
        (" 12.25 % ", 12.25),
        ("0", 0.0),
        ("", 0.0),
        ("   ", 0.0),
        (None, 0.0),
    ],
)
def test_parse_percent_reads_supported_formats(cell: str | None, expected: float) -> None:
    """Parser should accept suffixes, decimal commas, and blank cells."""
    assert parse_percent(cell) == expected


@pytest.mark.parametrize("cell", ["n/a", "12%%", "inf", "nan%"])
def test_parse_percent_rejects_garbage(cell: str) -> None:
    """Parser should raise for non-numeric or non-finite text."""
    with pytest.raises(ValueError):
        parse_percent(cell)


def test_normalize_terrain_rescales_to_one_hundred() -> None:
    """Road/rough/water should be rescaled so they sum to 100."""
    terrain = normalize_terrain(40.0, 20.0, 30.0)

    assert (terrain.road, terrain.rough, terrain.water) == (44.44, 22.22, 33.33)
    assert abs(terrain.road + terrain.rough + terrain.water - 100) <= 0.05


def test_normalize_terrain_keeps_exact_split() -> None:
    """A split already summing to 100 should come back unchanged."""
    terrain = normalize_terrain(50.0, 30.0, 20.0)

    assert (terrain.road, terrain.rough, terrain.water) == (50.0, 30.0, 20.0)


def test_normalize_terrain_returns_zeros_for_zero_total() -> None:
    """Zero input total should yield all zeros instead of dividing by zero."""
    terrain = normalize_terrain(0.0, 0.0, 0.0)

    assert (terrain.road, terrain.rough, terrain.water) == (0.0, 0.0, 0.0)


def test_round_half_away_rounds_halves_up() -> None:
    """Two-place rounding should send exact halves away from zero."""
    assert round_half_away(0.125) == 0.13
    assert round_half_away(2.675) == 2.68
