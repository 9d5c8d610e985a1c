"""Unit tests for persisted document schemas."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from core.schemas import CharactersDocument, TrackModel, VehicleModel


def _stats_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "speed": {"road": 4, "rough": 3, "water": 3},
        "handling": {"road": 7, "rough": 6, "water": 6},
        "acceleration": 2,
        "miniTurbo": 5,
        "weight": 6,
        "coinCurve": 5,
    }
    payload.update(overrides)
    return payload


def _track_payload(**terrain: float) -> dict[str, Any]:
    return {
        "id": "peach-beach",
        "name": "Peach Beach",
        "cup": "Special Cup",
        "surfaceCoverage": {"road": 40, "rough": 20, "water": 30, "neutral": 5, "offRoad": 5},
        "terrainCoverage": terrain or {"road": 44.44, "rough": 22.22, "water": 33.33},
    }


def test_characters_document_reads_camel_case_payload() -> None:
    """Documents should parse camelCase keys into snake_case fields."""
    document = CharactersDocument.model_validate(
        {
            "dataVersion": "2026-10-17",
            "characters": [{"id": "mario", "name": "Mario", **_stats_payload()}],
        }
    )

    assert document.data_version == "2026-10-17"
    assert document.characters[0].mini_turbo == 5
    assert document.characters[0].speed.road == 4


@pytest.mark.parametrize(
    "overrides",
    [
        {"weight": 21},
        {"weight": -1},
        {"weight": 5.5},
        {"weight": "5"},
        {"weight": True},
        {"speed": {"road": 4, "rough": 3}},
    ],
)
def test_vehicle_model_rejects_invalid_stats(overrides: dict[str, Any]) -> None:
    """Stats must be integers within 0..20 and structurally complete."""
    payload = {"id": "pipe-frame", "name": "Pipe Frame", "tag": "standard"}

    with pytest.raises(ValidationError):
        VehicleModel.model_validate({**payload, **_stats_payload(**overrides)})


def test_vehicle_model_rejects_unknown_fields() -> None:
    """Unknown keys should be rejected rather than ignored."""
    payload = {"id": "pipe-frame", "name": "Pipe Frame", "tag": "standard", "color": "red"}

    with pytest.raises(ValidationError):
        VehicleModel.model_validate({**payload, **_stats_payload()})


def test_vehicle_model_allows_missing_category() -> None:
    """Category is optional for documents written without it."""
    payload = {"id": "pipe-frame", "name": "Pipe Frame", "tag": "standard"}

    vehicle = VehicleModel.model_validate({**payload, **_stats_payload()})

    assert vehicle.category is None


def test_track_model_accepts_rounding_drift_and_zero_terrain() -> None:
    """Terrain sums within tolerance of 100, or exactly 0, are valid."""
    assert TrackModel.model_validate(_track_payload()).terrain_coverage.road == 44.44
    zero = TrackModel.model_validate(_track_payload(road=0, rough=0, water=0))
    assert zero.terrain_coverage.water == 0


def test_track_model_rejects_terrain_not_summing_to_one_hundred() -> None:
    """Terrain coverage far from 100 should fail validation."""
    with pytest.raises(ValidationError, match="sum to 100"):
        TrackModel.model_validate(_track_payload(road=50, rough=30, water=10))


@pytest.mark.parametrize("value", [-0.5, 100.5, "40", None])
def test_track_model_rejects_out_of_range_percentages(value: Any) -> None:
    """Coverage percentages must be numbers within 0..100."""
    payload = _track_payload()
    payload["surfaceCoverage"] = {**payload["surfaceCoverage"], "neutral": value}

    with pytest.raises(ValidationError):
        TrackModel.model_validate(payload)


def test_characters_document_rejects_snake_case_keys() -> None:
    """Persisted rows must use the camelCase keys, not Python field names."""
    stats = _stats_payload()
    stats["mini_turbo"] = stats.pop("miniTurbo")
    stats["coin_curve"] = stats.pop("coinCurve")

    with pytest.raises(ValidationError):
        CharactersDocument.model_validate(
            {
                "dataVersion": "2026-10-17",
                "characters": [{"id": "mario", "name": "Mario", **stats}],
            }
        )
