"""Unit tests for validated read-only stat tables."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import KartStatsConfig
from core.types import IngestOptions
from core.verification import load_validated_tables
from ingest.pipeline import ingest_dataset
from store.stat_tables import StatTables
from tests.fixture_paths import fixture_path


@pytest.fixture
def tables(tmp_path: Path) -> StatTables:
    config = replace(
        KartStatsConfig.from_env(),
        source_dir=fixture_path("statpedia"),
        data_dir=tmp_path / "data",
        lookups_path=None,
    )
    ingest_dataset(IngestOptions(data_version="2026-10-17"), config)
    return load_validated_tables(config.data_dir)


def test_character_lookup_by_id(tables: StatTables) -> None:
    """Characters should be reachable by slug id."""
    mario = tables.character("mario")

    assert mario is not None and mario.name == "Mario"
    assert tables.character("bowser") is None


def test_group_members_share_stats(tables: StatTables) -> None:
    """Characters paired with one stat row should have identical stats."""
    mario = tables.character("mario")
    daisy = tables.character("daisy")

    assert mario is not None and daisy is not None
    assert mario.model_dump(exclude={"id", "name"}) == daisy.model_dump(exclude={"id", "name"})


def test_vehicles_by_tag_keeps_table_order(tables: StatTables) -> None:
    """Tag lookup should return every vehicle in that stat group."""
    assert [row.id for row in tables.vehicles_by_tag("sport-bike")] == ["sport-bike", "jet-bike"]
    assert tables.vehicle("standard-atv") is not None


def test_tracks_by_cup_uses_cup_slug(tables: StatTables) -> None:
    """Cup lookup should compare slugged cup names."""
    assert [row.id for row in tables.tracks_by_cup("mushroom-cup")] == ["mario-bros-circuit"]
    track = tables.track("great-question-block-ruins")
    assert track is not None and track.cup == "Shell Cup"


def test_rows_are_immutable(tables: StatTables) -> None:
    """Validated rows should reject mutation."""
    mario = tables.character("mario")
    assert mario is not None

    with pytest.raises(ValidationError):
        mario.weight = 1  # type: ignore[misc]
