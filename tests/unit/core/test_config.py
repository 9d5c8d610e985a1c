"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import KartStatsConfig
from core.errors import KartStatsConfigError


def test_from_env_reads_directories(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve source and data directories from environment."""
    monkeypatch.setenv("KARTSTATS_SOURCE_DIR", "./.tmp-statpedia")
    monkeypatch.setenv("KARTSTATS_DATA_DIR", "./.tmp-data")

    config = KartStatsConfig.from_env()

    assert config.source_dir.name == ".tmp-statpedia"
    assert config.data_dir.name == ".tmp-data"
    assert config.source_dir.is_absolute()


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should fall back to the documented defaults."""
    for name in (
        "KARTSTATS_SOURCE_DIR",
        "KARTSTATS_DATA_DIR",
        "KARTSTATS_LOOKUPS_PATH",
        "KARTSTATS_COVERAGE_TOLERANCE",
    ):
        monkeypatch.delenv(name, raising=False)

    config = KartStatsConfig.from_env()

    assert config.source_dir.name == "statpedia"
    assert config.data_dir.name == "data"
    assert config.lookups_path is None
    assert config.coverage_tolerance == 5.0


def test_from_env_reads_lookups_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """A lookups path should be resolved when set."""
    monkeypatch.setenv("KARTSTATS_LOOKUPS_PATH", "lookups.yaml")

    config = KartStatsConfig.from_env()

    assert config.lookups_path is not None
    assert config.lookups_path.name == "lookups.yaml"


@pytest.mark.parametrize("raw_value", ["not-a-number", "-1", "nan", "inf"])
def test_from_env_raises_for_invalid_tolerance(
    monkeypatch: pytest.MonkeyPatch,
    raw_value: str,
) -> None:
    """Config should fail for non-numeric, negative, or non-finite tolerance."""
    monkeypatch.setenv("KARTSTATS_COVERAGE_TOLERANCE", raw_value)

    with pytest.raises(KartStatsConfigError):
        KartStatsConfig.from_env()
