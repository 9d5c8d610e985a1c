"""Fixture locations shared by unit and integration tests."""

from __future__ import annotations

from pathlib import Path

FIXTURES_ROOT = Path(__file__).resolve().parent / "fixtures"


def fixture_path(relative_path: str) -> Path:
    """Resolve a path under tests/fixtures, e.g. ``statpedia/vehicles.csv``."""
    return FIXTURES_ROOT / relative_path
