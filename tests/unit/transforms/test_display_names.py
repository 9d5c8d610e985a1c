"""Unit tests for display-name normalization."""

from __future__ import annotations

from core.lookup_tables import default_lookup_tables
from transforms.display_names import normalize_display_name


def test_normalize_display_name_applies_known_correction() -> None:
    """Known source spellings should map to the standardized name."""
    lookups = default_lookup_tables()

    assert normalize_display_name("Swooper", lookups.display_names) == "Swoop"


def test_normalize_display_name_passes_unknown_names_through() -> None:
    """Names without a correction should be returned unchanged."""
    assert normalize_display_name("Toad", {"Swooper": "Swoop"}) == "Toad"
