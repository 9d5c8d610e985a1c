"""Display-name normalization for Statpedia source names."""

from __future__ import annotations

from typing import Mapping


def normalize_display_name(name: str, display_names: Mapping[str, str]) -> str:
    """Map a source name to its standardized display form.

    Args:
        name: Trimmed source name.
        display_names: Exact source name to display name table.

    Returns:
        Display name, or the input unchanged when not in the table.
    """
    return display_names.get(name, name)
