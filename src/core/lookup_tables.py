"""Static lookup tables consumed by the Statpedia parsers.

This module owns the track-to-cup table and the display-name table.
Parsers receive them as one explicit value instead of reading globals,
and a YAML file can replace either table without code changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, cast

from core.config import KartStatsConfig
from core.errors import KartStatsConfigError, KartStatsDependencyError

_DEFAULT_CUPS = {
    "Mario Bros. Circuit": "Mushroom Cup",
    "Crown City": "Mushroom Cup",
    "Whistlestop Summit": "Mushroom Cup",
    "DK Spaceport": "Mushroom Cup",
    "Desert Hills": "Flower Cup",
    "Shy Guy Bazaar": "Flower Cup",
    "Wario Stadium": "Flower Cup",
    "Airship Fortress": "Flower Cup",
    "DK Pass": "Star Cup",
    "Starview Peak": "Star Cup",
    "Sky-High Sundae": "Star Cup",
    "Wario Shipyard": "Star Cup",
    "Koopa Troopa Beach": "Special Cup",
    "Faraway Oasis": "Special Cup",
    "Peach Stadium": "Special Cup",
    "Peach Beach": "Special Cup",
    "Salty Salty Speedway": "Shell Cup",
    "Dino Dino Jungle": "Shell Cup",
    "Great ? Block Ruins": "Shell Cup",
    "Cheep Cheep Falls": "Shell Cup",
    "Dandelion Depths": "Banana Cup",
    "Boo Cinema": "Banana Cup",
    "Dry Bones Burnout": "Banana Cup",
    "Moo Moo Meadows": "Banana Cup",
    "Choco Mountain": "Leaf Cup",
    "Toad's Factory": "Leaf Cup",
    "Bowser's Castle": "Leaf Cup",
    "Acorn Heights": "Leaf Cup",
    "Mario Circuit": "Lightning Cup",
    "Rainbow Road": "Special Cup",
}

# Source spelling to standardized spelling.
_DEFAULT_DISPLAY_NAMES = {
    "Swooper": "Swoop",
    "Fishbone": "Fish Bone",
}

_SUPPORTED_KEYS = {"version", "cups", "display_names"}


@dataclass(frozen=True)
class LookupTables:
    """Lookup configuration passed into the track and row-pairing parsers.

    Attributes:
        cups: Exact track name to cup display name.
        display_names: Exact source name to standardized display name.
    """

    cups: Mapping[str, str] = field(default_factory=dict)
    display_names: Mapping[str, str] = field(default_factory=dict)


def default_lookup_tables() -> LookupTables:
    """Return the built-in lookup tables as read-only mappings."""
    return LookupTables(
        cups=MappingProxyType(dict(_DEFAULT_CUPS)),
        display_names=MappingProxyType(dict(_DEFAULT_DISPLAY_NAMES)),
    )


def resolve_lookup_tables(config: KartStatsConfig) -> LookupTables:
    """Return tables from the configured YAML file, else the built-ins.

    Args:
        config: Runtime configuration.

    Returns:
        Lookup tables for one ingest run.
    """
    if config.lookups_path is None:
        return default_lookup_tables()
    return load_lookup_tables(config.lookups_path)


def load_lookup_tables(lookups_path: Path) -> LookupTables:
    """Load and validate a YAML lookup file.

    Tables omitted from the file fall back to the built-in defaults.

    Args:
        lookups_path: Path to the YAML file.

    Returns:
        Validated lookup tables.

    Raises:
        KartStatsDependencyError: If PyYAML is unavailable.
        KartStatsConfigError: If file is missing, unreadable, or malformed.
    """
    payload = _load_yaml_payload(lookups_path)
    root_mapping = _expect_string_mapping(payload, "lookup file root", allow_any_values=True)
    unknown_keys = sorted(set(root_mapping) - _SUPPORTED_KEYS)
    if unknown_keys:
        raise KartStatsConfigError(
            f"Unsupported keys in lookup file {lookups_path}: {', '.join(unknown_keys)}. "
            f"Supported keys: {', '.join(sorted(_SUPPORTED_KEYS))}."
        )
    version = root_mapping.get("version")
    if version != 1:
        raise KartStatsConfigError(
            f"Unsupported lookup file version {version!r} in {lookups_path}. Use version: 1."
        )
    defaults = default_lookup_tables()
    cups = _optional_table(root_mapping, "cups", defaults.cups)
    display_names = _optional_table(root_mapping, "display_names", defaults.display_names)
    return LookupTables(
        cups=MappingProxyType(dict(cups)),
        display_names=MappingProxyType(dict(display_names)),
    )


def _load_yaml_payload(lookups_path: Path) -> object:
    try:
        import yaml
    except ImportError as error:  # pragma: no cover - dependency failure
        raise KartStatsDependencyError(
            "Custom lookup files require PyYAML. Install with 'pip install pyyaml'."
        ) from error
    lookup_file = lookups_path.expanduser().resolve()
    if not lookup_file.exists():
        raise KartStatsConfigError(
            f"Lookup file does not exist at {lookup_file}. "
            "Fix KARTSTATS_LOOKUPS_PATH or remove it to use built-in tables."
        )
    try:
        payload = cast(object, yaml.safe_load(lookup_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise KartStatsConfigError(
            f"Failed to read lookup file at {lookup_file}: {error}. Check file permissions."
        ) from error
    except yaml.YAMLError as error:
        raise KartStatsConfigError(
            f"Failed to parse YAML lookup file at {lookup_file}: {error}. Fix YAML syntax."
        ) from error
    if payload is None:
        raise KartStatsConfigError(f"Lookup file at {lookup_file} is empty. Define 'version'.")
    return payload


def _optional_table(
    root_mapping: Mapping[str, object],
    key: str,
    default: Mapping[str, str],
) -> Mapping[str, str]:
    if key not in root_mapping:
        return default
    return cast(Mapping[str, str], _expect_string_mapping(root_mapping[key], f"'{key}' table"))


def _expect_string_mapping(
    value: object,
    context: str,
    allow_any_values: bool = False,
) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise KartStatsConfigError(
            f"Invalid {context}: expected mapping, got {type(value).__name__}."
        )
    normalized: dict[str, object] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise KartStatsConfigError(
                f"Invalid {context}: expected string keys, got {type(key).__name__}."
            )
        if not allow_any_values and not isinstance(item, str):
            raise KartStatsConfigError(
                f"Invalid {context}: value for '{key}' must be a string, "
                f"got {type(item).__name__}."
            )
        normalized[key] = item
    return normalized
