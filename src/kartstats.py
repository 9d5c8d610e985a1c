"""Public SDK surface for KartStats.

This module provides a stable import path for ingestion and lookup users.
It re-exports the pipeline entry point, the validation gate, and typed models.
"""

from __future__ import annotations

from core.config import KartStatsConfig
from core.errors import KartStatsError, KartStatsValidationError
from core.lookup_tables import LookupTables, default_lookup_tables, load_lookup_tables
from core.types import (
    CharacterRecord,
    Dataset,
    IngestOptions,
    StatBlock,
    TrackRecord,
    VehicleRecord,
)
from core.verification import load_validated_tables, render_gate_report, run_validation_gate
from ingest.pipeline import ingest_dataset
from store.stat_tables import StatTables
from transforms.coverage import normalize_terrain, parse_percent
from transforms.slugs import to_id

__all__ = [
    "CharacterRecord",
    "Dataset",
    "IngestOptions",
    "KartStatsConfig",
    "KartStatsError",
    "KartStatsValidationError",
    "LookupTables",
    "StatBlock",
    "StatTables",
    "TrackRecord",
    "VehicleRecord",
    "default_lookup_tables",
    "ingest_dataset",
    "load_lookup_tables",
    "load_validated_tables",
    "normalize_terrain",
    "parse_percent",
    "render_gate_report",
    "run_validation_gate",
    "to_id",
]
