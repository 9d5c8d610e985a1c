"""Ingest orchestration for the Statpedia export.

This module coordinates source loading, parsing, dataset assembly,
and persistence for one full, non-incremental ingest run.
"""

from __future__ import annotations

from core.config import KartStatsConfig
from core.logging_config import get_logger
from core.lookup_tables import LookupTables, resolve_lookup_tables
from core.types import Dataset, IngestOptions
from ingest.input_reader import SourceTables, read_source_tables
from ingest.row_pairing import parse_characters, parse_vehicles
from ingest.track_parser import parse_tracks
from store.dataset_writer import (
    assemble_dataset,
    build_data_version,
    validate_data_version,
    write_dataset,
)

_LOGGER = get_logger(__name__)


class IngestPipelineRunner:
    """Runner for one start-to-finish ingest pass."""

    def __init__(
        self,
        options: IngestOptions,
        config: KartStatsConfig,
        lookups: LookupTables | None = None,
    ) -> None:
        self._options = options
        self._config = config
        self._lookups = lookups or resolve_lookup_tables(config)

    def run(self) -> Dataset:
        """Parse every source table, then persist the assembled dataset."""
        data_version = self._resolve_data_version()
        tables = read_source_tables(self._config.source_dir)
        dataset = self._build_dataset(tables, data_version)
        write_dataset(dataset, self._config.data_dir)
        _log_ingest_completion(self._config, dataset)
        return dataset

    def _resolve_data_version(self) -> str:
        if self._options.data_version:
            return validate_data_version(self._options.data_version)
        return build_data_version()

    def _build_dataset(self, tables: SourceTables, data_version: str) -> Dataset:
        characters = parse_characters(tables.characters, self._lookups)
        vehicles = parse_vehicles(tables.vehicles, self._lookups)
        tracks = parse_tracks(
            tables.tracks,
            self._lookups,
            coverage_tolerance=self._config.coverage_tolerance,
        )
        return assemble_dataset(data_version, characters, vehicles, tracks)


def ingest_dataset(
    options: IngestOptions,
    config: KartStatsConfig,
    lookups: LookupTables | None = None,
) -> Dataset:
    """Run the ingest pipeline and persist a complete replacement dataset.

    Args:
        options: Ingest request options.
        config: Runtime configuration.
        lookups: Optional lookup tables; resolved from config when omitted.

    Returns:
        The assembled, persisted dataset.

    Raises:
        KartStatsIngestError: If a source table is missing or unparseable.
        KartStatsStoreError: If dataset persistence fails.
    """
    runner = IngestPipelineRunner(options, config, lookups)
    return runner.run()


def _log_ingest_completion(config: KartStatsConfig, dataset: Dataset) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "ingest_completed",
        source_dir=str(config.source_dir),
        data_dir=str(config.data_dir),
        data_version=dataset.data_version,
        character_count=len(dataset.characters),
        vehicle_count=len(dataset.vehicles),
        track_count=len(dataset.tracks),
    )
