"""Dataset assembly and persistence.

This module stamps one generation-time version onto the three
collections and writes them as independent JSON documents, together
with the standalone version constant the startup gate compares against.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from core.constants import (
    CHARACTERS_COLLECTION,
    CHARACTERS_FILE_NAME,
    DATA_VERSION_FILE_NAME,
    DATA_VERSION_FORMAT,
    TRACKS_COLLECTION,
    TRACKS_FILE_NAME,
    VEHICLES_COLLECTION,
    VEHICLES_FILE_NAME,
)
from core.errors import KartStatsConfigError, KartStatsStoreError
from core.logging_config import get_logger
from core.types import CharacterRecord, Dataset, TrackRecord, VehicleRecord
from store.document_io import render_json_document, write_text_atomically
from store.record_payload import character_to_payload, track_to_payload, vehicle_to_payload

_LOGGER = get_logger(__name__)


def build_data_version(now: datetime | None = None) -> str:
    """Build the generation-time version stamp.

    Args:
        now: Optional clock override; current UTC time when omitted.

    Returns:
        Calendar date string, ``YYYY-MM-DD``.
    """
    moment = now or datetime.now(timezone.utc)
    return moment.strftime(DATA_VERSION_FORMAT)


def validate_data_version(data_version: str) -> str:
    """Check an explicit version stamp is a calendar date.

    Raises:
        KartStatsConfigError: If the value is not ``YYYY-MM-DD``.
    """
    try:
        datetime.strptime(data_version, DATA_VERSION_FORMAT)
    except ValueError as error:
        raise KartStatsConfigError(
            f"Invalid data version '{data_version}': expected a YYYY-MM-DD date."
        ) from error
    return data_version


def assemble_dataset(
    data_version: str,
    characters: Sequence[CharacterRecord],
    vehicles: Sequence[VehicleRecord],
    tracks: Sequence[TrackRecord],
) -> Dataset:
    """Freeze parsed collections under one shared version stamp."""
    return Dataset(
        data_version=data_version,
        characters=tuple(characters),
        vehicles=tuple(vehicles),
        tracks=tuple(tracks),
    )


def render_dataset_documents(dataset: Dataset) -> dict[str, str]:
    """Render every persisted document of a dataset.

    Args:
        dataset: Assembled dataset.

    Returns:
        File name to JSON text, including the version constant file.
    """
    version = dataset.data_version
    return {
        CHARACTERS_FILE_NAME: render_json_document(
            {
                "dataVersion": version,
                CHARACTERS_COLLECTION: [character_to_payload(row) for row in dataset.characters],
            }
        ),
        VEHICLES_FILE_NAME: render_json_document(
            {
                "dataVersion": version,
                VEHICLES_COLLECTION: [vehicle_to_payload(row) for row in dataset.vehicles],
            }
        ),
        TRACKS_FILE_NAME: render_json_document(
            {
                "dataVersion": version,
                TRACKS_COLLECTION: [track_to_payload(row) for row in dataset.tracks],
            }
        ),
        DATA_VERSION_FILE_NAME: render_json_document({"dataVersion": version}),
    }


def write_dataset(dataset: Dataset, data_dir: Path) -> list[Path]:
    """Persist a dataset as a complete replacement of the data directory files.

    All documents are rendered before the first write.

    Args:
        dataset: Assembled dataset.
        data_dir: Output directory.

    Returns:
        Written document paths.

    Raises:
        KartStatsStoreError: If the directory or any file cannot be written.
    """
    documents = render_dataset_documents(dataset)
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise KartStatsStoreError(
            f"Failed to create data directory {data_dir}: {error}."
        ) from error
    written: list[Path] = []
    for file_name, text in documents.items():
        document_path = data_dir / file_name
        write_text_atomically(document_path, text)
        written.append(document_path)
    _LOGGER.info(
        "dataset_written",
        data_dir=str(data_dir),
        data_version=dataset.data_version,
        characters=len(dataset.characters),
        vehicles=len(dataset.vehicles),
        tracks=len(dataset.tracks),
    )
    return written
