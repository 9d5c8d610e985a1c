"""Check implementations for the startup validation gate.

Every check returns the violations it found instead of raising, so one
gate pass can report the complete set of problems across collections.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from core.constants import (
    CHARACTERS_COLLECTION,
    CHARACTERS_FILE_NAME,
    DATA_VERSION_FILE_NAME,
    TRACKS_COLLECTION,
    TRACKS_FILE_NAME,
    VEHICLES_COLLECTION,
    VEHICLES_FILE_NAME,
)
from core.errors import KartStatsStoreError
from core.schemas import DOCUMENT_MODELS, CollectionDocument, DataVersionDocument
from core.verification_types import GateViolation
from store.document_io import read_json_document
from transforms.slugs import is_slug

COLLECTION_FILE_NAMES = {
    CHARACTERS_COLLECTION: CHARACTERS_FILE_NAME,
    VEHICLES_COLLECTION: VEHICLES_FILE_NAME,
    TRACKS_COLLECTION: TRACKS_FILE_NAME,
}
VERSION_CONSTANT_LABEL = "data_version"


def load_expected_version(data_dir: Path) -> tuple[str | None, list[GateViolation]]:
    """Read the standalone version constant written at ingest time."""
    try:
        payload = read_json_document(data_dir / DATA_VERSION_FILE_NAME)
    except KartStatsStoreError as error:
        return None, [GateViolation(VERSION_CONSTANT_LABEL, "load", str(error))]
    try:
        document = DataVersionDocument.model_validate(payload)
    except ValidationError as error:
        return None, _schema_violations(VERSION_CONSTANT_LABEL, error)
    return document.data_version, []


def load_collection_payload(
    collection: str,
    data_dir: Path,
) -> tuple[object | None, list[GateViolation]]:
    """Read one collection document from the data directory."""
    try:
        return read_json_document(data_dir / COLLECTION_FILE_NAMES[collection]), []
    except KartStatsStoreError as error:
        return None, [GateViolation(collection, "load", str(error))]


def check_document_schema(
    collection: str,
    payload: object,
) -> tuple[CollectionDocument | None, list[GateViolation]]:
    """Validate structure and ranges of a collection document.

    Returns:
        The typed document when valid, and one violation per schema error.
    """
    model = DOCUMENT_MODELS[collection]
    try:
        return model.model_validate(payload), []
    except ValidationError as error:
        return None, _schema_violations(collection, error)


def check_data_version(
    collection: str,
    payload: object,
    expected_version: str | None,
) -> list[GateViolation]:
    """Compare a collection's ``dataVersion`` against the expected constant."""
    if expected_version is None or not isinstance(payload, Mapping):
        return []
    found = payload.get("dataVersion")
    if found == expected_version:
        return []
    return [
        GateViolation(
            collection,
            "data_version",
            f"Data version mismatch for {collection}: "
            f"found={found!r} expected={expected_version!r}.",
        )
    ]


def check_slugs(collection: str, payload: object) -> list[GateViolation]:
    """Check every id, and every vehicle tag, against the slug pattern."""
    rows = _collection_rows(collection, payload)
    violations = _slug_violations(collection, "ids", (row.get("id") for row in rows))
    if collection == VEHICLES_COLLECTION:
        violations += _slug_violations(collection, "tags", (row.get("tag") for row in rows))
    return violations


def check_unique_ids(collection: str, payload: object) -> list[GateViolation]:
    """Check that no id repeats within a collection."""
    ids = [row.get("id") for row in _collection_rows(collection, payload)]
    counts = Counter(value for value in ids if isinstance(value, str))
    duplicates = sorted(value for value, count in counts.items() if count > 1)
    if not duplicates:
        return []
    listed = ", ".join(f"{value!r} (x{counts[value]})" for value in duplicates)
    return [GateViolation(collection, "unique_id", f"Duplicate ids in {collection}: {listed}.")]


def format_error_location(location: Iterable[int | str]) -> str:
    """Render a pydantic error location such as ``characters[0].miniTurbo``."""
    rendered = ""
    for part in location:
        if isinstance(part, int):
            rendered += f"[{part}]"
        else:
            rendered += f".{part}" if rendered else str(part)
    return rendered or "<root>"


def _schema_violations(collection: str, error: ValidationError) -> list[GateViolation]:
    return [
        GateViolation(
            collection,
            "schema",
            f"{format_error_location(item['loc'])}: {item['msg']}",
        )
        for item in error.errors(include_url=False)
    ]


def _slug_violations(
    collection: str,
    label: str,
    values: Iterable[object],
) -> list[GateViolation]:
    invalid = [value for value in values if isinstance(value, str) and not is_slug(value)]
    if not invalid:
        return []
    listed = ", ".join(repr(value) for value in invalid)
    return [GateViolation(collection, "slug", f"Invalid {label} in {collection}: {listed}.")]


def _collection_rows(collection: str, payload: object) -> list[Mapping[str, Any]]:
    if not isinstance(payload, Mapping):
        return []
    rows = payload.get(collection)
    if not isinstance(rows, list):
        return []
    return [row for row in rows if isinstance(row, Mapping)]
