"""Startup validation gate orchestration and report formatting.

The gate loads all persisted collections, runs every check against every
collection in one pass, and only then decides. A failing gate raises with
the complete violation list; a passing gate returns read-only tables.
"""

from __future__ import annotations

from pathlib import Path
from typing import cast

from core.constants import (
    CHARACTERS_COLLECTION,
    COLLECTION_NAMES,
    TRACKS_COLLECTION,
    VEHICLES_COLLECTION,
)
from core.errors import KartStatsValidationError
from core.logging_config import get_logger
from core.schemas import CharactersDocument, CollectionDocument, TracksDocument, VehiclesDocument
from core.verification_checks import (
    check_data_version,
    check_document_schema,
    check_slugs,
    check_unique_ids,
    load_collection_payload,
    load_expected_version,
)
from core.verification_types import GateReport, GateViolation
from store.stat_tables import StatTables

__all__ = [
    "GateReport",
    "GateViolation",
    "load_validated_tables",
    "render_gate_report",
    "run_validation_gate",
]

_LOGGER = get_logger(__name__)


def load_validated_tables(data_dir: Path, expected_version: str | None = None) -> StatTables:
    """Validate persisted collections and expose them as read-only tables.

    Args:
        data_dir: Directory holding the persisted documents.
        expected_version: Expected ``dataVersion``; read from the standalone
            version constant file when omitted.

    Returns:
        Validated tables for lookup code.

    Raises:
        KartStatsValidationError: If any collection violates any invariant.
    """
    report, documents = run_validation_gate(data_dir, expected_version)
    if not report.passed:
        _LOGGER.error(
            "validation_gate_failed",
            data_dir=report.data_dir,
            violation_count=report.failed_count,
        )
        raise KartStatsValidationError(
            f"Dataset validation failed with {report.failed_count} violation(s):\n"
            + render_gate_report(report),
            report,
        )
    tables = StatTables(
        characters=cast(CharactersDocument, documents[CHARACTERS_COLLECTION]),
        vehicles=cast(VehiclesDocument, documents[VEHICLES_COLLECTION]),
        tracks=cast(TracksDocument, documents[TRACKS_COLLECTION]),
    )
    _LOGGER.info(
        "validation_gate_passed",
        data_dir=report.data_dir,
        data_version=tables.data_version,
        **tables.counts(),
    )
    return tables


def run_validation_gate(
    data_dir: Path,
    expected_version: str | None = None,
) -> tuple[GateReport, dict[str, CollectionDocument]]:
    """Run every check on every collection and collect all violations.

    Args:
        data_dir: Directory holding the persisted documents.
        expected_version: Optional explicit expected version.

    Returns:
        The report and the typed documents that passed schema validation.
    """
    violations: list[GateViolation] = []
    if expected_version is None:
        expected_version, version_violations = load_expected_version(data_dir)
        violations.extend(version_violations)
    documents: dict[str, CollectionDocument] = {}
    for collection in COLLECTION_NAMES:
        payload, load_violations = load_collection_payload(collection, data_dir)
        violations.extend(load_violations)
        if payload is None:
            continue
        document, schema_violations = check_document_schema(collection, payload)
        violations.extend(schema_violations)
        violations.extend(check_data_version(collection, payload, expected_version))
        violations.extend(check_slugs(collection, payload))
        violations.extend(check_unique_ids(collection, payload))
        if document is not None:
            documents[collection] = document
    report = GateReport(
        data_dir=str(data_dir),
        expected_version=expected_version,
        collections=COLLECTION_NAMES,
        violations=tuple(violations),
    )
    return report, documents


def render_gate_report(report: GateReport) -> str:
    """Render report into stable multi-line text for CLI output."""
    lines = [
        f"data_dir={report.data_dir}",
        f"expected_version={report.expected_version or '-'}",
    ]
    for collection in report.collections:
        status = "FAILED" if report.violations_for(collection) else "PASSED"
        lines.append(f"[{status}] {collection}")
    for row in report.violations:
        lines.append(f"  {row.collection} {row.check} :: {row.message}")
    lines.append(f"violations={report.failed_count}")
    return "\n".join(lines)

