"""Runtime configuration model for KartStats.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import os
from pathlib import Path

from core.constants import DEFAULT_COVERAGE_TOLERANCE, DEFAULT_DATA_DIR, DEFAULT_SOURCE_DIR
from core.errors import KartStatsConfigError


@dataclass(frozen=True)
class KartStatsConfig:
    """Validated runtime configuration.

    Attributes:
        source_dir: Directory holding the Statpedia CSV exports.
        data_dir: Directory receiving the persisted collection documents.
        lookups_path: Optional YAML file overriding built-in lookup tables.
        coverage_tolerance: Allowed deviation of a surface-coverage sum from 100.
    """

    source_dir: Path
    data_dir: Path
    lookups_path: Path | None
    coverage_tolerance: float

    @classmethod
    def from_env(cls) -> "KartStatsConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            KartStatsConfigError: If environment values are invalid.
        """
        source_dir_value = os.getenv("KARTSTATS_SOURCE_DIR", str(DEFAULT_SOURCE_DIR))
        data_dir_value = os.getenv("KARTSTATS_DATA_DIR", str(DEFAULT_DATA_DIR))
        lookups_value = os.getenv("KARTSTATS_LOOKUPS_PATH")
        tolerance_value = os.getenv(
            "KARTSTATS_COVERAGE_TOLERANCE", str(DEFAULT_COVERAGE_TOLERANCE)
        )
        return cls(
            source_dir=_resolve_path(source_dir_value),
            data_dir=_resolve_path(data_dir_value),
            lookups_path=_resolve_path(lookups_value) if lookups_value else None,
            coverage_tolerance=_parse_coverage_tolerance(tolerance_value),
        )


def _resolve_path(raw_value: str) -> Path:
    return Path(raw_value).expanduser().resolve()


def _parse_coverage_tolerance(raw_value: str) -> float:
    """Parse the surface-coverage tolerance environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed non-negative tolerance in percentage points.

    Raises:
        KartStatsConfigError: If value is not a finite non-negative number.
    """
    try:
        tolerance = float(raw_value)
    except ValueError as error:
        raise KartStatsConfigError(
            "Invalid KARTSTATS_COVERAGE_TOLERANCE value: "
            f"expected number, got '{raw_value}'. "
            "Set KARTSTATS_COVERAGE_TOLERANCE to a numeric value such as 5."
        ) from error
    if not math.isfinite(tolerance) or tolerance < 0:
        raise KartStatsConfigError(
            "Invalid KARTSTATS_COVERAGE_TOLERANCE value: "
            f"expected a finite non-negative number, got '{raw_value}'."
        )
    return tolerance
