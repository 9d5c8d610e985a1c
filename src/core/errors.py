"""KartStats exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.verification_types import GateReport


class KartStatsError(Exception):
    """Base exception for all KartStats failures."""


class KartStatsConfigError(KartStatsError):
    """Raised for invalid runtime configuration or lookup files."""


class KartStatsIngestError(KartStatsError):
    """Raised for source table parsing and ingest failures."""


class KartStatsStoreError(KartStatsError):
    """Raised for dataset persistence failures."""


class KartStatsDependencyError(KartStatsError):
    """Raised when an optional runtime dependency is missing."""


class KartStatsValidationError(KartStatsError):
    """Raised when the startup validation gate rejects a dataset.

    Attributes:
        report: Every violation found during the gate pass.
    """

    def __init__(self, message: str, report: "GateReport") -> None:
        super().__init__(message)
        self.report = report
