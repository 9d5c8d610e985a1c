"""Typed models for the startup validation gate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

GateCheck = Literal["load", "schema", "data_version", "slug", "unique_id"]


@dataclass(frozen=True)
class GateViolation:
    """One invariant violation found in a persisted collection."""

    collection: str
    check: GateCheck
    message: str


@dataclass(frozen=True)
class GateReport:
    """Every violation found in one gate pass over all collections."""

    data_dir: str
    expected_version: str | None
    collections: tuple[str, ...]
    violations: tuple[GateViolation, ...]

    @property
    def passed(self) -> bool:
        """Return whether no violation was found."""
        return not self.violations

    @property
    def failed_count(self) -> int:
        """Count violations in this report."""
        return len(self.violations)

    def violations_for(self, collection: str) -> tuple[GateViolation, ...]:
        """Return violations recorded against one collection."""
        return tuple(row for row in self.violations if row.collection == collection)
