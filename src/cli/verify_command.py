"""Verify command wiring for the KartStats CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import KartStatsConfig
from core.errors import KartStatsValidationError
from core.verification import load_validated_tables, render_gate_report


def add_verify_command(subparsers: Any) -> None:
    """Register verify subcommand."""
    parser = subparsers.add_parser(
        "verify",
        help="Run the startup validation gate against the persisted dataset",
    )
    parser.add_argument(
        "--expected-version",
        help="Expected dataVersion; defaults to the persisted version constant",
    )


def run_verify_command(config: KartStatsConfig, args: argparse.Namespace) -> int:
    """Run the validation gate and print its report."""
    try:
        tables = load_validated_tables(config.data_dir, args.expected_version)
    except KartStatsValidationError as error:
        print(render_gate_report(error.report))
        return 1
    print(f"data_dir={config.data_dir}")
    print(f"data_version={tables.data_version}")
    for collection, count in tables.counts().items():
        print(f"[PASSED] {collection} count={count}")
    return 0
