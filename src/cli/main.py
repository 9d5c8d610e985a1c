"""KartStats CLI entry points.
This module exposes the ingest and verify commands.
It maps argparse commands onto pipeline and gate calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from cli.verify_command import add_verify_command, run_verify_command
from core.config import KartStatsConfig
from core.errors import KartStatsError
from core.types import IngestOptions
from ingest.pipeline import ingest_dataset


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="kartstats",
        description="Statpedia ingestion and dataset validation",
    )
    parser.add_argument("--source-dir", help="Override KARTSTATS_SOURCE_DIR for this command")
    parser.add_argument("--data-dir", help="Override KARTSTATS_DATA_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_ingest_command(subparsers)
    add_verify_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the KartStats CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args)
        if args.command == "ingest":
            return _run_ingest_command(config, args)
        if args.command == "verify":
            return run_verify_command(config, args)
    except KartStatsError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(args: argparse.Namespace) -> KartStatsConfig:
    """Build config with optional directory overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Runtime configuration.
    """
    config = KartStatsConfig.from_env()
    if args.source_dir:
        config = replace(config, source_dir=_resolve(args.source_dir))
    if args.data_dir:
        config = replace(config, data_dir=_resolve(args.data_dir))
    lookups_path = getattr(args, "lookups", None)
    if lookups_path:
        config = replace(config, lookups_path=_resolve(lookups_path))
    return config


def _run_ingest_command(config: KartStatsConfig, args: argparse.Namespace) -> int:
    """Handle ingest command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    dataset = ingest_dataset(IngestOptions(data_version=args.data_version), config)
    print(dataset.data_version)
    return 0


def _add_ingest_command(subparsers: Any) -> None:
    """Register ingest subcommand."""
    parser = subparsers.add_parser(
        "ingest",
        help="Parse the Statpedia CSV exports and write a fresh dataset",
    )
    parser.add_argument("--data-version", help="Explicit YYYY-MM-DD version stamp")
    parser.add_argument("--lookups", help="YAML file overriding cup and display-name tables")


def _resolve(raw_path: str) -> Path:
    return Path(raw_path).expanduser().resolve()
