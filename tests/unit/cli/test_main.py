"""Unit tests for CLI command handling."""

from __future__ import annotations

import json

import pytest

from cli.main import build_parser, main
from tests.fixture_paths import fixture_path


def test_cli_ingest_prints_data_version(tmp_path, capsys) -> None:
    """CLI ingest should write the dataset and print its version."""
    data_dir = tmp_path / "data"
    args = [
        "--source-dir",
        str(fixture_path("statpedia")),
        "--data-dir",
        str(data_dir),
        "ingest",
        "--data-version",
        "2026-10-17",
    ]

    exit_code = main(args)
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and output[-1] == "2026-10-17"
    assert (data_dir / "data_version.json").exists()


def test_cli_ingest_applies_lookup_file(tmp_path) -> None:
    """The --lookups flag should replace built-in lookup tables."""
    data_dir = tmp_path / "data"
    args = [
        "--source-dir",
        str(fixture_path("statpedia")),
        "--data-dir",
        str(data_dir),
        "ingest",
        "--lookups",
        str(fixture_path("lookups/custom.yaml")),
    ]

    exit_code = main(args)
    payload = json.loads((data_dir / "tracks.json").read_text(encoding="utf-8"))

    assert exit_code == 0
    assert {row["cup"] for row in payload["tracks"]} == {"Leaf Cup", "Unknown Cup"}


def test_cli_ingest_reports_missing_source_without_traceback(tmp_path, capsys) -> None:
    """Ingest failures should print a friendly error and exit one."""
    args = ["--source-dir", str(tmp_path / "missing"), "--data-dir", str(tmp_path), "ingest"]

    exit_code = main(args)
    output = capsys.readouterr().out

    assert exit_code == 1
    assert "error=Failed to read source table" in output


def test_cli_rejects_invalid_tolerance_env(tmp_path, capsys, monkeypatch) -> None:
    """Invalid environment config should surface as a CLI error."""
    monkeypatch.setenv("KARTSTATS_COVERAGE_TOLERANCE", "lots")

    exit_code = main(["--data-dir", str(tmp_path), "verify"])
    output = capsys.readouterr().out

    assert exit_code == 1 and "KARTSTATS_COVERAGE_TOLERANCE" in output


def test_cli_requires_a_command() -> None:
    """Parser should exit when no subcommand is given."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
