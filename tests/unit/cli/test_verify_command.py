"""Unit tests for verify CLI command wiring."""

from __future__ import annotations

import json

from cli.main import main
from tests.fixture_paths import fixture_path


def _ingest(data_dir) -> None:
    exit_code = main(
        [
            "--source-dir",
            str(fixture_path("statpedia")),
            "--data-dir",
            str(data_dir),
            "ingest",
            "--data-version",
            "2026-10-17",
        ]
    )
    assert exit_code == 0


def test_cli_verify_returns_zero_when_all_checks_pass(tmp_path, capsys) -> None:
    """Verify command should exit zero for a freshly ingested dataset."""
    data_dir = tmp_path / "data"
    _ingest(data_dir)
    _ = capsys.readouterr()

    exit_code = main(["--data-dir", str(data_dir), "verify"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "data_version=2026-10-17" in output
    assert "[PASSED] characters count=8" in output


def test_cli_verify_returns_one_when_any_check_fails(tmp_path, capsys) -> None:
    """Verify command should exit one and list violations."""
    data_dir = tmp_path / "data"
    _ingest(data_dir)
    payload = json.loads((data_dir / "characters.json").read_text(encoding="utf-8"))
    payload["characters"][0]["id"] = "Mario"
    (data_dir / "characters.json").write_text(json.dumps(payload), encoding="utf-8")
    _ = capsys.readouterr()

    exit_code = main(["--data-dir", str(data_dir), "verify"])
    output = capsys.readouterr().out

    assert exit_code == 1
    assert "[FAILED] characters" in output
    assert "violations=1" in output


def test_cli_verify_checks_explicit_expected_version(tmp_path, capsys) -> None:
    """An explicit expected version should be compared against every collection."""
    data_dir = tmp_path / "data"
    _ingest(data_dir)
    _ = capsys.readouterr()

    exit_code = main(["--data-dir", str(data_dir), "verify", "--expected-version", "2030-01-01"])
    output = capsys.readouterr().out

    assert exit_code == 1 and "violations=3" in output


def test_cli_verify_handles_empty_data_dir(tmp_path, capsys) -> None:
    """Verify on a directory without documents should fail cleanly."""
    exit_code = main(["--data-dir", str(tmp_path), "verify"])
    output = capsys.readouterr().out

    assert exit_code == 1 and "violations=4" in output
