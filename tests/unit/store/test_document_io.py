"""Unit tests for JSON document helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import KartStatsStoreError
from store.document_io import read_json_document, render_json_document, write_text_atomically


def test_render_json_document_keeps_unicode_and_trailing_newline() -> None:
    """Rendered text should be stable, indented, and newline-terminated."""
    text = render_json_document({"name": "Pokéy"})

    assert text == '{\n  "name": "Pokéy"\n}\n'


def test_read_json_document_round_trips_written_text(tmp_path: Path) -> None:
    """Atomically written documents should read back unchanged."""
    document_path = tmp_path / "tracks.json"

    write_text_atomically(document_path, render_json_document({"dataVersion": "2026-10-17"}))

    assert read_json_document(document_path) == {"dataVersion": "2026-10-17"}


def test_read_json_document_raises_for_missing_file(tmp_path: Path) -> None:
    """Missing documents should surface a store error naming ingest."""
    with pytest.raises(KartStatsStoreError, match="Run ingest"):
        read_json_document(tmp_path / "characters.json")


def test_read_json_document_raises_for_invalid_json(tmp_path: Path) -> None:
    """Corrupt documents should report the parse position."""
    document_path = tmp_path / "vehicles.json"
    document_path.write_text('{"vehicles": [', encoding="utf-8")

    with pytest.raises(KartStatsStoreError, match="line 1"):
        read_json_document(document_path)


def test_write_text_atomically_raises_for_missing_directory(tmp_path: Path) -> None:
    """Writes into a missing directory should fail without leftovers."""
    document_path = tmp_path / "missing" / "tracks.json"

    with pytest.raises(KartStatsStoreError):
        write_text_atomically(document_path, "{}\n")

    assert not document_path.parent.exists()
