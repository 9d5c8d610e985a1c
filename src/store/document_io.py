"""JSON I/O helpers for persisted collection documents."""

from __future__ import annotations

import json
import os
from pathlib import Path

from core.errors import KartStatsStoreError


def read_json_document(document_path: Path) -> object:
    """Read one JSON document from disk with traceable errors."""
    try:
        return json.loads(document_path.read_text(encoding="utf-8"))
    except FileNotFoundError as error:
        raise KartStatsStoreError(
            f"Missing dataset document at {document_path}. Run ingest to generate it."
        ) from error
    except json.JSONDecodeError as error:
        raise KartStatsStoreError(
            f"Failed to parse JSON at {document_path}: {error.msg} "
            f"(line {error.lineno}, column {error.colno})."
        ) from error
    except OSError as error:
        raise KartStatsStoreError(
            f"Failed to read dataset document {document_path}: {error}."
        ) from error


def render_json_document(payload: object) -> str:
    """Render a payload as the stable on-disk JSON text."""
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_text_atomically(document_path: Path, text: str) -> None:
    """Replace a file's content through a temp sibling and an atomic rename."""
    temp_path = document_path.with_name(document_path.name + ".tmp")
    try:
        temp_path.write_text(text, encoding="utf-8")
        os.replace(temp_path, document_path)
    except OSError as error:
        temp_path.unlink(missing_ok=True)
        raise KartStatsStoreError(
            f"Failed to write dataset document {document_path}: {error}."
        ) from error
