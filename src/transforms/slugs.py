"""Deterministic slug generation for record identifiers.

This module turns display names into URL-safe ids.
Ids and vehicle tags are derived here and checked against one pattern.
"""

from __future__ import annotations

import re

from core.constants import SLUG_PATTERN

_SLUG_RE = re.compile(SLUG_PATTERN)
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHEN_RUN_RE = re.compile(r"-+")


def to_id(name: str) -> str:
    """Convert a display name into a slug id.

    ``?`` becomes the word ``question`` so it survives as a token,
    e.g. ``"Great ? Block Ruins"`` -> ``"great-question-block-ruins"``.

    Args:
        name: Display name.

    Returns:
        Lowercase hyphen-delimited slug.
    """
    slug = name.lower().replace("?", " question ")
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = slug.replace(".", "").replace("'", "").replace("_", "-")
    slug = _HYPHEN_RUN_RE.sub("-", slug)
    return slug.strip("-")


def is_slug(value: str) -> bool:
    """Return whether a value matches the slug pattern."""
    return _SLUG_RE.fullmatch(value) is not None
