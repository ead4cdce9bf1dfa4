"""Draft entry path layout: ``root/kind/YYYY/MM/DD/slug``."""

from __future__ import annotations

from datetime import date
from pathlib import Path

DRAFT_LAYOUT = "{kind}/{year:04}/{month:02}/{day:02}/{slug}"


def build_path(root: Path, kind: str, on: date, slug: str) -> Path:
    """Return the draft entry path for ``kind``/``slug`` created ``on`` a date.

    ``kind`` and ``slug`` are used verbatim; callers supply filesystem-safe names.
    """
    return Path(root) / DRAFT_LAYOUT.format(kind=kind, year=on.year, month=on.month, day=on.day, slug=slug)
