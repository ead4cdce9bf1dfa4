"""Enumerate existing draft entries."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

# kind/year/month/day/slug
ENTRY_DEPTH = 5


def _walk(directory: Path, depth: int) -> Iterator[Path]:
    try:
        children = sorted(directory.iterdir())
    except OSError:
        return
    for child in children:
        if depth == 1:
            yield child
        elif child.is_dir():
            yield from _walk(child, depth - 1)


def list_entries(root: Path) -> Iterator[Path]:
    """Lazily yield every path exactly five levels below ``root``.

    Equivalent to globbing ``root/*/*/*/*/*`` in sorted order, minus matches
    whose final segment starts with a dot. Unreadable or vanished directories
    are skipped.
    """
    for path in _walk(Path(root), ENTRY_DEPTH):
        if not path.name.startswith("."):
            yield path
