"""Directory creation for draft entries."""

from __future__ import annotations

import logging
from pathlib import Path

from raf.core.contracts.exceptions import DraftError

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> Path:
    """Create ``path`` and any missing ancestors; an existing directory is fine."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DraftError(f"failed creating directory {path}: {exc.strerror or exc}", path=path) from exc
    logger.debug("Ensured directory %s", path)
    return path
