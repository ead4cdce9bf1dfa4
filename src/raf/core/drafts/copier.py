"""Seed a new draft entry from a template directory."""

from __future__ import annotations

import logging
import shutil
from datetime import date
from pathlib import Path

from raf.core.contracts.exceptions import DraftError
from raf.core.drafts.materialize import ensure_dir
from raf.core.drafts.paths import build_path

logger = logging.getLogger(__name__)


def copy_template(root: Path, kind: str, template_path: Path, on: date, slug: str) -> Path:
    """Copy the contents of ``template_path`` into the new entry and return its path.

    Existing files in the entry are overwritten on name collision; unrelated
    files are left alone. A failure mid-copy leaves a partial entry behind.
    """
    target = build_path(root, kind, on, slug)
    ensure_dir(target.parent)
    try:
        shutil.copytree(template_path, target, dirs_exist_ok=True)
    except OSError as exc:
        raise DraftError(f"failed copying template {template_path} to {target}: {exc}", path=target) from exc
    logger.debug("Copied template %s into %s", template_path, target)
    return target
