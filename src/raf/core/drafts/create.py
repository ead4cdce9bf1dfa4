"""Draft creation flow: resolve a template, then copy or create."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from raf.core.contracts.config import RafConfig
from raf.core.contracts.prompt import Prompter
from raf.core.drafts.copier import copy_template
from raf.core.drafts.materialize import ensure_dir
from raf.core.drafts.paths import build_path
from raf.core.drafts.templates import resolve_template

logger = logging.getLogger(__name__)


def create_draft(
    config: RafConfig,
    kind: str,
    slug: str,
    *,
    template: str | None,
    prompter: Prompter,
    today: date,
) -> Path:
    """Create the draft entry for ``kind``/``slug`` dated ``today`` and return its path."""
    template_path: Path | None = None
    if config.template_root is not None:
        template_path = resolve_template(config.template_root, kind, template, prompter=prompter)
    elif template is not None:
        logger.warning("No template root configured; ignoring template %r", template)

    if template_path is not None:
        return copy_template(config.root, kind, template_path, today, slug)
    return ensure_dir(build_path(config.root, kind, today, slug))
