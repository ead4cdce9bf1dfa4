"""Template discovery and selection.

Templates live under ``template_root/<kind>/<name>/``; the contents of the
chosen ``<name>`` directory seed a new draft entry.
"""

from __future__ import annotations

import logging
from pathlib import Path

from raf.core.contracts.prompt import Prompter

logger = logging.getLogger(__name__)

NO_TEMPLATE_LABEL = "(no template)"


def list_templates(template_root: Path, kind: str) -> list[Path]:
    """Return the template directories for ``kind``, sorted by name."""
    kind_dir = template_root / kind
    try:
        children = list(kind_dir.iterdir())
    except OSError:
        return []
    return sorted(child for child in children if child.is_dir() and not child.name.startswith("."))


def resolve_template(
    template_root: Path,
    kind: str,
    explicit: str | None,
    *,
    prompter: Prompter,
) -> Path | None:
    """Pick the template to copy for a new ``kind`` entry.

    An explicit template that is blank or does not exist is logged and
    skipped, so the entry is created empty. Without one, the user chooses among the
    discovered templates; no prompt is shown when there are none.
    """
    if explicit is not None:
        candidate = template_root / kind / explicit
        if explicit.strip() and candidate.is_dir():
            return candidate
        logger.warning("Template %r not found at %s; continuing without a template", explicit, candidate)
        return None

    templates = list_templates(template_root, kind)
    if not templates:
        return None

    options: list[tuple[str, Path | None]] = [(NO_TEMPLATE_LABEL, None)]
    options.extend((template.name, template) for template in templates)
    return prompter.select(f"Template for {kind}:", options)
