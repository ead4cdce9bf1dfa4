"""Draft entry operations."""

from raf.core.drafts.copier import copy_template
from raf.core.drafts.create import create_draft
from raf.core.drafts.listing import list_entries
from raf.core.drafts.materialize import ensure_dir
from raf.core.drafts.paths import build_path
from raf.core.drafts.templates import list_templates, resolve_template

__all__ = [
    "build_path",
    "copy_template",
    "create_draft",
    "ensure_dir",
    "list_entries",
    "list_templates",
    "resolve_template",
]
