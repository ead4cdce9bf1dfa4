"""Public API surface for raf."""

__version__ = "0.1.0"

from raf.core.config import default_config_path, load_config
from raf.core.contracts.config import PathConfig, RafConfig
from raf.core.contracts.exceptions import ConfigError, DraftError, PromptInterruptedError, RafError
from raf.core.contracts.prompt import Prompter
from raf.core.drafts import (
    build_path,
    copy_template,
    create_draft,
    ensure_dir,
    list_entries,
    list_templates,
    resolve_template,
)

__all__ = [
    "ConfigError",
    "DraftError",
    "PathConfig",
    "Prompter",
    "PromptInterruptedError",
    "RafConfig",
    "RafError",
    "__version__",
    "build_path",
    "copy_template",
    "create_draft",
    "default_config_path",
    "ensure_dir",
    "list_entries",
    "list_templates",
    "load_config",
    "resolve_template",
]
