"""Public contracts for raf."""

from raf.core.contracts.config import PathConfig, RafConfig
from raf.core.contracts.exceptions import ConfigError, DraftError, PromptInterruptedError, RafError
from raf.core.contracts.prompt import Prompter

__all__ = [
    "ConfigError",
    "DraftError",
    "PathConfig",
    "Prompter",
    "PromptInterruptedError",
    "RafConfig",
    "RafError",
]
