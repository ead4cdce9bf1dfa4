"""Exception hierarchy for raf."""

from __future__ import annotations

from pathlib import Path


class RafError(Exception):
    """Base exception for all raf errors."""


class ConfigError(RafError):
    """Configuration loading or validation failure."""


class PromptInterruptedError(RafError):
    """A required interactive prompt was cancelled (EOF or interrupt)."""


class DraftError(RafError):
    """Filesystem failure while creating, copying, or listing drafts.

    Attributes:
        path: The path the failing operation was working on.
    """

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path
