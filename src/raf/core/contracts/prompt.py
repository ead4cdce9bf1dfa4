"""Contracts for interactive prompting."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class Prompter(Protocol):
    def text(self, message: str) -> str:
        """Ask for one non-empty line; raise ``PromptInterruptedError`` on cancel."""
        ...

    def select(self, message: str, options: Sequence[tuple[str, Any]]) -> Any | None:
        """Offer ``(label, value)`` options; return the chosen value or ``None`` on cancel."""
        ...
