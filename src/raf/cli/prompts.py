"""questionary-backed prompter."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from raf.core.contracts.exceptions import PromptInterruptedError


def _require_value(value: str) -> bool | str:
    if not value.strip():
        return "A value is required"
    return True


class QuestionaryPrompter:
    """Interactive prompts on the controlling terminal."""

    def text(self, message: str) -> str:
        import questionary

        try:
            answer = questionary.text(f"{message}:", validate=_require_value).ask()
        except EOFError as exc:
            raise PromptInterruptedError("interrupted") from exc
        if answer is None:
            raise PromptInterruptedError("interrupted")
        return answer.strip()

    def select(self, message: str, options: Sequence[tuple[str, Any]]) -> Any | None:
        import questionary

        # questionary substitutes the title for a None value, so choices carry indexes.
        choices = [questionary.Choice(label, value=str(index)) for index, (label, _) in enumerate(options)]
        try:
            answer = questionary.select(message, choices=choices).ask()
        except EOFError:
            return None
        if answer is None:
            return None
        return options[int(answer)][1]


__all__ = ["QuestionaryPrompter"]
