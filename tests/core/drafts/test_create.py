import logging
from datetime import date
from pathlib import Path

import pytest

from raf import RafConfig, create_draft
from tests.fakes.prompter import ScriptedPrompter


def test_create_draft_without_template_root_makes_empty_dir(
    sample_config: RafConfig, drafts_root: Path, sample_day: date
) -> None:
    prompter = ScriptedPrompter()

    path = create_draft(sample_config, "essay", "my-idea", template=None, prompter=prompter, today=sample_day)

    assert path == drafts_root / "essay" / "2023" / "03" / "05" / "my-idea"
    assert path.is_dir()
    assert list(path.iterdir()) == []
    assert prompter.select_calls == []


def test_create_draft_with_selected_template_copies_it(
    templated_config: RafConfig, sample_day: date
) -> None:
    prompter = ScriptedPrompter(selection="outline")

    path = create_draft(templated_config, "essay", "my-idea", template=None, prompter=prompter, today=sample_day)

    assert (path / "README.md").exists()


def test_create_draft_with_missing_explicit_template_still_creates_dir(
    templated_config: RafConfig, sample_day: date, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        path = create_draft(
            templated_config,
            "essay",
            "my-idea",
            template="missing-one",
            prompter=ScriptedPrompter(),
            today=sample_day,
        )

    assert path.is_dir()
    assert list(path.iterdir()) == []
    assert "missing-one" in caplog.text


def test_create_draft_ignores_template_without_template_root(
    sample_config: RafConfig, sample_day: date, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        path = create_draft(
            sample_config, "essay", "my-idea", template="outline", prompter=ScriptedPrompter(), today=sample_day
        )

    assert path.is_dir()
    assert "No template root configured" in caplog.text
