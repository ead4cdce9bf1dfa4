"""Shared test fixtures for raf tests."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from raf import PathConfig, RafConfig


@pytest.fixture
def drafts_root(tmp_path: Path) -> Path:
    return tmp_path / "drafts"


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Templates root seeded with one ``essay/outline`` template."""
    root = tmp_path / "templates"
    outline = root / "essay" / "outline"
    (outline / "notes").mkdir(parents=True)
    (outline / "README.md").write_text("# Outline\n", encoding="utf-8")
    (outline / "notes" / "ideas.txt").write_text("- first\n", encoding="utf-8")
    return root


@pytest.fixture
def sample_day() -> date:
    return date(2023, 3, 5)


@pytest.fixture
def sample_config(drafts_root: Path) -> RafConfig:
    """Config without a templates root."""
    return RafConfig(path=PathConfig(root=drafts_root))


@pytest.fixture
def templated_config(drafts_root: Path, template_root: Path) -> RafConfig:
    return RafConfig(path=PathConfig(root=drafts_root, template=template_root))


@pytest.fixture
def config_file(tmp_path: Path, drafts_root: Path, template_root: Path) -> Path:
    """Write a config.toml pointing at the drafts and templates fixtures."""
    path = tmp_path / "config.toml"
    path.write_text(
        f'[path]\nroot = "{drafts_root.as_posix()}"\ntemplate = "{template_root.as_posix()}"\n',
        encoding="utf-8",
    )
    return path
