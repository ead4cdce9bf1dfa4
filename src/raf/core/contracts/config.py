"""Configuration contract models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class PathConfig(BaseModel):
    """The ``[path]`` table of ``config.toml``.

    Attributes:
        root: Drafts root; every draft entry lives below it.
        template: Templates root, grouped by kind. ``None`` disables templates.
    """

    root: Path
    template: Path | None = None

    model_config = {"frozen": True}


class RafConfig(BaseModel):
    """Top-level configuration, loaded once per invocation."""

    path: PathConfig

    model_config = {"frozen": True}

    @property
    def root(self) -> Path:
        return self.path.root

    @property
    def template_root(self) -> Path | None:
        return self.path.template
