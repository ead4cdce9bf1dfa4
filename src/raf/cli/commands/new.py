"""New command handler."""

from __future__ import annotations

import argparse
from datetime import date

from raf.core.contracts.config import RafConfig
from raf.core.contracts.prompt import Prompter


def _today() -> date:
    return date.today()


def run_new(args: argparse.Namespace, *, config: RafConfig, prompter: Prompter) -> None:
    """Create a draft entry, prompting for any missing kind or slug, and print its path."""
    import raf.cli as cli

    kind = args.kind if args.kind is not None else prompter.text("Project kind")
    slug = args.slug if args.slug is not None else prompter.text("Project slug")

    new_dir = cli.create_draft(
        config,
        kind,
        slug,
        template=args.template,
        prompter=prompter,
        today=_today(),
    )
    print(new_dir)


__all__ = ["run_new"]
