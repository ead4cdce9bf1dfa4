"""Ls command handler."""

from __future__ import annotations

import argparse

from raf.core.contracts.config import RafConfig


def run_ls(args: argparse.Namespace, *, config: RafConfig) -> None:
    """Print every draft entry under the configured root, one per line."""
    import raf.cli as cli

    del args
    for entry in cli.list_entries(config.root):
        print(entry, flush=True)


__all__ = ["run_ls"]
