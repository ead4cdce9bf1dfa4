"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("raf")
    except PackageNotFoundError:
        return "0.0.0"


def _non_empty(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("must not be empty")
    return value.strip()


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.toml (default: ~/.config/raf/config.toml)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="raf", description="Draw your rough draft freely.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="Create a new draft directory and print its path")
    new_parser.add_argument("--kind", "-k", type=_non_empty, default=None, help="Project kind (prompted when omitted)")
    new_parser.add_argument("--slug", "-s", type=_non_empty, default=None, help="Project slug (prompted when omitted)")
    new_parser.add_argument(
        "--template",
        "-t",
        type=_non_empty,
        default=None,
        help="Template name under <template root>/<kind>/ (offered as a menu when omitted)",
    )
    _add_common_arguments(new_parser)

    ls_parser = subparsers.add_parser("ls", help="List existing draft directories")
    _add_common_arguments(ls_parser)

    return parser


__all__ = ["build_parser"]
