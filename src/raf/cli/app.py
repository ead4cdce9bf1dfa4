"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from raf import ConfigError, DraftError, PromptInterruptedError
from raf.core.contracts.prompt import Prompter


def _configure_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
    )


def main(argv: list[str] | None = None, *, prompter: Prompter | None = None) -> int:
    import raf.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    try:
        config = cli.load_config(args.config)
        if args.command == "new":
            cli._run_new(args, config=config, prompter=prompter or cli.QuestionaryPrompter())
        elif args.command == "ls":
            cli._run_ls(args, config=config)
        return 0
    except PromptInterruptedError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except DraftError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
