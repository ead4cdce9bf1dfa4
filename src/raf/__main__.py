"""Entry point for ``python -m raf``."""

from raf.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
