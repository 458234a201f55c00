"""Command Line Interface Package"""

import sys

from moodcode.cli.main import main, APPROVED_PREFIX


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


__all__ = ["main", "run", "APPROVED_PREFIX"]
