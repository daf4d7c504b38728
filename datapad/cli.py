"""Command line entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from datapad.tui import run_app


def default_storage_path() -> Path:
    """The notes folder used when none is given: ~/.datapad."""
    return Path.home() / ".datapad"


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and run the interface; return the exit status."""
    parser = argparse.ArgumentParser(prog="datapad", description="Take notes in the terminal.")
    parser.add_argument(
        "-storage",
        "--storage",
        dest="storage",
        default="",
        help="Path to notes storage folder (optional)",
    )
    args = parser.parse_args(argv)

    storage = args.storage
    if not storage:
        try:
            storage = default_storage_path()
        except (RuntimeError, KeyError) as exc:
            print(f"Error: unable to determine home directory: {exc}", file=sys.stderr)
            return 1

    try:
        run_app(storage)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())