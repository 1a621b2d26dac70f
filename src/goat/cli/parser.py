"""Argument parser construction for goat CLI."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn

from goat import __version__
from goat.keymapping import MAX_EXIT_CODE, MIN_EXIT_CODE


class GoatArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def positive_seconds(value: str) -> int:
    """argparse type for a strictly positive number of seconds."""
    try:
        seconds = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a number") from None
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"'{value}' must be greater than 0")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI parser."""
    parser = GoatArgumentParser(
        prog="goat",
        description="goat - better sleep",
        epilog=(
            "Controls: q abort (exit 1), c continue (exit 0). "
            "The timer running out also exits 0."
        ),
    )
    parser.add_argument(
        "--time",
        "-t",
        type=positive_seconds,
        required=True,
        help="timer in seconds",
    )
    parser.add_argument(
        "--title",
        help="title (default: goat)",
    )
    parser.add_argument(
        "--mapping",
        "-m",
        dest="mappings",
        action="append",
        default=[],
        metavar="SPEC",
        help=(
            "Keybinding mapping. Format: <retcode>:<key>:<label> "
            f"({MIN_EXIT_CODE} <= retcode <= {MAX_EXIT_CODE})"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"goat {__version__}",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments from argv (or sys.argv when omitted)."""
    parser = build_parser()
    if argv is None:
        return parser.parse_args()
    return parser.parse_args(list(argv))
