"""CLI orchestration and command routing."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from goat.cli.commands import cmd_sleep, cmd_tui
from goat.cli.parser import parse_args
from goat.keymapping import Binding, KeymapError, resolve

logger = logging.getLogger(__name__)


def is_interactive(
    stdin: TextIO | None = None, stdout: TextIO | None = None
) -> bool:
    """True when both stdin and stdout are attached to a terminal."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    return stdin.isatty() and stdout.isatty()


def dispatch(args: argparse.Namespace, bindings: Sequence[Binding]) -> int:
    """Run the countdown in the TUI, or headless when there is no terminal."""
    if is_interactive():
        return cmd_tui(args, bindings)
    logger.info("No terminal attached, running headless")
    return cmd_sleep(args, bindings)


def run(
    argv: Sequence[str] | None = None,
    *,
    configure_logging: Callable[[], None] | None = None,
) -> int:
    """Parse args, validate mappings, and run the countdown."""
    args = parse_args(argv)

    try:
        bindings = resolve(args.mappings)
    except KeymapError as e:
        print(e, file=sys.stderr)
        return 1

    if configure_logging is not None:
        configure_logging()

    logger.info(
        "Countdown of %ss, title=%r, mappings=%s",
        args.time,
        args.title,
        args.mappings,
    )
    return dispatch(args, bindings)
