"""TUI launch command."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from goat.countdown.state import Outcome
from goat.keymapping import Binding
from goat.tui.app import GoatApp

logger = logging.getLogger(__name__)


def cmd_tui(args: argparse.Namespace, bindings: Sequence[Binding]) -> int:
    """Launch the countdown TUI and return its exit code."""
    app = GoatApp(total_seconds=args.time, bindings=bindings, title=args.title)
    exit_code = app.run()
    if exit_code is None:
        # App closed by something other than the countdown
        logger.warning("TUI exited without an outcome, treating as abort")
        return Outcome.aborted().exit_code
    return exit_code
