"""Headless countdown for non-interactive use."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Sequence

from goat.countdown.engine import CountdownEngine, clock_ticks
from goat.countdown.presenter import DEFAULT_TITLE
from goat.keymapping import Binding


def cmd_sleep(
    args: argparse.Namespace,
    bindings: Sequence[Binding],
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Sleep for the configured time without drawing any UI.

    Keys cannot be read without a terminal, so only the timer can end
    the countdown.
    """
    title = args.title or DEFAULT_TITLE
    print(f"goat - sleeping for {args.time} seconds: '{title}'", flush=True)
    engine = CountdownEngine(args.time, bindings, clock=clock)
    engine.start()
    return engine.run(clock_ticks(engine, sleep=sleep))
