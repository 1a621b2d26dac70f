"""Countdown engine, session state, and presentation."""

from goat.countdown.engine import (
    ABORT_KEY,
    CONFIRM_KEY,
    CountdownEngine,
    build_key_table,
    clock_ticks,
    dispatch,
)
from goat.countdown.events import CountdownEvent, Key, Resize, Tick
from goat.countdown.presenter import (
    DEFAULT_TITLE,
    CountdownDisplay,
    LegendLine,
    legend_lines,
    render,
)
from goat.countdown.state import Outcome, OutcomeKind, Session

__all__ = [
    "ABORT_KEY",
    "CONFIRM_KEY",
    "DEFAULT_TITLE",
    "CountdownDisplay",
    "CountdownEngine",
    "CountdownEvent",
    "Key",
    "LegendLine",
    "Outcome",
    "OutcomeKind",
    "Resize",
    "Session",
    "Tick",
    "build_key_table",
    "clock_ticks",
    "dispatch",
    "legend_lines",
    "render",
]
