"""TUI widgets for goat."""

from .legend import KeybindingLegend
from .timer_gauge import TimerGauge

__all__ = [
    "KeybindingLegend",
    "TimerGauge",
]
