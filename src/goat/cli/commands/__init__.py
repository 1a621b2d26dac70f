"""CLI command handlers."""

from .sleep import cmd_sleep
from .tui import cmd_tui

__all__ = [
    "cmd_sleep",
    "cmd_tui",
]
