"""TUI screens for goat."""

from .countdown import CountdownScreen

__all__ = ["CountdownScreen"]
