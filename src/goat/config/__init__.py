"""Configuration for goat."""
from __future__ import annotations

from goat.config.paths import GoatPaths, get_paths, log_level_name, reset_paths

__all__ = [
    "GoatPaths",
    "get_paths",
    "log_level_name",
    "reset_paths",
]
