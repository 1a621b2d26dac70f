"""Centralized path management for goat.

goat keeps no configuration or data files. The only thing it writes is a
debug log, placed under the XDG state directory:
$XDG_STATE_HOME/goat (default: ~/.local/state/goat)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

LOG_LEVEL_ENV = "GOAT_LOG_LEVEL"


def _xdg_state_home() -> Path:
    """Get XDG_STATE_HOME, defaulting to ~/.local/state."""
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


@dataclass
class GoatPaths:
    """Paths used by goat."""

    _state_home: Path = field(default_factory=_xdg_state_home)

    @property
    def global_state_dir(self) -> Path:
        """Global state: ~/.local/state/goat/"""
        return self._state_home / "goat"

    @property
    def debug_log(self) -> Path:
        """Debug log: ~/.local/state/goat/debug.log"""
        return self.global_state_dir / "debug.log"

    def ensure_global_dirs(self) -> None:
        """Create the state directory."""
        self.global_state_dir.mkdir(parents=True, exist_ok=True)


def log_level_name() -> str:
    """Log level requested via GOAT_LOG_LEVEL (default INFO)."""
    return os.environ.get(LOG_LEVEL_ENV, "INFO").upper()


# Singleton instance
_paths: GoatPaths | None = None


def get_paths() -> GoatPaths:
    """Get the paths singleton."""
    global _paths
    if _paths is None:
        _paths = GoatPaths()
    return _paths


def reset_paths() -> None:
    """Reset paths singleton (for testing)."""
    global _paths
    _paths = None
