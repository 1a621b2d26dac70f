"""goat - better sleep."""

__version__ = "0.1.0"
