"""Keybinding legend panel."""

from __future__ import annotations

from collections.abc import Sequence

from rich.markup import escape
from textual.widgets import Static

from goat.countdown.presenter import LegendLine


class KeybindingLegend(Static):
    """Bordered panel listing the keys that end the countdown."""

    DEFAULT_CSS = """
    KeybindingLegend {
        border: round $accent;
        border-title-color: $secondary;
        border-title-style: bold;
        padding: 0 1;
        height: auto;
    }
    """

    def __init__(self, **kwargs: object) -> None:
        super().__init__("", **kwargs)
        self.legend_lines: list[LegendLine] = []

    def set_legend(self, title: str, lines: Sequence[LegendLine]) -> None:
        """Replace the title and key lines."""
        self.border_title = title
        self.legend_lines = list(lines)
        body = "\n".join(
            f"[green]'{escape(line.key)}'[/] -> {escape(line.label)}"
            for line in self.legend_lines
        )
        self.update(f"[b]KEYBINDINGS:[/b]\n{body}")
