"""Presentation helpers turning session state into display calls."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from goat.countdown.engine import ABORT_KEY, CONFIRM_KEY
from goat.countdown.state import Session
from goat.keymapping import Binding

DEFAULT_TITLE = "goat"


@dataclass(frozen=True)
class LegendLine:
    """One key in the keybinding legend."""

    key: str
    label: str

    def __str__(self) -> str:
        return f"'{self.key}' -> {self.label}"


class CountdownDisplay(Protocol):
    """Surface the countdown is drawn on."""

    def draw_legend(self, title: str, lines: Sequence[LegendLine]) -> None: ...

    def draw_gauge(self, percent: int, label: str) -> None: ...


def legend_lines(bindings: Sequence[Binding]) -> list[LegendLine]:
    """Built-in keys first, then bindings in registration order."""
    lines = [
        LegendLine(ABORT_KEY, "abort"),
        LegendLine(CONFIRM_KEY, "continue"),
    ]
    lines.extend(LegendLine(binding.key, binding.label) for binding in bindings)
    return lines


def gauge_label(session: Session) -> str:
    return f"{session.elapsed_seconds}s / {session.total_seconds}s"


def render(
    display: CountdownDisplay,
    session: Session,
    bindings: Sequence[Binding],
    title: str | None = None,
) -> None:
    """Draw the legend panel and the timer gauge."""
    display.draw_legend(title or DEFAULT_TITLE, legend_lines(bindings))
    display.draw_gauge(session.progress_percent, gauge_label(session))
