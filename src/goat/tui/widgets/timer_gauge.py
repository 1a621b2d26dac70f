"""Timer gauge widget."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, ProgressBar


class TimerGauge(Vertical):
    """Progress bar with an elapsed/total label inside a bordered panel."""

    DEFAULT_CSS = """
    TimerGauge {
        border: round $primary;
        border-title-color: $warning;
        height: auto;
        padding: 0 1;
    }

    TimerGauge ProgressBar {
        width: 100%;
    }

    TimerGauge #timer-label {
        color: $text-muted;
    }
    """

    def __init__(self, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.border_title = "Timer"
        self.percent = 0
        self.label_text = ""

    def compose(self) -> ComposeResult:
        yield ProgressBar(total=100, show_eta=False, id="timer-bar")
        yield Label("", id="timer-label")

    def set_progress(self, percent: int, label: str) -> None:
        """Set the fill percentage and the label text."""
        self.percent = percent
        self.label_text = label
        self.query_one("#timer-bar", ProgressBar).update(progress=percent)
        self.query_one("#timer-label", Label).update(label)
