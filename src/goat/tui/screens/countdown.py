"""Countdown screen: legend panel above a timer gauge."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from textual import events
from textual.app import ComposeResult
from textual.screen import Screen
from textual.timer import Timer

from goat.countdown.engine import CountdownEngine
from goat.countdown.events import CountdownEvent, Key, Resize
from goat.countdown.presenter import LegendLine, render
from goat.countdown.state import Session
from goat.keymapping import Binding
from goat.tui.widgets import KeybindingLegend, TimerGauge

logger = logging.getLogger(__name__)

TICK_INTERVAL = 1.0


class CountdownScreen(Screen):
    """Runs one countdown and dismisses the app with its exit code.

    Ticks from an interval timer, key presses and resizes are all turned
    into engine events here. Textual delivers them one at a time on the
    app's event loop, so the first event that ends the session is the
    only one that counts.
    """

    DEFAULT_CSS = """
    CountdownScreen {
        layout: vertical;
        padding: 1 2;
    }

    CountdownScreen KeybindingLegend {
        margin-bottom: 1;
    }
    """

    def __init__(
        self,
        engine: CountdownEngine,
        title: str | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(**kwargs)
        self.engine = engine
        self.countdown_title = title
        self._ticker: Timer | None = None

    @property
    def countdown_bindings(self) -> Sequence[Binding]:
        return self.engine.session.bindings

    def compose(self) -> ComposeResult:
        yield KeybindingLegend(id="legend")
        yield TimerGauge(id="gauge")

    def on_mount(self) -> None:
        """Start the clock and draw the initial state."""
        self.engine.start()
        self.refresh_countdown(self.engine.session)
        self._ticker = self.set_interval(TICK_INTERVAL, self._on_tick)

    # CountdownDisplay

    def draw_legend(self, title: str, lines: Sequence[LegendLine]) -> None:
        self.query_one("#legend", KeybindingLegend).set_legend(title, lines)

    def draw_gauge(self, percent: int, label: str) -> None:
        self.query_one("#gauge", TimerGauge).set_progress(percent, label)

    def refresh_countdown(self, session: Session) -> None:
        render(self, session, self.countdown_bindings, self.countdown_title)

    # Event handlers

    def _on_tick(self) -> None:
        self._handle(self.engine.tick())

    def on_key(self, event: events.Key) -> None:
        key = Key(
            symbol=event.key,
            character=event.character if event.is_printable else None,
        )
        if self._handle(key):
            event.stop()

    def on_resize(self, event: events.Resize) -> None:
        # Layout resizes arrive before mount too; only redraw a live countdown
        if self._ticker is None:
            return
        self._handle(Resize())

    def _handle(self, event: CountdownEvent) -> bool:
        """Feed an event to the engine. Returns True if it ended the countdown."""
        if self.engine.session.is_terminated:
            return False
        outcome = self.engine.handle(event)
        if outcome is None:
            self.refresh_countdown(self.engine.session)
            return False
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None
        logger.info("Countdown screen closing with exit code %d", outcome.exit_code)
        self.app.exit(outcome.exit_code)
        return True
