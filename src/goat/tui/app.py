"""Main goat TUI application."""

import logging
from collections.abc import Sequence
from typing import Any

from textual.app import App

from goat.countdown.engine import CountdownEngine
from goat.keymapping import Binding
from goat.tui.screens.countdown import CountdownScreen

logger = logging.getLogger(__name__)


class GoatApp(App[int]):
    """Countdown TUI. ``run()`` returns the exit code of the outcome."""

    TITLE = "goat"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        total_seconds: int,
        bindings: Sequence[Binding] = (),
        title: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.engine = CountdownEngine(total_seconds, bindings)
        self.countdown_title = title

    def on_mount(self) -> None:
        """Show the countdown screen."""
        logger.info("TUI mounted, starting countdown")
        self.push_screen(CountdownScreen(self.engine, title=self.countdown_title))
