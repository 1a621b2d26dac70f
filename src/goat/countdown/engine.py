"""Countdown state machine.

Clock ticks and key presses race to end the same session. Events are
handled one at a time, and the first one that yields an outcome wins;
everything after it is ignored.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence

from goat.countdown.events import CountdownEvent, Key, Resize, Tick
from goat.countdown.state import Outcome, Session
from goat.keymapping import Binding

logger = logging.getLogger(__name__)

ABORT_KEY = "q"
CONFIRM_KEY = "c"

KeyTable = Mapping[str, Outcome]


def build_key_table(bindings: Sequence[Binding]) -> dict[str, Outcome]:
    """Map key symbols to outcomes.

    Built-in keys are registered first, then bindings in order. A later
    registration for the same key replaces the earlier one, so a binding
    on ``q`` or ``c`` overrides the built-in behavior. Table order is
    registration order: a replaced key moves to the end.
    """
    table: dict[str, Outcome] = {
        ABORT_KEY: Outcome.aborted(),
        CONFIRM_KEY: Outcome.confirmed(),
    }
    for binding in bindings:
        table.pop(binding.key, None)
        table[binding.key] = Outcome.binding(binding)
    return table


def dispatch(
    event: CountdownEvent, session: Session, key_table: KeyTable
) -> Outcome | None:
    """Apply one event to a running session.

    Returns the outcome the event produces, or None if the session keeps
    running. Ticks advance progress before the expiry check, so the tick
    that ends the timer leaves progress at 100.
    """
    if isinstance(event, Tick):
        session.advance_to(event.elapsed)
        if int(event.elapsed) >= session.total_seconds:
            return Outcome.timer_expired()
        return None

    if isinstance(event, Key):
        matches = [c for c in event.candidates() if c in key_table]
        if not matches:
            return None
        # Key name and character may hit different bindings; latest wins
        order = list(key_table)
        return key_table[max(matches, key=order.index)]

    if isinstance(event, Resize):
        return None

    raise TypeError(f"Unknown countdown event: {event!r}")


class CountdownEngine:
    """Owns the session clock and feeds events through ``dispatch``."""

    def __init__(
        self,
        total_seconds: int,
        bindings: Sequence[Binding] = (),
        *,
        clock: Callable[[], float] = time.monotonic,
        on_change: Callable[[Session], None] | None = None,
    ) -> None:
        self.session = Session(total_seconds=total_seconds, bindings=tuple(bindings))
        self.key_table = build_key_table(self.session.bindings)
        self._clock = clock
        self._on_change = on_change
        self._started_at: float | None = None

    @property
    def outcome(self) -> Outcome | None:
        return self.session.outcome

    def start(self) -> float:
        """Start the session clock and return the start reading."""
        self._started_at = self._clock()
        logger.info(
            "Countdown started: %ss, %d binding(s)",
            self.session.total_seconds,
            len(self.session.bindings),
        )
        return self._started_at

    def tick(self) -> Tick:
        """Build a tick event from the session clock."""
        started_at = self._started_at
        if started_at is None:
            started_at = self.start()
        return Tick(elapsed=self._clock() - started_at)

    def handle(self, event: CountdownEvent) -> Outcome | None:
        """Apply an event. Returns the outcome if this event ended the session."""
        if self.session.is_terminated:
            logger.debug("Ignoring %r after termination", event)
            return None

        outcome = dispatch(event, self.session, self.key_table)
        if outcome is None:
            if self._on_change is not None:
                self._on_change(self.session)
            return None

        self.session.terminate(outcome)
        logger.info(
            "Countdown ended: %s (exit code %d) after %.1fs",
            outcome.kind.value,
            outcome.exit_code,
            self.session.elapsed,
        )
        return outcome

    def run(self, events: Iterable[CountdownEvent]) -> int:
        """Consume events until the session ends and return its exit code."""
        if self._started_at is None:
            self.start()
        if self._on_change is not None:
            self._on_change(self.session)

        for event in events:
            if self.handle(event) is not None:
                break

        if self.session.outcome is None:
            raise RuntimeError("Event source ended before the countdown finished")
        return self.session.outcome.exit_code


def clock_ticks(
    engine: CountdownEngine,
    *,
    interval: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[Tick]:
    """Yield a tick from the engine clock every ``interval`` seconds."""
    while True:
        sleep(interval)
        yield engine.tick()
