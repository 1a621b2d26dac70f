"""Events delivered to the countdown engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tick:
    """Periodic clock signal carrying seconds since session start."""

    elapsed: float


@dataclass(frozen=True)
class Key:
    """A key press.

    ``symbol`` is the terminal's name for the key (``a``, ``enter``,
    ``question_mark``); ``character`` is the printable character when
    there is one (``a``, ``?``).
    """

    symbol: str
    character: str | None = None

    def candidates(self) -> tuple[str, ...]:
        if self.character and self.character != self.symbol:
            return (self.symbol, self.character)
        return (self.symbol,)


@dataclass(frozen=True)
class Resize:
    """Terminal was resized."""


CountdownEvent = Tick | Key | Resize
