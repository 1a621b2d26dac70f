"""Session state for a single countdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from goat.keymapping import Binding


class OutcomeKind(Enum):
    """How a countdown session ended."""

    TIMER_EXPIRED = "timer_expired"
    ABORTED = "aborted"
    CONFIRMED = "confirmed"
    BINDING = "binding"


@dataclass(frozen=True)
class Outcome:
    """Terminal result of a session, carrying its process exit code."""

    kind: OutcomeKind
    exit_code: int

    @classmethod
    def timer_expired(cls) -> Outcome:
        return cls(OutcomeKind.TIMER_EXPIRED, 0)

    @classmethod
    def aborted(cls) -> Outcome:
        return cls(OutcomeKind.ABORTED, 1)

    @classmethod
    def confirmed(cls) -> Outcome:
        return cls(OutcomeKind.CONFIRMED, 0)

    @classmethod
    def binding(cls, binding: Binding) -> Outcome:
        return cls(OutcomeKind.BINDING, binding.exit_code)


@dataclass
class Session:
    """Live countdown state.

    Mutated only by the engine. Once ``outcome`` is set the session is
    frozen: later ``advance_to`` and ``terminate`` calls are no-ops.
    """

    total_seconds: int
    bindings: tuple[Binding, ...] = ()
    elapsed: float = 0.0
    progress_percent: int = 0
    outcome: Outcome | None = field(default=None)

    def __post_init__(self) -> None:
        if self.total_seconds <= 0:
            raise ValueError(
                f"total_seconds must be positive, got {self.total_seconds}"
            )

    @property
    def is_terminated(self) -> bool:
        return self.outcome is not None

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds elapsed."""
        return int(self.elapsed)

    def advance_to(self, elapsed: float) -> None:
        """Move the clock forward and recompute progress."""
        if self.is_terminated:
            return
        # Clock never runs backwards
        self.elapsed = max(self.elapsed, elapsed)
        self.progress_percent = min(
            100, int(self.elapsed * 100 / self.total_seconds)
        )

    def terminate(self, outcome: Outcome) -> bool:
        """Record the outcome. Returns False if one was already set."""
        if self.is_terminated:
            return False
        self.outcome = outcome
        return True
