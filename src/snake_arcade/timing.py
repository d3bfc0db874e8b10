"""Wall-clock gating of the game-logic tick."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """A zero-argument callable returning monotonic seconds."""

    def __call__(self) -> float: ...


class TickTimer:
    """Fires at most once per ``interval`` seconds of the given clock.

    Independent of how often :meth:`due` is polled, so the logic cadence
    does not depend on the render rate.
    """

    def __init__(self, interval: float, clock: Clock = time.monotonic) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive.")
        self.interval = interval
        self.clock = clock
        self.last_fired = clock()

    def due(self) -> bool:
        """True once strictly more than ``interval`` has elapsed."""
        return self.clock() - self.last_fired > self.interval

    def fire(self) -> None:
        """Record that a tick happened now."""
        self.last_fired = self.clock()

    reset = fire
