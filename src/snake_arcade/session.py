"""One game run as seen by the presentation loop."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable

from snake_arcade.config import GameConfig
from snake_arcade.engine import GameEngine
from snake_arcade.fruit import IntegerSource
from snake_arcade.snake import Direction
from snake_arcade.timing import Clock, TickTimer

logger = logging.getLogger(__name__)

# Checked in this order when several keys are held at once.
DIRECTION_PRIORITY: tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.LEFT,
    Direction.UP,
    Direction.DOWN,
)


class GameSession:
    """Drives a :class:`GameEngine` at a fixed logic cadence.

    Knows nothing about windows or keyboards: the controller feeds it
    directions, calls :meth:`update` once per frame, and renders
    :attr:`engine` afterwards.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng_factory: Callable[[], IntegerSource | None] | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self._rng_factory = rng_factory
        self.clock = clock
        self.games_played = 0
        self.engine = self._new_engine()
        self.timer = TickTimer(self.config.tick_interval, clock)

    def _new_engine(self) -> GameEngine:
        rng = self._rng_factory() if self._rng_factory is not None else None
        seed = self.config.seed
        if seed is not None:
            seed += self.games_played
        self.games_played += 1
        return GameEngine(self.config.board_size, rng=rng, seed=seed)

    @property
    def is_over(self) -> bool:
        return self.engine.is_over()

    def request_direction(self, direction: Direction) -> bool:
        """Forward a direction request; ignored once the game is over."""
        if self.engine.is_over():
            return False
        return self.engine.set_direction(direction)

    def request_first(self, held: Iterable[Direction]) -> bool:
        """Request the highest-priority held direction that is accepted."""
        held = set(held)
        for direction in DIRECTION_PRIORITY:
            if direction in held and self.request_direction(direction):
                return True
        return False

    def update(self) -> bool:
        """Advance the engine if a tick is due. Returns True if it ticked."""
        if self.engine.is_over() or not self.timer.due():
            return False
        self.timer.fire()
        self.engine.advance()
        return True

    def restart(self) -> None:
        """Replace the engine with a fresh one and restart the tick timer."""
        self.engine = self._new_engine()
        self.timer.reset()
        logger.info("Game %d started.", self.games_played)
