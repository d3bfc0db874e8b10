"""Step-based game engine composing board, snake, and fruit logic."""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from snake_arcade.fruit import FruitSpawner, IntegerSource
from snake_arcade.grid import Board
from snake_arcade.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-snake, step-based game engine.

    The engine owns the board, snake, and fruit spawner. The snake starts
    at ``(0, 0)`` heading right with an empty body. Each call to
    :meth:`advance` moves the game forward by one tick.

    Direction changes go through :meth:`set_direction`, which rejects
    reversals and accepts at most one change per tick.
    """

    def __init__(
        self,
        board_size: int = 16,
        rng: IntegerSource | None = None,
        seed: int | None = None,
    ) -> None:
        self.board = Board(board_size)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.snake = Snake(0, 0, Direction.RIGHT)
        self.fruit_spawner = FruitSpawner(self.board, rng=self.rng)
        self.fruit = self.fruit_spawner.spawn()
        self.score = 0
        self.tick = 0
        self._direction_locked = False

    @property
    def board_size(self) -> int:
        return self.board.size

    @property
    def head(self) -> tuple[int, int]:
        return self.snake.head

    @property
    def body(self) -> deque[tuple[int, int]]:
        return self.snake.body

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    @property
    def direction_locked(self) -> bool:
        """True once a direction change has been accepted this tick."""
        return self._direction_locked

    def is_over(self) -> bool:
        """Return True if the head is off the board or inside the body."""
        x, y = self.snake.head
        return not self.board.in_bounds(x, y) or self.snake.self_collision()

    @property
    def game_over(self) -> bool:
        return self.is_over()

    def set_direction(self, direction: Direction) -> bool:
        """Request a direction change for the next tick.

        Reversals and repeats of the current direction are ignored, and
        only the first accepted change per tick takes effect. Returns
        True if the request was accepted.
        """
        if self._direction_locked:
            return False
        if not self.snake.set_direction(direction):
            return False
        self._direction_locked = True
        return True

    def advance(self) -> None:
        """Advance the game by one tick.

        Ignored once the game is over.
        """
        if self.is_over():
            logger.debug("advance() called on a finished game; ignoring.")
            return

        ate = self.snake.next_head() == self.fruit
        self.snake.advance(grow=ate)
        if ate:
            self.score += 1
            self.fruit = self.fruit_spawner.spawn()

        self.tick += 1
        self._direction_locked = False

        if self.is_over():
            logger.info(
                "Snake died at tick %d with score %d.", self.tick, self.score,
            )

    def snapshot(self) -> np.ndarray:
        """Return the board as a ``[y, x]`` array of cell codes."""
        return self.board.snapshot(self.snake.head, self.snake.body, self.fruit)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "game_over": self.is_over(),
            "board": self.board.to_dict(),
            "snake": self.snake.to_dict(),
            "fruit": list(self.fruit),
        }
