"""Fruit placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from snake_arcade.grid import Board

logger = logging.getLogger(__name__)


class IntegerSource(Protocol):
    """Anything that draws an integer uniformly from ``[low, high)``.

    ``numpy.random.Generator`` satisfies this protocol.
    """

    def integers(self, low: int, high: int) -> int: ...


class FruitSpawner:
    """Places the single fruit uniformly at random on the board.

    Placement does not avoid the snake, so a fruit may land on an
    occupied cell.
    """

    def __init__(
        self,
        board: Board,
        rng: IntegerSource | None = None,
    ) -> None:
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self) -> tuple[int, int]:
        """Draw a fresh fruit coordinate, x first then y."""
        x = int(self.rng.integers(0, self.board.size))
        y = int(self.rng.integers(0, self.board.size))
        logger.debug("Fruit spawned at (%d, %d).", x, y)
        return x, y
