"""Square board coordinate space for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in a board snapshot."""

    EMPTY = 0
    BODY = 1
    HEAD = 2
    FRUIT = 3


class Board:
    """An N×N board of ``(x, y)`` cells, valid on ``[0, N)`` in both axes."""

    def __init__(self, size: int = 16) -> None:
        if size < 1:
            raise ValueError("Board size must be at least 1.")
        self.size = size

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the board."""
        return 0 <= x < self.size and 0 <= y < self.size

    def snapshot(
        self,
        head: tuple[int, int],
        body: Iterable[tuple[int, int]],
        fruit: tuple[int, int],
    ) -> np.ndarray:
        """Paint the given pieces into a ``(size, size)`` array.

        The array is indexed ``[y, x]``. Later layers win: body, then
        fruit, then head. Off-board cells are skipped.
        """
        cells = np.zeros((self.size, self.size), dtype=np.int8)
        for x, y in body:
            if self.in_bounds(x, y):
                cells[y, x] = CellType.BODY
        if self.in_bounds(*fruit):
            cells[fruit[1], fruit[0]] = CellType.FRUIT
        if self.in_bounds(*head):
            cells[head[1], head[0]] = CellType.HEAD
        return cells

    def to_dict(self) -> dict:
        """Serialize board dimensions to a dictionary."""
        return {"size": self.size}
