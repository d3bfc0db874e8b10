"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake made of a head cell plus a deque of former head cells.

    The head is stored apart from ``body``. ``body[0]`` is the cell the
    head occupied on the previous tick; ``body[-1]`` is the tail.
    """

    def __init__(
        self,
        start_x: int = 0,
        start_y: int = 0,
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self.head: tuple[int, int] = (start_x, start_y)
        self.body: deque[tuple[int, int]] = deque()
        self.direction = direction

    def set_direction(self, new_direction: Direction) -> bool:
        """Change direction, ignoring 180° reversals.

        Returns True if the stored direction changed.
        """
        if new_direction is self.direction:
            return False
        if _OPPOSITES[new_direction] is self.direction:
            return False
        self.direction = new_direction
        return True

    def next_head(self) -> tuple[int, int]:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return x + dx, y + dy

    def advance(self, grow: bool = False) -> tuple[int, int] | None:
        """Move the snake one step forward.

        Returns the vacated tail cell, or ``None`` if nothing was vacated.
        """
        self.body.appendleft(self.head)
        self.head = self.next_head()
        if grow:
            return None
        return self.body.pop()

    def __len__(self) -> int:
        return len(self.body) + 1

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) == self.head or (x, y) in self.body

    def self_collision(self) -> bool:
        """Check whether the head overlaps any body segment."""
        return self.head in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": list(self.head),
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name,
        }
