"""Snake arcade — core game engine."""

from snake_arcade.config import GameConfig
from snake_arcade.engine import GameEngine
from snake_arcade.grid import Board, CellType
from snake_arcade.session import GameSession
from snake_arcade.snake import Direction, Snake
from snake_arcade.timing import TickTimer

__all__ = [
    "Board",
    "CellType",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameSession",
    "Snake",
    "TickTimer",
]
