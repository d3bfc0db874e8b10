"""pygame renderer for the board, score, and game-over screen."""

from __future__ import annotations

import logging

import pygame

from snake_arcade.engine import GameEngine
from snake_arcade.grid import CellType

logger = logging.getLogger(__name__)

# Colors
LIGHT_GRAY = (200, 200, 200)
WHITE = (255, 255, 255)
DARK_GRAY = (80, 80, 80)
DARK_GREEN = (0, 117, 44)
LIME = (0, 158, 47)
GOLD = (255, 203, 0)

MARGIN = 10
GRID_LINE_WIDTH = 2
SCORE_FONT_SIZE = 20
OVER_FONT_SIZE = 30
GAME_OVER_TEXT = "Game Over. Press [enter] to play again."

CELL_COLORS: dict[int, tuple[int, int, int]] = {
    CellType.BODY: LIME,
    CellType.HEAD: DARK_GREEN,
    CellType.FRUIT: GOLD,
}


def board_geometry(
    width: int, height: int, board_size: int,
) -> tuple[float, float, float, float]:
    """Return ``(offset_x, offset_y, field_size, cell_size)``.

    The field is the largest square that fits the window, centered, with
    a fixed margin on every side.
    """
    field = min(width, height) - 2 * MARGIN
    offset_x = (width - field) / 2
    offset_y = (height - field) / 2
    return offset_x, offset_y, field, field / board_size


class GameView:
    """Renders the complete game frame from a :class:`GameEngine`."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.score_font = self._load_font(SCORE_FONT_SIZE)
        self.over_font = self._load_font(OVER_FONT_SIZE)

    @staticmethod
    def _load_font(size: int) -> pygame.font.Font:
        try:
            return pygame.font.SysFont(None, size)
        except pygame.error as exc:
            logger.warning("System font unavailable (%s); using default.", exc)
            return pygame.font.Font(None, size)

    def render(self, engine: GameEngine) -> None:
        if engine.is_over():
            self._draw_game_over()
        else:
            self._draw_board(engine)
        pygame.display.flip()

    def _draw_board(self, engine: GameEngine) -> None:
        width, height = self.screen.get_size()
        size = engine.board_size
        ox, oy, field, cell = board_geometry(width, height, size)

        self.screen.fill(LIGHT_GRAY)
        pygame.draw.rect(self.screen, WHITE, pygame.Rect(ox, oy, field, field))

        for i in range(1, size):
            pos = cell * i
            pygame.draw.line(
                self.screen, LIGHT_GRAY,
                (ox, oy + pos), (ox + field, oy + pos), GRID_LINE_WIDTH,
            )
            pygame.draw.line(
                self.screen, LIGHT_GRAY,
                (ox + pos, oy), (ox + pos, oy + field), GRID_LINE_WIDTH,
            )

        cells = engine.snapshot()
        for y, x in zip(*cells.nonzero()):
            color = CELL_COLORS[int(cells[y, x])]
            rect = pygame.Rect(ox + x * cell, oy + y * cell, cell, cell)
            pygame.draw.rect(self.screen, color, rect)

        score = self.score_font.render(f"SCORE: {engine.score}", True, DARK_GRAY)
        self.screen.blit(score, (MARGIN, MARGIN))

    def _draw_game_over(self) -> None:
        self.screen.fill(WHITE)
        text = self.over_font.render(GAME_OVER_TEXT, True, DARK_GRAY)
        self.screen.blit(text, text.get_rect(center=self.screen.get_rect().center))
