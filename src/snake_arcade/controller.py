"""pygame window bootstrap and main loop.

Per frame: poll the keyboard, let the session tick if due, render.
The render rate is capped by the pygame clock at ``config.fps``; the
logic rate is governed by the session's own tick timer.
"""

from __future__ import annotations

import logging

import pygame

from snake_arcade.config import GameConfig
from snake_arcade.session import GameSession
from snake_arcade.snake import Direction
from snake_arcade.view import GameView

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}

RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def held_directions(pressed) -> list[Direction]:
    """Map a ``pygame.key.get_pressed()`` result to held directions."""
    return [d for key, d in KEY_DIRECTIONS.items() if pressed[key]]


class GameController:
    """Owns the pygame window and glues the session to the view."""

    def __init__(
        self,
        config: GameConfig | None = None,
        session: GameSession | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.session = (
            session if session is not None else GameSession(self.config)
        )
        self.screen: pygame.Surface | None = None
        self.view: GameView | None = None
        self.running = False

    def run(self) -> None:
        """Open the window and loop until the player quits."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(
                (self.config.window_width, self.config.window_height),
            )
            pygame.display.set_caption("Snake")
            self.view = GameView(self.screen)
            clock = pygame.time.Clock()
            self.running = True
            logger.info(
                "Starting %dx%d board at %.2fs per tick.",
                self.config.board_size, self.config.board_size,
                self.config.tick_interval,
            )
            while self.running:
                self.frame()
                clock.tick(self.config.fps)
        finally:
            pygame.quit()

    def frame(self) -> None:
        """Run one loop iteration: input, logic tick, render."""
        self._handle_events()
        if not self.running:
            return
        self._poll_keys(pygame.key.get_pressed())
        self.session.update()
        self.view.render(self.session.engine)

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def _poll_keys(self, pressed) -> None:
        if self.session.is_over:
            if any(pressed[key] for key in RESTART_KEYS):
                self.session.restart()
            return
        self.session.request_first(held_directions(pressed))
