"""Game and window configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board, cadence, and window settings.

    Supports JSON serialization so a setup can be saved and replayed.
    """

    # Board
    board_size: int = 16
    seed: int | None = None

    # Cadence
    tick_interval: float = 0.3
    fps: int = 60

    # Window
    window_width: int = 800
    window_height: int = 600

    def __post_init__(self) -> None:
        if self.board_size < 1:
            raise ValueError("board_size must be at least 1.")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        if self.fps < 1:
            raise ValueError("fps must be at least 1.")
        if self.window_width < 1 or self.window_height < 1:
            raise ValueError("Window dimensions must be positive.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
