"""CLI launcher for the snake arcade game."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from snake_arcade.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-arcade",
        description="Play snake on a square board.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--board-size", type=int, default=None)
    parser.add_argument(
        "--speed", type=float, default=None,
        help="Seconds between snake moves.",
    )
    parser.add_argument("--fps", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument(
        "--save-config", type=str, default=None,
        help="Write the resolved config to this path and exit.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def resolve_config(args: argparse.Namespace) -> GameConfig:
    """Merge a config file (if any) with command-line overrides."""
    config = GameConfig.load(args.config) if args.config else GameConfig()

    flag_map = {
        "board_size": "board_size",
        "speed": "tick_interval",
        "fps": "fps",
        "seed": "seed",
        "width": "window_width",
        "height": "window_height",
    }
    overrides: dict = {}
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-arcade`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = resolve_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.save_config:
        config.save(args.save_config)
        return 0

    from snake_arcade.controller import GameController

    GameController(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
