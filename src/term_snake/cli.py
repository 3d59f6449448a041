"""Command-line launcher for term-snake."""

from __future__ import annotations

import argparse
import curses
import logging
import sys

from term_snake.app import TerminalTooSmallError, run
from term_snake.config import GameConfig
from term_snake.grid import WallMode

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Play snake in the terminal. Arrow keys or WASD move, Q quits.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; flags below override it.",
    )
    parser.add_argument(
        "--width", type=int, default=None,
        help="Field width in cells (default: fit the terminal).",
    )
    parser.add_argument(
        "--height", type=int, default=None,
        help="Field height in cells (default: fit the terminal).",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--wall-mode", type=str, default=None,
        choices=[m.value for m in WallMode],
    )
    parser.add_argument("--food-glyph", type=str, default=None)
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file (the terminal is owned by the game).",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _configure_logging(log_file: str | None, level: str) -> None:
    if log_file:
        logging.basicConfig(level=level, format=_LOG_FORMAT, filename=log_file)
    else:
        logging.basicConfig(level=level, handlers=[logging.NullHandler()])


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    return config.with_overrides(
        width=args.width,
        height=args.height,
        seed=args.seed,
        wall_mode=args.wall_mode,
        food_glyph=args.food_glyph,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_file, args.log_level)

    try:
        config = _load_config(args)
    except (OSError, ValueError, TypeError) as exc:
        parser.error(f"invalid configuration: {exc}")

    fit = args.config is None and args.width is None and args.height is None

    try:
        final = curses.wrapper(run, config, fit_to_screen=fit)
    except TerminalTooSmallError as exc:
        logger.error("%s", exc)
        print(f"term-snake: {exc}", file=sys.stderr)  # noqa: T201
        return 1
    except curses.error as exc:
        logger.exception("Terminal I/O failed.")
        print(f"term-snake: terminal error: {exc}", file=sys.stderr)  # noqa: T201
        return 1

    logger.info("Game over after %d ticks with score %d.", final.tick, final.score)
    print(f"Final score: {final.score}")  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
