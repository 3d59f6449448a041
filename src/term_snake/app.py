"""Interactive game loop: draw, wait for a key, apply it."""

from __future__ import annotations

import curses
import logging
from collections.abc import Callable

from term_snake.config import GameConfig
from term_snake.engine import GameEngine, Snapshot
from term_snake.keys import decode_key
from term_snake.render import (
    Palette,
    Renderer,
    field_size_for_screen,
    required_screen_size,
)

logger = logging.getLogger(__name__)


class TerminalTooSmallError(RuntimeError):
    """Raised when the terminal cannot hold the configured play field."""


def fit_config_to_screen(config: GameConfig, rows: int, cols: int) -> GameConfig:
    """Resize the field so the framed board fills a ``rows`` x ``cols`` screen."""
    width, height = field_size_for_screen(rows, cols)
    if width < 1 or height <= config.header_rows:
        raise TerminalTooSmallError(
            f"Terminal of {cols}x{rows} is too small for a snake field."
        )
    return config.with_overrides(width=width, height=height)


def play(
    engine: GameEngine,
    renderer: Renderer,
    read_key: Callable[[], int],
) -> Snapshot:
    """Run the game until it terminates and return the final snapshot.

    Each iteration paints the current snapshot, blocks on *read_key* and
    feeds the decoded signal to the engine.
    """
    snapshot = engine.snapshot()
    while not snapshot.terminated:
        renderer.draw(snapshot)
        snapshot = engine.apply(decode_key(read_key()))
    return snapshot


def run(stdscr, config: GameConfig, fit_to_screen: bool = False) -> Snapshot:
    """Set up the curses screen and play one game on it.

    Intended to be called through :func:`curses.wrapper`.
    """
    rows, cols = stdscr.getmaxyx()
    if fit_to_screen:
        config = fit_config_to_screen(config, rows, cols)
    else:
        need_rows, need_cols = required_screen_size(config.width, config.height)
        if need_rows > rows or need_cols > cols:
            raise TerminalTooSmallError(
                f"A {config.width}x{config.height} field needs a "
                f"{need_cols}x{need_rows} terminal, got {cols}x{rows}."
            )

    curses.curs_set(0)
    stdscr.keypad(True)

    engine = GameEngine(config)
    renderer = Renderer(stdscr, config, Palette.from_terminal())
    logger.info(
        "Starting %dx%d game (wall mode %s, seed %s).",
        config.width, config.height, config.wall_mode, config.seed,
    )
    return play(engine, renderer, stdscr.getch)
