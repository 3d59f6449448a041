"""Translate curses key codes into engine signals."""

from __future__ import annotations

import curses

from term_snake.engine import Action
from term_snake.snake import Direction

KEY_BINDINGS: dict[int, Direction | Action] = {
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    ord("a"): Direction.LEFT,
    ord("d"): Direction.RIGHT,
    ord("w"): Direction.UP,
    ord("s"): Direction.DOWN,
    ord("q"): Action.QUIT,
    ord("Q"): Action.QUIT,
}


def decode_key(key: int) -> Direction | Action | None:
    """Return the signal bound to *key*, or ``None`` for unbound keys."""
    return KEY_BINDINGS.get(key)
