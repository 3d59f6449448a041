"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. Growth is tracked
    by ``target_length``: a move prepends the new head and :meth:`trim`
    then drops tail segments until the body is that long again.
    """

    def __init__(self, head: tuple[int, int], target_length: int = 1) -> None:
        if target_length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.body: deque[tuple[int, int]] = deque([head])
        self.target_length = target_length

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self, direction: Direction) -> tuple[int, int]:
        """Compute the unbounded next head position without moving."""
        dx, dy = direction.value
        x, y = self.head
        return x + dx, y + dy

    def push_head(self, position: tuple[int, int]) -> None:
        """Prepend a new head segment."""
        self.body.appendleft(position)

    def grow(self, segments: int = 1) -> None:
        """Raise the target length by *segments*."""
        self.target_length += segments

    def trim(self) -> None:
        """Drop tail segments beyond ``target_length``."""
        while len(self.body) > self.target_length:
            self.body.pop()
