"""Food value and spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from term_snake.grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Food:
    """A single food item: where it lies and how it is drawn."""

    position: tuple[int, int]
    glyph: str = "@"

    def to_dict(self) -> dict:
        """Serialize food to a dictionary."""
        return {"position": list(self.position), "glyph": self.glyph}


class FoodSpawner:
    """Places food uniformly at random on the playable part of the grid.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Draws that land on an excluded cell are retried up to
    ``max_attempts`` times; after that the position is picked from the
    remaining free cells, and only a completely covered field yields an
    unchecked draw.
    """

    def __init__(
        self,
        grid: Grid,
        glyph: str = "@",
        max_attempts: int = 32,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        if not glyph:
            raise ValueError("glyph must not be empty.")
        self.grid = grid
        self.glyph = glyph
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else np.random.default_rng()

    def draw(self) -> tuple[int, int]:
        """Return one unchecked uniform draw from the playable rows."""
        x = int(self.rng.integers(0, self.grid.width))
        y = int(self.rng.integers(self.grid.header_rows, self.grid.height))
        return x, y

    def spawn(
        self, exclude: Iterable[tuple[int, int]] = (),
    ) -> tuple[int, int]:
        """Return a new food position, avoiding *exclude* where possible."""
        excluded = set(exclude)
        for _ in range(self.max_attempts):
            pos = self.draw()
            if pos not in excluded:
                return pos

        free = self.grid.free_playable_cells(excluded)
        if not free:
            logger.debug("No free cell for food; placing it on the snake.")
            return self.draw()

        logger.debug(
            "Food draw hit the snake %d times; picking from %d free cells.",
            self.max_attempts, len(free),
        )
        return free[int(self.rng.integers(len(free)))]

    def spawn_food(self, exclude: Iterable[tuple[int, int]] = ()) -> Food:
        """Spawn a position and wrap it in a :class:`Food`."""
        return Food(self.spawn(exclude), self.glyph)
