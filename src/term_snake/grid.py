"""Play-field bounds and edge policy."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np


class WallMode(enum.Enum):
    """Defines how a head that leaves the field is brought back inside."""

    WRAP = "wrap"
    CLAMP = "clamp"


class Grid:
    """Rectangular play field of ``width`` x ``height`` cells.

    Coordinates are ``(x, y)`` with ``x`` growing rightwards and ``y``
    growing downwards. The first ``header_rows`` rows are shared with the
    score bar: the snake may cross them but food is never placed there.
    """

    def __init__(
        self,
        width: int = 168,
        height: int = 15,
        wall_mode: WallMode = WallMode.WRAP,
        header_rows: int = 0,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1x1.")
        if header_rows < 0:
            raise ValueError("header_rows must not be negative.")
        if header_rows >= height:
            raise ValueError("header_rows must leave at least one playable row.")
        self.width = width
        self.height = height
        self.wall_mode = WallMode(wall_mode)
        self.header_rows = header_rows

    @property
    def playable_rows(self) -> range:
        """Rows where food may be placed."""
        return range(self.header_rows, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def wrap(self, x: int, y: int) -> tuple[int, int]:
        """Wrap coordinates around the grid edges."""
        return x % self.width, y % self.height

    def clamp(self, x: int, y: int) -> tuple[int, int]:
        """Pin coordinates to the nearest edge cell."""
        return (
            min(max(x, 0), self.width - 1),
            min(max(y, 0), self.height - 1),
        )

    def resolve(self, x: int, y: int) -> tuple[int, int]:
        """Bring an unbounded coordinate back into the field."""
        if self.in_bounds(x, y):
            return x, y
        if self.wall_mode == WallMode.WRAP:
            return self.wrap(x, y)
        return self.clamp(x, y)

    def occupancy(self, cells: Iterable[tuple[int, int]]) -> np.ndarray:
        """Return a ``(height, width)`` boolean mask of the given cells."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in cells:
            if self.in_bounds(x, y):
                mask[y, x] = True
        return mask

    def free_playable_cells(
        self, occupied: Iterable[tuple[int, int]],
    ) -> list[tuple[int, int]]:
        """Return every playable ``(x, y)`` cell not in *occupied*."""
        mask = self.occupancy(occupied)
        mask[: self.header_rows] = True
        ys, xs = np.where(~mask)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))
