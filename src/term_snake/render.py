"""Paint game snapshots onto a curses window."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from term_snake.config import GameConfig
    from term_snake.engine import Snapshot

# Thick box-drawing characters.
_BORDER = {
    "horizontal": "━",
    "vertical": "┃",
    "top_left": "┏",
    "top_right": "┓",
    "bottom_left": "┗",
    "bottom_right": "┛",
}

# (text, highlighted) chunks of the bottom legend.
LEGEND: list[tuple[str, bool]] = [
    (" Move Left ", False), ("←", True),
    (" Move Right ", False), ("→", True),
    (" Move Down ", False), ("↓", True),
    (" Move Up ", False), ("↑", True),
    (" Quit ", False), ("<Q> ", True),
]

TITLE = " Score "

_PAIR_HEAD = 1
_PAIR_EVEN = 2
_PAIR_ODD = 3
_PAIR_ACCENT = 4
_PAIR_SCORE = 5


@dataclass(frozen=True)
class Palette:
    """curses attributes used for each kind of glyph."""

    head: int = 0
    body_even: int = 0
    body_odd: int = 0
    accent: int = 0
    score: int = 0
    title: int = 0

    @classmethod
    def from_terminal(cls) -> Palette:
        """Build a palette from the colours the terminal supports.

        Must be called after ``curses.initscr``.
        """
        if not curses.has_colors():
            return cls(
                head=curses.A_BOLD,
                body_even=curses.A_NORMAL,
                body_odd=curses.A_DIM,
                accent=curses.A_BOLD,
                score=curses.A_BOLD,
                title=curses.A_BOLD,
            )

        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(_PAIR_HEAD, curses.COLOR_RED, -1)
        curses.init_pair(_PAIR_EVEN, curses.COLOR_GREEN, -1)
        curses.init_pair(_PAIR_ODD, curses.COLOR_YELLOW, -1)
        curses.init_pair(_PAIR_ACCENT, curses.COLOR_BLUE, -1)
        curses.init_pair(_PAIR_SCORE, curses.COLOR_YELLOW, -1)
        return cls(
            head=curses.color_pair(_PAIR_HEAD) | curses.A_BOLD,
            body_even=curses.color_pair(_PAIR_EVEN),
            body_odd=curses.color_pair(_PAIR_ODD),
            accent=curses.color_pair(_PAIR_ACCENT) | curses.A_BOLD,
            score=curses.color_pair(_PAIR_SCORE),
            title=curses.A_BOLD,
        )


def required_screen_size(width: int, height: int) -> tuple[int, int]:
    """Return the ``(rows, cols)`` needed to frame a field of this size."""
    return height + 2, width + 2


def field_size_for_screen(rows: int, cols: int) -> tuple[int, int]:
    """Return the largest ``(width, height)`` field that fits the screen."""
    return cols - 2, rows - 2


class Renderer:
    """Draws a bordered play field, the score bar and the snake.

    Field cell ``(x, y)`` lands on screen row ``y + 1``, column ``x + 1``,
    just inside the border. The renderer only ever reads snapshots.
    """

    def __init__(
        self,
        window,
        config: GameConfig,
        palette: Palette | None = None,
    ) -> None:
        self.window = window
        self.head_glyph = config.head_glyph
        self.body_glyph = config.body_glyph
        self.palette = palette if palette is not None else Palette()

    def draw(self, snapshot: Snapshot) -> None:
        """Repaint the whole frame from *snapshot*."""
        self.window.erase()
        self._draw_frame(snapshot.width, snapshot.height)
        self._draw_score(snapshot)
        self._draw_snake(snapshot)
        fx, fy = snapshot.food.position
        self._put(fy + 1, fx + 1, snapshot.food.glyph, curses.A_NORMAL)
        self.window.refresh()

    def segment_style(self, index: int) -> tuple[str, int]:
        """Return the glyph and attribute for body segment *index*."""
        if index == 0:
            return self.head_glyph, self.palette.head
        if index % 2 == 0:
            return self.body_glyph, self.palette.body_even
        return self.body_glyph, self.palette.body_odd

    def _draw_frame(self, width: int, height: int) -> None:
        rows, cols = required_screen_size(width, height)
        inner = _BORDER["horizontal"] * width
        self._put(0, 0, _BORDER["top_left"] + inner + _BORDER["top_right"], 0)
        for row in range(1, rows - 1):
            self._put(row, 0, _BORDER["vertical"], 0)
            self._put(row, cols - 1, _BORDER["vertical"], 0)
        self._put(
            rows - 1, 0,
            _BORDER["bottom_left"] + inner + _BORDER["bottom_right"], 0,
        )

        self._put(0, _centre(cols, len(TITLE)), TITLE, self.palette.title)

        legend_len = sum(len(text) for text, _ in LEGEND)
        col = _centre(cols, legend_len)
        for text, highlighted in LEGEND:
            attr = self.palette.accent if highlighted else curses.A_NORMAL
            self._put(rows - 1, col, text, attr)
            col += len(text)

    def _draw_score(self, snapshot: Snapshot) -> None:
        label = "Value: "
        value = str(snapshot.score)
        cols = snapshot.width + 2
        col = _centre(cols, len(label) + len(value))
        self._put(1, col, label, curses.A_NORMAL)
        self._put(1, col + len(label), value, self.palette.score)

    def _draw_snake(self, snapshot: Snapshot) -> None:
        # Tail first so the head is never hidden by a body segment.
        for index in range(len(snapshot.body) - 1, -1, -1):
            x, y = snapshot.body[index]
            glyph, attr = self.segment_style(index)
            self._put(y + 1, x + 1, glyph, attr)

    def _put(self, row: int, col: int, text: str, attr: int) -> None:
        max_rows, max_cols = self.window.getmaxyx()
        if not (0 <= row < max_rows) or col >= max_cols:
            return
        text = text[: max_cols - col]
        if not text:
            return
        # Writing the bottom-right cell moves the cursor off-screen, which
        # addstr reports as an error; insstr leaves the cursor alone.
        if row == max_rows - 1 and col + len(text) >= max_cols:
            self.window.insstr(row, col, text, attr)
        else:
            self.window.addstr(row, col, text, attr)


def _centre(total: int, length: int) -> int:
    return max((total - length) // 2, 0)
