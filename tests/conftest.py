"""Shared test helpers."""

import curses

import pytest


class FakeWindow:
    """Minimal stand-in for a curses window.

    Records painted cells and replays a scripted key sequence. Like real
    curses, ``addstr`` fails when it would write past the right edge or
    into the bottom-right cell.
    """

    def __init__(self, rows: int, cols: int, keys=()):
        self.rows = rows
        self.cols = cols
        self.cells: dict[tuple[int, int], tuple[str, int]] = {}
        self.keys = list(keys)
        self.refreshes = 0
        self.keypad_enabled = False

    def getmaxyx(self):
        return self.rows, self.cols

    def erase(self):
        self.cells.clear()

    def addstr(self, row, col, text, attr=0):
        end = col + len(text)
        if end > self.cols or (row == self.rows - 1 and end == self.cols):
            raise curses.error("addwstr() returned ERR")
        self._paint(row, col, text, attr)

    def insstr(self, row, col, text, attr=0):
        self._paint(row, col, text[: self.cols - col], attr)

    def refresh(self):
        self.refreshes += 1

    def keypad(self, flag):
        self.keypad_enabled = flag

    def getch(self):
        return self.keys.pop(0)

    def char_at(self, row, col):
        return self.cells.get((row, col), (" ", 0))[0]

    def attr_at(self, row, col):
        return self.cells.get((row, col), (" ", 0))[1]

    def row_text(self, row):
        return "".join(self.char_at(row, col) for col in range(self.cols))

    def _paint(self, row, col, text, attr):
        for offset, ch in enumerate(text):
            self.cells[(row, col + offset)] = (ch, attr)


@pytest.fixture()
def make_window():
    return FakeWindow
