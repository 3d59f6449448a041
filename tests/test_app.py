"""Tests for the interactive game loop."""

import curses

import pytest

from term_snake import app
from term_snake.app import TerminalTooSmallError, fit_config_to_screen, play, run
from term_snake.config import GameConfig
from term_snake.engine import GameEngine
from term_snake.render import Palette, Renderer


@pytest.fixture()
def quiet_curses(monkeypatch):
    monkeypatch.setattr(curses, "curs_set", lambda visibility: None)
    monkeypatch.setattr(Palette, "from_terminal", classmethod(lambda cls: cls()))


class TestPlay:
    def test_quit_ends_loop(self, make_window):
        window = make_window(17, 170, keys=[ord("q")])
        config = GameConfig(seed=0)
        engine = GameEngine(config)
        final = play(engine, Renderer(window, config), window.getch)
        assert final.terminated
        assert final.tick == 0
        assert window.refreshes == 1

    def test_moves_then_quits(self, make_window):
        keys = [curses.KEY_DOWN, curses.KEY_DOWN, ord("x"), curses.KEY_LEFT, ord("q")]
        window = make_window(17, 170, keys=keys)
        config = GameConfig(seed=1)
        engine = GameEngine(config)
        start = engine.state.snake.head
        final = play(engine, Renderer(window, config), window.getch)
        assert final.tick == 3
        expected = engine.grid.resolve(start[0] - 1, start[1] + 2)
        assert final.head == expected
        # One frame before every key read; none after quitting.
        assert window.refreshes == 5

    def test_ignored_keys_keep_state(self, make_window):
        window = make_window(17, 170, keys=[ord("x"), -1, ord("q")])
        config = GameConfig(seed=2)
        engine = GameEngine(config)
        before = engine.snapshot()
        final = play(engine, Renderer(window, config), window.getch)
        assert final.body == before.body
        assert final.tick == 0


class TestFitConfig:
    def test_fits_screen(self):
        cfg = fit_config_to_screen(GameConfig(), rows=24, cols=80)
        assert (cfg.width, cfg.height) == (78, 22)

    def test_too_small(self):
        with pytest.raises(TerminalTooSmallError):
            fit_config_to_screen(GameConfig(), rows=3, cols=80)


class TestRun:
    def test_run_with_fitted_field(self, make_window, quiet_curses):
        window = make_window(24, 80, keys=[curses.KEY_UP, ord("q")])
        final = run(window, GameConfig(seed=5), fit_to_screen=True)
        assert (final.width, final.height) == (78, 22)
        assert final.tick == 1
        assert window.keypad_enabled

    def test_run_rejects_small_terminal(self, make_window, quiet_curses):
        window = make_window(10, 40, keys=[ord("q")])
        with pytest.raises(TerminalTooSmallError, match="needs a 170x17"):
            run(window, GameConfig(seed=0))

    def test_run_logs_start(self, make_window, quiet_curses, caplog):
        window = make_window(17, 170, keys=[ord("q")])
        with caplog.at_level("INFO", logger=app.__name__):
            run(window, GameConfig(seed=0))
        assert "Starting 168x15 game" in caplog.text
