"""Tests for the Snake module."""

import pytest

from term_snake.snake import Direction, Snake


class TestDirection:
    def test_unit_vectors(self):
        for direction in Direction:
            dx, dy = direction.value
            assert abs(dx) + abs(dy) == 1

    def test_screen_orientation(self):
        assert Direction.RIGHT.value == (1, 0)
        assert Direction.UP.value == (0, -1)


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake((5, 5))
        assert snake.head == (5, 5)
        assert list(snake.body) == [(5, 5)]
        assert snake.target_length == 1
        assert len(snake) == 1

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake((0, 0), target_length=0)


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake((5, 5))
        assert snake.next_head(Direction.RIGHT) == (6, 5)
        assert snake.next_head(Direction.UP) == (5, 4)

    def test_next_head_is_unbounded(self):
        snake = Snake((0, 0))
        assert snake.next_head(Direction.LEFT) == (-1, 0)

    def test_move_without_growth(self):
        snake = Snake((5, 5))
        snake.push_head((6, 5))
        snake.trim()
        assert list(snake.body) == [(6, 5)]

    def test_move_with_growth(self):
        snake = Snake((5, 5))
        snake.push_head((6, 5))
        snake.grow()
        snake.trim()
        assert list(snake.body) == [(6, 5), (5, 5)]

    def test_trim_drops_tail_first(self):
        snake = Snake((0, 0), target_length=1)
        snake.push_head((1, 0))
        snake.push_head((2, 0))
        assert snake.trim() is None
        assert list(snake.body) == [(2, 0)]

