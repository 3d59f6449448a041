"""Event-driven game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from term_snake.config import GameConfig
from term_snake.food import Food, FoodSpawner
from term_snake.grid import Grid
from term_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class Action(enum.Enum):
    """Non-directional control signals."""

    QUIT = "quit"


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game."""

    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class GameState:
    """Everything the engine mutates between ticks."""

    snake: Snake
    food: Food
    direction: Direction = Direction.RIGHT
    score: int = 0
    status: GameStatus = GameStatus.RUNNING
    tick: int = 0

    @property
    def terminated(self) -> bool:
        return self.status == GameStatus.TERMINATED


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a game state, consumed by the renderer."""

    body: tuple[tuple[int, int], ...]
    food: Food
    score: int
    direction: Direction
    status: GameStatus
    tick: int
    width: int
    height: int
    header_rows: int

    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]

    @property
    def terminated(self) -> bool:
        return self.status == GameStatus.TERMINATED

    def to_dict(self) -> dict:
        """Return the snapshot as a JSON-serializable dict."""
        return {
            "tick": self.tick,
            "score": self.score,
            "status": self.status.value,
            "direction": list(self.direction.value),
            "body": [list(seg) for seg in self.body],
            "food": self.food.to_dict(),
            "grid": {
                "width": self.width,
                "height": self.height,
                "header_rows": self.header_rows,
            },
        }


class GameEngine:
    """Single-snake game engine advanced by input signals.

    The engine owns the grid, the food spawner and the one
    :class:`GameState`. Each call to :meth:`apply` handles one input
    signal: a :class:`Direction` turns the snake and moves it one tick,
    :attr:`Action.QUIT` ends the game, and anything else is ignored
    without touching the state.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        state: GameState | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(
            width=self.config.width,
            height=self.config.height,
            wall_mode=self.config.wall,
            header_rows=self.config.header_rows,
        )
        self.rng = rng if rng is not None else np.random.default_rng(
            self.config.seed,
        )
        self.spawner = FoodSpawner(
            self.grid,
            glyph=self.config.food_glyph,
            max_attempts=self.config.spawn_attempts,
            rng=self.rng,
        )
        self.state = state if state is not None else self._initial_state()

    def _initial_state(self) -> GameState:
        head = self.spawner.draw()
        snake = Snake(head)
        food = self.spawner.spawn_food(exclude=snake.body)
        logger.debug("New game: head at %s, food at %s.", head, food.position)
        return GameState(snake=snake, food=food)

    @property
    def terminated(self) -> bool:
        return self.state.terminated

    def apply(self, signal: Direction | Action | None) -> Snapshot:
        """Handle one input signal and return the settled snapshot."""
        state = self.state
        if state.terminated:
            return self.snapshot()

        if signal is Action.QUIT:
            state.status = GameStatus.TERMINATED
            logger.info(
                "Game quit at tick %d with score %d.", state.tick, state.score,
            )
            return self.snapshot()

        if not isinstance(signal, Direction):
            logger.debug("Ignoring signal %r.", signal)
            return self.snapshot()

        state.direction = signal
        self._tick()
        return self.snapshot()

    def _tick(self) -> None:
        state = self.state
        snake = state.snake

        new_head = self.grid.resolve(*snake.next_head(state.direction))
        snake.push_head(new_head)

        if new_head == state.food.position:
            self._consume()

        snake.trim()
        state.tick += 1

    def _consume(self) -> None:
        state = self.state
        state.score = min(state.score + 1, self.config.max_score)
        state.snake.grow()
        # The body already holds the new head and every segment that
        # survives the trim, so it is exactly the set to avoid.
        state.food = self.spawner.spawn_food(exclude=state.snake.body)
        logger.info(
            "Food eaten at tick %d; score %d, length %d, next food at %s.",
            state.tick, state.score, state.snake.target_length,
            state.food.position,
        )

    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the current state for rendering."""
        state = self.state
        return Snapshot(
            body=tuple(state.snake.body),
            food=state.food,
            score=state.score,
            direction=state.direction,
            status=state.status,
            tick=state.tick,
            width=self.grid.width,
            height=self.grid.height,
            header_rows=self.grid.header_rows,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return self.snapshot().to_dict()
