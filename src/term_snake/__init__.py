"""term-snake: terminal snake game engine."""

from term_snake.config import GameConfig
from term_snake.engine import Action, GameEngine, GameState, GameStatus, Snapshot
from term_snake.food import Food, FoodSpawner
from term_snake.grid import Grid, WallMode
from term_snake.snake import Direction, Snake

__all__ = [
    "Action",
    "Direction",
    "Food",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameState",
    "GameStatus",
    "Grid",
    "Snake",
    "Snapshot",
    "WallMode",
]
