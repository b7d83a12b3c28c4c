"""Mutable game state shared by the engine and its drivers."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from grid_snake.snake import Direction, Point

Rng = Callable[[], float]

# Food coordinate meaning "no free cell left".
NO_FOOD: Point = (-1, -1)

COORDINATE_CONVENTION = "origin at top-left; x increases right, y increases down"


class GameStatus(str, enum.Enum):
    """Lifecycle states for a single game."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAMEOVER = "gameover"


def default_rng() -> Rng:
    """Return an unseeded uniform ``[0, 1)`` source."""
    return np.random.default_rng().random


def seeded_rng(seed: int | None) -> Rng:
    """Return a reproducible uniform ``[0, 1)`` source for *seed*."""
    return np.random.default_rng(seed).random


@dataclass(eq=False)
class GameState:
    """Canonical state of one game.

    The snake is stored head first. ``direction_queue`` holds buffered turns
    that have not been applied yet; ``pending_direction`` is the turn the next
    tick will commit. Both sequences are deques; ``step`` converts plain
    sequences a driver assigns back into deques.
    """

    grid_size: int
    snake: deque[Point]
    direction: Direction
    pending_direction: Direction
    rng: Rng = field(repr=False)
    direction_queue: deque[Direction] = field(default_factory=deque)
    food: Point = NO_FOOD
    score: int = 0
    status: GameStatus = GameStatus.IDLE

    @property
    def head(self) -> Point:
        return self.snake[0]

    @property
    def has_food(self) -> bool:
        return self.food != NO_FOOD

    @property
    def is_full(self) -> bool:
        """True when the snake covers every cell of the board."""
        return len(self.snake) >= self.grid_size * self.grid_size

    def in_bounds(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def to_dict(self) -> dict:
        """Serialize the diagnostic snapshot of this state."""
        return {
            "coordinates": COORDINATE_CONVENTION,
            "status": self.status.value,
            "score": self.score,
            "direction": self.direction.value,
            "snake": [{"x": x, "y": y} for x, y in self.snake],
            "food": {"x": self.food[0], "y": self.food[1]},
            "gridSize": self.grid_size,
        }
