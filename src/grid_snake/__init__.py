"""Grid Snake — tick-based game-state engine."""

from grid_snake.engine import (
    expand_grid,
    initialize,
    restart,
    set_direction,
    spawn_food,
    step,
    toggle_pause,
)
from grid_snake.grid import CellType, RenderContext, Theme, render_text
from grid_snake.progression import PROGRESSION, ProgressionConfig
from grid_snake.session import GameSession
from grid_snake.snake import Direction
from grid_snake.state import NO_FOOD, GameState, GameStatus, seeded_rng

__all__ = [
    "NO_FOOD",
    "PROGRESSION",
    "CellType",
    "Direction",
    "GameSession",
    "GameState",
    "GameStatus",
    "ProgressionConfig",
    "RenderContext",
    "Theme",
    "expand_grid",
    "initialize",
    "render_text",
    "restart",
    "seeded_rng",
    "set_direction",
    "spawn_food",
    "step",
    "toggle_pause",
]
