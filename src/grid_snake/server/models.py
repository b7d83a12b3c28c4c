"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from grid_snake.state import GameStatus


class CreateGameRequest(BaseModel):
    """Request body for POST /games.

    Progression fields left unset fall back to the defaults.
    """

    seed: int | None = None
    base_tick_ms: int | None = Field(default=None, ge=1)
    min_tick_ms: int | None = Field(default=None, ge=1)
    base_grid_size: int | None = Field(default=None, ge=4, le=200)
    max_grid_size: int | None = Field(default=None, ge=4, le=200)


class DirectionRequest(BaseModel):
    """Request body for POST /games/{game_id}/direction."""

    direction: str = Field(min_length=1, max_length=16)


class AdvanceRequest(BaseModel):
    """Request body for POST /games/{game_id}/advance."""

    ms: float = Field(ge=0, le=60_000)


class GameSummary(BaseModel):
    """Compact session info for list endpoints."""

    game_id: str
    status: GameStatus
    score: int
    grid_size: int
    tick_ms: int
    seed: int | None = None


class GameView(BaseModel):
    """Full snapshot plus HUD values for a session."""

    game_id: str
    state: dict
    hud: dict
    ticks_run: int | None = None
