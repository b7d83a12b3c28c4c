"""REST API route handlers for single-player game sessions."""

from __future__ import annotations

from dataclasses import replace

from fastapi import APIRouter, HTTPException, Request, Response

from grid_snake.progression import ProgressionConfig
from grid_snake.server.models import (
    AdvanceRequest,
    CreateGameRequest,
    DirectionRequest,
    GameSummary,
    GameView,
)
from grid_snake.server.session_manager import SessionEntry, SessionManager

router = APIRouter(prefix="/games", tags=["games"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def _get_entry(request: Request, game_id: str) -> SessionEntry:
    try:
        return _get_manager(request).get(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


def _view(entry: SessionEntry, ticks_run: int | None = None) -> GameView:
    return GameView(
        game_id=entry.game_id,
        state=entry.session.snapshot(),
        hud=entry.session.hud(),
        ticks_run=ticks_run,
    )


@router.post("", status_code=201)
async def create_game(body: CreateGameRequest, request: Request) -> GameSummary:
    """Create a new idle game."""
    overrides = body.model_dump(exclude_none=True, exclude={"seed"})
    try:
        config = replace(ProgressionConfig(), **overrides)
        entry = _get_manager(request).create_session(
            seed=body.seed, config=config,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return entry.summary()


@router.get("")
async def list_games(request: Request) -> list[GameSummary]:
    """List all registered games."""
    return _get_manager(request).list_sessions()


@router.get("/{game_id}")
async def get_game(game_id: str, request: Request) -> GameView:
    """Get the snapshot and HUD values of a game."""
    return _view(_get_entry(request, game_id))


@router.post("/{game_id}/direction")
async def set_direction(
    game_id: str, body: DirectionRequest, request: Request,
) -> GameView:
    """Queue a turn; unknown or disallowed turns are ignored."""
    entry = _get_entry(request, game_id)
    entry.session.set_direction(body.direction)
    return _view(entry)


@router.post("/{game_id}/step")
async def step_game(game_id: str, request: Request) -> GameView:
    """Run a single tick."""
    entry = _get_entry(request, game_id)
    entry.session.step()
    return _view(entry, ticks_run=1)


@router.post("/{game_id}/advance")
async def advance_game(
    game_id: str, body: AdvanceRequest, request: Request,
) -> GameView:
    """Report elapsed time and run the ticks it covers."""
    entry = _get_entry(request, game_id)
    ran = entry.session.advance_time(body.ms)
    return _view(entry, ticks_run=ran)


@router.post("/{game_id}/pause")
async def toggle_pause(game_id: str, request: Request) -> GameView:
    entry = _get_entry(request, game_id)
    entry.session.toggle_pause()
    return _view(entry)


@router.post("/{game_id}/restart")
async def restart_game(game_id: str, request: Request) -> GameView:
    entry = _get_entry(request, game_id)
    entry.session.restart()
    return _view(entry)


@router.delete("/{game_id}", status_code=204)
async def delete_game(game_id: str, request: Request) -> Response:
    try:
        _get_manager(request).remove(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
