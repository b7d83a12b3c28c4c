"""Tick-based state transitions for a single-player snake game.

Every operation takes the :class:`~grid_snake.state.GameState` it works on and
mutates it in place. Gameplay input never raises: unknown directions, queue
overflow, reversals and calls made after game over are silently ignored.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import fields

from grid_snake.snake import Direction, Point, build_body, next_head, shift
from grid_snake.state import NO_FOOD, GameState, GameStatus, Rng, default_rng

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 20
DEFAULT_START_LENGTH = 3

# Turns buffered ahead of the tick cadence.
MAX_QUEUED_DIRECTIONS = 2


def initialize(
    grid_size: int = DEFAULT_GRID_SIZE,
    start: Iterable[Point] | None = None,
    direction: Direction | str = Direction.RIGHT,
    rng: Rng | None = None,
) -> GameState:
    """Build a fresh idle game with food already placed.

    Without *start*, a three-cell snake is centered on the board with its
    body trailing behind *direction*.
    """
    if grid_size < 1:
        raise ValueError("Grid size must be positive.")
    heading = Direction.parse(direction)
    if heading is None:
        raise ValueError(f"Unknown direction {direction!r}.")

    if start is None:
        center = grid_size // 2
        body = build_body((center, center), heading, DEFAULT_START_LENGTH)
    else:
        body = [(int(x), int(y)) for x, y in start]
    _validate_body(body, grid_size)

    state = GameState(
        grid_size=grid_size,
        snake=deque(body),
        direction=heading,
        pending_direction=heading,
        rng=rng if rng is not None else default_rng(),
    )
    state.food = spawn_food(state)
    return state


def _validate_body(body: list[Point], grid_size: int) -> None:
    if not body:
        raise ValueError("Snake must have at least one cell.")
    if len(set(body)) != len(body):
        raise ValueError("Snake cells must be distinct.")
    for x, y in body:
        if not (0 <= x < grid_size and 0 <= y < grid_size):
            raise ValueError(f"Snake cell {(x, y)} lies outside the board.")


def set_direction(state: GameState, direction: Direction | str) -> None:
    """Queue a turn for an upcoming tick.

    The turn is compared against the last queued turn (or the pending one
    when the queue is empty), so two quick turns cannot add up to a reversal.
    """
    if state.status == GameStatus.GAMEOVER:
        return
    turn = Direction.parse(direction)
    if turn is None:
        return

    queue = state.direction_queue
    last = queue[-1] if queue else state.pending_direction
    if turn == last or turn == last.opposite:
        return
    if len(queue) >= MAX_QUEUED_DIRECTIONS:
        return
    queue.append(turn)


def step(state: GameState) -> GameState:
    """Advance the game by one tick and return the same state."""
    if state.status in (GameStatus.PAUSED, GameStatus.GAMEOVER):
        return state
    if state.status == GameStatus.IDLE:
        state.status = GameStatus.RUNNING

    # Drivers may have assigned plain sequences to these fields.
    if not isinstance(state.snake, deque):
        state.snake = deque(state.snake)
    if not isinstance(state.direction_queue, deque):
        state.direction_queue = deque(state.direction_queue)

    if state.direction_queue:
        state.pending_direction = state.direction_queue.popleft()
    state.direction = state.pending_direction

    target = next_head(state.head, state.direction)
    ate_food = target == state.food

    # The tail leaves its cell this tick unless the snake is growing.
    body = set(state.snake)
    if not ate_food:
        body.discard(state.snake[-1])

    if not state.in_bounds(target) or target in body:
        state.status = GameStatus.GAMEOVER
        logger.info(
            "Snake died at %s with score %d (length %d).",
            target, state.score, len(state.snake),
        )
        return state

    state.snake.appendleft(target)
    if ate_food:
        state.score += 1
        state.food = spawn_food(state)
        logger.debug("Food eaten at %s; score %d.", target, state.score)
    else:
        state.snake.pop()
    return state


def spawn_food(state: GameState, rng: Rng | None = None) -> Point:
    """Pick a random free cell by rejection sampling.

    Returns :data:`~grid_snake.state.NO_FOOD` without drawing from *rng*
    when the snake fills the board.
    """
    if state.is_full:
        logger.warning("No empty cells available for food.")
        return NO_FOOD

    draw = rng if rng is not None else state.rng
    occupied = set(state.snake)
    size = state.grid_size
    while True:
        x = int(draw() * size)
        y = int(draw() * size)
        if (x, y) not in occupied:
            return x, y


def toggle_pause(state: GameState) -> None:
    """Flip between running and paused; other states are left alone."""
    if state.status == GameStatus.RUNNING:
        state.status = GameStatus.PAUSED
    elif state.status == GameStatus.PAUSED:
        state.status = GameStatus.RUNNING


def restart(
    state: GameState,
    grid_size: int | None = None,
    rng: Rng | None = None,
) -> GameState:
    """Reset *state* in place, keeping its board size and rng by default."""
    fresh = initialize(
        grid_size=grid_size if grid_size is not None else state.grid_size,
        rng=rng if rng is not None else state.rng,
    )
    for f in fields(fresh):
        setattr(state, f.name, getattr(fresh, f.name))
    return state


def expand_grid(
    state: GameState, amount: int = 4, max_grid_size: int = 44,
) -> bool:
    """Grow the board by up to *amount* cells per side.

    Existing cells are shifted by half the growth so the snake and food stay
    centered. Returns ``False`` without changes once the board is at
    *max_grid_size*.
    """
    if state.grid_size >= max_grid_size or amount < 1:
        return False

    new_size = min(max_grid_size, state.grid_size + amount)
    offset = (new_size - state.grid_size) // 2
    state.grid_size = new_size
    state.snake = deque(shift(p, offset) for p in state.snake)
    if state.has_food:
        state.food = shift(state.food, offset)

    logger.info("Board expanded to %dx%d.", new_size, new_size)
    return True
