"""Driver that runs one game against elapsed time and score progression."""

from __future__ import annotations

import json
import logging

from grid_snake import engine, progression
from grid_snake.progression import ProgressionConfig
from grid_snake.snake import Direction
from grid_snake.state import GameState, GameStatus, Rng, seeded_rng

logger = logging.getLogger(__name__)

_STATUS_TEXT: dict[GameStatus, str] = {
    GameStatus.IDLE: "Press any direction to start",
    GameStatus.RUNNING: "Running",
    GameStatus.PAUSED: "Paused",
    GameStatus.GAMEOVER: "Game over. Press restart to play again.",
}


class GameSession:
    """Owns a :class:`GameState` and decides when it ticks.

    Callers report elapsed wall time through :meth:`advance_time`; the
    session turns it into whole ticks at the interval the current score
    allows and grows the board as the score crosses size tiers.
    """

    def __init__(
        self,
        config: ProgressionConfig | None = None,
        rng: Rng | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else ProgressionConfig()
        if rng is None and seed is not None:
            rng = seeded_rng(seed)
        self.state = engine.initialize(
            grid_size=self.config.base_grid_size, rng=rng,
        )
        self.accumulator_ms = 0.0
        self.ticks = 0

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def tick_ms(self) -> int:
        return progression.current_tick_ms(self.state.score, self.config)

    def set_direction(self, direction: Direction | str) -> None:
        engine.set_direction(self.state, direction)

    def toggle_pause(self) -> None:
        engine.toggle_pause(self.state)

    def restart(self) -> None:
        """Start over on the base board and drop any banked time."""
        engine.restart(self.state, grid_size=self.config.base_grid_size)
        self.accumulator_ms = 0.0
        self.ticks = 0

    def step(self) -> GameState:
        """Run exactly one tick, then catch the board size up."""
        engine.step(self.state)
        self.ticks += 1
        self.sync_board_size()
        return self.state

    def advance_time(self, ms: float) -> int:
        """Bank *ms* of elapsed time and run every tick it pays for.

        Returns the number of ticks run.
        """
        if ms > 0:
            self.accumulator_ms += ms
        ran = 0
        while self.accumulator_ms >= self.tick_ms:
            # The interval is read before stepping; eating may shorten it.
            interval = self.tick_ms
            self.step()
            self.accumulator_ms -= interval
            ran += 1
        return ran

    def sync_board_size(self) -> None:
        """Expand the board until it matches the score's size tier."""
        target = progression.target_grid_size(self.state.score, self.config)
        while self.state.grid_size < target:
            expanded = engine.expand_grid(
                self.state,
                self.config.size_level_grid_increase,
                self.config.max_grid_size,
            )
            if not expanded:
                break

    def status_text(self) -> str:
        return _STATUS_TEXT[self.state.status]

    def hud(self) -> dict:
        """Values a heads-up display shows next to the board."""
        score = self.state.score
        size = self.state.grid_size
        return {
            "score": score,
            "speed_level": progression.speed_level(score, self.config),
            "size_level": progression.size_level(score, self.config),
            "tick_ms": self.tick_ms,
            "board_size": f"{size}x{size}",
            "status_text": self.status_text(),
        }

    def snapshot(self) -> dict:
        return self.state.to_dict()

    def render_game_to_text(self) -> str:
        """Return the diagnostic snapshot as compact JSON."""
        return json.dumps(self.snapshot(), separators=(",", ":"))
