"""In-memory registry of game sessions served over HTTP."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field

from grid_snake.progression import ProgressionConfig
from grid_snake.server.models import GameSummary
from grid_snake.session import GameSession

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 100


@dataclass
class SessionEntry:
    """A registered session and its bookkeeping."""

    game_id: str
    session: GameSession
    seed: int | None = None
    created_at: float = field(default_factory=time.monotonic)

    def summary(self) -> GameSummary:
        state = self.session.state
        return GameSummary(
            game_id=self.game_id,
            status=state.status,
            score=state.score,
            grid_size=state.grid_size,
            tick_ms=self.session.tick_ms,
            seed=self.seed,
        )


class SessionManager:
    """Central registry managing all game sessions."""

    def __init__(self, max_sessions: int = _MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1.")
        self._sessions: dict[str, SessionEntry] = {}
        self._max_sessions = max_sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def create_session(
        self,
        seed: int | None = None,
        config: ProgressionConfig | None = None,
    ) -> SessionEntry:
        """Start a new idle game and register it."""
        session = GameSession(config=config, seed=seed)
        game_id = uuid.uuid4().hex[:12]
        entry = SessionEntry(game_id=game_id, session=session, seed=seed)
        self._sessions[game_id] = entry
        logger.info(
            "Session %s created (grid=%d, seed=%s).",
            game_id, session.state.grid_size, seed,
        )
        self._prune()
        return entry

    def get(self, game_id: str) -> SessionEntry:
        entry = self._sessions.get(game_id)
        if entry is None:
            raise KeyError(f"Game {game_id} not found.")
        return entry

    def remove(self, game_id: str) -> None:
        if self._sessions.pop(game_id, None) is None:
            raise KeyError(f"Game {game_id} not found.")
        logger.info("Session %s removed.", game_id)

    def list_sessions(self) -> list[GameSummary]:
        return [entry.summary() for entry in self._sessions.values()]

    def _prune(self) -> None:
        """Drop the oldest sessions beyond the registry bound."""
        overflow = len(self._sessions) - self._max_sessions
        if overflow <= 0:
            return
        oldest = sorted(self._sessions.values(), key=lambda e: e.created_at)
        for stale in oldest[:overflow]:
            self._sessions.pop(stale.game_id, None)
        logger.info(
            "Pruned %d sessions (retaining up to %d).",
            overflow, self._max_sessions,
        )

    def clear(self) -> None:
        self._sessions.clear()
        logger.info("SessionManager cleanup complete.")
