"""Score-driven speed and board-size tiers."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressionConfig:
    """Tuning knobs for how fast the game speeds up and the board grows.

    Supports JSON serialization so a tuning can be saved alongside replays.
    """

    # Speed
    base_tick_ms: int = 220
    min_tick_ms: int = 120
    speed_level_tick_drop: int = 8
    speed_points_per_level: int = 4

    # Board size
    base_grid_size: int = 20
    max_grid_size: int = 44
    size_level_grid_increase: int = 2
    size_points_per_level: int = 10

    def __post_init__(self) -> None:
        if self.min_tick_ms < 1:
            raise ValueError("min_tick_ms must be at least 1.")
        if self.base_tick_ms < self.min_tick_ms:
            raise ValueError("base_tick_ms must be >= min_tick_ms.")
        if self.speed_level_tick_drop < 1:
            raise ValueError("speed_level_tick_drop must be at least 1.")
        if self.speed_points_per_level < 1:
            raise ValueError("speed_points_per_level must be at least 1.")
        if self.max_grid_size < self.base_grid_size:
            raise ValueError("max_grid_size must be >= base_grid_size.")
        if self.size_level_grid_increase < 1:
            raise ValueError("size_level_grid_increase must be at least 1.")
        if self.size_points_per_level < 1:
            raise ValueError("size_points_per_level must be at least 1.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Progression config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> ProgressionConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))


PROGRESSION = ProgressionConfig()


def max_speed_level(cfg: ProgressionConfig = PROGRESSION) -> int:
    span = cfg.base_tick_ms - cfg.min_tick_ms
    return math.ceil(span / cfg.speed_level_tick_drop) + 1


def speed_level(score: int, cfg: ProgressionConfig = PROGRESSION) -> int:
    """Return the 1-based speed tier reached at *score*."""
    raw = score // cfg.speed_points_per_level + 1
    return min(max_speed_level(cfg), raw)


def tick_ms_for_speed_level(
    level: int, cfg: ProgressionConfig = PROGRESSION,
) -> int:
    """Tick interval for a speed tier, clamped at ``min_tick_ms``."""
    return max(
        cfg.min_tick_ms,
        cfg.base_tick_ms - (level - 1) * cfg.speed_level_tick_drop,
    )


def current_tick_ms(score: int, cfg: ProgressionConfig = PROGRESSION) -> int:
    return tick_ms_for_speed_level(speed_level(score, cfg), cfg)


def max_size_level(cfg: ProgressionConfig = PROGRESSION) -> int:
    span = cfg.max_grid_size - cfg.base_grid_size
    return span // cfg.size_level_grid_increase + 1


def size_level(score: int, cfg: ProgressionConfig = PROGRESSION) -> int:
    """Return the 1-based board-size tier reached at *score*."""
    raw = score // cfg.size_points_per_level + 1
    return min(max_size_level(cfg), raw)


def target_grid_size(score: int, cfg: ProgressionConfig = PROGRESSION) -> int:
    """Board dimension the game should have grown to at *score*."""
    return (
        cfg.base_grid_size
        + (size_level(score, cfg) - 1) * cfg.size_level_grid_increase
    )


def describe(score: int, cfg: ProgressionConfig = PROGRESSION) -> dict:
    """Summarize every tier value for *score*."""
    return {
        "score": score,
        "speed_level": speed_level(score, cfg),
        "tick_ms": current_tick_ms(score, cfg),
        "size_level": size_level(score, cfg),
        "target_grid_size": target_grid_size(score, cfg),
    }
