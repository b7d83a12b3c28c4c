"""Command-line tools for deterministic replays and tuning checks."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)

# One-letter shorthands accepted in --moves.
_MOVE_ALIASES = {"u": "up", "d": "down", "l": "left", "r": "right"}

# Tokens that tick without queueing a turn.
_NO_TURN = {".", "-"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid Snake replay and progression tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- replay ---
    replay_p = sub.add_parser(
        "replay", help="Run a seeded game, one tick per move.",
    )
    replay_p.add_argument("--seed", type=int, default=0)
    replay_p.add_argument(
        "--moves", type=str, default="",
        help="Comma-separated turns (up/down/left/right or u/d/l/r); "
             "'.' ticks without turning.",
    )
    replay_p.add_argument("--grid-size", type=int, default=None)
    replay_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON progression config.",
    )
    replay_p.add_argument("--render", action="store_true")
    replay_p.add_argument(
        "--theme", type=str, default="light", choices=["light", "dark"],
    )

    # --- progression ---
    prog_p = sub.add_parser(
        "progression", help="Print the score to level table.",
    )
    prog_p.add_argument("--max-score", type=int, default=100)
    prog_p.add_argument("--every", type=int, default=10)
    prog_p.add_argument("--config", type=str, default=None)

    return parser


def _load_config(path: str | None):
    from grid_snake.progression import ProgressionConfig

    return ProgressionConfig.load(path) if path else ProgressionConfig()


def _parse_moves(raw: str) -> list[str]:
    tokens = [t.strip().lower() for t in raw.split(",") if t.strip()]
    return [_MOVE_ALIASES.get(t, t) for t in tokens]


def _run_replay(args: argparse.Namespace) -> int:
    from dataclasses import replace

    from grid_snake.grid import RenderContext, render_text
    from grid_snake.session import GameSession
    from grid_snake.state import GameStatus

    config = _load_config(args.config)
    if args.grid_size is not None:
        config = replace(
            config,
            base_grid_size=args.grid_size,
            max_grid_size=max(config.max_grid_size, args.grid_size),
        )

    session = GameSession(config=config, seed=args.seed)
    for move in _parse_moves(args.moves):
        if move not in _NO_TURN:
            session.set_direction(move)
        session.step()
        if session.status == GameStatus.GAMEOVER:
            break

    logger.info(
        "Replay finished after %d ticks: %s, score %d.",
        session.ticks, session.status.value, session.state.score,
    )
    print(json.dumps(session.snapshot(), indent=2))  # noqa: T201
    if args.render:
        ctx = RenderContext.for_theme(args.theme)
        print(render_text(session.state, ctx))  # noqa: T201
    return 0


def _run_progression(args: argparse.Namespace) -> int:
    from grid_snake.progression import describe

    config = _load_config(args.config)
    step = max(1, args.every)
    print("score  speed  tick_ms  size  grid")  # noqa: T201
    for score in range(0, args.max_score + 1, step):
        row = describe(score, config)
        print(  # noqa: T201
            f"{row['score']:>5}  {row['speed_level']:>5}  "
            f"{row['tick_ms']:>7}  {row['size_level']:>4}  "
            f"{row['target_grid_size']:>4}"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "replay": _run_replay,
        "progression": _run_progression,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
