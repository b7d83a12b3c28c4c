"""Board rasterization and themed text rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np

from grid_snake.state import GameState


class CellType(enum.IntEnum):
    """Integer codes stored in the board array."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    FOOD = 3


def to_cells(state: GameState) -> np.ndarray:
    """Rasterize *state* into an ``int8`` array indexed ``[y, x]``."""
    cells = np.zeros((state.grid_size, state.grid_size), dtype=np.int8)
    if state.has_food:
        fx, fy = state.food
        cells[fy, fx] = CellType.FOOD
    for x, y in state.snake:
        cells[y, x] = CellType.SNAKE
    hx, hy = state.head
    cells[hy, hx] = CellType.HEAD
    return cells


@dataclass(frozen=True)
class Theme:
    """Glyphs used to draw each cell type."""

    name: str
    empty: str = "."
    snake: str = "o"
    head: str = "@"
    food: str = "*"
    wall: str = "#"

    def glyph(self, cell: CellType) -> str:
        return {
            CellType.EMPTY: self.empty,
            CellType.SNAKE: self.snake,
            CellType.HEAD: self.head,
            CellType.FOOD: self.food,
        }[CellType(cell)]


THEMES: dict[str, Theme] = {
    "light": Theme(name="light"),
    "dark": Theme(
        name="dark", empty=" ", snake="▓", head="█",
        food="●", wall="░",
    ),
}


@dataclass
class RenderContext:
    """Everything a render call needs besides the game state itself."""

    theme: Theme = field(default_factory=lambda: THEMES["light"])
    border: bool = True

    @classmethod
    def for_theme(cls, name: str, border: bool = True) -> RenderContext:
        try:
            theme = THEMES[name]
        except KeyError:
            raise KeyError(f"Theme {name!r} not found.") from None
        return cls(theme=theme, border=border)


def render_text(state: GameState, ctx: RenderContext | None = None) -> str:
    """Draw the board as lines of glyphs, top row first."""
    ctx = ctx if ctx is not None else RenderContext()
    theme = ctx.theme
    rows = [
        "".join(theme.glyph(c) for c in row) for row in to_cells(state)
    ]
    if ctx.border:
        edge = theme.wall * (state.grid_size + 2)
        rows = [edge] + [f"{theme.wall}{r}{theme.wall}" for r in rows] + [edge]
    return "\n".join(rows)
