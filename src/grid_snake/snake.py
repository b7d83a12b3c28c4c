"""Movement directions and snake body helpers."""

from __future__ import annotations

import enum

Point = tuple[int, int]


class Direction(str, enum.Enum):
    """Cardinal movement directions, valued by their input token."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Point:
        """Return the (dx, dy) unit vector for this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, token: object) -> Direction | None:
        """Return the direction named by *token*, or ``None`` if unknown."""
        if isinstance(token, Direction):
            return token
        if not isinstance(token, str):
            return None
        try:
            return cls(token)
        except ValueError:
            return None


# y grows downward.
_DELTAS: dict[Direction, Point] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def build_body(
    head: Point, direction: Direction = Direction.RIGHT, length: int = 3,
) -> list[Point]:
    """Lay out a straight body trailing behind *head*, opposite to *direction*."""
    if length < 1:
        raise ValueError("Snake length must be at least 1.")
    dx, dy = direction.delta
    x, y = head
    return [(x - dx * i, y - dy * i) for i in range(length)]


def next_head(head: Point, direction: Direction) -> Point:
    """Compute the cell the head moves into without moving."""
    dx, dy = direction.delta
    return head[0] + dx, head[1] + dy


def shift(point: Point, offset: int) -> Point:
    return point[0] + offset, point[1] + offset
