"""The snake: its body on the board grid, its heading and how it moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

CELL = 10
"""Side of one grid cell in pixels; the snake moves one cell per step."""

INITIAL_LENGTH = 3
MAX_LENGTH = 1000


@dataclass(frozen=True)
class Point:
    """A position on the board in pixels."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Point:
        """Return this point shifted by ``dx`` and ``dy``."""
        return Point(self.x + dx, self.y + dy)


class Direction(Enum):
    """The four headings, each valued by its unit step (dx, dy)."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


_UP_KEYS = (ord("W"), ord("w"), 72)
_DOWN_KEYS = (ord("S"), ord("s"), 80)
_LEFT_KEYS = (ord("A"), ord("a"), 75)
_RIGHT_KEYS = (ord("D"), ord("d"), 77)

_KEY_DIRECTIONS: dict[int, Direction] = {
    **dict.fromkeys(_UP_KEYS, Direction.UP),
    **dict.fromkeys(_DOWN_KEYS, Direction.DOWN),
    **dict.fromkeys(_LEFT_KEYS, Direction.LEFT),
    **dict.fromkeys(_RIGHT_KEYS, Direction.RIGHT),
}


class Snake:
    """A snake that starts three cells long in the top-left corner, heading right."""

    def __init__(self) -> None:
        self.body: list[Point] = [
            Point((INITIAL_LENGTH - 1 - i) * CELL, 0) for i in range(INITIAL_LENGTH)
        ]
        self.direction = Direction.RIGHT

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    @property
    def head(self) -> Point:
        """The first segment of the body."""
        return self.body[0]

    def move(self) -> Point:
        """Advance one cell in the current direction and return the new head."""
        dx, dy = self.direction.value
        new_head = self.head.offset(dx * CELL, dy * CELL)
        self.body = [new_head, *self.body[:-1]]
        return new_head

    def steer(self, key: int | str) -> Direction:
        """Turn according to a key (WASD or an arrow key code); never reverse.

        Unknown keys are ignored. Returns the direction after the key.
        """
        if isinstance(key, str):
            if len(key) != 1:
                return self.direction
            key = ord(key)
        wanted = _KEY_DIRECTIONS.get(key)
        if wanted is not None and wanted is not self.direction.opposite:
            self.direction = wanted
        return self.direction

    def grow(self, amount: int) -> int:
        """Lengthen the snake by ``amount`` segments at its tail, up to MAX_LENGTH."""
        if amount < 0:
            raise ValueError("a snake cannot grow by a negative amount")
        room = MAX_LENGTH - len(self.body)
        self.body.extend([self.body[-1]] * min(amount, room))
        return len(self.body)

    def hits_itself(self) -> bool:
        """True when the head lies on another segment."""
        return self.head in self.body[1:]

    def occupies(self, point: Point) -> bool:
        """True when any segment lies on ``point``."""
        return point in self.body