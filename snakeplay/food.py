"""Food on the board: one piece that feeds the snake, and ten that kill it."""

from __future__ import annotations

import random

from snakeplay.snake import CELL, Point, Snake

GOOD_COLUMNS = 80
GOOD_ROWS = 60
BAD_COLUMNS = 70
BAD_ROWS = 50
BAD_COUNT = 10


def _random_point(rng: random.Random, columns: int, rows: int) -> Point:
    return Point(rng.randrange(columns) * CELL, rng.randrange(rows) * CELL)


class GoodFood:
    """A single piece of food at a random cell."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng
        self.position = _random_point(rng, GOOD_COLUMNS, GOOD_ROWS)

    def relocate(self, snake: Snake) -> Point:
        """Move to a new random cell not covered by ``snake``."""
        position = _random_point(self.rng, GOOD_COLUMNS, GOOD_ROWS)
        while snake.occupies(position):
            position = _random_point(self.rng, GOOD_COLUMNS, GOOD_ROWS)
        self.position = position
        return position


class BadFood:
    """Ten poisonous obstacles at random cells."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng
        self.positions = self._scatter()

    def _scatter(self) -> tuple[Point, ...]:
        return tuple(_random_point(self.rng, BAD_COLUMNS, BAD_ROWS) for _ in range(BAD_COUNT))

    def relocate(self, snake: Snake) -> tuple[Point, ...]:
        """Scatter all obstacles again until none lies on ``snake``."""
        positions = self._scatter()
        while any(snake.occupies(p) for p in positions):
            positions = self._scatter()
        self.positions = positions
        return positions

    def contains(self, point: Point) -> bool:
        """True when an obstacle lies on ``point``."""
        return point in self.positions