"""One round of play: a snake, its food, the obstacles and the score."""

from __future__ import annotations

import random
from enum import Enum

from snakeplay.food import BadFood, GoodFood
from snakeplay.score import POINTS_PER_FOOD, Score
from snakeplay.snake import Direction, Snake

BOARD_SIZE = 800
"""Width and height of the board in pixels."""

GROWTH_PER_FOOD = 2


class Mode(Enum):
    """The two ways to play."""

    NORMAL = "normal"
    OBSTACLES = "obstacles"

    @property
    def best_score_file(self) -> str:
        """Name of the file that keeps this mode's best score."""
        return "Score1.txt" if self is Mode.NORMAL else "Score2.txt"


class Game:
    """A round that advances one step at a time until the snake dies."""

    def __init__(
        self,
        mode: Mode | str,
        rng: random.Random | None = None,
        score: Score | None = None,
    ) -> None:
        self.mode = Mode(mode)
        self.rng = rng if rng is not None else random.Random()
        self.score = score if score is not None else Score(self.mode.best_score_file)
        self.score.load_best()
        self.snake = Snake()
        self.food = GoodFood(self.rng)
        self.obstacles = BadFood(self.rng) if self.mode is Mode.OBSTACLES else None
        self._over = False

    def steer(self, key: int | str) -> Direction:
        """Pass a key press on to the snake and return its heading."""
        return self.snake.steer(key)

    def step(self) -> bool:
        """Move the snake one cell, feed it if it reached the food, and check for death.

        Returns True when the snake ate. Raises RuntimeError once the game is over.
        """
        if self._over:
            raise RuntimeError("the game is over")
        self.snake.move()
        ate = self.snake.head == self.food.position
        if ate:
            self.food.relocate(self.snake)
            self.snake.grow(GROWTH_PER_FOOD)
            self.score.add(POINTS_PER_FOOD)
        self.score.update_best()
        self._over = self._collided()
        return ate

    def is_over(self) -> bool:
        """True once the snake has hit a wall, itself or an obstacle."""
        return self._over

    def _collided(self) -> bool:
        head = self.snake.head
        if head.x < 0 or head.y < 0 or head.x > BOARD_SIZE or head.y > BOARD_SIZE:
            return True
        if self.snake.hits_itself():
            return True
        return self.obstacles is not None and self.obstacles.contains(head)