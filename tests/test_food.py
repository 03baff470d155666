import random

from snakeplay.food import BAD_COUNT, BadFood, GoodFood
from snakeplay.snake import CELL, Point, Snake


class ScriptedRandom(random.Random):
    """Returns queued values from randrange, then falls back to a seeded stream."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def randrange(self, *args, **kwargs):
        if self.values:
            return self.values.pop(0)
        return super().randrange(*args, **kwargs)


def test_good_food_on_grid():
    rng = random.Random(1)
    for _ in range(200):
        food = GoodFood(rng)
        assert food.position.x % CELL == 0 and food.position.y % CELL == 0
        assert 0 <= food.position.x < 800
        assert 0 <= food.position.y < 600


def test_good_food_uses_rng_columns_and_rows():
    food = GoodFood(ScriptedRandom([3, 4]))
    assert food.position == Point(3 * CELL, 4 * CELL)


def test_good_food_relocate_avoids_snake():
    snake = Snake()
    head = snake.head
    rng = ScriptedRandom([0, 0, head.x // CELL, head.y // CELL, 5, 5])
    food = GoodFood(rng)
    moved = food.relocate(snake)
    assert moved == food.position
    assert not snake.occupies(moved)
    assert moved == Point(5 * CELL, 5 * CELL)


def test_bad_food_count_and_bounds():
    bad = BadFood(random.Random(2))
    assert len(bad.positions) == BAD_COUNT
    for p in bad.positions:
        assert 0 <= p.x < 700 and 0 <= p.y < 500
        assert p.x % CELL == 0 and p.y % CELL == 0


def test_bad_food_contains():
    bad = BadFood(random.Random(3))
    assert all(bad.contains(p) for p in bad.positions)
    assert not bad.contains(Point(-CELL, -CELL))


def test_bad_food_relocate_avoids_snake():
    snake = Snake()
    head = snake.head
    first = [head.x // CELL, head.y // CELL] + [1, 1] * (BAD_COUNT - 1)
    bad = BadFood(ScriptedRandom([0, 0] * BAD_COUNT + first))
    positions = bad.relocate(snake)
    assert positions == bad.positions
    assert len(positions) == BAD_COUNT
    assert not any(snake.occupies(p) for p in positions)


def test_same_seed_same_food():
    good = GoodFood(random.Random(7))
    assert good.position == GoodFood(random.Random(7)).position
    assert good.position.x % CELL == 0 and 0 <= good.position.x < 800
    assert good.position.y % CELL == 0 and 0 <= good.position.y < 600
    bad = BadFood(random.Random(7))
    assert bad.positions == BadFood(random.Random(7)).positions
    assert len(bad.positions) == BAD_COUNT