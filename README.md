# snakeplay

A classic snake game on an 800 × 800 board. Steer the snake to the food, grow
longer and score points, and avoid the walls and your own tail.

## Installing

```
pip install .
```

## Playing

```
snakeplay
```

Options:

- `--seed N`: seed the random board, so the food and obstacles come out the
  same every time.
- `--data-dir DIR`: the directory that keeps the best-score files (default:
  the working directory).
- `--assets DIR`: a directory with optional images and sounds (see below).

The start menu has four buttons: two games, a help screen and exit. Click one
with the left mouse button.

- **Normal mode**: eat the coloured food. Each bite adds 10 points and makes
  the snake 2 segments longer.
- **Obstacle mode**: the same game with ten black poison blocks on the board.
  Touching one ends the game.
- **Help**: a short explanation of the rules; press any key to go back.
- **Exit**: a farewell screen. Press `0` to return to the menu, or any other
  key to quit.

The game ends when the snake's head moves off the board, runs into its own
body, or (in obstacle mode) hits a poison block. A "GAME OVER" message is then
shown until you press a key or click, and the menu comes back. Closing the
window quits at any time.

### Controls

| Key                | Direction |
|--------------------|-----------|
| `W` / `↑`          | up        |
| `S` / `↓`          | down      |
| `A` / `←`          | left      |
| `D` / `→`          | right     |

The snake cannot turn back on itself: a key for the opposite of its current
direction is ignored. Key presses are queued and applied one per frame.

### High scores

Each mode keeps its own best score in a text file in the data directory:
`Score1.txt` for normal mode and `Score2.txt` for obstacle mode. The file is
rewritten whenever the current score beats the record.

### Images and sounds

No images or sounds come with the package. When `--assets` points to a
directory, these files are used if present: `startbg.jpg`, `explain.png` and
`overbg.png` as backgrounds for the menu, help and farewell screens;
`startbgm.mp3` and `gamebgm.mp3` as looping music; `click.wav`, `eat.wav` and
`over.wav` as sound effects. Without them the menu and help screen are drawn
as plain text and the game is silent.

## Using the pieces

The game logic does not depend on the display, so you can drive it yourself:

```python
import random
from snakeplay.game import Game, Mode
from snakeplay.score import Score

game = Game(Mode.NORMAL, random.Random(1), Score("best.txt"))
game.steer("s")
while not game.is_over():
    game.step()
print(game.score.points, game.score.best)
```

`Game.step()` moves the snake one cell and returns `True` when it ate; calling
it after the game is over raises `RuntimeError`.

`snakeplay.snake.Snake`, `snakeplay.food.GoodFood`, `snakeplay.food.BadFood`
and `snakeplay.score.Score` can also be used on their own. `snakeplay.app`
offers `menu_choice(x, y)`, which tells which menu button lies under a point.

## Running the tests

```
pip install .[test]
pytest
```