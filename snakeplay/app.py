"""The windowed game: a start menu, two modes of play, help and a farewell screen."""

from __future__ import annotations

import argparse
import random
from collections import deque
from enum import Enum
from pathlib import Path

import pygame

from snakeplay.game import BOARD_SIZE, Game, Mode
from snakeplay.score import Score
from snakeplay.snake import CELL, Point

FRAME_MS = 50

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BLUE = (0, 0, 170)
RED = (170, 0, 0)

_FONT_NAMES = "dengxian,microsoftyahei,simhei,notosanscjksc,wenquanyimicrohei"

_ARROW_CODES = {
    pygame.K_UP: 72,
    pygame.K_DOWN: 80,
    pygame.K_LEFT: 75,
    pygame.K_RIGHT: 77,
}


class MenuChoice(Enum):
    """The buttons of the start menu."""

    PLAY = "play"
    OBSTACLES = "obstacles"
    HELP = "help"
    EXIT = "exit"


_BUTTONS: tuple[tuple[MenuChoice, tuple[int, int, int, int], str], ...] = (
    (MenuChoice.PLAY, (287, 503, 207, 268), "普通模式"),
    (MenuChoice.OBSTACLES, (277, 500, 326, 383), "障碍模式"),
    (MenuChoice.HELP, (274, 494, 454, 511), "游戏说明"),
    (MenuChoice.EXIT, (308, 424, 588, 648), "退出"),
)


def menu_choice(x: int, y: int) -> MenuChoice | None:
    """Return the menu button under the point (x, y), or None."""
    for choice, (left, right, top, bottom), _ in _BUTTONS:
        if left < x < right and top < y < bottom:
            return choice
    return None


class _Quit(Exception):
    """The window was closed."""


class _Audio:
    """Music and sound effects read from an assets directory, silent when absent."""

    def __init__(self, assets: Path | None) -> None:
        self.assets = assets
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
        except pygame.error:
            self.enabled = False
        else:
            self.enabled = True

    def _path(self, name: str) -> Path | None:
        if not self.enabled or self.assets is None:
            return None
        path = self.assets / name
        return path if path.is_file() else None

    def play(self, name: str) -> None:
        sound = self._sounds.get(name)
        if sound is None:
            path = self._path(name)
            if path is None:
                return
            sound = self._sounds[name] = pygame.mixer.Sound(str(path))
        sound.play()

    def loop(self, name: str) -> None:
        path = self._path(name)
        if path is not None:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(-1)

    def stop(self) -> None:
        if self.enabled:
            pygame.mixer.music.stop()


def _key_code(event: pygame.event.Event) -> int | str | None:
    if event.key in _ARROW_CODES:
        return _ARROW_CODES[event.key]
    return event.unicode if len(event.unicode) == 1 else None


class _App:
    def __init__(self, screen: pygame.Surface, rng: random.Random, data_dir: Path, assets: Path | None):
        self.screen = screen
        self.rng = rng
        self.data_dir = data_dir
        self.assets = assets
        self.audio = _Audio(assets)
        self.small = pygame.font.SysFont(_FONT_NAMES, 25)
        self.large = pygame.font.SysFont(_FONT_NAMES, 50)

    def run(self) -> None:
        while True:
            choice = self.menu()
            self.audio.stop()
            self.audio.play("click.wav")
            if choice is MenuChoice.PLAY:
                self.play(Mode.NORMAL)
            elif choice is MenuChoice.OBSTACLES:
                self.play(Mode.OBSTACLES)
            elif choice is MenuChoice.HELP:
                self.explain()
            elif not self.farewell():
                return

    def _background(self, name: str) -> bool:
        if self.assets is None or not (self.assets / name).is_file():
            return False
        image = pygame.image.load(str(self.assets / name))
        self.screen.blit(pygame.transform.scale(image, (BOARD_SIZE, BOARD_SIZE)), (0, 0))
        return True

    def _text(self, font: pygame.font.Font, text: str, color, pos) -> None:
        self.screen.blit(font.render(text, True, color), pos)

    def _next_event(self) -> pygame.event.Event:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            raise _Quit
        return event

    def _wait_key(self) -> pygame.event.Event:
        while True:
            event = self._next_event()
            if event.type == pygame.KEYDOWN:
                return event

    def menu(self) -> MenuChoice:
        self.screen.fill(WHITE)
        if not self._background("startbg.jpg"):
            for _, (left, right, top, bottom), label in _BUTTONS:
                rect = pygame.Rect(left, top, right - left, bottom - top)
                pygame.draw.rect(self.screen, BLUE, rect, 2)
                rendered = self.large.render(label, True, BLUE)
                self.screen.blit(rendered, rendered.get_rect(center=rect.center))
        pygame.display.flip()
        self.audio.loop("startbgm.mp3")
        while True:
            event = self._next_event()
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                choice = menu_choice(*event.pos)
                if choice is not None:
                    return choice

    def _cell(self, point: Point, color) -> None:
        pygame.draw.rect(self.screen, color, (point.x, point.y, CELL, CELL))

    def _random_color(self) -> tuple[int, int, int]:
        return (self.rng.randrange(255), self.rng.randrange(255), self.rng.randrange(255))

    def play(self, mode: Mode) -> None:
        game = Game(mode, self.rng, Score(self.data_dir / mode.best_score_file))
        color = BLUE if mode is Mode.NORMAL else RED
        pending: deque[int | str] = deque()
        clock = pygame.time.Clock()
        self.audio.loop("gamebgm.mp3")
        while not game.is_over():
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise _Quit
                if event.type == pygame.KEYDOWN:
                    key = _key_code(event)
                    if key is not None:
                        pending.append(key)
            self.screen.fill(WHITE)
            for segment in game.snake:
                self._cell(segment, self._random_color())
            if game.step():
                self.audio.play("eat.wav")
            self._text(self.small, f"你的分数为：{game.score.points}", color, (0, 0))
            self._text(self.small, f"最高分分数：{game.score.best}", color, (0, 775))
            self._cell(game.food.position, self._random_color())
            if game.obstacles is not None:
                for obstacle in game.obstacles.positions:
                    self._cell(obstacle, BLACK)
            pygame.display.flip()
            if pending:
                game.steer(pending.popleft())
            clock.tick(1000 // FRAME_MS)
        self.audio.stop()
        self.audio.play("over.wav")
        self.game_over()

    def game_over(self) -> None:
        rendered = self.large.render("GAME OVER", True, RED)
        self.screen.blit(rendered, rendered.get_rect(center=(BOARD_SIZE // 2, BOARD_SIZE // 2)))
        pygame.display.flip()
        pygame.event.clear()
        while True:
            event = self._next_event()
            if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                return

    def explain(self) -> None:
        self.screen.fill(WHITE)
        if not self._background("explain.png"):
            lines = (
                "W/A/S/D 或方向键控制蛇的方向",
                "吃到食物：长度加二，分数加十",
                "撞墙或撞到自己：游戏结束",
                "障碍模式：碰到黑色方块也会结束",
                "按任意键返回",
            )
            for row, line in enumerate(lines):
                self._text(self.small, line, BLUE, (100, 250 + row * 50))
        pygame.display.flip()
        self._wait_key()

    def farewell(self) -> bool:
        """Show the farewell screen; True to go back to the menu."""
        self.screen.fill(WHITE)
        self._background("overbg.png")
        self._text(self.large, "THANKS", BLUE, (330, 300))
        self._text(self.large, "再见!!!", BLUE, (330, 360))
        self._text(self.small, "按任意键继续", BLUE, (20, 20))
        self._text(self.small, "按0返回", BLUE, (600, 20))
        pygame.display.flip()
        return self._wait_key().unicode == "0"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snakeplay", description="Play snake in a window.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random board")
    parser.add_argument(
        "--data-dir", type=Path, default=Path("."), help="directory that keeps the best scores"
    )
    parser.add_argument(
        "--assets", type=Path, default=None, help="directory with optional images and sounds"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the game window until the player leaves."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((BOARD_SIZE, BOARD_SIZE))
        pygame.display.set_caption("Snake")
        app = _App(screen, random.Random(args.seed), args.data_dir, args.assets)
        try:
            app.run()
        except _Quit:
            pass
    finally:
        pygame.quit()
    return 0