"""The running score and the best score kept in a file."""

from __future__ import annotations

import os
from pathlib import Path

POINTS_PER_FOOD = 10


class Score:
    """A game's score, with its best ever value stored at ``path``."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.points = 0
        self.best = 0

    def add(self, points: int) -> int:
        """Add ``points`` to the score and return the new total."""
        self.points += points
        return self.points

    def update_best(self) -> bool:
        """Raise the best score to the current one if beaten, saving it. True if raised."""
        if self.points > self.best:
            self.best = self.points
            self.save_best()
            return True
        return False

    def load_best(self) -> int:
        """Read the best score from the file; keep the current one if it cannot be read."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError:
            return self.best
        fields = text.split()
        if fields:
            try:
                self.best = int(fields[0])
            except ValueError:
                pass
        return self.best

    def save_best(self) -> None:
        """Write the best score to the file."""
        self.path.write_text(str(self.best), encoding="utf-8")