from __future__ import annotations

from collections import deque
import itertools
import random

import pytest

from board import Direction
from game_logic import SnakeGame


class ScriptedRng:
    """Replays fixed randint/random values; choice() returns `pick` when present, else the first item."""
    def __init__(self, ints=(1,), randoms=(0.99,), pick=None) -> None:
        self._ints = itertools.cycle(ints)
        self._randoms = itertools.cycle(randoms)
        self.pick = pick

    def randint(self, low: int, high: int) -> int:
        return next(self._ints)

    def random(self) -> float:
        return next(self._randoms)

    def choice(self, seq):
        if self.pick is not None and self.pick in seq:
            return self.pick
        return seq[0]


@pytest.fixture
def game() -> SnakeGame:
    g = SnakeGame(rng=random.Random(1234))
    # Park food out of the snake's way; tests that eat move it explicitly.
    g.food = (1, 1)
    return g


def place(game: SnakeGame, cells, direction: Direction = Direction.RIGHT) -> None:
    game.snake = deque(cells)
    game.direction = direction
    game.pending_direction = direction
