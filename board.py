# Grid geometry shared by the rules layer and the presentation shell.
from __future__ import annotations

from enum import Enum
from typing import Iterable

import numpy as np


GRID_SIZE = 30

Cell = tuple[int, int]


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]


OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def step_clamped(cell: Cell, direction: Direction) -> Cell:
    """Move one tile in `direction`, pinning the result to the board edge."""
    dx, dy = STEPS[direction]
    x, y = cell
    return clamp(x + dx, 0, GRID_SIZE - 1), clamp(y + dy, 0, GRID_SIZE - 1)


def in_interior(cell: Cell) -> bool:
    x, y = cell
    return 1 <= x <= GRID_SIZE - 2 and 1 <= y <= GRID_SIZE - 2


def random_interior_cell(rng) -> Cell:
    # randint is inclusive on both ends: [1, GRID_SIZE - 2].
    return rng.randint(1, GRID_SIZE - 2), rng.randint(1, GRID_SIZE - 2)


def occupancy_grid(cells: Iterable[Cell]) -> np.ndarray:
    """Boolean grid indexed [y, x], True where a cell is taken."""
    grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)
    for x, y in cells:
        grid[y, x] = True
    return grid


def free_cells(occupied: Iterable[Cell], interior: bool = True) -> list[Cell]:
    """All untaken cells, optionally limited to the non-edge interior."""
    free = ~occupancy_grid(occupied)
    if interior:
        free[0, :] = False
        free[-1, :] = False
        free[:, 0] = False
        free[:, -1] = False
    return [(int(x), int(y)) for y, x in np.argwhere(free)]
