# Core Snake Rogue state and rules, independent from GUI code.
from __future__ import annotations

from collections import deque
from enum import Enum
import random

try:
    from .board import (
        GRID_SIZE,
        Cell,
        Direction,
        free_cells,
        random_interior_cell,
        step_clamped,
    )
except ImportError:
    from board import (
        GRID_SIZE,
        Cell,
        Direction,
        free_cells,
        random_interior_cell,
        step_clamped,
    )


INITIAL_LENGTH = 3
FOOD_POINTS = 10
DOUBLE_POINTS = 20
POINTS_PER_LEVEL = 100
LEVEL_SPEED_STEP = 0.1
POWER_UP_CHANCE = 0.3
POWER_UP_DURATION = 10.0  # seconds
SPEED_BOOST = 1.5
SLOW_FACTOR = 0.7
EATING_DECAY = 3.0
MAX_SPAWN_ATTEMPTS = 1000
TIMER_EPSILON = 1e-9  # absorbs float drift from summing fixed-size ticks


class PowerUp(Enum):
    """Collectible kinds. NONE is a real pickup that occupies a cell but does nothing."""
    SPEED = "speed"
    SLOW = "slow"
    DOUBLE_POINTS = "double_points"
    INVINCIBLE = "invincible"
    NONE = "none"


def level_for_score(score: int) -> int:
    return score // POINTS_PER_LEVEL + 1


def baseline_speed(level: int) -> float:
    """Speed multiplier a level runs at when no Speed/Slow effect applies."""
    return 1.0 + level * LEVEL_SPEED_STEP


class SnakeGame:
    """Pure game state + rules (no Tkinter/UI code)."""
    def __init__(self, rng=None) -> None:
        # Anything with randint/random/choice; defaults to the process-wide source.
        self.rng = rng if rng is not None else random
        self.score = 0
        self.high_score = 0
        self.reset()

    def reset(self) -> None:
        """Fold the score into the high score, then start a fresh run."""
        if self.score > self.high_score:
            self.high_score = self.score

        center = GRID_SIZE // 2
        self.snake: deque[Cell] = deque((center - i, center) for i in range(INITIAL_LENGTH))  # head at index 0
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT  # queued from input; applied next tick
        self.score = 0
        self.level = 1
        self.speed_multiplier = 1.0
        self.game_over = False
        self.paused = False
        self.invincibility = False
        self.eating_animation = 0.0

        self.power_up: PowerUp | None = None       # kind waiting on the board
        self.power_up_pos: Cell | None = None
        self.power_up_timer = 0.0
        self.active_effect: PowerUp | None = None  # kind collected, live until the timer runs out

        self.food: Cell = self._find_food_cell()

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def power_up_fraction(self) -> float:
        """Remaining share of the power-up timer, for the HUD bar."""
        return max(0.0, self.power_up_timer) / POWER_UP_DURATION

    @property
    def double_points_active(self) -> bool:
        if self.power_up is PowerUp.DOUBLE_POINTS:
            return True
        return self.active_effect is PowerUp.DOUBLE_POINTS and self.power_up_timer > 0

    def toggle_pause(self) -> None:
        if self.game_over:
            return
        self.paused = not self.paused

    def set_next_direction(self, new_direction: Direction | str) -> None:
        """Queue an input direction; reject instant 180-degree turns."""
        if not isinstance(new_direction, Direction):
            try:
                new_direction = Direction(new_direction)
            except ValueError:
                return
        if new_direction is self.direction.opposite:
            return
        self.pending_direction = new_direction

    def update(self, elapsed: float) -> None:
        """Advance one tick. `elapsed` is the simulated time in seconds."""
        if self.game_over or self.paused:
            return

        self.direction = self.pending_direction
        self._run_power_up_timer(elapsed)

        if self.eating_animation > 0.0:
            self.eating_animation = max(0.0, self.eating_animation - elapsed * EATING_DECAY)

        head = self.snake[0]
        new_head = step_clamped(head, self.direction)

        # Walls are sticky: pushing into an edge leaves the snake where it is.
        if new_head == head:
            return

        if not self.invincibility and new_head in self.snake:
            self.game_over = True
            return

        self.snake.appendleft(new_head)

        if new_head == self.food:
            self._eat()
        else:
            self.snake.pop()

        if self.power_up_pos is not None and new_head == self.power_up_pos:
            self._collect_power_up()

    def spawn_power_up(self) -> None:
        """Try once to drop a random power-up; a blocked cell wastes the roll."""
        pos = random_interior_cell(self.rng)
        if pos in self.snake or pos == self.food:
            return

        self.power_up = self.rng.choice(list(PowerUp))
        self.power_up_pos = pos
        self.power_up_timer = POWER_UP_DURATION

    def _run_power_up_timer(self, elapsed: float) -> None:
        if self.power_up_timer <= 0.0:
            return
        self.power_up_timer -= elapsed
        if self.power_up_timer > TIMER_EPSILON:
            return

        self.power_up_timer = 0.0
        self.power_up = None
        self.power_up_pos = None
        self.active_effect = None
        self.speed_multiplier = baseline_speed(self.level)
        self.invincibility = False

    def _eat(self) -> None:
        self.score += DOUBLE_POINTS if self.double_points_active else FOOD_POINTS
        self.eating_animation = 1.0
        self.level = level_for_score(self.score)
        self.speed_multiplier = baseline_speed(self.level)

        cell = self._find_food_cell()
        if cell is None:
            # Nowhere left to put food: the board is full.
            self.game_over = True
            return
        self.food = cell

        if self.rng.random() < POWER_UP_CHANCE and self.power_up is None:
            self.spawn_power_up()

    def _collect_power_up(self) -> None:
        kind = self.power_up
        if kind is PowerUp.SPEED:
            self.speed_multiplier *= SPEED_BOOST
        elif kind is PowerUp.SLOW:
            self.speed_multiplier *= SLOW_FACTOR
        elif kind is PowerUp.INVINCIBLE:
            self.invincibility = True
        # DOUBLE_POINTS pays out on later food; NONE has no effect.

        self.active_effect = kind
        self.power_up = None
        self.power_up_pos = None

    def _find_food_cell(self) -> Cell | None:
        """Random free interior cell, falling back to a scan once sampling gives up."""
        blocked = set(self.snake)
        if self.power_up_pos is not None:
            blocked.add(self.power_up_pos)

        for _ in range(MAX_SPAWN_ATTEMPTS):
            cell = random_interior_cell(self.rng)
            if cell not in blocked:
                return cell

        candidates = free_cells(blocked) or free_cells(blocked, interior=False)
        if not candidates:
            return None
        return self.rng.choice(candidates)


# Name the presentation shell refers to.
GameState = SnakeGame
