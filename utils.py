# Shared shell helpers: key bindings, tick cadence, board encoding, and headless episodes.
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

try:
    from .board import GRID_SIZE, Direction, step_clamped
    from .game_logic import PowerUp, SnakeGame
except ImportError:
    from board import GRID_SIZE, Direction, step_clamped
    from game_logic import PowerUp, SnakeGame


BASE_INTERVAL = 0.15  # seconds between ticks at speed multiplier 1.0
TICK_ELAPSED = 0.1    # simulated seconds handed to update() per tick

# Tk keysyms; letters are lowercased before lookup so caps lock does not matter.
KEY_DIRECTIONS = {
    "Up": Direction.UP,
    "Down": Direction.DOWN,
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

# Cell codes for encode_board_state.
EMPTY = 0
BODY = 1
HEAD = 2
FOOD = 3
POWER_UP = 4

POWER_UP_GLYPHS = {
    PowerUp.SPEED: "S",
    PowerUp.SLOW: "L",
    PowerUp.DOUBLE_POINTS: "D",
    PowerUp.INVINCIBLE: "I",
    PowerUp.NONE: "?",
}


def direction_for_key(keysym: str) -> Direction | None:
    if len(keysym) == 1:
        keysym = keysym.lower()
    return KEY_DIRECTIONS.get(keysym)


def tick_interval(speed_multiplier: float, base_interval: float = BASE_INTERVAL) -> float:
    """Wall-clock seconds the shell waits between update() calls."""
    if speed_multiplier <= 0:
        raise ValueError("speed_multiplier must be > 0")
    return base_interval / speed_multiplier


def encode_board_state(game: SnakeGame) -> np.ndarray:
    """
    Board grid indexed [y, x]:
    - 0: empty
    - 1: snake body
    - 2: snake head
    - 3: food
    - 4: power-up
    """
    board = np.full((GRID_SIZE, GRID_SIZE), EMPTY, dtype=np.int8)

    fx, fy = game.food
    board[fy, fx] = FOOD

    if game.power_up_pos is not None:
        px, py = game.power_up_pos
        board[py, px] = POWER_UP

    for idx, (x, y) in enumerate(game.snake):
        board[y, x] = HEAD if idx == 0 else BODY

    return board


def render_text(game: SnakeGame) -> str:
    """Plain-text board, one row per line, for terminal output."""
    glyphs = {EMPTY: ".", BODY: "o", HEAD: "@", FOOD: "*"}
    power_glyph = POWER_UP_GLYPHS.get(game.power_up, "?")
    board = encode_board_state(game)
    rows = []
    for row in board:
        rows.append("".join(power_glyph if code == POWER_UP else glyphs[int(code)] for code in row))
    return "\n".join(rows)


def greedy_policy(game: SnakeGame) -> Direction | None:
    """Head for the food along the axis with the larger gap, avoiding the body when possible."""
    hx, hy = game.head
    fx, fy = game.food
    preferred: list[Direction] = []
    if abs(fx - hx) >= abs(fy - hy):
        preferred.append(Direction.RIGHT if fx > hx else Direction.LEFT)
        preferred.append(Direction.DOWN if fy > hy else Direction.UP)
    else:
        preferred.append(Direction.DOWN if fy > hy else Direction.UP)
        preferred.append(Direction.RIGHT if fx > hx else Direction.LEFT)
    preferred.extend(d for d in Direction if d not in preferred)

    for direction in preferred:
        if direction is game.direction.opposite:
            continue
        target = step_clamped(game.head, direction)
        if target != game.head and target not in game.snake:
            return direction
    return None


@dataclass
class EpisodeResult:
    score: int
    high_score: int
    level: int
    length: int
    steps: int
    game_over: bool


def run_episode(
    game: SnakeGame,
    max_steps: int,
    elapsed: float = TICK_ELAPSED,
    policy: Callable[[SnakeGame], Direction | None] | None = greedy_policy,
    render_step: Callable[[SnakeGame, int], None] | None = None,
) -> EpisodeResult:
    """Drive update() without a window until game over or max_steps ticks."""
    if max_steps <= 0:
        raise ValueError("max_steps must be > 0")

    steps_taken = 0
    for step in range(max_steps):
        if game.game_over:
            break

        if policy is not None:
            direction = policy(game)
            if direction is not None:
                game.set_next_direction(direction)

        game.update(elapsed)
        steps_taken = step + 1

        if render_step is not None:
            render_step(game, step)

    return EpisodeResult(
        score=game.score,
        high_score=max(game.high_score, game.score),
        level=game.level,
        length=len(game.snake),
        steps=steps_taken,
        game_over=game.game_over,
    )
