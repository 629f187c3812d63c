# Launcher for Snake Rogue: opens the window, or plays headless with --headless.
from __future__ import annotations

import argparse
import random

try:
    from .game_logic import SnakeGame
    from .snake_gui import MAX_CELL_SIZE, MIN_CELL_SIZE, SnakeConfig, run_player_gui
    from .utils import render_text, run_episode
except ImportError:
    from game_logic import SnakeGame
    from snake_gui import MAX_CELL_SIZE, MIN_CELL_SIZE, SnakeConfig, run_player_gui
    from utils import render_text, run_episode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Snake Rogue: snake with levels and power-ups")
    parser.add_argument("--cell-size", type=int, default=SnakeConfig.cell_size, help="Tile size in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food and power-up placement")
    parser.add_argument(
        "--headless",
        type=int,
        default=0,
        metavar="STEPS",
        help="Play STEPS ticks with the built-in policy and print the result instead of opening a window",
    )
    return parser


def run_headless(game: SnakeGame, steps: int) -> None:
    result = run_episode(game, steps)
    print(render_text(game))
    print("-" * 30)
    state = "Game Over" if result.game_over else "Alive"
    print(
        f"Steps: {result.steps}  Score: {result.score}  Level: {result.level}  "
        f"Length: {result.length}  State: {state}"
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not (MIN_CELL_SIZE <= args.cell_size <= MAX_CELL_SIZE):
        parser.error(f"--cell-size must be between {MIN_CELL_SIZE} and {MAX_CELL_SIZE}.")
    if args.headless < 0:
        parser.error("--headless must be >= 0.")

    rng = random.Random(args.seed) if args.seed is not None else None
    game = SnakeGame(rng=rng)

    if args.headless:
        run_headless(game, args.headless)
        return

    run_player_gui(SnakeConfig(cell_size=args.cell_size), game)


if __name__ == "__main__":
    main()
