# Snake Rogue player GUI: window, HUD, key bindings, and the tick loop.
from __future__ import annotations

from dataclasses import dataclass
import math
import time
import tkinter as tk

# Support both package imports and running this file directly.
try:
    from .board import GRID_SIZE, Direction
    from .game_logic import PowerUp, SnakeGame
    from .utils import BASE_INTERVAL, TICK_ELAPSED, direction_for_key, tick_interval
except ImportError:
    from board import GRID_SIZE, Direction
    from game_logic import PowerUp, SnakeGame
    from utils import BASE_INTERVAL, TICK_ELAPSED, direction_for_key, tick_interval


MIN_CELL_SIZE = 12
MAX_CELL_SIZE = 40


@dataclass
class SnakeConfig:
    """Presentation settings; the rules themselves are fixed."""
    cell_size: int = 20
    base_interval: float = BASE_INTERVAL
    tick_elapsed: float = TICK_ELAPSED
    frame_ms: int = 16


def _hex(rgb: tuple[int, int, int]) -> str:
    return "#%02x%02x%02x" % rgb


def _blend(color: tuple[int, int, int], background: tuple[int, int, int], alpha: float) -> str:
    """Tk has no alpha channel, so fade toward the board color instead."""
    return _hex(tuple(int(c * alpha + b * (1.0 - alpha)) for c, b in zip(color, background)))


class SnakeApp:
    """Tkinter presentation layer for SnakeGame."""
    BG = "#101418"
    BOARD_RGB = (20, 20, 30)
    GRID_COLOR = "#282832"
    HEAD_COLOR = "#64dc64"
    BODY_RGB = (80, 180, 80)
    GOLD = "#ffd700"
    TEXT_PRIMARY = "#e6eef7"
    TEXT_MUTED = "#95a4b8"
    BAR_BG = "#323232"
    BAR_FG = "#64c8ff"

    POWER_UP_COLORS = {
        PowerUp.SPEED: "#ffff00",
        PowerUp.SLOW: "#64c8ff",
        PowerUp.DOUBLE_POINTS: "#00ff00",
        PowerUp.INVINCIBLE: "#ffd700",
        PowerUp.NONE: "#ffffff",
    }

    # Eye centers as fractions of a cell, keyed by facing direction.
    EYES = {
        Direction.UP: ((0.3, 0.3), (0.7, 0.3)),
        Direction.DOWN: ((0.3, 0.7), (0.7, 0.7)),
        Direction.LEFT: ((0.3, 0.3), (0.3, 0.7)),
        Direction.RIGHT: ((0.7, 0.3), (0.7, 0.7)),
    }

    def __init__(self, root: tk.Tk, config: SnakeConfig | None = None, game: SnakeGame | None = None) -> None:
        self.root = root
        self.root.title("Snake Rogue")
        self.root.configure(bg=self.BG)

        self.config = config if config is not None else SnakeConfig()
        self.game = game if game is not None else SnakeGame()
        self.started_at = time.monotonic()
        self.last_update = 0.0
        self.after_id: str | None = None  # Tkinter timer id for the frame loop

        self._build_layout()
        self._bind_keys()
        self.frame()

    def _build_layout(self) -> None:
        """HUD row, power-up bar, board canvas, and control hints."""
        side = GRID_SIZE * self.config.cell_size
        container = tk.Frame(self.root, bg=self.BG)
        container.pack(padx=16, pady=16)

        tk.Label(
            container,
            text="Snake Rogue",
            fg=self.TEXT_PRIMARY,
            bg=self.BG,
            font=("Helvetica", 18, "bold"),
        ).pack(anchor="w")

        self.hud_var = tk.StringVar()
        tk.Label(
            container,
            textvariable=self.hud_var,
            fg=self.TEXT_PRIMARY,
            bg=self.BG,
            font=("Helvetica", 11),
            anchor="w",
        ).pack(fill="x", pady=(4, 4))

        self.bar = tk.Canvas(container, width=200, height=10, bg=self.BG, highlightthickness=0, bd=0)
        self.bar.pack(anchor="w", pady=(0, 8))

        self.canvas = tk.Canvas(
            container,
            width=side,
            height=side,
            bg=_hex(self.BOARD_RGB),
            highlightthickness=0,
            bd=0,
        )
        self.canvas.pack()

        for line in (
            "Controls: Arrow keys / WASD to move",
            "SPACE: Pause/Restart | R: Reset",
            "Power-ups: yellow Speed, blue Slow, green 2x Points, gold Invincible",
        ):
            tk.Label(
                container,
                text=line,
                fg=self.TEXT_MUTED,
                bg=self.BG,
                font=("Helvetica", 10),
                anchor="w",
            ).pack(fill="x")

    def _bind_keys(self) -> None:
        """Movement on arrows/WASD, SPACE for pause or restart, R for reset."""
        self.root.bind("<KeyPress>", self._on_key)
        self.root.bind("<space>", lambda _e: self.on_space())
        self.root.bind("r", lambda _e: self.game.reset())
        self.root.bind("R", lambda _e: self.game.reset())

    def _on_key(self, event: tk.Event) -> None:
        direction = direction_for_key(event.keysym)
        if direction is not None:
            self.game.set_next_direction(direction)

    def on_space(self) -> None:
        if self.game.game_over:
            self.game.reset()
        else:
            self.game.toggle_pause()

    def close(self) -> None:
        """Cancel the scheduled frame and destroy the window."""
        if self.after_id is not None:
            self.root.after_cancel(self.after_id)
            self.after_id = None
        self.root.destroy()

    def frame(self) -> None:
        """One display frame: tick the game if its interval has passed, then redraw."""
        now = time.monotonic() - self.started_at
        interval = tick_interval(self.game.speed_multiplier, self.config.base_interval)
        if now - self.last_update > interval:
            self.game.update(self.config.tick_elapsed)
            self.last_update = now

        self.draw(now)
        self.after_id = self.root.after(self.config.frame_ms, self.frame)

    def _cell_box(self, x: int, y: int, inset: float) -> tuple[float, float, float, float]:
        cell = self.config.cell_size
        return x * cell + inset, y * cell + inset, (x + 1) * cell - inset, (y + 1) * cell - inset

    def draw(self, now: float) -> None:
        """Render board, food, power-up, snake, HUD, and overlays."""
        game = self.game
        cell = self.config.cell_size
        side = GRID_SIZE * cell
        self.canvas.delete("all")

        for i in range(GRID_SIZE + 1):
            pos = i * cell
            self.canvas.create_line(0, pos, side, pos, fill=self.GRID_COLOR)
            self.canvas.create_line(pos, 0, pos, side, fill=self.GRID_COLOR)

        # Food pulses between 40% and 100% red.
        pulse = math.sin(now * 4.0) * 0.3 + 0.7
        fx, fy = game.food
        self.canvas.create_rectangle(
            *self._cell_box(fx, fy, 2), fill=_hex((int(255 * pulse), 100, 100)), outline=""
        )

        if game.power_up_pos is not None:
            px, py = game.power_up_pos
            color = self.POWER_UP_COLORS.get(game.power_up, "#ffffff")
            self.canvas.create_rectangle(*self._cell_box(px, py, 3), fill=color, outline="")

        # Draw tail first so the head stays on top when segments overlap.
        for idx in range(len(game.snake) - 1, -1, -1):
            x, y = game.snake[idx]
            if idx == 0:
                color = self.GOLD if game.invincibility else self.HEAD_COLOR
                self.canvas.create_rectangle(*self._cell_box(x, y, 1), fill=color, outline="")
                for ex, ey in self.EYES[game.direction]:
                    cx, cy = x * cell + ex * cell, y * cell + ey * cell
                    self.canvas.create_oval(cx - 3, cy - 3, cx + 3, cy + 3, fill="#000000", outline="")
            else:
                alpha = 1.0 - min(idx * 0.03, 0.5)
                color = _blend(self.BODY_RGB, self.BOARD_RGB, alpha)
                self.canvas.create_rectangle(*self._cell_box(x, y, 2), fill=color, outline="")

        self.hud_var.set(f"Score: {game.score}    Level: {game.level}    High Score: {game.high_score}")

        self.bar.delete("all")
        if game.power_up_timer > 0.0:
            self.bar.create_rectangle(0, 0, 200, 10, fill=self.BAR_BG, outline="")
            self.bar.create_rectangle(0, 0, 200 * game.power_up_fraction, 10, fill=self.BAR_FG, outline="")

        if game.paused:
            self._overlay("PAUSED", "Press SPACE to continue")
        elif game.game_over:
            self._overlay("GAME OVER", f"Final Score: {game.score}\nPress SPACE or R to restart")

    def _overlay(self, title: str, subtitle: str) -> None:
        side = GRID_SIZE * self.config.cell_size
        self.canvas.create_rectangle(0, 0, side, side, fill="#000000", stipple="gray50", outline="")
        self.canvas.create_text(
            side // 2,
            side // 2 - 16,
            text=title,
            fill=self.TEXT_PRIMARY,
            font=("Helvetica", 22, "bold"),
        )
        self.canvas.create_text(
            side // 2,
            side // 2 + 24,
            text=subtitle,
            fill=self.TEXT_MUTED,
            font=("Helvetica", 12),
            justify="center",
        )


def run_player_gui(config: SnakeConfig | None = None, game: SnakeGame | None = None) -> None:
    """Launch the Snake Rogue window."""
    root = tk.Tk()
    app = SnakeApp(root, config, game)
    root.protocol("WM_DELETE_WINDOW", app.close)
    root.mainloop()


if __name__ == "__main__":
    run_player_gui()
