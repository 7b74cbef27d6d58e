# Tkinter player window: draws engine state, forwards input, persists the high score.
from __future__ import annotations

import argparse
import logging
import tkinter as tk

# Support both package imports and running this file directly.
try:
    from .clock import GameClock
    from .controls import InputAdapter
    from .game_logic import (
        GAME_OVER,
        IDLE,
        MAX_CELL_SIZE,
        MAX_GRID_SIZE,
        MAX_SPEED_MS,
        MIN_CELL_SIZE,
        MIN_GRID_SIZE,
        MIN_SPEED_MS,
        PAUSED,
        RUNNING,
        SnakeConfig,
        SnakeGame,
        TickResult,
    )
    from .high_score import HighScoreStore
except ImportError:
    from clock import GameClock
    from controls import InputAdapter
    from game_logic import (
        GAME_OVER,
        IDLE,
        MAX_CELL_SIZE,
        MAX_GRID_SIZE,
        MAX_SPEED_MS,
        MIN_CELL_SIZE,
        MIN_GRID_SIZE,
        MIN_SPEED_MS,
        PAUSED,
        RUNNING,
        SnakeConfig,
        SnakeGame,
        TickResult,
    )
    from high_score import HighScoreStore

logger = logging.getLogger(__name__)

STATE_LABELS = {
    IDLE: "Ready",
    RUNNING: "Running",
    PAUSED: "Paused",
    GAME_OVER: "Game Over",
}


class SnakeApp:
    """Tkinter presentation layer for SnakeGame."""
    BG = "#101418"
    BOARD_BG = "#1c2229"
    SIDEBAR_BG = "#0f1720"
    GRID_COLOR = "#293340"
    SNAKE_HEAD = "#45d483"
    SNAKE_BODY = "#1fb86b"
    FOOD_COLOR = "#ff5c74"
    TEXT_PRIMARY = "#e6eef7"
    TEXT_MUTED = "#95a4b8"
    ACCENT = "#42c4ff"
    BORDER_COLOR = "#7f8b99"

    def __init__(self, root: tk.Tk, config: SnakeConfig, store: HighScoreStore) -> None:
        self.root = root
        self.root.title("Snake")
        self.root.configure(bg=self.BG)

        self.config = config
        self.store = store
        self.game = SnakeGame(self.config, high_score=self.store.load())
        self.controls = InputAdapter(self.game)
        self.clock = GameClock(self.root, self.game, self.config.speed_ms, on_tick=self.on_tick)
        self._swipe_origin: tuple[int, int] | None = None

        self._build_layout()
        self._bind_input()
        self.draw()

    def _build_layout(self) -> None:
        """Create game canvas + right sidebar panels."""
        container = tk.Frame(self.root, bg=self.BG)
        container.pack(fill="both", expand=True, padx=16, pady=16)

        side = self.config.grid_size * self.config.cell_size
        self.canvas = tk.Canvas(
            container,
            width=side,
            height=side,
            bg=self.BOARD_BG,
            highlightthickness=0,
            bd=0,
        )
        self.canvas.pack(side="left", padx=(0, 16))

        self.sidebar = tk.Frame(container, bg=self.SIDEBAR_BG, width=240)
        self.sidebar.pack(side="right", fill="y")

        self.score_var = tk.StringVar()
        self.high_score_var = tk.StringVar()
        self.length_var = tk.StringVar()
        self.state_var = tk.StringVar()
        for var in (self.score_var, self.high_score_var, self.length_var, self.state_var):
            tk.Label(
                self.sidebar,
                textvariable=var,
                fg=self.TEXT_PRIMARY,
                bg=self.SIDEBAR_BG,
                font=("Helvetica", 12),
                anchor="w",
            ).pack(fill="x", padx=12, pady=4)

        for text, command in (
            ("Start", self.start_game),
            ("Pause", self.toggle_pause),
            ("Reset", self.reset_game),
        ):
            self._button(self.sidebar, text, command).pack(fill="x", padx=12, pady=4)

        tk.Label(
            self.sidebar,
            text="Move: Arrow keys / WASD / drag\nSpace: pause   R: reset",
            fg=self.TEXT_MUTED,
            bg=self.SIDEBAR_BG,
            justify="left",
            font=("Helvetica", 10),
        ).pack(anchor="w", padx=12, pady=(8, 12))

    def _button(self, parent: tk.Widget, text: str, command) -> tk.Button:
        return tk.Button(
            parent,
            text=text,
            command=command,
            fg="#09141f",
            bg=self.ACCENT,
            activebackground="#74d8ff",
            activeforeground="#09141f",
            bd=0,
            relief="flat",
            font=("Helvetica", 11, "bold"),
            pady=8,
            cursor="hand2",
        )

    def _bind_input(self) -> None:
        """Keys go through the input adapter; a mouse drag stands in for a swipe."""
        self.root.bind("<KeyPress>", self._on_key)
        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)

    def _on_key(self, event: tk.Event) -> None:
        action = self.controls.press(event.keysym)
        self._after_command(action)

    def _on_press(self, event: tk.Event) -> None:
        self._swipe_origin = (event.x, event.y)

    def _on_release(self, event: tk.Event) -> None:
        if self._swipe_origin is None:
            return
        ox, oy = self._swipe_origin
        self._swipe_origin = None
        action = self.controls.swipe(event.x - ox, event.y - oy)
        self._after_command(action)

    def _after_command(self, action: str) -> None:
        """Keep the clock in step with whatever phase the command left behind."""
        if action == "ignored":
            return
        if self.game.is_running:
            self.clock.start()
        else:
            self.clock.stop()
        self.draw()

    def start_game(self) -> None:
        self._after_command("start" if self.game.start() else "ignored")

    def toggle_pause(self) -> None:
        """Pause/resume without losing current board state."""
        self._after_command("pause" if self.game.toggle_pause() else "ignored")

    def reset_game(self) -> None:
        self.game.reset()
        self._after_command("reset")

    def on_tick(self, result: TickResult) -> None:
        if result.new_high_score:
            self.store.submit(self.game.score)
            self.game.update_high_score(self.store.value)
        self.draw()

    def draw(self) -> None:
        """Render board, food, snake, status labels, and game-over overlay."""
        self.canvas.delete("all")
        size = self.config.grid_size
        cell = self.config.cell_size

        for i in range(size + 1):
            pos = i * cell
            self.canvas.create_line(0, pos, size * cell, pos, fill=self.GRID_COLOR)
            self.canvas.create_line(pos, 0, pos, size * cell, fill=self.GRID_COLOR)

        self.canvas.create_rectangle(
            1, 1, size * cell - 1, size * cell - 1, outline=self.BORDER_COLOR, width=2
        )

        if self.game.food is not None:
            x, y = self.game.food
            x1, y1 = x * cell + 3, y * cell + 3
            x2, y2 = (x + 1) * cell - 3, (y + 1) * cell - 3
            self.canvas.create_oval(x1, y1, x2, y2, fill=self.FOOD_COLOR, outline="")

        for idx, (x, y) in enumerate(self.game.snake):
            color = self.SNAKE_HEAD if idx == 0 else self.SNAKE_BODY
            x1, y1 = x * cell + 2, y * cell + 2
            x2, y2 = (x + 1) * cell - 2, (y + 1) * cell - 2
            self.canvas.create_rectangle(x1, y1, x2, y2, fill=color, outline="")

        self.score_var.set(f"Score: {self.game.score}")
        self.high_score_var.set(f"High score: {self.game.high_score}")
        self.length_var.set(f"Length: {len(self.game.snake)}")
        self.state_var.set(f"State: {STATE_LABELS[self.game.phase]}")

        if self.game.is_over:
            side = size * cell
            title = "You Win!" if self.game.won else "Game Over"
            if self.game.new_high_score:
                title += "  New high score!"
            self.canvas.create_rectangle(0, 0, side, side, fill="#000000", stipple="gray50", outline="")
            self.canvas.create_text(
                side // 2,
                side // 2 - 12,
                text=title,
                fill=self.TEXT_PRIMARY,
                font=("Helvetica", 20, "bold"),
            )
            self.canvas.create_text(
                side // 2,
                side // 2 + 20,
                text="Press Start or an arrow key",
                fill=self.TEXT_MUTED,
                font=("Helvetica", 12),
            )


def _bounded_int(low: int, high: int):
    def parse(raw: str) -> int:
        try:
            value = int(raw)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{raw!r} is not an integer")
        if not (low <= value <= high):
            raise argparse.ArgumentTypeError(f"must be between {low} and {high}")
        return value
    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Snake on a square grid")
    parser.add_argument("--grid-size", type=_bounded_int(MIN_GRID_SIZE, MAX_GRID_SIZE), default=25)
    parser.add_argument("--speed-ms", type=_bounded_int(MIN_SPEED_MS, MAX_SPEED_MS), default=100)
    parser.add_argument("--cell-size", type=_bounded_int(MIN_CELL_SIZE, MAX_CELL_SIZE), default=20)
    parser.add_argument("--high-score-file", default=None, help="JSON file holding the best score")
    parser.add_argument("--log-level", default="WARNING", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser


def config_from_args(args: argparse.Namespace) -> SnakeConfig:
    return SnakeConfig(grid_size=args.grid_size, speed_ms=args.speed_ms, cell_size=args.cell_size)


def run_player_gui(config: SnakeConfig | None = None, store: HighScoreStore | None = None) -> None:
    """Launch the manual Snake player interface."""
    root = tk.Tk()
    SnakeApp(root, config or SnakeConfig(), store or HighScoreStore())
    root.mainloop()


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config = config_from_args(args)
    logger.debug("Starting with %s", config)
    run_player_gui(config, HighScoreStore(args.high_score_file))


if __name__ == "__main__":
    main()
