# Core Snake simulation: phase machine, direction latch, and tick rules. No UI code.
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging
import random

logger = logging.getLogger(__name__)


# Bounds checked by SnakeConfig.validate() and by the launcher.
MIN_GRID_SIZE = 4
MAX_GRID_SIZE = 60
MIN_CELL_SIZE = 8
MAX_CELL_SIZE = 48
MIN_SPEED_MS = 20
MAX_SPEED_MS = 1000

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
DELTAS = {UP: (0, -1), DOWN: (0, 1), LEFT: (-1, 0), RIGHT: (1, 0)}
OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

IDLE = "idle"
RUNNING = "running"
PAUSED = "paused"
GAME_OVER = "game_over"

WALL = "wall"
SELF = "self"
BOARD_FULL = "board_full"

Cell = tuple[int, int]


@dataclass
class SnakeConfig:
    """Settings shared between the engine, the clock and the GUI."""
    grid_size: int = 25
    initial_length: int = 4
    initial_snake: tuple[Cell, ...] | None = None  # explicit body, head first
    initial_food: Cell | None = None
    initial_score: int = 3
    start_direction: str | None = None  # derived from the body when unset
    speed_ms: int = 100
    cell_size: int = 20
    max_spawn_attempts: int = 64

    def validate(self) -> None:
        """Raise ValueError for settings no game can be built from."""
        size = self.grid_size
        if not (MIN_GRID_SIZE <= size <= MAX_GRID_SIZE):
            raise ValueError(f"grid_size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, got {size}")
        if self.initial_score < 0:
            raise ValueError("initial_score must be >= 0")
        if not (MIN_SPEED_MS <= self.speed_ms <= MAX_SPEED_MS):
            raise ValueError(f"speed_ms must be between {MIN_SPEED_MS} and {MAX_SPEED_MS}")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be >= 1")
        if self.start_direction is not None and self.start_direction not in DELTAS:
            raise ValueError(f"Unknown start_direction: {self.start_direction!r}")

        if self.initial_snake is None:
            if not (1 <= self.initial_length < size):
                raise ValueError(f"initial_length must be between 1 and {size - 1}")
            body = default_body(size, self.initial_length)
        else:
            body = list(self.initial_snake)
            _check_body(body, size)

        if len(body) >= size * size:
            raise ValueError("Initial snake leaves no free cell for food.")
        if self.initial_food is not None:
            fx, fy = self.initial_food
            if not (0 <= fx < size and 0 <= fy < size):
                raise ValueError(f"initial_food {self.initial_food} is outside the grid")
            if tuple(self.initial_food) in set(body):
                raise ValueError("initial_food overlaps the snake")


def default_body(size: int, length: int) -> list[Cell]:
    """Horizontal body with its head at the board center, extending left."""
    center = size // 2
    positions = [(center - i, center) for i in range(length)]

    # Fallback for tiny boards / large initial length.
    if positions[-1][0] < 0:
        tail_x = (size - length) // 2
        head_x = tail_x + length - 1
        positions = [(head_x - i, center) for i in range(length)]
    return positions


def _check_body(body: list[Cell], size: int) -> None:
    if not body:
        raise ValueError("initial_snake cannot be empty")
    for x, y in body:
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"initial_snake cell {(x, y)} is outside the grid")
    if len(set(body)) != len(body):
        raise ValueError("initial_snake cells must be distinct")
    if len(body) > 1:
        same_row = len({y for _, y in body}) == 1
        same_col = len({x for x, _ in body}) == 1
        if not (same_row or same_col):
            raise ValueError("initial_snake must lie along one axis")
        for (ax, ay), (bx, by) in zip(body, body[1:]):
            if abs(ax - bx) + abs(ay - by) != 1:
                raise ValueError("initial_snake cells must be contiguous")


@dataclass
class TickResult:
    """What a single tick did, for the clock and presentation layer."""
    moved: bool = False
    ate: bool = False
    new_high_score: bool = False
    game_over: bool = False
    reason: str | None = None


class SnakeGame:
    """Pure game state + rules. Collaborators drive it through its commands."""
    def __init__(self, config: SnakeConfig | None = None, high_score: int = 0) -> None:
        self.config = config if config is not None else SnakeConfig()
        self.config.validate()
        if high_score < 0:
            raise ValueError("high_score must be >= 0")
        self.high_score = high_score
        self.phase = IDLE
        self.reset()

    @property
    def grid_size(self) -> int:
        return self.config.grid_size

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def alive(self) -> bool:
        return self.phase != GAME_OVER

    @property
    def is_running(self) -> bool:
        return self.phase == RUNNING

    @property
    def is_paused(self) -> bool:
        return self.phase == PAUSED

    @property
    def is_over(self) -> bool:
        return self.phase == GAME_OVER

    def reset(self) -> None:
        """Discard the current round and return to Idle with the configured board."""
        size = self.config.grid_size
        self.snake: deque[Cell] = deque()         # ordered body, head at index 0
        self.snake_set: set[Cell] = set()          # O(1) body collision lookup
        self.free_tiles = {(x, y) for x in range(size) for y in range(size)}
        self.food: Cell | None = None
        self.direction: str | None = None          # committed heading
        self.pending_direction: str | None = None  # latched from input; applied next tick
        self.score = self.config.initial_score
        self.new_high_score = False
        self.end_reason: str | None = None
        self.won = False
        self.steps = 0

        if self.config.initial_snake is None:
            body = default_body(size, self.config.initial_length)
        else:
            body = [tuple(cell) for cell in self.config.initial_snake]
        for cell in body:
            self.snake.append(cell)
            self.snake_set.add(cell)
            self.free_tiles.discard(cell)

        if self.config.initial_food is not None:
            self.food = tuple(self.config.initial_food)
        else:
            self.food = self.spawn_food()
        self._set_phase(IDLE)

    def _set_phase(self, phase: str) -> None:
        if phase != self.phase:
            logger.debug("Phase %s -> %s", self.phase, phase)
        self.phase = phase

    def _initial_direction(self) -> str:
        if self.config.start_direction is not None:
            return self.config.start_direction
        if len(self.snake) > 1:
            (hx, hy), (nx, ny) = self.snake[0], self.snake[1]
            for direction, delta in DELTAS.items():
                if delta == (hx - nx, hy - ny):
                    return direction
        return RIGHT

    def start(self) -> bool:
        """Idle -> Running. A finished game is reset first."""
        if self.phase in (RUNNING, PAUSED):
            return False
        if self.phase == GAME_OVER:
            self.reset()
        self.direction = self._initial_direction()
        self.pending_direction = None
        self._set_phase(RUNNING)
        return True

    def pause(self) -> bool:
        if self.phase != RUNNING:
            return False
        self._set_phase(PAUSED)
        return True

    def resume(self) -> bool:
        if self.phase != PAUSED:
            return False
        self._set_phase(RUNNING)
        return True

    def toggle_pause(self) -> bool:
        """Pause while running, resume while paused."""
        if self.phase == RUNNING:
            return self.pause()
        return self.resume()

    def set_direction(self, new_direction: str | None) -> bool:
        """Latch a direction for the next tick; reject instant 180-degree turns."""
        if self.phase != RUNNING:
            return False
        if new_direction not in DELTAS:
            return False
        if self.direction is not None and OPPOSITE[new_direction] == self.direction:
            return False
        self.pending_direction = new_direction
        return True

    def update_high_score(self, value: int) -> None:
        """Accept the persisted best from the collaborator; never lowers it."""
        if value > self.high_score:
            self.high_score = value

    def _next_head(self, direction: str) -> Cell:
        """Translate current head by one tile in the given direction."""
        head_x, head_y = self.snake[0]
        dx, dy = DELTAS[direction]
        return head_x + dx, head_y + dy

    def _in_bounds(self, x: int, y: int) -> bool:
        size = self.config.grid_size
        return 0 <= x < size and 0 <= y < size

    def _end(self, reason: str, **result) -> TickResult:
        self.end_reason = reason
        self.won = reason == BOARD_FULL
        self._set_phase(GAME_OVER)
        logger.info("Game over (%s) after %d steps, score %d", reason, self.steps, self.score)
        return TickResult(game_over=True, reason=reason, **result)

    def tick(self) -> TickResult:
        """Advance one step. Ignored outside the Running phase."""
        if self.phase != RUNNING:
            return TickResult()

        # Apply the latest valid input once per tick.
        pending = self.pending_direction
        if pending is not None and (self.direction is None or OPPOSITE[pending] != self.direction):
            self.direction = pending
        self.pending_direction = None
        if self.direction is None:
            return TickResult()

        new_x, new_y = self._next_head(self.direction)
        if not self._in_bounds(new_x, new_y):
            return self._end(WALL)

        new_head = (new_x, new_y)
        growing = new_head == self.food
        tail = self.snake[-1]

        # Moving into current tail is allowed only if not growing
        # (because tail moves away in the same tick).
        if new_head in self.snake_set and not (not growing and new_head == tail):
            return self._end(SELF)

        if not growing:
            old_tail = self.snake.pop()
            self.snake_set.discard(old_tail)
            self.free_tiles.add(old_tail)

        self.snake.appendleft(new_head)
        self.snake_set.add(new_head)
        self.free_tiles.discard(new_head)
        self.steps += 1

        if not growing:
            return TickResult(moved=True)

        self.score += 1
        beat_record = self.score > self.high_score
        if beat_record:
            self.new_high_score = True
        self.food = self.spawn_food()
        if self.food is None:
            return self._end(BOARD_FULL, moved=True, ate=True, new_high_score=beat_record)
        return TickResult(moved=True, ate=True, new_high_score=beat_record)

    def spawn_food(self) -> Cell | None:
        """Pick a uniformly random free cell, or None when the board is full."""
        if not self.free_tiles:
            return None
        size = self.config.grid_size
        for _ in range(self.config.max_spawn_attempts):
            pos = (random.randrange(size), random.randrange(size))
            if pos not in self.snake_set:
                return pos
        # Dense board: draw from the free tiles directly.
        # Python 3.13 random.sample requires a sequence (set is not accepted).
        return random.choice(tuple(self.free_tiles))
