# Read-only views of engine state for the presentation layer and debugging.
from __future__ import annotations

import numpy as np

try:
    from .game_logic import SnakeGame
except ImportError:
    from game_logic import SnakeGame


EMPTY = 0.0
FOOD = 0.5
BODY = -0.5
HEAD = 1.0

TEXT_SYMBOLS = {EMPTY: ".", FOOD: "*", BODY: "o", HEAD: "@"}


def encode_board(game: SnakeGame) -> np.ndarray:
    """
    Board snapshot indexed [row, column]:
    - 0.0: empty
    - 0.5: food
    - -0.5: snake body
    - 1.0: snake head
    """
    size = game.grid_size
    board = np.full((size, size), EMPTY, dtype=np.float32)

    if game.food is not None:
        fx, fy = game.food
        board[fy, fx] = FOOD

    for idx, (x, y) in enumerate(game.snake):
        board[y, x] = HEAD if idx == 0 else BODY

    return board


def board_text(game: SnakeGame) -> str:
    """Render the board as text, top row first."""
    board = encode_board(game)
    rows = []
    for row in board:
        rows.append("".join(TEXT_SYMBOLS[float(value)] for value in row))
    return "\n".join(rows)


def free_cell_count(game: SnakeGame) -> int:
    return game.grid_size * game.grid_size - len(game.snake)


def occupancy(game: SnakeGame) -> float:
    """Fraction of the board covered by the snake."""
    board = encode_board(game)
    covered = np.count_nonzero((board == BODY) | (board == HEAD))
    return float(covered) / board.size
