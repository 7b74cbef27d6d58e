"""
Tests for utils.py - board snapshots.
"""

import numpy as np

from utils import BODY, FOOD, HEAD, board_text, encode_board, free_cell_count, occupancy


class TestBoardViews:

    def test_encode_board(self, line_game):
        board = encode_board(line_game)
        assert board.shape == (10, 10)
        assert board.dtype == np.float32
        assert board[5, 5] == HEAD
        assert board[5, 4] == BODY
        assert board[5, 3] == BODY
        assert board[5, 7] == FOOD
        assert np.count_nonzero(board) == 4

    def test_board_text(self, make_game):
        game = make_game(grid_size=4, initial_snake=((1, 0), (0, 0)), initial_food=(3, 3))
        assert board_text(game) == "o@..\n....\n....\n...*"

    def test_counts(self, line_game):
        assert free_cell_count(line_game) == 97
        assert occupancy(line_game) == 0.03
