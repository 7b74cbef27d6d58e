"""Shared fixtures for the Snake engine tests."""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from game_logic import SnakeConfig, SnakeGame


class FakeScheduler:
    """Stand-in for Tk's after()/after_cancel(); callbacks run only when fired."""

    def __init__(self):
        self.pending = {}
        self.cancelled = []
        self._next_id = 0

    def after(self, ms, func):
        self._next_id += 1
        after_id = f"after#{self._next_id}"
        self.pending[after_id] = (ms, func)
        return after_id

    def after_cancel(self, after_id):
        self.cancelled.append(after_id)
        self.pending.pop(after_id, None)

    def fire(self):
        """Run every callback that is currently pending."""
        due = list(self.pending.items())
        self.pending.clear()
        for _, (_, func) in due:
            func()
        return len(due)


@pytest.fixture
def make_game():
    """Build a game from SnakeConfig keyword overrides."""
    def factory(high_score=0, **overrides):
        return SnakeGame(SnakeConfig(**overrides), high_score=high_score)
    return factory


@pytest.fixture
def line_game(make_game):
    """Three-cell snake heading right with food two cells ahead of the head."""
    return make_game(
        grid_size=10,
        initial_snake=((5, 5), (4, 5), (3, 5)),
        initial_food=(7, 5),
        initial_score=0,
    )


@pytest.fixture
def scheduler():
    return FakeScheduler()
