"""
Tests for clock.py - tick scheduling against a fake Tk scheduler.
"""

import pytest

from clock import GameClock
from game_logic import GAME_OVER, RUNNING


class TestGameClock:

    def test_rejects_non_positive_period(self, scheduler, line_game):
        with pytest.raises(ValueError):
            GameClock(scheduler, line_game, 0)

    def test_does_not_schedule_while_idle(self, scheduler, line_game):
        clock = GameClock(scheduler, line_game, 100)
        clock.start()
        assert scheduler.pending == {}
        assert clock.active is False

    def test_ticks_and_reschedules(self, scheduler, line_game):
        results = []
        clock = GameClock(scheduler, line_game, 100, on_tick=results.append)
        line_game.start()
        clock.start()
        assert [ms for ms, _ in scheduler.pending.values()] == [100]

        scheduler.fire()
        assert line_game.head == (6, 5)
        assert len(results) == 1
        assert len(scheduler.pending) == 1

    def test_single_pending_callback(self, scheduler, line_game):
        clock = GameClock(scheduler, line_game, 100)
        line_game.start()
        clock.start()
        clock.start()
        assert len(scheduler.pending) == 1

    def test_pause_then_resume_applies_each_tick_once(self, scheduler, line_game):
        clock = GameClock(scheduler, line_game, 100)
        line_game.start()
        clock.start()
        line_game.pause()

        # A callback that fires after pausing must not advance the game.
        scheduler.fire()
        assert line_game.head == (5, 5)
        assert clock.active is False

        line_game.resume()
        clock.start()
        clock.start()
        scheduler.fire()
        assert line_game.head == (6, 5)
        assert line_game.phase == RUNNING

    def test_stop_cancels(self, scheduler, line_game):
        clock = GameClock(scheduler, line_game, 100)
        line_game.start()
        clock.start()
        clock.stop()
        assert scheduler.pending == {}
        assert len(scheduler.cancelled) == 1
        assert clock.active is False

    def test_stops_after_game_over(self, scheduler, make_game):
        game = make_game(grid_size=10, initial_snake=((9, 5),), initial_food=(0, 0))
        results = []
        clock = GameClock(scheduler, game, 50, on_tick=results.append)
        game.start()
        clock.start()
        scheduler.fire()
        assert game.phase == GAME_OVER
        assert results[-1].game_over is True
        assert scheduler.pending == {}
