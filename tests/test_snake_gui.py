"""
Tests for the launcher side of snake_gui.py (no window is opened).
"""

import pytest

pytest.importorskip("tkinter")

from snake_gui import STATE_LABELS, build_parser, config_from_args
from game_logic import GAME_OVER, IDLE, PAUSED, RUNNING


class TestLauncher:

    def test_defaults(self):
        args = build_parser().parse_args([])
        config = config_from_args(args)
        assert config.grid_size == 25
        assert config.speed_ms == 100
        assert config.cell_size == 20
        assert args.high_score_file is None
        config.validate()

    def test_custom_values(self):
        args = build_parser().parse_args(
            ["--grid-size", "20", "--speed-ms", "80", "--high-score-file", "best.json", "--log-level", "DEBUG"]
        )
        config = config_from_args(args)
        assert config.grid_size == 20
        assert config.speed_ms == 80
        assert args.high_score_file == "best.json"
        assert args.log_level == "DEBUG"

    @pytest.mark.parametrize("argv", [["--grid-size", "2"], ["--speed-ms", "fast"], ["--cell-size", "99"]])
    def test_out_of_range_values_exit(self, argv):
        with pytest.raises(SystemExit):
            build_parser().parse_args(argv)

    def test_every_phase_has_a_label(self):
        assert set(STATE_LABELS) == {IDLE, RUNNING, PAUSED, GAME_OVER}
