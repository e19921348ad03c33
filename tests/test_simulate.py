"""Tests for the headless simulation CLI."""

import pytest

from snake_core.game_logic import GameConfig
from snake_core.simulate import main, parse_args, round_window_means, simulate


class TestSimulate:
    """Tests for simulate() and main()."""

    def test_simulate_reports_stats(self, capsys):
        results, high_score = simulate(3, GameConfig(grid_size=10, obstacle_count=2), seed=1, max_ticks=200)
        out = capsys.readouterr().out

        assert len(results) == 3
        assert "Score" in out
        assert "High score:" in out
        finished = [r.score for r in results if r.finished]
        assert high_score == max(finished, default=0)

    def test_seeded_runs_repeat(self, capsys):
        cfg = GameConfig(grid_size=10, obstacle_count=2)
        first, _ = simulate(2, cfg, seed=7, max_ticks=150)
        second, _ = simulate(2, cfg, seed=7, max_ticks=150)
        assert first == second

    def test_plot_written(self, tmp_path, capsys):
        path = tmp_path / "scores.png"
        simulate(2, GameConfig(grid_size=10, obstacle_count=1), seed=3, max_ticks=100, plot_path=str(path))
        assert path.exists()

    def test_invalid_rounds(self):
        with pytest.raises(ValueError):
            simulate(0, GameConfig())

    def test_parse_args_defaults(self):
        args = parse_args([])
        assert args.rounds == 100
        assert args.grid_size == 20
        assert args.obstacles == 5
        assert args.plot == ""

    def test_main_runs(self, capsys):
        main(["--rounds", "2", "--seed", "4", "--grid-size", "10", "--max-ticks", "100"])
        assert "High score:" in capsys.readouterr().out

    def test_main_rejects_bad_grid(self):
        with pytest.raises(SystemExit):
            main(["--grid-size", "2"])

    def test_main_rejects_bad_rounds(self):
        with pytest.raises(SystemExit):
            main(["--rounds", "0"])


class TestRoundWindowMeans:
    """Tests for round_window_means."""

    def test_windows(self):
        """The last window may be shorter than the others."""
        last_rounds, means = round_window_means([10, 20, 30, 40, 50], window=2)
        assert last_rounds.tolist() == [2.0, 4.0, 5.0]
        assert means.tolist() == [15.0, 35.0, 50.0]

    def test_single_window(self):
        last_rounds, means = round_window_means([10, 30], window=5)
        assert last_rounds.tolist() == [2.0]
        assert means.tolist() == [20.0]

    def test_empty(self):
        last_rounds, means = round_window_means([], window=3)
        assert last_rounds.size == 0
        assert means.size == 0

    def test_invalid_window(self):
        with pytest.raises(ValueError):
            round_window_means([1.0], window=0)
