"""
Tests for the batch analysis helpers
"""

import matplotlib.pyplot as plt
import pytest
from minesolver.analysis import (
    plot_results,
    run_solver_many_tests,
    run_solver_single_test,
)


class TestSingleRun:
    """Test cases for run_solver_single_test"""

    def test_game_finishes(self):
        result = run_solver_single_test(9, 9, 10, seed=3)
        assert result["status"] in (-1, 1)
        assert 0.0 <= result["revealed_fraction"] <= 1.0
        for key in ("steps_count", "flags_count", "safe_reveals_count", "guesses_count"):
            assert key in result

    def test_win_reveals_every_safe_cell(self):
        result = run_solver_single_test(9, 9, 10, seed=3)
        if result["status"] == 1:
            assert result["revealed_fraction"] == 1.0

    def test_mine_free_board_is_won_by_the_opening(self):
        result = run_solver_single_test(6, 4, 0, seed=0)
        assert result["status"] == 1
        assert result["revealed_fraction"] == 1.0
        assert result["steps_count"] == 0

    def test_seed_is_reproducible(self):
        a = run_solver_single_test(16, 16, 40, seed=11)
        b = run_solver_single_test(16, 16, 40, seed=11)
        assert a == b

    def test_step_bound(self):
        result = run_solver_single_test(30, 16, 99, seed=5, max_steps=0)
        assert result["status"] in (-1, 0, 1)
        assert result["steps_count"] == 0

    def test_show_boards_prints(self, capsys):
        run_solver_single_test(5, 5, 2, seed=1, show_boards=True)
        out = capsys.readouterr().out
        assert "Underlying board:" in out
        assert "Finished with status" in out


class TestManyRuns:
    """Test cases for run_solver_many_tests and plot_results"""

    @pytest.fixture
    def results(self):
        return run_solver_many_tests(9, 9, 10, runs=4, seed=100)

    def test_aggregates(self, results):
        assert 0.0 <= results["win_rate"] <= 1.0
        assert results["win_rate"] + results["loss_rate"] <= 1.0
        assert results["runs"] == 4.0
        assert results["std_guesses_count"] >= 0.0
        assert "avg_revealed_fraction" in results
        assert "avg_guesses_count" in results

    def test_runs_must_be_positive(self):
        with pytest.raises(ValueError):
            run_solver_many_tests(9, 9, 10, runs=0)

    def test_plot(self, results):
        fig = plot_results(results, show=False)
        assert len(fig.axes[0].patches) == 4
        plt.close(fig)

    def test_plot_missing_keys(self):
        with pytest.raises(KeyError):
            plot_results({"win_rate": 1.0}, show=False)
