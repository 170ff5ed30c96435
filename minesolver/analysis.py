"""Analysis and benchmarking tools for the rule solver."""

import logging
import random
from collections import defaultdict
from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import numpy as np

from .board import UNKNOWN, Board, count_unknown_or_flagged, is_lost
from .engine import format_board, generate_board
from .solver import RuleSolver

logger = logging.getLogger(__name__)


def run_solver_single_test(
    width: int,
    height: int,
    mines_count: int,
    *,
    seed: Optional[int] = None,
    max_steps: Optional[int] = None,
    show_boards: bool = False,
) -> Dict[str, float]:
    """
    Run one end-to-end game with RuleSolver on a freshly generated board.

    Args:
        width: Board width.
        height: Board height.
        mines_count: Total number of mines on the board.
        seed: Optional seed for the game's random source.
        max_steps: Optional bound on solver steps after the opening move.
            Defaults to twice the number of cells, which no finished game needs.
        show_boards: If True, print the real board and the final player board.

    Returns:
        The solver's counters augmented with "status" (-1 loss, 1 win,
        0 step bound hit) and "revealed_fraction" (opened safe cells over all
        safe cells).
    """
    rng = random.Random(seed)
    if max_steps is None:
        max_steps = 2 * width * height

    solver = RuleSolver(rng=rng)
    origin_x = rng.randrange(width)
    origin_y = rng.randrange(height)

    real_board = generate_board(origin_x, origin_y, width, height, mines_count, rng)
    player_board = solver.first_step(
        real_board, Board(width, height, fill=UNKNOWN), origin_x, origin_y
    )

    status = 0
    for _ in range(max_steps):
        if is_lost(real_board, player_board):
            status = -1
            break
        if count_unknown_or_flagged(player_board) == mines_count:
            status = 1
            break
        previous = player_board
        player_board = solver.solve_step(real_board, previous)
        solver.update_stuck(previous, player_board)
    else:
        if is_lost(real_board, player_board):
            status = -1
        elif count_unknown_or_flagged(player_board) == mines_count:
            status = 1

    if show_boards:
        print("Underlying board:")
        print(format_board(real_board))
        print()
        print("Solver knowledge:")
        print(format_board(player_board))
        print()
        print(f"Finished with status {status}.")

    safe_total = width * height - mines_count
    opened = width * height - count_unknown_or_flagged(player_board)
    if status == -1:
        opened -= 1  # the mine that ended the game

    out: Dict[str, float] = dict(solver.stats())
    out["status"] = status
    out["revealed_fraction"] = opened / safe_total if safe_total > 0 else 1.0
    return out


def run_solver_many_tests(
    width: int,
    height: int,
    mines_count: int,
    runs: int,
    *,
    seed: Optional[int] = None,
    max_steps: Optional[int] = None,
) -> Dict[str, float]:
    """
    Run many independent games and return averaged metrics plus win rate.

    Args:
        width: Board width.
        height: Board height.
        mines_count: Total number of mines on the board.
        runs: Number of independent games to run, must be > 0.
        seed: Optional base seed; run i uses seed + i.
        max_steps: Step bound forwarded to run_solver_single_test().

    Returns:
        "avg_<metric>" for every numeric metric of a single run, plus
        win_rate, loss_rate, std_guesses_count and runs.
    """
    if runs <= 0:
        raise ValueError("runs must be positive.")

    samples: Dict[str, List[float]] = defaultdict(list)
    statuses: List[int] = []

    for i in range(runs):
        run_seed = None if seed is None else seed + i
        payload = run_solver_single_test(
            width, height, mines_count, seed=run_seed, max_steps=max_steps
        )
        status = int(payload["status"])
        if status not in (-1, 0, 1):
            raise RuntimeError(f"Unexpected solver status: {status}")
        statuses.append(status)

        for k, v in payload.items():
            if k == "status":
                continue
            samples[k].append(float(v))

        logger.debug("Run %d/%d finished with status %d", i + 1, runs, status)

    status_arr = np.asarray(statuses)
    out: Dict[str, float] = {
        f"avg_{k}": float(np.mean(values)) for k, values in samples.items()
    }
    out["win_rate"] = float(np.mean(status_arr == 1))
    out["loss_rate"] = float(np.mean(status_arr == -1))
    out["std_guesses_count"] = float(np.std(samples["guesses_count"]))
    out["runs"] = float(runs)

    logger.info(
        "%d runs on %dx%d/%d: win rate %.3f",
        runs, width, height, mines_count, out["win_rate"],
    )
    return out


def plot_results(results: Dict[str, float], *, show: bool = True) -> plt.Figure:
    """
    Draw a bar chart of the averaged per-game counters from run_solver_many_tests().

    Args:
        results: Output of run_solver_many_tests().
        show: If True, display the figure with plt.show().

    Returns:
        The matplotlib figure.
    """
    keys = [
        "avg_steps_count",
        "avg_flags_count",
        "avg_safe_reveals_count",
        "avg_guesses_count",
    ]
    missing = [k for k in keys if k not in results]
    if missing:
        raise KeyError(f"Missing result keys: {missing}")

    labels = [k[len("avg_"):-len("_count")] for k in keys]
    values = [results[k] for k in keys]
    x = np.arange(len(labels))

    fig, ax = plt.subplots()
    ax.bar(x, values)
    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.set_ylabel("Average per game")
    ax.set_title(f"Solver activity (win rate {results.get('win_rate', 0.0):.1%})")
    fig.tight_layout()
    if show:
        plt.show()
    return fig
