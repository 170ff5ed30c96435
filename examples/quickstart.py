"""
Quickstart example for the Minesweeper rule solver.

This script demonstrates basic usage of the solver.
"""

import random

from minesolver import (
    Board,
    RuleSolver,
    count_unknown_or_flagged,
    format_board,
    generate_board,
    is_lost,
    run_solver_many_tests,
)
from minesolver.board import UNKNOWN


def main():
    print("=" * 60)
    print("Minesweeper Rule Solver - Quickstart Example")
    print("=" * 60)

    # Example 1: Step through a single game by hand
    print("\n1. Solving a single 16x16 game with 40 mines...")
    print("-" * 60)

    rng = random.Random(2024)
    width, height, mines = 16, 16, 40
    real = generate_board(8, 8, width, height, mines, rng)
    solver = RuleSolver(rng=rng)
    player = solver.first_step(real, Board(width, height, fill=UNKNOWN), 8, 8)

    while not is_lost(real, player) and count_unknown_or_flagged(player) != mines:
        previous = player
        player = solver.solve_step(real, previous)
        solver.update_stuck(previous, player)

    result = "LOST" if is_lost(real, player) else "WON"
    print(f"Result: {result}")
    for key, value in solver.stats().items():
        print(f"{key}: {value}")

    # Example 2: Show final board state
    print("\n2. Final board state:")
    print("-" * 60)
    print(format_board(player))

    # Example 3: Run multiple games for statistics
    print("\n3. Running 50 games for win rate statistics...")
    print("-" * 60)

    results = run_solver_many_tests(16, 16, 40, runs=50, seed=0)
    print(f"Win rate: {results['win_rate']*100:.1f}%")
    print(f"Average steps per game: {results['avg_steps_count']:.1f}")
    print(f"Average guesses per game: {results['avg_guesses_count']:.1f}")

    print("\n" + "=" * 60)
    print("Done! Run `python -m minesolver` to watch a full-size game.")
    print("=" * 60)


if __name__ == "__main__":
    main()
