"""
Minesweeper Rule Solver

A Minesweeper board simulator with a deterministic rule-based auto-solver:
- Board generation keeping the opening move's row and column mine-free
- Flood-fill reveal of connected empty regions
- Two single-cell deduction rules (forced flags, forced reveals)
- Random guessing when no rule applies
"""

from .board import (
    Board,
    Cell,
    CellKind,
    count_unknown_or_flagged,
    highest_revealed_number,
    is_lost,
)
from .engine import build_board, format_board, generate_board, play_cli, reveal
from .solver import RuleSolver
from .analysis import run_solver_single_test, run_solver_many_tests, plot_results

__version__ = "1.0.0"

__all__ = [
    # Core classes
    "Board",
    "Cell",
    "CellKind",
    "RuleSolver",
    # Engine
    "build_board",
    "generate_board",
    "reveal",
    # Queries
    "count_unknown_or_flagged",
    "highest_revealed_number",
    "is_lost",
    # CLI
    "format_board",
    "play_cli",
    # Analysis functions
    "run_solver_single_test",
    "run_solver_many_tests",
    "plot_results",
]
