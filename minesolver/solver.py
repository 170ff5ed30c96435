"""Rule-based Minesweeper solver: two single-cell deduction rules plus random guessing."""

import logging
import random
from typing import Dict, Optional, Set

from .board import FLAGGED, Board, CellKind
from .engine import reveal
from .utils import Coordinate

logger = logging.getLogger(__name__)


class RuleSolver:
    """
    Deterministic rule solver with a random-guess fallback.

    Each step works on a copy of the player board and returns the new board,
    so callers never observe a half-applied step. Two rules are applied per
    step, each computed from a frozen snapshot and then applied as a batch:

    1. Flagging: if a Number(n) cell has exactly n hidden (unknown or flagged)
       neighbors, all of them are mines.
    2. Reveal: if a Number(n) cell already has n flagged neighbors, its
       remaining unknown neighbors are safe.

    ``stuck`` is owned by the driver: it is set through ``update_stuck`` when a
    step made no progress, and the next ``solve_step`` then guesses instead.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        Args:
            rng: Random source for guesses. Defaults to an unseeded generator.
        """
        self.rng: random.Random = rng if rng is not None else random.Random()
        self.stuck: bool = False

        # Metrics / counters (for analysis)
        self.steps_count: int = 0
        self.flags_count: int = 0
        self.safe_reveals_count: int = 0
        self.guesses_count: int = 0

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def first_step(
        self, real_board: Board, player_board: Board, x: int, y: int
    ) -> Board:
        """Open the origin cell; the whole opening cascade shares one visited set."""
        new_board = player_board.copy()
        visited: Set[Coordinate] = set()
        reveal(real_board, new_board, x, y, visited)
        return new_board

    def random_step(self, real_board: Board, player_board: Board) -> Board:
        """
        Reveal a uniformly chosen unknown cell.

        Raises:
            ValueError: If the player board has no unknown cells left.
        """
        unknown = [
            coord for coord, cell in player_board.cells()
            if cell.kind is CellKind.UNKNOWN
        ]
        if not unknown:
            raise ValueError("No unknown cells left to guess.")

        x, y = self.rng.choice(unknown)
        logger.debug("Guessing (%d, %d) among %d unknown cells", x, y, len(unknown))

        new_board = player_board.copy()
        reveal(real_board, new_board, x, y)
        self.guesses_count += 1
        self.stuck = False
        return new_board

    def solve_step(self, real_board: Board, player_board: Board) -> Board:
        """
        Run one solver step and return the resulting player board.

        A stuck solver makes one random guess. Otherwise the flagging pass runs
        first, then the reveal pass on the flagged board.
        """
        self.steps_count += 1
        if self.stuck:
            return self.random_step(real_board, player_board)

        new_board = player_board.copy()

        to_flag = self.flag_candidates(new_board)
        for coord in to_flag:
            new_board[coord] = FLAGGED

        to_reveal = self.safe_candidates(new_board)
        for x, y in sorted(to_reveal, key=lambda c: (c[1], c[0])):
            reveal(real_board, new_board, x, y)

        self.flags_count += len(to_flag)
        self.safe_reveals_count += len(to_reveal)
        logger.debug(
            "Step %d: flagged %d, revealed %d", self.steps_count, len(to_flag), len(to_reveal)
        )
        return new_board

    # -------------------------------------------------------------------------
    # Deduction rules
    # -------------------------------------------------------------------------

    @staticmethod
    def flag_candidates(board: Board) -> Set[Coordinate]:
        """
        Return unknown cells that are certainly mines.

        A Number(n) cell whose hidden neighbors number exactly n forces all of
        them to be mines. Cells that are already flagged are not returned.
        """
        out: Set[Coordinate] = set()
        for (x, y), cell in board.cells():
            if not cell.is_number:
                continue
            hidden = [n for n in board.neighbors(x, y) if board[n].is_hidden]
            if len(hidden) == cell.count:
                out.update(n for n in hidden if board[n].kind is CellKind.UNKNOWN)
        return out

    @staticmethod
    def safe_candidates(board: Board) -> Set[Coordinate]:
        """
        Return unknown cells that are certainly safe.

        A Number(n) cell with n flagged neighbors has no mine among its
        remaining unknown neighbors.
        """
        out: Set[Coordinate] = set()
        for (x, y), cell in board.cells():
            if not cell.is_number:
                continue
            unknown = []
            flagged = 0
            for n in board.neighbors(x, y):
                kind = board[n].kind
                if kind is CellKind.UNKNOWN:
                    unknown.append(n)
                elif kind is CellKind.FLAGGED:
                    flagged += 1
            if unknown and flagged == cell.count:
                out.update(unknown)
        return out

    # -------------------------------------------------------------------------
    # Driver helpers
    # -------------------------------------------------------------------------

    def update_stuck(self, previous: Board, current: Board) -> bool:
        """Mark the solver stuck when a step left the player board unchanged."""
        self.stuck = previous == current
        return self.stuck

    def stats(self) -> Dict[str, int]:
        return {
            "steps_count": self.steps_count,
            "flags_count": self.flags_count,
            "safe_reveals_count": self.safe_reveals_count,
            "guesses_count": self.guesses_count,
        }
