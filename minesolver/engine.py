"""Board generation, flood-fill reveal and the terminal auto-play driver."""

import logging
import random
import time
from collections import deque
from typing import Deque, Iterable, List, Optional, Set

from .board import (
    EMPTY,
    MINE,
    SELECTED,
    UNKNOWN,
    Board,
    Cell,
    CellKind,
    count_unknown_or_flagged,
    highest_revealed_number,
    is_lost,
)
from .utils import Coordinate

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 75
DEFAULT_HEIGHT = 28
DEFAULT_MINES_COUNT = 300
STEP_DELAY = 0.5


# -----------------------------------------------------------------------------
# Board generation
# -----------------------------------------------------------------------------


def place_mines(
    width: int,
    height: int,
    mines_count: int,
    origin_x: int,
    origin_y: int,
    rng: random.Random,
) -> Set[Coordinate]:
    """
    Choose mine positions uniformly at random, keeping the origin's row and column clear.

    Args:
        width: Board width (number of columns).
        height: Board height (number of rows).
        mines_count: Number of mines to place.
        origin_x: X-coordinate of the opening move.
        origin_y: Y-coordinate of the opening move.
        rng: Random source used for sampling.

    Returns:
        The set of mine coordinates.

    Raises:
        ValueError: If the origin is off the board or there are not enough
            eligible cells for the requested mines.
    """
    if not (0 <= origin_x < width and 0 <= origin_y < height):
        raise ValueError("Origin coordinates are outside the board.")
    if mines_count < 0:
        raise ValueError("mines_count must be non-negative.")

    # Every cell sharing the origin's x or y stays mine-free.
    eligible: List[Coordinate] = [
        (x, y)
        for y in range(height)
        for x in range(width)
        if x != origin_x and y != origin_y
    ]
    if mines_count > len(eligible):
        raise ValueError(
            f"Cannot place {mines_count} mines: only {len(eligible)} cells lie "
            "outside the origin's row and column."
        )

    return set(rng.sample(eligible, mines_count))


def build_board(width: int, height: int, mines: Iterable[Coordinate]) -> Board:
    """
    Build a ground-truth board from explicit mine positions.

    Non-mine cells get Number(n) when n > 0 neighbors are mines, else Empty.
    """
    board = Board(width, height, fill=EMPTY)
    for mx, my in mines:
        board[mx, my] = MINE

    for (x, y), cell in board.cells():
        if cell == MINE:
            continue
        count = sum(1 for n in board.neighbors(x, y) if board[n] == MINE)
        if count > 0:
            board[x, y] = Cell.number(count)

    return board


def generate_board(
    origin_x: int,
    origin_y: int,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    mines_count: int = DEFAULT_MINES_COUNT,
    rng: Optional[random.Random] = None,
) -> Board:
    """Generate a random real board for an opening move at (origin_x, origin_y)."""
    if width <= 0 or height <= 0:
        raise ValueError("Width and height must be positive.")
    rng = rng if rng is not None else random.Random()

    mines = place_mines(width, height, mines_count, origin_x, origin_y, rng)
    logger.debug(
        "Generated %dx%d board with %d mines, origin (%d, %d)",
        width, height, len(mines), origin_x, origin_y,
    )
    return build_board(width, height, mines)


# -----------------------------------------------------------------------------
# Reveal engine
# -----------------------------------------------------------------------------


def reveal(
    real_board: Board,
    player_board: Board,
    x: int,
    y: int,
    visited: Optional[Set[Coordinate]] = None,
) -> List[Coordinate]:
    """
    Open (x, y) on the player board and cascade through connected empty cells.

    Args:
        real_board: Ground-truth board.
        player_board: Player knowledge, mutated in place.
        x: X-coordinate of the cell to open.
        y: Y-coordinate of the cell to open.
        visited: Cells already handled by this reveal. A fresh set is used
            when omitted; pass one explicitly to share it across calls.

    Returns:
        The coordinates written to the player board, in visiting order.
    """
    if visited is None:
        visited = set()

    frontier: Deque[Coordinate] = deque([(x, y)])
    written: List[Coordinate] = []

    while frontier:
        cx, cy = frontier.popleft()
        if not real_board.in_bounds(cx, cy) or (cx, cy) in visited:
            continue
        visited.add((cx, cy))

        truth = real_board[cx, cy]
        if truth.kind is CellKind.NUMBER or truth.kind is CellKind.MINE:
            player_board[cx, cy] = truth
            written.append((cx, cy))
        elif truth.kind is CellKind.EMPTY:
            player_board[cx, cy] = truth
            written.append((cx, cy))
            frontier.extend(real_board.neighbors(cx, cy))

    return written


# -----------------------------------------------------------------------------
# Display
# -----------------------------------------------------------------------------

_ANSI_RESET = "\033[0m"
_ANSI_CLEAR = "\x1b[2J\x1b[1;1H"
_ANSI_YELLOW = "\033[33m"
_NUMBER_COLORS = {
    1: "\033[34m",
    2: "\033[32m",
    3: "\033[31m",
    4: "\033[33m",
    5: "\033[36m",
    6: "\033[35m",
    7: "\033[1;35m",
    8: "\033[1;31m",
}
_SYMBOLS = {
    CellKind.MINE: "❤ ",
    CellKind.EMPTY: "  ",
    CellKind.UNKNOWN: "⬛",
    CellKind.FLAGGED: "🚩",
    CellKind.SELECTED: "🔴",
}


def format_cell(cell: Cell, color: bool = True) -> str:
    """Render one cell as a two-column terminal glyph."""
    if cell.is_number:
        digit = str(cell.count)
        if color:
            digit = f"{_NUMBER_COLORS[cell.count]}{digit}{_ANSI_RESET}"
        return digit + " "
    return _SYMBOLS[cell.kind]


def format_board(board: Board, color: bool = True) -> str:
    """Render the whole board as a multi-line string for terminal display."""
    return "\n".join(
        "".join(format_cell(cell, color) for cell in row) for row in board.rows()
    )


def format_status(board: Board) -> str:
    return (
        f"Unknowns: {count_unknown_or_flagged(board)} | "
        f"Highest: {highest_revealed_number(board)}"
    )


def play_cli(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    mines_count: int = DEFAULT_MINES_COUNT,
    *,
    rng: Optional[random.Random] = None,
    delay: float = STEP_DELAY,
    wait_for_input: bool = True,
    max_steps: Optional[int] = None,
    color: bool = True,
) -> int:
    """
    Let the rule solver play a fresh game in the terminal.

    Args:
        width: Board width.
        height: Board height.
        mines_count: Total number of mines.
        rng: Random source for the origin, the mine field and guesses.
        delay: Pause in seconds between solver steps.
        wait_for_input: If True, wait for Enter before each random guess.
        max_steps: Optional bound on solver steps after the opening move.
        color: If True, colour numbers with ANSI escapes.

    Returns:
        -1 on loss, 1 on win, 0 if max_steps ran out first.
    """
    from .solver import RuleSolver

    rng = rng if rng is not None else random.Random()
    solver = RuleSolver(rng=rng)

    origin_x = rng.randrange(width)
    origin_y = rng.randrange(height)
    print(f"x:{origin_x}, y:{origin_y}")

    real_board = generate_board(origin_x, origin_y, width, height, mines_count, rng)
    player_board = Board(width, height, fill=UNKNOWN)

    opening = player_board.copy()
    opening[origin_x, origin_y] = SELECTED
    print(format_board(opening, color))
    print()

    print(_ANSI_CLEAR, end="")
    player_board = solver.first_step(real_board, player_board, origin_x, origin_y)
    print(format_board(player_board, color))
    print(format_status(player_board))

    steps = 0
    while max_steps is None or steps < max_steps:
        if solver.stuck and wait_for_input:
            input()
        print(_ANSI_CLEAR, end="")

        previous = player_board
        player_board = solver.solve_step(real_board, previous)
        steps += 1
        print(format_board(player_board, color))
        print(format_status(player_board))

        if solver.update_stuck(previous, player_board):
            guess = f"{_ANSI_YELLOW}random guess{_ANSI_RESET}" if color else "random guess"
            if wait_for_input:
                print(f"Stuck, press enter to {guess}")
            else:
                print(f"Stuck, making a {guess}")

        if is_lost(real_board, player_board):
            print("Boom!")
            return -1

        if count_unknown_or_flagged(player_board) == mines_count:
            print("Solved!")
            return 1

        time.sleep(delay)

    logger.info("Stopped after %d steps without a result", steps)
    return 0
