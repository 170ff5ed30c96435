"""Cell states and the fixed-size board container used by both boards of a game."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from .utils import Coordinate, get_neighborhoods


class CellKind(Enum):
    """Tag of a cell variant."""

    MINE = "mine"
    NUMBER = "number"
    EMPTY = "empty"
    UNKNOWN = "unknown"
    FLAGGED = "flagged"
    SELECTED = "selected"


@dataclass(frozen=True)
class Cell:
    """
    A single board cell.

    Only NUMBER cells carry a meaningful ``count`` (1..8); every other kind
    keeps the default 0 so that equality stays structural.
    """

    kind: CellKind
    count: int = 0

    @classmethod
    def number(cls, count: int) -> "Cell":
        """Build a numbered cell, validating its adjacent-mine count."""
        if not 1 <= count <= 8:
            raise ValueError(f"Number cell count must be in 1..8, got {count}.")
        return cls(CellKind.NUMBER, count)

    @property
    def is_number(self) -> bool:
        return self.kind is CellKind.NUMBER

    @property
    def is_hidden(self) -> bool:
        """True for cells the player has not opened (unknown or flagged)."""
        return self.kind is CellKind.UNKNOWN or self.kind is CellKind.FLAGGED


MINE = Cell(CellKind.MINE)
EMPTY = Cell(CellKind.EMPTY)
UNKNOWN = Cell(CellKind.UNKNOWN)
FLAGGED = Cell(CellKind.FLAGGED)
SELECTED = Cell(CellKind.SELECTED)


class Board:
    """Row-major grid of cells with fixed width and height."""

    def __init__(self, width: int, height: int, fill: Cell = UNKNOWN) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Width and height must be positive.")
        self.width: int = width
        self.height: int = height
        self._cells: List[Cell] = [fill] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) is outside the {self.width}x{self.height} board."
            )
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, coord: Coordinate) -> Cell:
        x, y = coord
        return self._cells[self._index(x, y)]

    def __setitem__(self, coord: Coordinate, cell: Cell) -> None:
        x, y = coord
        self._cells[self._index(x, y)] = cell

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._cells == other._cells
        )

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height})"

    def copy(self) -> "Board":
        """Return an independent snapshot of this board."""
        clone = Board(self.width, self.height)
        clone._cells = list(self._cells)
        return clone

    def neighbors(self, x: int, y: int) -> Tuple[Coordinate, ...]:
        """Return the Moore neighborhood of (x, y) clipped to the board."""
        return get_neighborhoods(self.width, self.height)[(x, y)]

    def coordinates(self) -> Iterator[Coordinate]:
        """Iterate over every coordinate in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def cells(self) -> Iterator[Tuple[Coordinate, Cell]]:
        """Iterate over ((x, y), cell) pairs in row-major order."""
        for i, cell in enumerate(self._cells):
            yield (i % self.width, i // self.width), cell

    def rows(self) -> List[List[Cell]]:
        return [
            self._cells[y * self.width:(y + 1) * self.width]
            for y in range(self.height)
        ]


def count_unknown_or_flagged(board: Board) -> int:
    """Count cells the player has not opened yet. Equals the mine count on a win."""
    return sum(1 for _, cell in board.cells() if cell.is_hidden)


def highest_revealed_number(board: Board) -> int:
    """Return the largest revealed adjacency number, or 0 if none is visible."""
    return max((cell.count for _, cell in board.cells() if cell.is_number), default=0)


def is_lost(real_board: Board, player_board: Board) -> bool:
    """True iff an opened player cell sits on a real mine."""
    for coord, cell in player_board.cells():
        if not cell.is_hidden and real_board[coord] == MINE:
            return True
    return False
