"""
Unit tests for Cell, Board and the board queries
"""

import pytest
from minesolver.board import (
    EMPTY,
    FLAGGED,
    MINE,
    UNKNOWN,
    Board,
    Cell,
    CellKind,
    count_unknown_or_flagged,
    highest_revealed_number,
    is_lost,
)


class TestCell:
    """Test cases for the Cell variant"""

    def test_number_cells_compare_by_count(self):
        assert Cell.number(3) == Cell.number(3)
        assert Cell.number(3) != Cell.number(4)
        assert Cell.number(1) != EMPTY

    @pytest.mark.parametrize("count", [0, 9, -1])
    def test_number_count_out_of_range(self, count):
        with pytest.raises(ValueError):
            Cell.number(count)

    def test_hidden_kinds(self):
        assert UNKNOWN.is_hidden
        assert FLAGGED.is_hidden
        assert not EMPTY.is_hidden
        assert not MINE.is_hidden
        assert not Cell.number(2).is_hidden

    def test_is_number(self):
        assert Cell.number(5).is_number
        assert Cell.number(5).kind is CellKind.NUMBER
        assert not EMPTY.is_number


class TestBoard:
    """Test cases for the Board container"""

    def test_initialization(self):
        board = Board(4, 2)
        assert board.width == 4
        assert board.height == 2
        assert all(cell == UNKNOWN for _, cell in board.cells())
        assert len(list(board.coordinates())) == 8

    def test_invalid_dimensions(self):
        with pytest.raises(ValueError):
            Board(0, 5)

    def test_get_and_set(self):
        board = Board(3, 2)
        board[2, 1] = FLAGGED
        assert board[2, 1] == FLAGGED
        assert board.rows()[1][2] == FLAGGED
        assert board[0, 0] == UNKNOWN

    @pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (3, 0), (0, 2)])
    def test_out_of_bounds_access(self, coord):
        board = Board(3, 2)
        with pytest.raises(IndexError):
            board[coord]
        with pytest.raises(IndexError):
            board[coord] = MINE

    def test_copy_is_independent(self):
        board = Board(2, 2)
        clone = board.copy()
        assert clone == board
        clone[0, 0] = EMPTY
        assert board[0, 0] == UNKNOWN
        assert clone != board

    def test_equality_requires_same_shape(self):
        assert Board(2, 3) != Board(3, 2)

    def test_cells_are_row_major(self):
        board = Board(2, 2)
        assert [coord for coord, _ in board.cells()] == [(0, 0), (1, 0), (0, 1), (1, 1)]


class TestQueries:
    """Test cases for the driver-facing board queries"""

    def test_count_unknown_or_flagged(self):
        board = Board(3, 1)
        board[0, 0] = FLAGGED
        board[1, 0] = Cell.number(1)
        assert count_unknown_or_flagged(board) == 2

    def test_highest_revealed_number(self):
        board = Board(3, 1)
        assert highest_revealed_number(board) == 0
        board[0, 0] = Cell.number(2)
        board[2, 0] = Cell.number(5)
        assert highest_revealed_number(board) == 5

    def test_flag_on_mine_is_not_a_loss(self):
        real = Board(2, 1, fill=EMPTY)
        real[0, 0] = MINE
        player = Board(2, 1)
        player[0, 0] = FLAGGED
        assert is_lost(real, player) is False

    def test_opened_mine_is_a_loss(self):
        real = Board(2, 1, fill=EMPTY)
        real[0, 0] = MINE
        player = Board(2, 1)
        player[0, 0] = MINE
        assert is_lost(real, player) is True
