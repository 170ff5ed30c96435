"""
Shared fixtures for the minesolver test suite
"""

import random

import matplotlib
import pytest

matplotlib.use("Agg")

from minesolver.board import UNKNOWN, Board
from minesolver.engine import build_board


@pytest.fixture
def rng():
    """Seeded random source so generated boards are reproducible"""
    return random.Random(1234)


@pytest.fixture
def corner_mine_board():
    """3x3 real board with a single mine in the bottom-right corner"""
    return build_board(3, 3, [(2, 2)])


@pytest.fixture
def wall_board():
    """5x3 real board split by a full column of mines at x=2"""
    return build_board(5, 3, [(2, 0), (2, 1), (2, 2)])


@pytest.fixture
def blank_player():
    """Factory for all-unknown player boards"""
    def make(width, height):
        return Board(width, height, fill=UNKNOWN)
    return make
