"""Shared board fixtures."""

import pytest

from connect4ai.game import Board

# Columns alternate between these two; no four in a row anywhere
DRAW_COLUMN_A = [1, 1, 2, 2, 1, 1]
DRAW_COLUMN_B = [2, 2, 1, 1, 2, 2]


def draw_columns():
    return [DRAW_COLUMN_A if c % 2 == 0 else DRAW_COLUMN_B for c in range(7)]


@pytest.fixture
def full_board():
    return Board.from_columns(draw_columns())


@pytest.fixture
def mixed_board():
    """Hand-built position with floating discs, used by the run histogram tests."""
    return Board.from_columns([
        [1, 1, 0, 1, 2, 0],
        [1, 2, 2, 1, 2, 2],
        [2, 1, 1, 2, 1, 0],
        [2, 1, 1, 1, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [1, 1, 2, 1, 2, 1],
        [1, 1, 2, 2, 2, 0],
    ])


@pytest.fixture
def cutoff_board():
    """
    Four open columns walled in by full red columns.

    A blue drop in column 0 or 2 sees one live vertical line of length 1,
    in column 4 a vertical run of 2, in column 6 a vertical run of 3.
    """
    return Board.from_columns([
        [2, 2],
        [2, 2, 2, 2, 2, 2],
        [2, 2],
        [2, 2, 2, 2, 2, 2],
        [2, 2, 1],
        [2, 2, 2, 2, 2, 2],
        [2, 2, 1, 1],
    ])
