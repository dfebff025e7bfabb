"""
Connect 4 board.

Board representation:
- 7 columns x 6 rows, stored column-major
- row 0 is the bottom of a column (first cell filled by gravity)
- 0 = empty, 1 = blue team, 2 = red team

Discs only enter the board through insert(), so every column's filled
cells are contiguous from row 0 to height - 1.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Sequence, Tuple, Union

import numpy as np

COLS = 7
ROWS = 6
WIN_LENGTH = 4

# Returned by get_cell_team for positions outside the grid
OFF_BOARD = -1


class Team(IntEnum):
    """Cell occupancy / team marker."""

    EMPTY = 0
    BLUE = 1
    RED = 2


TEAMS = (Team.BLUE, Team.RED)


def other_team(team: int) -> int:
    """Return the opposing team (1 <-> 2)."""
    return team % 2 + 1


class Position(NamedTuple):
    """Grid coordinate: (column, row), row 0 at the bottom."""

    column: int
    row: int


PositionLike = Union[Position, Tuple[int, int]]


class Board:
    """
    Fixed 7x6 grid with gravity.

    Cells are held in a numpy int8 array of shape (COLS, ROWS) and the
    fill level of each column in a separate height vector.
    """

    def __init__(self) -> None:
        self.cells = np.zeros((COLS, ROWS), dtype=np.int8)
        self.heights = np.zeros(COLS, dtype=np.int8)

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[int]]) -> Board:
        """
        Build a board from bottom-to-top column lists.

        Columns shorter than ROWS are padded with empty cells. A column's
        height is the index of its last non-empty cell plus one.

        Args:
            columns: Up to COLS sequences of team values

        Returns:
            New Board
        """
        if len(columns) > COLS:
            raise ValueError(f"Expected at most {COLS} columns, got {len(columns)}")

        board = cls()
        for col, values in enumerate(columns):
            if len(values) > ROWS:
                raise ValueError(f"Column {col} has {len(values)} cells, max is {ROWS}")
            for row, value in enumerate(values):
                if value not in (Team.EMPTY, Team.BLUE, Team.RED):
                    raise ValueError(f"Invalid team {value} at ({col}, {row})")
                board.cells[col, row] = value
                if value != Team.EMPTY:
                    board.heights[col] = row + 1
        return board

    def copy(self) -> Board:
        clone = Board.__new__(Board)
        clone.cells = self.cells.copy()
        clone.heights = self.heights.copy()
        return clone

    def reset(self) -> None:
        """Empty every column in place."""
        self.cells.fill(Team.EMPTY)
        self.heights.fill(0)

    @staticmethod
    def on_board(pos: PositionLike) -> bool:
        col, row = pos
        return 0 <= col < COLS and 0 <= row < ROWS

    def get_cell_team(self, pos: PositionLike) -> int:
        """Return the occupant of a cell, or OFF_BOARD outside the grid."""
        if not self.on_board(pos):
            return OFF_BOARD
        col, row = pos
        return int(self.cells[col, row])

    def get_column_height(self, col: int) -> int:
        return int(self.heights[col])

    def is_column_full(self, col: int) -> bool:
        return bool(self.heights[col] >= ROWS)

    def is_full(self) -> bool:
        """True when every column is full (draw state)."""
        return bool(np.all(self.heights >= ROWS))

    def available_columns(self) -> list[int]:
        """Return non-full column indices in increasing order."""
        return [c for c in range(COLS) if self.heights[c] < ROWS]

    def insert(self, col: int, team: int) -> bool:
        """
        Drop a disc into a column.

        Args:
            col: Column index (0-6)
            team: Team placing the disc

        Returns:
            False if the column is full (board unchanged), True otherwise
        """
        if col < 0 or col >= COLS:
            raise ValueError(f"Invalid column {col}, must be 0-{COLS-1}")

        if self.is_column_full(col):
            return False

        row = int(self.heights[col])
        self.cells[col, row] = team
        self.heights[col] = row + 1
        return True

    def last_insert_position(self, col: int) -> Position:
        """Position of the top disc in a column (the most recent insert)."""
        return Position(col, int(self.heights[col]) - 1)

    def runs_from_point(self, pos: PositionLike, team: int) -> list[int]:
        from .runs import runs_from_point

        return runs_from_point(self, pos, team)

    def columns(self) -> list[list[int]]:
        """Bottom-to-top column lists, the inverse of from_columns."""
        return [[int(v) for v in self.cells[c]] for c in range(COLS)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(
            np.array_equal(self.cells, other.cells)
            and np.array_equal(self.heights, other.heights)
        )

    def __repr__(self) -> str:
        return f"Board({self.columns()})"


def render(board: Board, last_move: int = -1) -> str:
    """
    Render the board as a string for display.

    - 'X' = blue team
    - 'O' = red team
    - '.' = empty
    """
    lines = []
    lines.append(" " + " ".join(str(i) for i in range(COLS)))
    lines.append("-" * (COLS * 2 + 1))

    symbols = {Team.EMPTY: ".", Team.BLUE: "X", Team.RED: "O"}

    for row in range(ROWS - 1, -1, -1):
        row_str = "|" + "|".join(symbols[int(board.cells[c, row])] for c in range(COLS)) + "|"
        lines.append(row_str)

    lines.append("-" * (COLS * 2 + 1))

    if last_move >= 0:
        pointer = " " * (last_move * 2 + 1) + "^"
        lines.append(pointer)

    return "\n".join(lines)
