"""
Run detection from a single disc.

A "run" is a line of same-team discs through an origin cell that could
grow into four in a row. For each of the 8 direction-senses (4 axes x 2)
the detector reports a length from 0 to 4:

- 4: four in a row, the origin's team has won
- 1-3: a live run of that length (a run with a gap is capped at 3)
- 0: dead line, the opponent or the board edge leaves no room for four

The histogram from runs_from_point counts scans by length. A line that
extends on both sides of the origin is seen from both senses and counted
twice; the search's static estimate halves its weights to match.
"""

from __future__ import annotations

from typing import Tuple

from .board import Board, PositionLike, Team, WIN_LENGTH, other_team

# One sense of each axis: horizontal, diagonal, vertical, anti-diagonal
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (1, 1), (0, 1), (-1, 1))


def run_length_in_direction(
    board: Board,
    origin: PositionLike,
    direction: Tuple[int, int],
    team: int,
) -> int:
    """
    Longest viable run through origin along one direction.

    Walks outward one radius at a time, the reverse sense (origin minus
    direction) before the forward sense. The reverse sense stops adding
    to the run at its first empty cell. The forward sense may skip one
    empty cell and keep counting; a second empty cell ends it. Cells that
    are empty or same-team count toward the potential length whether or
    not they extend the run.

    Args:
        board: Board to inspect
        origin: Starting cell (normally the disc just dropped)
        direction: (dx, dy) step of the forward sense
        team: Team whose run is measured

    Returns:
        Run length in [0, 4]
    """
    col, row = origin
    dx, dy = direction
    opponent = other_team(team)

    forward_active = True
    reverse_active = True
    forward_counting = True
    reverse_counting = True
    gap_used = False

    run_len = 1  # the origin disc
    potential_len = 1

    for step in range(1, WIN_LENGTH):
        if not (forward_active or reverse_active):
            break

        # Reverse first: AA.A_A must read as a run of 4, not 3 with a gap
        if reverse_active:
            pos = (col - step * dx, row - step * dy)
            cell = board.get_cell_team(pos) if board.on_board(pos) else opponent
            if cell == opponent:
                reverse_active = False
            else:
                potential_len += 1
                if cell == team and reverse_counting:
                    run_len += 1
                    if not gap_used and run_len >= WIN_LENGTH:
                        return WIN_LENGTH
                elif cell == Team.EMPTY:
                    reverse_counting = False

        if forward_active:
            pos = (col + step * dx, row + step * dy)
            cell = board.get_cell_team(pos) if board.on_board(pos) else opponent
            if cell == opponent:
                forward_active = False
            else:
                potential_len += 1
                if cell == team and forward_counting:
                    run_len += 1
                    if not gap_used and run_len >= WIN_LENGTH:
                        return WIN_LENGTH
                elif cell == Team.EMPTY:
                    if gap_used:
                        forward_counting = False
                    else:
                        gap_used = True

    if potential_len < WIN_LENGTH:
        return 0

    if gap_used:
        return min(run_len, WIN_LENGTH - 1)
    return min(run_len, WIN_LENGTH)


def runs_from_point(board: Board, origin: PositionLike, team: int) -> list[int]:
    """
    Histogram of run lengths over all 8 direction-senses from origin.

    Returns:
        List of 4 counts; index i counts scans that found length i + 1
    """
    runs = [0] * WIN_LENGTH
    for dx, dy in DIRECTIONS:
        for direction in ((dx, dy), (-dx, -dy)):
            length = run_length_in_direction(board, origin, direction, team)
            if length > 0:
                runs[length - 1] += 1
    return runs


def has_winning_run(runs: list[int]) -> bool:
    """True if the histogram holds a four in a row."""
    return runs[WIN_LENGTH - 1] > 0
