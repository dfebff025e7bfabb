"""
Move evaluation: the outcome of one hypothetical disc drop.

Static estimate from a run histogram runs[0..3]:

    raw = sum(2^(i-3) * runs[i]) / 2

Weights are 1/8, 1/4, 1/2 and 1 for run lengths 1-4, halved because every
line through the origin is counted once per sense.
"""

from __future__ import annotations

from ..game import Board, TEAMS, WIN_LENGTH, has_winning_run, runs_from_point


def raw_score(runs: list[int]) -> float:
    """Weighted run count before clamping."""
    return sum(2.0 ** (i - (WIN_LENGTH - 1)) * runs[i] for i in range(WIN_LENGTH)) / 2


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class MoveEvaluation:
    """
    Board and run histogram after `team` drops a disc in `column`.

    The board passed in is cloned, never modified.

    Args:
        team: Team making the move
        board: Position before the move
        column: Column to drop into
    """

    def __init__(self, team: int, board: Board, column: int):
        if team not in TEAMS:
            raise ValueError(f"Invalid team {team}")

        self.team = team
        self.column = column
        self.board = board.copy()

        if not self.board.insert(column, team):
            raise ValueError(f"Column {column} is full")

        self.position = self.board.last_insert_position(column)
        self.runs = runs_from_point(self.board, self.position, team)

    @property
    def has_winning_run(self) -> bool:
        return has_winning_run(self.runs)

    @property
    def raw_score(self) -> float:
        return raw_score(self.runs)

    def get_win_probability(self, team: int) -> float:
        """
        Estimated probability that `team` wins after this move.

        A completed four is certain: 1.0 for the mover, 0.0 for the other
        side. Otherwise the clamped raw score for the mover, or one minus
        the raw score for the other side.
        """
        if self.has_winning_run:
            return 1.0 if team == self.team else 0.0

        raw = self.raw_score
        if team == self.team:
            return _clamp(min(raw, 1.0))
        return _clamp(1.0 - raw)

    def compare(self, other: MoveEvaluation) -> int:
        """
        Order two evaluations by their longest differing run slot.

        Positive when this move has more runs in the highest slot where the
        histograms differ, scaled by the slot index. Differences in the
        length-1 slot alone score zero.
        """
        for i in range(WIN_LENGTH - 1, -1, -1):
            if self.runs[i] != other.runs[i]:
                return i * (self.runs[i] - other.runs[i])
        return 0

    def __repr__(self) -> str:
        return (
            f"MoveEvaluation(team={self.team}, column={self.column}, "
            f"runs={self.runs})"
        )
