"""
Lookahead search over run histograms.

The AI scores each candidate column by the probability that its team
wins, estimated recursively:

1. Drop a disc for the team acting at this depth (alternating turns)
2. A completed four ends the branch: 1.0 if our team made it, else 0.0
3. Below the depth cutoff, recurse; at the cutoff, use the static
   estimate from the move's run histogram
4. A ply's value is the mean over its candidate columns
"""

from __future__ import annotations

import logging
import time

from ..game import Board, TEAMS
from .evaluation import MoveEvaluation

logger = logging.getLogger(__name__)


class AI:
    """
    Heuristic lookahead player.

    Args:
        team: Team the AI plays for
        difficulty: Maximum search depth (plies after the root move)
    """

    def __init__(self, team: int, difficulty: int):
        if team not in TEAMS:
            raise ValueError(f"Invalid team {team}")
        if difficulty < 1:
            raise ValueError("Difficulty must be at least 1")

        self.team = team
        self.difficulty = difficulty

    def acting_team(self, depth: int) -> int:
        """Team to move at a search depth: ours on even, opponent on odd."""
        return (self.team + depth + 1) % 2 + 1

    def pick_best_move(self, board: Board) -> int:
        """
        Choose a column for this AI's next disc.

        The first winning column is taken at once. Otherwise columns are
        ranked by find_win_probability; an equal score from a later column
        replaces the earlier one.

        Args:
            board: Current position (not modified)

        Returns:
            Column index, or -1 if every column is full
        """
        start = time.perf_counter()
        best_column = -1
        best_probability = -1.0

        for column in board.available_columns():
            move = MoveEvaluation(self.team, board, column)
            if move.has_winning_run:
                logger.debug("team %d: winning move in column %d", self.team, column)
                return column

            probability = self.find_win_probability(move.board, 1, self.difficulty)
            logger.debug(
                "team %d: column %d scores %.4f", self.team, column, probability
            )
            if probability >= best_probability:
                best_column = column
                best_probability = probability
            if probability == 1.0:
                break

        logger.debug(
            "team %d: picked column %d (p=%.4f, depth=%d) in %.3fs",
            self.team,
            best_column,
            best_probability,
            self.difficulty,
            time.perf_counter() - start,
        )
        return best_column

    def find_win_probability(self, board: Board, depth: int, max_depth: int) -> float:
        """
        Estimate this AI's probability of winning from a position.

        Args:
            board: Position with the acting team at `depth` to move
            depth: Current ply (1 for the reply to the root move)
            max_depth: Ply at which the static estimate replaces recursion

        Returns:
            Probability in [0, 1]; 0.0 when no column is available
        """
        team = self.acting_team(depth)
        outcomes = []

        for column in board.available_columns():
            move = MoveEvaluation(team, board, column)
            if move.has_winning_run:
                # A forced result at this ply overrides its siblings
                return 1.0 if team == self.team else 0.0

            if depth < max_depth:
                outcomes.append(self.find_win_probability(move.board, depth + 1, max_depth))
            else:
                outcomes.append(move.get_win_probability(self.team))

        if not outcomes:
            return 0.0

        # TODO: mean over replies, not minimax; a min at opponent plies would play stronger
        return sum(outcomes) / len(outcomes)

    def __repr__(self) -> str:
        return f"AI(team={self.team}, difficulty={self.difficulty})"
