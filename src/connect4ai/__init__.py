"""
Connect 4 with a run-lookahead AI.

The AI scores moves from "run histograms": for the disc just dropped, how
many lines through it hold 1, 2, 3 or 4 same-team discs with room to grow
into four in a row. A bounded recursive search averages those scores over
future replies.

Usage:
    from connect4ai.game import Board, Team, runs_from_point
    from connect4ai.search import AI

    board = Board()
    board.insert(3, Team.BLUE)

    ai = AI(team=Team.RED, difficulty=3)
    column = ai.pick_best_move(board)
"""

__version__ = "0.1.0"

from . import game
from . import search
from . import play
from . import eval

__all__ = [
    "game",
    "search",
    "play",
    "eval",
    "__version__",
]
