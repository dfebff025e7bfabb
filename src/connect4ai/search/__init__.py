"""Search module - move evaluation and lookahead AI."""

from .evaluation import MoveEvaluation, raw_score
from .ai import AI

__all__ = [
    "MoveEvaluation",
    "raw_score",
    "AI",
]
