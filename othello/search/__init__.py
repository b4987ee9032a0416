"""Position evaluation and game-tree search."""

from .evaluator import (
    DEFAULT_WEIGHTS,
    EvaluatorWeights,
    PhaseWeights,
    corner_score,
    early_mid_game_score,
    evaluate,
    late_game_score,
    mobility_score,
    piece_score,
    space_value_choice,
    square_value,
)
from .minimax import SearchResult, SearchStats, minimax

__all__ = [
    "DEFAULT_WEIGHTS",
    "EvaluatorWeights",
    "PhaseWeights",
    "SearchResult",
    "SearchStats",
    "corner_score",
    "early_mid_game_score",
    "evaluate",
    "late_game_score",
    "minimax",
    "mobility_score",
    "piece_score",
    "space_value_choice",
    "square_value",
]
