"""Static position evaluation.

Every score is relative to the side passed in: positive values favour that
side. The individual terms are normalised ratios in ``[-1, 1]``; the phase
composites weight them differently before and after ``late_game_ply`` plies.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence

from othello.core import BOARD_SIZE, Board, Move, Side, legal_moves

LAST = BOARD_SIZE - 1
EDGE_WEIGHT = 2

CORNERS = frozenset({(0, 0), (0, LAST), (LAST, 0), (LAST, LAST)})
CORNER_ADJACENT_EDGES = frozenset(
    {
        (0, 1), (1, 0),
        (0, LAST - 1), (1, LAST),
        (LAST, 1), (LAST - 1, 0),
        (LAST, LAST - 1), (LAST - 1, LAST),
    }
)
X_SQUARES = frozenset({(1, 1), (1, LAST - 1), (LAST - 1, 1), (LAST - 1, LAST - 1)})


@dataclass(frozen=True)
class PhaseWeights:
    mobility: float = 1.0
    pieces: float = 1.0
    corners: float = 1.0


@dataclass
class EvaluatorWeights:
    early: PhaseWeights = field(default_factory=PhaseWeights)
    late: PhaseWeights = field(default_factory=lambda: PhaseWeights(mobility=1.0, pieces=3.5, corners=7.0))
    late_game_ply: int = 6


DEFAULT_WEIGHTS = EvaluatorWeights()


def _ratio(own: float, opp: float) -> float:
    total = own + opp
    if total == 0:
        return 0.0
    return (own - opp) / total


def is_edge(x: int, y: int) -> bool:
    return x == 0 or y == 0 or x == LAST or y == LAST


def piece_score(board: Board, side: Side) -> float:
    return _ratio(float(board.count(side)), float(board.count(side.opponent)))


def mobility_score(board: Board, side: Side) -> float:
    own = len(legal_moves(board, side))
    opp = len(legal_moves(board, side.opponent))
    return _ratio(float(own), float(opp))


def corner_score(board: Board, side: Side) -> float:
    # Corners count the same as any other edge square here.
    own = 0
    opp = 0
    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            if not is_edge(x, y):
                continue
            if board.get(side, x, y):
                own += EDGE_WEIGHT
            elif board.get(side.opponent, x, y):
                opp += EDGE_WEIGHT
    return _ratio(float(own), float(opp))


def phase_score(board: Board, side: Side, weights: PhaseWeights) -> float:
    return (
        weights.mobility * mobility_score(board, side)
        + weights.pieces * piece_score(board, side)
        + weights.corners * corner_score(board, side)
    )


def early_mid_game_score(board: Board, side: Side, weights: Optional[EvaluatorWeights] = None) -> float:
    weights = weights or DEFAULT_WEIGHTS
    return phase_score(board, side, weights.early)


def late_game_score(board: Board, side: Side, weights: Optional[EvaluatorWeights] = None) -> float:
    weights = weights or DEFAULT_WEIGHTS
    return phase_score(board, side, weights.late)


def evaluate(
    board: Board,
    side: Side,
    *,
    plies: int = 0,
    weights: Optional[EvaluatorWeights] = None,
) -> float:
    """Composite score for ``side`` given how many plies the game has seen."""
    weights = weights or DEFAULT_WEIGHTS
    if plies < weights.late_game_ply:
        return early_mid_game_score(board, side, weights)
    return late_game_score(board, side, weights)


# ----------------------------------------------------------------------
# Square-value heuristic (one ply, no search)
# ----------------------------------------------------------------------
def square_value(x: int, y: int) -> int:
    position = (x, y)
    if position in CORNERS:
        return 2
    if position in CORNER_ADJACENT_EDGES:
        return -1
    if is_edge(x, y):
        return 1
    if position in X_SQUARES:
        return -2
    return 0


def score_moves(moves: Sequence[Move]) -> List[Move]:
    return [replace(move, score=float(square_value(move.x, move.y))) for move in moves]


def space_value_choice(moves: Sequence[Move]) -> Optional[Move]:
    best: Optional[Move] = None
    for move in score_moves(moves):
        if best is None or move.score > best.score:
            best = move
    return best
