from __future__ import annotations

import time
from dataclasses import dataclass
from math import inf
from typing import Optional

from othello.core import Board, Move, Side, legal_moves

from .evaluator import EvaluatorWeights, evaluate


@dataclass
class SearchResult:
    value: float
    move: Optional[Move] = None


@dataclass
class SearchStats:
    nodes: int = 0
    leaves: int = 0
    deadline_hit: bool = False


def minimax(
    board: Board,
    depth: int,
    maximizing: bool,
    side: Side,
    *,
    plies: int = 0,
    weights: Optional[EvaluatorWeights] = None,
    stats: Optional[SearchStats] = None,
    deadline: Optional[float] = None,
) -> SearchResult:
    """Fixed-depth minimax without pruning.

    ``side`` is the searching side: it moves at maximizing nodes, its opponent
    at minimizing ones, and every leaf is scored from its perspective. Ties
    keep the first move in generation order. ``deadline`` (a
    ``time.monotonic()`` instant) only applies between the children of this
    call; the first child is always searched.
    """
    if stats is not None:
        stats.nodes += 1

    mover = side if maximizing else side.opponent
    moves = legal_moves(board, mover) if depth > 0 else []
    if not moves:
        if stats is not None:
            stats.leaves += 1
        return SearchResult(evaluate(board, side, plies=plies, weights=weights), None)

    best_value = -inf if maximizing else inf
    best_move: Optional[Move] = None
    for index, move in enumerate(moves):
        if deadline is not None and index > 0 and time.monotonic() >= deadline:
            if stats is not None:
                stats.deadline_hit = True
            break

        child = board.clone()
        child.apply(move, mover)
        value = minimax(
            child,
            depth - 1,
            not maximizing,
            side,
            plies=plies,
            weights=weights,
            stats=stats,
        ).value

        if maximizing:
            if value > best_value:
                best_value = value
                best_move = move
        else:
            if value < best_value:
                best_value = value
                best_move = move

    return SearchResult(best_value, best_move)
