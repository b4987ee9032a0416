from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Type

import numpy as np

from othello.core import Board, Move, Side, legal_moves
from othello.search import EvaluatorWeights, SearchStats, minimax, space_value_choice


@dataclass
class StrategyResult:
    move: Optional[Move]
    value: Optional[float] = None
    stats: SearchStats = field(default_factory=SearchStats)


class Strategy:
    """Move-selection interface used by :class:`othello.agent.Agent`."""

    name = "base"

    def choose(
        self,
        board: Board,
        side: Side,
        *,
        plies: int,
        deadline: Optional[float] = None,
    ) -> StrategyResult:
        raise NotImplementedError


class MinimaxStrategy(Strategy):
    name = "minimax"

    def __init__(self, depth: int = 3, weights: Optional[EvaluatorWeights] = None) -> None:
        self.depth = depth
        self.weights = weights

    def choose(self, board, side, *, plies, deadline=None):
        stats = SearchStats()
        result = minimax(
            board,
            self.depth,
            True,
            side,
            plies=plies,
            weights=self.weights,
            stats=stats,
            deadline=deadline,
        )
        return StrategyResult(move=result.move, value=result.value, stats=stats)


class SpaceValueStrategy(Strategy):
    name = "space_value"

    def choose(self, board, side, *, plies, deadline=None):
        move = space_value_choice(legal_moves(board, side))
        return StrategyResult(move=move, value=None if move is None else move.score)


class FirstAvailableStrategy(Strategy):
    name = "first_available"

    def choose(self, board, side, *, plies, deadline=None):
        moves = legal_moves(board, side)
        return StrategyResult(move=moves[0] if moves else None)


class RandomStrategy(Strategy):
    name = "random"

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose(self, board, side, *, plies, deadline=None):
        moves = legal_moves(board, side)
        if not moves:
            return StrategyResult(move=None)
        return StrategyResult(move=moves[int(self.rng.integers(len(moves)))])


STRATEGIES: Dict[str, Type[Strategy]] = {
    MinimaxStrategy.name: MinimaxStrategy,
    SpaceValueStrategy.name: SpaceValueStrategy,
    FirstAvailableStrategy.name: FirstAvailableStrategy,
    RandomStrategy.name: RandomStrategy,
}


def make_strategy(
    name: str,
    *,
    depth: int = 3,
    weights: Optional[EvaluatorWeights] = None,
    seed: Optional[int] = None,
) -> Strategy:
    if name not in STRATEGIES:
        raise ValueError(f"Unknown strategy {name!r}; expected one of {sorted(STRATEGIES)}.")
    if name == MinimaxStrategy.name:
        return MinimaxStrategy(depth=depth, weights=weights)
    if name == RandomStrategy.name:
        return RandomStrategy(np.random.default_rng(seed))
    return STRATEGIES[name]()
