from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from othello.core import Board, Move, Side, legal_moves
from othello.search import EvaluatorWeights

from .strategies import Strategy, make_strategy

logger = logging.getLogger(__name__)


@dataclass
class AgentConfig:
    depth: int = 3
    strategy: str = "minimax"
    weights: EvaluatorWeights = field(default_factory=EvaluatorWeights)
    # When set, a non-negative budget caps root expansion at this fraction of it.
    enforce_time_budget: bool = False
    time_fraction: float = 0.05
    seed: Optional[int] = None


class AgentState(Enum):
    WAITING_FOR_OPPONENT = "waiting_for_opponent"
    DECIDING = "deciding"


@dataclass
class DecisionRecord:
    move: Optional[Move]
    value: Optional[float]
    ply: int
    nodes: int
    elapsed_ms: float
    strategy: str

    def as_dict(self) -> dict:
        return {
            "move": None if self.move is None else list(self.move.as_tuple()),
            "value": self.value,
            "ply": self.ply,
            "nodes": self.nodes,
            "elapsed_ms": self.elapsed_ms,
            "strategy": self.strategy,
        }


DiagnosticsSink = Callable[[DecisionRecord], None]


class Agent:
    """Plays one side of a game, keeping its own copy of the board.

    Each call to :meth:`decide` applies the opponent's last move, picks a
    reply with the configured strategy and applies that reply before
    returning it.
    """

    def __init__(
        self,
        side: Side,
        config: Optional[AgentConfig] = None,
        *,
        diagnostics: Optional[DiagnosticsSink] = None,
        strategy: Optional[Strategy] = None,
    ) -> None:
        self.side = side
        self.opponent = side.opponent
        self.config = config or AgentConfig()
        if not 0.0 < self.config.time_fraction <= 1.0:
            raise ValueError("time_fraction must be in (0, 1].")
        self.strategy = strategy or make_strategy(
            self.config.strategy,
            depth=self.config.depth,
            weights=self.config.weights,
            seed=self.config.seed,
        )
        self.diagnostics = diagnostics
        self.board = Board()
        self.plies_played = 0
        self.state = AgentState.WAITING_FOR_OPPONENT
        self.last_decision: Optional[DecisionRecord] = None

    def decide(self, opponent_move: Optional[Move], ms_remaining: int = -1) -> Optional[Move]:
        self.board.apply(opponent_move, self.opponent)
        self.plies_played += 1

        if not self.board.has_moves(self.side):
            logger.debug("%s has no legal move at ply %d; passing", self.side.name, self.plies_played)
            return None

        self.state = AgentState.DECIDING
        try:
            start = time.monotonic()
            deadline = None
            if self.config.enforce_time_budget and ms_remaining >= 0:
                deadline = start + ms_remaining * self.config.time_fraction / 1000.0

            result = self.strategy.choose(self.board, self.side, plies=self.plies_played, deadline=deadline)
            move = result.move
            if move is None:
                # Depth <= 0 evaluates without expanding; play any legal move.
                move = legal_moves(self.board, self.side)[0]

            record = DecisionRecord(
                move=move,
                value=result.value,
                ply=self.plies_played,
                nodes=result.stats.nodes,
                elapsed_ms=(time.monotonic() - start) * 1000.0,
                strategy=self.strategy.name,
            )
            self._report(record)

            self.board.apply(move, self.side)
            self.plies_played += 1
            return move
        finally:
            self.state = AgentState.WAITING_FOR_OPPONENT

    def _report(self, record: DecisionRecord) -> None:
        self.last_decision = record
        logger.debug(
            "%s ply=%d move=%s projected=%s nodes=%d elapsed=%.1fms",
            self.side.name,
            record.ply,
            record.move,
            record.value,
            record.nodes,
            record.elapsed_ms,
        )
        if self.diagnostics is not None:
            self.diagnostics(record)
