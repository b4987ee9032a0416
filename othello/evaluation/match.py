from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from othello.agent import Agent
from othello.core import GameResult, Side, encode_move
from othello.env import OthelloEnv

logger = logging.getLogger(__name__)

AgentFactory = Callable[[Side], Agent]


@dataclass
class GameRecord:
    result: GameResult
    black_count: int
    white_count: int
    plies: int
    passes: int
    moves: List[Optional[Tuple[int, int]]] = field(default_factory=list)

    @property
    def placements(self) -> int:
        return self.plies - self.passes

    def as_dict(self) -> Dict[str, object]:
        return {
            "result": self.result.value,
            "black": self.black_count,
            "white": self.white_count,
            "plies": self.plies,
            "passes": self.passes,
            "moves": [None if m is None else list(m) for m in self.moves],
        }


@dataclass
class EvaluationResult:
    games_played: int
    black_wins: int
    white_wins: int
    draws: int
    average_length: float

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)


def play_game(
    black: Agent,
    white: Agent,
    *,
    time_budget_ms: Optional[int] = None,
    env: Optional[OthelloEnv] = None,
) -> GameRecord:
    """Alternate two agents until neither side can move.

    Each agent receives the opponent's previous move (``None`` on the first
    turn or after a pass) and its remaining time. Budgets are advisory: an
    agent that overruns keeps playing with a budget of zero.
    """
    env = env or OthelloEnv()
    _, info = env.reset()
    agents = {Side.BLACK: black, Side.WHITE: white}
    remaining: Dict[Side, int] = {
        Side.BLACK: -1 if time_budget_ms is None else time_budget_ms,
        Side.WHITE: -1 if time_budget_ms is None else time_budget_ms,
    }

    last_move = None
    moves: List[Optional[Tuple[int, int]]] = []
    passes = 0
    terminated = False
    while not terminated:
        side = info["current_side"]
        start = time.monotonic()
        move = agents[side].decide(last_move, remaining[side])
        if remaining[side] >= 0:
            spent = int((time.monotonic() - start) * 1000)
            remaining[side] = max(0, remaining[side] - spent)

        _, _, terminated, truncated, info = env.step(encode_move(move))
        if move is None:
            passes += 1
        moves.append(None if move is None else move.as_tuple())
        last_move = move
        if truncated:
            terminated = True

    record = GameRecord(
        result=env.result,
        black_count=env.board.count_black(),
        white_count=env.board.count_white(),
        plies=env.ply_count,
        passes=passes,
        moves=moves,
    )
    logger.info(
        "Game finished: %s (%d-%d) after %d plies",
        record.result.value,
        record.black_count,
        record.white_count,
        record.plies,
    )
    return record


def evaluate_agents(
    black_factory: AgentFactory,
    white_factory: AgentFactory,
    *,
    games: int,
    time_budget_ms: Optional[int] = None,
) -> EvaluationResult:
    black_wins = 0
    white_wins = 0
    draws = 0
    total_plies = 0

    for _ in range(games):
        record = play_game(
            black_factory(Side.BLACK),
            white_factory(Side.WHITE),
            time_budget_ms=time_budget_ms,
        )
        total_plies += record.plies
        if record.result == GameResult.BLACK_WIN:
            black_wins += 1
        elif record.result == GameResult.WHITE_WIN:
            white_wins += 1
        else:
            draws += 1

    return EvaluationResult(
        games_played=games,
        black_wins=black_wins,
        white_wins=white_wins,
        draws=draws,
        average_length=total_plies / max(1, games),
    )
