"""Othello agent core package."""

from . import agent, core, env, evaluation, features, search
from .agent import Agent, AgentConfig, AgentState, DecisionRecord, make_strategy
from .core import Board, GameResult, Move, Side, legal_moves
from .env import OthelloEnv
from .evaluation import EvaluationResult, GameRecord, evaluate_agents, play_game
from .search import EvaluatorWeights, PhaseWeights, SearchResult, evaluate, minimax

__all__ = [
    "agent",
    "core",
    "env",
    "evaluation",
    "features",
    "search",
    "Agent",
    "AgentConfig",
    "AgentState",
    "DecisionRecord",
    "make_strategy",
    "Board",
    "GameResult",
    "Move",
    "Side",
    "legal_moves",
    "OthelloEnv",
    "EvaluationResult",
    "GameRecord",
    "evaluate_agents",
    "play_game",
    "EvaluatorWeights",
    "PhaseWeights",
    "SearchResult",
    "evaluate",
    "minimax",
]
