"""Game-playing agent and its move-selection strategies."""

from .player import Agent, AgentConfig, AgentState, DecisionRecord, DiagnosticsSink
from .strategies import (
    STRATEGIES,
    FirstAvailableStrategy,
    MinimaxStrategy,
    RandomStrategy,
    SpaceValueStrategy,
    Strategy,
    StrategyResult,
    make_strategy,
)

__all__ = [
    "Agent",
    "AgentConfig",
    "AgentState",
    "DecisionRecord",
    "DiagnosticsSink",
    "STRATEGIES",
    "FirstAvailableStrategy",
    "MinimaxStrategy",
    "RandomStrategy",
    "SpaceValueStrategy",
    "Strategy",
    "StrategyResult",
    "make_strategy",
]
