"""Match helpers for pitting agents against each other."""

from .match import AgentFactory, EvaluationResult, GameRecord, evaluate_agents, play_game

__all__ = ["AgentFactory", "EvaluationResult", "GameRecord", "evaluate_agents", "play_game"]
