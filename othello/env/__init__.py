from .gym_env import OthelloEnv

__all__ = ["OthelloEnv"]
