from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from othello.core import (
    ACTION_VECTOR_SIZE,
    BOARD_SIZE,
    PASS_ACTION,
    Board,
    GameResult,
    Side,
    decode_move,
    encode_move,
    game_result,
    initialize_board,
    legal_moves,
)
from othello.features import BOARD_CHANNELS, build_board_tensor


class OthelloEnv(gym.Env):
    """Two-player referee environment.

    Both sides act through the same ``step``; ``info["current_side"]`` names
    the side expected to act next. Action ``PASS_ACTION`` is only legal when
    that side has no placement available.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32)
        self.action_space = spaces.Discrete(ACTION_VECTOR_SIZE)

        self.board: Board = initialize_board()
        self.current_side = Side.BLACK
        self.result = GameResult.ONGOING
        self.ply_count = 0

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self.board = initialize_board()
        self.current_side = Side.BLACK
        self.result = GameResult.ONGOING
        self.ply_count = 0
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if self.result != GameResult.ONGOING:
            raise ValueError("Game is already over; call reset().")

        legal_mask = self.legal_action_mask()
        if self._enforce_legal and not legal_mask[action_index]:
            raise ValueError(f"Illegal action {action_index} for {self.current_side.name}.")

        move = decode_move(int(action_index))
        self.board.apply(move, self.current_side)
        self.current_side = self.current_side.opponent
        self.ply_count += 1
        self.result = game_result(self.board)

        terminated = self.result != GameResult.ONGOING
        return self._build_observation(), self._compute_reward(self.result), terminated, False, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        moves = legal_moves(self.board, self.current_side)
        for move in moves:
            mask[encode_move(move)] = 1
        if not moves:
            mask[PASS_ACTION] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self.board.render()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> np.ndarray:
        return build_board_tensor(self.board, self.current_side)

    def _build_info(self) -> Dict[str, object]:
        return {"legal_action_mask": self.legal_action_mask(), "current_side": self.current_side}

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.BLACK_WIN:
            return 1.0
        if result == GameResult.WHITE_WIN:
            return -1.0
        return 0.0
