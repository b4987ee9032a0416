from __future__ import annotations

import numpy as np

from othello.core import BOARD_SIZE, Board, Side

BOARD_CHANNELS = 3  # black discs, white discs, side-to-move plane


def build_board_tensor(board: Board, side_to_move: Side) -> np.ndarray:
    """Return board tensor with shape (3, 8, 8) channel-first."""
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    tensor[0] = board.cells == Side.BLACK
    tensor[1] = board.cells == Side.WHITE
    if side_to_move == Side.BLACK:
        tensor[2] = 1.0
    return tensor
