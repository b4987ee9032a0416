from __future__ import annotations

from typing import List, Optional

from .board import BOARD_SIZE, NUM_CELLS, Board
from .state import GameResult, Move, Side

PASS_ACTION = NUM_CELLS
ACTION_VECTOR_SIZE = NUM_CELLS + 1


def initialize_board() -> Board:
    return Board()


def legal_moves(board: Board, side: Side) -> List[Move]:
    """Return every legal move for ``side`` in row-major order.

    The order is x-major, y-minor. Search breaks ties in favour of the first
    move generated, so callers must not reorder this list.
    """
    moves: List[Move] = []
    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            candidate = Move(x, y)
            if board.check_move(candidate, side):
                moves.append(candidate)
    return moves


def is_game_over(board: Board) -> bool:
    return not board.has_moves(Side.BLACK) and not board.has_moves(Side.WHITE)


def game_result(board: Board) -> GameResult:
    if not is_game_over(board):
        return GameResult.ONGOING
    black = board.count_black()
    white = board.count_white()
    if black > white:
        return GameResult.BLACK_WIN
    if white > black:
        return GameResult.WHITE_WIN
    return GameResult.DRAW


def encode_move(move: Optional[Move]) -> int:
    if move is None:
        return PASS_ACTION
    if not (0 <= move.x < BOARD_SIZE and 0 <= move.y < BOARD_SIZE):
        raise ValueError("Move coordinates out of range.")
    return move.x * BOARD_SIZE + move.y


def decode_move(index: int) -> Optional[Move]:
    if not 0 <= index < ACTION_VECTOR_SIZE:
        raise ValueError("Action index out of range.")
    if index == PASS_ACTION:
        return None
    return Move(index // BOARD_SIZE, index % BOARD_SIZE)
