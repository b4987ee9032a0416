"""Core game logic for the Othello agent."""

from .state import GameResult, Move, Position, Side
from .board import BOARD_SIZE, DIRECTIONS, NUM_CELLS, Board
from .rules import (
    ACTION_VECTOR_SIZE,
    PASS_ACTION,
    decode_move,
    encode_move,
    game_result,
    initialize_board,
    is_game_over,
    legal_moves,
)

__all__ = [
    "Board",
    "GameResult",
    "Move",
    "Position",
    "Side",
    "ACTION_VECTOR_SIZE",
    "BOARD_SIZE",
    "DIRECTIONS",
    "NUM_CELLS",
    "PASS_ACTION",
    "decode_move",
    "encode_move",
    "game_result",
    "initialize_board",
    "is_game_over",
    "legal_moves",
]
