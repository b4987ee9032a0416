from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .state import Move, Position, Side

BOARD_SIZE = 8
NUM_CELLS = BOARD_SIZE * BOARD_SIZE
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BoardArray = NDArray[np.int8]


def _starting_cells() -> BoardArray:
    cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    cells[3, 3] = Side.WHITE
    cells[4, 4] = Side.WHITE
    cells[3, 4] = Side.BLACK
    cells[4, 3] = Side.BLACK
    return cells


@dataclass
class Board:
    """8x8 Othello position.

    ``cells[x, y]`` holds 0 for an empty square or the value of the
    :class:`Side` occupying it. The board knows the rules of disc placement
    and flipping but nothing about search or evaluation.
    """

    cells: BoardArray = field(default_factory=_starting_cells)

    @classmethod
    def empty(cls) -> "Board":
        return cls(cells=np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8))

    def clone(self) -> "Board":
        return Board(cells=self.cells.copy())

    copy = clone

    # ------------------------------------------------------------------
    # Occupancy queries
    # ------------------------------------------------------------------
    def get(self, side: Side, x: int, y: int) -> bool:
        return bool(self.cells[x, y] == side)

    def is_empty(self, x: int, y: int) -> bool:
        return bool(self.cells[x, y] == 0)

    def count(self, side: Side) -> int:
        return int(np.count_nonzero(self.cells == side))

    def count_black(self) -> int:
        return self.count(Side.BLACK)

    def count_white(self) -> int:
        return self.count(Side.WHITE)

    def count_empty(self) -> int:
        return int(np.count_nonzero(self.cells == 0))

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------
    def check_move(self, move: Optional[Move], side: Side) -> bool:
        if move is None:
            return not self.has_moves(side)
        if not _in_bounds(move.x, move.y) or self.cells[move.x, move.y] != 0:
            return False
        return any(self._bracketed_run(move.x, move.y, dx, dy, side) for dx, dy in DIRECTIONS)

    def has_moves(self, side: Side) -> bool:
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                if self.check_move(Move(x, y), side):
                    return True
        return False

    def apply(self, move: Optional[Move], side: Side) -> None:
        if move is None:
            return
        if not _in_bounds(move.x, move.y):
            raise ValueError(f"Move {move.as_tuple()} is off the board.")
        if self.cells[move.x, move.y] != 0:
            raise ValueError(f"Cell {move.as_tuple()} is already occupied.")

        flips: List[Position] = []
        for dx, dy in DIRECTIONS:
            flips.extend(self._bracketed_run(move.x, move.y, dx, dy, side))
        if not flips:
            raise ValueError(f"Move {move.as_tuple()} flips no discs for {side.name}.")

        self.cells[move.x, move.y] = side
        for x, y in flips:
            self.cells[x, y] = side

    def _bracketed_run(self, x: int, y: int, dx: int, dy: int, side: Side) -> List[Position]:
        """Opponent discs between (x, y) and the next ``side`` disc along (dx, dy)."""
        opponent = side.opponent
        run: List[Position] = []
        cx, cy = x + dx, y + dy
        while _in_bounds(cx, cy) and self.cells[cx, cy] == opponent:
            run.append((cx, cy))
            cx += dx
            cy += dy
        if run and _in_bounds(cx, cy) and self.cells[cx, cy] == side:
            return run
        return []

    # ------------------------------------------------------------------
    def render(self) -> str:
        symbols = {0: ".", int(Side.BLACK): "X", int(Side.WHITE): "O"}
        rows = []
        for x in range(BOARD_SIZE):
            rows.append("".join(symbols[int(self.cells[x, y])] for y in range(BOARD_SIZE)))
        return "\n".join(rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return (
            f"Board(black={self.count_black()}, white={self.count_white()}, empty={self.count_empty()})\n"
            f"{self.render()}"
        )


def _in_bounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE
