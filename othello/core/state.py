from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple


class Side(IntEnum):
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> "Side":
        return Side.WHITE if self == Side.BLACK else Side.BLACK


class GameResult(Enum):
    ONGOING = "ongoing"
    BLACK_WIN = "black_win"
    WHITE_WIN = "white_win"
    DRAW = "draw"


@dataclass(frozen=True)
class Move:
    x: int
    y: int
    # Ranking value attached by heuristics; not part of the move's identity.
    score: Optional[float] = field(default=None, compare=False)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        if self.score is None:
            return f"Move({self.x}, {self.y})"
        return f"Move({self.x}, {self.y}, score={self.score})"


# Convenient tuple alias used across modules
Position = Tuple[int, int]
