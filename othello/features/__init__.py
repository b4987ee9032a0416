"""Feature encoders turning boards into numeric arrays."""

from .observation import BOARD_CHANNELS, build_board_tensor

__all__ = ["BOARD_CHANNELS", "build_board_tensor"]
