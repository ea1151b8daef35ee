"""Array views of a board for learning and analysis tools."""

from .observation import BOARD_CHANNELS, build_board_tensor, interior_grid

__all__ = ["BOARD_CHANNELS", "build_board_tensor", "interior_grid"]
