from __future__ import annotations

import numpy as np

from ataxx.core import SIDE, Board, PieceColor
from ataxx.core.board import EXTENDED_SIDE

BOARD_CHANNELS = 4  # side to move, opponent, empty, blocked


def interior_grid(board: Board) -> np.ndarray:
    """The playable 7x7 region as a (row, col) array of PieceColor values, row 0 = rank 1."""
    return board.grid.reshape(EXTENDED_SIDE, EXTENDED_SIDE)[2 : 2 + SIDE, 2 : 2 + SIDE]


def build_board_tensor(board: Board) -> np.ndarray:
    """Return board planes with shape (4, 7, 7), channel-first, from the mover's point of view."""
    cells = interior_grid(board)
    mover = board.whose_move
    tensor = np.zeros((BOARD_CHANNELS, SIDE, SIDE), dtype=np.float32)
    tensor[0] = cells == int(mover)
    tensor[1] = cells == int(mover.opposite())
    tensor[2] = cells == int(PieceColor.EMPTY)
    tensor[3] = cells == int(PieceColor.BLOCKED)
    return tensor
