from __future__ import annotations

from typing import Optional

import numpy as np

from ataxx.core import PASS, Board, Move, PieceColor
from ataxx.search import Negamax, SearchConfig


class Player:
    """A source of moves for one color."""

    def __init__(self, color: PieceColor) -> None:
        if not color.is_piece:
            raise ValueError(f"{color} cannot be a player.")
        self.color = color

    def choose_move(self, board: Board) -> Optional[Move]:
        """Return the next move on BOARD, or None if no move is forthcoming."""
        raise NotImplementedError

    @property
    def is_automated(self) -> bool:
        return True


class AIPlayer(Player):
    def __init__(self, color: PieceColor, config: Optional[SearchConfig] = None) -> None:
        super().__init__(color)
        self.search = Negamax(config)

    def choose_move(self, board: Board) -> Move:
        return self.search.choose_move(self.color, board)


class RandomPlayer(Player):
    def __init__(self, color: PieceColor, rng: Optional[np.random.Generator] = None) -> None:
        super().__init__(color)
        self.rng = rng or np.random.default_rng()

    def choose_move(self, board: Board) -> Move:
        moves = board.legal_moves(self.color)
        if not moves:
            return PASS
        return moves[int(self.rng.integers(len(moves)))]
