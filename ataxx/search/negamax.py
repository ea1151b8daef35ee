from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ataxx.core import PASS, Board, Move, PieceColor

from .evaluation import get_heuristic, terminal_value

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 4


@dataclass
class SearchConfig:
    depth: int = DEFAULT_DEPTH
    evaluator: str = "centrality"


@dataclass
class SearchResult:
    move: Move
    value: float
    nodes: int


class Negamax:
    """Depth-bounded negamax with a single cutoff bound.

    Every node works on its own copy of the board, so the board handed to
    :meth:`choose_move` is never modified.  Children are visited in
    ``Board.legal_moves`` order and the first of several equally valued moves
    is kept, which makes the result deterministic.
    """

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SearchConfig()
        if self.config.depth < 0:
            raise ValueError("Search depth must be non-negative.")
        self._heuristic = get_heuristic(self.config.evaluator)
        self._nodes = 0

    def choose_move(self, color: PieceColor, board: Board) -> Move:
        return self.analyse(color, board).move

    def analyse(self, color: PieceColor, board: Board) -> SearchResult:
        if board.whose_move != color:
            raise ValueError(f"It is not {color}'s move.")
        if board.game_over():
            raise ValueError("Cannot search a finished game.")

        self._nodes = 0
        # A zero-depth search still has to pick a move, so the root always expands.
        depth = max(1, self.config.depth)
        value, move = self._search(color, board.copy(), depth, math.inf)
        if move is None:
            raise ValueError(f"Search found no move for {color}.")
        logger.debug(
            "negamax %s depth=%d chose %s value=%s nodes=%d",
            color,
            depth,
            move,
            value,
            self._nodes,
        )
        return SearchResult(move=move, value=value, nodes=self._nodes)

    def search(self, color: PieceColor, board: Board, depth: int, bound: float) -> float:
        """Value of BOARD for COLOR looking DEPTH plies ahead; stops early once above BOUND."""
        value, _ = self._search(color, board.copy(), depth, bound)
        return value

    def _search(
        self,
        color: PieceColor,
        board: Board,
        depth: int,
        bound: float,
    ) -> Tuple[float, Optional[Move]]:
        self._nodes += 1
        terminal = terminal_value(color, board)
        if terminal is not None:
            return terminal, None
        if depth == 0:
            return self._heuristic(color, board), None

        moves = board.legal_moves(color) or [PASS]
        best_value = -math.inf
        best_move: Optional[Move] = None
        for move in moves:
            child = board.copy()
            child.make_move(move)
            value = -self._search(color.opposite(), child, depth - 1, -best_value)[0]
            if best_move is None or value > best_value:
                best_move = move
                best_value = value
                if value > bound:
                    break
        return best_value, best_move


def choose_move(
    color: PieceColor,
    board: Board,
    depth: int = DEFAULT_DEPTH,
    evaluator: str = "centrality",
) -> Move:
    return Negamax(SearchConfig(depth=depth, evaluator=evaluator)).choose_move(color, board)
