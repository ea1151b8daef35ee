"""Static position scores used at the search horizon."""

from __future__ import annotations

import math
from typing import Callable, Dict, Optional

import numpy as np

from ataxx.core import SIDE, Board, PieceColor, index
from ataxx.core.board import BOARD_CELLS

WINNING_VALUE = math.inf
CENTER = SIDE // 2


def _centrality_weights() -> np.ndarray:
    weights = np.zeros(BOARD_CELLS, dtype=np.float64)
    for col in range(SIDE):
        for row in range(SIDE):
            weights[index(col, row)] = abs(col - CENTER) + abs(row - CENTER)
    return weights


# Manhattan distance from d4 for every playable cell, zero on the border.
CENTRALITY_WEIGHTS = _centrality_weights()


def terminal_value(color: PieceColor, board: Board) -> Optional[float]:
    """Value of a finished game for COLOR, or None while play continues."""
    if not board.game_over():
        return None
    winner = board.result().winner
    if winner == PieceColor.EMPTY:
        return 0.0
    return WINNING_VALUE if winner == color else -WINNING_VALUE


def centrality_score(color: PieceColor, board: Board) -> float:
    grid = board.grid
    own = CENTRALITY_WEIGHTS[grid == int(color)].sum()
    other = CENTRALITY_WEIGHTS[grid == int(color.opposite())].sum()
    return float(other - own)


def material_score(color: PieceColor, board: Board) -> float:
    return float(board.num_pieces(color) - board.num_pieces(color.opposite()))


Heuristic = Callable[[PieceColor, Board], float]

EVALUATORS: Dict[str, Heuristic] = {
    "centrality": centrality_score,
    "material": material_score,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return EVALUATORS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown evaluator {name!r}; expected one of {sorted(EVALUATORS)}") from exc


def evaluate(color: PieceColor, board: Board, evaluator: str = "centrality") -> float:
    terminal = terminal_value(color, board)
    if terminal is not None:
        return terminal
    return get_heuristic(evaluator)(color, board)
