"""Adversarial move search."""

from .evaluation import (
    CENTRALITY_WEIGHTS,
    EVALUATORS,
    WINNING_VALUE,
    centrality_score,
    evaluate,
    material_score,
    terminal_value,
)
from .negamax import DEFAULT_DEPTH, Negamax, SearchConfig, SearchResult, choose_move

__all__ = [
    "CENTRALITY_WEIGHTS",
    "EVALUATORS",
    "WINNING_VALUE",
    "centrality_score",
    "material_score",
    "evaluate",
    "terminal_value",
    "DEFAULT_DEPTH",
    "Negamax",
    "SearchConfig",
    "SearchResult",
    "choose_move",
]
