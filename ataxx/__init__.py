"""Ataxx board engine and negamax player."""

from . import core, search, players, features, env, game, evaluation
from .core import (
    ACTION_VECTOR_SIZE,
    PASS,
    AtaxxError,
    Board,
    GameResult,
    IllegalBlockPlacement,
    IllegalMove,
    InvalidColorArgument,
    Move,
    MoveKind,
    PieceColor,
    UndoUnderflow,
)
from .env import AtaxxEnv
from .evaluation import MatchResult, evaluate_players
from .game import Game, GameConfig, State
from .players import AIPlayer, Player, RandomPlayer
from .search import Negamax, SearchConfig, SearchResult, choose_move

__all__ = [
    "core",
    "search",
    "players",
    "features",
    "env",
    "game",
    "evaluation",
    "ACTION_VECTOR_SIZE",
    "PASS",
    "AtaxxError",
    "Board",
    "GameResult",
    "IllegalBlockPlacement",
    "IllegalMove",
    "InvalidColorArgument",
    "Move",
    "MoveKind",
    "PieceColor",
    "UndoUnderflow",
    "AtaxxEnv",
    "MatchResult",
    "evaluate_players",
    "Game",
    "GameConfig",
    "State",
    "AIPlayer",
    "Player",
    "RandomPlayer",
    "Negamax",
    "SearchConfig",
    "SearchResult",
    "choose_move",
]
