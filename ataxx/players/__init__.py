"""Move sources that play without user input."""

from .policies import AIPlayer, Player, RandomPlayer

__all__ = ["Player", "AIPlayer", "RandomPlayer"]
