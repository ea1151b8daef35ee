"""Head-to-head matches between players."""

from .match import MatchResult, evaluate_players

__all__ = ["MatchResult", "evaluate_players"]
