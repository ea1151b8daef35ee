"""Text command interpreter and game state machine."""

from .commands import Command, CommandType, parse_command, parse_move
from .controller import PLAYER_KINDS, Game, GameConfig, State
from .manual import ManualPlayer
from .reporter import TextReporter
from .sources import CommandSources, LineSource

__all__ = [
    "Command",
    "CommandType",
    "parse_command",
    "parse_move",
    "PLAYER_KINDS",
    "Game",
    "GameConfig",
    "State",
    "ManualPlayer",
    "TextReporter",
    "CommandSources",
    "LineSource",
]
