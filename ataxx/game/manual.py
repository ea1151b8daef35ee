from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ataxx.core import Board, Move, PieceColor
from ataxx.players import Player

if TYPE_CHECKING:
    from .controller import Game


class ManualPlayer(Player):
    """Takes its moves from the commands typed (or loaded) into its game."""

    def __init__(self, game: "Game", color: PieceColor) -> None:
        super().__init__(color)
        self.game = game

    @property
    def is_automated(self) -> bool:
        return False

    def choose_move(self, board: Board) -> Optional[Move]:
        command = self.game.get_move_command(f"{self.color}: ")
        if command is None:
            return None
        return command.to_move()
