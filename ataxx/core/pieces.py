from __future__ import annotations

from enum import Enum, IntEnum

from .errors import InvalidColorArgument


class PieceColor(IntEnum):
    EMPTY = 0
    BLOCKED = 1
    RED = 2
    BLUE = 3

    @property
    def is_piece(self) -> bool:
        return self in (PieceColor.RED, PieceColor.BLUE)

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def opposite(self) -> "PieceColor":
        if self == PieceColor.RED:
            return PieceColor.BLUE
        if self == PieceColor.BLUE:
            return PieceColor.RED
        raise InvalidColorArgument(f"{self} has no opposite color")

    @staticmethod
    def player_value_of(name: str) -> "PieceColor":
        key = name.strip().lower()
        if key == "red":
            return PieceColor.RED
        if key == "blue":
            return PieceColor.BLUE
        raise InvalidColorArgument(f"piece name unknown: {name}")

    def __str__(self) -> str:
        return self.name.capitalize()


_SYMBOLS = {
    PieceColor.EMPTY: "-",
    PieceColor.BLOCKED: "X",
    PieceColor.RED: "r",
    PieceColor.BLUE: "b",
}


class GameResult(Enum):
    ONGOING = "ongoing"
    RED_WIN = "red_win"
    BLUE_WIN = "blue_win"
    DRAW = "draw"

    @staticmethod
    def win_for(color: PieceColor) -> "GameResult":
        if color == PieceColor.RED:
            return GameResult.RED_WIN
        if color == PieceColor.BLUE:
            return GameResult.BLUE_WIN
        raise InvalidColorArgument(f"{color} cannot win a game")

    @property
    def winner(self) -> PieceColor:
        """Winning color, or ``PieceColor.EMPTY`` for draws and unfinished games."""
        if self == GameResult.RED_WIN:
            return PieceColor.RED
        if self == GameResult.BLUE_WIN:
            return PieceColor.BLUE
        return PieceColor.EMPTY
