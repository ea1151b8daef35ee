"""Core game logic for the Ataxx engine."""

from .pieces import GameResult, PieceColor
from .move import (
    ACTION_VECTOR_SIZE,
    PASS,
    SIDE,
    Move,
    MoveKind,
    decode_move,
    encode_move,
    parse_square,
    square_name,
)
from .board import (
    EXTENDED_SIDE,
    JUMP_LIMIT,
    Board,
    board_from_rows,
    count_cells,
    in_board,
    index,
)
from .errors import (
    AtaxxError,
    CommandError,
    IllegalBlockPlacement,
    IllegalMove,
    InvalidColorArgument,
    UndoUnderflow,
)

__all__ = [
    "PieceColor",
    "GameResult",
    "Move",
    "MoveKind",
    "PASS",
    "SIDE",
    "ACTION_VECTOR_SIZE",
    "encode_move",
    "decode_move",
    "square_name",
    "parse_square",
    "Board",
    "EXTENDED_SIDE",
    "JUMP_LIMIT",
    "board_from_rows",
    "count_cells",
    "in_board",
    "index",
    "AtaxxError",
    "CommandError",
    "IllegalMove",
    "IllegalBlockPlacement",
    "InvalidColorArgument",
    "UndoUnderflow",
]
