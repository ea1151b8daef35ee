from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

SIDE = 7
COLUMNS = "abcdefg"
ROWS = "1234567"

# Destination offsets (dcol, drow) within the 5x5 box, column delta first.
MOVE_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dc, dr) for dc in range(-2, 3) for dr in range(-2, 3) if (dc, dr) != (0, 0)
)
PASS_ACTION_INDEX = SIDE * SIDE * len(MOVE_OFFSETS)
ACTION_VECTOR_SIZE = PASS_ACTION_INDEX + 1


def square_name(col: int, row: int) -> str:
    # Border squares map onto the neighbouring characters, e.g. col -1 is "`".
    return f"{chr(ord('a') + col)}{chr(ord('1') + row)}"


def parse_square(text: str) -> Tuple[int, int]:
    text = text.strip().lower()
    if len(text) != 2 or text[0] not in COLUMNS or text[1] not in ROWS:
        raise ValueError(f"Malformed square: {text!r}")
    return COLUMNS.index(text[0]), ROWS.index(text[1])


class MoveKind(Enum):
    PASS = "pass"
    EXTEND = "extend"
    JUMP = "jump"


@dataclass(frozen=True)
class Move:
    kind: MoveKind
    col0: int = 0
    row0: int = 0
    col1: int = 0
    row1: int = 0

    @staticmethod
    def between(col0: int, row0: int, col1: int, row1: int) -> "Move":
        distance = max(abs(col1 - col0), abs(row1 - row0))
        if distance == 1:
            return Move(MoveKind.EXTEND, col0, row0, col1, row1)
        if distance == 2:
            return Move(MoveKind.JUMP, col0, row0, col1, row1)
        raise ValueError(
            f"No move spans distance {distance}: "
            f"({col0},{row0}) -> ({col1},{row1})"
        )

    @property
    def is_pass(self) -> bool:
        return self.kind == MoveKind.PASS

    @property
    def is_extend(self) -> bool:
        return self.kind == MoveKind.EXTEND

    @property
    def is_jump(self) -> bool:
        return self.kind == MoveKind.JUMP

    @property
    def distance(self) -> int:
        """Chebyshev distance between source and destination (0 for a pass)."""
        if self.is_pass:
            return 0
        return max(abs(self.col1 - self.col0), abs(self.row1 - self.row0))

    @property
    def source(self) -> Tuple[int, int]:
        return (self.col0, self.row0)

    @property
    def destination(self) -> Tuple[int, int]:
        return (self.col1, self.row1)

    def __str__(self) -> str:
        if self.is_pass:
            return "pass"
        return f"{square_name(self.col0, self.row0)}-{square_name(self.col1, self.row1)}"


PASS = Move(MoveKind.PASS)


def encode_move(move: Move) -> int:
    if move.is_pass:
        return PASS_ACTION_INDEX
    offset = (move.col1 - move.col0, move.row1 - move.row0)
    if offset not in MOVE_OFFSETS:
        raise ValueError(f"Move {move} has no action encoding.")
    origin = move.col0 * SIDE + move.row0
    return origin * len(MOVE_OFFSETS) + MOVE_OFFSETS.index(offset)


def decode_move(index: int) -> Move:
    if not 0 <= index < ACTION_VECTOR_SIZE:
        raise ValueError("Action index out of range.")
    if index == PASS_ACTION_INDEX:
        return PASS
    origin, offset_index = divmod(index, len(MOVE_OFFSETS))
    col0, row0 = divmod(origin, SIDE)
    dc, dr = MOVE_OFFSETS[offset_index]
    return Move.between(col0, row0, col0 + dc, row0 + dr)
