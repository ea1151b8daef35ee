from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ataxx.core import PASS, CommandError, IllegalMove, Move, parse_square


class CommandType(Enum):
    AUTO = "auto"
    MANUAL = "manual"
    BLOCK = "block"
    CLEAR = "clear"
    DUMP = "dump"
    HELP = "help"
    LOAD = "load"
    PASS = "pass"
    PIECEMOVE = "piecemove"
    SEED = "seed"
    START = "start"
    QUIT = "quit"
    EOF = "eof"


_PATTERNS: Tuple[Tuple[CommandType, re.Pattern], ...] = tuple(
    (kind, re.compile(pattern, re.IGNORECASE))
    for kind, pattern in (
        (CommandType.AUTO, r"auto\s+(red|blue)"),
        (CommandType.MANUAL, r"manual\s+(red|blue)"),
        (CommandType.BLOCK, r"block\s+([a-g][1-7])"),
        (CommandType.CLEAR, r"clear"),
        (CommandType.DUMP, r"dump"),
        (CommandType.HELP, r"help|\?"),
        (CommandType.LOAD, r"load\s+(\S+)"),
        (CommandType.PASS, r"pass|-"),
        (CommandType.PIECEMOVE, r"([a-g][1-7])\s*-\s*([a-g][1-7])"),
        (CommandType.SEED, r"seed\s+(\d+)"),
        (CommandType.START, r"start"),
        (CommandType.QUIT, r"quit"),
    )
)


@dataclass(frozen=True)
class Command:
    type: CommandType
    operands: Tuple[str, ...] = ()

    @property
    def is_move(self) -> bool:
        return self.type in (CommandType.PIECEMOVE, CommandType.PASS)

    def to_move(self) -> Move:
        if self.type == CommandType.PASS:
            return PASS
        if self.type == CommandType.PIECEMOVE:
            return parse_move("-".join(self.operands))
        raise CommandError(f"'{self.type.value}' is not a move")


def parse_command(line: Optional[str]) -> Command:
    """Parse one input line; ``None`` stands for end of input."""
    if line is None:
        return Command(CommandType.EOF)
    text = line.strip()
    for kind, pattern in _PATTERNS:
        match = pattern.fullmatch(text)
        if match:
            operands = match.groups()
            # File names keep their case.
            if kind != CommandType.LOAD:
                operands = tuple(group.lower() for group in operands)
            return Command(kind, operands)
    raise CommandError(f"Command not understood: {text}")


def parse_move(text: str) -> Move:
    text = text.strip().lower()
    if text in ("pass", "-"):
        return PASS
    parts = [part.strip() for part in text.split("-")]
    if len(parts) != 2:
        raise CommandError(f"Malformed move: {text}")
    try:
        col0, row0 = parse_square(parts[0])
        col1, row1 = parse_square(parts[1])
    except ValueError as exc:
        raise CommandError(f"Malformed move: {text}") from exc
    try:
        return Move.between(col0, row0, col1, row1)
    except ValueError as exc:
        raise IllegalMove(f"illegal move: {text}") from exc
