"""Ataxx board state.

Squares are addressed by (column, row) with column 0..6 standing for ``a``..``g``
and row 0..6 for ``1``..``7``.  The grid itself is a flat array over an
11x11 square: the playable 7x7 region is surrounded by a two-cell-deep
border whose cells are permanently BLOCKED.  Every probe within two cells of a
playable square therefore stays inside the array, and the ordinary
"destination must be empty" test rejects moves that would leave the board.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from .errors import IllegalBlockPlacement, IllegalMove, InvalidColorArgument, UndoUnderflow
from .move import MOVE_OFFSETS, PASS, ROWS, SIDE, COLUMNS, Move, MoveKind
from .pieces import GameResult, PieceColor

EXTENDED_SIDE = SIDE + 4
BOARD_CELLS = EXTENDED_SIDE * EXTENDED_SIDE
JUMP_LIMIT = 25
CORNERS: Tuple[Tuple[int, int], ...] = ((0, 0), (0, SIDE - 1), (SIDE - 1, 0), (SIDE - 1, SIDE - 1))


def index(col: int, row: int) -> int:
    """Linearized index of square (col, row); border squares run from -2 to SIDE + 1."""
    return (row + 2) * EXTENDED_SIDE + (col + 2)


def in_board(col: int, row: int) -> bool:
    return 0 <= col < SIDE and 0 <= row < SIDE


# Playable squares in enumeration order: column a..g, then row 1..7.
INTERIOR: Tuple[int, ...] = tuple(index(c, r) for c in range(SIDE) for r in range(SIDE))
_COORDS: Dict[int, Tuple[int, int]] = {index(c, r): (c, r) for c in range(SIDE) for r in range(SIDE)}
_PROBES: Tuple[Tuple[int, int, int, MoveKind], ...] = tuple(
    (
        dc,
        dr,
        dr * EXTENDED_SIDE + dc,
        MoveKind.EXTEND if max(abs(dc), abs(dr)) == 1 else MoveKind.JUMP,
    )
    for dc, dr in MOVE_OFFSETS
)
NEIGHBOR_DELTAS: Tuple[int, ...] = tuple(
    dr * EXTENDED_SIDE + dc for dc in (-1, 0, 1) for dr in (-1, 0, 1) if (dc, dr) != (0, 0)
)

_EMPTY = int(PieceColor.EMPTY)
_BLOCKED = int(PieceColor.BLOCKED)


def _new_grid() -> np.ndarray:
    grid = np.full(BOARD_CELLS, _BLOCKED, dtype=np.int8)
    grid[list(INTERIOR)] = _EMPTY
    return grid


@dataclass(frozen=True)
class _Snapshot:
    grid: np.ndarray
    red: int
    blue: int
    whose_move: PieceColor
    num_moves: int
    num_jumps: int
    moves_played: int


class Board:
    def __init__(self) -> None:
        self._history: List[_Snapshot] = []
        self._moves: List[Move] = []
        self._reset()

    def _reset(self) -> None:
        self._grid = _new_grid()
        self._counts = {PieceColor.RED: 0, PieceColor.BLUE: 0}
        self._whose_move = PieceColor.RED
        self._num_moves = 0
        self._num_jumps = 0
        self._history = []
        self._moves = []
        for (col, row), color in (
            ((0, SIDE - 1), PieceColor.RED),
            ((SIDE - 1, 0), PieceColor.RED),
            ((0, 0), PieceColor.BLUE),
            ((SIDE - 1, SIDE - 1), PieceColor.BLUE),
        ):
            self._grid[index(col, row)] = int(color)
            self._counts[color] += 1

    def clear(self) -> None:
        """Return to the starting layout with no blocks and an empty history."""
        self._reset()

    def copy(self) -> "Board":
        other = Board.__new__(Board)
        other._grid = self._grid.copy()
        other._counts = dict(self._counts)
        other._whose_move = self._whose_move
        other._num_moves = self._num_moves
        other._num_jumps = self._num_jumps
        other._history = list(self._history)
        other._moves = list(self._moves)
        return other

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def whose_move(self) -> PieceColor:
        return self._whose_move

    @property
    def num_moves(self) -> int:
        """Moves and passes made since the last clear."""
        return self._num_moves

    @property
    def num_jumps(self) -> int:
        """Jumps made since the last extend (or the start of the game)."""
        return self._num_jumps

    @property
    def all_moves(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def history_depth(self) -> int:
        return len(self._history)

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the flat 11x11 grid."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def red_pieces(self) -> int:
        return self.num_pieces(PieceColor.RED)

    @property
    def blue_pieces(self) -> int:
        return self.num_pieces(PieceColor.BLUE)

    def num_pieces(self, color: PieceColor) -> int:
        _check_player(color)
        return self._counts[color]

    def get(self, col: int, row: int) -> PieceColor:
        if not (-2 <= col < SIDE + 2 and -2 <= row < SIDE + 2):
            raise ValueError(f"Square ({col}, {row}) is outside the board.")
        return PieceColor(int(self._grid[index(col, row)]))

    def cell(self, sq: int) -> PieceColor:
        return PieceColor(int(self._grid[sq]))

    # ------------------------------------------------------------------
    # Legality and enumeration
    # ------------------------------------------------------------------
    def legal_move(self, move: Move) -> bool:
        if move.is_pass:
            return not self.can_move(self._whose_move)
        return self._legal_for(move, self._whose_move)

    def _legal_for(self, move: Move, color: PieceColor) -> bool:
        if not in_board(move.col0, move.row0):
            return False
        expected = 1 if move.is_extend else 2
        if move.distance != expected:
            return False
        return bool(
            self._grid[index(move.col0, move.row0)] == int(color)
            and self._grid[index(move.col1, move.row1)] == _EMPTY
        )

    def legal_moves(self, color: PieceColor) -> List[Move]:
        _check_player(color)
        cells = self._grid.tolist()
        own = int(color)
        moves: List[Move] = []
        for sq in INTERIOR:
            if cells[sq] != own:
                continue
            col0, row0 = _COORDS[sq]
            for dc, dr, delta, kind in _PROBES:
                if cells[sq + delta] == _EMPTY:
                    moves.append(Move(kind, col0, row0, col0 + dc, row0 + dr))
        return moves

    def can_move(self, color: PieceColor) -> bool:
        """True iff COLOR has an extend or jump, ignoring whose turn it is."""
        _check_player(color)
        cells = self._grid.tolist()
        own = int(color)
        for sq in INTERIOR:
            if cells[sq] != own:
                continue
            for _, _, delta, _ in _PROBES:
                if cells[sq + delta] == _EMPTY:
                    return True
        return False

    def legal_block(self, col: int, row: int) -> bool:
        if not in_board(col, row) or (col, row) in CORNERS:
            return False
        return bool(self._grid[index(col, row)] == _EMPTY)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def make_move(self, move: Move) -> None:
        if move.is_pass:
            self.pass_turn()
            return
        if not self.legal_move(move):
            raise IllegalMove(f"illegal move: {move}")

        mover = self._whose_move
        self._push_snapshot()
        src = index(move.col0, move.row0)
        dst = index(move.col1, move.row1)
        if move.is_extend:
            self._counts[mover] += 1
            self._num_jumps = 0
        else:
            self._grid[src] = _EMPTY
            self._num_jumps += 1
        self._grid[dst] = int(mover)
        self._capture(dst, mover)

        self._moves.append(move)
        self._whose_move = mover.opposite()
        self._num_moves += 1

    def pass_turn(self) -> None:
        if self.can_move(self._whose_move):
            raise IllegalMove(f"{self._whose_move} cannot pass while it has legal moves")
        self._push_snapshot()
        self._moves.append(PASS)
        self._whose_move = self._whose_move.opposite()
        self._num_moves += 1

    def undo(self) -> None:
        if not self._history:
            raise UndoUnderflow("nothing to undo")
        snapshot = self._history.pop()
        self._grid = snapshot.grid.copy()
        self._counts = {PieceColor.RED: snapshot.red, PieceColor.BLUE: snapshot.blue}
        self._whose_move = snapshot.whose_move
        self._num_moves = snapshot.num_moves
        self._num_jumps = snapshot.num_jumps
        del self._moves[snapshot.moves_played:]

    def set_block(self, col: int, row: int) -> None:
        """Block (col, row) and its reflections across the middle row and column."""
        if not self.legal_block(col, row):
            raise IllegalBlockPlacement(f"illegal block placement at {_name(col, row)}")
        self._push_snapshot()
        mirror_col = SIDE - 1 - col
        mirror_row = SIDE - 1 - row
        for c, r in ((col, row), (mirror_col, row), (col, mirror_row), (mirror_col, mirror_row)):
            if self.legal_block(c, r):
                self._grid[index(c, r)] = _BLOCKED

    def _capture(self, sq: int, mover: PieceColor) -> int:
        enemy = int(mover.opposite())
        flipped = 0
        for delta in NEIGHBOR_DELTAS:
            if self._grid[sq + delta] == enemy:
                self._grid[sq + delta] = int(mover)
                flipped += 1
        self._counts[mover] += flipped
        self._counts[mover.opposite()] -= flipped
        return flipped

    def _push_snapshot(self) -> None:
        self._history.append(
            _Snapshot(
                grid=self._grid.copy(),
                red=self._counts[PieceColor.RED],
                blue=self._counts[PieceColor.BLUE],
                whose_move=self._whose_move,
                num_moves=self._num_moves,
                num_jumps=self._num_jumps,
                moves_played=len(self._moves),
            )
        )

    # ------------------------------------------------------------------
    # End of game
    # ------------------------------------------------------------------
    def game_over(self) -> bool:
        if self._counts[PieceColor.RED] == 0 or self._counts[PieceColor.BLUE] == 0:
            return True
        if self._num_jumps > JUMP_LIMIT:
            return True
        return not (self.can_move(PieceColor.RED) or self.can_move(PieceColor.BLUE))

    def result(self) -> GameResult:
        if not self.game_over():
            return GameResult.ONGOING
        red, blue = self._counts[PieceColor.RED], self._counts[PieceColor.BLUE]
        if red > blue:
            return GameResult.RED_WIN
        if blue > red:
            return GameResult.BLUE_WIN
        return GameResult.DRAW

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def to_string(self, legend: bool = False) -> str:
        lines = ["==="]
        for row in range(SIDE - 1, -1, -1):
            cells = " ".join(self.get(col, row).symbol for col in range(SIDE))
            prefix = f"{ROWS[row]} " if legend else "  "
            lines.append(prefix + cells)
        if legend:
            lines.append("  " + " ".join(COLUMNS))
        lines.append("===")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"Board(to_move={self._whose_move}, red={self.red_pieces}, "
            f"blue={self.blue_pieces}, ply={self._num_moves})\n{self.to_string(legend=True)}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            np.array_equal(self._grid, other._grid)
            and self._counts == other._counts
            and self._whose_move == other._whose_move
        )

    __hash__ = None


def _check_player(color: PieceColor) -> None:
    if color not in (PieceColor.RED, PieceColor.BLUE):
        raise InvalidColorArgument(f"{color!s} is not a player color")


def _name(col: int, row: int) -> str:
    if in_board(col, row):
        return f"{COLUMNS[col]}{ROWS[row]}"
    return f"({col}, {row})"


def count_cells(board: Board, color: PieceColor) -> int:
    """Number of grid cells holding COLOR, independent of the maintained counters."""
    return int(np.count_nonzero(board.grid == int(color)))


def board_from_rows(rows: Sequence[str], to_move: PieceColor = PieceColor.RED) -> Board:
    """Build a board from seven strings of ``r``/``b``/``X``/``-`` listed from row 7 down to row 1.

    The result has an empty history; counters are derived from the layout.
    """
    if len(rows) != SIDE:
        raise ValueError(f"Expected {SIDE} rows, got {len(rows)}.")
    symbols = {color.symbol: color for color in PieceColor}
    board = Board()
    grid = _new_grid()
    counts = {PieceColor.RED: 0, PieceColor.BLUE: 0}
    for offset, text in enumerate(rows):
        cells = text.split() if " " in text.strip() else list(text.strip())
        if len(cells) != SIDE:
            raise ValueError(f"Row {SIDE - offset} must have {SIDE} cells: {text!r}")
        row = SIDE - 1 - offset
        for col, symbol in enumerate(cells):
            try:
                color = symbols[symbol]
            except KeyError as exc:
                raise ValueError(f"Unknown cell symbol {symbol!r}") from exc
            grid[index(col, row)] = int(color)
            if color.is_piece:
                counts[color] += 1
    board._grid = grid
    board._counts = counts
    board._whose_move = to_move
    return board
