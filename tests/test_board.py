import numpy as np
import pytest

from ataxx.core import (
    JUMP_LIMIT,
    PASS,
    SIDE,
    Board,
    GameResult,
    IllegalBlockPlacement,
    IllegalMove,
    InvalidColorArgument,
    Move,
    MoveKind,
    PieceColor,
    UndoUnderflow,
    board_from_rows,
    count_cells,
    decode_move,
    in_board,
)
from ataxx.core.move import ACTION_VECTOR_SIZE

RED = PieceColor.RED
BLUE = PieceColor.BLUE

# Red at a7 is walled in by blocks; Blue at g1 can still move.
RED_STUCK_ROWS = (
    "rXX----",
    "XXX----",
    "XXX----",
    "-------",
    "-------",
    "-------",
    "------b",
)


def assert_border_blocked(board: Board) -> None:
    for col in range(-2, SIDE + 2):
        for row in range(-2, SIDE + 2):
            if not in_board(col, row):
                assert board.get(col, row) == PieceColor.BLOCKED


def assert_counts_match(board: Board) -> None:
    assert board.red_pieces == count_cells(board, RED)
    assert board.blue_pieces == count_cells(board, BLUE)


def play_random(board: Board, plies: int, seed: int) -> Board:
    rng = np.random.default_rng(seed)
    for _ in range(plies):
        if board.game_over():
            break
        moves = board.legal_moves(board.whose_move)
        board.make_move(moves[int(rng.integers(len(moves)))] if moves else PASS)
    return board


def test_initial_layout() -> None:
    board = Board()
    assert board.get(0, 6) == RED
    assert board.get(6, 0) == RED
    assert board.get(0, 0) == BLUE
    assert board.get(6, 6) == BLUE
    assert board.whose_move == RED
    assert (board.red_pieces, board.blue_pieces) == (2, 2)
    assert board.num_moves == 0 and board.num_jumps == 0
    assert board.all_moves == ()
    assert_border_blocked(board)


def test_initial_dump() -> None:
    expected = "\n".join(
        ["===", "  r - - - - - b"]
        + ["  - - - - - - -"] * 5
        + ["  b - - - - - r", "==="]
    )
    assert str(Board()) == expected


def test_legend_dump_labels_rows_and_columns() -> None:
    text = Board().to_string(legend=True)
    lines = text.splitlines()
    assert lines[1] == "7 r - - - - - b"
    assert lines[-2] == "  a b c d e f g"


def test_legal_moves_enumeration_order() -> None:
    board = Board()
    moves = board.legal_moves(RED)
    assert len(moves) == 16
    # Column a before g; within a source, column delta then row delta ascending.
    assert moves[0] == Move.between(0, 6, 0, 4)
    assert moves[1] == Move.between(0, 6, 0, 5)
    assert all(move.source == (0, 6) for move in moves[:8])
    assert all(board.legal_move(move) for move in moves)


def test_legal_move_rejections() -> None:
    board = Board()
    board.make_move(Move.between(0, 6, 0, 5))
    board.make_move(Move.between(0, 0, 0, 1))
    assert not board.legal_move(Move.between(0, 5, 0, 6))  # occupied destination
    assert not board.legal_move(Move.between(0, 0, 0, 1))  # Blue's piece on Red's turn
    assert not board.legal_move(Move.between(1, 1, 1, 2))  # empty source
    assert not board.legal_move(Move.between(0, 6, 0, 8))  # off the board
    assert not board.legal_move(Move.between(-1, 6, 0, 6))
    assert not board.legal_move(Move(MoveKind.EXTEND, 0, 6, 0, 4))  # kind disagrees with distance
    assert not board.legal_move(PASS)


def test_illegal_move_leaves_board_unchanged() -> None:
    board = Board()
    before = board.copy()
    with pytest.raises(IllegalMove):
        board.make_move(Move.between(1, 1, 1, 2))
    with pytest.raises(IllegalMove):
        board.make_move(PASS)
    assert board == before
    assert board.history_depth == 0


def test_extend_adds_a_piece() -> None:
    board = Board()
    board.make_move(Move.between(0, 6, 1, 5))
    assert board.get(0, 6) == RED and board.get(1, 5) == RED
    assert board.red_pieces == 3
    assert board.whose_move == BLUE
    assert board.num_moves == 1 and board.num_jumps == 0
    assert_counts_match(board)


def test_jump_vacates_source() -> None:
    board = Board()
    board.make_move(Move.between(0, 6, 2, 4))
    assert board.get(0, 6) == PieceColor.EMPTY
    assert board.get(2, 4) == RED
    assert board.red_pieces == 2
    assert board.num_jumps == 1


def test_jump_captures_all_adjacent_enemies() -> None:
    board = board_from_rows(
        [
            "-------",
            "-------",
            "--bbb--",
            "--b-b--",
            "--bbb--",
            "-----r-",
            "b-----b",
        ]
    )
    assert board.blue_pieces == 10
    board.make_move(Move.between(5, 1, 3, 3))
    for col in (2, 3, 4):
        for row in (2, 3, 4):
            assert board.get(col, row) == RED
    assert board.get(0, 0) == BLUE and board.get(6, 0) == BLUE
    assert (board.red_pieces, board.blue_pieces) == (9, 2)
    assert_counts_match(board)


def test_extend_captures_neighbours_only() -> None:
    board = board_from_rows(
        [
            "rb-----",
            "-b-----",
            "-------",
            "-------",
            "-------",
            "-------",
            "b------",
        ]
    )
    board.make_move(Move.between(0, 6, 0, 5))
    assert board.get(1, 6) == RED and board.get(1, 5) == RED
    assert board.get(0, 0) == BLUE
    assert (board.red_pieces, board.blue_pieces) == (4, 1)


def test_pass_only_when_stuck() -> None:
    board = board_from_rows(RED_STUCK_ROWS)
    assert not board.can_move(RED)
    assert board.legal_moves(RED) == []
    assert board.legal_move(PASS)
    assert not board.game_over()

    board.make_move(PASS)
    assert board.whose_move == BLUE
    assert board.num_moves == 1
    assert board.all_moves == (PASS,)

    board.undo()
    assert board.whose_move == RED
    assert board.all_moves == ()


def test_pass_turn_rejected_with_moves_available() -> None:
    with pytest.raises(IllegalMove):
        Board().pass_turn()


def test_undo_restores_every_field() -> None:
    board = play_random(Board(), 10, seed=3)
    original = board.copy()
    for move in board.legal_moves(board.whose_move):
        board.make_move(move)
        board.undo()
        assert board == original
        assert board.num_moves == original.num_moves
        assert board.num_jumps == original.num_jumps
        assert board.all_moves == original.all_moves


def test_undo_of_capture_restores_counts() -> None:
    board = board_from_rows(
        ["rb-----", "-b-----", "-------", "-------", "-------", "-------", "b------"]
    )
    before = board.copy()
    board.make_move(Move.between(0, 6, 0, 5))
    board.undo()
    assert board == before
    assert (board.red_pieces, board.blue_pieces) == (1, 3)


def test_undo_on_fresh_board_underflows() -> None:
    with pytest.raises(UndoUnderflow):
        Board().undo()


def test_copy_is_independent() -> None:
    board = Board()
    clone = board.copy()
    clone.make_move(Move.between(0, 6, 1, 5))
    assert board.get(1, 5) == PieceColor.EMPTY
    assert board.red_pieces == 2
    assert board.num_moves == 0
    assert clone != board


def test_clear_resets_everything() -> None:
    board = play_random(Board(), 6, seed=1)
    if board.legal_block(2, 2):
        board.set_block(2, 2)
    board.clear()
    assert board == Board()
    assert board.history_depth == 0
    assert board.all_moves == ()


def test_set_block_mirrors_four_ways() -> None:
    board = Board()
    board.set_block(2, 2)
    for col, row in ((2, 2), (4, 2), (2, 4), (4, 4)):
        assert board.get(col, row) == PieceColor.BLOCKED
    assert board.history_depth == 1
    board.undo()
    assert board == Board()


def test_set_block_on_centre_lines() -> None:
    board = Board()
    board.set_block(3, 3)
    assert count_cells(board, PieceColor.BLOCKED) - count_cells(Board(), PieceColor.BLOCKED) == 1
    board.set_block(3, 1)
    assert board.get(3, 5) == PieceColor.BLOCKED


def test_set_block_skips_occupied_reflections() -> None:
    board = board_from_rows(
        ["r-----b", "-------", "-------", "-------", "-------", "-------", "bb----r"]
    )
    board.set_block(1, 6)
    assert board.get(1, 6) == PieceColor.BLOCKED
    assert board.get(5, 6) == PieceColor.BLOCKED
    assert board.get(5, 0) == PieceColor.BLOCKED
    assert board.get(1, 0) == BLUE


@pytest.mark.parametrize("square", [(0, 0), (6, 6), (7, 3), (-1, 0)])
def test_illegal_block_placements(square) -> None:
    with pytest.raises(IllegalBlockPlacement):
        Board().set_block(*square)


def test_blocking_an_already_blocked_cell() -> None:
    board = Board()
    board.set_block(2, 2)
    with pytest.raises(IllegalBlockPlacement):
        board.set_block(4, 4)


def test_game_over_when_a_side_is_eliminated() -> None:
    board = board_from_rows(
        ["r------", "-------", "-------", "-------", "-------", "-------", "------r"]
    )
    assert board.game_over()
    assert board.result() == GameResult.RED_WIN


def test_game_over_when_nobody_can_move() -> None:
    board = board_from_rows(["rrrrrrr"] * 3 + ["rrrXbbb"] + ["bbbbbbb"] * 3)
    assert board.game_over()
    assert board.result() == GameResult.DRAW


def test_jump_limit_ends_the_game() -> None:
    board = Board()
    cycle = [
        Move.between(0, 6, 0, 4),
        Move.between(0, 0, 0, 2),
        Move.between(0, 4, 0, 6),
        Move.between(0, 2, 0, 0),
    ]
    for ply in range(JUMP_LIMIT):
        board.make_move(cycle[ply % 4])
    assert board.num_jumps == JUMP_LIMIT
    assert not board.game_over()
    board.make_move(cycle[JUMP_LIMIT % 4])
    assert board.game_over()
    assert board.result() == GameResult.DRAW


def test_extend_resets_jump_counter() -> None:
    board = Board()
    board.make_move(Move.between(0, 6, 0, 4))
    board.make_move(Move.between(0, 0, 0, 1))
    assert board.num_jumps == 0


def test_ongoing_result() -> None:
    assert Board().result() == GameResult.ONGOING


@pytest.mark.parametrize("color", [PieceColor.EMPTY, PieceColor.BLOCKED])
def test_non_player_colors_rejected(color) -> None:
    board = Board()
    with pytest.raises(InvalidColorArgument):
        board.num_pieces(color)
    with pytest.raises(InvalidColorArgument):
        board.legal_moves(color)


@pytest.mark.parametrize("seed", [0, 7, 21])
def test_random_play_keeps_invariants(seed) -> None:
    board = Board()
    rng = np.random.default_rng(seed)
    while not board.game_over() and board.num_moves < 60:
        moves = board.legal_moves(board.whose_move)
        board.make_move(moves[int(rng.integers(len(moves)))] if moves else PASS)
        assert_counts_match(board)
        assert_border_blocked(board)


@pytest.mark.parametrize("seed", [2, 5])
def test_legality_matches_acceptance(seed) -> None:
    board = play_random(Board(), 12, seed=seed)
    for action in range(ACTION_VECTOR_SIZE):
        move = decode_move(action)
        trial = board.copy()
        try:
            trial.make_move(move)
            accepted = True
        except IllegalMove:
            accepted = False
        assert accepted == board.legal_move(move), str(move)
