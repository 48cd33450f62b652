import numpy as np
import pytest

from ataxx.ai import (
    Board,
    EmptyHistory,
    IllegalBlockPlacement,
    IllegalMove,
    PASS_MOVE,
    Move,
    PieceColor,
)
from ataxx.ai.constants import BOARD_CELLS, COLUMNS, EXTENDED_SIDE, ROWS

RED = PieceColor.RED
BLUE = PieceColor.BLUE
EMPTY = PieceColor.EMPTY
BLOCKED = PieceColor.BLOCKED


def play(board: Board, *moves: str) -> None:
    for text in moves:
        board.make_move(Move.parse(text))


def count(board: Board, color: PieceColor) -> int:
    return sum(1 for c in COLUMNS for r in ROWS if board.get(c, r) == color)


def check_invariants(board: Board) -> None:
    assert board.red_pieces() == count(board, RED)
    assert board.blue_pieces() == count(board, BLUE)
    assert (board.red_pieces() + board.blue_pieces()
            + count(board, EMPTY) + count(board, BLOCKED)) == 49
    for sq in range(BOARD_CELLS):
        row, col = divmod(sq, EXTENDED_SIDE)
        if row < 2 or row > 8 or col < 2 or col > 8:
            assert board.get_square(sq) == BLOCKED


def test_clear_sets_starting_position() -> None:
    board = Board()
    assert board.get("a", "7") == RED
    assert board.get("g", "1") == RED
    assert board.get("a", "1") == BLUE
    assert board.get("g", "7") == BLUE
    assert count(board, EMPTY) == 45
    assert board.whose_move() == RED
    assert board.num_moves() == 0
    assert board.num_jumps() == 0
    assert board.all_moves() == []
    check_invariants(board)


def test_clear_is_idempotent() -> None:
    board = Board()
    play(board, "a7-b6", "a1-a3")
    board.clear()
    once = board.copy()
    board.clear()
    assert board == once
    assert board == Board()


def test_legal_move_requires_own_piece_and_empty_target() -> None:
    board = Board()
    assert board.legal_move(Move.move("a", "7", "b", "6"))
    assert board.legal_move(Move.move("a", "7", "c", "5"))
    # Blue piece, but red to move
    assert not board.legal_move(Move.move("a", "1", "a", "2"))
    # Empty source
    assert not board.legal_move(Move.move("d", "4", "d", "5"))
    assert not board.legal_move(PASS_MOVE)


def test_legal_move_destination_must_be_empty() -> None:
    board = Board.from_layout([
        "r b - - - - b",
        "- - - - - - -",
        "- - - - - - -",
        "- - - - - - -",
        "- - - - - - -",
        "- - - - - - -",
        "b - - - - - r",
    ])
    assert not board.legal_move(Move.move("a", "7", "b", "7"))
    assert board.legal_move(Move.move("a", "7", "a", "6"))


def test_extend_adds_piece_and_resets_jumps() -> None:
    board = Board()
    play(board, "a7-a5")
    assert board.num_jumps() == 1
    play(board, "a1-a2")
    assert board.num_jumps() == 0
    assert board.blue_pieces() == 3
    assert board.get("a", "1") == BLUE
    assert board.get("a", "2") == BLUE
    check_invariants(board)


def test_jump_moves_piece() -> None:
    board = Board()
    play(board, "a7-c5")
    assert board.get("a", "7") == EMPTY
    assert board.get("c", "5") == RED
    assert board.red_pieces() == 2
    assert board.num_jumps() == 1
    assert board.num_moves() == 1
    assert board.whose_move() == BLUE
    check_invariants(board)


def test_illegal_move_raises_and_leaves_board_unchanged() -> None:
    board = Board()
    before = board.copy()
    with pytest.raises(IllegalMove):
        board.make_move(Move.move("a", "1", "a", "2"))
    with pytest.raises(IllegalMove):
        board.make_move_at("d", "4", "d", "5")
    assert board == before


def test_capture_flips_adjacent_opponents_only() -> None:
    board = Board()
    play(board, "a7-a6", "g7-f7", "a6-a4", "f7-e7", "a4-a3")
    assert board.red_pieces() == 4
    assert board.blue_pieces() == 4

    play(board, "a1-a2")

    assert board.get("a", "3") == BLUE
    # Distance two from a2 is not captured
    assert board.get("a", "4") == RED
    assert board.get("a", "7") == RED
    assert board.red_pieces() == 3
    assert board.blue_pieces() == 6
    check_invariants(board)


def test_capture_on_jump() -> None:
    board = Board()
    play(board, "a7-b6", "a1-a3", "b6-b4")
    assert board.get("a", "3") == RED
    assert board.get("b", "6") == EMPTY
    assert board.red_pieces() == 4
    assert board.blue_pieces() == 1
    check_invariants(board)


def test_make_move_at_with_pass_marker() -> None:
    board = Board.from_layout([
        "r X X - - - -",
        "X X X - - - -",
        "X X X - - - -",
        "- - - - - - -",
        "- - - - - - -",
        "- - - - - - -",
        "b - - - - - -",
    ])
    board.make_move_at("-", "", "", "")
    assert board.whose_move() == BLUE
    assert board.all_moves() == [PASS_MOVE]


def test_undo_restores_previous_state() -> None:
    board = Board()
    play(board, "a7-a6", "g7-f7", "a6-a4", "f7-e7", "a4-a3")
    before = board.copy()
    play(board, "a1-a2")
    board.undo()
    assert board == before
    check_invariants(board)


def test_undo_sequence_back_to_start() -> None:
    board = Board()
    moves = ["a7-b6", "a1-a3", "b6-b4", "g7-e5", "b4-d4"]
    snapshots = []
    for text in moves:
        snapshots.append(board.copy())
        play(board, text)
        check_invariants(board)
    for snapshot in reversed(snapshots):
        board.undo()
        assert board == snapshot
        check_invariants(board)
    assert board == Board()


def test_undo_empty_history_raises() -> None:
    board = Board()
    with pytest.raises(EmptyHistory):
        board.undo()


def test_pass_only_legal_without_moves() -> None:
    board = Board()
    with pytest.raises(IllegalMove):
        board.pass_move()
    with pytest.raises(IllegalMove):
        board.make_move(PASS_MOVE)


def test_pass_and_undo_pass() -> None:
    board = Board.from_layout([
        "r X X - - - b",
        "X X X - - - -",
        "X X X - - - -",
        "- - - - - - -",
        "- - - - - - -",
        "- - - - - - -",
        "b - - - - - -",
    ])
    assert not board.can_move(RED)
    assert board.can_move(BLUE)
    assert not board.game_over()
    before = board.copy()

    board.make_move(PASS_MOVE)
    assert board.whose_move() == BLUE
    assert board.num_moves() == 1
    assert board.all_moves() == [PASS_MOVE]

    board.undo()
    assert board == before


def test_block_placement_is_symmetric() -> None:
    board = Board()
    board.set_block("b", "2")
    for c, r in (("b", "2"), ("f", "2"), ("b", "6"), ("f", "6")):
        assert board.get(c, r) == BLOCKED
    board.set_block("d4")
    assert board.get("d", "4") == BLOCKED
    board.set_block("c", "4")
    assert board.get("e", "4") == BLOCKED
    assert count(board, BLOCKED) == 7
    check_invariants(board)


@pytest.mark.parametrize("square", ["a1", "a7", "g1", "g7"])
def test_block_on_corner_rejected(square) -> None:
    board = Board()
    assert not board.legal_block(square)
    with pytest.raises(IllegalBlockPlacement):
        board.set_block(square)


def test_block_on_occupied_square_rejected() -> None:
    board = Board()
    board.set_block("c", "3")
    assert not board.legal_block("e", "5")
    with pytest.raises(IllegalBlockPlacement):
        board.set_block("e", "5")


def test_block_after_first_move_rejected() -> None:
    board = Board()
    play(board, "a7-b6")
    with pytest.raises(IllegalBlockPlacement):
        board.set_block("d", "4")


def test_blocked_squares_are_not_destinations() -> None:
    board = Board()
    board.set_block("b", "6")
    assert not board.legal_move(Move.move("a", "7", "b", "6"))


def test_game_over_when_side_has_no_pieces() -> None:
    board = Board()
    play(board, "a7-b6", "a1-a3", "b6-b4", "g7-e5")
    assert not board.game_over()
    play(board, "b4-d4")
    assert board.blue_pieces() == 0
    assert board.game_over()
    assert board.winner() == RED


def test_game_over_after_jump_limit() -> None:
    board = Board()
    cycle = ["a7-a5", "a1-a3", "a5-a7", "a3-a1"]
    for i in range(24):
        play(board, cycle[i % 4])
    assert board.num_jumps() == 24
    assert not board.game_over()
    play(board, cycle[0])
    assert board.num_jumps() == 25
    assert board.game_over()
    assert board.winner() == EMPTY


def test_game_over_when_nobody_can_move() -> None:
    board = Board.from_layout([
        "r X X - X X b",
        "X X X - X X X",
        "X X X - X X X",
        "- - - - - - -",
        "X X X - X X X",
        "X X X - X X X",
        "b X X - X X r",
    ])
    # The middle files are empty, but out of reach of every piece
    assert board.game_over()


def test_text_dump() -> None:
    board = Board()
    board.set_block("c", "4")
    assert str(board) == "\n".join([
        "  r - - - - - b",
        "  - - - - - - -",
        "  - - - - - - -",
        "  - - X - X - -",
        "  - - - - - - -",
        "  - - - - - - -",
        "  b - - - - - r",
    ])
    legend = board.to_string(True).split("\n")
    assert legend[0] == " 7 r - - - - - b"
    assert legend[6] == " 1 b - - - - - r"
    assert legend[7] == "    a b c d e f g"


def test_from_layout_round_trips_dump() -> None:
    board = Board()
    play(board, "a7-b6", "a1-a3", "b6-b4")
    rebuilt = Board.from_layout(str(board).split("\n"), to_move=BLUE)
    assert str(rebuilt) == str(board)
    assert rebuilt.red_pieces() == board.red_pieces()
    assert rebuilt.blue_pieces() == board.blue_pieces()
    assert rebuilt.all_moves() == []


def test_from_layout_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        Board.from_layout(["r - -"])
    with pytest.raises(ValueError):
        Board.from_layout(["r - - - - - q"] + ["- - - - - - -"] * 6)


def test_observers_notified_after_changes() -> None:
    board = Board()
    seen = []
    board.add_observer(lambda b: seen.append(b.num_moves()))
    play(board, "a7-b6")
    board.undo()
    board.set_block("c", "4")
    board.clear()
    assert seen == [1, 0, 0, 0]

    with pytest.raises(IllegalMove):
        board.make_move(Move.move("a", "1", "a", "2"))
    assert len(seen) == 4


def test_copy_is_independent() -> None:
    board = Board()
    seen = []
    board.add_observer(seen.append)
    clone = board.copy()
    play(clone, "a7-b6")
    assert board.get("b", "6") == EMPTY
    assert board.num_moves() == 0
    assert board.all_moves() == []
    assert seen == []
    clone.undo()
    assert clone == board


def test_all_moves_records_history() -> None:
    board = Board()
    play(board, "a7-b6", "a1-a3")
    assert [str(m) for m in board.all_moves()] == ["a7-b6", "a1-a3"]
    board.all_moves().clear()
    assert len(board.all_moves()) == 2


def test_grid_is_numpy_array() -> None:
    board = Board()
    assert isinstance(board.contents(np.arange(BOARD_CELLS)), np.ndarray)


def test_unrecorded_move_leaves_no_history() -> None:
    board = Board()
    board.make_unrecorded_move(Move.move("a", "7", "b", "6"))
    assert board.get("b", "6") == RED
    assert board.red_pieces() == 3
    assert board.whose_move() == BLUE
    assert board.num_moves() == 0
    assert board.all_moves() == []
    with pytest.raises(EmptyHistory):
        board.undo()
    with pytest.raises(IllegalMove):
        board.make_unrecorded_move(Move.move("a", "7", "a", "6"))


def test_removed_observer_not_called() -> None:
    board = Board()
    seen = []
    board.add_observer(seen.append)
    board.remove_observer(seen.append)
    play(board, "a7-b6")
    assert seen == []


def test_num_pieces_by_color() -> None:
    board = Board()
    board.set_block("b", "2")
    assert board.num_pieces(RED) == 2
    assert board.num_pieces(BLUE) == 2
    assert board.num_pieces(BLOCKED) == 4
    assert board.num_pieces(EMPTY) == 41


def test_unrecorded_pass_rejected() -> None:
    board = Board.from_layout([
        "r X X - - - b",
        "X X X - - - -",
        "X X X - - - -",
        "- - - - - - -",
        "- - - - - - -",
        "- - - - - - -",
        "b - - - - - -",
    ])
    before = board.copy()
    with pytest.raises(IllegalMove):
        board.make_unrecorded_move(PASS_MOVE)
    assert board == before
    assert board.all_moves() == []
