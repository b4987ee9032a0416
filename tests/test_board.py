import numpy as np
import pytest

from othello.core import Board, Move, Side, is_game_over, legal_moves


def fresh_board() -> Board:
    return Board.empty()


def test_starting_position_counts() -> None:
    board = Board()
    assert board.count_black() == 2
    assert board.count_white() == 2
    assert board.count_empty() == 60
    assert board.get(Side.BLACK, 3, 4)
    assert board.get(Side.WHITE, 3, 3)
    assert not board.get(Side.BLACK, 3, 3)


def test_apply_flips_bracketed_disc() -> None:
    board = Board()
    board.apply(Move(2, 3), Side.BLACK)

    assert board.get(Side.BLACK, 2, 3)
    assert board.get(Side.BLACK, 3, 3)
    assert board.count_black() == 4
    assert board.count_white() == 1


def test_apply_flips_in_several_directions() -> None:
    board = fresh_board()
    board.cells[2, 0] = Side.BLACK
    board.cells[2, 1] = Side.WHITE
    board.cells[0, 2] = Side.BLACK
    board.cells[1, 2] = Side.WHITE

    board.apply(Move(2, 2), Side.BLACK)

    assert board.count_black() == 5
    assert board.count_white() == 0


def test_flip_stops_at_nearest_own_disc() -> None:
    board = fresh_board()
    board.cells[0, 0] = Side.BLACK
    board.cells[0, 1] = Side.WHITE
    board.cells[0, 2] = Side.BLACK
    board.cells[0, 3] = Side.WHITE

    board.apply(Move(0, 4), Side.BLACK)

    assert board.get(Side.BLACK, 0, 3)
    assert board.get(Side.WHITE, 0, 1)


def test_run_reaching_edge_is_not_a_move() -> None:
    board = fresh_board()
    board.cells[0, 1] = Side.WHITE

    assert not board.check_move(Move(0, 2), Side.BLACK)
    with pytest.raises(ValueError):
        board.apply(Move(0, 2), Side.BLACK)


def test_apply_on_occupied_cell_raises() -> None:
    board = Board()
    with pytest.raises(ValueError):
        board.apply(Move(3, 3), Side.BLACK)


def test_off_board_move_is_rejected() -> None:
    board = Board()
    assert not board.check_move(Move(8, 0), Side.BLACK)
    assert not board.check_move(Move(-1, 3), Side.BLACK)
    with pytest.raises(ValueError):
        board.apply(Move(8, 0), Side.BLACK)


def test_failed_apply_leaves_board_untouched() -> None:
    board = Board()
    before = board.cells.copy()
    with pytest.raises(ValueError):
        board.apply(Move(0, 0), Side.BLACK)
    assert np.array_equal(board.cells, before)


def test_pass_is_noop_and_only_legal_without_moves() -> None:
    board = fresh_board()
    board.cells[0, 0] = Side.BLACK
    board.cells[0, 1] = Side.WHITE
    before = board.cells.copy()

    assert board.check_move(None, Side.WHITE)
    assert not board.check_move(None, Side.BLACK)
    board.apply(None, Side.WHITE)
    assert np.array_equal(board.cells, before)


def test_has_moves() -> None:
    board = fresh_board()
    board.cells[0, 0] = Side.BLACK
    board.cells[0, 1] = Side.WHITE

    assert board.has_moves(Side.BLACK)
    assert not board.has_moves(Side.WHITE)
    assert not fresh_board().has_moves(Side.BLACK)


def test_clone_is_independent() -> None:
    board = Board()
    clone = board.clone()
    clone.apply(Move(2, 3), Side.BLACK)

    assert board.count_black() == 2
    assert clone.count_black() == 4

    board.apply(Move(5, 4), Side.BLACK)
    assert not clone.get(Side.BLACK, 5, 4)


def test_clone_replays_identically() -> None:
    rng = np.random.default_rng(3)
    board = Board()
    clone = board.clone()
    side = Side.BLACK
    for _ in range(20):
        moves = legal_moves(board, side)
        move = moves[int(rng.integers(len(moves)))] if moves else None
        board.apply(move, side)
        clone.apply(move, side)
        side = side.opponent
    assert board == clone


def test_disc_total_invariant_over_random_games() -> None:
    rng = np.random.default_rng(11)
    for _ in range(3):
        board = Board()
        side = Side.BLACK
        while not is_game_over(board):
            moves = legal_moves(board, side)
            if moves:
                board.apply(moves[int(rng.integers(len(moves)))], side)
            assert board.count_black() + board.count_white() + board.count_empty() == 64
            side = side.opponent


def test_render_marks_discs() -> None:
    rows = Board().render().splitlines()
    assert len(rows) == 8
    assert rows[3] == "...OX..."
    assert rows[4] == "...XO..."
