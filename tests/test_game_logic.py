import pytest

from oxgame.game_logic import (
    EMPTY_BOARD, Mark, WINNING_LINES, active_mark, cell_index, detect_winner, place_mark,
)

A, B, _ = Mark.A, Mark.B, Mark.EMPTY


def test_empty_board_has_no_winner():
    assert detect_winner(EMPTY_BOARD) is None


def test_top_row_wins():
    assert detect_winner((A, A, A, _, _, _, _, _, _)) is Mark.A


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", [Mark.A, Mark.B])
def test_every_line_is_detected(line, mark):
    board = list(EMPTY_BOARD)
    for i in line:
        board[i] = mark
    assert detect_winner(tuple(board)) is mark


def test_checkerboard_without_line():
    assert detect_winner((A, B, A, B, A, B, B, A, B)) is None


def test_alternating_full_board_is_a_diagonal_win():
    # A on every even index covers both diagonals
    assert detect_winner((A, B, A, B, A, B, A, B, A)) is Mark.A


def test_two_in_a_row_is_not_enough():
    assert detect_winner((A, A, _, B, B, _, _, _, _)) is None


def test_bad_board_length():
    with pytest.raises(ValueError):
        detect_winner((A, A, A))


@pytest.mark.parametrize("turn", [1, 3, 5, 7, 9])
def test_odd_turns_play_a(turn):
    assert active_mark(turn) is Mark.A


@pytest.mark.parametrize("turn", [2, 4, 6, 8])
def test_even_turns_play_b(turn):
    assert active_mark(turn) is Mark.B


def test_turn_zero_rejected():
    with pytest.raises(ValueError):
        active_mark(0)


@pytest.mark.parametrize("x, y, expected", [
    (0, 0, 0), (150, 150, 4), (299, 299, 8), (250, 10, 2), (10, 250, 6), (100, 0, 1),
])
def test_cell_index(x, y, expected):
    assert cell_index(x, y, 300, 300) == expected


@pytest.mark.parametrize("x, y", [(-1, 10), (10, -1), (300, 10), (10, 300), (500, 500)])
def test_cell_index_outside(x, y):
    assert cell_index(x, y, 300, 300) is None


def test_cell_index_degenerate_surface():
    assert cell_index(10, 10, 0, 0) is None


def test_place_mark_returns_new_board():
    board = place_mark(EMPTY_BOARD, 4, Mark.B)
    assert board[4] is Mark.B
    assert EMPTY_BOARD[4] is Mark.EMPTY
    assert sum(c is not Mark.EMPTY for c in board) == 1


def test_place_mark_on_taken_cell():
    board = place_mark(EMPTY_BOARD, 0, Mark.A)
    with pytest.raises(ValueError):
        place_mark(board, 0, Mark.B)
    with pytest.raises(ValueError):
        place_mark(board, 9, Mark.B)


def test_mark_labels():
    assert str(Mark.A) == "X"
    assert str(Mark.B) == "O"


@pytest.mark.parametrize("x, y", [(float("nan"), 10), (10, float("inf")), (float("-inf"), 0)])
def test_cell_index_non_finite(x, y):
    assert cell_index(x, y, 300, 300) is None
