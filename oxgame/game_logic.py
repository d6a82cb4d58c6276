import math
from enum import Enum

from .config import BOARD_SIZE, CELL_COUNT, MARK_A_LABEL, MARK_B_LABEL


class Mark(Enum):
    """
    contents of one cell
    """
    EMPTY = ""
    A = MARK_A_LABEL
    B = MARK_B_LABEL

    def __str__(self):
        return self.value


EMPTY_BOARD = (Mark.EMPTY,) * CELL_COUNT

# every triple that wins: rows, cols, diags
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def detect_winner(board):
    """
    mark owning a full row/col/diag, or None
    """
    if len(board) != CELL_COUNT:
        raise ValueError(f"board needs {CELL_COUNT} cells, got {len(board)}")
    for a, b, c in WINNING_LINES:
        if board[a] is not Mark.EMPTY and board[a] == board[b] == board[c]:
            return board[a]
    return None


def active_mark(turn):
    """
    odd turns play A, even turns play B
    """
    if turn < 1:
        raise ValueError(f"turn starts at 1, got {turn}")
    return Mark.A if turn % 2 == 1 else Mark.B


def cell_index(x, y, width, height):
    """
    map a pixel inside the surface to a linear cell index
    returns None when the point falls outside the grid
    """
    if not all(math.isfinite(v) for v in (x, y, width, height)):
        return None
    if width <= 0 or height <= 0:
        return None
    col = int(x // (width / BOARD_SIZE))
    row = int(y // (height / BOARD_SIZE))
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        return None
    return row * BOARD_SIZE + col


def row_col(index):
    # linear index -> (row, col)
    return divmod(index, BOARD_SIZE)


def place_mark(board, index, mark):
    """
    new board with mark at index; the input board is left untouched
    """
    if not 0 <= index < CELL_COUNT:
        raise ValueError(f"cell index out of range: {index}")
    if board[index] is not Mark.EMPTY:
        raise ValueError(f"cell {index} already holds {board[index]}")
    cells = list(board)
    cells[index] = mark
    return tuple(cells)
