from .animation import ArcRevealAnimation, LineAnimation, sequence
from .canvas import Pen
from .config import (
    BOARD_SIZE, GRID_LINE_MS, GRID_PEN_WIDTH, MARK_A_STROKE_MS, MARK_A_TOTAL_MS,
    MARK_B_REVEAL_MS, MARK_PADDING, MARK_PEN_WIDTH, SETTLE_DELAY_MS, STROKE_COLOR,
)
from .game_logic import Mark

MARK_PEN = Pen(STROKE_COLOR, MARK_PEN_WIDTH)
GRID_PEN = Pen(STROKE_COLOR, GRID_PEN_WIDTH)


class MarkRenderer:
    """
    builds the animation groups for marks and the grid
    groups are owned by `owner` (the canvas unless given) and come back
    unstarted so the caller can hook finished first
    """

    def __init__(self, canvas, owner=None):
        self.canvas = canvas
        self.owner = owner if owner is not None else canvas

    def draw_mark(self, mark, row, col, cell_size):
        if mark is Mark.A:
            return self._cross(row, col, cell_size)
        if mark is Mark.B:
            return self._circle(row, col, cell_size)
        raise ValueError(f"cannot draw {mark!r}")

    def _cross(self, row, col, cell_size):
        # two diagonals inset by the padding, one after the other, then a hold
        x, y = col * cell_size, row * cell_size
        near, far = MARK_PADDING, cell_size - MARK_PADDING
        key = ("mark", row, col)
        steps = [
            LineAnimation(self.canvas, key + (0,), (x + near, y + near), (x + far, y + far),
                          MARK_PEN, MARK_A_STROKE_MS),
            LineAnimation(self.canvas, key + (1,), (x + far, y + near), (x + near, y + far),
                          MARK_PEN, MARK_A_STROKE_MS),
            MARK_A_TOTAL_MS - 2 * MARK_A_STROKE_MS,
        ]
        return sequence(steps, self.owner, name=f"X@{row},{col}")

    def _circle(self, row, col, cell_size):
        center = (col * cell_size + cell_size / 2, row * cell_size + cell_size / 2)
        radius = cell_size / 2 - MARK_PADDING
        reveal = ArcRevealAnimation(self.canvas, ("mark", row, col), center, radius,
                                    MARK_PEN, MARK_B_REVEAL_MS)
        return sequence([reveal], self.owner, name=f"O@{row},{col}")

    def draw_grid(self, size=None):
        """
        clear the surface, then two vertical and two horizontal lines
        followed by the settle delay
        """
        size = self.canvas.width if size is None else size
        self.canvas.clear()
        step = size / BOARD_SIZE
        segments = []
        for i in range(1, BOARD_SIZE):   # vertical
            segments.append(((step * i, 0), (step * i, size)))
        for i in range(1, BOARD_SIZE):   # horizontal
            segments.append(((0, step * i), (size, step * i)))
        steps = [LineAnimation(self.canvas, ("grid", n), a, b, GRID_PEN, GRID_LINE_MS)
                 for n, (a, b) in enumerate(segments)]
        steps.append(SETTLE_DELAY_MS)
        return sequence(steps, self.owner, name="grid")
