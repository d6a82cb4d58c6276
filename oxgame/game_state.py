"""
Turn/board/winner bookkeeping for the Ox game, gated by animations.

The machine never draws by itself. It asks the MarkRenderer for an
animation sequence, starts it, and only writes the new board once that
sequence reports finished. Input is accepted in exactly one phase,
AWAITING_INPUT; the two historical lock flags (animating, initializing)
are read-only views of the phase.
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum
from functools import partial

from PySide6.QtCore import QObject, Signal

from .config import BOARD_SIZE, CELL_COUNT
from .game_logic import (
    EMPTY_BOARD, Mark, active_mark, cell_index, detect_winner, place_mark, row_col,
)
from .animation import dispose
from .marks import MarkRenderer

logger = logging.getLogger(__name__)


class Phase(Enum):
    INITIALIZING = "initializing"
    AWAITING_INPUT = "awaiting_input"
    ANIMATING = "animating"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class GameState:
    """
    immutable snapshot; transitions build a new one with replace()
    """
    board: tuple = EMPTY_BOARD
    turn: int = 1
    winner: Mark = None
    phase: Phase = Phase.INITIALIZING

    def __post_init__(self):
        if len(self.board) != CELL_COUNT:
            raise ValueError(f"board needs {CELL_COUNT} cells")
        if self.turn < 1:
            raise ValueError(f"turn starts at 1, got {self.turn}")
        if (self.winner is not None) != (self.phase is Phase.WON):
            raise ValueError(f"winner={self.winner} does not fit phase {self.phase.name}")
        full = self.winner is None and self.turn > CELL_COUNT
        if full != (self.phase is Phase.DRAWN):
            raise ValueError(f"turn {self.turn} does not fit phase {self.phase.name}")

    @property
    def animating(self):
        return self.phase is Phase.ANIMATING

    @property
    def initializing(self):
        return self.phase is Phase.INITIALIZING

    @property
    def game_over(self):
        return self.phase in (Phase.WON, Phase.DRAWN)

    @property
    def current_mark(self):
        return active_mark(self.turn)

    def status_text(self):
        if self.winner is not None:
            return f"Winner: Player {self.winner}"
        if self.turn > CELL_COUNT:
            return "It's a Draw!"
        if self.initializing:
            return "Preparing board..."
        return f"Turn {self.turn}: Player {self.current_mark}"


class GameStateMachine(QObject):
    """
    owns the single GameState and sequences animations around it
    """
    state_changed = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.canvas = None
        self.renderer = None
        self.state = GameState()
        self._grid_anim = None   # in-flight grid redraw
        self._move_anim = None   # in-flight mark animation

    # --- read side -----------------------------------------------------------

    @property
    def board(self):
        return self.state.board

    @property
    def turn(self):
        return self.state.turn

    @property
    def winner(self):
        return self.state.winner

    @property
    def phase(self):
        return self.state.phase

    @property
    def animating(self):
        return self.state.animating

    @property
    def initializing(self):
        return self.state.initializing

    def status_text(self):
        return self.state.status_text()

    @property
    def current_animation(self):
        # at most one of the two runs at a time
        if self._move_anim is not None:
            return self._move_anim
        return self._grid_anim

    # --- operations ----------------------------------------------------------

    def on_ready(self, canvas):
        """
        attach the drawing surface and draw the grid
        """
        if canvas is None:
            logger.debug("ready ignored: no surface")
            return
        if self.canvas is not None:
            logger.debug("ready ignored: surface already attached, use reset")
            return
        self.canvas = canvas
        self.renderer = MarkRenderer(canvas, owner=self)
        self._redraw_grid()

    def on_click(self, x, y, width, height):
        """
        try to play the active mark at pixel (x, y)
        returns True if the click started a move
        """
        s = self.state
        if s.phase is not Phase.AWAITING_INPUT:
            logger.debug("click (%s, %s) rejected: phase %s", x, y, s.phase.name)
            return False
        index = cell_index(x, y, width, height)
        if index is None:
            logger.debug("click (%s, %s) rejected: outside the board", x, y)
            return False
        if s.board[index] is not Mark.EMPTY:
            logger.debug("click rejected: cell %d holds %s", index, s.board[index])
            return False
        mark = s.current_mark
        row, col = row_col(index)
        self._set_state(replace(s, phase=Phase.ANIMATING))
        anim = self.renderer.draw_mark(mark, row, col, width / BOARD_SIZE)
        anim.finished.connect(partial(self._commit_move, index, mark))
        self._move_anim = anim
        anim.start()
        return True

    def on_reset(self):
        """
        back to an empty board, then redraw the grid like on_ready
        """
        if self.canvas is None:
            logger.debug("reset ignored: no surface")
            return
        logger.info("reset")
        self.state = GameState()
        self._redraw_grid()

    # --- transitions -------------------------------------------------------

    def _redraw_grid(self):
        # stale animations must not commit onto the fresh board
        dispose(self._move_anim)
        dispose(self._grid_anim)
        self._move_anim = None
        self._set_state(replace(self.state, phase=Phase.INITIALIZING))
        anim = self.renderer.draw_grid()
        anim.finished.connect(self._grid_ready)
        self._grid_anim = anim
        anim.start()

    def _grid_ready(self):
        dispose(self._grid_anim)
        self._grid_anim = None
        logger.info("board ready, %s to play", self.state.current_mark)
        self._set_state(replace(self.state, phase=Phase.AWAITING_INPUT))

    def _commit_move(self, index, mark):
        dispose(self._move_anim)
        self._move_anim = None
        s = self.state
        board = place_mark(s.board, index, mark)
        winner = detect_winner(board)
        turn = s.turn + 1
        if winner is not None:
            phase = Phase.WON
            logger.info("turn %d: %s takes cell %d and wins", s.turn, mark, index)
        elif turn > CELL_COUNT:
            phase = Phase.DRAWN
            logger.info("turn %d: %s takes cell %d, board full: draw", s.turn, mark, index)
        else:
            phase = Phase.AWAITING_INPUT
            logger.info("turn %d: %s takes cell %d", s.turn, mark, index)
        self._set_state(GameState(board=board, turn=turn, winner=winner, phase=phase))

    def _set_state(self, state):
        self.state = state
        self.state_changed.emit()
