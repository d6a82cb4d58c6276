from dataclasses import dataclass, field

from PySide6.QtCore import QObject, Signal

from .config import SURFACE_SIZE


@dataclass(frozen=True)
class Pen:
    color: str
    width: float


@dataclass(frozen=True)
class LineStroke:
    x1: float
    y1: float
    x2: float
    y2: float
    pen: Pen


@dataclass(frozen=True)
class ArcStroke:
    """
    full circle; an empty dash_pattern means a solid stroke
    """
    cx: float
    cy: float
    radius: float
    pen: Pen
    dash_pattern: tuple = field(default=())
    dash_offset: float = 0.0


class Canvas(QObject):
    """
    retained display list the board widget paints from
    """
    changed = Signal()

    def __init__(self, width=SURFACE_SIZE, height=SURFACE_SIZE, parent=None):
        super().__init__(parent)
        self.width = width
        self.height = height
        self._strokes = {}   # key -> stroke, insertion order = draw order

    def put(self, key, stroke):
        """
        replace the stroke stored under key (or append a new one)
        """
        self._strokes[key] = stroke
        self.changed.emit()

    def clear(self):
        # wipe the whole surface
        self._strokes.clear()
        self.changed.emit()

    def strokes(self):
        return list(self._strokes.values())

    def get(self, key):
        return self._strokes.get(key)

    def __len__(self):
        return len(self._strokes)
