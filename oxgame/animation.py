"""
time-driven stroke animations on top of Qt's animation framework

every stroke is a QVariantAnimation running 0 -> 1 over its duration;
each valueChanged redraws the primitive at that progress. strokes and
pauses are chained with QSequentialAnimationGroup, whose finished signal
is the completion signal the game waits on.
"""
import logging
import math

from PySide6.QtCore import QPauseAnimation, QSequentialAnimationGroup, QVariantAnimation

from .canvas import ArcStroke, LineStroke

logger = logging.getLogger(__name__)


def interpolate(a, b, t):
    # linear blend, t in [0, 1]
    return a + (b - a) * t


class StrokeAnimation(QVariantAnimation):
    """
    progress animation; subclasses override draw(progress)
    """

    def __init__(self, duration_ms, parent=None):
        super().__init__(parent)
        self.setStartValue(0.0)
        self.setEndValue(1.0)
        self.setDuration(max(0, int(duration_ms)))
        # connect last: setting the key values may already emit
        self.valueChanged.connect(self._on_value)

    def _on_value(self, value):
        self.draw(min(max(float(value), 0.0), 1.0))

    def draw(self, progress):
        """override hook: paint the primitive at progress in [0, 1]"""


class LineAnimation(StrokeAnimation):
    """
    straight segment growing from start towards end
    """

    def __init__(self, canvas, key, start, end, pen, duration_ms, parent=None):
        super().__init__(duration_ms, parent)
        self.canvas = canvas
        self.key = key
        self.start_point = start
        self.end_point = end
        self.pen = pen

    def draw(self, progress):
        (ax, ay), (bx, by) = self.start_point, self.end_point
        self.canvas.put(self.key, LineStroke(
            ax, ay, interpolate(ax, bx, progress), interpolate(ay, by, progress), self.pen))


class ArcRevealAnimation(StrokeAnimation):
    """
    full circle revealed by shrinking the dash offset of a single
    circumference-long dash; left solid once fully drawn
    """

    def __init__(self, canvas, key, center, radius, pen, duration_ms, parent=None):
        super().__init__(duration_ms, parent)
        self.canvas = canvas
        self.key = key
        self.center = center
        self.radius = radius
        self.pen = pen
        self.circumference = 2 * math.pi * radius

    def draw(self, progress):
        cx, cy = self.center
        if progress >= 1.0:
            self.canvas.put(self.key, ArcStroke(cx, cy, self.radius, self.pen))
            return
        c = self.circumference
        self.canvas.put(self.key, ArcStroke(
            cx, cy, self.radius, self.pen, dash_pattern=(c,), dash_offset=c * (1 - progress)))


def sequence(steps, parent, name="sequence"):
    """
    chain steps so each starts when the previous one ends
    ints in steps become pauses of that many ms
    """
    group = QSequentialAnimationGroup(parent)
    group.setObjectName(name)
    for step in steps:
        if isinstance(step, int):
            step = QPauseAnimation(step)
        step.setParent(group)  # group owns its steps
        group.addAnimation(step)
    logger.debug("sequence %s: %d steps, %d ms", name, group.animationCount(), group.duration())
    return group


def dispose(group):
    """
    stop a group without firing its completion and schedule its deletion
    """
    if group is None:
        return
    try:
        group.finished.disconnect()
    except (RuntimeError, TypeError):
        pass
    group.stop()
    group.deleteLater()
