from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QLineF
from PySide6.QtGui import QPainter, QColor, QPen

from ..canvas import ArcStroke, LineStroke

BACKGROUND_COLOR = QColor("white")
BORDER_COLOR = QColor("black")


class BoardWidget(QWidget):
    """
    fixed-size surface that paints the canvas display list and
    forwards raw click coordinates
    """
    clicked = Signal(float, float, int, int)  # x, y, width, height

    def __init__(self, canvas, parent=None):
        super().__init__(parent)
        self.canvas = canvas
        self.setFixedSize(QSize(canvas.width, canvas.height))
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.setCursor(Qt.PointingHandCursor)
        canvas.changed.connect(self.update)  # repaint on every stroke

    def paintEvent(self, event):
        """
        replay every stroke in draw order
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            for stroke in self.canvas.strokes():
                if isinstance(stroke, LineStroke):
                    painter.setPen(self._pen(stroke.pen))
                    painter.drawLine(QLineF(stroke.x1, stroke.y1, stroke.x2, stroke.y2))
                elif isinstance(stroke, ArcStroke):
                    painter.setPen(self._arc_pen(stroke))
                    painter.setBrush(Qt.NoBrush)
                    painter.drawEllipse(QPointF(stroke.cx, stroke.cy), stroke.radius, stroke.radius)
            # 1px border like the html canvas
            painter.setPen(QPen(BORDER_COLOR, 1))
            painter.drawRect(self.rect().adjusted(0, 0, -1, -1))
        finally:
            painter.end()

    @staticmethod
    def _pen(pen):
        qpen = QPen(QColor(pen.color), pen.width)
        qpen.setCapStyle(Qt.FlatCap)
        return qpen

    def _arc_pen(self, stroke):
        qpen = self._pen(stroke.pen)
        if stroke.dash_pattern:
            # qt dashes are measured in pen widths, not pixels
            w = stroke.pen.width or 1
            dash = [d / w for d in stroke.dash_pattern]
            if len(dash) % 2:
                dash = dash * 2  # qt wants dash/gap pairs
            qpen.setDashPattern(dash)
            qpen.setDashOffset(stroke.dash_offset / w)
        return qpen

    def mouseReleaseEvent(self, event):
        """
        forward widget-relative click, the game decides what it means
        """
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        self.clicked.emit(pos.x(), pos.y(), self.width(), self.height())
