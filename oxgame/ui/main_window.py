from ..canvas import Canvas
from ..config import WINDOW_TITLE
from ..game_state import GameStateMachine
from .board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPushButton, QLabel, QSizePolicy
)
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt, QTimer, Slot


class OxGameWindow(QMainWindow):
    """
    heading, status line, board and reset button around the game core
    """
    def __init__(self):
        """
        build the core objects, then the widgets on top of them
        """
        super().__init__()
        self.canvas = Canvas(parent=self)
        self.game = GameStateMachine(parent=self)
        self.board_widget = BoardWidget(self.canvas, parent=self)
        self._started = False

        self._setup_ui()
        self.game.state_changed.connect(self._refresh_status)
        self.board_widget.clicked.connect(self._on_board_clicked)
        self._refresh_status()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        layout = QVBoxLayout(self.central_widget)
        layout.setAlignment(Qt.AlignHCenter)

        title = QLabel(WINDOW_TITLE)
        f = QFont(); f.setPointSize(20); f.setBold(True); title.setFont(f)
        title.setAlignment(Qt.AlignCenter)
        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)

        self.reset_button = QPushButton("Reset")
        self.reset_button.clicked.connect(self.game.on_reset)

        layout.addWidget(title)
        layout.addWidget(self.status_label)
        layout.addWidget(self.board_widget, 0, Qt.AlignHCenter)
        layout.addSpacing(10)
        layout.addWidget(self.reset_button, 0, Qt.AlignHCenter)

    def showEvent(self, event):
        # surface exists once shown: draw the grid on the first show only
        super().showEvent(event)
        if not self._started:
            self._started = True
            QTimer.singleShot(0, lambda: self.game.on_ready(self.canvas))

    @Slot(float, float, int, int)
    def _on_board_clicked(self, x, y, w, h):
        self.game.on_click(x, y, w, h)

    @Slot()
    def _refresh_status(self):
        self.status_label.setText(self.game.status_text())
