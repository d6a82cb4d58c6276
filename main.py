import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from oxgame.ui.main_window import OxGameWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white

DISABLED_BUTTON_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme around the (white) board.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_BUTTON_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv):
    # unknown args are left for qt
    p = argparse.ArgumentParser(prog="oxgame", description="Animated Ox game")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return p.parse_known_args(argv)


def main(argv=None):
    argv = sys.argv if argv is None else argv
    args, qt_args = parse_args(argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(argv[:1] + qt_args)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = OxGameWindow()
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
