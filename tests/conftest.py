import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from PySide6.QtCore import QCoreApplication, QEvent

from oxgame.canvas import Canvas


# animations are driven by hand through setCurrentTime(); no event loop
# runs, so nothing advances behind the tests' back

def advance(anim, ms):
    """move a running animation ms forward on its own clock"""
    anim.setCurrentTime(min(anim.currentTime() + ms, anim.totalDuration()))


def finish(anim):
    anim.setCurrentTime(anim.totalDuration())


def flush_deletes():
    """run pending deleteLater() calls"""
    QCoreApplication.sendPostedEvents(None, QEvent.DeferredDelete)


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def canvas():
    return Canvas()
