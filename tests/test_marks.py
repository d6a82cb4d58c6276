import gc

import pytest
from PySide6.QtCore import QSequentialAnimationGroup

from oxgame.canvas import ArcStroke, LineStroke
from oxgame.config import GRID_PEN_WIDTH, MARK_PEN_WIDTH
from oxgame.game_logic import Mark
from oxgame.marks import MarkRenderer

from conftest import advance, finish


@pytest.fixture
def renderer(canvas):
    return MarkRenderer(canvas)


def run(group):
    fired = []
    group.finished.connect(lambda: fired.append(group.currentTime()))
    group.start()
    finish(group)
    return fired


def test_cross_strokes_are_inset_diagonals(renderer, canvas):
    fired = run(renderer.draw_mark(Mark.A, 1, 2, 100))
    assert len(fired) == 1
    strokes = canvas.strokes()
    assert len(strokes) == 2
    a, b = strokes
    assert (a.x1, a.y1, a.x2, a.y2) == (220, 120, 280, 180)
    assert (b.x1, b.y1, b.x2, b.y2) == (280, 120, 220, 180)
    assert all(isinstance(s, LineStroke) and s.pen.width == MARK_PEN_WIDTH for s in strokes)


def test_cross_second_stroke_waits_for_first(renderer, canvas):
    group = renderer.draw_mark(Mark.A, 0, 0, 100)
    group.start()
    advance(group, 100)
    assert len(canvas) == 1
    advance(group, 100)
    assert len(canvas) == 2


def test_cross_takes_400ms(renderer):
    group = renderer.draw_mark(Mark.A, 0, 0, 100)
    assert group.duration() == 400
    assert run(group) == [400]


def test_circle_is_inscribed_and_solid_when_done(renderer, canvas):
    group = renderer.draw_mark(Mark.B, 1, 2, 100)
    assert group.duration() == 360
    run(group)
    (arc,) = canvas.strokes()
    assert isinstance(arc, ArcStroke)
    assert (arc.cx, arc.cy, arc.radius) == (250, 150, 30)
    assert arc.dash_pattern == ()


def test_empty_mark_cannot_be_drawn(renderer):
    with pytest.raises(ValueError):
        renderer.draw_mark(Mark.EMPTY, 0, 0, 100)


def test_grid_clears_then_draws_four_lines(renderer, canvas):
    run(renderer.draw_mark(Mark.B, 0, 0, 100))
    group = renderer.draw_grid()
    assert len(canvas) == 0
    # four 300ms lines plus the 500ms settle
    assert group.duration() == 1700

    run(group)
    lines = [(s.x1, s.y1, s.x2, s.y2) for s in canvas.strokes()]
    assert lines == [
        (100, 0, 100, 300), (200, 0, 200, 300),
        (0, 100, 300, 100), (0, 200, 300, 200),
    ]
    assert all(s.pen.width == GRID_PEN_WIDTH for s in canvas.strokes())


def test_grid_lines_run_one_at_a_time(renderer, canvas):
    group = renderer.draw_grid()
    group.start()
    advance(group, 200)
    assert len(canvas) == 1
    advance(group, 300)
    assert len(canvas) == 2


def test_unreferenced_grid_keeps_running(renderer, canvas):
    renderer.draw_grid().start()
    gc.collect()
    (group,) = canvas.findChildren(QSequentialAnimationGroup)
    finish(group)
    assert len(canvas) == 4


def test_groups_are_owned_by_the_given_owner(canvas):
    owner = type(canvas)()
    group = MarkRenderer(canvas, owner=owner).draw_mark(Mark.B, 0, 0, 100)
    assert group.parent() is owner
