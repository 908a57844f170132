import logging

import pytest

from planar_cuts import Arrangement, DragSession, DragStateError, GraphEdge, Point


def _drag(session, start, end, **kwargs):
    session.begin_drag(Point(*start))
    return session.end_drag(Point(*end), **kwargs)


def test_drag_inserts_segment():
    session = DragSession()

    result = _drag(session, (0, 0), (10, 0))

    assert result.segment.id == 0
    assert not session.dragging
    assert len(session.arrangement.segments) == 1


def test_session_uses_supplied_arrangement():
    arr = Arrangement()
    session = DragSession(arr)
    _drag(session, (0, 0), (10, 0))

    assert session.arrangement is arr
    assert len(arr) == 1


def test_end_without_begin_raises():
    with pytest.raises(DragStateError):
        DragSession().end_drag(Point(1, 1))


def test_click_without_movement_is_ignored(caplog):
    session = DragSession()

    with caplog.at_level(logging.INFO, logger="planar_cuts.session"):
        assert _drag(session, (3, 3), (3, 3)) is None

    assert session.arrangement.segments == ()
    assert not session.dragging
    assert "Ignoring drag" in caplog.text


def test_snap_modifier():
    session = DragSession()

    result = _drag(session, (0, 0), (1, 100), snap=True)
    plain = _drag(session, (20, 0), (21, 100))

    assert result.segment.end.x == 0.0
    assert plain.segment.end == Point(21, 100)


def test_cancel_and_preview():
    session = DragSession()
    assert session.preview(Point(1, 1)) is None

    session.begin_drag(Point(0, 0))
    assert session.dragging
    assert session.preview(Point(4, 5)) == (Point(0, 0), Point(4, 5))

    session.cancel_drag()
    assert not session.dragging
    with pytest.raises(DragStateError):
        session.end_drag(Point(1, 1))


def test_frame_without_debug_has_only_cuts():
    session = DragSession()
    _drag(session, (0, 0), (10, 0))
    _drag(session, (2, -1), (2, 1))
    _drag(session, (6, -1), (6, 1))

    frame = session.frame()

    assert len(frame.cuts) == 3
    assert frame.markers == ()
    assert frame.edge_lines == ()
    assert frame.preview is None


def test_frame_with_debug_overlays():
    session = DragSession(debug=True)
    _drag(session, (0, 0), (10, 0))
    _drag(session, (2, -1), (2, 1))
    _drag(session, (6, -1), (6, 1))
    session.begin_drag(Point(7, 7))

    frame = session.frame(cursor=Point(8, 8))

    assert frame.markers == (Point(2, 0), Point(6, 0))
    assert frame.edge_lines == ((Point(2, 0), Point(6, 0)),)
    assert frame.preview == (Point(7, 7), Point(8, 8))


def test_debug_flag_does_not_change_state():
    plain = DragSession()
    debug = DragSession(debug=True)
    for session in (plain, debug):
        _drag(session, (0, 0), (10, 0))
        _drag(session, (2, -1), (2, 1))
        _drag(session, (6, -1), (6, 1))
        session.frame()

    assert plain.arrangement.state() == debug.arrangement.state()
    assert debug.arrangement.graph == (GraphEdge(0, 1),)
