import pytest

from planar_cuts import DegenerateSegmentError, Point, Segment, intersect


def seg(ident, x0, y0, x1, y1):
    return Segment(ident, Point(x0, y0), Point(x1, y1))


def test_perpendicular_crossing():
    a = seg(0, 0, 0, 4, 0)
    b = seg(1, 2, -2, 2, 2)

    crossing = intersect(a, b)

    assert crossing is not None
    assert crossing.point.x == pytest.approx(2.0)
    assert crossing.point.y == pytest.approx(0.0)
    assert crossing.t1 == pytest.approx(2.0)
    assert crossing.t2 == pytest.approx(2.0)
    assert (crossing.segment1_id, crossing.segment2_id) == (0, 1)


def test_argument_order_sets_segment_roles():
    a = seg(0, 0, 0, 4, 0)
    b = seg(1, 2, -1, 2, 3)

    crossing = intersect(b, a)

    assert (crossing.segment1_id, crossing.segment2_id) == (1, 0)
    assert crossing.t1 == pytest.approx(1.0)
    assert crossing.t2 == pytest.approx(2.0)


def test_t_values_are_distances_not_fractions():
    a = seg(0, 0, 0, 100, 0)
    b = seg(1, 25, -50, 25, 50)

    crossing = intersect(a, b)

    assert crossing.t1 == pytest.approx(25.0)
    assert crossing.t2 == pytest.approx(50.0)


def test_crossing_outside_first_segment():
    assert intersect(seg(0, 0, 0, 1, 0), seg(1, 2, -2, 2, 2)) is None


def test_crossing_outside_second_segment():
    assert intersect(seg(0, 0, 0, 4, 0), seg(1, 2, 1, 2, 3)) is None


@pytest.mark.parametrize(
    "a, b",
    [
        (seg(0, 0, 0, 1, 0), seg(1, 0, 1, 1, 1)),
        (seg(0, 0, 0, 1, 0), seg(1, 1, 1, 0, 1)),
        (seg(0, 0, 0, 1, 1), seg(1, 2, 2, 0, 0)),
        (seg(0, 0, 0, 4, 0), seg(1, 2, 0, 6, 0)),
    ],
    ids=["parallel", "anti-parallel", "colinear-diagonal", "colinear-overlap"],
)
def test_parallel_directions_have_no_intersection(a, b):
    assert intersect(a, b) is None


def test_touching_endpoint_counts():
    crossing = intersect(seg(0, 0, 0, 4, 0), seg(1, 4, -1, 4, 1))

    assert crossing is not None
    assert crossing.t1 == pytest.approx(4.0)
    assert crossing.t2 == pytest.approx(1.0)


def test_zero_length_segment_rejected():
    with pytest.raises(DegenerateSegmentError):
        intersect(seg(0, 1, 1, 1, 1), seg(1, 0, 0, 2, 2))


def test_length_and_direction_of_segment():
    segment = seg(0, 1, 1, 4, 5)

    assert segment.length == pytest.approx(5.0)
    assert segment.direction.x == pytest.approx(0.6)
    assert segment.direction.y == pytest.approx(0.8)
