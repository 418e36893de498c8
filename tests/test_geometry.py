import math

import pytest

from quadtree import Point, Rectangle, contains, intersects


def test_corners_are_normalized():
    rect = Rectangle(10, 20, 0, 5)
    assert (rect.x1, rect.y1, rect.x2, rect.y2) == (0, 5, 10, 20)
    assert rect.width == 10
    assert rect.height == 15
    assert rect.center == (5, 12.5)


def test_nan_corner_is_rejected():
    with pytest.raises(ValueError):
        Rectangle(0, math.nan, 10, 10)


def test_closed_rectangle_includes_every_edge():
    rect = Rectangle(0, 0, 10, 10)
    for p in [Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0), Point(5, 5)]:
        assert contains(rect, p)


def test_open_max_edges_are_excluded():
    rect = Rectangle(0, 0, 10, 10, closed_x=False, closed_y=False)
    assert rect.contains(Point(0, 0))
    assert rect.contains(Point(9.999, 9.999))
    assert not rect.contains(Point(10, 5))
    assert not rect.contains(Point(5, 10))


def test_mixed_closure():
    rect = Rectangle(0, 0, 10, 10, closed_x=True, closed_y=False)
    assert rect.contains(Point(10, 5))
    assert not rect.contains(Point(5, 10))


def test_points_outside_or_not_finite_are_not_contained():
    rect = Rectangle(0, 0, 10, 10)
    assert not rect.contains(Point(-0.001, 5))
    assert not rect.contains(Point(5, 10.001))
    assert not rect.contains(Point(math.nan, 5))
    assert not rect.contains(Point(math.inf, 5))


def test_intersects_overlapping_and_disjoint():
    a = Rectangle(0, 0, 10, 10)
    assert intersects(a, Rectangle(5, 5, 15, 15))
    assert intersects(a, Rectangle(-5, -5, 20, 20))
    assert intersects(a, Rectangle(2, 2, 3, 3))
    assert not intersects(a, Rectangle(11, 0, 20, 10))
    assert not intersects(a, Rectangle(0, 11, 10, 20))
    assert not intersects(a, Rectangle(-10, -10, -1, -1))


def test_touching_edges_count_as_intersecting():
    a = Rectangle(0, 0, 10, 10)
    assert a.intersects(Rectangle(10, 0, 20, 10))
    assert a.intersects(Rectangle(10, 10, 20, 20))


def test_infinite_window_intersects_everything():
    everything = Rectangle(-math.inf, -math.inf, math.inf, math.inf)
    assert everything.intersects(Rectangle(0, 0, 1, 1))
    assert everything.contains(Point(1e300, -1e300))
    assert not everything.is_finite()


def test_equality_includes_closure():
    assert Rectangle(0, 0, 1, 1) == Rectangle(1, 1, 0, 0)
    assert Rectangle(0, 0, 1, 1) != Rectangle(0, 0, 1, 1, closed_x=False)
    assert len({Rectangle(0, 0, 1, 1), Rectangle(1, 1, 0, 0)}) == 1


def test_repr_shows_open_edges():
    assert repr(Rectangle(0, 0, 1, 2, closed_x=False)) == "Rectangle([0, 1) x [0, 2])"
