import math

from geo.models.domain import Point, Rectangle
from geo.services.geo_service import contains

RECT = Rectangle(lo=Point(37.0, -123.0), hi=Point(38.0, -122.0))


def test_point_inside_rectangle():
    assert contains(Point(37.7, -122.4), RECT)


def test_point_outside_rectangle():
    assert not contains(Point(0.0, 0.0), RECT)
    assert not contains(Point(37.5, -121.9), RECT)
    assert not contains(Point(38.1, -122.5), RECT)


def test_edges_are_inclusive():
    for point in [
        Point(37.0, -123.0),
        Point(38.0, -122.0),
        Point(37.0, -122.5),
        Point(37.5, -123.0),
    ]:
        assert contains(point, RECT)


def test_corners_in_any_order():
    swapped_lat = Rectangle(lo=Point(38.0, -123.0), hi=Point(37.0, -122.0))
    swapped_lon = Rectangle(lo=Point(37.0, -122.0), hi=Point(38.0, -123.0))
    swapped_both = Rectangle(lo=RECT.hi, hi=RECT.lo)
    points = [Point(37.7, -122.4), Point(0.0, 0.0), Point(37.0, -122.0), Point(38.5, -122.5)]
    for point in points:
        expected = contains(point, RECT)
        assert contains(point, swapped_lat) == expected
        assert contains(point, swapped_lon) == expected
        assert contains(point, swapped_both) == expected


def test_degenerate_rectangle_matches_single_point():
    rect = Rectangle(lo=Point(10.5, 20.5), hi=Point(10.5, 20.5))
    assert contains(Point(10.5, 20.5), rect)
    assert not contains(Point(10.5, 20.500001), rect)
    assert not contains(Point(10.499999, 20.5), rect)


def test_no_wraparound_at_antimeridian():
    rect = Rectangle(lo=Point(-10.0, 170.0), hi=Point(10.0, -170.0))
    assert contains(Point(0.0, 0.0), rect)
    assert not contains(Point(0.0, 179.0), rect)


def test_out_of_range_coordinates_are_accepted():
    rect = Rectangle(lo=Point(90.0, 0.0), hi=Point(120.0, 10.0))
    assert contains(Point(100.0, 5.0), rect)


def test_nan_point_never_matches():
    assert not contains(Point(math.nan, -122.4), RECT)
    assert not contains(Point(37.7, math.nan), RECT)


def test_nan_bound_matches_nothing():
    for rect in [
        Rectangle(lo=Point(math.nan, -123.0), hi=Point(38.0, -122.0)),
        Rectangle(lo=Point(37.0, -123.0), hi=Point(math.nan, -122.0)),
        Rectangle(lo=Point(37.0, -123.0), hi=Point(38.0, math.nan)),
    ]:
        assert not contains(Point(37.7, -122.4), rect)


def test_infinite_bounds():
    rect = Rectangle(lo=Point(-math.inf, -math.inf), hi=Point(math.inf, math.inf))
    assert contains(Point(1e300, -1e300), rect)
    assert contains(Point(math.inf, 0.0), rect)
