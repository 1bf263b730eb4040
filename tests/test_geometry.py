import math

import pytest

from cpkit.geometry import (
    area,
    circle_circle_intersection,
    circle_line_intersection,
    compute_centroid,
    compute_circle_center,
    compute_line_intersection,
    distance_point_plane,
    distance_point_segment,
    integer_area,
    is_simple,
    lines_collinear,
    lines_parallel,
    pick_area,
    point_in_convex_polygon,
    point_in_polygon,
    project_point_line,
    project_point_segment,
    segments_intersect,
    signed_area,
)
from cpkit.point import Point, cross, dot

SQUARE = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]


def _close(p, q, tol=1e-9):
    return math.isclose(p.x, q.x, abs_tol=tol) and math.isclose(p.y, q.y, abs_tol=tol)


def test_signed_area_orientation():
    assert signed_area(SQUARE) > 0
    assert signed_area(SQUARE[::-1]) == -signed_area(SQUARE)
    assert area(SQUARE[::-1]) == area(SQUARE)


def test_integer_area_is_twice_area():
    assert integer_area(SQUARE) == 2 * area(SQUARE)
    assert integer_area(SQUARE[::-1]) == integer_area(SQUARE)


def test_integer_area_empty():
    with pytest.raises(ValueError):
        integer_area([])


def test_pick_matches_area():
    # the 2x2 square has one interior lattice point and eight on its boundary
    assert pick_area(1, 8) == area(SQUARE)


def test_centroid_of_triangle_is_vertex_mean():
    a, b, c = Point(0.0, 0.0), Point(6.0, 1.0), Point(2.0, 5.0)
    centroid = compute_centroid([a, b, c])
    assert centroid.x == pytest.approx(8.0 / 3.0)
    assert centroid.y == pytest.approx(2.0)


def test_centroid_translates():
    shift = Point(10.0, -4.0)
    moved = [p + shift for p in SQUARE]
    centroid = compute_centroid(moved)
    assert centroid.x == pytest.approx(11.0)
    assert centroid.y == pytest.approx(-3.0)


def test_centroid_zero_area():
    with pytest.raises(ValueError):
        compute_centroid([Point(0, 0), Point(1, 1), Point(2, 2)])


def test_line_intersection_lies_on_both_lines():
    a, b, c, d = Point(0.0, 0.0), Point(4.0, 2.0), Point(0.0, 3.0), Point(3.0, -1.0)
    p = compute_line_intersection(a, b, c, d)
    assert cross(b - a, p - a) == pytest.approx(0.0, abs=1e-9)
    assert cross(d - c, p - c) == pytest.approx(0.0, abs=1e-9)


def test_line_intersection_errors():
    with pytest.raises(ValueError):
        compute_line_intersection(Point(0, 0), Point(0, 0), Point(1, 0), Point(1, 1))
    with pytest.raises(ValueError):
        compute_line_intersection(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))


def test_circle_center_equidistant():
    a, b, c = Point(1.0, 0.0), Point(5.0, 2.0), Point(-1.0, 4.0)
    o = compute_circle_center(a, b, c)
    ra = abs(a - o)
    assert abs(b - o) == pytest.approx(ra)
    assert abs(c - o) == pytest.approx(ra)


def test_circle_circle_two_points():
    a, b = Point(0.0, 0.0), Point(3.0, 0.0)
    pts = circle_circle_intersection(a, b, 2.0, 2.0)
    assert len(pts) == 2
    for p in pts:
        assert abs(p - a) == pytest.approx(2.0)
        assert abs(p - b) == pytest.approx(2.0)


def test_circle_circle_tangent_and_disjoint():
    a = Point(0.0, 0.0)
    assert len(circle_circle_intersection(a, Point(4.0, 0.0), 2.0, 2.0)) == 1
    assert circle_circle_intersection(a, Point(10.0, 0.0), 2.0, 2.0) == []
    assert circle_circle_intersection(a, Point(0.5, 0.0), 5.0, 1.0) == []


def test_circle_circle_coincident():
    with pytest.raises(ValueError):
        circle_circle_intersection(Point(1, 1), Point(1, 1), 2.0, 2.0)


def test_circle_line_two_points():
    c = Point(0.0, 0.0)
    pts = circle_line_intersection(Point(-5.0, 1.0), Point(5.0, 1.0), c, 2.0)
    assert len(pts) == 2
    for p in pts:
        assert abs(p - c) == pytest.approx(2.0)
        assert p.y == pytest.approx(1.0)


def test_circle_line_tangent_and_miss():
    c = Point(0.0, 0.0)
    assert len(circle_line_intersection(Point(-5.0, 2.0), Point(5.0, 2.0), c, 2.0)) == 1
    assert circle_line_intersection(Point(-5.0, 3.0), Point(5.0, 3.0), c, 2.0) == []


def test_distance_point_plane():
    assert distance_point_plane(3, 0, 0, 1, 2, 2, 3) == pytest.approx(0.0)
    # (5, 4, 4) is (3, 0, 0) moved 6 along the unit normal (1, 2, 2) / 3
    assert distance_point_plane(5, 4, 4, 1, 2, 2, 3) == pytest.approx(6.0)


def test_project_point_line_is_perpendicular():
    a, b, c = Point(0.0, 0.0), Point(3.0, 1.0), Point(1.0, 4.0)
    p = project_point_line(a, b, c)
    assert dot(c - p, b - a) == pytest.approx(0.0, abs=1e-9)
    assert cross(b - a, p - a) == pytest.approx(0.0, abs=1e-9)


def test_project_point_segment_clamps():
    a, b = Point(0.0, 0.0), Point(4.0, 0.0)
    assert project_point_segment(a, b, Point(-3.0, 2.0)) == a
    assert project_point_segment(a, b, Point(9.0, -1.0)) == b
    assert project_point_segment(a, a, Point(9.0, -1.0)) == a
    mid = Point(1.5, 7.0)
    assert _close(project_point_segment(a, b, mid), project_point_line(a, b, mid))


def test_distance_point_segment():
    a, b = Point(0.0, 0.0), Point(4.0, 0.0)
    far = Point(7.0, 4.0)
    assert distance_point_segment(a, b, far) == pytest.approx(abs(far - b))
    assert distance_point_segment(a, b, Point(2.0, -3.0)) == pytest.approx(3.0)


def test_lines_parallel_and_collinear():
    a, b = Point(0, 0), Point(1, 1)
    assert lines_parallel(a, b, Point(0, 1), Point(2, 3))
    assert not lines_collinear(a, b, Point(0, 1), Point(2, 3))
    assert lines_collinear(a, b, Point(3, 3), Point(5, 5))
    assert not lines_parallel(a, b, Point(0, 1), Point(1, 0))


@pytest.mark.parametrize(
    "seg1, seg2, expected",
    [
        ((Point(0, 0), Point(2, 2)), (Point(0, 2), Point(2, 0)), True),
        ((Point(0, 0), Point(2, 0)), (Point(0, 1), Point(2, 1)), False),
        ((Point(0, 0), Point(2, 0)), (Point(1, 0), Point(3, 0)), True),
        ((Point(0, 0), Point(1, 0)), (Point(2, 0), Point(3, 0)), False),
        ((Point(0, 0), Point(1, 1)), (Point(1, 1), Point(2, 0)), True),
        ((Point(0, 0), Point(1, 0)), (Point(2, -1), Point(2, 1)), False),
    ],
)
def test_segments_intersect(seg1, seg2, expected):
    assert segments_intersect(*seg1, *seg2) is expected
    assert segments_intersect(*seg2, *seg1) is expected


def test_is_simple():
    assert is_simple(SQUARE)
    bowtie = [Point(0, 0), Point(2, 2), Point(2, 0), Point(0, 2)]
    assert not is_simple(bowtie)


def test_point_in_polygon_cases():
    assert point_in_polygon(SQUARE, Point(1, 1)) == -1
    assert point_in_polygon(SQUARE, Point(1, 0)) == 0
    assert point_in_polygon(SQUARE, Point(2, 2)) == 0
    assert point_in_polygon(SQUARE, Point(3, 1)) == 1


def test_point_in_nonconvex_polygon():
    notch = [Point(0, 0), Point(4, 0), Point(4, 4), Point(2, 1), Point(0, 4)]
    assert point_in_polygon(notch, Point(2, 3)) == 1
    assert point_in_polygon(notch, Point(1, 1)) == -1


def test_convex_agrees_with_general():
    grid = [Point(x / 2, y / 2) for x in range(-2, 7) for y in range(-2, 7)]
    for q in grid:
        assert point_in_convex_polygon(SQUARE, q) == point_in_polygon(SQUARE, q)