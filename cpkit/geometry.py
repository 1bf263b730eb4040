"""Plane geometry: lines, segments, circles and polygons."""

from __future__ import annotations

import math
from collections.abc import Sequence

from cpkit.point import EPS, Point, cross, dist2, dot, rotate_ccw90, rotate_cw90


def lines_parallel(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Return whether line ab is parallel (or collinear) to line cd."""
    return abs(cross(b - a, c - d)) < EPS


def lines_collinear(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Return whether lines ab and cd are the same line."""
    return (
        lines_parallel(a, b, c, d)
        and abs(cross(a - b, a - c)) < EPS
        and abs(cross(c - d, c - a)) < EPS
    )


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Return whether segment ab intersects segment cd."""
    if lines_collinear(a, b, c, d):
        if (dist2(a, c) < EPS or dist2(a, d) < EPS
                or dist2(b, c) < EPS or dist2(b, d) < EPS):
            return True
        if dot(c - a, c - b) > 0 and dot(d - a, d - b) > 0 and dot(c - b, d - b) > 0:
            return False
        return True
    if cross(d - a, b - a) * cross(c - a, b - a) > 0:
        return False
    if cross(a - c, d - c) * cross(b - c, d - c) > 0:
        return False
    return True


def compute_line_intersection(a: Point, b: Point, c: Point, d: Point) -> Point:
    """Return the intersection of line ab with line cd, which must be unique."""
    b, d, c = b - a, c - d, c - a
    if dot(b, b) <= EPS or dot(d, d) <= EPS:
        raise ValueError("a line needs two distinct points")
    denom = cross(b, d)
    if denom == 0:
        raise ValueError("lines are parallel")
    return a + b * cross(c, d) / denom


def compute_circle_center(a: Point, b: Point, c: Point) -> Point:
    """Return the centre of the circle through a, b and c."""
    b = (a + b) / 2
    c = (a + c) / 2
    return compute_line_intersection(b, b + rotate_cw90(a - b), c, c + rotate_cw90(a - c))


def project_point_line(a: Point, b: Point, c: Point) -> Point:
    """Project c onto the line through a and b (a != b)."""
    return a + (b - a) * dot(c - a, b - a) / dot(b - a, b - a)


def project_point_segment(a: Point, b: Point, c: Point) -> Point:
    """Return the point of segment ab nearest to c."""
    r = dot(b - a, b - a)
    if abs(r) < EPS:
        return a
    r = dot(c - a, b - a) / r
    if r < 0:
        return a
    if r > 1:
        return b
    return a + (b - a) * r


def distance_point_segment(a: Point, b: Point, c: Point) -> float:
    """Return the distance from c to segment ab."""
    return math.sqrt(dist2(c, project_point_segment(a, b, c)))


def distance_point_plane(x: float, y: float, z: float,
                         a: float, b: float, c: float, d: float) -> float:
    """Return the distance from (x, y, z) to the plane ax + by + cz = d."""
    return abs(a * x + b * y + c * z - d) / math.sqrt(a * a + b * b + c * c)


def circle_line_intersection(a: Point, b: Point, c: Point, r: float) -> list[Point]:
    """Return the points where line ab meets the circle of radius r centred at c."""
    b = b - a
    a = a - c
    big_a = dot(b, b)
    if big_a == 0:
        raise ValueError("a line needs two distinct points")
    big_b = dot(a, b)
    big_c = dot(a, a) - r * r
    disc = big_b * big_b - big_a * big_c
    if disc < -EPS:
        return []
    result = [c + a + b * (-big_b + math.sqrt(disc + EPS)) / big_a]
    if disc > EPS:
        result.append(c + a + b * (-big_b - math.sqrt(disc)) / big_a)
    return result


def circle_circle_intersection(a: Point, b: Point, r: float, big_r: float) -> list[Point]:
    """Return the points where circle (a, r) meets circle (b, big_r)."""
    d = math.sqrt(dist2(a, b))
    if d > r + big_r or d + min(r, big_r) < max(r, big_r):
        return []
    if d == 0:
        raise ValueError("coincident circles meet in infinitely many points")
    x = (d * d - big_r * big_r + r * r) / (2 * d)
    y = math.sqrt(max(0.0, r * r - x * x))
    v = (b - a) / d
    result = [a + v * x + rotate_ccw90(v) * y]
    if y > 0:
        result.append(a + v * x - rotate_ccw90(v) * y)
    return result


def _edges(points: Sequence[Point]):
    return zip(points, [*points[1:], *points[:1]])


def signed_area(points: Sequence[Point]) -> float:
    """Return the signed area of a polygon; positive when counter-clockwise."""
    return sum(p.x * q.y - q.x * p.y for p, q in _edges(points)) / 2.0


def area(points: Sequence[Point]) -> float:
    """Return the area of a polygon given in clockwise or counter-clockwise order."""
    return abs(signed_area(points))


def integer_area(points: Sequence[Point]) -> int:
    """Return twice the area of a polygon with integer vertices, exactly."""
    if not points:
        raise ValueError("polygon has no vertices")
    return abs(sum(cross(p, q) for p, q in _edges(points)))


def pick_area(interior: int, boundary: int) -> float:
    """Return a lattice polygon's area from its interior and boundary point counts."""
    return interior + boundary / 2 - 1


def compute_centroid(points: Sequence[Point]) -> Point:
    """Return the centroid of a (possibly non-convex) polygon."""
    scale = 6.0 * signed_area(points)
    if scale == 0:
        raise ValueError("polygon has zero area")
    c = Point(0.0, 0.0)
    for p, q in _edges(points):
        c = c + (p + q) * (p.x * q.y - q.x * p.y)
    return c / scale


def is_simple(points: Sequence[Point]) -> bool:
    """Return whether a polygon's edges meet only at shared vertices."""
    n = len(points)
    for i in range(n):
        j = (i + 1) % n
        for k in range(i + 1, n):
            l = (k + 1) % n
            if i == l or j == k:
                continue
            if segments_intersect(points[i], points[j], points[k], points[l]):
                return False
    return True


def _on_segment(p: Point, q: Point, a: Point) -> bool:
    return abs(cross(p - a, q - a)) < EPS and dot(p - a, q - a) <= EPS


def point_in_polygon(polygon: Sequence[Point], a: Point) -> int:
    """Return -1 if a is strictly inside, 0 if on the boundary, 1 if strictly outside."""
    inside = False
    for p, q in _edges(polygon):
        if _on_segment(p, q, a):
            return 0
        if ((a.y < p.y) - (a.y < q.y)) * cross(p - a, q - a) > 0:
            inside = not inside
    return -1 if inside else 1


def point_in_convex_polygon(polygon: Sequence[Point], q: Point) -> int:
    """Like point_in_polygon for a counter-clockwise convex polygon, in O(log n)."""
    n = len(polygon)
    p0 = polygon[0] - q
    a = cross(p0, polygon[1] - q)
    b = cross(p0, polygon[n - 1] - q)
    if a < 0 or b > 0:
        return 1
    lo, hi = 1, n - 1
    while lo + 1 < hi:
        mid = (lo + hi) // 2
        if cross(p0, polygon[mid] - q) >= 0:
            lo = mid
        else:
            hi = mid
    k = cross(polygon[lo] - q, polygon[hi] - q)
    if k <= 0:
        return 1 if k < 0 else 0
    if lo == 1 and a == 0:
        return 0
    if hi == n - 1 and b == 0:
        return 0
    return -1