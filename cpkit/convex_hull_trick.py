"""Dynamic convex hull trick: lines added in any order, max or min queries."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass

from sortedcontainers import SortedKeyList


@dataclass
class _Line:
    a: int
    b: int
    x_left: float = -math.inf

    def value_at(self, x: int) -> int:
        return self.a * x + self.b


def _intersect_x(l1: _Line, l2: _Line) -> float:
    if l1.a == l2.a:
        return math.inf
    return (l2.b - l1.b) / (l1.a - l2.a)


def _irrelevant(l1: _Line, l2: _Line, l3: _Line) -> bool:
    return _intersect_x(l1, l3) <= _intersect_x(l1, l2)


class ConvexHullDynamic:
    """Envelope of lines y = a*x + b answering best-value queries."""

    def __init__(self, is_max: bool) -> None:
        self.is_max = is_max
        self._hull: SortedKeyList = SortedKeyList(key=lambda line: line.a)

    def __len__(self) -> int:
        return len(self._hull)

    def _is_irrelevant(self, i: int) -> bool:
        hull = self._hull
        if i == 0 or i == len(hull) - 1:
            return False
        if self.is_max:
            return _irrelevant(hull[i - 1], hull[i], hull[i + 1])
        return _irrelevant(hull[i + 1], hull[i], hull[i - 1])

    def _update_left_border(self, i: int) -> None:
        hull = self._hull
        if self.is_max and i == 0 or not self.is_max and i == len(hull) - 1:
            return
        other = hull[i - 1] if self.is_max else hull[i + 1]
        hull[i].x_left = _intersect_x(hull[i], other)

    def add_line(self, a: int, b: int) -> None:
        """Add the line y = a*x + b."""
        hull = self._hull
        i = hull.bisect_key_left(a)
        if i < len(hull) and hull[i].a == a:
            if self.is_max and hull[i].b < b or not self.is_max and hull[i].b > b:
                del hull[i]
            else:
                return
        hull.add(_Line(a, b))
        i = hull.bisect_key_left(a)
        if self._is_irrelevant(i):
            del hull[i]
            return
        while i > 0 and self._is_irrelevant(i - 1):
            del hull[i - 1]
            i -= 1
        while i < len(hull) - 1 and self._is_irrelevant(i + 1):
            del hull[i + 1]
        self._update_left_border(i)
        if i > 0:
            self._update_left_border(i - 1)
        if i < len(hull) - 1:
            self._update_left_border(i + 1)

    def get_best(self, x: int) -> int:
        """Return the max (or min) of a*x + b over all added lines."""
        hull = self._hull
        if not hull:
            raise ValueError("no lines have been added")
        if self.is_max:
            i = bisect.bisect_left(hull, x, key=lambda line: line.x_left) - 1
        else:
            i = bisect.bisect_left(hull, -x, key=lambda line: -line.x_left)
        return hull[i].value_at(x)