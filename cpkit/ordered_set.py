"""Order-statistics multiset."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from sortedcontainers import SortedList


class OrderedMultiset:
    """Sorted multiset with rank and k-th element queries."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._items = SortedList(iterable)

    def add(self, value: Any) -> None:
        """Insert value, keeping duplicates."""
        self._items.add(value)

    def find_by_order(self, k: int) -> Any:
        """Return the element at zero-based position k in sorted order."""
        if not 0 <= k < len(self._items):
            raise IndexError("order out of range")
        return self._items[k]

    def order_of_key(self, value: Any) -> int:
        """Return the number of elements strictly smaller than value."""
        return self._items.bisect_left(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items