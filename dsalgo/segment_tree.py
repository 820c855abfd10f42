"""Segment trees for range-minimum and lazily updated range-sum queries."""

from __future__ import annotations

import math
from collections.abc import Iterable


class MinSegmentTree:
    """Range-minimum queries with point assignment.

    Query ranges are inclusive; a range that misses every index yields ``math.inf``.
    """

    def __init__(self, values: Iterable[float]) -> None:
        items = list(values)
        self._size = len(items)
        self._tree: list[float] = [math.inf] * (4 * self._size + 1)
        if items:
            self._build(0, 0, self._size - 1, items)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, low: int, high: int, items: list[float]) -> None:
        if low == high:
            self._tree[node] = items[low]
            return
        mid = (low + high) // 2
        self._build(2 * node + 1, low, mid, items)
        self._build(2 * node + 2, mid + 1, high, items)
        self._tree[node] = min(self._tree[2 * node + 1], self._tree[2 * node + 2])

    def query(self, left: int, right: int) -> float:
        """Return the minimum over indices ``left..right`` inclusive."""
        if not self._size:
            return math.inf
        return self._query(0, 0, self._size - 1, left, right)

    def _query(self, node: int, low: int, high: int, left: int, right: int) -> float:
        if right < low or left > high:
            return math.inf
        if left <= low and high <= right:
            return self._tree[node]
        mid = (low + high) // 2
        return min(
            self._query(2 * node + 1, low, mid, left, right),
            self._query(2 * node + 2, mid + 1, high, left, right),
        )

    def update(self, index: int, value: float) -> None:
        """Set the element at ``index`` to ``value``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is out of range")
        self._update(0, 0, self._size - 1, index, value)

    def _update(self, node: int, low: int, high: int, index: int, value: float) -> None:
        if low == high:
            self._tree[node] = value
            return
        mid = (low + high) // 2
        if index <= mid:
            self._update(2 * node + 1, low, mid, index, value)
        else:
            self._update(2 * node + 2, mid + 1, high, index, value)
        self._tree[node] = min(self._tree[2 * node + 1], self._tree[2 * node + 2])


class SumSegmentTree:
    """Range-sum queries with lazily propagated range additions.

    Ranges are inclusive; a range that misses every index sums to 0.
    """

    def __init__(self, values: Iterable[float]) -> None:
        items = list(values)
        self._size = len(items)
        self._tree: list[float] = [0] * (4 * self._size)
        self._lazy: list[float] = [0] * (4 * self._size)
        if items:
            self._build(0, 0, self._size - 1, items)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, low: int, high: int, items: list[float]) -> None:
        if low == high:
            self._tree[node] = items[low]
            return
        mid = (low + high) // 2
        self._build(2 * node + 1, low, mid, items)
        self._build(2 * node + 2, mid + 1, high, items)
        self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]

    def _settle(self, node: int, low: int, high: int) -> None:
        pending = self._lazy[node]
        if not pending:
            return
        self._tree[node] += (high - low + 1) * pending
        if low != high:
            self._lazy[2 * node + 1] += pending
            self._lazy[2 * node + 2] += pending
        self._lazy[node] = 0

    def add(self, left: int, right: int, value: float) -> None:
        """Add ``value`` to every element in ``left..right`` inclusive."""
        if self._size:
            self._add(0, 0, self._size - 1, left, right, value)

    def _add(self, node: int, low: int, high: int, left: int, right: int, value: float) -> None:
        self._settle(node, low, high)
        if high < left or right < low:
            return
        if left <= low and high <= right:
            self._tree[node] += (high - low + 1) * value
            if low != high:
                self._lazy[2 * node + 1] += value
                self._lazy[2 * node + 2] += value
            return
        mid = (low + high) // 2
        self._add(2 * node + 1, low, mid, left, right, value)
        self._add(2 * node + 2, mid + 1, high, left, right, value)
        self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]

    def query(self, left: int, right: int) -> float:
        """Return the sum over indices ``left..right`` inclusive."""
        if not self._size:
            return 0
        return self._query(0, 0, self._size - 1, left, right)

    def _query(self, node: int, low: int, high: int, left: int, right: int) -> float:
        self._settle(node, low, high)
        if high < left or right < low:
            return 0
        if left <= low and high <= right:
            return self._tree[node]
        mid = (low + high) // 2
        return self._query(2 * node + 1, low, mid, left, right) + self._query(
            2 * node + 2, mid + 1, high, left, right
        )