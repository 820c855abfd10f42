"""Minimum spanning trees: Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


class DisjointSet:
    """Union-find over the elements 0..n-1 with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is out of range")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets holding ``x`` and ``y``; return False if already joined."""
        px, py = self.find(x), self.find(y)
        if px == py:
            return False
        if self._rank[px] < self._rank[py]:
            self._parent[px] = py
        elif self._rank[px] > self._rank[py]:
            self._parent[py] = px
        else:
            self._parent[px] = py
            self._rank[py] += 1
        return True


def kruskal(n: int, edges: Iterable[Sequence[float]]) -> float:
    """Return the total weight of a minimum spanning forest.

    ``edges`` holds undirected weighted edges ``(u, v, w)`` on nodes 0..n-1.
    """
    edge_list = []
    for u, v, w in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is out of range for {n} nodes")
        edge_list.append((w, u, v))
    edge_list.sort()

    components = DisjointSet(n)
    return sum(w for w, u, v in edge_list if components.union(u, v))


def prim(adjacency: Sequence[Iterable[tuple[int, float]]], source: int) -> float:
    """Return the weight of a minimum spanning tree of the component of ``source``.

    ``adjacency[u]`` lists ``(v, w)`` pairs for every edge at ``u``.
    """
    n = len(adjacency)
    if not 0 <= source < n:
        raise ValueError(f"source {source} is out of range for {n} nodes")

    visited = [False] * n
    total: float = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for nxt, nxt_weight in adjacency[node]:
            if not 0 <= nxt < n:
                raise ValueError(f"edge ({node}, {nxt}) is out of range for {n} nodes")
            if not visited[nxt]:
                heapq.heappush(heap, (nxt_weight, nxt))
    return total