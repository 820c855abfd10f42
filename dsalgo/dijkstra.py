"""Single-source shortest paths on undirected graphs with non-negative weights."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence


def shortest_distances(n: int, edges: Iterable[Sequence[float]], source: int) -> list[float]:
    """Return distances from ``source`` over undirected weighted edges (u, v, w).

    Unreachable nodes get ``math.inf``.
    """
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is out of range for {n} nodes")
        adj[u].append((v, w))
        adj[v].append((u, w))
    if not 0 <= source < n:
        raise ValueError(f"source {source} is out of range for {n} nodes")

    dist: list[float] = [math.inf] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for nxt, w in adj[node]:
            candidate = d + w
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return dist


def max_distance(n: int, edges: Iterable[Sequence[float]], source: int) -> float:
    """Return the largest shortest-path distance from ``source``."""
    return max(shortest_distances(n, edges, source))