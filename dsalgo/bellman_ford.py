"""Single-source shortest paths with negative edge weights."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


class NegativeCycleError(ValueError):
    """Raised when a negative cycle is reachable from the source."""


def bellman_ford(n: int, edges: Iterable[Sequence[float]], source: int) -> list[float]:
    """Return distances from ``source`` over directed weighted edges (u, v, w).

    Unreachable nodes get ``math.inf``.
    """
    edge_list = [(u, v, w) for u, v, w in edges]
    for u, v, _ in edge_list:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is out of range for {n} nodes")
    if not 0 <= source < n:
        raise ValueError(f"source {source} is out of range for {n} nodes")

    dist: list[float] = [math.inf] * n
    dist[source] = 0
    for _ in range(n - 1):
        for u, v, w in edge_list:
            if dist[u] != math.inf and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w

    for u, v, w in edge_list:
        if dist[u] != math.inf and dist[u] + w < dist[v]:
            raise NegativeCycleError("graph contains a negative cycle")
    return dist