"""Topological ordering of directed graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


class CycleError(ValueError):
    """Raised when a graph that must be acyclic contains a cycle."""


def _adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is out of range for {n} nodes")
        adj[u].append(v)
    return adj


def kahn_sort(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return a topological order by repeatedly removing nodes of in-degree zero."""
    adj = _adjacency(n, edges)
    indegree = [0] * n
    for targets in adj:
        for v in targets:
            indegree[v] += 1

    queue = deque(node for node, deg in enumerate(indegree) if deg == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)

    if len(order) != n:
        raise CycleError("graph contains a cycle")
    return order


def dfs_sort(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return nodes in reverse depth-first finishing order.

    This is a topological order when the graph is acyclic; cycles are not
    detected.
    """
    adj = _adjacency(n, edges)
    visited = [False] * n
    finished: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished