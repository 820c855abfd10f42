"""Bridges (critical connections) of an undirected graph."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is out of range for {n} nodes")
        adj[u].append(v)
        adj[v].append(u)
    return adj


def critical_connections(n: int, edges: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Return the bridges reachable from node 0 as (parent, child) pairs.

    Only the component containing node 0 is searched. Bridges are listed in
    the order their depth-first search subtrees finish.
    """
    adj = _adjacency(n, edges)
    if n == 0:
        return []
    depth = [0] * n  # 0 marks an unvisited node; the root has depth 1
    low = [0] * n
    bridges: list[tuple[int, int]] = []

    depth[0] = low[0] = 1
    stack = [(0, -1, iter(adj[0]))]
    while stack:
        node, parent, neighbours = stack[-1]
        for nxt in neighbours:
            if nxt == parent:
                continue
            if not depth[nxt]:
                depth[nxt] = low[nxt] = depth[node] + 1
                stack.append((nxt, node, iter(adj[nxt])))
                break
            low[node] = min(low[node], low[nxt])
        else:
            stack.pop()
            if stack:
                up = stack[-1][0]
                low[up] = min(low[up], low[node])
                if depth[up] < low[node]:
                    bridges.append((up, node))
    return bridges