"""Articulation points (cut vertices) of an undirected graph."""

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


def articulation_points(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return the sorted cut vertices of an undirected graph on nodes 0..n-1."""
    adj = _adjacency(n, edges)
    disc = [-1] * n
    low = [0] * n
    cut: set[int] = set()
    clock = 0

    for root in range(n):
        if disc[root] != -1:
            continue
        disc[root] = low[root] = clock
        clock += 1
        root_children = 0
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt == parent:
                    continue
                if disc[nxt] == -1:
                    disc[nxt] = low[nxt] = clock
                    clock += 1
                    if node == root:
                        root_children += 1
                    stack.append((nxt, node, iter(adj[nxt])))
                    break
                low[node] = min(low[node], disc[nxt])
            else:
                stack.pop()
                if stack:
                    up = stack[-1][0]
                    low[up] = min(low[up], low[node])
                    if up != root and disc[up] <= low[node]:
                        cut.add(up)
        if root_children > 1:
            cut.add(root)

    return sorted(cut)