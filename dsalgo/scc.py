"""Strongly connected components of a directed graph (Kosaraju)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def strongly_connected_components(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the strongly connected components of a directed graph.

    Components come in topological order of the condensed graph; nodes in a
    component are listed in depth-first order over reversed edges.
    """
    adj: list[list[int]] = [[] for _ in range(n)]
    reverse: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is out of range for {n} nodes")
        adj[u].append(v)
        reverse[v].append(u)

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

    assigned = [False] * n
    components: list[list[int]] = []
    for start in reversed(finished):
        if assigned[start]:
            continue
        assigned[start] = True
        component = [start]
        stack = [iter(reverse[start])]
        while stack:
            for nxt in stack[-1]:
                if not assigned[nxt]:
                    assigned[nxt] = True
                    component.append(nxt)
                    stack.append(iter(reverse[nxt]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components