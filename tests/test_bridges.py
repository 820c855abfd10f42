import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.bridges import critical_connections


def _component_count(n, edges):
    parent = list(range(n))

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for u, v in edges:
        parent[find(u)] = find(v)
    return len({find(x) for x in range(n)})


@st.composite
def connected_graphs(draw):
    n = draw(st.integers(1, 8))
    edges = {(draw(st.integers(0, i - 1)), i) for i in range(1, n)}
    if n > 1:
        extra = draw(
            st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=8)
        )
        edges |= {(min(u, v), max(u, v)) for u, v in extra if u != v}
    return n, sorted(edges)


@given(connected_graphs())
def test_matches_edge_removal(graph):
    n, edges = graph
    expected = {
        frozenset(edge)
        for edge in edges
        if _component_count(n, [e for e in edges if e != edge]) > 1
    }
    result = critical_connections(n, edges)
    assert len(result) == len({frozenset(e) for e in result})
    assert {frozenset(e) for e in result} == expected


@given(connected_graphs())
def test_bridges_are_edges_of_the_graph(graph):
    n, edges = graph
    edge_set = {frozenset(e) for e in edges}
    assert all(frozenset(b) in edge_set for b in critical_connections(n, edges))


def test_triangle_with_tail():
    assert critical_connections(4, [(0, 1), (1, 2), (2, 0), (1, 3)]) == [(1, 3)]


def test_only_component_of_node_zero_is_searched():
    assert critical_connections(4, [(0, 1), (2, 3)]) == [(0, 1)]


def test_out_of_range_edge_raises():
    with pytest.raises(ValueError):
        critical_connections(2, [(0, 5)])