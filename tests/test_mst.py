import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dsalgo.mst import DisjointSet, kruskal, prim


def _adjacency(n, edges):
    adj = [[] for _ in range(n)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


@st.composite
def connected_graphs(draw):
    n = draw(st.integers(min_value=1, max_value=9))
    weights = st.integers(min_value=0, max_value=50)
    edges = [
        (draw(st.integers(min_value=0, max_value=i - 1)), i, draw(weights))
        for i in range(1, n)
    ]
    extra = draw(
        st.lists(
            st.tuples(
                st.integers(min_value=0, max_value=n - 1),
                st.integers(min_value=0, max_value=n - 1),
                weights,
            ),
            max_size=15,
        )
    )
    return n, edges + extra


def test_disjoint_set_starts_as_singletons():
    ds = DisjointSet(4)
    assert [ds.find(x) for x in range(4)] == [0, 1, 2, 3]


def test_disjoint_set_union_reports_merge():
    ds = DisjointSet(3)
    assert ds.union(0, 1) is True
    assert ds.union(1, 0) is False
    assert ds.find(0) == ds.find(1)
    assert ds.find(2) != ds.find(0)


def test_disjoint_set_is_transitive():
    ds = DisjointSet(5)
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(1, 3)
    assert len({ds.find(x) for x in range(4)}) == 1
    assert ds.find(4) == 4


def test_disjoint_set_rejects_out_of_range():
    with pytest.raises(IndexError):
        DisjointSet(2).find(2)


def test_kruskal_triangle_drops_heaviest_edge():
    assert kruskal(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)]) == 3


def test_kruskal_without_edges_is_zero():
    assert kruskal(4, []) == 0


def test_kruskal_ignores_heavier_parallel_edges_and_loops():
    base = [(0, 1, 4), (1, 2, 7), (2, 3, 1)]
    noisy = base + [(0, 1, 9), (2, 2, 0), (3, 3, 5), (1, 2, 8)]
    assert kruskal(4, noisy) == kruskal(4, base)


def test_kruskal_forest_is_sum_of_components():
    left = [(0, 1, 3), (1, 2, 5), (0, 2, 2)]
    right = [(3, 4, 6), (4, 5, 1), (3, 5, 4)]
    assert kruskal(6, left + right) == kruskal(6, left) + kruskal(6, right)


def test_kruskal_rejects_out_of_range_edge():
    with pytest.raises(ValueError):
        kruskal(2, [(0, 2, 1)])


def test_prim_single_node_is_zero():
    assert prim([[]], 0) == 0


def test_prim_covers_only_source_component():
    left = [(0, 1, 3), (1, 2, 5), (0, 2, 2)]
    right = [(3, 4, 6), (4, 5, 1)]
    adj = _adjacency(6, left + right)
    assert prim(adj, 0) == kruskal(6, left)
    assert prim(adj, 4) == kruskal(6, right)


def test_prim_rejects_bad_source():
    with pytest.raises(ValueError):
        prim([[]], 1)


@settings(max_examples=100)
@given(connected_graphs())
def test_prim_matches_kruskal_on_connected_graphs(graph):
    n, edges = graph
    expected = kruskal(n, edges)
    for source in range(n):
        assert prim(_adjacency(n, edges), source) == expected


@settings(max_examples=100)
@given(connected_graphs())
def test_kruskal_weight_bounded_by_any_spanning_path(graph):
    n, edges = graph
    tree = edges[: n - 1]
    assert kruskal(n, edges) <= sum(w for _, _, w in tree)