# dsalgo

Classic graph algorithms and data structures in plain Python, with no
third-party dependencies.

## Installation

```
pip install dsalgo
```

To run the test suite:

```
pip install "dsalgo[test]"
pytest
```

## Graphs

Vertices are the integers `0 .. n - 1`. Edges are sequences: `(u, v)` for
unweighted graphs and `(u, v, weight)` for weighted ones. An edge that names a
vertex outside `0 .. n - 1`, or a source outside that range, raises
`ValueError`.

### Shortest paths

```python
from dsalgo.dijkstra import shortest_distances, max_distance
from dsalgo.bellman_ford import bellman_ford, NegativeCycleError

edges = [(0, 1, 4), (0, 2, 1), (2, 1, 2)]

shortest_distances(3, edges, 0)   # [0, 3, 1]  (undirected, non-negative weights)
max_distance(3, edges, 0)         # 3          (largest of those distances)

bellman_ford(3, edges, 0)         # [0, 3, 1]  (directed, negative weights allowed)
```

Unreachable vertices get `math.inf`, so `max_distance` returns `math.inf` when
some vertex cannot be reached. `bellman_ford` raises `NegativeCycleError`
(a subclass of `ValueError`) when a negative cycle is reachable from the source.

### Spanning trees

```python
from dsalgo.mst import kruskal, prim, DisjointSet

kruskal(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])    # 3

adjacency = [[(1, 1), (2, 3)], [(0, 1), (2, 2)], [(0, 3), (1, 2)]]
prim(adjacency, 0)                                # 3
```

- `kruskal(n, edges)` takes undirected `(u, v, weight)` edges and returns the
  total weight of a minimum spanning forest, so disconnected graphs are allowed.
- `prim(adjacency, source)` takes, for each vertex, a list of
  `(neighbour, weight)` pairs and returns the weight of a minimum spanning tree
  of the component containing `source`.

`DisjointSet(n)` is a union-find structure over `0 .. n - 1`:

```python
ds = DisjointSet(4)
ds.union(0, 1)             # True: two sets were merged
ds.union(1, 0)             # False: already in the same set
ds.find(0) == ds.find(1)   # True
len(ds)                    # 4
```

`find` raises `IndexError` for an element out of range.

### Ordering and structure

```python
from dsalgo.toposort import kahn_sort, dfs_sort, CycleError
from dsalgo.scc import strongly_connected_components
from dsalgo.articulation import articulation_points
from dsalgo.bridges import critical_connections

kahn_sort(3, [(0, 1), (1, 2)])                              # [0, 1, 2]
dfs_sort(3, [(0, 1), (1, 2)])                               # [0, 1, 2]
strongly_connected_components(3, [(0, 1), (1, 0), (1, 2)])  # [[0, 1], [2]]
articulation_points(3, [(0, 1), (1, 2)])                    # [1]
critical_connections(3, [(0, 1), (1, 2)])                   # [(1, 2), (0, 1)]
```

- `kahn_sort` raises `CycleError` (a subclass of `ValueError`) when the
  directed graph has a cycle.
- `dfs_sort` returns vertices in reverse depth-first finishing order. That is a
  topological order for an acyclic graph; cycles are not detected.
- `strongly_connected_components` returns components in topological order of
  the condensed graph.
- `articulation_points` returns the cut vertices of an undirected graph,
  sorted.
- `critical_connections` returns the bridges of an undirected graph as
  `(parent, child)` pairs from a depth-first search. Only the component that
  contains vertex 0 is searched.

## Segment trees

Both trees take an iterable of values; ranges are inclusive.

```python
from dsalgo.segment_tree import MinSegmentTree, SumSegmentTree

mins = MinSegmentTree([5, 2, 7, 1])
mins.query(0, 2)      # 2
mins.update(1, 9)     # set index 1 to 9
mins.query(0, 2)      # 5

sums = SumSegmentTree([1, 2, 3, 4])
sums.add(1, 2, 10)    # add 10 to every element in 1..2
sums.query(0, 3)      # 30
```

A range that covers no index gives `math.inf` for `MinSegmentTree.query` and
`0` for `SumSegmentTree.query`. `MinSegmentTree.update` raises `IndexError` for
an index out of range. `len()` gives the number of elements.

## Trie

```python
from dsalgo.trie import Trie

trie = Trie()
trie.insert("apple")
trie.search("apple")   # True
trie.search("app")     # False: only a prefix
"apple" in trie        # True
```

Words are made of the lower-case letters `a` to `z`; `insert` raises
`ValueError` for any other character. `search` and `in` simply return `False`
for words that were not inserted.

## Scope

`dsalgo` is a library only: it has no command-line tool, and graphs are passed
in as Python values rather than read from files.