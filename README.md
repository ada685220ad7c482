# rangekit

Classic range-query and tree structures in plain Python, with no
third-party dependencies:

| Module | What it gives you |
| --- | --- |
| `rangekit.fenwick` | `FenwickTree`: a 1-based binary indexed tree over integers for prefix sums, point or range updates, and order statistics |
| `rangekit.segment_tree` | `SegmentTree`: an iterative segment tree over a caller-supplied merge function, queried on half-open ranges |
| `rangekit.sparse_table` | `SparseTable`: O(1) idempotent range queries (min, max, gcd, ...) after O(n log n) preprocessing, and the `rangekit-rmq` command |
| `rangekit.lazy_segment_tree` | `LazySegmentTree` with `Segment` and `SegmentChange`: range assign and range add, with queries for maximum, sum and largest adjacent difference |
| `rangekit.ancestors` | `AncestorTable`: binary lifting for depth, k-th ancestor, lowest common ancestor and distance in a rooted tree |
| `rangekit.diameter` | `bfs_distances` and `tree_diameter`: the two-pass BFS diameter of a tree |

## Installation

```
pip install rangekit
```

To run the test suite:

```
pip install "rangekit[test]"
pytest
```

## Usage

### Fenwick tree

Positions run from 1 to `len(tree)`; values are integers.

```python
from rangekit.fenwick import FenwickTree

tree = FenwickTree(8)
tree.add(3, 5)
tree.add(5, 2)
tree.prefix_sum(4)        # 5
tree.range_sum(3, 5)      # 7
len(tree)                 # 8
tree.order(6)             # 5: the first position whose prefix sum reaches 6
```

A tree is used either for point updates (`add`) with range queries
(`range_sum`), or for range updates (`range_add`) with point queries read
back through `prefix_sum`. `order` returns `len(tree) + 1` when no
position reaches the target. `add` ignores positions past the end and
raises `IndexError` for positions below 1; `range_sum` and `range_add`
raise `ValueError` when `left > right`.

`str(tree)` lists the per-position values, each followed by a comma, for
example `[0,0,5,0,2,0,0,0,]`.

### Segment tree

Indices are 0-based and queries cover `[left, right)`.

```python
from rangekit.segment_tree import SegmentTree

tree = SegmentTree([5, 1, 4, 2, 3], float("inf"), min)
tree.query(0, 5)          # 1
tree.update(1, 9)
tree.query(0, 3)          # 4
```

`SegmentTree.filled(size, default, merge)` builds a tree whose every
leaf holds `default`. Out-of-range indices raise `IndexError`.

### Sparse table

Indices are 0-based and queries cover `[left, right]`. The operation
must be idempotent, such as `min`, `max` or `math.gcd`. The table is
static and needs at least one value.

```python
from rangekit.sparse_table import SparseTable

table = SparseTable([7, 2, 9, 4, 6], min)
table.query(0, 4)         # 2
table.query(2, 4)         # 4
```

### Lazy segment tree

`LazySegmentTree` keeps a `Segment` summary per range (`maximum`, `sum`,
`first` and `last` value, and `max_diff`, the largest absolute difference
between neighbouring values) and applies `SegmentChange` updates lazily.
A change may set every value in a range (`to_set`), add to every value
(`to_add`), or both: the set happens first and the add after it.
`Segment()` is the empty segment and `SegmentChange()` changes nothing.

Build a tree with `LazySegmentTree(size)` or
`LazySegmentTree.from_segments(segments)`; the number of positions is
rounded up to a power of two. Then use `update(start, stop, change)` and
`query(start, stop)` on half-open ranges, `update_single` and
`query_single` for one position, `query_full` for the whole array and
`to_list(count)` to read the first `count` leaves back.

```python
from rangekit.lazy_segment_tree import LazySegmentTree, Segment, SegmentChange

tree = LazySegmentTree.from_segments(Segment(v, v, v, v, 0) for v in [3, 1, 4, 1])
tree.update(1, 3, SegmentChange(to_add=2))
tree.query(0, 4).sum      # 13
tree.query(0, 4).maximum  # 6
```

### Lowest common ancestor

Nodes are numbered from 1 to `n`; `adj[v]` lists the neighbours of `v`
and `adj[0]` is unused.

```python
from rangekit.ancestors import AncestorTable

adj = [[], [2, 3], [1, 4, 5], [1], [2], [2]]
table = AncestorTable(5, 1, adj)
table.lca(4, 5)           # 2
table.lca(4, 3)           # 1
table.distance(4, 3)      # 3
table.kth_ancestor(4, 1)  # 2
table.depth(5)            # 2
```

### Tree diameter

```python
from rangekit.diameter import bfs_distances, tree_diameter

graph = [[], [2, 3], [1, 4, 5], [1], [2], [2]]
bfs_distances(graph, 1)   # [-1, 0, 1, 1, 2, 2]; unreachable nodes get -1
result = tree_diameter(graph, 1)
result.length             # 3
```

`tree_diameter` returns a `TreeDiameter` holding both ends of a longest
path (`first`, `second`), its `length`, and the two BFS distance lists
it used (`from_source`, `from_first`).

## Command line

`rangekit-rmq` answers range-minimum queries read from standard input:
first `n`, then `n` integers, then the number of queries, then one pair
`l r` (0-based, inclusive) per query. It prints one minimum per line.
It answers minimum queries only; other operations are available through
`SparseTable` in code.

```
$ printf '5\n7 2 9 4 6\n2\n0 4\n2 4\n' | rangekit-rmq
2
4
```