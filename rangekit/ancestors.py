"""Binary-lifting ancestor table for rooted trees with nodes numbered 1..n."""

from __future__ import annotations

from typing import Iterable, Sequence


class AncestorTable:
    """Answers k-th ancestor, lowest common ancestor and distance queries.

    ``adj[v]`` lists the neighbours of node ``v``; index 0 is unused and
    stands for the parent of the root.
    """

    def __init__(self, n: int, root: int, adj: Sequence[Iterable[int]]) -> None:
        if n < 1:
            raise ValueError("a tree needs at least one node")
        self._n = n
        self._check_node(root)
        self._root = root
        self._levels = n.bit_length()

        parent = [0] * (n + 1)
        depth = [0] * (n + 1)
        stack = [(root, 0)]
        while stack:
            node, par = stack.pop()
            parent[node] = par
            for nxt in adj[node]:
                if nxt != par:
                    depth[nxt] = depth[node] + 1
                    stack.append((nxt, node))
        parent[0] = -1
        self._depth = depth

        self._up: list[list[int]] = [parent]
        for _ in range(1, self._levels):
            prev = self._up[-1]
            self._up.append([prev[p] if p != -1 else -1 for p in prev])

    def _check_node(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise IndexError(f"node {node} outside 1..{self._n}")

    def depth(self, node: int) -> int:
        """Return the number of edges between ``node`` and the root."""
        self._check_node(node)
        return self._depth[node]

    def kth_ancestor(self, node: int, k: int) -> int:
        """Return the ancestor ``k`` edges above ``node`` (``k`` = 0 gives ``node``)."""
        self._check_node(node)
        if not 0 <= k <= self._depth[node]:
            raise ValueError(f"k must lie in 0..{self._depth[node]}")
        for level in range(self._levels - 1, -1, -1):
            if k >= 1 << level:
                node = self._up[level][node]
                k -= 1 << level
        return node

    def lca(self, x: int, y: int) -> int:
        """Return the lowest common ancestor of ``x`` and ``y``."""
        self._check_node(x)
        self._check_node(y)
        if self._depth[y] < self._depth[x]:
            x, y = y, x
        y = self.kth_ancestor(y, self._depth[y] - self._depth[x])
        if x == y:
            return x
        for level in range(self._levels - 1, -1, -1):
            row = self._up[level]
            if row[x] != -1 and row[x] != row[y]:
                x, y = row[x], row[y]
        return self._up[0][x]

    def distance(self, u: int, v: int) -> int:
        """Return the number of edges on the path between ``u`` and ``v``."""
        return self._depth[u] + self._depth[v] - 2 * self._depth[self.lca(u, v)]