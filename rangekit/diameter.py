"""Tree diameter by two breadth-first searches."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class TreeDiameter:
    """Endpoints and length of a longest path, with the BFS distances used."""

    first: int
    second: int
    length: int
    from_source: tuple[int, ...]
    from_first: tuple[int, ...]


def bfs_distances(graph: Sequence[Iterable[int]], source: int) -> list[int]:
    """Return edge counts from ``source``; unreachable nodes get -1."""
    if not 0 <= source < len(graph):
        raise IndexError(f"source {source} outside 0..{len(graph) - 1}")
    dist = [-1] * len(graph)
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in graph[node]:
            if dist[nxt] < 0:
                dist[nxt] = dist[node] + 1
                queue.append(nxt)
    return dist


def _first_farthest(dist: Sequence[int]) -> int:
    return max(range(len(dist)), key=dist.__getitem__)


def tree_diameter(graph: Sequence[Iterable[int]], source: int) -> TreeDiameter:
    """Find a longest path in the tree containing ``source``."""
    from_source = bfs_distances(graph, source)
    first = _first_farthest(from_source)
    from_first = bfs_distances(graph, first)
    second = _first_farthest(from_first)
    return TreeDiameter(
        first=first,
        second=second,
        length=from_first[second],
        from_source=tuple(from_source),
        from_first=tuple(from_first),
    )