"""Lazy-propagation segment tree with range assign/add and segment summaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

_LOWEST = -(2**31)


@dataclass(frozen=True)
class SegmentChange:
    """A pending change: assign ``to_set`` first (if given), then add ``to_add``."""

    to_add: int = 0
    to_set: int | None = None

    def has_set(self) -> bool:
        return self.to_set is not None

    def has_change(self) -> bool:
        return self.has_set() or self.to_add != 0

    def combine(self, other: SegmentChange) -> SegmentChange:
        """Return the change equal to applying ``self`` and then ``other``."""
        if other.has_set():
            return other
        return SegmentChange(self.to_add + other.to_add, self.to_set)


@dataclass(frozen=True)
class Segment:
    """Summary of a run of values; the default instance is the empty segment."""

    maximum: int = _LOWEST
    sum: int = 0
    first: int = 0
    last: int = 0
    max_diff: int = -1

    def is_empty(self) -> bool:
        return self.max_diff < 0

    def applied(self, length: int, change: SegmentChange) -> Segment:
        """Return this segment of ``length`` values after ``change``."""
        seg = self
        if change.to_set is not None:
            value = change.to_set
            seg = Segment(value, length * value, value, value, 0)
        add = change.to_add
        return Segment(
            seg.maximum + add,
            seg.sum + length * add,
            seg.first + add,
            seg.last + add,
            seg.max_diff,
        )

    def joined(self, other: Segment) -> Segment:
        """Return the summary of this segment followed by ``other``."""
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        return Segment(
            max(self.maximum, other.maximum),
            self.sum + other.sum,
            self.first,
            other.last,
            max(self.max_diff, other.max_diff, abs(self.last - other.first)),
        )


class LazySegmentTree:
    """Segment tree over ``Segment`` leaves with lazy range changes.

    Ranges are half-open ``[start, stop)`` over 0-based positions; the number
    of positions is the requested size rounded up to a power of two.
    """

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        leaves = 1
        while leaves < size:
            leaves *= 2
        self._leaves = leaves
        self._tree: list[Segment] = [Segment()] * (2 * leaves)
        self._changes: list[SegmentChange] = [SegmentChange()] * leaves

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> LazySegmentTree:
        """Build a tree whose leading leaves are ``segments``, in O(n)."""
        initial = list(segments)
        tree = cls(len(initial))
        base = tree._leaves
        tree._tree[base : base + len(initial)] = initial
        for position in range(base - 1, 0, -1):
            tree._rejoin(position)
        return tree

    def _rejoin(self, position: int) -> None:
        self._tree[position] = self._tree[2 * position].joined(self._tree[2 * position + 1])

    def _apply_and_combine(self, position: int, length: int, change: SegmentChange) -> None:
        self._tree[position] = self._tree[position].applied(length, change)
        if position < self._leaves:
            self._changes[position] = self._changes[position].combine(change)

    def _push_down(self, position: int, length: int) -> None:
        change = self._changes[position]
        if change.has_change():
            self._apply_and_combine(2 * position, length // 2, change)
            self._apply_and_combine(2 * position + 1, length // 2, change)
            self._changes[position] = SegmentChange()

    def _process_range(
        self,
        position: int,
        start: int,
        end: int,
        a: int,
        b: int,
        needs_join: bool,
        range_op: Callable[[int, int], None],
    ) -> None:
        if a <= start and end <= b:
            range_op(position, end - start)
            return
        if position >= self._leaves:
            return
        self._push_down(position, end - start)
        mid = (start + end) // 2
        if a < mid:
            self._process_range(2 * position, start, mid, a, b, needs_join, range_op)
        if b > mid:
            self._process_range(2 * position + 1, mid, end, a, b, needs_join, range_op)
        if needs_join:
            self._rejoin(position)

    def _check_range(self, start: int, stop: int) -> None:
        if not 0 <= start <= stop <= self._leaves:
            raise IndexError(f"range [{start}, {stop}) outside [0, {self._leaves}]")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._leaves:
            raise IndexError(f"index {index} outside 0..{self._leaves - 1}")

    def _push_path(self, position: int) -> None:
        for up in range(self._leaves.bit_length() - 1, 0, -1):
            self._push_down(position >> up, 1 << up)

    def query(self, start: int, stop: int) -> Segment:
        """Return the summary of positions ``[start, stop)``."""
        self._check_range(start, stop)
        answer = Segment()

        def collect(position: int, _length: int) -> None:
            nonlocal answer
            answer = answer.joined(self._tree[position])

        self._process_range(1, 0, self._leaves, start, stop, False, collect)
        return answer

    def query_full(self) -> Segment:
        """Return the summary of every position."""
        return self._tree[1]

    def query_single(self, index: int) -> Segment:
        """Return the leaf at ``index`` with all pending changes applied."""
        self._check_index(index)
        position = self._leaves + index
        self._push_path(position)
        return self._tree[position]

    def update(self, start: int, stop: int, change: SegmentChange) -> None:
        """Apply ``change`` to every position in ``[start, stop)``."""
        self._check_range(start, stop)

        def apply(position: int, length: int) -> None:
            self._apply_and_combine(position, length, change)

        self._process_range(1, 0, self._leaves, start, stop, True, apply)

    def update_single(self, index: int, segment: Segment) -> None:
        """Replace the leaf at ``index`` with ``segment``."""
        self._check_index(index)
        position = self._leaves + index
        self._push_path(position)
        self._tree[position] = segment
        while position > 1:
            position //= 2
            self._rejoin(position)

    def to_list(self, count: int) -> list[Segment]:
        """Return the first ``count`` leaves with all pending changes applied."""
        if not 0 <= count <= self._leaves:
            raise IndexError(f"count {count} outside 0..{self._leaves}")
        for position in range(1, self._leaves):
            self._push_down(position, self._leaves >> (position.bit_length() - 1))
        return self._tree[self._leaves : self._leaves + count]