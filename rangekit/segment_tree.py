"""Iterative bottom-up segment tree with a caller-supplied merge."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class SegmentTree(Generic[T]):
    """Segment tree over 0-based positions with half-open range queries."""

    def __init__(self, values: Iterable[T], default: T, merge: Callable[[T, T], T]) -> None:
        leaves = list(values)
        self._n = len(leaves)
        self._default = default
        self._merge = merge
        self._tree: list[T] = [default] * self._n + leaves
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = merge(self._tree[2 * i], self._tree[2 * i + 1])

    @classmethod
    def filled(cls, size: int, default: T, merge: Callable[[T, T], T]) -> "SegmentTree[T]":
        """Build a tree of ``size`` positions all holding ``default``."""
        if size < 0:
            raise ValueError("size must not be negative")
        return cls([default] * size, default, merge)

    def __len__(self) -> int:
        return self._n

    def update(self, index: int, value: T) -> None:
        """Replace the value at ``index``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} outside 0..{self._n - 1}")
        i = index + self._n
        self._tree[i] = value
        while i > 1:
            i //= 2
            self._tree[i] = self._merge(self._tree[2 * i], self._tree[2 * i + 1])

    def query(self, left: int, right: int) -> T:
        """Merge the values over ``[left, right)``, left to right."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) outside [0, {self._n}]")
        left_acc = self._default
        right_acc = self._default
        left += self._n
        right += self._n
        while left < right:
            if left % 2:
                left_acc = self._merge(left_acc, self._tree[left])
                left += 1
            if right % 2:
                right -= 1
                right_acc = self._merge(self._tree[right], right_acc)
            left //= 2
            right //= 2
        return self._merge(left_acc, right_acc)

    def __repr__(self) -> str:
        return "[ " + "".join(f"{x} , " for x in self._tree) + "]"