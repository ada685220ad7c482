"""Binary indexed (Fenwick) tree over integers with 1-based positions."""

from __future__ import annotations


class FenwickTree:
    """Fenwick tree supporting point update / prefix sum in O(log n).

    Positions run from 1 to ``len(tree)``.  Used either for point updates
    with range queries, or (through :meth:`range_add`) for range updates
    with point queries.
    """

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._data = [0] * (size + 1)

    def __len__(self) -> int:
        return self._size

    def _check_position(self, idx: int) -> None:
        if not 1 <= idx <= self._size:
            raise IndexError(f"position {idx} outside 1..{self._size}")

    def prefix_sum(self, idx: int) -> int:
        """Return the sum over positions ``1..idx``."""
        self._check_position(idx)
        total = 0
        while idx > 0:
            total += self._data[idx]
            idx -= idx & -idx
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum over positions ``left..right`` (a left of 0 acts as 1)."""
        if left > right:
            raise ValueError("left must not exceed right")
        if left in (0, 1):
            return self.prefix_sum(right)
        return self.prefix_sum(right) - self.prefix_sum(left - 1)

    def add(self, idx: int, value: int) -> None:
        """Add ``value`` at position ``idx``; positions past the end are ignored."""
        if not isinstance(value, int):
            raise TypeError("value must be an integer")
        if idx <= 0:
            raise IndexError("positions start at 1")
        while idx <= self._size:
            self._data[idx] += value
            idx += idx & -idx

    def range_add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every position in ``left..right`` (point-query mode)."""
        if left > right:
            raise ValueError("left must not exceed right")
        if left <= 0:
            raise IndexError("positions start at 1")
        self.add(left, value)
        self.add(right + 1, -value)

    def order(self, target: int) -> int:
        """Return the smallest position whose prefix sum reaches ``target``.

        With non-negative counts this finds the ``target``-th smallest
        element.  When no position qualifies, ``len(tree) + 1`` is returned.
        """
        step = 1 << max(self._size.bit_length() - 1, 0)
        pos = 0
        while step:
            nxt = pos + step
            if nxt <= self._size and self._data[nxt] < target:
                pos = nxt
                target -= self._data[pos]
            step >>= 1
        return pos + 1

    def __str__(self) -> str:
        parts = []
        previous = 0
        for idx in range(1, self._size + 1):
            current = self.prefix_sum(idx)
            parts.append(f"{current - previous},")
            previous = current
        return "[" + "".join(parts) + "]"