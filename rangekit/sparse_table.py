"""Sparse table for O(1) idempotent range queries, plus a range-minimum command."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Generic, Iterable, Sequence, TypeVar

T = TypeVar("T")


class SparseTable(Generic[T]):
    """Static table answering inclusive range queries for idempotent operations."""

    def __init__(self, values: Iterable[T], operation: Callable[[T, T], T]) -> None:
        base = list(values)
        if not base:
            raise ValueError("a sparse table needs at least one value")
        self._operation = operation
        n = len(base)
        self._logs = [0] * (n + 1)
        for i in range(2, n + 1):
            self._logs[i] = self._logs[i // 2] + 1
        levels = max(self._logs)
        self._table: list[list[T]] = [base]
        for j in range(1, levels + 1):
            prev = self._table[-1]
            half = 1 << (j - 1)
            self._table.append(
                [operation(prev[i], prev[i + half]) for i in range(n - (1 << j) + 1)]
            )

    def __len__(self) -> int:
        return len(self._table[0])

    def query(self, left: int, right: int) -> T:
        """Combine the values over the inclusive 0-based range ``left..right``."""
        if left > right:
            raise ValueError("left must not exceed right")
        if left < 0 or right >= len(self):
            raise IndexError(f"range {left}..{right} outside 0..{len(self) - 1}")
        j = self._logs[right - left + 1]
        row = self._table[j]
        return self._operation(row[left], row[right - (1 << j) + 1])


def _read_ints(tokens: Iterable[str]) -> Iterable[int]:
    for token in tokens:
        yield int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Read an array and range-minimum queries from stdin; print each answer."""
    argparse.ArgumentParser(
        description="Answer inclusive range-minimum queries read from standard input."
    ).parse_args(argv)
    numbers = iter(_read_ints(sys.stdin.read().split()))
    n = next(numbers)
    values = [next(numbers) for _ in range(n)]
    table = SparseTable(values, min)
    count = next(numbers)
    for _ in range(count):
        left, right = next(numbers), next(numbers)
        print(table.query(left, right))
    return 0