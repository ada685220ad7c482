import io
import math
import sys

import pytest
from hypothesis import given, strategies as st

from rangekit.sparse_table import SparseTable, main

int_lists = st.lists(st.integers(-10**9, 10**9), min_size=1, max_size=60)


@given(int_lists, st.data())
def test_min_queries_match(values, data):
    table = SparseTable(values, min)
    left = data.draw(st.integers(0, len(values) - 1))
    right = data.draw(st.integers(left, len(values) - 1))
    assert table.query(left, right) == min(values[left:right + 1])


@given(int_lists, st.data())
def test_max_queries_match(values, data):
    table = SparseTable(values, max)
    left = data.draw(st.integers(0, len(values) - 1))
    right = data.draw(st.integers(left, len(values) - 1))
    assert table.query(left, right) == max(values[left:right + 1])


@given(st.lists(st.integers(1, 10**6), min_size=1, max_size=40), st.data())
def test_gcd_queries_match(values, data):
    table = SparseTable(values, math.gcd)
    left = data.draw(st.integers(0, len(values) - 1))
    right = data.draw(st.integers(left, len(values) - 1))
    assert table.query(left, right) == math.gcd(*values[left:right + 1])


@given(int_lists)
def test_single_position_queries_return_values(values):
    table = SparseTable(values, min)
    assert len(table) == len(values)
    assert [table.query(i, i) for i in range(len(values))] == values


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        SparseTable([], min)


def test_reversed_range_rejected():
    table = SparseTable([1, 2, 3], min)
    with pytest.raises(ValueError):
        table.query(2, 1)


def test_out_of_range_rejected():
    table = SparseTable([1, 2, 3], min)
    with pytest.raises(IndexError):
        table.query(0, 3)
    with pytest.raises(IndexError):
        table.query(-1, 1)


def test_main_answers_queries(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n3 8 4 6 5\n3\n0 4\n1 1\n3 4\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["3", "8", "5"]


def test_main_rejects_bad_range(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n1 2\n1\n0 2\n"))
    with pytest.raises(IndexError):
        main([])