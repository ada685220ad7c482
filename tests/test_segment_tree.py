import math
import operator

import pytest
from hypothesis import given, strategies as st

from rangekit.segment_tree import SegmentTree

int_lists = st.lists(st.integers(-1000, 1000), min_size=1, max_size=40)


@given(int_lists, st.data())
def test_sum_queries_match(values, data):
    tree = SegmentTree(values, 0, operator.add)
    left = data.draw(st.integers(0, len(values)))
    right = data.draw(st.integers(left, len(values)))
    assert tree.query(left, right) == sum(values[left:right])


@given(int_lists, st.data())
def test_min_queries_match(values, data):
    tree = SegmentTree(values, math.inf, min)
    left = data.draw(st.integers(0, len(values) - 1))
    right = data.draw(st.integers(left + 1, len(values)))
    assert tree.query(left, right) == min(values[left:right])


@given(int_lists, st.data())
def test_updates_are_reflected(values, data):
    tree = SegmentTree(values, 0, operator.add)
    current = list(values)
    for _ in range(data.draw(st.integers(1, 10))):
        index = data.draw(st.integers(0, len(values) - 1))
        value = data.draw(st.integers(-1000, 1000))
        tree.update(index, value)
        current[index] = value
    assert tree.query(0, len(current)) == sum(current)
    assert [tree.query(i, i + 1) for i in range(len(current))] == current


def test_merge_order_is_preserved():
    letters = list("abcdefgh")
    tree = SegmentTree(letters, "", operator.add)
    for left in range(len(letters)):
        for right in range(left, len(letters) + 1):
            assert tree.query(left, right) == "".join(letters[left:right])


def test_filled_holds_default_everywhere():
    tree = SegmentTree.filled(6, 0, operator.add)
    assert len(tree) == 6
    assert tree.query(0, 6) == 0
    tree.update(2, 5)
    assert tree.query(0, 6) == 5


def test_empty_range_returns_merged_default():
    tree = SegmentTree([3, 1, 2], math.inf, min)
    assert tree.query(1, 1) == math.inf


def test_repr_shows_internal_array():
    tree = SegmentTree([1, 2], 0, operator.add)
    assert repr(tree) == "[ 0 , 3 , 1 , 2 , ]"


def test_update_out_of_range():
    tree = SegmentTree([1, 2, 3], 0, operator.add)
    with pytest.raises(IndexError):
        tree.update(3, 1)
    with pytest.raises(IndexError):
        tree.update(-1, 1)


def test_query_out_of_range():
    tree = SegmentTree([1, 2, 3], 0, operator.add)
    with pytest.raises(IndexError):
        tree.query(0, 4)
    with pytest.raises(IndexError):
        tree.query(2, 1)


def test_filled_rejects_negative_size():
    with pytest.raises(ValueError):
        SegmentTree.filled(-1, 0, operator.add)