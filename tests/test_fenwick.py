from itertools import accumulate

import pytest
from hypothesis import given, strategies as st

from algobox.fenwick import FenwickTree


@given(st.data())
def test_prefix_sums_match_accumulate(data):
    size = data.draw(st.integers(1, 40))
    ops = data.draw(
        st.lists(st.tuples(st.integers(1, size), st.integers(-100, 100)), max_size=60)
    )
    tree = FenwickTree(size)
    values = [0] * (size + 1)
    for idx, val in ops:
        tree.add(idx, val)
        values[idx] += val
    expected = list(accumulate(values))
    assert [tree.prefix_sum(i) for i in range(size + 1)] == expected


def test_empty_prefix_is_zero_after_adds():
    tree = FenwickTree(5)
    tree.add(1, 7)
    tree.add(5, 3)
    assert tree.prefix_sum(0) == 0
    assert tree.prefix_sum(5) == 7 + 3


def test_single_add_visible_only_from_its_position():
    tree = FenwickTree(8)
    tree.add(4, 9)
    assert tree.prefix_sum(3) == 0
    assert all(tree.prefix_sum(i) == 9 for i in range(4, 9))


def test_add_out_of_range_raises():
    tree = FenwickTree(4)
    with pytest.raises(IndexError):
        tree.add(0, 1)
    with pytest.raises(IndexError):
        tree.add(5, 1)


def test_prefix_out_of_range_raises():
    tree = FenwickTree(4)
    with pytest.raises(IndexError):
        tree.prefix_sum(5)