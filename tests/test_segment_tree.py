import operator

import pytest
from hypothesis import given, strategies as st

from algobox.segment_tree import SegmentTree


def test_sum_example():
    seg = SegmentTree(20, operator.add, 0)
    seg.update(2, 5)
    seg.update(4, 10)
    seg.update(10, 20)
    assert seg.query(1, 11) == 35
    assert seg.query(2, 40) == seg.query(1, 11)
    assert seg.get(10) == 20


def test_min_example():
    seg = SegmentTree(20, min, 999999)
    for idx, val in enumerate([5, 9, 1, 4, 8]):
        seg.set(idx, val)
    seg.build()
    assert seg.query(1, 4) == 1
    assert seg.query(0, 1) == 5
    assert seg.query(3, 100) == 4


LOG = 4
SIZE = 1 << LOG


@given(
    st.lists(st.integers(-100, 100), min_size=SIZE, max_size=SIZE),
    st.lists(st.tuples(st.integers(0, SIZE - 1), st.integers(-100, 100)), max_size=10),
    st.data(),
)
def test_sum_and_min_match_naive(values, updates, data):
    sums = SegmentTree(LOG, operator.add, 0)
    mins = SegmentTree(LOG, min, float("inf"))
    for idx, val in enumerate(values):
        sums.set(idx, val)
        mins.set(idx, val)
    sums.build()
    mins.build()
    values = list(values)
    for idx, val in updates:
        sums.update(idx, val)
        mins.update(idx, val)
        values[idx] = val
    l = data.draw(st.integers(0, SIZE - 1))
    r = data.draw(st.integers(l, SIZE - 1))
    assert sums.query(l, r) == sum(values[l : r + 1])
    assert mins.query(l, r) == min(values[l : r + 1])


@given(st.lists(st.text(alphabet="xyz", max_size=2), min_size=8, max_size=8), st.data())
def test_non_commutative_fold_keeps_order(words, data):
    seg = SegmentTree(3, operator.add, "")
    for idx, word in enumerate(words):
        seg.update(idx, word)
    l = data.draw(st.integers(0, 7))
    r = data.draw(st.integers(l, 7))
    assert seg.query(l, r) == "".join(words[l : r + 1])


def test_clear_resets_to_identity():
    seg = SegmentTree(2, operator.add, 0)
    seg.update(1, 7)
    seg.clear()
    assert seg.query(0, 3) == 0
    assert seg.get(1) == 0


def test_out_of_range_raises():
    seg = SegmentTree(2, operator.add, 0)
    with pytest.raises(IndexError):
        seg.update(4, 1)
    with pytest.raises(IndexError):
        seg.query(0, 4)