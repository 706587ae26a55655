import pytest
from hypothesis import given, strategies as st

from algobox.dynamic_segment_tree import DynamicSegmentTree


def test_worked_example():
    tree = DynamicSegmentTree()
    tree.update(1, 3, 5)
    assert tree.query(-10, 10) == 15
    tree.update(-8, -5, 3)
    assert tree.query(-6, 0) == 6
    tree.update(-6, 2, 2)
    assert tree.query(-5, 1) == 22


LOW, HIGH = -8, 8


@st.composite
def intervals(draw):
    l = draw(st.integers(LOW, HIGH))
    r = draw(st.integers(l, HIGH))
    return l, r


@given(
    st.lists(st.tuples(intervals(), st.integers(-20, 20)), max_size=15),
    st.lists(intervals(), min_size=1, max_size=10),
)
def test_matches_naive_array(updates, queries):
    tree = DynamicSegmentTree(LOW, HIGH)
    values = {i: 0 for i in range(LOW, HIGH + 1)}
    for (l, r), v in updates:
        tree.update(l, r, v)
        for i in range(l, r + 1):
            values[i] += v
    for l, r in queries:
        assert tree.query(l, r) == sum(values[i] for i in range(l, r + 1))


def test_query_outside_range_is_empty():
    tree = DynamicSegmentTree(0, 10)
    tree.update(0, 10, 4)
    assert tree.query(20, 30) == 0


def test_untouched_tree_sums_to_zero():
    tree = DynamicSegmentTree()
    assert tree.query(-(10**9), 10**9) == 0


def test_inverted_range_rejected():
    with pytest.raises(ValueError):
        DynamicSegmentTree(5, 4)