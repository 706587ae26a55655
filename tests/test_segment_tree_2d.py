import pytest
from hypothesis import given, strategies as st

from algobox.segment_tree_2d import SegmentTree2D


def _filled(grid):
    tree = SegmentTree2D(len(grid))
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            tree.set(i, j, value)
    tree.build()
    return tree


@st.composite
def grids(draw):
    size = draw(st.integers(1, 6))
    row = st.lists(st.integers(-50, 50), min_size=size, max_size=size)
    return draw(st.lists(row, min_size=size, max_size=size))


@given(grids(), st.data())
def test_query_matches_naive_sum(grid, data):
    size = len(grid)
    tree = _filled(grid)
    u = data.draw(st.integers(0, size - 1))
    d = data.draw(st.integers(u, size - 1))
    l = data.draw(st.integers(0, size - 1))
    r = data.draw(st.integers(l, size - 1))
    expected = sum(sum(row[l : r + 1]) for row in grid[u : d + 1])
    assert tree.query(u, d, l, r) == expected


@given(grids(), st.data())
def test_query_row_matches_slice(grid, data):
    size = len(grid)
    tree = _filled(grid)
    row = data.draw(st.integers(0, size - 1))
    l = data.draw(st.integers(0, size - 1))
    r = data.draw(st.integers(l, size - 1))
    assert tree.query_row(row, l, r) == sum(grid[row][l : r + 1])


def test_whole_grid_equals_total():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    tree = _filled(grid)
    assert tree.query(0, 2, 0, 2) == sum(map(sum, grid))


def test_out_of_range_index_raises():
    tree = SegmentTree2D(3)
    with pytest.raises(IndexError):
        tree.set(3, 0, 1)
    with pytest.raises(IndexError):
        tree.query(0, 3, 0, 0)


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        SegmentTree2D(0)