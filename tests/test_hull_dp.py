from itertools import accumulate

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.hull_dp import min_cost


def _brute_force(a, b):
    dp = [0]
    for x in a[1:]:
        dp.append(min(d + x * y for d, y in zip(dp, b)))
    return dp[-1]


@st.composite
def _instances(draw):
    n = draw(st.integers(1, 30))
    steps = draw(st.lists(st.integers(0, 10), min_size=n, max_size=n))
    a = list(accumulate(steps))
    b = sorted(draw(st.sets(st.integers(-500, 500), min_size=n, max_size=n)), reverse=True)
    return a, b


@given(_instances())
def test_matches_brute_force(instance):
    a, b = instance
    assert min_cost(a, b) == _brute_force(a, b)


def test_single_element_costs_nothing():
    assert min_cost([7], [3]) == 0


def test_classic_shape():
    a = [1, 2, 3, 10, 20, 30]
    b = [6, 5, 4, 3, 2, 0]
    assert min_cost(a, b) == _brute_force(a, b)


@pytest.mark.parametrize(
    "a, b",
    [
        ([], []),
        ([1, 2], [3]),
        ([3, 2], [5, 1]),
        ([1, 2], [1, 1]),
    ],
)
def test_invalid_input(a, b):
    with pytest.raises(ValueError):
        min_cost(a, b)