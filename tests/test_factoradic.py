from itertools import permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.factoradic import (
    add_permutations,
    factoradic_add,
    factoradic_to_permutation,
    permutation_to_factoradic,
)

perms = st.integers(0, 12).flatmap(lambda n: st.permutations(list(range(n))))


@given(perms)
def test_round_trip(perm):
    assert factoradic_to_permutation(permutation_to_factoradic(perm)) == perm


@given(perms)
def test_digits_respect_radix(perm):
    digits = permutation_to_factoradic(perm)
    n = len(perm)
    assert all(0 <= d <= n - 1 - k for k, d in enumerate(digits))


@pytest.mark.parametrize("n", range(0, 8))
def test_identity_has_zero_digits(n):
    assert permutation_to_factoradic(list(range(n))) == [0] * n


@given(perms)
def test_adding_identity_keeps_permutation(perm):
    assert add_permutations(perm, list(range(len(perm)))) == perm


@pytest.mark.parametrize("n", range(1, 5))
def test_sum_follows_lexicographic_rank(n):
    ordered = [list(p) for p in permutations(range(n))]
    total = len(ordered)
    for i, p in enumerate(ordered):
        for j, q in enumerate(ordered):
            assert add_permutations(p, q) == ordered[(i + j) % total]


@given(perms)
def test_factoradic_add_is_commutative(perm):
    a = permutation_to_factoradic(perm)
    b = permutation_to_factoradic(perm[::-1])
    assert factoradic_add(a, b) == factoradic_add(b, a)


def test_rejects_non_permutation():
    with pytest.raises(ValueError):
        permutation_to_factoradic([0, 0, 1])


def test_rejects_bad_digit():
    with pytest.raises(ValueError):
        factoradic_to_permutation([3, 0, 0])


def test_rejects_length_mismatch():
    with pytest.raises(ValueError):
        add_permutations([0, 1], [0, 1, 2])
    with pytest.raises(ValueError):
        factoradic_add([0], [0, 0])