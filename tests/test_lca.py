import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algobox.lca import LCATree


@st.composite
def _trees(draw):
    n = draw(st.integers(1, 30))
    parents = [None] + [draw(st.integers(0, i - 1)) for i in range(1, n)]
    costs = [0] + [draw(st.integers(0, 100)) for _ in range(1, n)]
    adjacency = [[] for _ in range(n)]
    for child in range(1, n):
        adjacency[parents[child]].append((child, costs[child]))
        adjacency[child].append((parents[child], costs[child]))
    return parents, costs, adjacency


def _ancestors(parents, u):
    chain = [u]
    while parents[chain[-1]] is not None:
        chain.append(parents[chain[-1]])
    return chain


@settings(max_examples=100, deadline=None)
@given(_trees(), st.data())
def test_against_naive_walk(tree, data):
    parents, costs, adjacency = tree
    lca_tree = LCATree(adjacency, 0)
    n = len(parents)
    u = data.draw(st.integers(0, n - 1))
    v = data.draw(st.integers(0, n - 1))
    up_u, up_v = _ancestors(parents, u), _ancestors(parents, v)
    common = next(a for a in up_u if a in up_v)
    assert lca_tree.lca(u, v) == common
    path_costs = [costs[x] for x in up_u[: up_u.index(common)]]
    path_costs += [costs[x] for x in up_v[: up_v.index(common)]]
    assert lca_tree.path_max(u, v) == max(path_costs, default=0)


@settings(max_examples=100, deadline=None)
@given(_trees(), st.data())
def test_kth_ancestor(tree, data):
    parents, _, adjacency = tree
    lca_tree = LCATree(adjacency, 0)
    u = data.draw(st.integers(0, len(parents) - 1))
    chain = _ancestors(parents, u)
    for k, ancestor in enumerate(chain):
        assert lca_tree.kth_ancestor(u, k) == ancestor
    with pytest.raises(ValueError):
        lca_tree.kth_ancestor(u, len(chain))


def test_same_vertex():
    tree = LCATree({"a": [("b", 7)], "b": [("a", 7)]}, "a")
    assert tree.lca("b", "b") == "b"
    assert tree.path_max("b", "b") == 0
    assert tree.path_max("a", "b") == 7


def test_unknown_vertex():
    tree = LCATree([[(1, 3)], [(0, 3)]], 0)
    with pytest.raises(ValueError):
        tree.lca(0, 5)
    with pytest.raises(ValueError):
        LCATree([[(1, 3)], [(0, 3)]], 9)


def test_negative_k_rejected():
    tree = LCATree([[(1, 3)], [(0, 3)]], 0)
    with pytest.raises(ValueError):
        tree.kth_ancestor(1, -1)