# algobox

A collection of classic algorithms and data structures in plain Python.
The only runtime dependency is `sortedcontainers`.

## Installation

```
pip install algobox
```

## What is inside

- **Number theory** (`algobox.number_theory`): `mod`, `gcd`, `lcm`,
  `extended_euclid` (returns `(d, x, y)`), `mod_inverse`,
  `modular_linear_equation_solver`, `chinese_remainder_pair`,
  `chinese_remainder`, `linear_diophantine`, `fast_pow`. Functions that
  have no answer (a non-invertible element, incompatible congruences, an
  unsolvable equation) raise `ValueError`.
- **Combinatorics** (`algobox.combinatorics`): `binomial_table`,
  `bell_numbers`, `catalan_numbers` (linear time, prime modulus),
  `catalan_numbers_quadratic` (any modulus).
- **Bit tricks** (`algobox.bitmask`): `set_bit`, `clear_bit`, `toggle_bit`,
  `is_on`, `turn_on_last_zero`, `turn_on_last_consecutive_zeroes`,
  `turn_off_last_bit`, `turn_off_last_consecutive_bits`, `low_bit`,
  `set_all`, `modulo`, `is_power_of_two`.
- **Game theory** (`algobox.game_theory`): `mex`, `nim`, `misere`, `nim_k`,
  `xor_prefix`, `xor_range`.
- **Matrices** (`algobox.matrix`): `mat_mult` and `mat_pow` (modulo
  1 000 000 007 by default), `gauss_jordan` returning the solution and the
  determinant, raising `SingularMatrixError` for a singular matrix.
- **FFT** (`algobox.fft`): `fft` for power-of-two lengths, `poly_mul` for
  integer polynomials.
- **Factorial number system** (`algobox.factoradic`):
  `permutation_to_factoradic`, `factoradic_add`,
  `factoradic_to_permutation`, `add_permutations`.
- **Convex hull trick DP** (`algobox.hull_dp`): `min_cost`.
- **Data structures**: `segment_tree.SegmentTree`,
  `segment_tree_2d.SegmentTree2D`, `dynamic_segment_tree.DynamicSegmentTree`,
  `fenwick.FenwickTree`, `dsu.DSU`, `mergesort_tree.MergeSortTree`,
  `trie.Trie`.
- **Strings**: `kmp.prefix_function`, `kmp.find_all`,
  `aho_corasick.AhoCorasick`.
- **Offline queries**: `mo.distinct_in_ranges` (Mo's algorithm).
- **Graphs**: `connectivity.analyze` (cut vertices, bridges, biconnected
  components as a `ConnectivityResult`), `connectivity.bridge_tree`,
  `dsu_on_tree.dsu_on_tree`, `dsu_on_tree.distinct_color_counts`,
  `lca.LCATree` (`kth_ancestor`, `lca`, `path_max`),
  `max_flow.FlowNetwork` (Dinic), `max_flow.ford_fulkerson`.
- **Geometry**: `polygon.signed_area`, `polygon.area`, `polygon.centroid`,
  `rectangles.union_area`, `closest_pair.closest_pair`,
  `segment_intersection.ccw`, `segment_intersection.segments_intersect`,
  `segment_intersection.find_intersection`.

## Examples

```python
from algobox.number_theory import chinese_remainder, mod_inverse
from algobox.kmp import find_all
from algobox.max_flow import FlowNetwork

chinese_remainder([3, 5, 7], [2, 3, 2])   # (23, 105)
mod_inverse(3, 11)                       # 4
find_all("abxababaaba", "aba")           # [3, 5, 8]

net = FlowNetwork(6)
for u, v, c in [(0, 1, 16), (0, 2, 13), (1, 2, 10), (1, 3, 12), (2, 1, 4),
                (2, 4, 14), (3, 2, 9), (3, 5, 20), (4, 3, 7), (4, 5, 4)]:
    net.add_edge(u, v, c)
net.max_flow(0, 5)                       # 23
```

```python
from algobox.segment_tree import SegmentTree

seg = SegmentTree(20, min, 999999)
for i, v in enumerate([5, 9, 1, 4, 8]):
    seg.set(i, v)
seg.build()
seg.query(1, 4)                          # 1
```

## What it does not do

algobox is a library only. It has no command-line programs and reads
nothing from standard input: every function takes its data as arguments
and returns its result.

## Running the tests

```
pip install "algobox[test]"
pytest
```