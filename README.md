# cpkit

Algorithms and data structures that come up often in competitive programming:
string matching, graphs, modular arithmetic, an order-statistics multiset,
the convex hull trick and plane geometry.

## Installation

```
pip install cpkit
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "cpkit[test]"
pytest
```

## Strings (`cpkit.strings`)

- `prefix_function(s)`: the prefix function. `pi[i]` is the length of the longest proper prefix of `s[:i + 1]` that is also its suffix.
- `z_function(s)`: the Z-array. `z[i]` is the length of the longest common prefix of `s` and `s[i:]`, and `z[0]` is 0.
- `manacher(s)`: returns the pair `(even, odd)` of palindrome radii.
  - `odd[i] = k` means that `s[i - k : i + k + 1]` is the longest odd palindrome centred at `i`.
  - `even[i] = k` means that `s[i - k + 1 : i + k + 1]` is the longest even palindrome centred between `i` and `i + 1`.
- `Trie`: a prefix tree over words made of any characters.
  - `add(word)` records one occurrence of `word`.
  - `count_prefix(prefix)` returns how many recorded words start with `prefix`. The empty prefix counts every word.

```python
from cpkit.strings import prefix_function, Trie

prefix_function("abcabcd")   # [0, 0, 0, 1, 2, 3, 0]

trie = Trie()
trie.add("apple")
trie.add("app")
trie.count_prefix("app")     # 2
trie.count_prefix("b")       # 0
```

## Number theory (`cpkit.numtheory`)

- `Mint(value)`: an integer modulo `MOD` (1 000 000 007).
  - It supports `+`, `-`, `*`, `/` and unary `-`, with other `Mint` values and with plain `int`s.
  - It also provides `pow(exponent)`, where a non-positive exponent gives 1, and `inv()`.
  - Inverting zero, or dividing by zero, raises `ZeroDivisionError`.
  - `int(m)` and `str(m)` give the residue.
- `mod_exp(base, exp, mod)`: modular exponentiation. A non-positive exponent gives 1.
- `ntt(values, invert)`: returns the transform of a list whose length is a power of two. Any other length raises `ValueError`. The input list is not modified.
- `multiply(a, b)`: multiplies two coefficient lists through `ntt`, zero-padded to a power of two, and drops trailing zeros.
- `sieve(limit)`: all primes up to and including `limit`.
- `parse_int128(text)`: parses a non-negative decimal string. Surrounding whitespace is allowed.
  - Text that is not a decimal number raises `ValueError`.
  - A value outside the signed 128-bit range raises `OverflowError`.
- `format_int128(value)`: formats a signed 128-bit integer in decimal. Values outside that range raise `OverflowError`.

```python
from cpkit.numtheory import Mint, sieve

(Mint(2) / Mint(4)) * Mint(2)   # Mint(1)
sieve(20)                       # [2, 3, 5, 7, 11, 13, 17, 19]
```

### Limitations of `ntt` and `multiply`

`ntt` and `multiply` work modulo `MOD` with primitive root 3. This modulus does not provide the power-of-two roots of unity that an exact transform needs. As a result, `multiply` does not in general return the true product of the two polynomials.

## Ordered multiset (`cpkit.ordered_set`)

`OrderedMultiset(iterable=())` is a sorted multiset that keeps duplicates. It supports:

- `add(value)` to insert a value.
- `find_by_order(k)`, which returns the element at zero-based position `k` in sorted order. It raises `IndexError` when `k` is out of range.
- `order_of_key(value)`, which returns the number of elements strictly smaller than `value`.
- `len()`, iteration in sorted order, and `in`.

## Graphs (`cpkit.graphs`)

### `DisjointSetUnion(size)`

A union-find structure with path compression and union by size.

- `make_set(v)`
- `find_set(v)`
- `union_sets(a, b)`
- `size_of(v)`

### `TwoSat(n)`

A 2-SAT solver over the variables `0 .. n-1`.

- `add_disjunction(a, pos_a, b, pos_b)` adds the clause "(a if pos_a else not a) or (b if pos_b else not b)".
- `solve()` returns a list of `n` booleans that satisfies every clause, or `None` when no such assignment exists.

### `HopcroftKarp(nodes)`

Maximum bipartite matching.

- Vertices are numbered `1 .. nodes-1`, and 0 is reserved. Left and right vertices share this numbering.
- `add_edge(u, v)` adds an edge from left vertex `u` to right vertex `v`.
- `max_matching()` returns the size of a maximum matching.

### `BinaryLifting(children, root)`

Ancestor queries on a rooted tree.

- `children` maps each node to its children. It may be a mapping or a list indexed by node.
- `depth(node)` returns the depth of `node`. The root has depth 0.
- `kth_ancestor(node, k)` returns the `k`-th ancestor of `node`, or -1 when `node` is shallower than `k`. A negative `k` raises `ValueError`.
- `lca(u, v)` returns the lowest common ancestor of `u` and `v`.

```python
from cpkit.graphs import BinaryLifting

tree = BinaryLifting({0: [1, 2], 1: [3, 4]}, root=0)
tree.lca(3, 4)           # 1
tree.kth_ancestor(3, 2)  # 0
```

## Convex hull trick (`cpkit.convex_hull_trick`)

`ConvexHullDynamic(is_max)` keeps the upper envelope (when `is_max` is true) or the lower envelope of lines `y = a*x + b`.

- `add_line(a, b)` adds a line. Lines may be added in any order.
- `get_best(x)` returns the maximum or minimum of `a*x + b` over the lines added. It raises `ValueError` if no line has been added.
- `len()` is the number of lines still on the envelope.

## Geometry (`cpkit.point`, `cpkit.geometry`)

### `cpkit.point`

`Point(x, y)` is an immutable 2D vector.

- It supports `+`, `-`, unary `-`, multiplication and division by a scalar, and `abs()` for its length.
- `str()` gives the form `(x,y)`.

The module also provides:

- `dot`, `cross`, `dist2` (squared distance)
- `rotate_ccw90`, `rotate_cw90`, `rotate_ccw(p, t)`
- `angle(v, w)`, which returns a value in [0, pi]

The constants `EPS` (1e-12) and `INF` are used as tolerances.

### `cpkit.geometry`

Lines and segments:

- `lines_parallel`, `lines_collinear`
- `segments_intersect`
- `compute_line_intersection(a, b, c, d)` raises `ValueError` for degenerate or parallel lines.
- `project_point_line`, `project_point_segment`
- `distance_point_segment`
- `distance_point_plane(x, y, z, a, b, c, d)` gives the distance to the plane `ax + by + cz = d`.

Circles:

- `circle_line_intersection(a, b, c, r)` returns a list of 0, 1 or 2 points.
- `circle_circle_intersection(a, b, r, big_r)` returns a list of 0, 1 or 2 points. Coincident circles raise `ValueError`.
- `compute_circle_center(a, b, c)` returns the circumcentre of the three points.

Polygons:

- `signed_area(points)` is positive for a counter-clockwise polygon. `area(points)` is its absolute value.
- `integer_area(points)` returns twice the area, computed exactly. It is meant for integer vertices.
- `pick_area(interior, boundary)` applies Pick's theorem: `S = I + B/2 - 1`.
- `compute_centroid(points)` raises `ValueError` for a polygon of zero area.
- `is_simple(points)` tests whether the polygon's edges meet only at shared vertices.
- `point_in_polygon(polygon, a)` returns -1 when `a` is strictly inside, 0 when it is on the boundary and 1 when it is strictly outside.
- `point_in_convex_polygon(polygon, q)` gives the same answer in O(log n). The polygon must be convex and counter-clockwise.

```python
from cpkit.point import Point
from cpkit.geometry import area, point_in_polygon

square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
area(square)                          # 4.0
point_in_polygon(square, Point(1, 1)) # -1 (strictly inside)
```

## What the package does not do

cpkit is a library only. It has no command-line program, and it does not read contest input or write output. Call the functions from your own code.