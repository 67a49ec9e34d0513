# sparsela

Sparse linear-algebra building blocks in plain Python. The package has no
third-party dependencies.

## Modules

- `sparsela.stack`: `DStack` is a fixed-capacity double stack for graph
  traversals in sparse solves. Its left stack grows from the start of the
  storage and its right stack grows from the end.
  - A capacity below 2 raises `ValueError`.
  - A push that would make the two stacks overlap raises `IndexError`.
  - Popping an empty side returns `None`.
  - The module also has the `Enter` / `Exit` markers and `extract_stack_val`,
    which returns the value a marker carries.
- `sparsela.sparse_iter`: merging iterators over `(index, value)` streams
  whose indices are strictly increasing.
  - `nnz_or_zip` yields `Both`, `Left` or `Right` items in index order.
  - `nnz_zip` yields `(index, left, right)` for the indices present on both
    sides.
  - `sparse_dot` returns the dot product of two such streams.
  - `merge_binop` applies an operation over the union of both patterns. A
    missing entry is replaced by that side's zero.
- `sparsela.vector`: `CsVec` is a sparse vector of a given dimension, stored
  as strictly increasing indices and their values.
  - Construction checks the structure and raises `StructureError`, a
    `ValueError` subclass whose `kind` is `"out_of_range"`,
    `"size_mismatch"` or `"unsorted"`.
  - `CsVec.from_unsorted` sorts the indices together with their values before
    building the vector.
  - It supports `dot` (sparse or dense right-hand side) and `dot_dense`.
  - Its operators are `+`, `-`, unary `-`, `*=` and `/=`. Integer division
    truncates toward zero.
  - It also has `to_dense`, `scatter`, `to_set`, `map` and `map_inplace`.
  - `get` returns the stored value or `None`. `nnz_index` returns an
    `NnzIndex` or `None`.
  - Indexing with `[]` accepts a dimension index or an `NnzIndex`. It raises
    `IndexError` where nothing is stored.
- `sparsela.vector_math`: functions on a `CsVec`.
  - `squared_l2_norm`, `l2_norm` and `l1_norm`.
  - `norm(vec, p)` handles `inf`, `-inf`, `0` and finite `p`.
  - `unit_normalize` divides the vector by its L2 norm in place and leaves a
    zero vector unchanged.
  - `abs_diff_eq` compares two vectors within `epsilon`, treating missing
    entries as zero.
- `sparsela.triplet`: `CompressedMatrix` is a validated CSR or CSC matrix
  (see `CompressedStorage`).
  - `outer_iterator` yields each row or column as a `CsVec`.
  - `triplets` returns the entries as a `TripletIter`.
  - `to_other_storage` converts between CSR and CSC.
  - `TripletIter` holds row, column and value lists. It converts into a
    compressed matrix with `to_csr`, `to_csc` or `to_cs`, summing duplicate
    coordinates.
- `sparsela.visu`: views of a matrix's non-zero pattern.
  - `nnz_pattern` returns a text pattern with one `|...|` line per row.
  - `print_nnz_pattern` prints that pattern.
  - `nnz_image` returns a list of rows with 0 for stored entries and 255
    elsewhere.

## Installation

```
pip install .
```

## Examples

```python
from sparsela.vector import CsVec

a = CsVec(8, [0, 2, 5, 6], [1.0] * 4)
b = CsVec(8, [1, 3, 5], [2.0] * 3)
total = a + b
print(list(total))       # [(0, 1.0), (1, 2.0), (2, 1.0), (3, 2.0), (5, 3.0), (6, 1.0)]
print(a.dot(b))          # 2.0
```

```python
from sparsela.triplet import CompressedMatrix
from sparsela.visu import nnz_pattern

mat = CompressedMatrix.new_csc((3, 3), [0, 1, 3, 4], [1, 0, 2, 2], [1.0] * 4)
print(nnz_pattern(mat), end="")
# | x |
# |x  |
# | xx|
```

## What it does not do

The package has:

- no matrix–matrix or matrix–vector products;
- no factorizations (LU, Cholesky or LDLᵀ);
- no fill-reducing orderings;
- no linear solvers.

It is a library only and installs no command.

## Running the tests

```
pip install .[test]
pytest
```