# numlab

A small pure-Python numerics toolkit built around a dense `Matrix` type.
Each matrix cell can hold one or more values ("elements"), so a matrix
describes a `rows × columns × elements` block of numbers. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `numlab.matrix`

The `Matrix` class.

- Construction: `Matrix(value, rows, columns, elements)` fills every value
  with `value`; `Matrix.from_rows([[1, 2], [3, 4]])` builds from nested rows,
  and `Matrix.from_rows([[[1, 2], [3, 4]]])` builds cells of several elements.
- Attributes `rows`, `columns`, `elements`; `elements_total()`.
- Access: `m[row, column]`, `m[row, column, elem]` (bounds-checked, raising
  `IndexError`); `m[row]` returns a copy of that row and `m[row] = vector`
  overwrites it.
- Shape work: `copy`, `transpose`, `resize`, `horizontal_concat`,
  `get_slice` / `set_slice` (inclusive ranges), `set_rows_at`, `row`,
  `set_row`, `set_column`, `get_components`, `get_slices_by_index`, `index`.
- Reductions and mapping: `apply`, `sum_elements`, `sum(axis)` (axis 0 gives
  per-row sums, axis 1 per-column sums), `hadamard_multi` (in place).
- Arithmetic: `+` and `-` work element-wise, or broadcast a row/column vector
  over a non-vector matrix; `*` is matrix multiplication (per element layer),
  scalar scaling, or vector broadcasting; `/` divides by a scalar, a vector
  (broadcast), or a scalar by a matrix element-wise.
- Comparison: `==` compares all values; `<` and `>` hold when every value is
  `<=` / `>=` its counterpart. Mismatched sizes raise `ValueError`.
- `str(m)` gives a bracketed, tab-indented listing with 17 significant digits.

### `numlab.matrix_algebra`

- `determinant(mat)`: cofactor expansion; matrices with a single row or
  column, or several elements per cell, give `0.0`; other non-square
  matrices raise `ValueError`.
- `random_matrix(rows, columns, element_size, min_value, max_value)`:
  uniformly distributed values.
- `normal_matrix(rows, columns, mu, sigma)`: normally distributed values
  (Box-Muller); `columns` must be even.

### `numlab.matrix_utils`

`MatrixDimension`, `hadamard_multi`, `hadamard_div`, `kronecker_multi`,
`horizontal_concat`, `corr` (count of equal positions), `from_values`,
`argmax` / `argmin` (flat storage index), `where`, `where_value`,
`where_true`, `where_false`, `zip_rows`, `maximum` / `minimum` (overall, or
per column with axis 0 and per row with axis 1), `elem_max`, `elem_min`,
`mean` (axis -1, 0 or 1), `elem_mean`, `diag_elements`, `unique` (distinct
rows or columns in order of first appearance).

### `numlab.sorting`

`sort(values)`: a sequence gives a sorted list; a matrix gives its first
column (or first row, if wider than tall) sorted ascending in the same
orientation.

### `numlab.numerics`

`linspace` (row vector), `zeros`, `ones`, `eye` (columns of 0 means square),
`tridiag`, `norm` (Euclidean norm overall, per row with axis 0, per column
with axis 1 or -1), `zeros_v`, `argsort` (stable, column vector of indices),
`nonzero` (row vector of indices where a predicate holds).

### `numlab.textutils`

`strip` removes all spaces, `split` splits by a delimiter or into
characters, `split_by_regex` tokenizes into pieces and separator runs.

### `numlab.ds_utils`

`relu`, `sigmoid`, `sigmoid_matrix`, `accuracy`.

### `numlab.linalg`

`backward_sub(r, b)` solves an upper triangular system; `gauss_jordan(a)`
returns the inverse of a square matrix.

### `numlab.ode`

`explicit_euler(fun, t_interval, y0, h)` integrates `y' = fun(t, y)` from a
row vector `y0` and returns an `ODEResult` with `y` (one row per step) and
`t`. A step width of 0 splits the interval into 1000 steps.

## Example

```python
from numlab.matrix import Matrix
from numlab.numerics import eye, linspace
from numlab.linalg import gauss_jordan

a = Matrix.from_rows([[4.0, 7.0], [2.0, 6.0]])
inverse = gauss_jordan(a)
print(a * inverse)          # close to the identity
print(eye(2))

x = linspace(0.0, 1.0, 3)   # 1 x 3 row vector: 0.0, 0.5, 1.0
print(x[0, 1])              # 0.5
```

Solving `y' = y` with the explicit Euler method:

```python
from numlab.matrix import Matrix
from numlab.ode import explicit_euler

result = explicit_euler(lambda t, y: y, [0.0, 1.0], Matrix.from_rows([[1.0]]), 0.001)
print(result.y[result.y.rows - 1, 0])   # roughly e
```

## What it does not do

numlab is a library only: it has no command-line tool, no plotting and no
reading or writing of data files. Its only ODE solver is the explicit Euler
method, and its linear solvers are limited to backward substitution and
Gauss-Jordan inversion; there are no iterative or implicit solvers.