"""Element-wise helpers, reductions and searches over :class:`Matrix` values."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from itertools import product
from typing import Any

from numlab.matrix import Matrix


@dataclass(frozen=True)
class MatrixDimension:
    """Dimensions of a matrix: rows, columns and values per cell."""

    rows: int
    columns: int
    elem_dim: int = 1


def _cells(mat: Matrix) -> Iterator[tuple[int, int, int]]:
    return product(range(mat.rows), range(mat.columns), range(mat.elements))


def _values(mat: Matrix) -> Iterator[Any]:
    return (mat[i, j, e] for i, j, e in _cells(mat))


def _element_wise(lhs: Matrix, rhs: Matrix, op: Callable[[Any, Any], Any]) -> Matrix:
    lhs.assert_size(rhs)
    out = Matrix(0, lhs.rows, lhs.columns, lhs.elements)
    for i, j, e in _cells(out):
        out[i, j, e] = op(lhs[i, j, e], rhs[i, j, e])
    return out


def _check_element_index(mat: Matrix, elem_index: int) -> None:
    if not 0 <= elem_index < mat.elements:
        raise IndexError(f"element {elem_index} out of range for {mat.elements} elements")


def hadamard_multi(lhs: Matrix, rhs: Matrix) -> Matrix:
    """Element-wise product of two equally sized matrices."""
    return _element_wise(lhs, rhs, lambda a, b: a * b)


def hadamard_div(lhs: Matrix, rhs: Matrix) -> Matrix:
    """Element-wise quotient of two equally sized matrices."""
    return _element_wise(lhs, rhs, lambda a, b: a / b)


def kronecker_multi(lhs: Matrix, rhs: Matrix) -> Matrix:
    """Kronecker product with dimension ``(n1 * n2, m1 * m2)``."""
    if lhs.elements != rhs.elements:
        raise ValueError("element dimension mismatch")
    out = Matrix(0, lhs.rows * rhs.rows, lhs.columns * rhs.columns, rhs.elements)
    for m, n, p, q, e in product(
        range(lhs.rows), range(lhs.columns), range(rhs.rows), range(rhs.columns), range(rhs.elements)
    ):
        out[m * rhs.rows + p, n * rhs.columns + q, e] = lhs[m, n, e] * rhs[p, q, e]
    return out


def horizontal_concat(lhs: Matrix, rhs: Matrix) -> Matrix:
    """Concatenate ``[lhs, rhs]`` side by side."""
    return lhs.horizontal_concat(rhs)


def corr(a: Matrix, b: Matrix) -> int:
    """Number of positions where ``a`` and ``b`` hold equal values."""
    a.assert_size(b)
    return sum(1 for x, y in zip(_values(a), _values(b)) if x == y)


def from_values(values: Sequence[Any], size: MatrixDimension) -> Matrix:
    """Build a matrix of the given size from row-major flat ``values``."""
    expected = size.rows * size.columns * size.elem_dim
    if len(values) < expected:
        raise ValueError(f"need {expected} values, got {len(values)}")
    out = Matrix(0, size.rows, size.columns, size.elem_dim)
    for i, j, e in _cells(out):
        out[i, j, e] = values[out.index(i, j, e)]
    return out


def argmax(mat: Matrix) -> int:
    """Flat storage index of the first largest value."""
    if mat.elements_total() == 0:
        raise ValueError("argmax of an empty matrix")
    best_index, best = 0, None
    for i, j, e in _cells(mat):
        value = mat[i, j, e]
        if best is None or value > best:
            best, best_index = value, mat.index(i, j, e)
    return best_index


def argmin(mat: Matrix) -> int:
    """Flat storage index of the first smallest value."""
    if mat.elements_total() == 0:
        raise ValueError("argmin of an empty matrix")
    best_index, best = 0, None
    for i, j, e in _cells(mat):
        value = mat[i, j, e]
        if best is None or value < best:
            best, best_index = value, mat.index(i, j, e)
    return best_index


def where(
    condition: Callable[[Any], bool], values: Matrix, if_true: Matrix, if_false: Matrix
) -> Matrix:
    """Choose values depending on ``condition``.

    If ``if_true`` is square, every cell becomes the first value of ``if_true``
    or ``if_false``.  Otherwise the result starts as a copy of ``if_true``;
    cells meeting the condition take the input value, the others take the
    corresponding value of ``if_false``.
    """
    if if_true.rows != if_false.rows or if_true.columns != if_false.columns:
        raise ValueError("if_true and if_false must have the same dimensions")
    if if_true.rows == if_true.columns:
        out = Matrix(0, values.rows, values.columns, values.elements)
        for i, j, e in _cells(values):
            out[i, j, e] = if_true[0, 0] if condition(values[i, j, e]) else if_false[0, 0]
        return out
    out = if_true.copy()
    for i, j, e in _cells(values):
        value = values[i, j, e]
        out[i, j, e] = value if condition(value) else if_false[i, j]
    return out


def where_value(values: Matrix, value: Any) -> Matrix:
    """Indices of the vector entries equal to ``value``, in the input's orientation."""
    if not values.is_vector():
        raise ValueError("where_value needs a vector")
    as_row = values.rows < values.columns
    length = values.columns if as_row else values.rows
    found = [i for i in range(length) if (values[0, i] if as_row else values[i, 0]) == value]
    out = Matrix(0, len(found), 1)
    for k, idx in enumerate(found):
        out[k, 0] = idx
    return out.transpose() if as_row else out


def where_true(values: Matrix) -> Matrix:
    """Indices of the vector entries equal to 1."""
    return where_value(values, 1.0)


def where_false(values: Matrix) -> Matrix:
    """Indices of the vector entries equal to 0."""
    return where_value(values, 0.0)


def zip_rows(a: Matrix, b: Matrix) -> list[tuple[Matrix, Matrix]]:
    """Pairs of corresponding rows of ``a`` and ``b`` (first element of each cell)."""
    if b.rows < a.rows:
        raise ValueError("second matrix has fewer rows than the first")
    pairs = []
    for i in range(a.rows):
        row_a = Matrix(0, 1, a.columns)
        row_b = Matrix(0, 1, b.columns)
        for j in range(a.columns):
            row_a[0, j] = a[i, j]
        for j in range(b.columns):
            row_b[0, j] = b[i, j]
        pairs.append((row_a, row_b))
    return pairs


def _reduce_axis(mat: Matrix, axis: int, reducer: Callable[[Matrix, int], Any]) -> Matrix:
    if axis == 0:
        out = Matrix(0, 1, mat.columns)
        for j in range(mat.columns):
            out[0, j] = reducer(mat.get_slice(0, mat.rows - 1, j, j), 0)
    elif axis == 1:
        out = Matrix(0, mat.rows, 1)
        for i in range(mat.rows):
            out[i, 0] = reducer(mat.get_slice(i, i, 0, mat.columns - 1), 0)
    else:
        raise ValueError("axis must be 0 or 1")
    return out


def maximum(mat: Matrix, axis: int | None = None) -> Any:
    """Largest value overall, or per column (axis 0) / per row (axis 1)."""
    if axis is None:
        return max(_values(mat))
    return _reduce_axis(mat, axis, elem_max)


def minimum(mat: Matrix, axis: int | None = None) -> Any:
    """Smallest value overall, or per column (axis 0) / per row (axis 1)."""
    if axis is None:
        return min(_values(mat))
    return _reduce_axis(mat, axis, elem_min)


def elem_max(mat: Matrix, elem_index: int) -> Any:
    """Largest value among the cells' element ``elem_index``."""
    _check_element_index(mat, elem_index)
    return max(mat[i, j, elem_index] for i, j in product(range(mat.rows), range(mat.columns)))


def elem_min(mat: Matrix, elem_index: int) -> Any:
    """Smallest value among the cells' element ``elem_index``."""
    _check_element_index(mat, elem_index)
    return min(mat[i, j, elem_index] for i, j in product(range(mat.rows), range(mat.columns)))


def mean(mat: Matrix, axis: int = -1) -> Matrix:
    """Mean over all values (axis -1, 1x1), down columns (axis 0) or along rows (axis 1)."""
    if axis == -1:
        cells = [mat[i, j] for i, j in product(range(mat.rows), range(mat.columns))]
        if not cells:
            raise ValueError("mean of an empty matrix")
        return Matrix((1.0 / len(cells)) * sum(cells, 0.0), 1, 1)
    if axis == 0:
        if mat.rows == 0:
            raise ValueError("mean of an empty matrix")
        out = Matrix(0.0, 1, mat.columns, mat.elements)
        for i, j, e in _cells(mat):
            out[0, j, e] += mat[i, j, e]
        return (1.0 / mat.rows) * out
    if axis == 1:
        if mat.columns == 0:
            raise ValueError("mean of an empty matrix")
        out = Matrix(0.0, mat.rows, 1, mat.elements)
        for i, j, e in _cells(mat):
            out[i, 0, e] += mat[i, j, e]
        return (1.0 / mat.columns) * out
    raise ValueError("axis must be -1, 0 or 1")


def elem_mean(mat: Matrix, elem_index: int) -> Any:
    """Mean of the cells' element ``elem_index``."""
    _check_element_index(mat, elem_index)
    cells = [mat[i, j, elem_index] for i, j in product(range(mat.rows), range(mat.columns))]
    if not cells:
        raise ValueError("mean of an empty matrix")
    return sum(cells, 0.0) / len(cells)


def diag_elements(mat: Matrix) -> Matrix:
    """Column vector of the diagonal cells."""
    out = Matrix(0, mat.rows, 1, mat.elements)
    for i, e in product(range(mat.rows), range(mat.elements)):
        out[i, 0, e] = mat[i, i, e]
    return out


def unique(mat: Matrix, axis: int = 0) -> Matrix:
    """Distinct rows (axis 0) or columns (axis 1) in order of first appearance."""
    if axis == 0:
        parts = [mat.get_slice(i, i, 0, mat.columns - 1) for i in range(mat.rows)]
    elif axis == 1:
        parts = [mat.get_slice(0, mat.rows - 1, j, j) for j in range(mat.columns)]
    else:
        raise ValueError("axis must be 0 or 1")
    distinct: list[Matrix] = []
    for part in parts:
        if not any(part == seen for seen in distinct):
            distinct.append(part)
    if axis == 0:
        out = Matrix(0, len(distinct), mat.columns, mat.elements)
        for k, part in enumerate(distinct):
            out.set_rows_at(k, part)
    else:
        out = Matrix(0, mat.rows, len(distinct), mat.elements)
        for k, part in enumerate(distinct):
            out.set_slice(0, mat.rows - 1, k, k, part)
    return out