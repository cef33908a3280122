"""Constructors and helpers for numerical work on matrices."""

from __future__ import annotations

import math
from collections.abc import Callable

from numlab.matrix import Matrix


def linspace(start: float, end: float, num_elements: int) -> Matrix:
    """Row vector of ``num_elements`` evenly spaced values from ``start`` to ``end``."""
    if num_elements < 0:
        raise ValueError("number of elements must not be negative")
    out = Matrix(0.0, 1, num_elements)
    if num_elements == 1:
        out[0, 0] = start
        return out
    step = (end - start) / (num_elements - 1) if num_elements > 1 else 0.0
    for i in range(num_elements):
        out[0, i] = start + float(i) * step
    return out


def zeros(rows: int, columns: int = 1, elements: int = 1) -> Matrix:
    """Matrix filled with 0.0."""
    return Matrix(0.0, rows, columns, elements)


def ones(rows: int, columns: int = 1, elements: int = 1) -> Matrix:
    """Matrix filled with 1.0."""
    return Matrix(1.0, rows, columns, elements)


def eye(rows: int, columns: int = 0) -> Matrix:
    """Identity-like matrix; ``columns`` of 0 means square."""
    real_columns = columns or rows
    out = zeros(rows, real_columns)
    for i in range(min(rows, real_columns)):
        out[i, i] = 1.0
    return out


def tridiag(rows: int, columns: int, lower: float, center: float, upper: float) -> Matrix:
    """Tridiagonal matrix with the given sub-, main and super-diagonal values."""
    out = zeros(rows, columns)
    for row in range(rows):
        if row > 0:
            out[row, row - 1] = lower
        out[row, row] = center
        if row < rows - 1:
            out[row, row + 1] = upper
    return out


def _euclidean(values: Matrix) -> float:
    return math.sqrt(
        sum(values[i, j] * values[i, j] for i in range(values.rows) for j in range(values.columns))
    )


def norm(values: Matrix, axis: int | None = None) -> float | Matrix:
    """Euclidean norm of all values, or per row (axis 0) / per column (axis 1 or -1)."""
    if axis is None:
        return _euclidean(values)
    if axis == 0:
        out = zeros(values.rows, 1)
        for i in range(values.rows):
            out[i, 0] = _euclidean(values.get_slice(i, i, 0, values.columns - 1))
        return out
    if axis in (1, -1):
        out = zeros(1, values.columns)
        for j in range(values.columns):
            out[0, j] = _euclidean(values.get_slice(0, values.rows - 1, j, j))
        return out
    raise ValueError("axis must be None, -1, 0 or 1")


def zeros_v(rows: int) -> Matrix:
    """Column vector of zeros."""
    return Matrix(0.0, rows, 1)


def argsort(values: Matrix) -> Matrix:
    """Column vector of the row indices that sort the first column ascending (stable)."""
    column = [values[i, 0] for i in range(values.rows)]
    order = sorted(range(len(column)), key=column.__getitem__)
    out = Matrix(0, len(order), 1)
    for position, index in enumerate(order):
        out[position, 0] = index
    return out


def nonzero(validation: Callable[[float], bool], values: Matrix) -> Matrix:
    """Row vector of the indices of vector entries for which ``validation`` holds."""
    if not values.is_vector():
        raise ValueError("nonzero needs a vector")
    column = values.transpose() if values.rows < values.columns else values
    found = [i for i in range(column.rows) if validation(column[i, 0])]
    out = Matrix(0, 1, len(found))
    for k, index in enumerate(found):
        out[0, k] = index
    return out