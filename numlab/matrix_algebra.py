"""Determinants and randomly filled matrices."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import Any

from numlab.matrix import Matrix


def _det(rows: Sequence[Sequence[Any]]) -> Any:
    n = len(rows)
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    if n == 3:
        a = rows
        return (
            a[0][0] * a[1][1] * a[2][2]
            + a[0][1] * a[1][2] * a[2][0]
            + a[0][2] * a[1][0] * a[2][1]
            - a[0][2] * a[1][1] * a[2][0]
            - a[0][1] * a[1][0] * a[2][2]
            - a[0][0] * a[1][2] * a[2][1]
        )
    total = 0.0
    for c, pivot in enumerate(rows[0]):
        minor = [list(row[:c]) + list(row[c + 1 :]) for row in rows[1:]]
        sign = -1.0 if c % 2 else 1.0
        total += sign * pivot * _det(minor)
    return total


def determinant(mat: Matrix) -> Any:
    """Determinant by cofactor expansion along the first row.

    Matrices with a single row or column, or with several elements per cell,
    have no determinant and give 0.
    """
    if mat.rows < 2 or mat.columns < 2 or mat.elements != 1:
        return 0.0
    if mat.rows != mat.columns:
        raise ValueError("determinant needs a square matrix")
    rows = [[mat[i, j] for j in range(mat.columns)] for i in range(mat.rows)]
    return _det(rows)


def random_matrix(
    rows: int,
    columns: int,
    element_size: int = 1,
    min_value: float = 0.0,
    max_value: float = 1.0,
) -> Matrix:
    """Matrix filled with uniformly distributed values in ``[min_value, max_value]``."""
    out = Matrix(0.0, rows, columns, element_size)
    for i in range(rows):
        for j in range(columns):
            for e in range(element_size):
                out[i, j, e] = random.uniform(min_value, max_value)
    return out


def normal_matrix(rows: int, columns: int, mu: float, sigma: float) -> Matrix:
    """Matrix of normally distributed values (Box-Muller); ``columns`` must be even."""
    if columns % 2 != 0:
        raise ValueError("the number of columns must be even")
    out = Matrix(0.0, rows, columns)
    for flat in range(0, rows * columns, 2):
        u1 = 1.0 - random.random()
        u2 = random.random()
        magnitude = sigma * math.sqrt(-2.0 * math.log(u1))
        angle = 2.0 * math.pi * u2
        row, column = divmod(flat, columns)
        out[row, column] = magnitude * math.cos(angle) + mu
        out[row, column + 1] = magnitude * math.sin(angle) + mu
    return out