"""Ascending sort of numeric lists and vectors."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, overload

from numlab.matrix import Matrix


@overload
def sort(values: Matrix) -> Matrix: ...


@overload
def sort(values: Sequence[Any]) -> list[Any]: ...


def sort(values: Matrix | Sequence[Any]) -> Matrix | list[Any]:
    """Sort ascending.

    A sequence gives a sorted list.  A matrix gives its first column sorted
    (its first row if it is wider than tall), in the same orientation.
    """
    if not isinstance(values, Matrix):
        return sorted(values)
    as_row = values.rows < values.columns
    column = values.transpose() if as_row else values
    ordered = sorted(column[i, 0] for i in range(column.rows))
    out = Matrix(0, len(ordered), 1)
    for i, value in enumerate(ordered):
        out[i, 0] = value
    return out.transpose() if as_row else out