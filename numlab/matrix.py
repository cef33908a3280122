"""Dense row-major matrices whose cells may each hold several elements."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from itertools import product
from numbers import Number
from typing import Any


def _is_scalar(value: Any) -> bool:
    return isinstance(value, Number)


class Matrix:
    """A ``rows`` x ``columns`` matrix where every cell holds ``elements`` values.

    Values are stored row-major; within a cell the element values are
    contiguous.  Access a single value with ``m[row, column]`` or
    ``m[row, column, element]``; ``m[row]`` returns a copy of that row.
    """

    __slots__ = ("rows", "columns", "elements", "_data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = 0.0, rows: int = 0, columns: int = 0, elements: int = 1) -> None:
        if rows < 0 or columns < 0 or elements < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.columns = columns
        self.elements = elements
        self._data: list[Any] = [value] * (rows * columns * elements)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> Matrix:
        """Build a matrix from nested rows of scalars or of element sequences."""
        rows = [list(r) for r in rows]
        if not rows or not rows[0]:
            raise ValueError("cannot build a matrix from empty rows")
        columns = len(rows[0])
        if any(len(r) != columns for r in rows):
            raise ValueError("all rows must have the same number of columns")
        multi = not _is_scalar(rows[0][0])
        if multi:
            cells = [list(cell) for r in rows for cell in r]
            elements = len(cells[0])
            if elements == 0 or any(len(c) != elements for c in cells):
                raise ValueError("all cells must have the same number of elements")
            data = [v for cell in cells for v in cell]
        else:
            elements = 1
            data = [v for r in rows for v in r]
            if not all(_is_scalar(v) for v in data):
                raise ValueError("rows mix scalars and element sequences")
        out = cls(0.0, len(rows), columns, elements)
        out._data = data
        return out

    @classmethod
    def _filled(cls, rows: int, columns: int, elements: int, data: list[Any]) -> Matrix:
        out = cls(0.0, 0, 0, 0)
        out.rows, out.columns, out.elements = rows, columns, elements
        out._data = data
        return out

    def _cells(self) -> Iterator[tuple[int, int, int]]:
        return product(range(self.rows), range(self.columns), range(self.elements))

    def _check(self, row: int, column: int, elem: int) -> None:
        if not (0 <= row < self.rows and 0 <= column < self.columns and 0 <= elem < self.elements):
            raise IndexError(
                f"index ({row}, {column}, {elem}) out of range for "
                f"{self.rows}x{self.columns}x{self.elements} matrix"
            )

    def elements_total(self) -> int:
        """Total number of stored values."""
        return self.rows * self.columns * self.elements

    def copy(self) -> Matrix:
        """Deep copy of this matrix."""
        return Matrix._filled(self.rows, self.columns, self.elements, list(self._data))

    def transpose(self) -> Matrix:
        """Matrix with rows and columns swapped; cell elements are preserved."""
        out = Matrix(0, self.columns, self.rows, self.elements)
        for i, j, e in self._cells():
            out._data[out.index(j, i, e)] = self._data[self.index(i, j, e)]
        return out

    def horizontal_concat(self, other: Matrix) -> Matrix:
        """Concatenate ``[self, other]`` side by side."""
        if self.rows != other.rows or self.elements != other.elements:
            raise ValueError("horizontal concatenation needs equal rows and elements")
        out = Matrix(0, self.rows, self.columns + other.columns, self.elements)
        for i, j, e in out._cells():
            if j < self.columns:
                out._data[out.index(i, j, e)] = self._data[self.index(i, j, e)]
            else:
                out._data[out.index(i, j, e)] = other._data[other.index(i, j - self.columns, e)]
        return out

    def is_vector(self) -> bool:
        """True if the matrix has a single row or a single column."""
        return self.columns == 1 or self.rows == 1

    def assert_size(self, other: Matrix) -> None:
        """Raise ValueError unless ``other`` has exactly the same dimensions."""
        if (self.rows, self.columns, self.elements) != (other.rows, other.columns, other.elements):
            raise ValueError(
                f"dimension mismatch: {self.rows}x{self.columns}x{self.elements} vs "
                f"{other.rows}x{other.columns}x{other.elements}"
            )

    def element_wise_compare(self, other: Matrix) -> bool:
        """True if every stored value equals its counterpart in ``other``."""
        self.assert_size(other)
        return all(a == b for a, b in zip(self._data, other._data))

    def apply(self, fun: Callable[[Any], Any]) -> Matrix:
        """New matrix with ``fun`` applied to every value."""
        return Matrix._filled(self.rows, self.columns, self.elements, [fun(v) for v in self._data])

    def hadamard_multi(self, other: Matrix) -> Matrix:
        """Multiply element-wise by ``other`` in place and return self."""
        self.assert_size(other)
        self._data = [a * b for a, b in zip(self._data, other._data)]
        return self

    def sum_elements(self) -> Any:
        """Sum of all stored values."""
        return sum(self._data, 0.0)

    def sum(self, axis: int) -> Matrix:
        """Sums per row (axis 0, column vector) or per column (axis 1, row vector)."""
        if axis == 0:
            out = Matrix(0, self.rows, 1)
            for i in range(self.rows):
                out[i, 0] = self.get_slice(i, i, 0, self.columns - 1).sum_elements()
        elif axis == 1:
            out = Matrix(0, 1, self.columns)
            for j in range(self.columns):
                out[0, j] = self.get_slice(0, self.rows - 1, j, j).sum_elements()
        else:
            raise ValueError("axis must be 0 or 1")
        return out

    def row(self, index: int) -> Matrix:
        """Copy of the row with the given index."""
        return self.get_slice(index)

    def _vector_layout(self, other: Matrix, expected: int) -> bool:
        in_columns = other.columns > other.rows
        count = other.columns if in_columns else other.rows
        if count != expected:
            raise ValueError(f"vector of length {count} does not fit length {expected}")
        if other.elements != self.elements:
            raise ValueError("element dimension mismatch")
        return in_columns

    def set_column(self, index: int, other: Matrix) -> None:
        """Overwrite column ``index`` with the values of vector ``other``."""
        if not 0 <= index < self.columns:
            raise IndexError(f"column {index} out of range")
        in_columns = self._vector_layout(other, self.rows)
        for i, e in product(range(self.rows), range(self.elements)):
            src = other.index(0, i, e) if in_columns else other.index(i, 0, e)
            self._data[self.index(i, index, e)] = other._data[src]

    def set_row(self, index: int, other: Matrix) -> None:
        """Overwrite row ``index`` with the values of vector ``other``."""
        if not 0 <= index < self.rows:
            raise IndexError(f"row {index} out of range")
        in_columns = self._vector_layout(other, self.columns)
        for j, e in product(range(self.columns), range(self.elements)):
            src = other.index(0, j, e) if in_columns else other.index(j, 0, e)
            self._data[self.index(index, j, e)] = other._data[src]

    def resize(self, rows: int, columns: int, elements: int = 1) -> None:
        """Change dimensions, keeping the leading stored values and zero-filling the rest."""
        if rows < 0 or columns < 0 or elements < 0:
            raise ValueError("matrix dimensions must not be negative")
        total = rows * columns * elements
        kept = self._data[:total]
        self._data = kept + [0.0] * (total - len(kept))
        self.rows, self.columns, self.elements = rows, columns, elements

    def index(self, row: int, column: int, elem: int = 0) -> int:
        """Position of a value in the row-major storage."""
        return elem + column * self.elements + row * self.columns * self.elements

    def get_slice(
        self,
        row_start: int,
        row_end: int | None = None,
        col_start: int = 0,
        col_end: int | None = None,
    ) -> Matrix:
        """Sub-matrix of the inclusive row and column ranges."""
        row_end = row_start if row_end is None else row_end
        col_end = self.columns - 1 if col_end is None else col_end
        if row_end < row_start or col_end < col_start:
            raise ValueError("slice end lies before slice start")
        if row_start < 0 or col_start < 0 or row_end >= self.rows or col_end >= self.columns:
            raise IndexError("slice out of range")
        num_rows = row_end - row_start + 1
        num_cols = col_end - col_start + 1
        out = Matrix(0, num_rows, num_cols, self.elements)
        for i, j, e in out._cells():
            out._data[out.index(i, j, e)] = self._data[self.index(row_start + i, col_start + j, e)]
        return out

    def set_slice(
        self,
        row_start: int,
        row_end: int,
        col_start: int,
        col_end: int,
        values: Matrix,
    ) -> None:
        """Overwrite the inclusive block with ``values`` of matching size."""
        num_rows = row_end - row_start + 1
        num_cols = col_end - col_start + 1
        if num_rows != values.rows or num_cols != values.columns:
            raise ValueError("slice dimensions do not match the given values")
        if values.elements != self.elements:
            raise ValueError("element dimension mismatch")
        if row_start < 0 or col_start < 0 or row_end >= self.rows or col_end >= self.columns:
            raise IndexError("slice out of range")
        for i, j, e in values._cells():
            self._data[self.index(row_start + i, col_start + j, e)] = values._data[values.index(i, j, e)]

    def set_rows_at(self, row_start: int, values: Matrix) -> None:
        """Overwrite rows from ``row_start`` on with ``values``, left aligned."""
        self.set_slice(row_start, row_start + values.rows - 1, 0, values.columns - 1, values)

    def get_components(self, index: int) -> Matrix:
        """Single-element matrix holding the element ``index`` of every cell."""
        if not 0 <= index < self.elements:
            raise IndexError(f"element {index} out of range")
        out = Matrix(0, self.rows, self.columns, 1)
        for i, j in product(range(self.rows), range(self.columns)):
            out._data[out.index(i, j)] = self._data[self.index(i, j, index)]
        return out

    def get_slices_by_index(self, indices: Matrix) -> Matrix:
        """Rows selected by the row indices held in vector ``indices``."""
        if not indices.is_vector():
            raise ValueError("indices must be a vector")
        column = indices if indices.rows > indices.columns else indices.transpose()
        out = Matrix(0, column.rows, self.columns, self.elements)
        for i in range(column.rows):
            out.set_rows_at(i, self.get_slice(int(column[i, 0])))
        return out

    def __getitem__(self, key: int | tuple[int, ...]) -> Any:
        if isinstance(key, tuple):
            if len(key) not in (2, 3):
                raise TypeError("index with (row, column) or (row, column, element)")
            row, column, elem = (*key, 0) if len(key) == 2 else key
            self._check(row, column, elem)
            return self._data[self.index(row, column, elem)]
        if isinstance(key, int):
            return self.row(key)
        raise TypeError("unsupported index type")

    def __setitem__(self, key: int | tuple[int, ...], value: Any) -> None:
        if isinstance(key, tuple):
            if len(key) not in (2, 3):
                raise TypeError("index with (row, column) or (row, column, element)")
            row, column, elem = (*key, 0) if len(key) == 2 else key
            self._check(row, column, elem)
            self._data[self.index(row, column, elem)] = value
        elif isinstance(key, int):
            self.set_row(key, value)
        else:
            raise TypeError("unsupported index type")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.element_wise_compare(other)

    def __lt__(self, other: Matrix) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.assert_size(other)
        return all(a <= b for a, b in zip(self._data, other._data))

    def __gt__(self, other: Matrix) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.assert_size(other)
        return all(a >= b for a, b in zip(self._data, other._data))

    def _broadcast(self, vector: Matrix, op: Callable[[Any, Any], Any]) -> Matrix:
        row_wise = vector.rows > vector.columns
        if row_wise and vector.rows != self.rows:
            raise ValueError("column vector length must equal the number of rows")
        if not row_wise and vector.columns != self.columns:
            raise ValueError("row vector length must equal the number of columns")
        if vector.elements != self.elements:
            raise ValueError("element dimension mismatch")
        out = Matrix(0, self.rows, self.columns, self.elements)
        for i, j, e in self._cells():
            other = vector._data[vector.index(i, 0, e) if row_wise else vector.index(0, j, e)]
            out._data[out.index(i, j, e)] = op(self._data[self.index(i, j, e)], other)
        return out

    def _zip_with(self, other: Matrix, op: Callable[[Any, Any], Any]) -> Matrix:
        self.assert_size(other)
        data = [op(a, b) for a, b in zip(self._data, other._data)]
        return Matrix._filled(self.rows, self.columns, self.elements, data)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.is_vector() and not self.is_vector():
            return self._broadcast(other, lambda a, b: a + b)
        return self._zip_with(other, lambda a, b: a + b)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.is_vector() and not self.is_vector():
            return self._broadcast(other, lambda a, b: a - b)
        return self._zip_with(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.apply(lambda a: a * other)
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.columns == other.rows and self.elements == other.elements:
            out = Matrix(0.0, self.rows, other.columns, other.elements)
            for i, j, e in out._cells():
                out._data[out.index(i, j, e)] = sum(
                    (self._data[self.index(i, k, e)] * other._data[other.index(k, j, e)] for k in range(other.rows)),
                    0.0,
                )
            return out
        if not (other.is_vector() and not self.is_vector()):
            raise ValueError("matrices are not compatible for multiplication")
        return self._broadcast(other, lambda a, b: a * b)

    def __rmul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.apply(lambda a: a * other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.apply(lambda a: a / other)
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.is_vector():
            return self._broadcast(other, lambda a, b: a / b)
        return self * (1.0 / other)

    def __rtruediv__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.apply(lambda a: other / a)
        return NotImplemented

    def __str__(self) -> str:
        def cell(i: int, j: int) -> str:
            text = ", ".join(format(self._data[self.index(i, j, e)], ".17g") for e in range(self.elements))
            return f"( {text} )" if self.elements > 1 else text

        lines = ("\t" + ", ".join(cell(i, j) for j in range(self.columns)) + "\n" for i in range(self.rows))
        return "[\n" + "".join(lines) + "]\n"

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, columns={self.columns}, elements={self.elements})"