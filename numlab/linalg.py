"""Direct solvers: backward substitution and Gauss-Jordan inversion."""

from __future__ import annotations

from numlab.matrix import Matrix
from numlab.numerics import eye, zeros


def backward_sub(r: Matrix, b: Matrix) -> Matrix:
    """Solve ``r @ x = b`` for upper triangular ``r`` by backward substitution.

    If the last diagonal entry is zero the last row of the result stays zero.
    """
    m, n = r.rows, r.columns
    v, nv = b.rows, b.columns
    if v != m:
        raise ValueError("matrix and right-hand side dimensions do not match")
    if m != n:
        raise ValueError("coefficient matrix is not square")
    if m == 0:
        raise ValueError("coefficient matrix is empty")

    x = zeros(v, nv)
    last = r[m - 1, n - 1]
    if last != 0:
        x.set_row(v - 1, b.row(v - 1) * (1 / last))

    for j in reversed(range(m - 1)):
        s_k = sum((r[j, k] * x[k, 0] for k in range(j + 1, m)), 0.0)
        for i in range(nv):
            x[j, i] = (b[j, i] - s_k) / r[j, j]
    return x


def _swap_rows(mat: Matrix, a: int, b: int) -> None:
    for j in range(mat.columns):
        mat[a, j], mat[b, j] = mat[b, j], mat[a, j]


def gauss_jordan(a: Matrix) -> Matrix:
    """Inverse of the square matrix ``a`` by Gauss-Jordan elimination."""
    n = a.columns
    if a.rows != n:
        raise ValueError("Gauss-Jordan inversion needs a square matrix")
    if n == 0:
        raise ValueError("cannot invert an empty matrix")
    mat = a.horizontal_concat(eye(a.rows, n))
    width = 2 * n

    for i in range(n - 1, 1, -1):
        if mat[i - 1, 1] < mat[i, 1]:
            _swap_rows(mat, i, i - 1)

    for i in range(n):
        for j in range(n):
            if j != i:
                factor = mat[j, i] / mat[i, i]
                for k in range(width):
                    mat[j, k] -= mat[i, k] * factor
        pivot = mat[i, i]
        for k in range(width):
            mat[i, k] = mat[i, k] / pivot

    return mat.get_slice(0, mat.rows - 1, n, mat.columns - 1)