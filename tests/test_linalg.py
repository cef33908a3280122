import pytest

from numlab.linalg import backward_sub, gauss_jordan
from numlab.matrix import Matrix
from numlab.numerics import eye


def _assert_close(actual, expected):
    assert (actual.rows, actual.columns) == (expected.rows, expected.columns)
    for i in range(actual.rows):
        for j in range(actual.columns):
            assert actual[i, j] == pytest.approx(expected[i, j], abs=1e-9)


def test_backward_sub_solves_upper_triangular_system():
    r = Matrix.from_rows([[2.0, 1.0, -1.0], [0.0, 3.0, 2.0], [0.0, 0.0, 4.0]])
    b = Matrix.from_rows([[1.0], [7.0], [8.0]])
    x = backward_sub(r, b)
    _assert_close(r * x, b)


def test_backward_sub_identity_returns_rhs():
    b = Matrix.from_rows([[5.0], [-2.0], [0.5]])
    _assert_close(backward_sub(eye(3), b), b)


def test_backward_sub_zero_last_pivot_leaves_zero():
    r = Matrix.from_rows([[1.0, 1.0], [0.0, 0.0]])
    b = Matrix.from_rows([[3.0], [5.0]])
    x = backward_sub(r, b)
    assert x[1, 0] == 0.0
    assert x[0, 0] == 3.0


def test_backward_sub_dimension_mismatch():
    r = eye(3)
    with pytest.raises(ValueError):
        backward_sub(r, Matrix.from_rows([[1.0], [2.0]]))


def test_backward_sub_non_square():
    r = Matrix.from_rows([[1.0, 2.0, 3.0], [0.0, 1.0, 2.0]])
    with pytest.raises(ValueError):
        backward_sub(r, Matrix.from_rows([[1.0], [2.0]]))


def test_gauss_jordan_two_by_two_inverse():
    a = Matrix.from_rows([[4.0, 7.0], [2.0, 6.0]])
    inv = gauss_jordan(a)
    _assert_close(a * inv, eye(2))
    _assert_close(inv * a, eye(2))


def test_gauss_jordan_three_by_three_inverse():
    a = Matrix.from_rows([[2.0, 1.0, 1.0], [1.0, 3.0, 2.0], [1.0, 0.0, 0.0]])
    inv = gauss_jordan(a)
    _assert_close(a * inv, eye(3))


def test_gauss_jordan_single_value():
    inv = gauss_jordan(Matrix.from_rows([[4.0]]))
    assert inv[0, 0] == pytest.approx(0.25)


def test_gauss_jordan_identity_is_own_inverse():
    _assert_close(gauss_jordan(eye(4)), eye(4))


def test_gauss_jordan_rejects_non_square():
    with pytest.raises(ValueError):
        gauss_jordan(Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]))