import random

import pytest

from numlab.matrix import Matrix
from numlab.matrix_algebra import determinant, normal_matrix, random_matrix


def _identity(n):
    out = Matrix(0.0, n, n)
    for i in range(n):
        out[i, i] = 1.0
    return out


def test_determinant_two_by_two():
    assert determinant(Matrix.from_rows([[1, 2], [3, 4]])) == -2


def test_determinant_of_identity_is_one():
    for n in (2, 3, 4, 5):
        assert determinant(_identity(n)) == pytest.approx(1.0)


def test_determinant_transpose_invariant():
    m = Matrix.from_rows([[2, -1, 0, 3], [1, 4, 2, 0], [0, 5, -2, 1], [3, 0, 1, 2]])
    assert determinant(m) == pytest.approx(determinant(m.transpose()))


def test_determinant_row_swap_negates():
    m = Matrix.from_rows([[2, -1, 0, 3], [1, 4, 2, 0], [0, 5, -2, 1], [3, 0, 1, 2]])
    swapped = m.copy()
    swapped.set_row(0, m.row(1))
    swapped.set_row(1, m.row(0))
    assert determinant(swapped) == pytest.approx(-determinant(m))


def test_determinant_equal_rows_is_zero():
    m = Matrix.from_rows([[1, 2, 3, 4], [1, 2, 3, 4], [0, 1, 0, 1], [5, 6, 7, 8]])
    assert determinant(m) == pytest.approx(0.0)


def test_determinant_three_by_three_matches_expansion_of_transpose():
    m = Matrix.from_rows([[1, 2, 3], [0, 4, 5], [1, 0, 6]])
    assert determinant(m) == pytest.approx(determinant(m.transpose()))


def test_determinant_of_vector_is_zero():
    assert determinant(Matrix.from_rows([[1, 2, 3]])) == 0


def test_determinant_multi_element_is_zero():
    m = Matrix(1.0, 2, 2, 2)
    assert determinant(m) == 0


def test_determinant_non_square_raises():
    with pytest.raises(ValueError):
        determinant(Matrix(1.0, 2, 3))


def test_random_matrix_dimensions_and_bounds():
    random.seed(3)
    m = random_matrix(4, 5, 2, -2.0, 3.0)
    assert (m.rows, m.columns, m.elements) == (4, 5, 2)
    values = [m[i, j, e] for i in range(4) for j in range(5) for e in range(2)]
    assert all(-2.0 <= v <= 3.0 for v in values)


def test_random_matrix_reproducible_with_seed():
    random.seed(11)
    first = random_matrix(3, 3)
    random.seed(11)
    second = random_matrix(3, 3)
    assert first == second


def test_normal_matrix_odd_columns_raises():
    with pytest.raises(ValueError):
        normal_matrix(2, 3, 0.0, 1.0)


def test_normal_matrix_sample_statistics():
    random.seed(5)
    m = normal_matrix(100, 100, 5.0, 1.0)
    values = [m[i, j] for i in range(100) for j in range(100)]
    avg = sum(values) / len(values)
    var = sum((v - avg) ** 2 for v in values) / len(values)
    assert (m.rows, m.columns) == (100, 100)
    assert avg == pytest.approx(5.0, abs=0.1)
    assert var == pytest.approx(1.0, abs=0.1)