from collections import Counter

import pytest

from numlab.matrix import Matrix
from numlab.sorting import sort

VALUES = [
    0.29651885541310041,
    0.64581698997155579,
    0.73420390202980546,
    -0.33842438014317311,
    0.73079510849631024,
    -0.90637656297433933,
    -0.58136213318226426,
    -0.12520400256483499,
    0.41344311936636324,
    0.0089382791988343868,
]


def is_ascending(seq):
    return all(a <= b for a, b in zip(seq, seq[1:]))


def test_sort_list_is_ascending_permutation():
    out = sort(VALUES)
    assert is_ascending(out)
    assert Counter(out) == Counter(VALUES)
    assert out[0] == min(VALUES)


def test_sort_list_with_duplicates():
    data = [3, 1, 3, 2, 1]
    out = sort(data)
    assert is_ascending(out)
    assert Counter(out) == Counter(data)


def test_sort_column_vector():
    mat = Matrix.from_rows([[v] for v in VALUES])
    out = sort(mat)
    assert (out.rows, out.columns) == (mat.rows, 1)
    result = [out[i, 0] for i in range(out.rows)]
    assert is_ascending(result)
    assert Counter(result) == Counter(VALUES)


def test_sort_row_vector_keeps_orientation():
    mat = Matrix.from_rows([VALUES])
    out = sort(mat)
    assert (out.rows, out.columns) == (1, len(VALUES))
    result = [out[0, j] for j in range(out.columns)]
    assert is_ascending(result)
    assert Counter(result) == Counter(VALUES)


def test_sort_does_not_modify_input():
    mat = Matrix.from_rows([[3.0], [1.0], [2.0]])
    before = mat.copy()
    sort(mat)
    assert mat == before


def test_sort_matrix_uses_first_column():
    mat = Matrix.from_rows([[3.0, 100.0], [1.0, 200.0], [2.0, 300.0]])
    out = sort(mat)
    assert out == Matrix.from_rows([[1.0], [2.0], [3.0]])


def test_sort_rejects_unorderable():
    with pytest.raises(TypeError):
        sort([1, "a"])