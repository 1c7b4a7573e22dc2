import numpy as np
import pytest

from monomialorders.matrix import IntMatrix, content, divexact, primitive


def test_from_rows_keeps_large_integers_exact():
    """
    Entries far beyond C long must survive unchanged; the numpy export uses
    object dtype so nothing is truncated.
    """
    huge = 10 ** 100
    M = IntMatrix.from_rows([[huge, 1], [2, -huge]])

    assert M.shape == (2, 2)
    assert M.data[0][0] == huge
    arr = M.to_numpy()
    assert arr.dtype == object
    assert arr[1, 1] == -huge


def test_from_rows_accepts_numpy_arrays():
    M = IntMatrix.from_rows(np.array([[1, 0, 2], [0, 3, 0]], dtype=np.int64))

    assert M.shape == (2, 3)
    assert all(type(x) is int for row in M.data for x in row)
    assert np.array_equal(M.to_numpy().astype(int), np.array([[1, 0, 2], [0, 3, 0]]))


def test_ragged_rows_are_rejected():
    with pytest.raises(ValueError, match="same length"):
        IntMatrix.from_rows([[1, 2], [3]])


def test_non_integer_entries_are_rejected():
    with pytest.raises(ValueError):
        IntMatrix.from_rows([[1.5, 2]])
    with pytest.raises(ValueError):
        IntMatrix.from_rows(np.array([[1.0, 2.0]]))


def test_empty_matrix_keeps_its_width():
    M = IntMatrix.zeros(0, 4)
    assert M.shape == (0, 4)
    assert M.is_zero()
    assert IntMatrix.vcat(M, IntMatrix.ones_row(4)).shape == (1, 4)


def test_identity_and_anti_diagonal():
    assert IntMatrix.identity(3).tolist() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert IntMatrix.anti_diagonal(3).tolist() == [[0, 0, 1], [0, 1, 0], [1, 0, 0]]
    assert (-IntMatrix.identity(2)).tolist() == [[-1, 0], [0, -1]]


def test_hcat_zeros_pads_on_the_right():
    M = IntMatrix.from_rows([[1, 2], [3, 4]]).hcat_zeros(2)
    assert M.tolist() == [[1, 2, 0, 0], [3, 4, 0, 0]]
    assert M.hcat_zeros(0) is M


def test_vcat_and_hcat_check_dimensions():
    A = IntMatrix.identity(2)
    with pytest.raises(ValueError, match="Dimension mismatch"):
        IntMatrix.vcat(A, IntMatrix.ones_row(3))
    with pytest.raises(ValueError, match="Dimension mismatch"):
        IntMatrix.hcat(A, IntMatrix.ones_row(2))
    assert IntMatrix.hcat(A, IntMatrix.zeros(2, 1)).tolist() == [[1, 0, 0], [0, 1, 0]]


def test_zero_row_tests():
    M = IntMatrix.from_rows([[0, 0], [0, 5]])
    assert M.is_zero_row(0)
    assert not M.is_zero_row(1)
    assert not M.is_zero()


def test_content_and_exact_division():
    assert content([4, -6, 8]) == 2
    assert content([0, 0]) == 0
    assert content([-3]) == 3
    assert divexact([4, -6, 8], 2) == (2, -3, 4)
    assert primitive([0, -6, 9]) == (0, -2, 3)
    assert primitive([0, 0]) == (0, 0)
    with pytest.raises(ValueError, match="Exact division"):
        divexact([3, 4], 2)


def test_matrices_are_hashable_values():
    A = IntMatrix.from_rows([[1, 2]])
    B = IntMatrix.from_rows(np.array([[1, 2]]))
    assert A == B
    assert hash(A) == hash(B)
    assert A != IntMatrix.from_rows([[1, 2, 0]])


def test_to_sympy():
    sp = pytest.importorskip("sympy")
    M = IntMatrix.from_rows([[1, 2], [3, 4]])
    assert M.to_sympy() == sp.Matrix([[1, 2], [3, 4]])


def test_flat_vectors_are_not_matrices():
    with pytest.raises(ValueError, match="list of rows"):
        IntMatrix.from_rows([1, 2])
