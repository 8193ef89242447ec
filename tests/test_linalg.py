import numpy as np
import pytest

from bayreg.stats.errors import DimensionMismatchError, SingularMatrixError
from bayreg.stats.linalg import (
    SINGULAR_TOL,
    design_rows,
    invert_2x2,
    mat_vec_2x2,
    transpose_mat_mat,
    transpose_mat_vec,
)


def test_invert_known_matrix():
    inv = invert_2x2([[4.0, 7.0], [2.0, 6.0]])
    expected = np.array([[0.6, -0.7], [-0.2, 0.4]])
    np.testing.assert_allclose(inv, expected, rtol=1e-12)


def test_invert_times_original_is_identity():
    m = np.array([[3.01, 6.0], [6.0, 14.01]])
    np.testing.assert_allclose(invert_2x2(m) @ m, np.eye(2), atol=1e-12)


@pytest.mark.parametrize(
    "m",
    [
        [[2.0, 0.0], [0.0, 0.5]],
        [[1.0, 2.0], [3.0, 4.0]],
        [[1e-3, 5.0], [-2.0, 1e3]],
        [[-7.5, 0.25], [0.125, 3.0]],
    ],
)
def test_double_inversion_round_trip(m):
    np.testing.assert_allclose(invert_2x2(invert_2x2(m)), m, rtol=1e-9)


def test_double_inversion_round_trip_random():
    rng = np.random.default_rng(7)
    for _ in range(50):
        m = rng.normal(size=(2, 2))
        if abs(np.linalg.det(m)) < 1e-3:
            continue
        np.testing.assert_allclose(invert_2x2(invert_2x2(m)), m, rtol=1e-9, atol=1e-12)


def test_singular_matrix_raises():
    with pytest.raises(SingularMatrixError, match="singular") as excinfo:
        invert_2x2([[1.0, 2.0], [2.0, 4.0]])
    assert excinfo.value.det == 0.0


def test_determinant_below_threshold_raises():
    tiny = SINGULAR_TOL / 10.0
    with pytest.raises(SingularMatrixError):
        invert_2x2([[tiny, 0.0], [0.0, 1.0]])


def test_invert_rejects_wrong_shape():
    with pytest.raises(DimensionMismatchError):
        invert_2x2([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


def test_mat_vec():
    out = mat_vec_2x2([[1.0, 2.0], [3.0, 4.0]], [5.0, 6.0])
    np.testing.assert_allclose(out, [17.0, 39.0])


def test_transpose_products_match_numpy():
    rows = design_rows([1.0, 2.0, 3.0])
    y = np.array([2.0, 4.0, 6.0])
    np.testing.assert_allclose(transpose_mat_mat(rows), rows.T @ rows)
    np.testing.assert_allclose(transpose_mat_vec(rows, y), rows.T @ y)


def test_transpose_mat_mat_is_symmetric():
    rows = [[1.0, -0.3], [1.0, 2.5], [1.0, 7.0]]
    out = transpose_mat_mat(rows)
    assert out[0, 1] == out[1, 0]
    np.testing.assert_allclose(out, [[3.0, 9.2], [9.2, 0.09 + 6.25 + 49.0]])


def test_transpose_products_of_no_rows_are_zero():
    np.testing.assert_array_equal(transpose_mat_mat([]), np.zeros((2, 2)))
    np.testing.assert_array_equal(transpose_mat_vec([], []), np.zeros(2))


def test_malformed_row_raises_dimension_mismatch():
    rows = [[1.0, 1.0], [1.0], [1.0, 3.0]]
    with pytest.raises(DimensionMismatchError, match="Row 1"):
        transpose_mat_mat(rows)
    with pytest.raises(DimensionMismatchError):
        transpose_mat_vec(rows, [1.0, 2.0, 3.0])


def test_length_mismatch_raises_dimension_mismatch():
    with pytest.raises(DimensionMismatchError, match="does not match"):
        transpose_mat_vec([[1.0, 1.0], [1.0, 2.0]], [1.0, 2.0, 3.0])


def test_wide_array_rejected():
    with pytest.raises(DimensionMismatchError):
        transpose_mat_mat(np.ones((4, 3)))
