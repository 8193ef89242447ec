"""Fixed-size linear algebra for the two-coefficient linear model.

The model dimension is structurally two (intercept, slope), so every routine
here works on 2x2 matrices, 2-vectors, or N-row matrices with exactly two
columns. Closed-form formulas keep the numerical behavior (inversion formula,
singularity threshold) exact and easy to test in isolation.

All functions are pure and return new ``numpy`` arrays.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .errors import DimensionMismatchError, SingularMatrixError

SINGULAR_TOL: float = 1e-15


def _as_matrix_2x2(m) -> np.ndarray:
    arr = np.asarray(m, dtype=float)
    if arr.shape != (2, 2):
        raise DimensionMismatchError(f"Expected a 2x2 matrix, got shape {arr.shape}.")
    return arr


def _as_vector_2(v) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape != (2,):
        raise DimensionMismatchError(f"Expected a 2-vector, got shape {arr.shape}.")
    return arr


def _as_rows(rows: Sequence[Sequence[float]]) -> np.ndarray:
    """Convert an N x 2 row collection, rejecting any row of the wrong arity."""
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2 or rows.shape[1] != 2:
            if rows.ndim == 1 and rows.size == 0:
                return np.zeros((0, 2), dtype=float)
            raise DimensionMismatchError(
                f"Expected an N x 2 matrix, got shape {rows.shape}."
            )
        return rows.astype(float, copy=False)

    checked = []
    for i, row in enumerate(rows):
        try:
            width = len(row)
        except TypeError:
            raise DimensionMismatchError(
                f"Row {i} is not a sequence: {row!r}."
            ) from None
        if width != 2:
            raise DimensionMismatchError(
                f"Row {i} has {width} entries, expected exactly 2."
            )
        checked.append((float(row[0]), float(row[1])))
    if not checked:
        return np.zeros((0, 2), dtype=float)
    return np.asarray(checked, dtype=float)


def invert_2x2(m) -> np.ndarray:
    """Invert a 2x2 matrix with the adjugate formula.

    Args:
        m: Matrix-like ``[[m00, m01], [m10, m11]]``.

    Returns:
        numpy.ndarray: ``adj(m) / det(m)``.

    Raises:
        DimensionMismatchError: If ``m`` is not 2x2.
        SingularMatrixError: If ``|det(m)| < SINGULAR_TOL`` or the determinant
            is not finite.
    """
    a = _as_matrix_2x2(m)
    det = float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])
    if not math.isfinite(det) or abs(det) < SINGULAR_TOL:
        raise SingularMatrixError(
            f"Matrix is singular (det={det!r}), cannot invert.", det=det
        )
    inv_det = 1.0 / det
    return np.array(
        [
            [inv_det * a[1, 1], -inv_det * a[0, 1]],
            [-inv_det * a[1, 0], inv_det * a[0, 0]],
        ],
        dtype=float,
    )


def mat_vec_2x2(m, v) -> np.ndarray:
    """Return the product of a 2x2 matrix and a 2-vector."""
    a = _as_matrix_2x2(m)
    x = _as_vector_2(v)
    return np.array(
        [
            a[0, 0] * x[0] + a[0, 1] * x[1],
            a[1, 0] * x[0] + a[1, 1] * x[1],
        ],
        dtype=float,
    )


def transpose_mat_vec(rows: Sequence[Sequence[float]], v: Sequence[float]) -> np.ndarray:
    """Compute ``R^T v`` for an N x 2 matrix ``R`` and an N-vector ``v``.

    Raises:
        DimensionMismatchError: If ``len(rows) != len(v)`` or a row does not
            have exactly two entries.
    """
    r = _as_rows(rows)
    vec = np.asarray(v, dtype=float).reshape(-1)
    if r.shape[0] != vec.shape[0]:
        raise DimensionMismatchError(
            f"Row count {r.shape[0]} does not match vector length {vec.shape[0]}."
        )
    return np.array([np.dot(r[:, 0], vec), np.dot(r[:, 1], vec)], dtype=float)


def transpose_mat_mat(rows: Sequence[Sequence[float]]) -> np.ndarray:
    """Compute the symmetric 2x2 product ``R^T R`` for an N x 2 matrix ``R``.

    Only the three distinct entries are accumulated; the lower off-diagonal
    entry mirrors the upper one.

    Raises:
        DimensionMismatchError: If a row does not have exactly two entries.
    """
    r = _as_rows(rows)
    c0 = r[:, 0]
    c1 = r[:, 1]
    s00 = float(np.dot(c0, c0))
    s01 = float(np.dot(c0, c1))
    s11 = float(np.dot(c1, c1))
    return np.array([[s00, s01], [s01, s11]], dtype=float)


def design_rows(x: Sequence[float]) -> np.ndarray:
    """Expand inputs into ``[1, x_i]`` design rows (intercept, slope)."""
    x_arr = np.asarray(x, dtype=float).reshape(-1)
    return np.column_stack([np.ones_like(x_arr), x_arr])
