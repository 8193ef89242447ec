"""Reduce observed (x, y) pairs to the aggregates the posterior update needs.

For the design rows ``[1, x_i]`` the sufficient statistics are

    XtX = sum_i [1, x_i]^T [1, x_i] = [[N, sum x], [sum x, sum x^2]]
    Xty = sum_i [1, x_i]^T y_i     = [sum y, sum x*y]

Both are fixed-size regardless of N. ``XtX`` is symmetric positive
semi-definite; it is singular when N < 2 or all x values coincide, which the
prior term in the posterior precision compensates for.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

import numpy as np

from .errors import DimensionMismatchError, InvalidInputError
from .linalg import design_rows, transpose_mat_mat, transpose_mat_vec

logger = logging.getLogger(__name__)


def _readonly(arr: np.ndarray) -> np.ndarray:
    out = np.array(arr, dtype=float)
    out.setflags(write=False)
    return out


@dataclass(frozen=True)
class SufficientStatistics:
    """Fixed-size data aggregates for the two-coefficient linear model.

    Attributes:
        xtx (numpy.ndarray): 2x2 sum of design-row outer products (read-only).
        xty (numpy.ndarray): 2-vector sum of design row times response
            (read-only).
        n (int): Number of observations reduced into the aggregates.
    """

    xtx: np.ndarray
    xty: np.ndarray
    n: int = field(default=0)

    def __post_init__(self):
        xtx = np.asarray(self.xtx, dtype=float)
        xty = np.asarray(self.xty, dtype=float)
        if xtx.shape != (2, 2):
            raise DimensionMismatchError(f"XtX must be 2x2, got shape {xtx.shape}.")
        if xty.shape != (2,):
            raise DimensionMismatchError(f"Xty must be a 2-vector, got shape {xty.shape}.")
        object.__setattr__(self, "xtx", _readonly(xtx))
        object.__setattr__(self, "xty", _readonly(xty))
        object.__setattr__(self, "n", int(self.n))

    @classmethod
    def zeros(cls) -> "SufficientStatistics":
        """Return the aggregates of an empty dataset."""
        return cls(np.zeros((2, 2)), np.zeros(2), 0)

    def merge(self, other: "SufficientStatistics") -> "SufficientStatistics":
        """Combine the aggregates of two disjoint observation batches."""
        return SufficientStatistics(
            self.xtx + other.xtx, self.xty + other.xty, self.n + other.n
        )

    def __add__(self, other):
        if not isinstance(other, SufficientStatistics):
            return NotImplemented
        return self.merge(other)

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.xtx)) and np.all(np.isfinite(self.xty)))


def _split_observations(
    observations: Iterable[Sequence[float]],
) -> Tuple[np.ndarray, np.ndarray]:
    xs = []
    ys = []
    for i, obs in enumerate(observations):
        try:
            width = len(obs)
        except TypeError:
            raise DimensionMismatchError(
                f"Observation {i} is not an (x, y) pair: {obs!r}."
            ) from None
        if width != 2:
            raise DimensionMismatchError(
                f"Observation {i} has {width} entries, expected an (x, y) pair."
            )
        x, y = obs
        xs.append(x)
        ys.append(y)
    try:
        return np.asarray(xs, dtype=float), np.asarray(ys, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Observations must be real numbers: {exc}") from exc


def statistics_from_arrays(x: Sequence[float], y: Sequence[float]) -> SufficientStatistics:
    """Build sufficient statistics from parallel ``x`` and ``y`` arrays.

    Raises:
        DimensionMismatchError: If ``x`` and ``y`` differ in length.
        InvalidInputError: If any value is NaN or infinite.
    """
    try:
        x_arr = np.asarray(x, dtype=float).reshape(-1)
        y_arr = np.asarray(y, dtype=float).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Observations must be real numbers: {exc}") from exc
    if x_arr.shape != y_arr.shape:
        raise DimensionMismatchError(
            f"x has {x_arr.size} values but y has {y_arr.size}."
        )
    finite = np.isfinite(x_arr) & np.isfinite(y_arr)
    if not bool(np.all(finite)):
        bad = [int(i) for i in np.flatnonzero(~finite)[:5]]
        raise InvalidInputError(
            f"Observations must be finite; non-finite entries at indices {bad}."
        )

    rows = design_rows(x_arr)
    xtx = transpose_mat_mat(rows)
    xty = transpose_mat_vec(rows, y_arr)
    logger.debug("Reduced %d observations to sufficient statistics", x_arr.size)
    return SufficientStatistics(xtx, xty, int(x_arr.size))


def build_statistics(observations: Iterable[Sequence[float]]) -> SufficientStatistics:
    """Reduce ``(x, y)`` observations to ``XtX`` and ``Xty``.

    Args:
        observations: Iterable of ``(x, y)`` pairs, or an ``(N, 2)`` array.
            Order does not matter. An empty input yields zero aggregates.

    Returns:
        SufficientStatistics: ``XtX``, ``Xty`` and the observation count.

    Raises:
        DimensionMismatchError: If any observation is not a pair.
        InvalidInputError: If any ``x`` or ``y`` is NaN or infinite.

    Note:
        All-identical ``x`` values are accepted; the resulting ``XtX`` is
        singular but the posterior remains well defined under a proper prior.
    """
    if isinstance(observations, np.ndarray):
        obs = np.asarray(observations, dtype=float)
        if obs.ndim == 1 and obs.size == 0:
            return SufficientStatistics.zeros()
        if obs.ndim != 2 or obs.shape[1] != 2:
            raise DimensionMismatchError(
                f"Observation array must have shape (N, 2), got {obs.shape}."
            )
        if obs.shape[0] == 0:
            return SufficientStatistics.zeros()
        return statistics_from_arrays(obs[:, 0], obs[:, 1])

    x, y = _split_observations(observations)
    return statistics_from_arrays(x, y)
