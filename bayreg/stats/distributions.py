"""Immutable prior and posterior descriptions for the two-coefficient model.

These value objects form the input/output contract of the conjugate engine:

- ``PriorSpec``: independent Normal priors on intercept and slope.
- ``PosteriorSpec``: joint Normal posterior (mean vector, 2x2 covariance).
- ``MarginalNormal``: one coefficient's marginal, read off the posterior.

Arrays handed out by the derived properties are fresh copies, so callers can
never mutate a value object through them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from scipy.stats import norm

from .errors import InvalidInputError


def require_finite(name: str, value: float) -> float:
    """Return ``value`` as a float, rejecting NaN and infinities.

    Raises:
        InvalidInputError: If ``value`` is not a finite real number.
    """
    try:
        out = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a real number, got {value!r}.") from None
    if not math.isfinite(out):
        raise InvalidInputError(f"{name} must be finite, got {value!r}.")
    return out


def require_positive(name: str, value: float) -> float:
    """Return ``value`` as a finite float that is strictly positive."""
    out = require_finite(name, value)
    if out <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value!r}.")
    return out


@dataclass(frozen=True)
class MarginalNormal:
    """Normal distribution of a single regression coefficient.

    Attributes:
        mean (float): Posterior mean of the coefficient.
        std (float): Posterior standard deviation, ``sqrt(Sigma_n[i][i])``.
    """

    mean: float
    std: float

    @property
    def variance(self) -> float:
        return self.std**2

    def pdf(self, x):
        """Evaluate the density at ``x`` (scalar or array)."""
        return norm.pdf(x, loc=self.mean, scale=self.std)

    def interval(self, level: float = 0.95) -> Tuple[float, float]:
        """Return the central credible interval holding ``level`` probability.

        Raises:
            ValueError: If ``level`` is not strictly between 0 and 1.
        """
        if not 0.0 < level < 1.0:
            raise ValueError(f"Credible level must lie in (0, 1), got {level!r}.")
        lo, hi = norm.interval(level, loc=self.mean, scale=self.std)
        return float(lo), float(hi)

    def grid(self, num: int = 101, width: float = 4.0) -> np.ndarray:
        """Return ``num`` evenly spaced points over ``mean +/- width * std``."""
        return np.linspace(
            self.mean - width * self.std, self.mean + width * self.std, num
        )


@dataclass(frozen=True)
class PriorSpec:
    """Independent Normal priors on intercept (index 0) and slope (index 1).

    Attributes:
        mean0 (float): Prior mean of the intercept.
        mean1 (float): Prior mean of the slope.
        std0 (float): Prior standard deviation of the intercept (> 0).
        std1 (float): Prior standard deviation of the slope (> 0).

    Raises:
        InvalidInputError: On construction, if any field is non-finite or a
            standard deviation is not strictly positive.

    Note:
        The prior precision ``diag(1/std0^2, 1/std1^2)`` is strictly positive
        definite, which is what keeps the posterior precision invertible for
        any dataset.
    """

    mean0: float = 0.0
    mean1: float = 0.0
    std0: float = 10.0
    std1: float = 10.0

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        require_finite("Prior mean0", self.mean0)
        require_finite("Prior mean1", self.mean1)
        require_positive("Prior std0", self.std0)
        require_positive("Prior std1", self.std1)

    @property
    def mean(self) -> np.ndarray:
        return np.array([self.mean0, self.mean1], dtype=float)

    @property
    def precision(self) -> np.ndarray:
        return np.array(
            [[1.0 / (self.std0 * self.std0), 0.0], [0.0, 1.0 / (self.std1 * self.std1)]],
            dtype=float,
        )

    @property
    def covariance(self) -> np.ndarray:
        return np.array([[self.std0**2, 0.0], [0.0, self.std1**2]], dtype=float)

    @property
    def intercept(self) -> MarginalNormal:
        return MarginalNormal(float(self.mean0), float(self.std0))

    @property
    def slope(self) -> MarginalNormal:
        return MarginalNormal(float(self.mean1), float(self.std1))


@dataclass(frozen=True)
class PosteriorSpec:
    """Joint Normal posterior over (intercept, slope).

    Attributes:
        mean0 (float): Posterior mean of the intercept.
        mean1 (float): Posterior mean of the slope.
        cov00 (float): Posterior variance of the intercept.
        cov01 (float): Posterior intercept/slope covariance.
        cov11 (float): Posterior variance of the slope.
    """

    mean0: float
    mean1: float
    cov00: float
    cov01: float
    cov11: float

    @property
    def mean(self) -> np.ndarray:
        return np.array([self.mean0, self.mean1], dtype=float)

    @property
    def covariance(self) -> np.ndarray:
        return np.array(
            [[self.cov00, self.cov01], [self.cov01, self.cov11]], dtype=float
        )

    @property
    def correlation(self) -> float:
        """Posterior correlation between intercept and slope."""
        return float(self.cov01 / math.sqrt(self.cov00 * self.cov11))

    def marginal(self, index: int) -> MarginalNormal:
        """Return the marginal of coefficient ``index`` (0 intercept, 1 slope)."""
        if index == 0:
            return MarginalNormal(float(self.mean0), math.sqrt(self.cov00))
        if index == 1:
            return MarginalNormal(float(self.mean1), math.sqrt(self.cov11))
        raise IndexError(f"Coefficient index must be 0 or 1, got {index!r}.")

    def marginals(self) -> Tuple[MarginalNormal, MarginalNormal]:
        return self.marginal(0), self.marginal(1)

    @property
    def intercept(self) -> MarginalNormal:
        return self.marginal(0)

    @property
    def slope(self) -> MarginalNormal:
        return self.marginal(1)

    def predict_mean(self, x):
        """Evaluate the posterior-mean regression line ``mean0 + mean1 * x``."""
        return self.mean0 + self.mean1 * np.asarray(x, dtype=float)
