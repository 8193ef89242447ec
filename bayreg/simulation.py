"""Generate synthetic (x, y) data for demonstrating the posterior update.

Data are drawn as

    x_i ~ Normal(mean_x, std_x^2)
    y_i = beta0 + beta1 * x_i + e_i,   e_i ~ Normal(0, sigma_noise^2)

Sampling uses an explicit ``numpy.random.Generator`` and shares no state with
the engine in ``bayreg.stats``, which only ever sees finished observations.
"""

from __future__ import annotations

import logging
import math
import warnings
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .config import SimulationConfig
from .schema import ObservationColumns

logger = logging.getLogger(__name__)

MIN_POINTS = 2
VARIANCE_FLOOR = 1e-9


@dataclass(frozen=True)
class SyntheticDataset:
    """Simulated observations together with the parameters that produced them."""

    x: np.ndarray
    y: np.ndarray
    beta0: float
    beta1: float
    sigma_noise: float

    @property
    def n(self) -> int:
        return int(self.x.size)

    @property
    def observations(self) -> np.ndarray:
        """Return the data as an ``(N, 2)`` array of ``(x, y)`` rows."""
        return np.column_stack([self.x, self.y])

    def to_frame(self) -> pd.DataFrame:
        cols = ObservationColumns()
        return pd.DataFrame({cols.x: self.x, cols.y: self.y})


def implied_correlation(beta1: float, std_x: float, sigma_noise: float) -> float:
    """Population correlation between x and y implied by the generating model.

    ``rho = sign(beta1) * sqrt(beta1^2 std_x^2 / (beta1^2 std_x^2 + sigma^2))``

    Returns:
        float: Implied correlation, ``nan`` when ``std_x <= 0``. When the total
        variance of y is negligible the result is ``sign(beta1)`` (0 for a
        flat line).
    """
    if std_x <= 0:
        return math.nan
    signal_var = (beta1 * std_x) ** 2
    noise_var = sigma_noise**2
    total_var_y = signal_var + noise_var
    if total_var_y < VARIANCE_FLOOR:
        return 0.0 if beta1 == 0 else float(np.sign(beta1))
    return float(np.sign(beta1) * math.sqrt(signal_var / total_var_y))


def sample_correlation(x: np.ndarray, y: np.ndarray) -> float:
    """Pearson correlation of the sample, or ``nan`` when it is undefined.

    Undefined means fewer than two points or a population variance at or below
    ``VARIANCE_FLOOR`` in either variable.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    if x_arr.size < 2 or x_arr.size != y_arr.size:
        return math.nan
    if np.var(x_arr) <= VARIANCE_FLOOR or np.var(y_arr) <= VARIANCE_FLOOR:
        return math.nan
    return float(np.corrcoef(x_arr, y_arr)[0, 1])


def generate_synthetic_data(
    config: SimulationConfig, rng: Optional[np.random.Generator] = None
) -> SyntheticDataset:
    """Draw a synthetic dataset from the generating model in ``config``.

    Args:
        config (SimulationConfig): True coefficients, x distribution, noise
            level, point count, and seed.
        rng (numpy.random.Generator, optional): Generator to draw from.
            Defaults to ``numpy.random.default_rng(config.seed)``.

    Returns:
        SyntheticDataset: Generated ``x``/``y`` arrays and true parameters.

    Raises:
        ValueError: If a parameter is non-finite, ``std_x <= 0``, or
            ``sigma_noise < 0``.

    Note:
        ``n`` is rounded and raised to at least 2 (with a ``UserWarning``) so
        a sample correlation can be computed. The posterior engine itself
        accepts any number of observations, including zero.
    """
    params = {
        "beta0": config.beta0,
        "beta1": config.beta1,
        "mean_x": config.mean_x,
        "std_x": config.std_x,
        "sigma_noise": config.sigma_noise,
        "n": config.n,
    }
    for name, value in params.items():
        if not np.isfinite(value):
            raise ValueError(f"Simulation parameter '{name}' is not a valid number.")
    if config.std_x <= 0:
        raise ValueError("Std dev of x (std_x) must be positive.")
    if config.sigma_noise < 0:
        raise ValueError("Noise std dev (sigma_noise) cannot be negative.")

    n = int(round(config.n))
    if n < MIN_POINTS:
        warnings.warn(
            f"Requested {config.n} points; using the minimum of {MIN_POINTS}.",
            UserWarning,
            stacklevel=2,
        )
        n = MIN_POINTS

    if rng is None:
        rng = np.random.default_rng(config.seed)

    x = rng.normal(config.mean_x, config.std_x, size=n)
    if config.sigma_noise == 0:
        noise = np.zeros(n)
    else:
        noise = rng.normal(0.0, config.sigma_noise, size=n)
    y = config.beta0 + config.beta1 * x + noise

    logger.info(
        "Generated %d points (beta0=%.3f, beta1=%.3f, sigma_noise=%.3f)",
        n,
        config.beta0,
        config.beta1,
        config.sigma_noise,
    )
    return SyntheticDataset(
        x=x,
        y=y,
        beta0=float(config.beta0),
        beta1=float(config.beta1),
        sigma_noise=float(config.sigma_noise),
    )
