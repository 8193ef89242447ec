"""Closed-form conjugate posterior for Bayesian simple linear regression.

Model:
    ``y_i = b0 + b1 * x_i + e_i`` with ``e_i ~ Normal(0, sigma_noise^2)`` and
    ``sigma_noise`` known. Independent priors ``b_j ~ Normal(mu0_j, std_j^2)``.

Update (Normal-Normal conjugacy, precisions add):
    tau      = 1 / sigma_noise^2
    Lambda_n = Lambda_0 + tau * XtX
    Sigma_n  = Lambda_n^-1
    mu_n     = Sigma_n (Lambda_0 mu_0 + tau * Xty)

``Lambda_n`` is the sum of a positive-definite diagonal and a positive
semi-definite matrix, so it is always invertible for valid inputs. A
``SingularMatrixError`` can only surface when the statistics did not come
from real observations; it is raised, never converted to NaN results.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from .distributions import PosteriorSpec, PriorSpec, require_positive
from .errors import InvalidInputError
from .linalg import invert_2x2, mat_vec_2x2
from .sufficient import SufficientStatistics, build_statistics

logger = logging.getLogger(__name__)


def noise_precision(sigma_noise: float) -> float:
    """Return ``tau = 1 / sigma_noise^2``.

    Raises:
        InvalidInputError: If ``sigma_noise`` is non-finite or not positive.
    """
    sigma = require_positive("Known noise standard deviation", sigma_noise)
    tau = 1.0 / (sigma * sigma)
    if not np.isfinite(tau):
        raise InvalidInputError(
            f"Noise standard deviation {sigma_noise!r} is too small to invert."
        )
    return tau


def _validate_inputs(
    stats: SufficientStatistics, prior: PriorSpec, sigma_noise: float
) -> float:
    if not isinstance(stats, SufficientStatistics):
        raise InvalidInputError(
            f"Expected SufficientStatistics, got {type(stats).__name__}."
        )
    if not isinstance(prior, PriorSpec):
        raise InvalidInputError(f"Expected PriorSpec, got {type(prior).__name__}.")
    prior.validate()
    if not stats.is_finite():
        raise InvalidInputError("Sufficient statistics contain non-finite values.")
    return noise_precision(sigma_noise)


def posterior_precision(
    stats: SufficientStatistics, prior: PriorSpec, sigma_noise: float
) -> np.ndarray:
    """Return the posterior precision ``Lambda_0 + tau * XtX``.

    Raises:
        InvalidInputError: If any input is invalid.
    """
    tau = _validate_inputs(stats, prior, sigma_noise)
    return prior.precision + tau * stats.xtx


def compute_posterior(
    stats: SufficientStatistics, prior: PriorSpec, sigma_noise: float
) -> PosteriorSpec:
    """Combine prior, known noise, and data aggregates into the posterior.

    Args:
        stats (SufficientStatistics): Aggregates from ``build_statistics``.
        prior (PriorSpec): Independent Normal priors on intercept and slope.
        sigma_noise (float): Known observation-noise standard deviation (> 0).

    Returns:
        PosteriorSpec: Posterior mean vector and covariance matrix. The
        intercept and slope marginals are available as ``.intercept`` and
        ``.slope``.

    Raises:
        InvalidInputError: If ``sigma_noise <= 0``, a prior std dev is not
            positive, or any input is non-finite. Raised before any matrix
            arithmetic.
        SingularMatrixError: If the posterior precision cannot be inverted.
            Unreachable in exact arithmetic for statistics built from real
            observations. In floating point, a prior so wide that its
            precision is absorbed in rounding (e.g. std 1e9) combined with
            a singular ``XtX`` (all x equal) still yields a determinant
            below ``SINGULAR_TOL``; this is reported, never returned as NaN.

    Note:
        With zero observations the posterior is the prior, returned exactly:
        ``mu_n = mu_0`` and ``Sigma_n = diag(std0^2, std1^2)``.
    """
    tau = _validate_inputs(stats, prior, sigma_noise)

    if stats.n == 0 and not stats.xtx.any() and not stats.xty.any():
        return PosteriorSpec(
            mean0=float(prior.mean0),
            mean1=float(prior.mean1),
            cov00=float(prior.std0) ** 2,
            cov01=0.0,
            cov11=float(prior.std1) ** 2,
        )

    lambda0 = prior.precision
    lambda_n = lambda0 + tau * stats.xtx
    sigma_n = invert_2x2(lambda_n)

    lambda0_mu0 = mat_vec_2x2(lambda0, prior.mean)
    rhs = lambda0_mu0 + tau * stats.xty
    mu_n = mat_vec_2x2(sigma_n, rhs)

    # Sigma_n is symmetric in exact arithmetic; average the off-diagonal pair.
    cov01 = 0.5 * (sigma_n[0, 1] + sigma_n[1, 0])
    posterior = PosteriorSpec(
        mean0=float(mu_n[0]),
        mean1=float(mu_n[1]),
        cov00=float(sigma_n[0, 0]),
        cov01=float(cov01),
        cov11=float(sigma_n[1, 1]),
    )
    logger.debug(
        "Posterior from n=%d: mean=(%.6g, %.6g), var=(%.6g, %.6g)",
        stats.n,
        posterior.mean0,
        posterior.mean1,
        posterior.cov00,
        posterior.cov11,
    )
    return posterior


def posterior_from_observations(
    observations: Iterable[Sequence[float]], prior: PriorSpec, sigma_noise: float
) -> PosteriorSpec:
    """Build sufficient statistics from ``observations`` and update ``prior``."""
    return compute_posterior(build_statistics(observations), prior, sigma_noise)
