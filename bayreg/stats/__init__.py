"""
Conjugate Bayesian engine for simple linear regression with known noise.

This subpackage computes the exact posterior over (intercept, slope) given
independent Normal priors and a known observation-noise standard deviation.
All functions are pure and operate on arrays and immutable value objects; no
randomness, I/O, or plotting happens here.

Modules:
    linalg:
        Fixed-size 2x2 / 2-vector arithmetic: adjugate inversion with a
        singularity threshold, matrix-vector products, and transpose
        products against N x 2 design matrices.

    sufficient:
        Reduction of (x, y) observations to ``XtX`` and ``Xty``.

    posterior:
        Closed-form Normal-Normal update producing ``PosteriorSpec``.

    distributions:
        ``PriorSpec``, ``PosteriorSpec`` and ``MarginalNormal`` value objects.

    errors:
        ``InvalidInputError``, ``DimensionMismatchError`` and
        ``SingularMatrixError``.

Design Principle:
    This subpackage has no dependencies on simulation/, plotting/ or
    reporting modules, so it can be tested in isolation.
"""

from .distributions import MarginalNormal, PosteriorSpec, PriorSpec
from .errors import (
    BayesRegError,
    DimensionMismatchError,
    InvalidInputError,
    SingularMatrixError,
)
from .linalg import (
    SINGULAR_TOL,
    design_rows,
    invert_2x2,
    mat_vec_2x2,
    transpose_mat_mat,
    transpose_mat_vec,
)
from .posterior import (
    compute_posterior,
    noise_precision,
    posterior_from_observations,
    posterior_precision,
)
from .sufficient import SufficientStatistics, build_statistics, statistics_from_arrays

__all__ = [
    "MarginalNormal",
    "PosteriorSpec",
    "PriorSpec",
    "SufficientStatistics",
    "BayesRegError",
    "DimensionMismatchError",
    "InvalidInputError",
    "SingularMatrixError",
    "SINGULAR_TOL",
    "design_rows",
    "invert_2x2",
    "mat_vec_2x2",
    "transpose_mat_mat",
    "transpose_mat_vec",
    "build_statistics",
    "statistics_from_arrays",
    "compute_posterior",
    "noise_precision",
    "posterior_from_observations",
    "posterior_precision",
]
