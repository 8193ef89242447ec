"""
A Python package for exact Bayesian inference in simple linear regression.

Computes the conjugate Normal posterior over intercept and slope given
independent Normal priors and a known observation-noise standard deviation.

Modules:
    - stats: Fixed-size linear algebra, sufficient statistics, and the
      closed-form posterior update.
    - simulation: Generates synthetic (x, y) data from a known line.
    - reporting: Posterior summary tables and text summaries.
    - plotting: Data scatter and marginal posterior density figures.
    - output: Writes observations and summaries to CSV.
"""

__version__ = "1.0.0"

from .config import RunConfig, SimulationConfig
from .output import save_data_to_csv
from .reporting import build_posterior_summary_table, format_summary
from .simulation import (
    SyntheticDataset,
    generate_synthetic_data,
    implied_correlation,
    sample_correlation,
)
from .stats import (
    BayesRegError,
    DimensionMismatchError,
    InvalidInputError,
    MarginalNormal,
    PosteriorSpec,
    PriorSpec,
    SingularMatrixError,
    SufficientStatistics,
    build_statistics,
    compute_posterior,
    posterior_from_observations,
)

__all__ = [
    # Engine
    "build_statistics",
    "compute_posterior",
    "posterior_from_observations",
    "SufficientStatistics",
    "PriorSpec",
    "PosteriorSpec",
    "MarginalNormal",
    "BayesRegError",
    "InvalidInputError",
    "DimensionMismatchError",
    "SingularMatrixError",
    # Simulation
    "SimulationConfig",
    "RunConfig",
    "SyntheticDataset",
    "generate_synthetic_data",
    "implied_correlation",
    "sample_correlation",
    # Reporting and output
    "build_posterior_summary_table",
    "format_summary",
    "save_data_to_csv",
]
