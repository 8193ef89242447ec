"""Define standardized column names for observation and summary tables."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObservationColumns:
    """Column labels for the raw observation table.

    Attributes:
        x: Predictor values, drawn from Normal(mean_x, std_x^2) in the demo.
        y: Responses, ``beta0 + beta1 * x`` plus Normal noise.
    """

    x: str = "x"
    y: str = "y"


@dataclass(frozen=True)
class PosteriorColumns:
    """Column labels for the per-coefficient posterior summary table.

    Attributes:
        coefficient: Coefficient name, intercept (β₀) or slope (β₁).

        true_value: Value used to generate the data, when known. Left empty
            for real data.

        prior_mean / prior_std: Parameters of the independent Normal prior.

        posterior_mean / posterior_std: Marginal posterior parameters, read
            from the posterior mean vector and the square root of the
            covariance diagonal.

        ci_lower / ci_upper: Bounds of the central 95% credible interval of
            the marginal posterior. This is a Bayesian interval, not a
            frequentist confidence interval.
    """

    coefficient: str = "Coefficient"
    true_value: str = "True Value"
    prior_mean: str = "Prior Mean"
    prior_std: str = "Prior Std Dev"
    posterior_mean: str = "Posterior Mean"
    posterior_std: str = "Posterior Std Dev"
    ci_lower: str = "95% CI Lower"
    ci_upper: str = "95% CI Upper"
