"""Format posterior results as tables and human-readable summaries.

This module runs after the posterior update and never feeds values back into
it. Numbers are kept at full precision in tables; formatted string columns
are added alongside for presentation.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .schema import PosteriorColumns
from .simulation import SyntheticDataset, implied_correlation, sample_correlation
from .stats.distributions import PosteriorSpec, PriorSpec

COEFFICIENT_LABELS = ("β₀ (intercept)", "β₁ (slope)")


def _round_uncertainty(uncertainty: float) -> tuple[float, int]:
    """Round an uncertainty to one significant figure (two if it leads with 1).

    Args:
        uncertainty (float): Absolute uncertainty, here a posterior std dev.

    Returns:
        tuple[float, int]: Rounded uncertainty and decimal places used.

    Raises:
        ValueError: If uncertainty is non-finite or non-positive.
    """
    u = float(uncertainty)
    if not np.isfinite(u) or u <= 0:
        raise ValueError(f"Uncertainty must be finite and > 0, got {uncertainty!r}")

    exponent = int(np.floor(np.log10(abs(u))))
    leading = abs(u) / (10**exponent)
    sig_figs = 2 if 1.0 <= leading < 2.0 else 1
    ndigits = sig_figs - 1 - exponent
    rounded_u = round(abs(u), ndigits)
    return float(rounded_u), int(max(0, ndigits))


def uncertainty_decimal_places(uncertainty: float) -> int:
    """Return the decimal places implied by rounding ``uncertainty``.

    Args:
        uncertainty (float): Absolute uncertainty for a reported value.

    Returns:
        int: Number of decimal places the paired value should use.
    """
    rounded_u, ndigits = _round_uncertainty(uncertainty)
    if ndigits <= 0:
        return 0
    txt = f"{rounded_u:.12f}".rstrip("0")
    if "." not in txt:
        return 0
    return len(txt.split(".", 1)[1])


def format_value_to_uncertainty_decimals(value: float, uncertainty: float) -> str:
    """Format ``value`` to the precision implied by ``uncertainty``.

    Intended for presentation only; keep the numeric value for computation.
    """
    dp = uncertainty_decimal_places(uncertainty)
    return f"{float(value):.{dp}f}"


def format_estimate(value: float, uncertainty: float) -> str:
    """Return ``"value ± uncertainty"`` with matched precision."""
    dp = uncertainty_decimal_places(uncertainty)
    rounded_u, _ = _round_uncertainty(uncertainty)
    value_txt = format_value_to_uncertainty_decimals(value, uncertainty)
    return f"{value_txt} ± {rounded_u:.{dp}f}"


def validate_uncertainty_columns(
    df: pd.DataFrame,
    value_uncertainty_pairs: Iterable[tuple[str, str]],
) -> None:
    """Validate value/uncertainty column pairs before formatting.

    Raises:
        KeyError: If any required value or uncertainty column is missing.
        ValueError: If a finite value sits in a row whose uncertainty is
            missing, non-finite, or non-positive.
    """
    for value_col, unc_col in value_uncertainty_pairs:
        if value_col not in df.columns:
            raise KeyError(f"Missing value column '{value_col}' for reporting format.")
        if unc_col not in df.columns:
            raise KeyError(
                f"Missing uncertainty column '{unc_col}' required for '{value_col}'."
            )

        values = pd.to_numeric(df[value_col], errors="coerce")
        uncs = pd.to_numeric(df[unc_col], errors="coerce")
        missing_mask = values.notna() & (~np.isfinite(uncs) | (uncs <= 0))

        if bool(missing_mask.any()):
            bad_rows = list(df.index[missing_mask][:5])
            raise ValueError(
                "Uncertainty metadata missing/invalid for values in "
                f"'{value_col}' (uncertainty '{unc_col}'). "
                f"Example row indices: {bad_rows}."
            )


def add_formatted_reporting_columns(
    df: pd.DataFrame,
    value_uncertainty_pairs: Iterable[tuple[str, str]],
    suffix: str = " (reported)",
) -> pd.DataFrame:
    """Add ``"value ± uncertainty"`` string columns next to numeric ones.

    Args:
        df (pandas.DataFrame): Input numeric table.
        value_uncertainty_pairs (Iterable[tuple[str, str]]): Sequence of
            ``(value_column, uncertainty_column)`` pairs to format.
        suffix (str, optional): Suffix appended to each value column name to
            form the new column. Defaults to ``" (reported)"``.

    Returns:
        pandas.DataFrame: Copy of ``df`` with the formatted columns added.
    """
    pairs = list(value_uncertainty_pairs)
    out = df.copy()
    validate_uncertainty_columns(out, pairs)

    for value_col, unc_col in pairs:
        values = pd.to_numeric(out[value_col], errors="coerce")
        uncs = pd.to_numeric(out[unc_col], errors="coerce")
        out[f"{value_col}{suffix}"] = [
            format_estimate(v, u) if (np.isfinite(v) and np.isfinite(u) and u > 0) else ""
            for v, u in zip(values, uncs)
        ]

    return out


def build_posterior_summary_table(
    posterior: PosteriorSpec,
    prior: PriorSpec,
    true_values: Optional[tuple[float, float]] = None,
    level: float = 0.95,
) -> pd.DataFrame:
    """Tabulate prior and marginal posterior parameters per coefficient.

    Args:
        posterior (PosteriorSpec): Output of ``compute_posterior``.
        prior (PriorSpec): Prior used for the update.
        true_values (tuple[float, float], optional): Generating
            ``(beta0, beta1)`` when the data are synthetic.
        level (float, optional): Credible level for the interval columns.
            Defaults to ``0.95``.

    Returns:
        pandas.DataFrame: One row per coefficient with the columns of
        ``PosteriorColumns``.
    """
    cols = PosteriorColumns()
    rows = []
    priors = (prior.intercept, prior.slope)
    for idx, marginal in enumerate(posterior.marginals()):
        lo, hi = marginal.interval(level)
        rows.append(
            {
                cols.coefficient: COEFFICIENT_LABELS[idx],
                cols.true_value: (
                    float(true_values[idx]) if true_values is not None else math.nan
                ),
                cols.prior_mean: priors[idx].mean,
                cols.prior_std: priors[idx].std,
                cols.posterior_mean: marginal.mean,
                cols.posterior_std: marginal.std,
                cols.ci_lower: lo,
                cols.ci_upper: hi,
            }
        )
    return pd.DataFrame(rows)


def _fmt3(value: float) -> str:
    return "N/A" if not np.isfinite(value) else f"{value:.3f}"


def format_summary(
    posterior: PosteriorSpec,
    dataset: SyntheticDataset,
    std_x: Optional[float] = None,
) -> str:
    """Render the plain-text summary of a known-variance posterior run.

    Args:
        posterior (PosteriorSpec): Posterior to describe.
        dataset (SyntheticDataset): Data the posterior was computed from.
        std_x (float, optional): Std dev of the x distribution, used for the
            implied population correlation. Omitted lines read ``N/A``.

    Returns:
        str: Multi-line summary block.
    """
    rho = (
        implied_correlation(dataset.beta1, std_x, dataset.sigma_noise)
        if std_x is not None
        else math.nan
    )
    corr = sample_correlation(dataset.x, dataset.y)
    b0 = posterior.intercept
    b1 = posterior.slope

    lines = [
        "Summary Statistics (Known Variance Posterior):",
        "-------------------------------------------",
        "Data Generation:",
        f"  N = {dataset.n}",
        f"  True β₀ = {dataset.beta0:.3f}",
        f"  True β₁ = {dataset.beta1:.3f}",
        f"  Known σ_noise = {dataset.sigma_noise:.3f}",
        f"  Implied Population ρ ≈ {_fmt3(rho)}",
        f"  Actual Sample Correlation ≈ {_fmt3(corr)}",
        "",
        "Posterior Parameters (β ~ Normal(μₙ, Σₙ)):",
        f"  Posterior Mean β₀ = {b0.mean:.3f}",
        f"  Posterior StdDev β₀ = {b0.std:.3f}",
        f"  Posterior Mean β₁ = {b1.mean:.3f}",
        f"  Posterior StdDev β₁ = {b1.std:.3f}",
    ]
    return "\n".join(lines) + "\n"
