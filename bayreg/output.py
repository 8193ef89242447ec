"""Write observations and posterior summaries to reproducible CSV files.

This module is the boundary between in-memory results and tabular artifacts.
"""

from __future__ import annotations

import os
from typing import Tuple

import pandas as pd

from .reporting import add_formatted_reporting_columns
from .schema import ObservationColumns, PosteriorColumns


def save_data_to_csv(
    observations_df: pd.DataFrame,
    summary_df: pd.DataFrame,
    output_dir: str = "output",
) -> Tuple[str, str]:
    """Save the observation table and the posterior summary to CSV files.

    Args:
        observations_df (pandas.DataFrame): Table with ``x`` and ``y``
            columns, e.g. from ``SyntheticDataset.to_frame``.
        summary_df (pandas.DataFrame): Output of
            ``build_posterior_summary_table``.
        output_dir (str): Directory where CSV outputs are written.

    Returns:
        tuple[str, str]: Paths to ``observations.csv`` and
        ``posterior_summary.csv``.

    Raises:
        KeyError: If a required column is missing from either table.
        ValueError: If a posterior std dev is missing or non-positive.

    Note:
        The summary CSV also carries ``"mean ± std"`` string columns for the
        prior and posterior, rounded to the precision of the std dev.
    """
    obs_cols = ObservationColumns()
    missing = {obs_cols.x, obs_cols.y} - set(observations_df.columns)
    if missing:
        raise KeyError(f"Observation table missing required columns: {missing}.")

    cols = PosteriorColumns()
    summary_report = add_formatted_reporting_columns(
        summary_df,
        [
            (cols.prior_mean, cols.prior_std),
            (cols.posterior_mean, cols.posterior_std),
        ],
    )

    os.makedirs(output_dir, exist_ok=True)
    observations_path = os.path.join(output_dir, "observations.csv")
    summary_path = os.path.join(output_dir, "posterior_summary.csv")

    observations_df[[obs_cols.x, obs_cols.y]].to_csv(observations_path, index=False)
    summary_report.to_csv(summary_path, index=False)

    print(f"Saved observations to {observations_path}")
    print(f"Saved posterior summary to {summary_path}")

    return observations_path, summary_path
