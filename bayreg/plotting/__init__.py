"""
Plotting utilities for the Bayesian regression demonstration.

All plotting functions accept precomputed datasets and posteriors and do not
perform inference.

Modules:
    posterior_plots:
        (1) Data scatter with the true and posterior-mean regression lines
        (2) Marginal posterior densities for intercept and slope, with the
            generating value marked

    style:
        Shared rcParams, colors, axis helpers, and PNG/PDF/SVG export.
"""

from .posterior_plots import (
    plot_data_scatter,
    plot_marginal_posterior,
    plot_posterior_results,
    setup_plot_style,
)

__all__ = [
    "plot_data_scatter",
    "plot_marginal_posterior",
    "plot_posterior_results",
    "setup_plot_style",
]
