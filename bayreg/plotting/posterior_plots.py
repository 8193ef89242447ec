"""Render the data scatter and the marginal posterior densities.

Plotting functions receive precomputed posteriors and datasets and perform no
inference of their own.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..simulation import SyntheticDataset
from ..stats.distributions import MarginalNormal, PosteriorSpec
from .style import (
    COLORS,
    FONT_SIZES,
    MATH_LABELS,
    STYLE,
    clean_axis,
    save_figure_bundle,
    set_axis_labels,
    set_global_style,
)

logger = logging.getLogger(__name__)

PDF_POINTS = 101
PDF_WIDTH_SD = 4.0


def setup_plot_style() -> None:
    """Apply the project plotting style to matplotlib ``rcParams``."""
    set_global_style()


def line_x_range(x: Sequence[float], pad_fraction: float = 0.1) -> Tuple[float, float]:
    """Return the x extent for regression lines drawn over the data.

    The data range is padded by ``pad_fraction`` on each side; when all x
    values coincide the range is widened by 1 on each side instead.

    Raises:
        ValueError: If ``x`` has no finite values.
    """
    x_arr = np.asarray(x, dtype=float)
    x_arr = x_arr[np.isfinite(x_arr)]
    if x_arr.size == 0:
        raise ValueError("No finite x values to derive a plotting range from.")
    lo = float(np.min(x_arr))
    hi = float(np.max(x_arr))
    span = hi - lo
    if span > 1e-9:
        return lo - span * pad_fraction, hi + span * pad_fraction
    return lo - 1.0, hi + 1.0


def plot_data_scatter(
    x: Sequence[float],
    y: Sequence[float],
    output_dir: str = "output",
    true_line: Optional[Tuple[float, float]] = None,
    posterior: Optional[PosteriorSpec] = None,
    filename: str = "data_scatter.png",
) -> str:
    """Plot observations with the true and posterior-mean regression lines.

    Args:
        x (Sequence[float]): Predictor values.
        y (Sequence[float]): Responses.
        output_dir (str, optional): Directory for the figure bundle.
        true_line (tuple[float, float], optional): Generating
            ``(beta0, beta1)``, drawn as a solid line when given.
        posterior (PosteriorSpec, optional): Posterior whose mean line is
            drawn dashed when given.
        filename (str, optional): PNG file name; PDF/SVG share its stem.

    Returns:
        str: Path to the saved PNG file.

    Raises:
        ValueError: If ``x`` and ``y`` differ in length or are empty.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    if x_arr.size == 0:
        raise ValueError("No observations to plot.")
    if x_arr.shape != y_arr.shape:
        raise ValueError(f"x has {x_arr.size} values but y has {y_arr.size}.")

    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.scatter(
        x_arr,
        y_arr,
        s=22,
        color=COLORS["data"],
        alpha=STYLE.ALPHA_DATA,
        label="Simulated data",
        zorder=3,
    )

    x_line = np.array(line_x_range(x_arr))
    if true_line is not None:
        b0, b1 = true_line
        y_true = b0 + b1 * x_line
        if np.all(np.isfinite(y_true)):
            ax.plot(
                x_line,
                y_true,
                color=COLORS["true_line"],
                linewidth=STYLE.LINEWIDTH,
                label="True regression line",
                zorder=1,
            )
    if posterior is not None:
        y_post = posterior.predict_mean(x_line)
        if np.all(np.isfinite(y_post)):
            ax.plot(
                x_line,
                y_post,
                color=COLORS["posterior_line"],
                linewidth=STYLE.LINEWIDTH,
                linestyle="--",
                label="Posterior mean line",
                zorder=2,
            )

    set_axis_labels(ax, x="X", y="Y")
    ax.set_title("Data with regression lines", fontsize=FONT_SIZES["title"])
    clean_axis(ax, grid_axis="both")
    ax.legend(loc="best", fontsize=FONT_SIZES["legend"])

    png_path = save_figure_bundle(fig, os.path.join(output_dir, filename))
    plt.close(fig)
    logger.info("Saved data scatter plot to %s", png_path)
    return png_path


def plot_marginal_posterior(
    marginal: MarginalNormal,
    title: str,
    png_path: str,
    true_value: Optional[float] = None,
) -> str:
    """Plot a marginal posterior density over ``mean +/- 4 std``.

    Args:
        marginal (MarginalNormal): Marginal posterior of one coefficient.
        title (str): Figure title.
        png_path (str): Output PNG path; PDF/SVG share its stem.
        true_value (float, optional): Generating value, drawn as a vertical
            line up to the density curve.

    Returns:
        str: Path to the saved PNG file.

    Raises:
        ValueError: If the marginal mean or std dev is non-finite, or the
            std dev is not positive.
    """
    if not (np.isfinite(marginal.mean) and np.isfinite(marginal.std)) or marginal.std <= 0:
        raise ValueError(f"Posterior not calculated or invalid: {marginal!r}.")

    setup_plot_style()
    out_dir = os.path.dirname(png_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    grid = marginal.grid(num=PDF_POINTS, width=PDF_WIDTH_SD)
    density = marginal.pdf(grid)
    finite = np.isfinite(grid) & np.isfinite(density)

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.plot(grid[finite], density[finite], color=COLORS["pdf"], label="Posterior PDF")
    ax.fill_between(
        grid[finite], density[finite], color=COLORS["pdf"], alpha=STYLE.ALPHA_FILL
    )
    if true_value is not None and np.isfinite(true_value):
        ax.plot(
            [true_value, true_value],
            [0.0, float(marginal.pdf(true_value))],
            color=COLORS["true_value"],
            linewidth=STYLE.LINEWIDTH,
            label="True value",
        )

    ax.set_ylim(bottom=0.0)
    set_axis_labels(ax, x=MATH_LABELS["parameter"], y=MATH_LABELS["density"])
    ax.set_title(title, fontsize=FONT_SIZES["title"])
    clean_axis(ax)
    ax.legend(loc="best", fontsize=FONT_SIZES["legend"])

    saved = save_figure_bundle(fig, png_path)
    plt.close(fig)
    return saved


def plot_posterior_results(
    dataset: SyntheticDataset,
    posterior: PosteriorSpec,
    output_dir: str = "output",
) -> Dict[str, str]:
    """Render the scatter and both marginal posterior figures for one run.

    Returns:
        dict[str, str]: PNG paths keyed by ``"scatter"``, ``"intercept"`` and
        ``"slope"``.
    """
    paths = {
        "scatter": plot_data_scatter(
            dataset.x,
            dataset.y,
            output_dir=output_dir,
            true_line=(dataset.beta0, dataset.beta1),
            posterior=posterior,
        ),
        "intercept": plot_marginal_posterior(
            posterior.intercept,
            f"Posterior PDF for {MATH_LABELS['beta0']} (Normal)",
            os.path.join(output_dir, "posterior_intercept.png"),
            true_value=dataset.beta0,
        ),
        "slope": plot_marginal_posterior(
            posterior.slope,
            f"Posterior PDF for {MATH_LABELS['beta1']} (Normal)",
            os.path.join(output_dir, "posterior_slope.png"),
            true_value=dataset.beta1,
        ),
    }
    return paths
