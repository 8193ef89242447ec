import math
import os

import numpy as np
import pytest

from bayreg.config import SimulationConfig
from bayreg.plotting import (
    plot_data_scatter,
    plot_marginal_posterior,
    plot_posterior_results,
)
from bayreg.plotting.posterior_plots import line_x_range
from bayreg.simulation import generate_synthetic_data
from bayreg.stats import MarginalNormal, PriorSpec, build_statistics, compute_posterior


def _run():
    cfg = SimulationConfig(n=20, seed=10)
    data = generate_synthetic_data(cfg)
    post = compute_posterior(build_statistics(data.observations), PriorSpec(), cfg.sigma_noise)
    return data, post


def test_plot_posterior_results_writes_all_figures(tmp_path):
    data, post = _run()
    paths = plot_posterior_results(data, post, output_dir=str(tmp_path))
    assert set(paths) == {"scatter", "intercept", "slope"}
    for png in paths.values():
        assert png.endswith(".png")
        assert os.path.exists(png)
        assert os.path.exists(png[:-4] + ".pdf")
        assert os.path.exists(png[:-4] + ".svg")


def test_plot_data_scatter_without_lines(tmp_path):
    out = plot_data_scatter([1.0, 2.0], [3.0, 4.0], output_dir=str(tmp_path))
    assert out.endswith("data_scatter.png")
    assert os.path.exists(out)


def test_plot_data_scatter_rejects_empty_or_mismatched(tmp_path):
    with pytest.raises(ValueError):
        plot_data_scatter([], [], output_dir=str(tmp_path))
    with pytest.raises(ValueError):
        plot_data_scatter([1.0, 2.0], [1.0], output_dir=str(tmp_path))


def test_plot_marginal_rejects_invalid_marginal(tmp_path):
    with pytest.raises(ValueError, match="invalid"):
        plot_marginal_posterior(
            MarginalNormal(0.0, 0.0), "bad", str(tmp_path / "bad.png")
        )
    with pytest.raises(ValueError):
        plot_marginal_posterior(
            MarginalNormal(math.nan, 1.0), "bad", str(tmp_path / "bad.png")
        )


def test_line_x_range_padding():
    lo, hi = line_x_range([0.0, 10.0])
    assert math.isclose(lo, -1.0) and math.isclose(hi, 11.0)
    lo, hi = line_x_range(np.full(3, 2.0))
    assert (lo, hi) == (1.0, 3.0)
