import math

import numpy as np
import pytest

from bayreg.config import SimulationConfig
from bayreg.simulation import (
    generate_synthetic_data,
    implied_correlation,
    sample_correlation,
)


def test_generation_is_reproducible_for_a_seed():
    cfg = SimulationConfig(n=25, seed=123)
    a = generate_synthetic_data(cfg)
    b = generate_synthetic_data(cfg)
    np.testing.assert_array_equal(a.x, b.x)
    np.testing.assert_array_equal(a.y, b.y)
    assert a.n == 25
    assert a.observations.shape == (25, 2)


def test_explicit_generator_is_used():
    cfg = SimulationConfig(n=10, seed=None)
    a = generate_synthetic_data(cfg, rng=np.random.default_rng(9))
    b = generate_synthetic_data(cfg, rng=np.random.default_rng(9))
    np.testing.assert_array_equal(a.y, b.y)


def test_noiseless_data_lies_on_the_line():
    cfg = SimulationConfig(beta0=1.5, beta1=-0.5, sigma_noise=0.0, n=15, seed=1)
    data = generate_synthetic_data(cfg)
    np.testing.assert_allclose(data.y, 1.5 - 0.5 * data.x)


def test_point_count_clamped_to_two():
    with pytest.warns(UserWarning, match="minimum of 2"):
        data = generate_synthetic_data(SimulationConfig(n=1, seed=0))
    assert data.n == 2


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"std_x": 0.0}, "std_x"),
        ({"sigma_noise": -0.1}, "negative"),
        ({"beta1": math.nan}, "beta1"),
    ],
)
def test_invalid_generation_parameters(kwargs, message):
    with pytest.raises(ValueError, match=message):
        generate_synthetic_data(SimulationConfig(**kwargs))


def test_frame_columns():
    df = generate_synthetic_data(SimulationConfig(n=5, seed=2)).to_frame()
    assert list(df.columns) == ["x", "y"]
    assert len(df) == 5


def test_implied_correlation():
    assert math.isclose(implied_correlation(2.0, 1.0, 1.0), math.sqrt(4.0 / 5.0))
    assert math.isclose(implied_correlation(-2.0, 1.0, 1.0), -math.sqrt(4.0 / 5.0))
    assert implied_correlation(0.0, 1.0, 1.0) == 0.0
    assert implied_correlation(3.0, 1.0, 0.0) == 1.0
    assert implied_correlation(0.0, 1.0, 0.0) == 0.0
    assert math.isnan(implied_correlation(1.0, 0.0, 1.0))


def test_sample_correlation():
    x = np.array([1.0, 2.0, 3.0, 4.0])
    assert math.isclose(sample_correlation(x, 2.0 * x + 1.0), 1.0)
    assert math.isclose(sample_correlation(x, -x), -1.0)
    assert math.isnan(sample_correlation([1.0], [2.0]))
    assert math.isnan(sample_correlation(x, np.full(4, 3.0)))
