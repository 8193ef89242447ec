import numpy as np
import pytest

from bayreg.stats.errors import DimensionMismatchError, InvalidInputError
from bayreg.stats.sufficient import (
    SufficientStatistics,
    build_statistics,
    statistics_from_arrays,
)


def test_concrete_scenario_aggregates(line_observations):
    stats = build_statistics(line_observations)
    np.testing.assert_allclose(stats.xtx, [[3.0, 6.0], [6.0, 14.0]])
    np.testing.assert_allclose(stats.xty, [12.0, 28.0])
    assert stats.n == 3


def test_empty_observations_yield_zero_aggregates():
    stats = build_statistics([])
    np.testing.assert_array_equal(stats.xtx, np.zeros((2, 2)))
    np.testing.assert_array_equal(stats.xty, np.zeros(2))
    assert stats.n == 0


def test_array_input_matches_pairs(line_observations):
    from_pairs = build_statistics(line_observations)
    from_array = build_statistics(np.array(line_observations))
    np.testing.assert_array_equal(from_pairs.xtx, from_array.xtx)
    np.testing.assert_array_equal(from_pairs.xty, from_array.xty)


def test_order_does_not_matter():
    rng = np.random.default_rng(3)
    obs = rng.normal(size=(20, 2))
    a = build_statistics(obs)
    b = build_statistics(obs[::-1])
    np.testing.assert_allclose(a.xtx, b.xtx, rtol=1e-12)
    np.testing.assert_allclose(a.xty, b.xty, rtol=1e-12)


def test_merge_equals_building_from_concatenation():
    rng = np.random.default_rng(11)
    obs = rng.normal(size=(30, 2))
    merged = build_statistics(obs[:12]) + build_statistics(obs[12:])
    whole = build_statistics(obs)
    np.testing.assert_allclose(merged.xtx, whole.xtx, rtol=1e-12)
    np.testing.assert_allclose(merged.xty, whole.xty, rtol=1e-12)
    assert merged.n == whole.n == 30


def test_identical_x_values_give_singular_but_valid_xtx():
    stats = build_statistics([(2.0, 1.0), (2.0, 3.0), (2.0, 5.0)])
    assert np.isclose(np.linalg.det(stats.xtx), 0.0)
    assert np.all(np.linalg.eigvalsh(stats.xtx) >= -1e-12)


def test_malformed_observation_raises():
    with pytest.raises(DimensionMismatchError, match="Observation 1"):
        build_statistics([(1.0, 2.0), (3.0,), (4.0, 5.0)])
    with pytest.raises(DimensionMismatchError):
        build_statistics([(1.0, 2.0, 3.0)])


def test_non_finite_observation_raises():
    with pytest.raises(InvalidInputError, match="finite"):
        build_statistics([(1.0, 2.0), (np.nan, 1.0)])
    with pytest.raises(InvalidInputError):
        statistics_from_arrays([1.0, 2.0], [1.0, np.inf])


def test_non_numeric_observation_raises():
    with pytest.raises(InvalidInputError, match="real numbers"):
        build_statistics([(1.0, 2.0), ("a", 3.0)])


def test_empty_array_shape_still_checked():
    with pytest.raises(DimensionMismatchError):
        build_statistics(np.empty((0, 3)))
    assert build_statistics(np.empty((0,))).n == 0
    assert build_statistics(np.empty((0, 2))).n == 0


def test_parallel_arrays_length_mismatch():
    with pytest.raises(DimensionMismatchError):
        statistics_from_arrays([1.0, 2.0, 3.0], [1.0, 2.0])


def test_statistics_are_read_only(line_observations):
    stats = build_statistics(line_observations)
    with pytest.raises(ValueError):
        stats.xtx[0, 0] = 99.0


def test_zeros_constructor():
    stats = SufficientStatistics.zeros()
    assert stats.n == 0
    assert stats.is_finite()
