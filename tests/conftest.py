"""Pytest configuration for repository-relative imports and shared fixtures."""

import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")

from bayreg.stats import PriorSpec  # noqa: E402


@pytest.fixture
def line_observations():
    """Three points on y = 2x."""
    return [(1.0, 2.0), (2.0, 4.0), (3.0, 6.0)]


@pytest.fixture
def wide_prior():
    return PriorSpec(mean0=0.0, mean1=0.0, std0=10.0, std1=10.0)
