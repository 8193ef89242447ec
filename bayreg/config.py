"""Run configuration for the synthetic-data demonstration pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .stats.distributions import PriorSpec


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of the synthetic data generator.

    Attributes:
        beta0: True intercept of the generating line.
        beta1: True slope of the generating line.
        mean_x: Mean of the Normal distribution x values are drawn from.
        std_x: Standard deviation of x (must be > 0).
        sigma_noise: Noise standard deviation; also the known noise level
            handed to the posterior update (>= 0 for generation, > 0 for
            the update).
        n: Number of points to draw (clamped to at least 2).
        seed: Seed for ``numpy.random.default_rng``; ``None`` draws fresh
            entropy.
    """

    beta0: float = 1.0
    beta1: float = 2.0
    mean_x: float = 0.0
    std_x: float = 1.0
    sigma_noise: float = 1.0
    n: int = 50
    seed: Optional[int] = 42


@dataclass(frozen=True)
class RunConfig:
    """Everything a single end-to-end run needs."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    prior: PriorSpec = field(default_factory=PriorSpec)
    output_dir: str = "output"
    make_plots: bool = True
