#!/usr/bin/env python3
"""
Main script for running the Bayesian linear regression demonstration.
"""

# Pipeline overview (README-style):
# 1) Draw synthetic (x, y) data from a known line with Normal noise.
# 2) Reduce the observations to sufficient statistics (XtX, Xty).
# 3) Combine them with the Normal prior and the known noise precision in the
#    closed-form conjugate update to get the posterior mean and covariance.
# 4) Print the text summary and export the posterior table, observations,
#    and figures (data scatter, marginal posterior densities).

import argparse
import logging
import os
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from bayreg.config import RunConfig, SimulationConfig
from bayreg.output import save_data_to_csv
from bayreg.reporting import build_posterior_summary_table, format_summary
from bayreg.simulation import generate_synthetic_data
from bayreg.stats import BayesRegError, PriorSpec, build_statistics, compute_posterior

LOG_FILE = "bayes_regression.log"


def _configure_logging(log_file: str = LOG_FILE) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, mode="w"),
        ],
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for the demonstration run."""
    defaults = SimulationConfig()
    prior = PriorSpec()
    parser = argparse.ArgumentParser(
        description="Exact posterior for a simple linear model with known noise."
    )
    parser.add_argument("--beta0", type=float, default=defaults.beta0, help="True intercept.")
    parser.add_argument("--beta1", type=float, default=defaults.beta1, help="True slope.")
    parser.add_argument("--mean-x", type=float, default=defaults.mean_x, help="Mean of x.")
    parser.add_argument(
        "--std-x", type=float, default=defaults.std_x, help="Std dev of x (> 0)."
    )
    parser.add_argument(
        "--sigma-noise",
        type=float,
        default=defaults.sigma_noise,
        help="Known noise std dev, used for generation and the update (> 0).",
    )
    parser.add_argument(
        "--n", type=int, default=defaults.n, help="Number of points (at least 2)."
    )
    parser.add_argument("--prior-mean0", type=float, default=prior.mean0)
    parser.add_argument("--prior-mean1", type=float, default=prior.mean1)
    parser.add_argument("--prior-std0", type=float, default=prior.std0)
    parser.add_argument("--prior-std1", type=float, default=prior.std1)
    parser.add_argument(
        "--seed", type=int, default=defaults.seed, help="Random seed for data generation."
    )
    parser.add_argument(
        "--outdir", default="output", help="Output directory (default: output)."
    )
    parser.add_argument(
        "--no-plots", action="store_true", help="Skip figure generation."
    )
    return parser


def run(config: RunConfig) -> int:
    """Execute one generate-update-report cycle and return an exit status."""
    start_time = time.time()
    sim = config.simulation
    logging.info("Initializing Bayesian regression pipeline")

    try:
        dataset = generate_synthetic_data(sim)
    except ValueError as exc:
        logging.error("Data generation failed: %s", exc)
        return 1

    step_start = time.time()
    try:
        stats = build_statistics(dataset.observations)
        posterior = compute_posterior(stats, config.prior, sim.sigma_noise)
    except BayesRegError as exc:
        logging.error("Posterior calculation failed: %s", exc)
        return 1
    logging.info(
        "Posterior computed from %d observations in %.4f seconds",
        stats.n,
        time.time() - step_start,
    )

    print(format_summary(posterior, dataset, std_x=sim.std_x))

    summary_df = build_posterior_summary_table(
        posterior, config.prior, true_values=(dataset.beta0, dataset.beta1)
    )
    observations_csv, summary_csv = save_data_to_csv(
        dataset.to_frame(), summary_df, config.output_dir
    )

    figure_paths = {}
    if config.make_plots:
        from bayreg.plotting import plot_posterior_results

        step_start = time.time()
        figure_paths = plot_posterior_results(dataset, posterior, config.output_dir)
        logging.info("Figures rendered in %.2f seconds", time.time() - step_start)

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Analysis pipeline completed successfully")
    logging.info("Generated output files:")
    logging.info("  - Observations CSV: %s", observations_csv)
    logging.info("  - Posterior summary CSV: %s", summary_csv)
    for name, path in figure_paths.items():
        logging.info("  - Figure (%s): %s", name, path)
    return 0


def main(argv=None) -> int:
    """CLI entrypoint: parse arguments, validate the prior, and run."""
    args = _build_arg_parser().parse_args(argv)
    _configure_logging()

    try:
        prior = PriorSpec(
            args.prior_mean0, args.prior_mean1, args.prior_std0, args.prior_std1
        )
    except BayesRegError as exc:
        logging.error("Invalid prior: %s", exc)
        return 1

    config = RunConfig(
        simulation=SimulationConfig(
            beta0=args.beta0,
            beta1=args.beta1,
            mean_x=args.mean_x,
            std_x=args.std_x,
            sigma_noise=args.sigma_noise,
            n=args.n,
            seed=args.seed,
        ),
        prior=prior,
        output_dir=args.outdir,
        make_plots=not args.no_plots,
    )
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
