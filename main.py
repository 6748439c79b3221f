#!/usr/bin/env python3
"""
Main script for running a statistical analysis of one sample.
"""

# Pipeline overview:
# 1) Obtain a sample: load one CSV column, or draw from a named distribution.
# 2) Compute descriptive statistics, histogram bins and box plot figures.
# 3) Build the mean and proportion confidence intervals.
# 4) Fit MLE / MoM parameters when a distribution family is named.
# 5) Export every table to CSV.

from __future__ import annotations

import argparse
import logging
import os
import sys
import time

import pandas as pd

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from statlab.analysis import analyze_sample
from statlab.config import (
    DEFAULT_CONFIDENCE_LEVEL,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SUCCESSES,
    DEFAULT_TRIALS,
    AnalysisConfig,
)
from statlab.errors import StatisticsError
from statlab.reporting import save_report_to_csv
from statlab.sampling import generate_sample, load_sample


def _configure_logging(log_file: str = "statlab_analysis.log") -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, mode="w"),
        ],
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for the analysis pipeline."""
    parser = argparse.ArgumentParser(
        description="Descriptive statistics, confidence intervals and parameter estimates for one sample."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", help="Path to a CSV file holding the sample.")
    source.add_argument(
        "--generate",
        metavar="FAMILY",
        help="Draw the sample from a distribution (normal, uniform, exponential, poisson, gamma, beta).",
    )
    parser.add_argument("--column", default=None, help="CSV column to read (default: first numeric).")
    parser.add_argument("--size", type=int, default=100, help="Generated sample size (default: 100).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for --generate.")
    parser.add_argument(
        "--distribution",
        default=None,
        help="Family to fit; defaults to the --generate family when generating.",
    )
    parser.add_argument(
        "--confidence",
        type=float,
        default=DEFAULT_CONFIDENCE_LEVEL,
        help=f"Confidence level in (0, 1) (default: {DEFAULT_CONFIDENCE_LEVEL}).",
    )
    parser.add_argument("--bins", type=int, default=None, help="Histogram bin count.")
    parser.add_argument(
        "--variance",
        type=float,
        default=None,
        help="Known population variance; switches the mean interval to the z procedure.",
    )
    parser.add_argument("--successes", type=int, default=DEFAULT_SUCCESSES)
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS)
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Use scipy inverse CDFs for non-table confidence levels.",
    )
    parser.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    return parser


def _print_report(report) -> None:
    s = report.summary
    m = report.mean_interval
    p = report.proportion_interval
    print("\n" + "=" * 60)
    print("DESCRIPTIVE STATISTICS")
    print("=" * 60)
    print(f"n = {s.count}   mean = {s.mean:.6g}   median = {s.median:.6g}")
    print(f"mode = {'none' if s.mode is None else f'{s.mode:.6g}'}")
    print(f"variance = {s.variance:.6g}   std = {s.std:.6g}")
    print(f"min = {s.min:.6g}   max = {s.max:.6g}   range = {s.range:.6g}")
    print(f"Q1 = {s.q1:.6g}   Q3 = {s.q3:.6g}   IQR = {s.iqr:.6g}")
    print(f"skewness = {s.skewness:.4f}   excess kurtosis = {s.kurtosis:.4f}")
    print(f"\nMean {m.confidence_level:.0%} CI: [{m.lower:.6g}, {m.upper:.6g}] ({m.method.value})")
    print(f"Proportion {p.confidence_level:.0%} CI: [{p.lower:.4f}, {p.upper:.4f}]")
    if report.estimates is not None:
        e = report.estimates
        print(f"\n{e.distribution} MLE: {e.mle}")
        print(f"{e.distribution} MoM: {e.mom}")
        if e.note:
            print(f"Note: {e.note}")
    print("=" * 60 + "\n")


def main(argv: list[str] | None = None) -> int:
    """Main execution function."""
    args = _build_arg_parser().parse_args(argv)
    _configure_logging()

    start_time = time.time()
    logging.info("Initializing statistical analysis pipeline")

    try:
        if args.input:
            sample = load_sample(args.input, args.column)
            distribution = args.distribution
        else:
            generated = generate_sample(args.generate, size=args.size, seed=args.seed)
            sample = generated.values
            distribution = args.distribution or generated.info.distribution

        config = AnalysisConfig(
            confidence_level=args.confidence,
            bin_count=args.bins,
            population_variance_known=args.variance is not None,
            assumed_variance=args.variance,
            exact_critical_values=args.exact,
            successes=args.successes,
            trials=args.trials,
            output_dir=args.outdir,
        )
        report = analyze_sample(sample, config, distribution)
    except (StatisticsError, OSError, pd.errors.EmptyDataError) as exc:
        logging.error("Analysis failed: %s", exc)
        return 1

    _print_report(report)
    paths = save_report_to_csv(report, config.output_dir)

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Generated output files:")
    for path in paths.values():
        logging.info("  - %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
