"""
A Python package for interactive statistical analysis of a numeric sample.

Computes descriptive statistics, confidence intervals for means and
proportions, and MLE / method-of-moments distribution parameter estimates.

Modules:
    - stats: the pure computation core (descriptive statistics, critical
      values, confidence intervals, parameter estimation).
    - sampling: generates, loads, or parses samples.
    - analysis: runs the full pipeline for one sample.
    - reporting: builds result tables and writes them to CSV.
    - errors: exception hierarchy shared by all modules.
"""

__version__ = "1.0.0"

from .analysis import AnalysisReport, analyze_sample
from .config import AnalysisConfig
from .errors import (
    DegenerateInputError,
    EmptyInputError,
    InvalidParameterError,
    InvalidProportionInputError,
    StatisticsError,
    UnsupportedDistributionError,
)
from .reporting import save_report_to_csv
from .sampling import generate_sample, load_sample, parse_sample_text
from .stats import (
    Distribution,
    descriptive_summary,
    estimate_parameters,
    histogram_bins,
    mean_interval,
    mle,
    mom,
    proportion_interval,
    t_critical,
    z_critical,
)

__all__ = [
    # Errors
    "StatisticsError",
    "EmptyInputError",
    "InvalidProportionInputError",
    "UnsupportedDistributionError",
    "DegenerateInputError",
    "InvalidParameterError",
    # Core
    "Distribution",
    "descriptive_summary",
    "histogram_bins",
    "z_critical",
    "t_critical",
    "mean_interval",
    "proportion_interval",
    "mle",
    "mom",
    "estimate_parameters",
    # Pipeline
    "AnalysisConfig",
    "AnalysisReport",
    "analyze_sample",
    "generate_sample",
    "load_sample",
    "parse_sample_text",
    "save_report_to_csv",
]
