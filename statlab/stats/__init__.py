"""
Statistical computation core.

This subpackage holds the pure numerical routines. Every function takes a
sample (an ordered sequence of finite floats) plus scalar parameters and
returns a freshly built record from :mod:`statlab.schema`; nothing is cached
and no module-level state is mutated, so calls are safe from any thread.

Modules:
    descriptive:
        Mean, median, mode, population variance and standard deviation,
        nearest-rank quartiles, skewness, excess kurtosis, histogram bins and
        box plot summaries.

    critical_values:
        Table and approximate z/t critical values, with optional exact
        inverse CDFs when scipy is installed.

    intervals:
        Mean confidence intervals (known variance z, large-sample z,
        small-sample t) and Wald proportion intervals.

    estimation:
        MLE and method-of-moments estimates for the normal, uniform,
        exponential, poisson, gamma and beta families.

Design Principle:
    This subpackage has no dependencies on sampling, analysis or reporting
    modules. It can be tested on its own.
"""

from .critical_values import t_critical, z_critical
from .descriptive import (
    boxplot_summary,
    descriptive_summary,
    histogram_bins,
    kurtosis,
    mean,
    median,
    mode,
    quartiles,
    skewness,
    std,
    variance,
)
from .estimation import Distribution, estimate_parameters, mle, mom
from .intervals import mean_interval, proportion_interval

__all__ = [
    "mean",
    "median",
    "mode",
    "variance",
    "std",
    "quartiles",
    "skewness",
    "kurtosis",
    "descriptive_summary",
    "histogram_bins",
    "boxplot_summary",
    "z_critical",
    "t_critical",
    "mean_interval",
    "proportion_interval",
    "Distribution",
    "mle",
    "mom",
    "estimate_parameters",
]
