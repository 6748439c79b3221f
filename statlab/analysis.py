"""
Run the full statistical analysis of one sample.

The pipeline computes, in order:
- the descriptive summary, histogram bins and box plot figures;
- a confidence interval for the population mean;
- a Wald interval for the configured success/trial counts;
- MLE and method-of-moments estimates when a distribution family is given.

Any failure propagates to the caller; a report is either complete or not
returned at all.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .config import AnalysisConfig
from .schema import (
    BoxplotSummary,
    DescriptiveStats,
    HistogramBin,
    MeanConfidenceInterval,
    ParameterEstimates,
    ProportionConfidenceInterval,
)
from .stats.descriptive import as_sample, boxplot_summary, descriptive_summary, histogram_bins
from .stats.estimation import Distribution, estimate_parameters
from .stats.intervals import mean_interval, proportion_interval

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisReport:
    config: AnalysisConfig
    summary: DescriptiveStats
    histogram: List[HistogramBin]
    boxplot: BoxplotSummary
    mean_interval: MeanConfidenceInterval
    proportion_interval: ProportionConfidenceInterval
    estimates: Optional[ParameterEstimates] = None


def analyze_sample(
    sample: Sequence[float],
    config: Optional[AnalysisConfig] = None,
    distribution: "Distribution | str | None" = None,
) -> AnalysisReport:
    """Analyze ``sample`` under ``config``.

    Args:
        sample (Sequence[float]): Observations.
        config (AnalysisConfig, optional): Settings. Defaults to
            ``AnalysisConfig()``.
        distribution (Distribution | str, optional): Family to fit. Parameter
            estimation is skipped when omitted.

    Returns:
        AnalysisReport: All computed records.

    Raises:
        StatisticsError: Any error raised by the underlying computations.
    """
    config = config or AnalysisConfig()
    values = as_sample(sample)
    start = time.time()
    logger.info("Analyzing sample of %d observations", len(values))

    summary = descriptive_summary(values)
    histogram = histogram_bins(values, config.bin_count)
    boxplot = boxplot_summary(values, config.iqr_multiplier)
    logger.info(
        "Descriptive summary: mean=%.6g, std=%.6g, %d histogram bins, %d outliers",
        summary.mean,
        summary.std,
        len(histogram),
        len(boxplot.outliers),
    )

    mean_ci = mean_interval(
        values,
        confidence_level=config.confidence_level,
        population_variance_known=config.population_variance_known,
        assumed_variance=config.assumed_variance,
        exact=config.exact_critical_values,
    )
    logger.info(
        "Mean interval [%.6g, %.6g] using %s",
        mean_ci.lower,
        mean_ci.upper,
        mean_ci.method.value,
    )

    prop_ci = proportion_interval(config.successes, config.trials, config.confidence_level)
    logger.info(
        "Proportion interval for %d/%d: [%.4f, %.4f]",
        config.successes,
        config.trials,
        prop_ci.lower,
        prop_ci.upper,
    )

    estimates = None
    if distribution is not None:
        estimates = estimate_parameters(values, distribution)
        logger.info(
            "Estimated %s parameters: MLE=%s, MoM=%s",
            estimates.distribution,
            estimates.mle,
            estimates.mom,
        )

    logger.info("Analysis completed in %.3f seconds", time.time() - start)
    return AnalysisReport(
        config=config,
        summary=summary,
        histogram=histogram,
        boxplot=boxplot,
        mean_interval=mean_ci,
        proportion_interval=prop_ci,
        estimates=estimates,
    )
