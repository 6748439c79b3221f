"""Turn analysis records into tables and write them to CSV.

This module is the boundary between in-memory results and exported
artifacts. Numeric columns keep full precision; the ``Reported`` column of
the interval table carries the rounded ``estimate ± margin`` text.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import asdict
from typing import Dict, List, Optional

import pandas as pd

from .analysis import AnalysisReport
from .schema import (
    DescriptiveStats,
    HistogramBin,
    MeanConfidenceInterval,
    ParameterEstimates,
    ProportionConfidenceInterval,
    ResultColumns,
)

logger = logging.getLogger(__name__)

COLUMNS = ResultColumns()


def format_estimate(value: float, margin: float) -> str:
    """Format ``value ± margin`` with the value rounded to the margin's place.

    The margin keeps one significant figure, or two when its leading digit
    is 1. A zero or non-finite margin falls back to six significant figures
    for both numbers.

    Example:
        ``format_estimate(12.3456, 0.0432)`` returns ``"12.35 ± 0.04"``.
    """
    margin = abs(float(margin))
    if margin == 0 or not math.isfinite(margin):
        return f"{value:.6g} ± {margin:.6g}"

    exponent = math.floor(math.log10(margin))
    places = -exponent
    if margin / 10**exponent < 2:
        places += 1
    decimals = max(places, 0)
    return (
        f"{round(float(value), places):.{decimals}f} ± "
        f"{round(margin, places):.{decimals}f}"
    )


def summary_table(stats: DescriptiveStats) -> pd.DataFrame:
    """One row per descriptive statistic, in record field order."""
    rows = [
        {COLUMNS.statistic: name, COLUMNS.value: value}
        for name, value in asdict(stats).items()
    ]
    return pd.DataFrame(rows, columns=[COLUMNS.statistic, COLUMNS.value])


def histogram_table(bins: List[HistogramBin]) -> pd.DataFrame:
    rows = [
        {
            COLUMNS.bin_label: b.label,
            COLUMNS.bin_lower: b.lower,
            COLUMNS.bin_upper: b.upper,
            COLUMNS.bin_count: b.count,
        }
        for b in bins
    ]
    return pd.DataFrame(
        rows,
        columns=[COLUMNS.bin_label, COLUMNS.bin_lower, COLUMNS.bin_upper, COLUMNS.bin_count],
    )


def interval_table(
    mean_ci: MeanConfidenceInterval,
    prop_ci: Optional[ProportionConfidenceInterval] = None,
) -> pd.DataFrame:
    """Tabulate the mean interval and, when given, the proportion interval."""
    rows = [
        {
            COLUMNS.interval: "mean",
            COLUMNS.method: mean_ci.method.value,
            "Confidence Level": mean_ci.confidence_level,
            "Estimate": mean_ci.mean,
            "Lower": mean_ci.lower,
            "Upper": mean_ci.upper,
            "Margin of Error": mean_ci.margin_of_error,
            "Standard Error": mean_ci.standard_error,
            "Critical Value": mean_ci.critical_value,
            "Sample Size": mean_ci.sample_size,
            "Reported": format_estimate(mean_ci.mean, mean_ci.margin_of_error),
        }
    ]
    if prop_ci is not None:
        rows.append(
            {
                COLUMNS.interval: "proportion",
                COLUMNS.method: "Wald, z",
                "Confidence Level": prop_ci.confidence_level,
                "Estimate": prop_ci.proportion,
                "Lower": prop_ci.lower,
                "Upper": prop_ci.upper,
                "Margin of Error": prop_ci.margin_of_error,
                "Standard Error": prop_ci.standard_error,
                "Critical Value": prop_ci.critical_value,
                "Sample Size": None,
                "Reported": format_estimate(prop_ci.proportion, prop_ci.margin_of_error),
            }
        )
    return pd.DataFrame(rows)


def estimates_table(estimates: ParameterEstimates) -> pd.DataFrame:
    """One row per parameter with MLE and MoM columns side by side."""
    names = list(estimates.mle)
    names += [k for k in estimates.mom if k not in estimates.mle]
    rows = [
        {
            COLUMNS.parameter: name,
            COLUMNS.mle: estimates.mle.get(name, math.nan),
            COLUMNS.mom: estimates.mom.get(name, math.nan),
            COLUMNS.notes: estimates.note,
        }
        for name in names
    ]
    return pd.DataFrame(
        rows, columns=[COLUMNS.parameter, COLUMNS.mle, COLUMNS.mom, COLUMNS.notes]
    )


def save_report_to_csv(report: AnalysisReport, output_dir: str = "output") -> Dict[str, str]:
    """Write every table of ``report`` into ``output_dir``.

    Args:
        report (AnalysisReport): Output of :func:`statlab.analysis.analyze_sample`.
        output_dir (str): Directory to write into; created if missing.

    Returns:
        dict[str, str]: Table name to written file path. The
        ``parameter_estimates`` entry is present only when the report has
        estimates.
    """
    os.makedirs(output_dir, exist_ok=True)

    tables = {
        "descriptive_summary": summary_table(report.summary),
        "histogram": histogram_table(report.histogram),
        "confidence_intervals": interval_table(
            report.mean_interval, report.proportion_interval
        ),
    }
    if report.estimates is not None:
        tables["parameter_estimates"] = estimates_table(report.estimates)

    paths: Dict[str, str] = {}
    for name, df in tables.items():
        path = os.path.join(output_dir, f"{name}.csv")
        df.to_csv(path, index=False)
        logger.info("Saved %s to %s", name.replace("_", " "), path)
        paths[name] = path
    return paths
