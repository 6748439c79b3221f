"""Tests for result tables and CSV export."""

import math
import os

import pandas as pd

from statlab.analysis import analyze_sample
from statlab.reporting import (
    estimates_table,
    format_estimate,
    histogram_table,
    interval_table,
    save_report_to_csv,
    summary_table,
)
from statlab.stats.descriptive import descriptive_summary, histogram_bins
from statlab.stats.estimation import estimate_parameters
from statlab.stats.intervals import mean_interval, proportion_interval

DATA = [1.0, 2.0, 2.0, 3.0, 4.0, 7.0]


def test_format_estimate_rounds_value_to_margin():
    assert format_estimate(12.3456, 0.0432) == "12.35 ± 0.04"
    assert format_estimate(4.567, 0.15) == "4.57 ± 0.15"
    assert format_estimate(1234.0, 56.0) == "1230 ± 60"


def test_format_estimate_zero_margin():
    assert format_estimate(0.0, 0.0) == "0 ± 0"


def test_format_estimate_keeps_second_figure_for_leading_one():
    assert format_estimate(3.14159, 0.0123) == "3.142 ± 0.012"
    assert format_estimate(3.14159, 0.0234) == "3.14 ± 0.02"
    assert format_estimate(3.14159, -0.0234) == "3.14 ± 0.02"


def test_summary_table_lists_every_statistic():
    df = summary_table(descriptive_summary(DATA))
    stats = dict(zip(df["Statistic"], df["Value"]))
    assert stats["count"] == 6
    assert stats["mode"] == 2.0
    assert math.isclose(stats["mean"], 19.0 / 6)
    assert {"median", "q1", "q3", "iqr", "skewness", "kurtosis"} <= set(stats)


def test_histogram_table_columns():
    df = histogram_table(histogram_bins(DATA, bin_count=3))
    assert list(df.columns) == ["Bin", "Lower Edge", "Upper Edge", "Count"]
    assert df["Count"].sum() == len(DATA)


def test_interval_table_rows():
    df = interval_table(mean_interval(DATA), proportion_interval(50, 100))
    assert df["Interval"].to_list() == ["mean", "proportion"]
    assert df.loc[0, "Method"] == "small sample, t-distribution"
    assert df.loc[1, "Reported"] == "0.50 ± 0.10"


def test_estimates_table_carries_note():
    df = estimates_table(estimate_parameters(DATA, "gamma"))
    assert df["Parameter"].to_list() == ["shape", "scale"]
    assert (df["MLE"] == df["MoM"]).all()
    assert df["Notes"].str.contains("method-of-moments").all()


def test_save_report_to_csv(tmp_path):
    report = analyze_sample(DATA, distribution="normal")
    paths = save_report_to_csv(report, output_dir=str(tmp_path / "out"))

    assert set(paths) == {
        "descriptive_summary",
        "histogram",
        "confidence_intervals",
        "parameter_estimates",
    }
    for path in paths.values():
        assert os.path.exists(path)
    est = pd.read_csv(paths["parameter_estimates"])
    assert est["Parameter"].to_list() == ["mean", "std"]


def test_save_report_without_estimates(tmp_path):
    report = analyze_sample(DATA)
    paths = save_report_to_csv(report, output_dir=str(tmp_path))
    assert "parameter_estimates" not in paths
