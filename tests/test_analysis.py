import logging

import pytest

from statlab.analysis import analyze_sample
from statlab.config import AnalysisConfig
from statlab.errors import (
    EmptyInputError,
    InvalidParameterError,
    InvalidProportionInputError,
    UnsupportedDistributionError,
)
from statlab.sampling import generate_sample
from statlab.schema import IntervalMethod
from statlab.stats.descriptive import descriptive_summary


def test_analyze_generated_sample_end_to_end(caplog):
    caplog.set_level(logging.INFO)
    sample = generate_sample("exponential", size=64, seed=7)
    report = analyze_sample(sample.values, AnalysisConfig(), sample.info.distribution)

    assert report.summary == descriptive_summary(sample.values)
    assert len(report.histogram) == 8
    assert sum(b.count for b in report.histogram) == 64
    assert report.mean_interval.method is IntervalMethod.LARGE_SAMPLE_Z
    assert report.proportion_interval.proportion == 0.5
    assert report.estimates is not None
    assert set(report.estimates.mle) == {"lambda"}
    assert any("Analysis completed" in rec.message for rec in caplog.records)


def test_analyze_without_distribution_skips_estimates():
    report = analyze_sample([1.0, 2.0, 3.0, 4.0])
    assert report.estimates is None
    assert report.mean_interval.method is IntervalMethod.SMALL_SAMPLE_T


def test_known_variance_config():
    config = AnalysisConfig(population_variance_known=True, assumed_variance=2.0, confidence_level=0.99)
    report = analyze_sample([1.0, 2.0, 3.0], config)
    assert report.mean_interval.method is IntervalMethod.KNOWN_VARIANCE_Z
    assert report.mean_interval.critical_value == 2.576


def test_analysis_errors_propagate():
    with pytest.raises(EmptyInputError):
        analyze_sample([])
    with pytest.raises(UnsupportedDistributionError):
        analyze_sample([1.0, 2.0, 3.0], distribution="weibull")


def test_config_validation():
    with pytest.raises(InvalidParameterError):
        AnalysisConfig(confidence_level=1.0)
    with pytest.raises(InvalidParameterError):
        AnalysisConfig(population_variance_known=True)
    with pytest.raises(InvalidParameterError):
        AnalysisConfig(population_variance_known=True, assumed_variance=-1.0)
    with pytest.raises(InvalidParameterError):
        AnalysisConfig(bin_count=0)
    with pytest.raises(InvalidProportionInputError):
        AnalysisConfig(successes=5, trials=3)
