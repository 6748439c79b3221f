"""Define the result records returned by the statistical core.

All records are frozen dataclasses built fresh on every call. They have no
lifecycle of their own and can be shared freely between callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class IntervalMethod(str, Enum):
    """Procedure used to build a mean confidence interval.

    The value doubles as the human-readable method description reported next
    to the interval.
    """

    KNOWN_VARIANCE_Z = "known variance, z"
    LARGE_SAMPLE_Z = "large sample, z-approximation"
    SMALL_SAMPLE_T = "small sample, t-distribution"


@dataclass(frozen=True)
class DescriptiveStats:
    """Snapshot of the descriptive statistics of one sample.

    Attributes:
        mean: Arithmetic mean.
        median: Middle value of the sorted sample (average of the two central
            values for even ``count``).
        mode: Most frequent value, or ``None`` when no value is uniquely most
            frequent.
        variance: Population variance (divisor ``count``).
        std: Population standard deviation.
        min: Smallest observation.
        max: Largest observation.
        range: ``max - min``.
        q1: First quartile (nearest rank, truncated index).
        q3: Third quartile (nearest rank, truncated index).
        iqr: ``q3 - q1``.
        count: Number of observations.
        skewness: Third standardized moment (0 for a constant sample).
        kurtosis: Excess kurtosis (0 for a constant sample).
    """

    mean: float
    median: float
    mode: Optional[float]
    variance: float
    std: float
    min: float
    max: float
    range: float
    q1: float
    q3: float
    iqr: float
    count: int
    skewness: float
    kurtosis: float


@dataclass(frozen=True)
class HistogramBin:
    label: str
    count: int
    lower: float
    upper: float


@dataclass(frozen=True)
class BoxplotSummary:
    """Five-number box plot data with Tukey fences.

    ``whisker_low``/``whisker_high`` are the extreme non-outlying values;
    ``outliers`` lists the remaining observations in ascending order.
    """

    q1: float
    median: float
    q3: float
    iqr: float
    lower_fence: float
    upper_fence: float
    whisker_low: float
    whisker_high: float
    outliers: Tuple[float, ...] = ()


@dataclass(frozen=True)
class MeanConfidenceInterval:
    lower: float
    upper: float
    margin_of_error: float
    critical_value: float
    standard_error: float
    sample_size: int
    is_large_sample: bool
    method: IntervalMethod
    confidence_level: float
    mean: float


@dataclass(frozen=True)
class ProportionConfidenceInterval:
    lower: float
    upper: float
    margin_of_error: float
    proportion: float
    standard_error: float
    critical_value: float
    confidence_level: float


@dataclass(frozen=True)
class ParameterEstimates:
    """MLE and MoM estimates for one distribution family.

    When ``mle_is_moment_estimate`` is true the ``mle`` mapping holds
    method-of-moments values, because no closed-form MLE is implemented for
    that family. ``note`` carries the explanation for display.
    """

    distribution: str
    mle: Dict[str, float]
    mom: Dict[str, float]
    mle_is_moment_estimate: bool = False
    note: str = ""


@dataclass(frozen=True)
class ResultColumns:
    """Container for standardized column labels in exported tables."""

    statistic: str = "Statistic"
    value: str = "Value"
    bin_label: str = "Bin"
    bin_count: str = "Count"
    bin_lower: str = "Lower Edge"
    bin_upper: str = "Upper Edge"
    interval: str = "Interval"
    method: str = "Method"
    parameter: str = "Parameter"
    mle: str = "MLE"
    mom: str = "MoM"
    notes: str = "Notes"
