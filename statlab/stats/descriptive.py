"""Descriptive statistics for a single numeric sample.

Conventions:
- variance and standard deviation are population figures (divisor ``n``);
- quartiles use the nearest-rank method with a truncated index,
  ``sorted[floor(n * 0.25)]`` and ``sorted[floor(n * 0.75)]``, with no
  interpolation;
- skewness and kurtosis return 0 for a constant sample instead of dividing
  by a zero standard deviation.

Every function copies its input before sorting, so the caller's sequence is
never reordered.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..errors import EmptyInputError, InvalidParameterError
from ..schema import BoxplotSummary, DescriptiveStats, HistogramBin

logger = logging.getLogger(__name__)


def as_sample(sample: Sequence[float]) -> List[float]:
    """Validate a sample and return it as a fresh list of Python floats.

    Args:
        sample (Sequence[float]): Ordered observations. Any 1-D array-like is
            accepted.

    Returns:
        list[float]: Copy of the observations in their original order.

    Raises:
        EmptyInputError: If the sample has no observations.
        InvalidParameterError: If the input is not one-dimensional or contains
            a non-finite value.
    """
    if sample is None:
        raise EmptyInputError("Sample must contain at least one observation.")
    arr = np.asarray(sample, dtype=float)
    if arr.ndim != 1:
        raise InvalidParameterError(
            f"Sample must be one-dimensional, got shape {arr.shape}."
        )
    if arr.size == 0:
        raise EmptyInputError("Sample must contain at least one observation.")
    if not np.all(np.isfinite(arr)):
        raise InvalidParameterError("Sample contains non-finite values.")
    return [float(x) for x in arr]


def _mean(values: List[float]) -> float:
    total = 0.0
    for x in values:
        total += x
    return total / len(values)


def _central_moment(values: List[float], center: float, order: int) -> float:
    total = 0.0
    for x in values:
        total += (x - center) ** order
    return total / len(values)


def _median_of_sorted(ordered: Sequence[float]) -> float:
    n = len(ordered)
    mid = n // 2
    if n % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return float(ordered[mid])


def _quartiles_of_sorted(ordered: Sequence[float]) -> Tuple[float, float, float]:
    n = len(ordered)
    q1 = float(ordered[math.floor(n * 0.25)])
    q3 = float(ordered[math.floor(n * 0.75)])
    return q1, q3, q3 - q1


def _standardized_moment(values: List[float], order: int) -> float:
    center = _mean(values)
    sd = math.sqrt(_central_moment(values, center, 2))
    if sd == 0:
        return 0.0
    return _central_moment(values, center, order) / sd**order


def _excess_kurtosis(values: List[float]) -> float:
    center = _mean(values)
    sd = math.sqrt(_central_moment(values, center, 2))
    if sd == 0:
        return 0.0
    return _central_moment(values, center, 4) / sd**4 - 3.0


def mean(sample: Sequence[float]) -> float:
    """Arithmetic mean, summed left to right and divided by ``n``."""
    return _mean(as_sample(sample))


def median(sample: Sequence[float]) -> float:
    """Median of a sorted copy of ``sample``.

    For even ``n`` the two central values are averaged; for odd ``n`` the
    exact center value is returned.
    """
    return _median_of_sorted(sorted(as_sample(sample)))


def mode(sample: Sequence[float]) -> Optional[float]:
    """Return the uniquely most frequent value, or ``None``.

    Frequencies are counted over exact numeric equality. When two or more
    values share the highest frequency there is no unique mode and ``None``
    is returned; no tie-break is applied. This also means a sample in which
    every value occurs once (and ``n > 1``) has no mode.
    """
    values = as_sample(sample)
    ranked = Counter(values).most_common(2)
    if len(ranked) > 1 and ranked[0][1] == ranked[1][1]:
        return None
    return ranked[0][0]


def variance(sample: Sequence[float]) -> float:
    """Population variance (divisor ``n``)."""
    values = as_sample(sample)
    return _central_moment(values, _mean(values), 2)


def std(sample: Sequence[float]) -> float:
    """Population standard deviation."""
    return math.sqrt(variance(sample))


def quartiles(sample: Sequence[float]) -> Tuple[float, float, float]:
    """Return ``(q1, q3, iqr)`` using nearest-rank, truncated-index quartiles.

    Example:
        ``[1, 2, 3, 4, 5, 6, 7, 8]`` gives indices 2 and 6, so
        ``q1 = 3``, ``q3 = 7`` and ``iqr = 4``.
    """
    return _quartiles_of_sorted(sorted(as_sample(sample)))


def skewness(sample: Sequence[float]) -> float:
    """Third standardized moment; 0 when the standard deviation is 0."""
    return _standardized_moment(as_sample(sample), 3)


def kurtosis(sample: Sequence[float]) -> float:
    """Excess kurtosis (fourth standardized moment minus 3); 0 when std is 0."""
    return _excess_kurtosis(as_sample(sample))


def descriptive_summary(sample: Sequence[float]) -> DescriptiveStats:
    """Compute every descriptive statistic of ``sample`` in one snapshot.

    Order statistics come from a single sorted copy; mean and moment-based
    figures come from one pass over the sample in its original order, so each
    field is identical to calling the corresponding function on its own.

    Raises:
        EmptyInputError: If the sample is empty.
    """
    values = as_sample(sample)
    ordered = sorted(values)
    n = len(values)

    center = _mean(values)
    var = _central_moment(values, center, 2)
    q1, q3, iqr = _quartiles_of_sorted(ordered)

    stats = DescriptiveStats(
        mean=center,
        median=_median_of_sorted(ordered),
        mode=mode(values),
        variance=var,
        std=math.sqrt(var),
        min=ordered[0],
        max=ordered[-1],
        range=ordered[-1] - ordered[0],
        q1=q1,
        q3=q3,
        iqr=iqr,
        count=n,
        skewness=_standardized_moment(values, 3),
        kurtosis=_excess_kurtosis(values),
    )
    logger.debug("Computed descriptive summary for %d observations", n)
    return stats


def histogram_bins(
    sample: Sequence[float], bin_count: Optional[int] = None
) -> List[HistogramBin]:
    """Count observations in equal-width bins spanning ``[min, max]``.

    Args:
        sample (Sequence[float]): Observations to bin.
        bin_count (int, optional): Number of bins. Defaults to
            ``ceil(sqrt(n))``.

    Returns:
        list[HistogramBin]: Bins in ascending order, labelled
        ``"<lower>-<upper>"`` with two decimals.

    Raises:
        EmptyInputError: If the sample is empty.
        InvalidParameterError: If ``bin_count`` is smaller than 1.

    Note:
        Bins are half-open ``[lower, upper)`` except the last, which is closed
        so the sample maximum is always counted. A constant sample has zero
        bin width and all of its observations fall in the last bin.
    """
    values = as_sample(sample)
    n = len(values)
    if bin_count is None:
        bin_count = int(math.ceil(math.sqrt(n)))
    elif int(bin_count) != bin_count or bin_count < 1:
        raise InvalidParameterError(
            f"bin_count must be a positive integer, got {bin_count!r}"
        )
    bin_count = int(bin_count)

    arr = np.asarray(values, dtype=float)
    lo = float(arr.min())
    hi = float(arr.max())
    width = (hi - lo) / bin_count
    # Neighbouring bins share one edge value, so no observation is lost or
    # counted twice at a boundary.
    edges = [lo + i * width for i in range(bin_count)] + [hi]

    bins: List[HistogramBin] = []
    for i in range(bin_count):
        bin_min = edges[i]
        bin_max = edges[i + 1]
        if i == bin_count - 1:
            mask = (arr >= bin_min) & (arr <= bin_max)
        else:
            mask = (arr >= bin_min) & (arr < bin_max)
        bins.append(
            HistogramBin(
                label=f"{bin_min:.2f}-{bin_max:.2f}",
                count=int(np.count_nonzero(mask)),
                lower=bin_min,
                upper=bin_max,
            )
        )
    return bins


def boxplot_summary(
    sample: Sequence[float], iqr_multiplier: float = 1.5
) -> BoxplotSummary:
    """Box plot figures with Tukey fences at ``k * IQR`` beyond the quartiles.

    Whiskers end at the most extreme non-outlying observations. When every
    observation lies outside the fences the whiskers collapse to the
    quartiles.

    Raises:
        EmptyInputError: If the sample is empty.
        InvalidParameterError: If ``iqr_multiplier`` is negative or not finite.
    """
    k = float(iqr_multiplier)
    if not math.isfinite(k) or k < 0:
        raise InvalidParameterError(
            f"iqr_multiplier must be finite and >= 0, got {iqr_multiplier!r}"
        )
    ordered = sorted(as_sample(sample))
    q1, q3, iqr = _quartiles_of_sorted(ordered)
    lower_fence = q1 - k * iqr
    upper_fence = q3 + k * iqr

    inside = [x for x in ordered if lower_fence <= x <= upper_fence]
    outliers = tuple(x for x in ordered if x < lower_fence or x > upper_fence)
    if outliers:
        logger.debug(
            "Flagged %d outliers outside [%.6g, %.6g]",
            len(outliers),
            lower_fence,
            upper_fence,
        )

    return BoxplotSummary(
        q1=q1,
        median=_median_of_sorted(ordered),
        q3=q3,
        iqr=iqr,
        lower_fence=lower_fence,
        upper_fence=upper_fence,
        whisker_low=inside[0] if inside else q1,
        whisker_high=inside[-1] if inside else q3,
        outliers=outliers,
    )
