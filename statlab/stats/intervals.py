"""Confidence intervals for a population mean and a binomial proportion."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from ..errors import (
    DegenerateInputError,
    InvalidParameterError,
    InvalidProportionInputError,
)
from ..schema import (
    IntervalMethod,
    MeanConfidenceInterval,
    ProportionConfidenceInterval,
)
from .critical_values import t_critical, validate_confidence_level, z_critical
from .descriptive import _mean, as_sample

logger = logging.getLogger(__name__)

# Samples of at least this size use the normal approximation when the
# population variance is unknown.
LARGE_SAMPLE_SIZE = 30

# Wald intervals use their own lookup; unlisted levels fall back to 95%.
_PROPORTION_Z = {0.90: 1.645, 0.95: 1.96, 0.99: 2.576}
_PROPORTION_Z_DEFAULT = 1.96


def mean_interval(
    sample: Sequence[float],
    confidence_level: float = 0.95,
    population_variance_known: bool = False,
    assumed_variance: Optional[float] = None,
    exact: bool = False,
) -> MeanConfidenceInterval:
    """Confidence interval for the population mean of ``sample``.

    The procedure is chosen in this order:

    1. ``population_variance_known`` with an ``assumed_variance``: z critical
       value, standard error ``sqrt(assumed_variance / n)``.
    2. ``n >= 30``: z critical value with the sample standard deviation.
    3. Otherwise: t critical value on ``n - 1`` degrees of freedom with the
       sample standard deviation.

    Args:
        sample (Sequence[float]): Observations.
        confidence_level (float, optional): Confidence level in (0, 1).
            Defaults to ``0.95``.
        population_variance_known (bool, optional): Whether
            ``assumed_variance`` is the true population variance.
        assumed_variance (float, optional): Known population variance. Must be
            strictly positive when used.
        exact (bool, optional): Forwarded to the critical value provider.

    Returns:
        MeanConfidenceInterval: Bounds, margin, critical value, standard
        error and the procedure applied.

    Raises:
        EmptyInputError: If the sample is empty.
        InvalidParameterError: If the confidence level is outside (0, 1) or
            the known variance is not strictly positive.
        DegenerateInputError: If the variance is unknown and the sample has a
            single observation, so no sample standard deviation exists.

    Note:
        The sample standard deviation uses the ``n - 1`` divisor, unlike the
        population figure reported by :func:`statlab.stats.descriptive.std`.
    """
    values = as_sample(sample)
    level = validate_confidence_level(confidence_level)
    n = len(values)
    center = _mean(values)
    is_large = n >= LARGE_SAMPLE_SIZE

    if population_variance_known and assumed_variance is not None:
        var = float(assumed_variance)
        if not math.isfinite(var) or var <= 0:
            raise InvalidParameterError(
                f"Known population variance must be finite and > 0, got {assumed_variance!r}"
            )
        method = IntervalMethod.KNOWN_VARIANCE_Z
        critical = z_critical(level, exact=exact)
        standard_error = math.sqrt(var / n)
    else:
        if population_variance_known:
            logger.warning(
                "Population variance flagged as known but no value supplied; "
                "using the sample standard deviation instead"
            )
        if n < 2:
            raise DegenerateInputError(
                "Sample standard deviation is undefined for a single observation."
            )
        sample_sd = math.sqrt(sum((x - center) ** 2 for x in values) / (n - 1))
        standard_error = sample_sd / math.sqrt(n)
        if is_large:
            method = IntervalMethod.LARGE_SAMPLE_Z
            critical = z_critical(level, exact=exact)
        else:
            method = IntervalMethod.SMALL_SAMPLE_T
            critical = t_critical(n - 1, level, exact=exact)

    margin = critical * standard_error
    logger.debug(
        "Mean interval (%s): n=%d, critical=%.4f, se=%.6g",
        method.value,
        n,
        critical,
        standard_error,
    )
    return MeanConfidenceInterval(
        lower=center - margin,
        upper=center + margin,
        margin_of_error=margin,
        critical_value=critical,
        standard_error=standard_error,
        sample_size=n,
        is_large_sample=is_large,
        method=method,
        confidence_level=level,
        mean=center,
    )


def proportion_interval(
    successes: int, trials: int, confidence_level: float = 0.95
) -> ProportionConfidenceInterval:
    """Wald confidence interval for a binomial proportion.

    Args:
        successes (int): Number of successes, ``0 <= successes <= trials``.
        trials (int): Number of trials, at least 1.
        confidence_level (float, optional): Confidence level in (0, 1).
            Levels other than 0.90, 0.95 and 0.99 use the 95% critical value.

    Returns:
        ProportionConfidenceInterval: Bounds clamped to ``[0, 1]`` and the
        unclamped margin of error.

    Raises:
        InvalidProportionInputError: If ``trials <= 0`` or ``successes`` lies
            outside ``[0, trials]``.
        InvalidParameterError: If the confidence level is outside (0, 1).

    Note:
        The critical value lookup here is deliberately narrower than
        :func:`statlab.stats.critical_values.z_critical`; both agree on the
        three table levels.
    """
    if trials <= 0 or successes < 0 or successes > trials:
        raise InvalidProportionInputError(
            f"Invalid counts: successes={successes!r}, trials={trials!r}; "
            "need trials >= 1 and 0 <= successes <= trials."
        )
    level = validate_confidence_level(confidence_level)
    critical = _PROPORTION_Z.get(level, _PROPORTION_Z_DEFAULT)

    p = successes / trials
    standard_error = math.sqrt(p * (1.0 - p) / trials)
    margin = critical * standard_error

    return ProportionConfidenceInterval(
        lower=max(0.0, p - margin),
        upper=min(1.0, p + margin),
        margin_of_error=margin,
        proportion=p,
        standard_error=standard_error,
        critical_value=critical,
        confidence_level=level,
    )
