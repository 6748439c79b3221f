"""Maximum likelihood and method-of-moments parameter estimates.

Supported families and their parameters:

==============  ======================  ===============================
family          parameters              MLE
==============  ======================  ===============================
normal          ``mean``, ``std``       closed form (equals MoM)
uniform         ``a``, ``b``            sample min / max
exponential     ``lambda``              ``1 / mean`` (equals MoM)
poisson         ``lambda``              ``mean`` (equals MoM)
gamma           ``shape``, ``scale``    moment estimate, no closed form
beta            ``alpha``, ``beta``     moment estimate, no closed form
==============  ======================  ===============================

All moments are population moments (divisor ``n``).
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Dict, Sequence, Tuple

from ..errors import DegenerateInputError, UnsupportedDistributionError
from ..schema import ParameterEstimates
from .descriptive import _central_moment, _mean, as_sample

logger = logging.getLogger(__name__)

GAMMA_MIN_SHAPE = 0.001


class Distribution(str, Enum):
    NORMAL = "normal"
    UNIFORM = "uniform"
    EXPONENTIAL = "exponential"
    POISSON = "poisson"
    GAMMA = "gamma"
    BETA = "beta"

    @classmethod
    def parse(cls, name: "Distribution | str") -> "Distribution":
        """Resolve a family name (case-insensitive) to a :class:`Distribution`.

        Raises:
            UnsupportedDistributionError: If ``name`` is not a supported family.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        supported = ", ".join(m.value for m in cls)
        raise UnsupportedDistributionError(
            f"Unsupported distribution '{name}'; expected one of: {supported}"
        )


# Families whose "MLE" is really a moment estimate.
MOMENT_BASED_MLE = frozenset({Distribution.GAMMA, Distribution.BETA})


def _moments(values) -> Tuple[float, float]:
    center = _mean(values)
    return center, _central_moment(values, center, 2)


def _exponential_rate(center: float) -> Dict[str, float]:
    if center == 0:
        raise DegenerateInputError("Exponential rate is undefined for a zero sample mean.")
    return {"lambda": 1.0 / center}


def _gamma_moments(center: float, var: float) -> Dict[str, float]:
    if var == 0:
        raise DegenerateInputError("Gamma estimates are undefined for a zero sample variance.")
    if center == 0:
        raise DegenerateInputError("Gamma scale is undefined for a zero sample mean.")
    return {
        "shape": max(GAMMA_MIN_SHAPE, center**2 / var),
        "scale": var / center,
    }


def _beta_moments(center: float, var: float) -> Dict[str, float]:
    if var == 0:
        raise DegenerateInputError("Beta estimates are undefined for a zero sample variance.")
    s = center * (1.0 - center) / var - 1.0
    alpha = center * s
    beta = (1.0 - center) * s
    if alpha <= 0 or beta <= 0:
        raise DegenerateInputError(
            f"Sample mean {center:.6g} and variance {var:.6g} are incompatible with a "
            f"beta distribution (alpha={alpha:.6g}, beta={beta:.6g})."
        )
    return {"alpha": alpha, "beta": beta}


def mle(sample: Sequence[float], distribution: "Distribution | str") -> Dict[str, float]:
    """Maximum likelihood estimates for ``distribution``.

    Args:
        sample (Sequence[float]): Observations.
        distribution (Distribution | str): Family to fit.

    Returns:
        dict[str, float]: Parameter name to estimate.

    Raises:
        EmptyInputError: If the sample is empty.
        UnsupportedDistributionError: If the family is not supported.
        DegenerateInputError: If a zero mean or variance would be a divisor.

    Note:
        Gamma and beta return their method-of-moments estimates; see
        :data:`MOMENT_BASED_MLE`.
    """
    family = Distribution.parse(distribution)
    values = as_sample(sample)
    center, var = _moments(values)

    if family is Distribution.NORMAL:
        return {"mean": center, "std": math.sqrt(var)}
    if family is Distribution.UNIFORM:
        return {"a": min(values), "b": max(values)}
    if family is Distribution.EXPONENTIAL:
        return _exponential_rate(center)
    if family is Distribution.POISSON:
        return {"lambda": center}
    if family is Distribution.GAMMA:
        return _gamma_moments(center, var)
    if family is Distribution.BETA:
        return _beta_moments(center, var)
    raise UnsupportedDistributionError(f"No MLE available for '{family.value}'")


def mom(sample: Sequence[float], distribution: "Distribution | str") -> Dict[str, float]:
    """Method-of-moments estimates for ``distribution``.

    The uniform bounds are centered on the mean with width
    ``sqrt(12 * variance)``; every other family matches :func:`mle`.

    Raises:
        EmptyInputError: If the sample is empty.
        UnsupportedDistributionError: If the family is not supported.
        DegenerateInputError: If a zero mean or variance would be a divisor.
    """
    family = Distribution.parse(distribution)
    values = as_sample(sample)
    center, var = _moments(values)

    if family is Distribution.NORMAL:
        return {"mean": center, "std": math.sqrt(var)}
    if family is Distribution.UNIFORM:
        half_width = math.sqrt(12.0 * var) / 2.0
        return {"a": center - half_width, "b": center + half_width}
    if family is Distribution.EXPONENTIAL:
        return _exponential_rate(center)
    if family is Distribution.POISSON:
        return {"lambda": center}
    if family is Distribution.GAMMA:
        return _gamma_moments(center, var)
    if family is Distribution.BETA:
        return _beta_moments(center, var)
    raise UnsupportedDistributionError(f"No MoM estimate available for '{family.value}'")


def estimate_parameters(
    sample: Sequence[float], distribution: "Distribution | str"
) -> ParameterEstimates:
    """Compute MLE and MoM estimates side by side.

    The result flags families whose MLE column is a moment estimate so the
    caller can say so next to the numbers.
    """
    family = Distribution.parse(distribution)
    moment_based = family in MOMENT_BASED_MLE
    note = ""
    if moment_based:
        note = (
            f"No closed-form MLE for the {family.value} distribution; "
            "the MLE column reports method-of-moments estimates."
        )
        logger.info("Reporting moment estimates in place of MLE for %s", family.value)
    return ParameterEstimates(
        distribution=family.value,
        mle=mle(sample, family),
        mom=mom(sample, family),
        mle_is_moment_estimate=moment_based,
        note=note,
    )
