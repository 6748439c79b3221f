"""Approximate z and t critical values for two-sided confidence intervals.

The three conventional confidence levels (90%, 95%, 99%) use fixed table
values. Other levels use a closed-form tail approximation that is adequate
for interactive reporting but is not an exact inverse CDF; pass
``exact=True`` to use scipy's inverse CDFs for those levels instead.

The small-sample t value is a first-order correction of the z value,
``t ≈ z * (1 + z**2 / (4 * df))``. It is coarse for very small ``df`` and
should not be used for publication-grade inference.
"""

from __future__ import annotations

import importlib.util
import math
from typing import Dict

from ..errors import InvalidParameterError

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None
if HAVE_SCIPY:
    from scipy.stats import norm as standard_normal
    from scipy.stats import t as student_t

Z_TABLE: Dict[float, float] = {
    0.90: 1.645,
    0.95: 1.96,
    0.99: 2.576,
}

# Beyond this many degrees of freedom the t distribution is treated as normal.
LARGE_DF = 1000

_MIN_TAIL = 0.0001
_SMALL_TAIL_Z = 3.89
_Z_FLOOR = 1.0
_Z_CEILING = 4.0


def validate_confidence_level(confidence_level: float) -> float:
    """Return ``confidence_level`` as a float, rejecting values outside (0, 1)."""
    level = float(confidence_level)
    if not math.isfinite(level) or not 0.0 < level < 1.0:
        raise InvalidParameterError(
            f"Confidence level must lie strictly between 0 and 1, got {confidence_level!r}"
        )
    return level


def _require_scipy() -> None:
    if not HAVE_SCIPY:
        raise RuntimeError("exact critical values require scipy to be installed")


def z_critical(confidence_level: float, exact: bool = False) -> float:
    """Two-sided standard normal critical value for ``confidence_level``.

    Args:
        confidence_level (float): Confidence level in (0, 1).
        exact (bool, optional): Use ``scipy.stats.norm.ppf`` for levels
            without a table entry. Defaults to ``False``.

    Returns:
        float: Critical value ``z`` such that ``P(|Z| <= z) ≈ confidence_level``.

    Raises:
        InvalidParameterError: If the confidence level is outside (0, 1).

    Note:
        Without ``exact`` the approximation
        ``sqrt(w) * (1 - 1 / (2 * w**2))`` with ``w = -2 ln(tail)`` is clamped
        to ``[1.0, 4.0]``, and ``3.89`` is returned when the tail probability
        is at most ``1e-4``.
    """
    level = validate_confidence_level(confidence_level)
    if level in Z_TABLE:
        return Z_TABLE[level]

    tail = (1.0 - level) / 2.0
    if exact:
        _require_scipy()
        return float(standard_normal.ppf(1.0 - tail))

    if tail > _MIN_TAIL:
        w = -2.0 * math.log(tail)
        z = math.sqrt(w) * (1.0 - 1.0 / (2.0 * w**2))
        return max(_Z_FLOOR, min(_Z_CEILING, z))
    return _SMALL_TAIL_Z


def t_critical(
    degrees_of_freedom: int, confidence_level: float, exact: bool = False
) -> float:
    """Two-sided Student t critical value.

    Args:
        degrees_of_freedom (int): Degrees of freedom, at least 1.
        confidence_level (float): Confidence level in (0, 1).
        exact (bool, optional): Use ``scipy.stats.t.ppf`` instead of the
            first-order correction. Table z values are still used once
            ``degrees_of_freedom >= 1000``.

    Returns:
        float: Critical value, never below ``1.0``.

    Raises:
        InvalidParameterError: If ``degrees_of_freedom < 1`` or the confidence
            level is outside (0, 1).
    """
    level = validate_confidence_level(confidence_level)
    if degrees_of_freedom < 1:
        raise InvalidParameterError(
            f"degrees_of_freedom must be >= 1, got {degrees_of_freedom!r}"
        )
    if degrees_of_freedom >= LARGE_DF:
        return z_critical(level, exact=exact)

    if exact:
        _require_scipy()
        return float(student_t.ppf(1.0 - (1.0 - level) / 2.0, degrees_of_freedom))

    z = z_critical(level)
    t = z * (1.0 + z * z / (4.0 * degrees_of_freedom))
    return max(_Z_FLOOR, t)
