"""Exception hierarchy for the statistical core.

Every error derives from :class:`StatisticsError`, which is itself a
``ValueError`` so callers that already guard numerical input with
``except ValueError`` keep working.
"""

from __future__ import annotations


class StatisticsError(ValueError):
    """Base class for all errors raised by :mod:`statlab`."""


class EmptyInputError(StatisticsError):
    """Raised when a statistic is requested for a sample with no observations."""


class InvalidProportionInputError(StatisticsError):
    """Raised when success/trial counts do not describe a valid binomial sample."""


class UnsupportedDistributionError(StatisticsError):
    """Raised when a distribution family name is not one of the supported set."""


class DegenerateInputError(StatisticsError):
    """Raised when a zero mean or variance would be used as a divisor.

    The estimate would otherwise come out as ``nan`` or ``inf``.
    """


class InvalidParameterError(StatisticsError):
    """Raised for out-of-range scalar arguments (confidence level, bin count, ...)."""
