"""Analysis settings passed explicitly into the pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidParameterError, InvalidProportionInputError
from .stats.critical_values import validate_confidence_level

DEFAULT_CONFIDENCE_LEVEL = 0.95
DEFAULT_IQR_MULTIPLIER = 1.5
DEFAULT_SUCCESSES = 50
DEFAULT_TRIALS = 100
DEFAULT_OUTPUT_DIR = "output"


@dataclass(frozen=True)
class AnalysisConfig:
    """Parameters for one run of :func:`statlab.analysis.analyze_sample`.

    Attributes:
        confidence_level: Confidence level for both intervals, in (0, 1).
        bin_count: Histogram bin count; ``None`` means ``ceil(sqrt(n))``.
        iqr_multiplier: Tukey fence multiplier for the box plot.
        population_variance_known: Treat ``assumed_variance`` as the true
            population variance for the mean interval.
        assumed_variance: Known population variance, strictly positive.
        exact_critical_values: Use scipy inverse CDFs for non-table levels.
        successes: Successes for the proportion interval.
        trials: Trials for the proportion interval.
        output_dir: Directory for exported CSV tables.
    """

    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL
    bin_count: Optional[int] = None
    iqr_multiplier: float = DEFAULT_IQR_MULTIPLIER
    population_variance_known: bool = False
    assumed_variance: Optional[float] = None
    exact_critical_values: bool = False
    successes: int = DEFAULT_SUCCESSES
    trials: int = DEFAULT_TRIALS
    output_dir: str = DEFAULT_OUTPUT_DIR

    def __post_init__(self) -> None:
        validate_confidence_level(self.confidence_level)
        if self.bin_count is not None and self.bin_count < 1:
            raise InvalidParameterError(f"bin_count must be >= 1, got {self.bin_count}")
        if not math.isfinite(self.iqr_multiplier) or self.iqr_multiplier < 0:
            raise InvalidParameterError(
                f"iqr_multiplier must be finite and >= 0, got {self.iqr_multiplier}"
            )
        if self.population_variance_known:
            if self.assumed_variance is None:
                raise InvalidParameterError(
                    "assumed_variance is required when the population variance is known"
                )
            if not math.isfinite(self.assumed_variance) or self.assumed_variance <= 0:
                raise InvalidParameterError(
                    f"assumed_variance must be finite and > 0, got {self.assumed_variance}"
                )
        if self.trials <= 0 or not 0 <= self.successes <= self.trials:
            raise InvalidProportionInputError(
                f"Invalid counts: successes={self.successes}, trials={self.trials}"
            )
