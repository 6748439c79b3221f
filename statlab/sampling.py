"""
Sample acquisition: random generation, CSV loading, and manual text entry.
"""

# Every entry point returns a plain list of finite floats in the order the
# observations were produced or read, ready for the statistics core.

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from .errors import EmptyInputError, InvalidParameterError
from .stats.descriptive import as_sample
from .stats.estimation import Distribution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistributionInfo:
    """Metadata describing the distribution a sample was drawn from."""

    distribution: Distribution
    name: str
    formula: str
    parameters: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class GeneratedSample:
    values: List[float]
    info: DistributionInfo


_DISPLAY: Dict[Distribution, tuple] = {
    Distribution.NORMAL: (
        "Normal",
        "f(x) = (1/(σ√(2π))) * e^(-(x-μ)²/(2σ²))",
    ),
    Distribution.UNIFORM: ("Uniform", "f(x) = 1/(b-a), a ≤ x ≤ b"),
    Distribution.EXPONENTIAL: ("Exponential", "f(x) = λe^(-λx), x ≥ 0"),
    Distribution.POISSON: ("Poisson", "P(X=k) = λ^k e^(-λ) / k!"),
    Distribution.GAMMA: (
        "Gamma",
        "f(x) = x^(k-1) e^(-x/θ) / (Γ(k) θ^k), x > 0",
    ),
    Distribution.BETA: (
        "Beta",
        "f(x) = x^(α-1) (1-x)^(β-1) / B(α, β), 0 < x < 1",
    ),
}

DEFAULT_PARAMETERS: Dict[Distribution, Dict[str, float]] = {
    Distribution.NORMAL: {"mean": 10.0, "std": 5.0},
    Distribution.UNIFORM: {"a": 0.0, "b": 1.0},
    Distribution.EXPONENTIAL: {"lambda": 1.0},
    Distribution.POISSON: {"lambda": 4.0},
    Distribution.GAMMA: {"shape": 2.0, "scale": 2.0},
    Distribution.BETA: {"alpha": 2.0, "beta": 5.0},
}

# Parameters that must be strictly positive for numpy's samplers.
_POSITIVE = {"std", "lambda", "shape", "scale", "alpha", "beta"}


def _resolve_parameters(
    family: Distribution, parameters: Optional[Mapping[str, float]]
) -> Dict[str, float]:
    resolved = dict(DEFAULT_PARAMETERS[family])
    if parameters:
        unknown = set(parameters) - set(resolved)
        if unknown:
            raise InvalidParameterError(
                f"Unknown parameter(s) for {family.value}: {sorted(unknown)}; "
                f"expected {sorted(resolved)}"
            )
        resolved.update({k: float(v) for k, v in parameters.items()})

    for key, value in resolved.items():
        if not math.isfinite(value):
            raise InvalidParameterError(f"Parameter '{key}' must be finite, got {value}")
        if key in _POSITIVE and value <= 0:
            raise InvalidParameterError(f"Parameter '{key}' must be > 0, got {value}")
    if family is Distribution.UNIFORM and resolved["a"] >= resolved["b"]:
        raise InvalidParameterError(
            f"Uniform bounds require a < b, got a={resolved['a']}, b={resolved['b']}"
        )
    return resolved


def distribution_info(
    distribution: "Distribution | str", parameters: Optional[Mapping[str, float]] = None
) -> DistributionInfo:
    """Build the metadata record for ``distribution`` with resolved parameters."""
    family = Distribution.parse(distribution)
    name, formula = _DISPLAY[family]
    return DistributionInfo(
        distribution=family,
        name=name,
        formula=formula,
        parameters=_resolve_parameters(family, parameters),
    )


def generate_sample(
    distribution: "Distribution | str" = Distribution.NORMAL,
    size: int = 100,
    parameters: Optional[Mapping[str, float]] = None,
    seed: Optional[int] = None,
) -> GeneratedSample:
    """Draw a random sample from one of the supported families.

    Args:
        distribution (Distribution | str): Family to draw from. Defaults to
            normal with mean 10 and standard deviation 5.
        size (int): Number of observations, at least 1.
        parameters (Mapping[str, float], optional): Overrides for the family's
            default parameters, keyed as in :data:`DEFAULT_PARAMETERS`.
        seed (int, optional): Seed for ``numpy.random.default_rng``.

    Returns:
        GeneratedSample: Observations plus the generating distribution's
        metadata.

    Raises:
        UnsupportedDistributionError: If the family is not supported.
        InvalidParameterError: If ``size < 1`` or a parameter is unknown or
            out of range.
    """
    if size < 1:
        raise InvalidParameterError(f"size must be >= 1, got {size}")
    info = distribution_info(distribution, parameters)
    p = info.parameters
    rng = np.random.default_rng(seed)

    family = info.distribution
    if family is Distribution.NORMAL:
        draws = rng.normal(p["mean"], p["std"], size)
    elif family is Distribution.UNIFORM:
        draws = rng.uniform(p["a"], p["b"], size)
    elif family is Distribution.EXPONENTIAL:
        draws = rng.exponential(1.0 / p["lambda"], size)
    elif family is Distribution.POISSON:
        draws = rng.poisson(p["lambda"], size)
    elif family is Distribution.GAMMA:
        draws = rng.gamma(p["shape"], p["scale"], size)
    else:
        draws = rng.beta(p["alpha"], p["beta"], size)

    logger.info("Generated %d observations from %s %s", size, info.name, p)
    return GeneratedSample(values=[float(x) for x in draws], info=info)


def load_sample(filepath: str, column: Optional[str] = None) -> List[float]:
    """Load a sample from one column of a CSV file.

    Args:
        filepath (str): Path to the CSV file.
        column (str, optional): Column to read. Defaults to the first column
            holding at least one numeric value.

    Returns:
        list[float]: Finite numeric cells of the column in file order.

    Raises:
        InvalidParameterError: If ``column`` is not in the file.
        EmptyInputError: If no numeric observations remain.

    Note:
        Non-numeric, missing, and non-finite cells are dropped with a logged
        warning rather than failing the whole load.
    """
    df = pd.read_csv(filepath)
    if column is not None:
        if column not in df.columns:
            raise InvalidParameterError(
                f"Column '{column}' not found in {filepath}; available: {list(df.columns)}"
            )
        series = pd.to_numeric(df[column], errors="coerce")
    else:
        series = None
        for col in df.columns:
            candidate = pd.to_numeric(df[col], errors="coerce")
            if candidate.notna().any():
                column, series = col, candidate
                break
        if series is None:
            raise EmptyInputError(f"No numeric column found in {filepath}")

    arr = series.to_numpy(dtype=float)
    finite = np.isfinite(arr)
    dropped = int(len(arr) - np.count_nonzero(finite))
    if dropped:
        logger.warning(
            "Dropped %d non-numeric or missing cells from column '%s' in %s",
            dropped,
            column,
            filepath,
        )
    values = [float(x) for x in arr[finite]]
    if not values:
        raise EmptyInputError(f"Column '{column}' in {filepath} has no numeric values")
    logger.info("Loaded %d observations from column '%s' of %s", len(values), column, filepath)
    return values


def parse_sample_text(text: str) -> List[float]:
    """Parse manually entered numbers separated by commas, semicolons or whitespace.

    Raises:
        EmptyInputError: If ``text`` holds no numbers.
        InvalidParameterError: If a token is not a finite number.
    """
    tokens = [tok for tok in re.split(r"[,;\s]+", text.strip()) if tok]
    if not tokens:
        raise EmptyInputError("No numbers found in the entered text.")
    values = []
    for tok in tokens:
        try:
            value = float(tok)
        except ValueError:
            raise InvalidParameterError(f"'{tok}' is not a number") from None
        if not math.isfinite(value):
            raise InvalidParameterError(f"'{tok}' is not a finite number")
        values.append(value)
    return values


def index_series(sample: Sequence[float]) -> pd.DataFrame:
    """Tabulate observations against their zero-based position in the sample."""
    values = as_sample(sample)
    return pd.DataFrame({"index": np.arange(len(values)), "value": values})
