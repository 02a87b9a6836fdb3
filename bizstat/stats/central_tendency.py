"""Central tendency and position measures for weighted datasets.

Means are computed directly from the ``(value, frequency)`` pairs; median,
quartiles and percentiles are read from the frequency-expanded sorted
sample. Quartiles follow the ``(n + 1) / 4`` discrete-position rule without
interpolation (see :mod:`bizstat.constants`).
"""

from __future__ import annotations

import math
import warnings
from dataclasses import asdict, dataclass, field

import numpy as np
import pandas as pd

from ..constants import DEFAULT_PERCENTILES
from ..dataset import Dataset
from ..errors import InvalidDomainError
from .moments import ratio, weighted_mean


@dataclass(frozen=True)
class CentralTendencyResult:
    mean: float
    geometric_mean: float
    harmonic_mean: float
    median: float
    modes: tuple[float, ...]

    def to_dict(self) -> dict:
        out = asdict(self)
        out["modes"] = list(self.modes)
        return out


@dataclass(frozen=True)
class Quartiles:
    q1: float
    q2: float
    q3: float


@dataclass(frozen=True)
class PositionMeasures:
    quartiles: Quartiles
    percentiles: dict[int, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        out = asdict(self.quartiles)
        out.update({f"p{p}": v for p, v in self.percentiles.items()})
        return out


def _check_domain(data: Dataset, measure: str, strict: bool) -> None:
    if np.all(data.values > 0):
        return
    message = f"{measure} is only defined for positive values; result may be non-finite."
    if strict:
        raise InvalidDomainError(message)
    warnings.warn(message, RuntimeWarning, stacklevel=3)


def arithmetic_mean(data: Dataset) -> float:
    return weighted_mean(data)


def geometric_mean(data: Dataset, strict: bool = False) -> float:
    """Return the ``n``-th root of the product of the expanded sample.

    Args:
        data (Dataset): Weighted observations; ``n`` is the total frequency.
        strict (bool, optional): Raise instead of returning a non-finite or
            meaningless value when any observation is ``<= 0``.
            Defaults to ``False``.

    Returns:
        float: Geometric mean. With a zero observation the result is ``0``;
        with an odd count of negative observations it is ``nan``.

    Raises:
        InvalidDomainError: If ``strict`` and any value is ``<= 0``.

    Note:
        Positive samples are averaged in log space, which gives the same
        value as the product form without overflowing on long samples.
    """
    _check_domain(data, "Geometric mean", strict)
    values = data.values
    freqs = data.frequencies
    n = data.total_frequency
    if np.all(values > 0):
        return float(np.exp(np.sum(freqs * np.log(values)) / n))
    with np.errstate(invalid="ignore", over="ignore"):
        product = np.prod(np.power(values, freqs.astype(float)))
        return float(np.power(product, 1.0 / n))


def harmonic_mean(data: Dataset, strict: bool = False) -> float:
    """Return ``sum(f) / sum(f / x)``.

    A zero observation makes the reciprocal sum infinite and the mean ``0``.

    Raises:
        InvalidDomainError: If ``strict`` and any value is ``<= 0``.
    """
    _check_domain(data, "Harmonic mean", strict)
    with np.errstate(divide="ignore", invalid="ignore"):
        reciprocal_sum = np.sum(data.frequencies / data.values)
    return ratio(data.total_frequency, reciprocal_sum)


def median(data: Dataset) -> float:
    expanded = data.expanded()
    n = len(expanded)
    if n % 2 == 0:
        return float((expanded[n // 2 - 1] + expanded[n // 2]) / 2)
    return float(expanded[n // 2])


def modes(data: Dataset) -> tuple[float, ...]:
    """Return every value whose frequency equals the maximum frequency.

    Values are reported once each, in input order.
    """
    max_freq = max(item.frequency for item in data)
    tied = [float(item.value) for item in data if item.frequency == max_freq]
    return tuple(dict.fromkeys(tied))


def quartiles(data: Dataset) -> Quartiles:
    """Return Q1/Q2/Q3 with the ``(n + 1) / 4`` position rule and Q2 = median.

    For samples shorter than three observations the Q1 position falls
    before the first element, so Q1 (and every spread measure built on it)
    is ``nan``.
    """
    expanded = data.expanded()
    n = len(expanded)
    q1_idx = math.floor((n + 1) / 4) - 1
    q3_idx = math.floor(3 * (n + 1) / 4) - 1
    return Quartiles(
        q1=float(expanded[q1_idx]) if q1_idx >= 0 else math.nan,
        q2=median(data),
        q3=float(expanded[q3_idx]),
    )


def percentile(data: Dataset, p: float) -> float:
    """Return the expanded sorted sample at index ``floor(p / 100 * n)``.

    Raises:
        ValueError: If ``p`` is outside ``[0, 100)``.
    """
    if not 0 <= p < 100:
        raise ValueError(f"Percentile must satisfy 0 <= p < 100, got {p}")
    expanded = data.expanded()
    return float(expanded[math.floor((p / 100) * len(expanded))])


def position_measures(
    data: Dataset, percentiles: tuple[int, ...] = DEFAULT_PERCENTILES
) -> PositionMeasures:
    return PositionMeasures(
        quartiles=quartiles(data),
        percentiles={int(p): percentile(data, p) for p in percentiles},
    )


def central_tendency(data: Dataset, strict: bool = False) -> CentralTendencyResult:
    """Compute mean, geometric mean, harmonic mean, median and modes.

    Non-positive values make the geometric and harmonic means non-finite or
    meaningless; they are returned as data (with a ``RuntimeWarning``)
    unless ``strict`` is set.
    """
    return CentralTendencyResult(
        mean=arithmetic_mean(data),
        geometric_mean=geometric_mean(data, strict=strict),
        harmonic_mean=harmonic_mean(data, strict=strict),
        median=median(data),
        modes=modes(data),
    )


def frequency_table(data: Dataset) -> pd.DataFrame:
    """Tabulate value, frequency, relative and cumulative frequency, and f·x."""
    total = data.total_frequency
    freqs = data.frequencies
    values = data.values
    return pd.DataFrame(
        {
            "Value": values,
            "Frequency": freqs,
            "Relative Frequency (%)": freqs / total * 100.0,
            "Cumulative Frequency": np.cumsum(freqs),
            "f·x": values * freqs,
        }
    )


def class_frequency_table(
    data: Dataset, width: float, start: float | None = None
) -> pd.DataFrame:
    """Group the expanded sample into equal-width class intervals.

    Classes are half-open, ``[lower, upper)``, labelled ``"lower-upper"``.
    Empty classes between the first and last occupied class are kept.

    Args:
        data (Dataset): Weighted observations.
        width (float): Class width, ``> 0``.
        start (float, optional): Lower bound of the first class. Defaults to
            the smallest value rounded down to a multiple of ``width``.

    Returns:
        pd.DataFrame: Columns ``Class``, ``Lower``, ``Upper``, ``Midpoint``,
        ``Frequency`` and ``Cumulative Frequency``.

    Raises:
        ValueError: If ``width <= 0`` or ``start`` exceeds the smallest value.
    """
    if not width > 0:
        raise ValueError(f"Class width must be positive, got {width}")
    expanded = data.expanded()
    if start is None:
        start = math.floor(expanded[0] / width) * width
    elif start > expanded[0]:
        raise ValueError(
            f"First class starts at {start}, above the smallest value {expanded[0]}"
        )
    # Rounding keeps values that sit on a class boundary in the upper class.
    idx = np.floor(np.round((expanded - start) / width, 9)).astype(int)
    counts = np.bincount(idx, minlength=int(idx.max()) + 1)
    lower = start + width * np.arange(len(counts))
    upper = lower + width
    return pd.DataFrame(
        {
            "Class": [f"{lo:g}-{up:g}" for lo, up in zip(lower, upper)],
            "Lower": lower,
            "Upper": upper,
            "Midpoint": (lower + upper) / 2,
            "Frequency": counts,
            "Cumulative Frequency": np.cumsum(counts),
        }
    )
