"""Measures of dispersion for weighted datasets (population form)."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass

import numpy as np

from ..dataset import Dataset
from .central_tendency import quartiles
from .moments import central_moment, mean_absolute_deviation, ratio, weighted_mean


@dataclass(frozen=True)
class DispersionResult:
    """Dispersion summary of one dataset.

    ``mean`` is carried along so the shape engine can reuse it without
    recomputing. ``coefficient_of_variation`` is ``inf`` or ``nan`` when
    the mean is zero; callers must check finiteness before display.
    """

    mean: float
    range: float
    mean_deviation: float
    variance: float
    std_dev: float
    quartile_deviation: float
    coefficient_of_variation: float
    q1: float
    q3: float

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    def to_dict(self) -> dict:
        return asdict(self)


def value_range(data: Dataset) -> float:
    values = data.values
    return float(np.max(values) - np.min(values))


def variance(data: Dataset, mean: float | None = None) -> float:
    """Population variance ``sum(f * (x - mean)**2) / sum(f)`` (no Bessel correction)."""
    if mean is None:
        mean = weighted_mean(data)
    return central_moment(data, mean, 2)


def coefficient_of_variation(std_dev: float, mean: float) -> float:
    return ratio(std_dev, mean) * 100.0


def dispersion(data: Dataset) -> DispersionResult:
    """Compute range, mean deviation, variance, standard deviation and quartile spread.

    Args:
        data (Dataset): Weighted observations.

    Returns:
        DispersionResult: Population-form dispersion measures. Quartiles use
        the same ``(n + 1) / 4`` position rule as
        :func:`bizstat.stats.central_tendency.quartiles`.
    """
    mean = weighted_mean(data)
    var = variance(data, mean)
    std_dev = math.sqrt(var)
    q = quartiles(data)
    return DispersionResult(
        mean=mean,
        range=value_range(data),
        mean_deviation=mean_absolute_deviation(data, mean),
        variance=var,
        std_dev=std_dev,
        quartile_deviation=(q.q3 - q.q1) / 2,
        coefficient_of_variation=coefficient_of_variation(std_dev, mean),
        q1=q.q1,
        q3=q.q3,
    )
