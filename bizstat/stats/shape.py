"""Skewness and excess kurtosis from precomputed mean and standard deviation."""

from __future__ import annotations

from dataclasses import asdict, dataclass

import numpy as np

from ..dataset import Dataset
from .moments import central_moment, ratio


@dataclass(frozen=True)
class ShapeResult:
    pearson_skewness: float
    moment_skewness: float
    kurtosis: float
    mode: float

    def to_dict(self) -> dict:
        return asdict(self)


def single_mode(data: Dataset) -> float:
    """Return the first value carrying the highest frequency."""
    idx = int(np.argmax(data.frequencies))
    return float(data.items[idx].value)


def shape(data: Dataset, mean: float, std_dev: float) -> ShapeResult:
    """Compute Pearson and moment skewness and excess kurtosis.

    Args:
        data (Dataset): Weighted observations.
        mean (float): Weighted mean from the central tendency or dispersion
            engine. It is not recomputed here.
        std_dev (float): Population standard deviation from the dispersion
            engine.

    Returns:
        ShapeResult: ``pearson_skewness = (mean - mode) / std_dev``,
        ``moment_skewness = m3 / std_dev**3`` and
        ``kurtosis = m4 / std_dev**4 - 3`` where ``mk`` are population
        central moments. A zero ``std_dev`` yields ``inf``/``nan``.
    """
    mode = single_mode(data)
    m3 = central_moment(data, mean, 3)
    m4 = central_moment(data, mean, 4)
    return ShapeResult(
        pearson_skewness=ratio(mean - mode, std_dev),
        moment_skewness=ratio(m3, std_dev**3),
        kurtosis=ratio(m4, std_dev**4) - 3.0,
        mode=mode,
    )
