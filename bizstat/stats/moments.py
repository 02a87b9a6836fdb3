"""Weighted moment helpers shared by the dispersion and shape engines."""

from __future__ import annotations

import numpy as np

from ..dataset import Dataset


def ratio(numerator: float, denominator: float) -> float:
    """Divide in float64, returning ``inf``/``nan`` instead of raising.

    Zero denominators are a normal outcome for degenerate samples (zero
    variance, zero mean) and are surfaced to the caller as non-finite data.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def weighted_mean(data: Dataset) -> float:
    """Return ``sum(f * x) / sum(f)``."""
    values = data.values
    freqs = data.frequencies
    return float(np.sum(values * freqs) / np.sum(freqs))


def central_moment(data: Dataset, mean: float, order: int) -> float:
    """Return the population central moment ``sum(f * (x - mean)**k) / sum(f)``."""
    values = data.values
    freqs = data.frequencies
    return float(np.sum(freqs * (values - mean) ** order) / np.sum(freqs))


def mean_absolute_deviation(data: Dataset, mean: float) -> float:
    values = data.values
    freqs = data.frequencies
    return float(np.sum(freqs * np.abs(values - mean)) / np.sum(freqs))
