"""
Statistical engines for introductory business statistics.

This subpackage provides the numerical routines behind every calculator.
All functions are pure: they take a :class:`~bizstat.dataset.Dataset` (or a
:class:`~bizstat.dataset.PairedDataset`, or a flat list of values for
outlier detection) and return an immutable result record.

Modules:
    central_tendency:
        Arithmetic, geometric and harmonic means, median, all modes,
        quartiles, percentiles, the frequency table and class-interval
        grouping.

    dispersion:
        Range, mean deviation, population variance and standard deviation,
        quartile deviation and coefficient of variation.

    shape:
        Pearson and moment skewness and excess kurtosis from a precomputed
        mean and standard deviation.

    correlation:
        Pearson's r with a zero-variance fallback of 0, Spearman's rho with
        first-occurrence ranks, and the combined correlation summary.

    outliers:
        Z-score and IQR-fence outlier classification.

Design Principle:
    Engines never re-validate input. Validation happens once when the
    dataset is built (see :mod:`bizstat.data_processing`). Degenerate
    samples produce ``nan``/``inf`` values rather than exceptions.
"""

from .central_tendency import (
    central_tendency,
    class_frequency_table,
    frequency_table,
    percentile,
    position_measures,
    quartiles,
)
from .correlation import correlation_summary, pearson, ranks, spearman
from .dispersion import dispersion
from .outliers import detect_outliers, iqr_fences, outlier_summary
from .shape import shape

__all__ = [
    "central_tendency",
    "frequency_table",
    "class_frequency_table",
    "percentile",
    "position_measures",
    "quartiles",
    "dispersion",
    "shape",
    "pearson",
    "spearman",
    "ranks",
    "correlation_summary",
    "detect_outliers",
    "iqr_fences",
    "outlier_summary",
]
