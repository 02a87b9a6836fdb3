"""Design constants shared by the statistical engines and reporting layer.

The thresholds below are fixed teaching conventions, not tuning knobs. They
are collected here so every engine and every label uses the same numbers.

Quartile and mode rules
-----------------------
Two engines locate quartiles differently and two engines pick modes
differently, matching the numbers students see in each chapter:

* Dispersion / position measures use the ``(n + 1) / 4`` discrete-position
  rule: ``q1 = x[floor((n + 1) / 4) - 1]`` and
  ``q3 = x[floor(3 * (n + 1) / 4) - 1]`` on the frequency-expanded sorted
  sequence.
* The IQR outlier fence uses simple positional indexing:
  ``q1 = x[floor(0.25 * n)]`` and ``q3 = x[floor(0.75 * n)]``.
* Central tendency reports *every* value tied for the highest frequency,
  while the shape engine takes a single mode, the first one encountered.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_Z_THRESHOLD = 2.5
IQR_FENCE_MULTIPLIER = 1.5

# Probable error of r: 0.6745 is the z value bounding the central 50%.
PROBABLE_ERROR_FACTOR = 0.6745

DEFAULT_PERCENTILES: tuple[int, ...] = (25, 50, 75, 90)

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
SUPPORTED_EXTENSIONS: tuple[str, ...] = (".csv", ".xlsx", ".xls")
NUMERIC_COLUMN_MIN_SHARE = 0.5

# Keywords used to sort free-text descriptions of data sources.
PRIMARY_DATA_KEYWORDS: tuple[str, ...] = ("survey", "interview")
CONTINUOUS_DATA_KEYWORDS: tuple[str, ...] = ("height", "weight")


@dataclass(frozen=True)
class ShapeThresholds:
    """Cut-offs for skewness and excess kurtosis labels."""

    SKEWNESS: float = 0.5
    KURTOSIS: float = 0.5


@dataclass(frozen=True)
class CorrelationBands:
    """Lower bounds of |r| for each strength label."""

    VERY_STRONG: float = 0.8
    STRONG: float = 0.6
    MODERATE: float = 0.4
    WEAK: float = 0.2


@dataclass(frozen=True)
class VariabilityBands:
    """Upper bounds (percent) of the coefficient of variation bands."""

    LOW: float = 15.0
    MODERATE: float = 30.0


@dataclass(frozen=True)
class SampleSizeLimits:
    SMALL: int = 30
    LARGE: int = 100
    MANY_COLUMNS: int = 10


SHAPE = ShapeThresholds()
CORRELATION = CorrelationBands()
VARIABILITY = VariabilityBands()
SAMPLE_SIZE = SampleSizeLimits()
