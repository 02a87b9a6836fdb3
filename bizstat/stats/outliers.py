"""Z-score and IQR-fence outlier classification for flat numeric samples.

Callers are expected to pass clean finite values (see
:func:`bizstat.data_processing.column_values`). The IQR fence locates its
quartiles with simple positional indexing, ``x[floor(0.25 * n)]`` and
``x[floor(0.75 * n)]``, which differs from the ``(n + 1) / 4`` rule used by
the dispersion engine.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Optional, Sequence

import numpy as np

from ..constants import DEFAULT_Z_THRESHOLD, IQR_FENCE_MULTIPLIER
from ..errors import EmptyInputError

METHOD_LABELS = {"zscore": "Z-Score", "iqr": "IQR"}


@dataclass(frozen=True)
class OutlierResult:
    index: int
    value: float
    is_outlier: bool
    method: str
    z_score: Optional[float] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class IQRFences:
    q1: float
    q3: float
    iqr: float
    lower_bound: float
    upper_bound: float


@dataclass(frozen=True)
class OutlierSummary:
    outlier_count: int
    total_count: int
    outlier_percentage: float
    clean_count: int


def _as_array(values: Sequence[float]) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise EmptyInputError("Outlier detection requires at least one value.")
    return arr


def zscore_outliers(
    values: Sequence[float], threshold: float = DEFAULT_Z_THRESHOLD
) -> list[OutlierResult]:
    """Flag values whose absolute population z-score exceeds ``threshold``.

    A zero standard deviation gives ``nan`` z-scores and flags nothing.
    """
    arr = _as_array(values)
    mean = float(np.mean(arr))
    std_dev = float(np.sqrt(np.mean((arr - mean) ** 2)))
    with np.errstate(divide="ignore", invalid="ignore"):
        z = np.abs((arr - mean) / np.float64(std_dev))
    return [
        OutlierResult(
            index=idx,
            value=float(value),
            is_outlier=bool(z[idx] > threshold),
            method=METHOD_LABELS["zscore"],
            z_score=float(z[idx]),
        )
        for idx, value in enumerate(arr)
    ]


def iqr_fences(values: Sequence[float]) -> IQRFences:
    """Return the Tukey fences ``q1 - 1.5 * iqr`` and ``q3 + 1.5 * iqr``."""
    ordered = np.sort(_as_array(values))
    n = len(ordered)
    q1 = float(ordered[math.floor(n * 0.25)])
    q3 = float(ordered[math.floor(n * 0.75)])
    iqr = q3 - q1
    return IQRFences(
        q1=q1,
        q3=q3,
        iqr=iqr,
        lower_bound=q1 - IQR_FENCE_MULTIPLIER * iqr,
        upper_bound=q3 + IQR_FENCE_MULTIPLIER * iqr,
    )


def iqr_outliers(values: Sequence[float]) -> list[OutlierResult]:
    arr = _as_array(values)
    fences = iqr_fences(arr)
    return [
        OutlierResult(
            index=idx,
            value=float(value),
            is_outlier=bool(value < fences.lower_bound or value > fences.upper_bound),
            method=METHOD_LABELS["iqr"],
        )
        for idx, value in enumerate(arr)
    ]


def detect_outliers(
    values: Sequence[float],
    method: str = "zscore",
    z_threshold: float = DEFAULT_Z_THRESHOLD,
) -> list[OutlierResult]:
    """Classify every value as outlier or not.

    Args:
        values (Sequence[float]): Finite observations in their original order.
        method (str, optional): ``"zscore"`` or ``"iqr"``. Defaults to
            ``"zscore"``.
        z_threshold (float, optional): Absolute z-score above which a value
            is an outlier. Defaults to ``2.5``.

    Returns:
        list[OutlierResult]: One result per input value, same order. Only
        the z-score method fills ``z_score``.

    Raises:
        EmptyInputError: If ``values`` is empty.
        ValueError: If ``method`` is not recognised.
    """
    if method == "zscore":
        return zscore_outliers(values, threshold=z_threshold)
    if method == "iqr":
        return iqr_outliers(values)
    raise ValueError(f"method must be 'zscore' or 'iqr', got {method!r}")


def outlier_summary(results: Sequence[OutlierResult]) -> OutlierSummary:
    total = len(results)
    count = sum(1 for r in results if r.is_outlier)
    return OutlierSummary(
        outlier_count=count,
        total_count=total,
        outlier_percentage=(count / total * 100.0) if total else math.nan,
        clean_count=total - count,
    )
