"""Pearson product-moment and Spearman rank correlation.

Ranks are assigned as ``1 + position of the first occurrence`` in the
ascending-sorted sample. Tied values therefore share the lowest rank of
their block instead of the average rank, and Spearman's shortcut formula
``1 - 6 * sum(d**2) / (n * (n**2 - 1))`` is applied to those ranks as-is.
"""

from __future__ import annotations

import importlib.util
import math
from dataclasses import asdict, dataclass

import numpy as np

from ..constants import PROBABLE_ERROR_FACTOR
from ..dataset import PairedDataset
from ..reporting import correlation_direction, correlation_strength

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None
if HAVE_SCIPY:
    from scipy.stats import t as student_t


@dataclass(frozen=True)
class PearsonSums:
    sum_x: float
    sum_y: float
    sum_xy: float
    sum_x2: float
    sum_y2: float


@dataclass(frozen=True)
class CorrelationResult:
    n: int
    pearson: float
    r_squared: float
    explained_variance_pct: float
    probable_error: float
    p_value: float
    spearman: float
    sum_d2: float
    pearson_strength: str
    pearson_direction: str
    spearman_strength: str
    spearman_direction: str
    sums: PearsonSums

    def to_dict(self) -> dict:
        out = asdict(self)
        out.update(out.pop("sums"))
        return out


def pearson_sums(pairs: PairedDataset) -> PearsonSums:
    x, y = pairs.arrays()
    return PearsonSums(
        sum_x=float(np.sum(x)),
        sum_y=float(np.sum(y)),
        sum_xy=float(np.sum(x * y)),
        sum_x2=float(np.sum(x * x)),
        sum_y2=float(np.sum(y * y)),
    )


def pearson(pairs: PairedDataset) -> float:
    """Return Pearson's r, or ``0.0`` when either variable has zero variance.

    ``r = (n*Sxy - Sx*Sy) / sqrt((n*Sxx - Sx**2) * (n*Syy - Sy**2))``.
    Zero spread is tested on the raw values, since the sum form can leave
    a rounding residue for constant non-integer data.
    """
    x, y = pairs.arrays()
    if np.ptp(x) == 0 or np.ptp(y) == 0:
        return 0.0
    n = len(pairs)
    s = pearson_sums(pairs)
    numerator = n * s.sum_xy - s.sum_x * s.sum_y
    spread = (n * s.sum_x2 - s.sum_x**2) * (n * s.sum_y2 - s.sum_y**2)
    denominator = math.sqrt(spread) if spread > 0 else 0.0
    if denominator == 0:
        return 0.0
    return float(numerator / denominator)


def ranks(values) -> np.ndarray:
    """Rank each value as ``1 + index of its first occurrence`` when sorted."""
    arr = np.asarray(values, dtype=float)
    ordered = np.sort(arr)
    return np.searchsorted(ordered, arr, side="left").astype(float) + 1.0


def rank_difference_sum(pairs: PairedDataset) -> float:
    x, y = pairs.arrays()
    d = ranks(x) - ranks(y)
    return float(np.sum(d * d))


def spearman(pairs: PairedDataset) -> float:
    """Return Spearman's rho from first-occurrence ranks."""
    n = len(pairs)
    return float(1.0 - (6.0 * rank_difference_sum(pairs)) / (n * (n * n - 1)))


def pearson_p_value(r: float, n: int) -> float:
    """Two-sided p-value for H0: rho = 0 using ``t = r * sqrt((n - 2) / (1 - r**2))``.

    Returns ``nan`` when scipy is unavailable, ``n <= 2`` or ``|r| == 1``.
    """
    dof = n - 2
    if not HAVE_SCIPY or dof <= 0 or abs(r) >= 1.0:
        return math.nan
    t_stat = r * math.sqrt(dof / (1.0 - r * r))
    return float(2 * (1 - student_t.cdf(abs(t_stat), dof)))


def correlation_summary(pairs: PairedDataset) -> CorrelationResult:
    """Bundle Pearson and Spearman coefficients with their interpretation.

    Note:
        The probable error ``0.6745 * (1 - r**2) / sqrt(n)`` is the classical
        textbook gauge: |r| below it is not significant, above six times it
        is.
    """
    n = len(pairs)
    r = pearson(pairs)
    rho = spearman(pairs)
    r2 = r * r
    return CorrelationResult(
        n=n,
        pearson=r,
        r_squared=r2,
        explained_variance_pct=r2 * 100.0,
        probable_error=PROBABLE_ERROR_FACTOR * (1 - r2) / math.sqrt(n),
        p_value=pearson_p_value(r, n),
        spearman=rho,
        sum_d2=rank_difference_sum(pairs),
        pearson_strength=correlation_strength(r),
        pearson_direction=correlation_direction(r),
        spearman_strength=correlation_strength(rho),
        spearman_direction=correlation_direction(rho),
        sums=pearson_sums(pairs),
    )
