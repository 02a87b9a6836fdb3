"""
Descriptive statistics for weighted business datasets.

This module combines the independent engines into the summaries shown by
each calculator:
- central tendency (arithmetic, geometric and harmonic mean, median, modes),
- dispersion (range, mean deviation, variance, standard deviation, quartile
  deviation, coefficient of variation),
- shape (Pearson and moment skewness, excess kurtosis), fed with the mean and
  standard deviation the dispersion engine already computed,
- position (quartiles and percentiles).

Correlation and outlier results are tabulated here too so every result can
be printed or exported the same way.

All variance-based measures are population measures (divide by N).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from .dataset import Dataset
from .reporting import (
    classify_kurtosis,
    classify_skewness,
    classify_variability,
    format_value,
    interpret_distribution,
)
from .schema import OUTLIER_COLUMNS, RESULT_COLUMNS
from .stats.central_tendency import (
    CentralTendencyResult,
    PositionMeasures,
    central_tendency,
    position_measures,
)
from .stats.correlation import CorrelationResult
from .stats.dispersion import DispersionResult, dispersion
from .stats.outliers import OutlierResult, outlier_summary
from .stats.shape import ShapeResult, shape


@dataclass(frozen=True)
class DescriptiveSummary:
    n: int
    central: CentralTendencyResult
    dispersion: DispersionResult
    shape: ShapeResult
    position: PositionMeasures

    @property
    def interpretation(self) -> list[str]:
        return interpret_distribution(
            mean=self.dispersion.mean,
            moment_skewness=self.shape.moment_skewness,
            kurtosis=self.shape.kurtosis,
            coefficient_of_variation=self.dispersion.coefficient_of_variation,
        )


def describe(data: Dataset, strict: bool = False) -> DescriptiveSummary:
    """Run every single-variable engine on ``data``.

    Args:
        data (Dataset): Weighted observations.
        strict (bool, optional): Forwarded to the geometric and harmonic
            means; raise on non-positive values instead of returning
            non-finite results. Defaults to ``False``.

    Returns:
        DescriptiveSummary: Results of the four engines for one dataset.
    """
    disp = dispersion(data)
    return DescriptiveSummary(
        n=data.total_frequency,
        central=central_tendency(data, strict=strict),
        dispersion=disp,
        shape=shape(data, disp.mean, disp.std_dev),
        position=position_measures(data),
    )


def _row(measure: str, value: float, interpretation: str = "", ndigits: int = 4) -> dict:
    return {
        RESULT_COLUMNS.measure: measure,
        RESULT_COLUMNS.value: value,
        RESULT_COLUMNS.display: format_value(value, ndigits),
        RESULT_COLUMNS.interpretation: interpretation,
    }


def summary_frame(summary: DescriptiveSummary) -> pd.DataFrame:
    """Flatten a :class:`DescriptiveSummary` into measure/value rows."""
    c, d, s, p = summary.central, summary.dispersion, summary.shape, summary.position
    rows = [
        _row("N", float(summary.n)),
        _row("Arithmetic Mean", c.mean),
        _row("Geometric Mean", c.geometric_mean),
        _row("Harmonic Mean", c.harmonic_mean),
        _row("Median", c.median),
        {
            RESULT_COLUMNS.measure: "Mode(s)",
            RESULT_COLUMNS.value: np.nan if len(c.modes) != 1 else c.modes[0],
            RESULT_COLUMNS.display: ", ".join(format_value(m) for m in c.modes),
            RESULT_COLUMNS.interpretation: "multimodal" if len(c.modes) > 1 else "",
        },
        _row("Range", d.range),
        _row("Mean Deviation", d.mean_deviation),
        _row("Variance", d.variance),
        _row("Standard Deviation", d.std_dev),
        _row("Q1", d.q1),
        _row("Q3", d.q3),
        _row("Interquartile Range", d.iqr),
        _row("Quartile Deviation", d.quartile_deviation),
        _row(
            "Coefficient of Variation (%)",
            d.coefficient_of_variation,
            classify_variability(d.coefficient_of_variation),
        ),
        _row("Mode (shape)", s.mode),
        _row(
            "Pearson Skewness",
            s.pearson_skewness,
            classify_skewness(s.pearson_skewness),
        ),
        _row("Moment Skewness", s.moment_skewness, classify_skewness(s.moment_skewness)),
        _row("Excess Kurtosis", s.kurtosis, classify_kurtosis(s.kurtosis)),
    ]
    rows.append(_row("Q2", p.quartiles.q2))
    for pct, value in p.percentiles.items():
        rows.append(_row(f"P{pct}", value))
    return pd.DataFrame(rows)


def correlation_frame(result: CorrelationResult) -> pd.DataFrame:
    rows = [
        _row("n", float(result.n)),
        _row(
            "Pearson r",
            result.pearson,
            f"{result.pearson_strength} {result.pearson_direction}",
        ),
        _row("r squared", result.r_squared),
        _row("Explained Variance (%)", result.explained_variance_pct, ndigits=1),
        _row("Probable Error", result.probable_error),
        _row("p-value (r)", result.p_value),
        _row(
            "Spearman rho",
            result.spearman,
            f"{result.spearman_strength} {result.spearman_direction}",
        ),
        _row("Sum of d squared", result.sum_d2),
        _row("Sum X", result.sums.sum_x, ndigits=2),
        _row("Sum Y", result.sums.sum_y, ndigits=2),
        _row("Sum XY", result.sums.sum_xy, ndigits=2),
        _row("Sum X squared", result.sums.sum_x2, ndigits=2),
        _row("Sum Y squared", result.sums.sum_y2, ndigits=2),
    ]
    return pd.DataFrame(rows)


def outlier_frame(results: Sequence[OutlierResult]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                OUTLIER_COLUMNS.index: r.index,
                OUTLIER_COLUMNS.value: r.value,
                OUTLIER_COLUMNS.z_score: np.nan if r.z_score is None else r.z_score,
                OUTLIER_COLUMNS.is_outlier: r.is_outlier,
                OUTLIER_COLUMNS.method: r.method,
            }
            for r in results
        ],
        columns=[
            OUTLIER_COLUMNS.index,
            OUTLIER_COLUMNS.value,
            OUTLIER_COLUMNS.z_score,
            OUTLIER_COLUMNS.is_outlier,
            OUTLIER_COLUMNS.method,
        ],
    )


def print_summary(summary: DescriptiveSummary) -> None:
    print(f"\nDescriptive statistics (N={summary.n}):")
    frame = summary_frame(summary)
    for _, row in frame.iterrows():
        label = row[RESULT_COLUMNS.interpretation]
        suffix = f" ({label})" if label else ""
        print(f" - {row[RESULT_COLUMNS.measure]}: {row[RESULT_COLUMNS.display]}{suffix}")
    print("\nInterpretation:")
    for sentence in summary.interpretation:
        print(f" - {sentence}")


def print_correlation(result: CorrelationResult) -> None:
    print(f"\nCorrelation analysis (n={result.n}):")
    print(
        f" - Pearson r = {format_value(result.pearson, 4)} "
        f"({result.pearson_strength} {result.pearson_direction})"
    )
    print(
        f" - r² = {format_value(result.r_squared, 4)} "
        f"({format_value(result.explained_variance_pct, 1)}% of variation explained)"
    )
    print(f" - Probable error = ±{format_value(result.probable_error, 4)}")
    print(
        f" - Spearman rho = {format_value(result.spearman, 4)} "
        f"({result.spearman_strength} {result.spearman_direction})"
    )


def print_outliers(results: Sequence[OutlierResult]) -> None:
    stats = outlier_summary(results)
    method = results[0].method if results else ""
    print(f"\nOutlier detection ({method}):")
    print(
        f" - {stats.outlier_count} of {stats.total_count} values flagged "
        f"({format_value(stats.outlier_percentage, 1)}%), {stats.clean_count} clean"
    )
    for r in results:
        if r.is_outlier:
            z_text = f", |z|={format_value(r.z_score)}" if r.z_score is not None else ""
            print(f"     index {r.index}: {format_value(r.value)}{z_text}")
