"""Define standardized column labels for exported result tables."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultColumns:
    """Container for standardized column labels.

    These labels are shared by the summary tables, the CSV/Excel exports and
    the CLI printout so a measure is named identically everywhere.

    Attributes:
        measure: Name of the statistic (e.g. ``"Variance"``).
        value: Numeric value of the statistic; may be non-finite.
        display: Value rendered for humans (``"undefined"`` when non-finite).
        interpretation: Optional label such as ``"Mesokurtic (Normal)"``.
    """

    measure: str = "Measure"
    value: str = "Value"
    display: str = "Display"
    interpretation: str = "Interpretation"


@dataclass(frozen=True)
class OutlierColumns:
    index: str = "Index"
    value: str = "Value"
    z_score: str = "Z-Score"
    is_outlier: str = "Outlier"
    method: str = "Method"


RESULT_COLUMNS = ResultColumns()
OUTLIER_COLUMNS = OutlierColumns()
