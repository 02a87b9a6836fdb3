"""
A Python package for introductory business statistics.

Computes central tendency, dispersion, skewness/kurtosis, correlation and
outlier measures from calculator input, uploaded tables or sample datasets.

Modules:
    - data_processing: Parses text and tables into canonical datasets.
    - stats: Pure statistical engines.
    - analysis: Combines engines into printable and exportable summaries.
    - reporting: Classification labels and interpretation text.
    - output: CSV/Excel export.
    - plotting: Distribution, outlier and scatter charts.
"""

__version__ = "1.0.0"

from .analysis import (
    describe,
    outlier_frame,
    print_summary,
    summary_frame,
)
from .data_processing import (
    classify_data,
    coerce_cell,
    column_values,
    load_table,
    normalize,
    normalize_pairs,
    numeric_columns,
)
from .dataset import Dataset, PairedDataset, WeightedValue
from .errors import (
    EmptyDatasetError,
    EmptyInputError,
    InsufficientDataError,
    InvalidDomainError,
    MismatchedLengthError,
    StatisticsError,
)
from .stats import (
    central_tendency,
    correlation_summary,
    detect_outliers,
    dispersion,
    pearson,
    shape,
    spearman,
)

__all__ = [
    # Data model
    "Dataset",
    "PairedDataset",
    "WeightedValue",
    # Data processing
    "classify_data",
    "coerce_cell",
    "column_values",
    "load_table",
    "normalize",
    "normalize_pairs",
    "numeric_columns",
    # Engines
    "central_tendency",
    "dispersion",
    "shape",
    "pearson",
    "spearman",
    "correlation_summary",
    "detect_outliers",
    # Analysis
    "describe",
    "summary_frame",
    "outlier_frame",
    "print_summary",
    # Errors
    "StatisticsError",
    "EmptyDatasetError",
    "EmptyInputError",
    "InsufficientDataError",
    "InvalidDomainError",
    "MismatchedLengthError",
]
