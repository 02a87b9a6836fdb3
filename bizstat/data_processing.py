"""
Turns raw calculator text and uploaded tables into canonical datasets.
"""

# Ingestion summary: split comma-separated input, coerce every token or
# spreadsheet cell with one explicit rule (finite float or dropped), pair
# frequencies by position with the surviving values, and validate once here
# so the engines downstream never re-check their input.

from __future__ import annotations

import logging
import math
import numbers
import os
import re
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Sequence

import pandas as pd

from .constants import (
    CONTINUOUS_DATA_KEYWORDS,
    MAX_UPLOAD_BYTES,
    NUMERIC_COLUMN_MIN_SHARE,
    PRIMARY_DATA_KEYWORDS,
    SAMPLE_SIZE,
    SUPPORTED_EXTENSIONS,
)
from .dataset import Dataset, PairedDataset, WeightedValue
from .errors import EmptyDatasetError

# Legacy .xls workbooks need xlrd; openpyxl only reads .xlsx.
_EXCEL_ENGINES = {".xlsx": "openpyxl", ".xls": "xlrd"}


def coerce_cell(cell: Any) -> float | None:
    """Coerce one token or spreadsheet cell to a finite float.

    A cell is either a number or text. Numbers pass through when finite;
    text is stripped and parsed with :func:`float`. Anything else (``None``,
    booleans, empty strings, ``nan``/``inf``, unparsable text) is dropped.

    Args:
        cell: Raw value taken from a text box, CSV field or worksheet cell.

    Returns:
        float | None: The parsed value, or ``None`` when the cell is dropped.
    """
    if cell is None or isinstance(cell, bool):
        return None
    if isinstance(cell, numbers.Real):
        value = float(cell)
    elif isinstance(cell, str):
        text = cell.strip().strip('"')
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None
    return value if math.isfinite(value) else None


def _coerce_frequency(token: str) -> int | None:
    # Integer part of a numeric token, like parseInt("2.7") -> 2.
    value = coerce_cell(token)
    if value is None:
        return None
    frequency = int(value)
    return frequency if frequency >= 1 else None


def parse_numeric_tokens(text: str | None) -> list[float]:
    """Split comma-separated text and keep the tokens that parse as numbers."""
    if not text:
        return []
    parsed = [coerce_cell(token) for token in text.split(",")]
    return [value for value in parsed if value is not None]


def dataset_from_values(
    values: Iterable[float], frequencies: Sequence[int | None] | None = None
) -> Dataset:
    """Build a :class:`Dataset`, defaulting missing frequencies to ``1``.

    Raises:
        EmptyDatasetError: If ``values`` is empty.
    """
    values = list(values)
    if not values:
        raise EmptyDatasetError("No valid numeric values were provided.")
    frequencies = list(frequencies or [])
    items = []
    for idx, value in enumerate(values):
        frequency = frequencies[idx] if idx < len(frequencies) else None
        items.append(WeightedValue(float(value), int(frequency or 1)))
    return Dataset(tuple(items))


def normalize(values_text: str, frequencies_text: str | None = None) -> Dataset:
    """Parse calculator input into a canonical weighted dataset.

    Args:
        values_text (str): Comma-separated observations, e.g.
            ``"10, 12, 14"``. Tokens that are not finite numbers are dropped.
        frequencies_text (str, optional): Comma-separated frequencies paired
            by position with the *parsed* values. Missing, unparsable or
            non-positive entries default to ``1``.

    Returns:
        Dataset: One :class:`WeightedValue` per parsed value, in input order.

    Raises:
        EmptyDatasetError: If no valid value remains after filtering.
    """
    tokens = values_text.split(",") if values_text else []
    values = parse_numeric_tokens(values_text)
    dropped = len([t for t in tokens if t.strip()]) - len(values)
    if dropped > 0:
        logging.warning("Dropped %d non-numeric value token(s) from input", dropped)
    if not values:
        raise EmptyDatasetError("No valid numeric values found in input.")

    if frequencies_text is None or not frequencies_text.strip():
        return dataset_from_values(values)

    freq_tokens = frequencies_text.split(",")
    frequencies = [_coerce_frequency(token) for token in freq_tokens]
    defaulted = sum(
        1
        for idx in range(len(values))
        if idx >= len(frequencies) or frequencies[idx] is None
    )
    if defaulted:
        logging.warning("Defaulted %d frequency entr(ies) to 1", defaulted)
    return dataset_from_values(values, frequencies)


def normalize_pairs(x_text: str, y_text: str) -> PairedDataset:
    """Parse two comma-separated lists into a validated paired dataset.

    Raises:
        MismatchedLengthError: If the parsed lists differ in length.
        InsufficientDataError: If fewer than two pairs remain.
    """
    x_values = parse_numeric_tokens(x_text)
    y_values = parse_numeric_tokens(y_text)
    return PairedDataset.from_sequences(x_values, y_values)


def load_table(filepath: str) -> pd.DataFrame:
    """Load an uploaded CSV or Excel workbook (first worksheet).

    Args:
        filepath (str): Path to a ``.csv``, ``.xlsx`` or ``.xls`` file up to
            10 MB.

    Returns:
        pd.DataFrame: Loaded table, one row per record.

    Raises:
        ValueError: If the extension is unsupported, the file is too large,
            or the table has no data rows.
    """
    ext = os.path.splitext(filepath)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(
            f"Unsupported file type '{ext}'. Expected one of {list(SUPPORTED_EXTENSIONS)}."
        )
    size = os.path.getsize(filepath)
    if size > MAX_UPLOAD_BYTES:
        raise ValueError(
            f"File size too large ({size} bytes). Upload files smaller than 10MB."
        )

    if ext == ".csv":
        frame = pd.read_csv(filepath)
    else:
        frame = pd.read_excel(filepath, sheet_name=0, engine=_EXCEL_ENGINES[ext])

    if frame.empty:
        raise ValueError("The uploaded file appears to be empty.")
    logging.info(
        "Loaded %s: %d rows x %d columns", filepath, len(frame), len(frame.columns)
    )
    return frame


def numeric_columns(frame: pd.DataFrame) -> list[str]:
    """Return columns where more than half of the cells are finite numbers."""
    columns = []
    for col in frame.columns:
        cells = frame[col].tolist()
        numeric_count = sum(1 for cell in cells if coerce_cell(cell) is not None)
        if cells and numeric_count > len(cells) * NUMERIC_COLUMN_MIN_SHARE:
            columns.append(str(col))
    return columns


def column_values(frame: pd.DataFrame, column: str) -> list[float]:
    """Return the finite numeric cells of ``column`` in row order.

    Raises:
        KeyError: If ``column`` is not in ``frame``.
        EmptyDatasetError: If the column holds no numeric cells.
    """
    if column not in frame.columns:
        raise KeyError(
            f"Column '{column}' not found. Available columns: {list(frame.columns)}"
        )
    values = [coerce_cell(cell) for cell in frame[column].tolist()]
    values = [v for v in values if v is not None]
    if not values:
        raise EmptyDatasetError(f"No valid numeric data found in column '{column}'.")
    return values


def pairs_from_columns(frame: pd.DataFrame, x_col: str, y_col: str) -> PairedDataset:
    """Pair two table columns row by row, skipping rows where either is invalid."""
    for col in (x_col, y_col):
        if col not in frame.columns:
            raise KeyError(
                f"Column '{col}' not found. Available columns: {list(frame.columns)}"
            )
    x_values, y_values = [], []
    for x_cell, y_cell in zip(frame[x_col].tolist(), frame[y_col].tolist()):
        x, y = coerce_cell(x_cell), coerce_cell(y_cell)
        if x is None or y is None:
            continue
        x_values.append(x)
        y_values.append(y)
    return PairedDataset.from_sequences(x_values, y_values)


def data_insights(frame: pd.DataFrame) -> list[dict[str, str]]:
    """Advisories about sample size and variable count for an uploaded table."""
    insights = []
    n_rows = len(frame)
    if n_rows < SAMPLE_SIZE.SMALL:
        insights.append(
            {
                "type": "warning",
                "message": "Small sample size - consider collecting more data for reliable analysis.",
            }
        )
    if n_rows >= SAMPLE_SIZE.LARGE:
        insights.append(
            {
                "type": "success",
                "message": "Large sample size - excellent for statistical analysis.",
            }
        )
    if len(frame.columns) > SAMPLE_SIZE.MANY_COLUMNS:
        insights.append(
            {
                "type": "info",
                "message": "Multiple variables available - perfect for correlation analysis.",
            }
        )
    return insights


_DECIMAL_NUMBER = re.compile(r"\d+\.\d+")


@dataclass(frozen=True)
class DataClassification:
    """Descriptions of data sorted by source and by measurement type.

    Every description lands in exactly one of ``primary``/``secondary`` and
    exactly one of ``continuous``/``discrete``.
    """

    primary: tuple[str, ...]
    secondary: tuple[str, ...]
    continuous: tuple[str, ...]
    discrete: tuple[str, ...]

    def to_dict(self) -> dict:
        return {key: list(value) for key, value in asdict(self).items()}


def classify_data(lines: str | Iterable[str]) -> DataClassification:
    """Sort free-text data descriptions into source and measurement classes.

    A description is *primary* when it mentions a survey or an interview,
    otherwise *secondary*. It is *continuous* when it contains a decimal
    number (``"12.5"``) or mentions height or weight, otherwise *discrete*.
    Keywords match case-insensitively.

    Args:
        lines (str | Iterable[str]): One description per line, either as a
            newline-separated string or as a sequence. Blank lines are
            skipped.

    Returns:
        DataClassification: Trimmed descriptions in input order.
    """
    if isinstance(lines, str):
        lines = lines.split("\n")
    primary, secondary, continuous, discrete = [], [], [], []
    for line in lines:
        text = line.strip()
        if not text:
            continue
        lowered = text.lower()
        if any(word in lowered for word in PRIMARY_DATA_KEYWORDS):
            primary.append(text)
        else:
            secondary.append(text)
        if _DECIMAL_NUMBER.search(text) or any(
            word in lowered for word in CONTINUOUS_DATA_KEYWORDS
        ):
            continuous.append(text)
        else:
            discrete.append(text)
    return DataClassification(
        primary=tuple(primary),
        secondary=tuple(secondary),
        continuous=tuple(continuous),
        discrete=tuple(discrete),
    )


def dataset_from_classes(table: pd.DataFrame) -> Dataset:
    """Represent a class-interval table by its midpoints.

    Each class with a positive ``Frequency`` becomes one observation at its
    ``Midpoint``, which is the usual approximation for grouped data.

    Raises:
        KeyError: If ``Midpoint`` or ``Frequency`` is missing.
        EmptyDatasetError: If every class is empty.
    """
    for col in ("Midpoint", "Frequency"):
        if col not in table.columns:
            raise KeyError(
                f"Column '{col}' not found. Available columns: {list(table.columns)}"
            )
    items = [
        WeightedValue(float(midpoint), int(frequency))
        for midpoint, frequency in zip(table["Midpoint"], table["Frequency"])
        if frequency >= 1
    ]
    if not items:
        raise EmptyDatasetError("Every class interval is empty.")
    return Dataset(tuple(items))
