"""Label and phrase computed statistics for on-screen and exported reports.

This module is used after numerical analysis to turn raw coefficients into
the descriptive wording students see next to each result.
"""

from __future__ import annotations

import math

import numpy as np

from .constants import CORRELATION, SHAPE, VARIABILITY

UNDEFINED = "undefined"


def format_value(value: float, ndigits: int = 2) -> str:
    """Render a number with fixed decimals, or ``"undefined"`` when non-finite.

    Args:
        value (float): Computed statistic, possibly ``nan`` or ``inf``.
        ndigits (int, optional): Decimal places. Defaults to ``2``.

    Returns:
        str: Formatted number such as ``"16.47"``.

    Note:
        Several measures (coefficient of variation with a zero mean,
        moments of a constant sample) are non-finite by construction; this
        is the single place that decides how they are displayed.
    """
    if value is None or not np.isfinite(value):
        return UNDEFINED
    return f"{float(value):.{ndigits}f}"


def classify_skewness(skewness: float) -> str:
    """Label skewness; exactly ``±0.5`` falls on the skewed side of its sign."""
    if not math.isfinite(skewness):
        return UNDEFINED
    if abs(skewness) < SHAPE.SKEWNESS:
        return "Approximately Symmetric"
    if skewness > 0:
        return "Positively Skewed (Right-skewed)"
    return "Negatively Skewed (Left-skewed)"


def classify_kurtosis(kurtosis: float) -> str:
    if not math.isfinite(kurtosis):
        return UNDEFINED
    if abs(kurtosis) < SHAPE.KURTOSIS:
        return "Mesokurtic (Normal)"
    if kurtosis > 0:
        return "Leptokurtic (Peaked)"
    return "Platykurtic (Flat)"


def correlation_strength(coefficient: float) -> str:
    magnitude = abs(coefficient)
    if magnitude >= CORRELATION.VERY_STRONG:
        return "Very Strong"
    if magnitude >= CORRELATION.STRONG:
        return "Strong"
    if magnitude >= CORRELATION.MODERATE:
        return "Moderate"
    if magnitude >= CORRELATION.WEAK:
        return "Weak"
    return "Very Weak"


def correlation_direction(coefficient: float) -> str:
    if coefficient > 0:
        return "Positive"
    if coefficient < 0:
        return "Negative"
    return "No Correlation"


def classify_variability(coefficient_of_variation: float) -> str:
    """Band the coefficient of variation (percent) into Low/Moderate/High."""
    if not math.isfinite(coefficient_of_variation):
        return UNDEFINED
    if coefficient_of_variation < VARIABILITY.LOW:
        return "Low"
    if coefficient_of_variation < VARIABILITY.MODERATE:
        return "Moderate"
    return "High"


def interpret_distribution(
    mean: float,
    moment_skewness: float,
    kurtosis: float,
    coefficient_of_variation: float,
) -> list[str]:
    """Return plain-language sentences describing shape, spread and centre."""
    shape_text = (
        f"This dataset shows a {classify_skewness(moment_skewness).lower()} "
        f"distribution with {classify_kurtosis(kurtosis).lower()} characteristics."
    )

    band = classify_variability(coefficient_of_variation)
    spread_phrase = {
        "Low": "relatively consistent",
        "Moderate": "moderate variation in",
        "High": "high variability in",
    }.get(band, "undefined variability in")
    spread_text = (
        f"The coefficient of variation of {format_value(coefficient_of_variation, 1)}% "
        f"indicates {spread_phrase} the data."
    )

    if not math.isfinite(moment_skewness) or abs(moment_skewness) < SHAPE.SKEWNESS:
        centre_phrase = "closely represents the typical value"
    elif moment_skewness > 0:
        centre_phrase = "is pulled higher by extreme values"
    else:
        centre_phrase = "is pulled lower by extreme values"
    centre_text = f"The mean ({format_value(mean)}) {centre_phrase}."

    return [shape_text, spread_text, centre_text]
