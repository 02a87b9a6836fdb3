import math

import pytest

from bizstat.reporting import (
    UNDEFINED,
    classify_kurtosis,
    classify_skewness,
    classify_variability,
    correlation_direction,
    correlation_strength,
    format_value,
    interpret_distribution,
)


@pytest.mark.parametrize(
    "value, ndigits, expected",
    [
        (16.46666, 2, "16.47"),
        (0.0, 4, "0.0000"),
        (math.nan, 2, UNDEFINED),
        (math.inf, 2, UNDEFINED),
        (None, 2, UNDEFINED),
    ],
)
def test_format_value(value, ndigits, expected):
    assert format_value(value, ndigits) == expected


@pytest.mark.parametrize(
    "skewness, expected",
    [
        (0.0, "Approximately Symmetric"),
        (0.49, "Approximately Symmetric"),
        (0.5, "Positively Skewed (Right-skewed)"),
        (-0.5, "Negatively Skewed (Left-skewed)"),
        (math.nan, UNDEFINED),
    ],
)
def test_classify_skewness(skewness, expected):
    assert classify_skewness(skewness) == expected


@pytest.mark.parametrize(
    "kurtosis, expected",
    [
        (0.1, "Mesokurtic (Normal)"),
        (0.5, "Leptokurtic (Peaked)"),
        (-0.68, "Platykurtic (Flat)"),
        (math.inf, UNDEFINED),
    ],
)
def test_classify_kurtosis(kurtosis, expected):
    assert classify_kurtosis(kurtosis) == expected


@pytest.mark.parametrize(
    "coefficient, expected",
    [
        (1.0, "Very Strong"),
        (-0.8, "Very Strong"),
        (0.65, "Strong"),
        (-0.4, "Moderate"),
        (0.25, "Weak"),
        (0.1, "Very Weak"),
        (0.0, "Very Weak"),
    ],
)
def test_correlation_strength(coefficient, expected):
    assert correlation_strength(coefficient) == expected


def test_correlation_direction():
    assert correlation_direction(0.3) == "Positive"
    assert correlation_direction(-0.3) == "Negative"
    assert correlation_direction(0.0) == "No Correlation"


@pytest.mark.parametrize(
    "cv, expected",
    [(10.0, "Low"), (15.0, "Moderate"), (29.9, "Moderate"), (30.0, "High"), (math.inf, UNDEFINED)],
)
def test_classify_variability(cv, expected):
    assert classify_variability(cv) == expected


def test_interpretation_sentences():
    sentences = interpret_distribution(
        mean=25.0, moment_skewness=0.0, kurtosis=-0.68, coefficient_of_variation=31.62
    )
    assert sentences[0] == (
        "This dataset shows a approximately symmetric distribution "
        "with platykurtic (flat) characteristics."
    )
    assert sentences[1] == (
        "The coefficient of variation of 31.6% indicates high variability in the data."
    )
    assert sentences[2] == "The mean (25.00) closely represents the typical value."


def test_interpretation_with_undefined_measures():
    sentences = interpret_distribution(
        mean=0.0, moment_skewness=math.nan, kurtosis=math.nan, coefficient_of_variation=math.nan
    )
    assert "undefined" in sentences[0]
    assert "undefined% indicates undefined variability" in sentences[1]


def test_interpretation_for_skewed_data():
    sentences = interpret_distribution(
        mean=4.05, moment_skewness=3.0, kurtosis=8.0, coefficient_of_variation=12.0
    )
    assert "pulled higher" in sentences[2]
    assert "relatively consistent" in sentences[1]
