import math

import numpy as np
import pytest
from scipy import stats as scipy_stats

from bizstat.data_processing import normalize
from bizstat.samples import DISPERSION_FREQUENCIES, DISPERSION_VALUES
from bizstat.stats.dispersion import dispersion
from bizstat.stats.shape import shape, single_mode


def _shape_of(data):
    disp = dispersion(data)
    return shape(data, disp.mean, disp.std_dev)


def test_symmetric_platykurtic_distribution():
    result = _shape_of(normalize(DISPERSION_VALUES, DISPERSION_FREQUENCIES))
    assert result.mode == 25.0
    assert result.pearson_skewness == pytest.approx(0.0, abs=1e-12)
    assert result.moment_skewness == pytest.approx(0.0, abs=1e-12)
    # m4 = 9062.5, sigma^4 = 3906.25
    assert result.kurtosis == pytest.approx(9062.5 / 3906.25 - 3)


@pytest.mark.parametrize(
    "values, frequencies",
    [
        ("1, 2, 3, 10", None),
        ("10, 20, 30, 40, 50", "1, 2, 3, 9, 12"),
        ("3.5, 7.25, 1, 18, 2", "4, 1, 2, 1, 6"),
    ],
)
def test_moment_measures_match_population_definitions(values, frequencies):
    data = normalize(values, frequencies)
    expanded = data.expanded()
    result = _shape_of(data)
    assert result.moment_skewness == pytest.approx(scipy_stats.skew(expanded, bias=True))
    assert result.kurtosis == pytest.approx(
        scipy_stats.kurtosis(expanded, fisher=True, bias=True)
    )


def test_pearson_skewness_uses_supplied_mean_and_std():
    data = normalize("1, 2, 3", "5, 1, 1")
    result = shape(data, mean=2.0, std_dev=0.5)
    assert result.mode == 1.0
    assert result.pearson_skewness == pytest.approx((2.0 - 1.0) / 0.5)


def test_single_mode_takes_first_maximum():
    assert single_mode(normalize("4, 9, 7", "3, 3, 1")) == 4.0
    assert single_mode(normalize("4, 9, 7", "1, 3, 3")) == 9.0


def test_zero_std_dev_yields_non_finite_shape():
    result = _shape_of(normalize("5, 5, 5, 5"))
    assert math.isnan(result.pearson_skewness)
    assert math.isnan(result.moment_skewness)
    assert math.isnan(result.kurtosis)


def test_positive_skew_for_long_right_tail():
    result = _shape_of(normalize("1, 2, 3, 50", "10, 6, 3, 1"))
    assert result.moment_skewness > 0.5
    assert result.pearson_skewness > 0
    assert np.isfinite(result.kurtosis)
