import math

import numpy as np
import pytest
from scipy import stats as scipy_stats

from bizstat.data_processing import dataset_from_classes, normalize
from bizstat.errors import InvalidDomainError
from bizstat.samples import (
    CENTRAL_TENDENCY_FREQUENCIES,
    CENTRAL_TENDENCY_VALUES,
    load_class_intervals,
)
from bizstat.stats.central_tendency import (
    central_tendency,
    class_frequency_table,
    frequency_table,
    geometric_mean,
    harmonic_mean,
    median,
    modes,
    percentile,
    position_measures,
    quartiles,
)


@pytest.fixture
def grouped():
    return normalize(CENTRAL_TENDENCY_VALUES, CENTRAL_TENDENCY_FREQUENCIES)


def test_weighted_mean_of_default_grouped_data(grouped):
    # sum(f*x) = 494 over sum(f) = 30
    result = central_tendency(grouped)
    assert grouped.total_frequency == 30
    assert result.mean == pytest.approx(494 / 30)


def test_geometric_and_harmonic_match_expanded_sample(grouped):
    expanded = grouped.expanded()
    assert geometric_mean(grouped) == pytest.approx(scipy_stats.gmean(expanded))
    assert harmonic_mean(grouped) == pytest.approx(scipy_stats.hmean(expanded))


def test_median_and_modes_of_grouped_data(grouped):
    result = central_tendency(grouped)
    assert result.median == 16.0
    assert result.modes == (16.0,)


def test_median_odd_and_even_lengths():
    assert median(normalize("7, 1, 3")) == 3.0
    assert median(normalize("4, 1, 3, 2")) == 2.5


def test_modes_returns_every_tie_once():
    assert modes(normalize("1, 2, 3", "2, 2, 1")) == (1.0, 2.0)
    assert modes(normalize("5, 5, 6")) == (5.0, 6.0)


def test_quartiles_use_discrete_positions(grouped):
    q = quartiles(grouped)
    # n = 30: q1 at index floor(31/4)-1 = 6, q3 at floor(93/4)-1 = 22
    assert (q.q1, q.q2, q.q3) == (14.0, 16.0, 18.0)


def test_quartiles_on_tiny_samples_leave_q1_undefined():
    q = quartiles(normalize("8"))
    assert math.isnan(q.q1)
    assert (q.q2, q.q3) == (8.0, 8.0)
    q = quartiles(normalize("3, 9"))
    assert math.isnan(q.q1)
    assert q.q3 == 9.0
    # n = 3 is the first size with a valid Q1 position.
    assert quartiles(normalize("3, 9, 12")).q1 == 3.0


def test_percentiles(grouped):
    measures = position_measures(grouped)
    assert measures.percentiles == {25: 14.0, 50: 16.0, 75: 18.0, 90: 22.0}
    assert measures.to_dict()["p90"] == 22.0
    assert percentile(grouped, 0) == 10.0
    with pytest.raises(ValueError):
        percentile(grouped, 100)
    with pytest.raises(ValueError):
        percentile(grouped, -1)


def test_zero_value_gives_zero_means_with_warning():
    data = normalize("0, 4, 8")
    with pytest.warns(RuntimeWarning):
        assert geometric_mean(data) == 0.0
    with pytest.warns(RuntimeWarning):
        assert harmonic_mean(data) == 0.0


def test_negative_values_propagate_non_finite_geometric_mean():
    with pytest.warns(RuntimeWarning):
        assert math.isnan(geometric_mean(normalize("-2, 4, 8")))
    # Two negatives multiply to a positive product: (-2 * -8) ** 0.5 = 4
    with pytest.warns(RuntimeWarning):
        assert geometric_mean(normalize("-2, -8")) == pytest.approx(4.0)


def test_harmonic_mean_with_cancelling_reciprocals_is_infinite():
    with pytest.warns(RuntimeWarning):
        assert math.isinf(harmonic_mean(normalize("-1, 1")))


def test_strict_mode_rejects_non_positive_values():
    data = normalize("-1, 2, 3")
    with pytest.raises(InvalidDomainError):
        geometric_mean(data, strict=True)
    with pytest.raises(InvalidDomainError):
        central_tendency(data, strict=True)


def test_geometric_mean_does_not_overflow_long_samples():
    data = normalize("1000", "200")
    assert geometric_mean(data) == pytest.approx(1000.0)


def test_frequency_table_columns(grouped):
    table = frequency_table(grouped)
    assert table["Cumulative Frequency"].iloc[-1] == 30
    assert table["Relative Frequency (%)"].sum() == pytest.approx(100.0)
    assert table["f·x"].sum() == pytest.approx(494.0)
    assert np.array_equal(table["Value"].to_numpy(), grouped.values)


def test_result_to_dict_lists_modes(grouped):
    out = central_tendency(grouped).to_dict()
    assert out["modes"] == [16.0]
    assert set(out) == {"mean", "geometric_mean", "harmonic_mean", "median", "modes"}


def test_class_frequency_table_groups_expanded_sample():
    table = class_frequency_table(normalize("12, 15, 19, 21, 35, 60"), width=10)
    assert table["Class"].tolist() == ["10-20", "20-30", "30-40", "40-50", "50-60", "60-70"]
    assert table["Midpoint"].tolist() == [15.0, 25.0, 35.0, 45.0, 55.0, 65.0]
    assert table["Frequency"].tolist() == [3, 1, 1, 0, 0, 1]
    assert table["Cumulative Frequency"].tolist() == [3, 4, 5, 5, 5, 6]


def test_class_boundaries_are_half_open_and_weighted(grouped):
    table = class_frequency_table(normalize("20, 30", "4, 1"), width=10, start=20)
    assert table["Class"].tolist() == ["20-30", "30-40"]
    assert table["Frequency"].tolist() == [4, 1]

    table = class_frequency_table(grouped, width=5)
    assert table["Frequency"].sum() == grouped.total_frequency


def test_class_frequency_table_with_fractional_width():
    table = class_frequency_table(normalize("0.1, 0.3, 0.5"), width=0.2, start=0)
    assert table["Class"].tolist() == ["0-0.2", "0.2-0.4", "0.4-0.6"]
    assert table["Frequency"].tolist() == [1, 1, 1]


def test_class_frequency_table_rejects_bad_arguments():
    data = normalize("5, 6")
    with pytest.raises(ValueError):
        class_frequency_table(data, width=0)
    with pytest.raises(ValueError):
        class_frequency_table(data, width=1, start=5.5)


def test_grouped_mean_from_class_midpoints():
    # (15*5 + 25*12 + 35*18 + 45*15 + 55*8 + 65*2) / 60
    data = dataset_from_classes(load_class_intervals())
    assert central_tendency(data).mean == pytest.approx(2250 / 60)
