import math

import pytest

from bizstat.analysis import (
    correlation_frame,
    describe,
    outlier_frame,
    print_outliers,
    print_summary,
    summary_frame,
)
from bizstat.data_processing import normalize
from bizstat.dataset import PairedDataset
from bizstat.samples import DISPERSION_FREQUENCIES, DISPERSION_VALUES
from bizstat.schema import OUTLIER_COLUMNS, RESULT_COLUMNS
from bizstat.stats.correlation import correlation_summary
from bizstat.stats.outliers import detect_outliers


@pytest.fixture
def summary():
    return describe(normalize(DISPERSION_VALUES, DISPERSION_FREQUENCIES))


def _measure(frame, name):
    return frame.loc[frame[RESULT_COLUMNS.measure] == name].iloc[0]


def test_describe_runs_every_engine(summary):
    assert summary.n == 32
    assert summary.central.mean == pytest.approx(25.0)
    assert summary.dispersion.variance == pytest.approx(62.5)
    assert summary.shape.mode == 25.0
    assert summary.position.quartiles.q1 == 20.0


def test_shape_and_central_agree_on_mean(summary):
    assert summary.central.mean == pytest.approx(summary.dispersion.mean)


def test_summary_frame_rows(summary):
    frame = summary_frame(summary)
    assert list(frame.columns) == [
        RESULT_COLUMNS.measure,
        RESULT_COLUMNS.value,
        RESULT_COLUMNS.display,
        RESULT_COLUMNS.interpretation,
    ]
    assert _measure(frame, "Variance")[RESULT_COLUMNS.display] == "62.5000"
    kurt = _measure(frame, "Excess Kurtosis")
    assert kurt[RESULT_COLUMNS.interpretation] == "Platykurtic (Flat)"
    assert _measure(frame, "Coefficient of Variation (%)")[RESULT_COLUMNS.interpretation] == "High"
    assert _measure(frame, "P90")[RESULT_COLUMNS.value] == 35.0


def test_summary_frame_marks_multimodal_data():
    frame = summary_frame(describe(normalize("1, 2, 3", "2, 2, 1")))
    row = _measure(frame, "Mode(s)")
    assert row[RESULT_COLUMNS.display] == "1.00, 2.00"
    assert row[RESULT_COLUMNS.interpretation] == "multimodal"
    assert math.isnan(row[RESULT_COLUMNS.value])


def test_zero_spread_summary_displays_undefined():
    frame = summary_frame(describe(normalize("5, 5, 5, 5")))
    assert _measure(frame, "Moment Skewness")[RESULT_COLUMNS.display] == "undefined"
    assert _measure(frame, "Coefficient of Variation (%)")[RESULT_COLUMNS.display] == "0.0000"


def test_print_summary(summary, capsys):
    print_summary(summary)
    out = capsys.readouterr().out
    assert "Descriptive statistics (N=32):" in out
    assert " - Variance: 62.5000" in out
    assert "approximately symmetric" in out


def test_correlation_frame():
    pairs = PairedDataset.from_sequences([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
    frame = correlation_frame(correlation_summary(pairs))
    row = _measure(frame, "Pearson r")
    assert row[RESULT_COLUMNS.value] == 1.0
    assert row[RESULT_COLUMNS.interpretation] == "Very Strong Positive"
    assert _measure(frame, "p-value (r)")[RESULT_COLUMNS.display] == "undefined"


def test_outlier_frame_and_printout(capsys):
    results = detect_outliers([10, 11, 12] * 4 + [100])
    frame = outlier_frame(results)
    assert len(frame) == 13
    assert frame[OUTLIER_COLUMNS.is_outlier].sum() == 1
    print_outliers(results)
    out = capsys.readouterr().out
    assert "1 of 13 values flagged" in out
    assert "index 12: 100.00" in out
