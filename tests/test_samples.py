import pytest

from bizstat.data_processing import numeric_columns
from bizstat.samples import list_samples, load_class_intervals, load_sample


def test_every_listed_sample_loads():
    names = [s["name"] for s in list_samples()]
    assert names == [
        "student_performance",
        "sales_performance",
        "employee_survey",
        "product_quality",
    ]
    for name in names:
        frame = load_sample(name)
        assert len(frame) == 8
        assert numeric_columns(frame)


def test_load_sample_returns_fresh_copy():
    frame = load_sample("product_quality")
    frame.loc[0, "Cost"] = -1
    assert load_sample("product_quality").loc[0, "Cost"] == 15.50


def test_unknown_sample():
    with pytest.raises(KeyError, match="Unknown sample"):
        load_sample("nope")


def test_class_interval_sample():
    table = load_class_intervals()
    assert list(table.columns) == ["Class", "Midpoint", "Frequency"]
    assert table["Frequency"].sum() == 60
    assert table["Class"].iloc[0] == "10-20"
