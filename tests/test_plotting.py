import os

import pytest

from bizstat.data_processing import normalize
from bizstat.dataset import PairedDataset
from bizstat.plotting import plot_distribution, plot_outliers, plot_scatter
from bizstat.stats.outliers import detect_outliers


def test_plot_distribution(tmp_path):
    data = normalize("10, 12, 14", "1, 3, 1")
    path = plot_distribution(data, mean=12.0, median=12.0, output_dir=str(tmp_path))
    assert path.endswith("distribution.png")
    assert os.path.exists(path)


def test_plot_distribution_skips_non_finite_mean(tmp_path):
    path = plot_distribution(
        normalize("5"), mean=float("nan"), median=5.0, output_dir=str(tmp_path)
    )
    assert os.path.exists(path)


def test_plot_outliers(tmp_path):
    results = detect_outliers([1, 2, 2, 3, 4, 5, 6, 7, 8, 100], method="iqr")
    path = plot_outliers(results, output_dir=str(tmp_path), name="iqr")
    assert os.path.exists(path)
    with pytest.raises(ValueError):
        plot_outliers([], output_dir=str(tmp_path))


def test_plot_scatter_with_constant_x(tmp_path):
    pairs = PairedDataset.from_sequences([2, 2, 2], [1, 5, 3])
    path = plot_scatter(pairs, output_dir=str(tmp_path), r=0.0)
    assert os.path.exists(path)
