"""Chart rendering for distribution, outlier and correlation results.

All plotting functions accept precomputed results and do not perform any
statistical calculation beyond what is needed to place reference lines.
Figures are written as PNG (300 dpi) and optionally PDF/SVG.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from .dataset import Dataset, PairedDataset
from .stats.outliers import OutlierResult

OUTPUT_FORMATS: tuple[str, ...] = ("png",)
FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    LABEL_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    TICK_FONTSIZE: float = 11.0
    LINEWIDTH: float = 2.0
    MARKERSIZE: float = 30.0
    ALPHA_BAR: float = 0.35
    GRID_ALPHA: float = 0.20
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)


STYLE = StyleConfig()

COLORS = {
    "data": "#3B82F6",
    "mean": "#a50f15",
    "median": "#004371",
    "outlier": "#DC2626",
    "normal": "#10B981",
}


def setup_plot_style() -> None:
    """Apply the project plotting style once per process."""
    if _STYLE_STATE["initialized"]:
        return
    plt.rcParams.update(
        {
            "axes.labelsize": STYLE.LABEL_FONTSIZE,
            "axes.titlesize": STYLE.TITLE_FONTSIZE,
            "xtick.labelsize": STYLE.TICK_FONTSIZE,
            "ytick.labelsize": STYLE.TICK_FONTSIZE,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "axes.grid": True,
            "grid.alpha": STYLE.GRID_ALPHA,
        }
    )
    _STYLE_STATE["initialized"] = True


def save_figure(
    fig: Figure,
    savepath_base: str | Path,
    formats: Sequence[str] = OUTPUT_FORMATS,
    dpi: int = FIGURE_DPI,
) -> str:
    """Save a figure to every format using one extensionless base path.

    Returns:
        str: Path of the first format written (PNG by default).
    """
    base = Path(savepath_base)
    base.parent.mkdir(parents=True, exist_ok=True)
    for ext in formats:
        fig.savefig(
            str(base.with_suffix(f".{ext}")),
            dpi=dpi if ext == "png" else None,
            bbox_inches="tight",
        )
    plt.close(fig)
    return str(base.with_suffix(f".{formats[0]}"))


def plot_distribution(
    data: Dataset,
    mean: float,
    median: float,
    output_dir: str = "output",
    name: str = "distribution",
) -> str:
    """Bar chart of frequency by value with mean and median reference lines.

    Args:
        data (Dataset): Weighted observations.
        mean (float): Arithmetic mean to mark; skipped when non-finite.
        median (float): Median to mark.
        output_dir (str, optional): Output directory. Defaults to ``"output"``.
        name (str, optional): Base file name. Defaults to ``"distribution"``.

    Returns:
        str: Path to the saved PNG file.
    """
    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    values = data.values
    freqs = data.frequencies
    distinct = np.unique(values)
    width = 0.8 * float(np.min(np.diff(distinct))) if len(distinct) > 1 else 0.8

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.bar(values, freqs, width=width, color=COLORS["data"], alpha=STYLE.ALPHA_BAR,
           edgecolor=COLORS["data"], label="Frequency")
    if np.isfinite(mean):
        ax.axvline(mean, color=COLORS["mean"], linewidth=STYLE.LINEWIDTH,
                   label=f"Mean = {mean:.2f}")
    ax.axvline(median, color=COLORS["median"], linewidth=STYLE.LINEWIDTH,
               linestyle="--", label=f"Median = {median:.2f}")
    ax.set_xlabel("Value")
    ax.set_ylabel("Frequency")
    ax.set_title("Frequency Distribution")
    ax.legend(frameon=False)
    return save_figure(fig, Path(output_dir) / name)


def plot_outliers(
    results: Sequence[OutlierResult],
    output_dir: str = "output",
    name: str = "outliers",
) -> str:
    """Scatter of value against index, outliers highlighted.

    Raises:
        ValueError: If ``results`` is empty.
    """
    if not results:
        raise ValueError("No outlier results to plot.")
    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    normal = [r for r in results if not r.is_outlier]
    flagged = [r for r in results if r.is_outlier]

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.scatter([r.index for r in normal], [r.value for r in normal],
               s=STYLE.MARKERSIZE, color=COLORS["normal"], label="Normal")
    if flagged:
        ax.scatter([r.index for r in flagged], [r.value for r in flagged],
                   s=STYLE.MARKERSIZE * 1.5, color=COLORS["outlier"], marker="D",
                   label="Outlier")
    ax.set_xlabel("Index")
    ax.set_ylabel("Value")
    ax.set_title(f"Outlier Detection ({results[0].method})")
    ax.legend(frameon=False)
    return save_figure(fig, Path(output_dir) / name)


def plot_scatter(
    pairs: PairedDataset,
    output_dir: str = "output",
    name: str = "scatter",
    r: float | None = None,
) -> str:
    """Scatter diagram of paired data with the least-squares line."""
    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    x, y = pairs.arrays()
    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.scatter(x, y, s=STYLE.MARKERSIZE, color=COLORS["data"], label="Observations")
    if np.ptp(x) > 0:
        m, b = np.polyfit(x, y, 1)
        xgrid = np.linspace(float(np.min(x)), float(np.max(x)), 100)
        ax.plot(xgrid, m * xgrid + b, color=COLORS["mean"],
                linewidth=STYLE.LINEWIDTH, label="Least-squares line")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    title = "Scatter Diagram"
    if r is not None and np.isfinite(r):
        title += f" (r = {r:.4f})"
    ax.set_title(title)
    ax.legend(frameon=False)
    return save_figure(fig, Path(output_dir) / name)
