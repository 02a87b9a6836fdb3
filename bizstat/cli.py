"""Command-line interface for the business statistics calculators."""

from __future__ import annotations

import argparse
import logging
import sys

import pandas as pd

from .analysis import (
    correlation_frame,
    describe,
    outlier_frame,
    print_correlation,
    print_outliers,
    print_summary,
    summary_frame,
)
from .constants import DEFAULT_Z_THRESHOLD
from .data_processing import (
    classify_data,
    column_values,
    data_insights,
    dataset_from_values,
    load_table,
    normalize,
    normalize_pairs,
    numeric_columns,
    pairs_from_columns,
)
from .output import save_results
from .plotting import plot_distribution, plot_outliers, plot_scatter
from .samples import list_samples, load_sample
from .stats.central_tendency import class_frequency_table, frequency_table
from .stats.correlation import correlation_summary
from .stats.outliers import detect_outliers


def _load_frame(args: argparse.Namespace) -> pd.DataFrame | None:
    if getattr(args, "input", None):
        frame = load_table(args.input)
    elif getattr(args, "sample", None):
        frame = load_sample(args.sample)
    else:
        return None
    for insight in data_insights(frame):
        logging.info("%s: %s", insight["type"], insight["message"])
    return frame


def _resolve_column(frame: pd.DataFrame, column: str | None) -> str:
    if column is not None:
        return column
    candidates = numeric_columns(frame)
    if not candidates:
        raise ValueError(
            f"No numeric columns found. Available columns: {list(frame.columns)}"
        )
    logging.info("No --column given; using first numeric column '%s'", candidates[0])
    return candidates[0]


def _run_describe(args: argparse.Namespace) -> int:
    frame = _load_frame(args)
    if frame is not None:
        data = dataset_from_values(column_values(frame, _resolve_column(frame, args.column)))
    else:
        data = normalize(args.values or "", args.frequencies)

    summary = describe(data, strict=args.strict)
    print_summary(summary)

    tables = {
        "Summary": summary_frame(summary),
        "Frequency Table": frequency_table(data),
    }
    if args.class_width is not None:
        classes = class_frequency_table(data, args.class_width)
        print("\nClass intervals:")
        for _, row in classes.iterrows():
            print(f" - {row['Class']}: {row['Frequency']} (midpoint {row['Midpoint']:g})")
        tables["Class Intervals"] = classes

    if args.outdir:
        save_results(
            tables,
            output_dir=args.outdir,
            stem="descriptive_statistics",
        )
        if args.plot:
            plot_distribution(
                data, summary.central.mean, summary.central.median, args.outdir
            )
    return 0


def _run_correlate(args: argparse.Namespace) -> int:
    frame = _load_frame(args)
    if frame is not None:
        if not args.x_col or not args.y_col:
            raise ValueError("--x-col and --y-col are required with --input/--sample.")
        pairs = pairs_from_columns(frame, args.x_col, args.y_col)
    else:
        pairs = normalize_pairs(args.x or "", args.y or "")

    result = correlation_summary(pairs)
    print_correlation(result)

    if args.outdir:
        save_results(
            {"Correlation": correlation_frame(result)},
            output_dir=args.outdir,
            stem="correlation",
        )
        if args.plot:
            plot_scatter(pairs, args.outdir, r=result.pearson)
    return 0


def _run_outliers(args: argparse.Namespace) -> int:
    frame = _load_frame(args)
    if frame is not None:
        values = column_values(frame, _resolve_column(frame, args.column))
    else:
        values = list(normalize(args.values or "").values)

    results = detect_outliers(values, method=args.method, z_threshold=args.threshold)
    print_outliers(results)

    if args.outdir:
        save_results(
            {"Outliers": outlier_frame(results)},
            output_dir=args.outdir,
            stem="outlier_detection",
        )
        if args.plot:
            plot_outliers(results, args.outdir)
    return 0


def _run_classify(args: argparse.Namespace) -> int:
    result = classify_data(args.lines)
    for label, items in result.to_dict().items():
        print(f"\n{label.capitalize()} data ({len(items)}):")
        for item in items:
            print(f" - {item}")
    return 0


def _run_samples(args: argparse.Namespace) -> int:
    for sample in list_samples():
        print(f"{sample['name']}: {sample['title']} [{sample['category']}]")
        print(f"    {sample['description']}")
    return 0


def _add_table_source(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--input", default=None, help="Path to a CSV, XLSX or XLS file.")
    parser.add_argument(
        "--sample", default=None, help="Name of a built-in sample dataset."
    )


def _add_export(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--outdir", default=None, help="Write CSV/XLSX results to this directory."
    )
    parser.add_argument(
        "--plot", action="store_true", help="Also save a PNG chart (needs --outdir)."
    )


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="bizstat",
        description="Business statistics calculators: descriptive measures, "
        "correlation and outlier detection.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_desc = sub.add_parser("describe", help="Central tendency, dispersion and shape.")
    p_desc.add_argument("--values", default=None, help='Comma-separated values, e.g. "10, 12, 14".')
    p_desc.add_argument(
        "--frequencies", default=None, help="Comma-separated frequencies paired with --values."
    )
    p_desc.add_argument("--column", default=None, help="Column to analyse with --input/--sample.")
    p_desc.add_argument(
        "--strict",
        action="store_true",
        help="Reject non-positive values for geometric/harmonic means.",
    )
    p_desc.add_argument(
        "--class-width",
        type=float,
        default=None,
        help="Also group the data into class intervals of this width.",
    )
    _add_table_source(p_desc)
    _add_export(p_desc)
    p_desc.set_defaults(func=_run_describe)

    p_corr = sub.add_parser("correlate", help="Pearson and Spearman correlation.")
    p_corr.add_argument("--x", default=None, help="Comma-separated X values.")
    p_corr.add_argument("--y", default=None, help="Comma-separated Y values.")
    p_corr.add_argument("--x-col", default=None, help="X column with --input/--sample.")
    p_corr.add_argument("--y-col", default=None, help="Y column with --input/--sample.")
    _add_table_source(p_corr)
    _add_export(p_corr)
    p_corr.set_defaults(func=_run_correlate)

    p_out = sub.add_parser("outliers", help="Z-score or IQR outlier detection.")
    p_out.add_argument("--values", default=None, help="Comma-separated values.")
    p_out.add_argument("--column", default=None, help="Column to analyse with --input/--sample.")
    p_out.add_argument("--method", choices=("zscore", "iqr"), default="zscore")
    p_out.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_Z_THRESHOLD,
        help=f"Absolute z-score cut-off (default: {DEFAULT_Z_THRESHOLD}).",
    )
    _add_table_source(p_out)
    _add_export(p_out)
    p_out.set_defaults(func=_run_outliers)

    p_cls = sub.add_parser(
        "classify", help="Sort data descriptions into primary/secondary and continuous/discrete."
    )
    p_cls.add_argument("lines", nargs="+", help="One quoted description per data source.")
    p_cls.set_defaults(func=_run_classify)

    p_samples = sub.add_parser("samples", help="List built-in sample datasets.")
    p_samples.set_defaults(func=_run_samples)
    return parser


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(log_file: str | None = None, stream=None) -> None:
    """Send INFO records to ``stream`` (stdout by default) and optionally a file.

    Does nothing when the root logger already has handlers, so the first
    caller decides where records go.
    """
    if logging.getLogger().handlers:
        return
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, handlers=handlers)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Returns ``2`` when the input cannot be analysed."""
    configure_logging()
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (ValueError, KeyError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
