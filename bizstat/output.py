"""Write result tables to CSV files and a multi-sheet Excel workbook.

This module is the export boundary between in-memory results and the files
students download.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Dict, Mapping, Sequence

import pandas as pd

EXPORT_FORMATS: tuple[str, ...] = ("csv", "xlsx")
_MAX_SHEET_NAME = 31


def _slug(title: str) -> str:
    return re.sub(r"\s+", "_", title.strip())


def _sheet_name(title: str) -> str:
    # Excel forbids []:*?/\ in sheet names and caps them at 31 characters.
    return re.sub(r"[\[\]:*?/\\]", "_", title)[:_MAX_SHEET_NAME] or "Data"


def save_results(
    tables: Mapping[str, pd.DataFrame],
    output_dir: str = "output",
    stem: str = "results",
    formats: Sequence[str] = EXPORT_FORMATS,
) -> Dict[str, str]:
    """Save named result tables.

    Args:
        tables (Mapping[str, pandas.DataFrame]): Table title to table, e.g.
            ``{"Summary": summary_frame(summary)}``.
        output_dir (str): Directory where files are written.
        stem (str): Prefix for every file name; whitespace becomes ``_``.
        formats (Sequence[str]): Any of ``"csv"`` (one file per table) and
            ``"xlsx"`` (one workbook, one sheet per table).

    Returns:
        dict[str, str]: Mapping of ``"<title>.csv"`` / ``"workbook"`` to
        the written path.

    Raises:
        ValueError: If ``tables`` is empty or a format is not supported.
    """
    if not tables:
        raise ValueError("No tables to export.")
    unknown = set(formats) - set(EXPORT_FORMATS)
    if unknown:
        raise ValueError(f"Unsupported export format(s): {sorted(unknown)}")

    os.makedirs(output_dir, exist_ok=True)
    written: Dict[str, str] = {}
    stem = _slug(stem)

    if "csv" in formats:
        for title, frame in tables.items():
            path = os.path.join(output_dir, f"{stem}_{_slug(title).lower()}.csv")
            frame.to_csv(path, index=False)
            written[f"{title}.csv"] = path
            logging.info("Saved %s table to %s", title, path)

    if "xlsx" in formats:
        path = os.path.join(output_dir, f"{stem}.xlsx")
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            for title, frame in tables.items():
                frame.to_excel(writer, sheet_name=_sheet_name(title), index=False)
        written["workbook"] = path
        logging.info("Saved workbook with %d sheet(s) to %s", len(tables), path)

    return written
