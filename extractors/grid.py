"""
Grid reading: turn the first worksheet of a workbook into a ``Grid``.

The workbook is loaded with ``data_only=True`` so formula cells carry the
value Excel cached when the file was last saved; formulas are never
evaluated here.
"""

from __future__ import annotations

import datetime as dt
import io
import logging
import zipfile
from pathlib import Path
from typing import Any, Iterable, List, Union

import openpyxl
from openpyxl import Workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from dto.grid import Grid

logger = logging.getLogger(__name__)


class WorkbookFormatError(ValueError):
    """The input could not be opened as an .xlsx workbook."""


# ------------------------------------------------------------------
# Cell → text
# ------------------------------------------------------------------


def cell_text(value: Any) -> str:
    """
    Stringify and trim a raw cell value.  Numbers keep their plain
    decimal-point form ("0.125"); integral floats drop the ".0".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    return str(value).strip()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def build_grid(rows: Iterable[Iterable[Any]]) -> Grid:
    """Build a dense grid from raw rows, padding ragged rows with ""."""
    text_rows: List[List[str]] = []
    value_rows: List[List[Any]] = []
    for row in rows:
        raw = list(row)
        text = [cell_text(v) for v in raw]
        text_rows.append(text)
        value_rows.append([v if _is_number(v) else t for v, t in zip(raw, text)])

    width = max((len(r) for r in text_rows), default=0)
    return Grid(
        rows=tuple(tuple(r + [""] * (width - len(r))) for r in text_rows),
        values=tuple(tuple(r + [""] * (width - len(r))) for r in value_rows),
    )


# ------------------------------------------------------------------
# Workbook access
# ------------------------------------------------------------------


def load_workbook_source(source: Union[bytes, str, Path]) -> Workbook:
    """Open an .xlsx from raw bytes or a file path."""
    target = io.BytesIO(source) if isinstance(source, bytes) else source
    try:
        return openpyxl.load_workbook(target, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        raise WorkbookFormatError(f"Not a valid .xlsx workbook: {exc}") from exc


def read_worksheet(ws: Worksheet) -> Grid:
    """
    Read the used range of *ws*.  Its top-left cell becomes grid (0, 0),
    so leading blank rows/columns outside the used range are dropped.
    """
    rows = ws.iter_rows(
        min_row=ws.min_row,
        min_col=ws.min_column,
        max_row=ws.max_row,
        max_col=ws.max_column,
        values_only=True,
    )
    grid = build_grid(rows)
    if grid.is_empty:
        return Grid()
    return grid


def read_first_sheet(workbook: Workbook) -> Grid:
    if not workbook.sheetnames:
        logger.warning("Workbook has no sheets")
        return Grid()

    sheet_name = workbook.sheetnames[0]
    grid = read_worksheet(workbook[sheet_name])
    logger.info(
        "Read sheet '%s': %d row(s) x %d column(s)",
        sheet_name,
        grid.num_rows,
        grid.num_cols,
    )
    return grid
