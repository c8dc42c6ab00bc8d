"""
Table scanners.

Each scanner implements the ``Scanner`` base class and locates one kind of
table by content pattern:
  1. SummaryTableScanner : header row with Entrada / Saída / Líquido
  2. SeriesTableScanner  : single-column table under a title cell
  3. MonthlyDetailScanner: per-month Entrada / Saída item blocks

The scanners share no state and can run in any order over the same grid.
"""

from detection.base import Scanner
from detection.constants import DEFAULT_BOUNDS, ScanBounds
from detection.monthly import MonthlyDetailScanner
from detection.series import SeriesTableScanner
from detection.summary import SummaryTableScanner

__all__ = [
    "Scanner",
    "ScanBounds",
    "DEFAULT_BOUNDS",
    "SummaryTableScanner",
    "SeriesTableScanner",
    "MonthlyDetailScanner",
]
