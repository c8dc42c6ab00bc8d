"""
WorkbookExtractor: runs every scanner over the first sheet and assembles
the ``ExtractionResult``.

Responsibilities:
  1. Materialise the first worksheet as a ``Grid`` (once).
  2. Run the summary scanner, both mini-table scanners and the monthly
     detail scanner over that grid.  They are independent of each other.
  3. Log the diagnostic notes and merge the tables into one result.

Nothing here raises for a badly laid-out sheet; missing tables come back
empty.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import List, Optional

from openpyxl import Workbook

from detection import (
    MonthlyDetailScanner,
    ScanBounds,
    SeriesTableScanner,
    SummaryTableScanner,
)
from detection.constants import report_year, series_a_title, series_b_title
from dto.grid import Grid
from dto.output import Dashboard, ExtractionResult, Meta
from dto.scan import ScanOutcome
from extractors.grid import read_first_sheet

logger = logging.getLogger(__name__)


def utc_timestamp(now: Optional[dt.datetime] = None) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2026-01-31T12:00:00.000Z."""
    now = now or dt.datetime.now(dt.timezone.utc)
    now = now.astimezone(dt.timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class WorkbookExtractor:
    """
    Extracts the dashboard record from a cash-flow workbook.

    Usage::

        extractor = WorkbookExtractor(year=2026)
        result = extractor.extract(workbook)
    """

    def __init__(
        self,
        year: Optional[int] = None,
        series_a: Optional[str] = None,
        series_b: Optional[str] = None,
        bounds: Optional[ScanBounds] = None,
    ):
        # Unset arguments fall back to the environment at construction time.
        self.year = report_year() if year is None else year
        self.summary = SummaryTableScanner(year=self.year, bounds=bounds)
        self.series_a = SeriesTableScanner(
            series_a or series_a_title(), year=self.year, bounds=bounds
        )
        self.series_b = SeriesTableScanner(
            series_b or series_b_title(), year=self.year, bounds=bounds
        )
        self.monthly = MonthlyDetailScanner(year=self.year, bounds=bounds)
        self.notes: List[str] = []

    def _collect(self, name: str, outcome: ScanOutcome) -> None:
        for note in outcome.notes:
            logger.info("  [%s] %s", name, note)
            self.notes.append(f"{name}: {note}")

    def extract_grid(
        self,
        grid: Grid,
        now: Optional[dt.datetime] = None,
    ) -> ExtractionResult:
        self.notes = []

        primary = self.summary.scan(grid)
        series_a = self.series_a.scan(grid)
        series_b = self.series_b.scan(grid)
        details = self.monthly.scan(grid)

        self._collect("tabela1", primary)
        self._collect("tabela2", series_a)
        self._collect("tabela3", series_b)
        self._collect("detalheMensal", details)

        logger.info(
            "  -> %d summary row(s), %d + %d mini-table row(s), %d month block(s)",
            len(primary.value),
            len(series_a.value),
            len(series_b.value),
            len(details.value),
        )

        return ExtractionResult(
            meta=Meta(year=self.year, generated_at=utc_timestamp(now)),
            dashboard=Dashboard(
                primary=primary.value,
                series_a=series_a.value,
                series_b=series_b.value,
            ),
            details=details.value,
        )

    def extract(
        self,
        workbook: Workbook,
        now: Optional[dt.datetime] = None,
    ) -> ExtractionResult:
        return self.extract_grid(read_first_sheet(workbook), now=now)
