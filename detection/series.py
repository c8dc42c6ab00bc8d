"""
Scanner for the single-column mini tables placed under a title cell
(e.g. "Nubank", "Santander"): month name in column 0, spending in
column 1.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from detection.base import Scanner
from detection.constants import ScanBounds
from detection.summary import iter_month_rows
from dto.grid import Grid
from dto.output import SeriesPoint
from dto.scan import ScanOutcome
from utils.normalizers import iso_date, normalize_label, parse_currency

logger = logging.getLogger(__name__)


class SeriesTableScanner(Scanner):

    def __init__(
        self,
        title: str,
        year: Optional[int] = None,
        bounds: Optional[ScanBounds] = None,
    ):
        super().__init__(year=year, bounds=bounds)
        self.title = title

    def find_title(self, grid: Grid) -> Optional[int]:
        wanted = normalize_label(self.title)
        for r in range(grid.num_rows):
            if any(normalize_label(c) == wanted for c in grid.row(r)):
                return r
        return None

    def scan(self, grid: Grid) -> ScanOutcome[List[SeriesPoint]]:
        outcome: ScanOutcome[List[SeriesPoint]] = ScanOutcome(value=[])

        title_row = self.find_title(grid)
        if title_row is None:
            outcome.note(f"mini table {self.title!r} not found")
            return outcome

        start = title_row + 1
        stop = start + self.bounds.series_max_rows
        for r, label in iter_month_rows(grid, start, stop, outcome):
            outcome.value.append(
                SeriesPoint(
                    period=label,
                    iso_date=iso_date(label, self.year),
                    outflow=parse_currency(grid.value(r, 1)),
                )
            )

        logger.debug(
            "Mini table %r at row %d: %d month(s)",
            self.title,
            title_row,
            len(outcome.value),
        )
        return outcome
