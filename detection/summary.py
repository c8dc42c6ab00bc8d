"""
Scanner for the primary dashboard table, plus the month-row walk it shares
with the title-anchored mini tables (see ``detection.series``).

Find the anchor row, then walk the rows below it reading column 0 as a
month name:

  - blank label         → skip (separator rows are allowed mid-table)
  - "Total"             → stop, the total row itself is not emitted
  - not a month name    → skip (stray annotations)
  - month name          → emit a row
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from detection.base import Scanner
from detection.constants import INFLOW_LABEL, NET_LABEL, OUTFLOW_LABEL
from dto.grid import Grid
from dto.output import SummaryRow
from dto.scan import ScanOutcome
from utils.normalizers import (
    is_month,
    is_total,
    iso_date,
    normalize_label,
    parse_currency,
)

logger = logging.getLogger(__name__)

_HEADER_LABELS = frozenset({INFLOW_LABEL, OUTFLOW_LABEL, NET_LABEL})


def iter_month_rows(
    grid: Grid,
    start: int,
    stop: int,
    outcome: ScanOutcome,
) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(row_index, label)`` for every month row in ``[start, stop)``,
    applying the blank-skip / annotation-skip / total-stop rules.
    """
    for r in range(start, min(stop, grid.num_rows)):
        label = grid.cell(r, 0)
        if not label:
            continue
        if is_total(label):
            return
        if not is_month(label):
            outcome.note(f"row {r}: skipped non-month label {label!r}")
            continue
        yield r, label


class SummaryTableScanner(Scanner):
    """Primary table: Mês | Entrada | Saída | Líquido | Diferença | Crescimento."""

    def find_header(self, grid: Grid) -> Optional[int]:
        """Index of the first row holding all three header labels."""
        for r in range(min(grid.num_rows, self.bounds.header_scan_rows)):
            labels = {normalize_label(c) for c in grid.row(r)}
            if _HEADER_LABELS <= labels:
                return r
        return None

    def scan(self, grid: Grid) -> ScanOutcome[List[SummaryRow]]:
        outcome: ScanOutcome[List[SummaryRow]] = ScanOutcome(value=[])

        header = self.find_header(grid)
        if header is None:
            outcome.note(
                f"summary header not found in the first "
                f"{self.bounds.header_scan_rows} rows"
            )
            return outcome

        for r, label in iter_month_rows(grid, header + 1, grid.num_rows, outcome):
            outcome.value.append(
                SummaryRow(
                    period=label,
                    iso_date=iso_date(label, self.year),
                    inflow=parse_currency(grid.value(r, 1)),
                    outflow=parse_currency(grid.value(r, 2)),
                    net=parse_currency(grid.value(r, 3)),
                    delta_previous=parse_currency(grid.value(r, 4)),
                    growth_label=grid.cell(r, 5) or None,
                )
            )

        logger.debug(
            "Summary table at row %d: %d month(s)", header, len(outcome.value)
        )
        return outcome
