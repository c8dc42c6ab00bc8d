"""
Scanner for the per-month detail blocks ("detalhe mensal").

Each block sits at an arbitrary position in the sheet and looks like::

    Janeiro
    Entrada   R$   <blank>  ...  Saída      R$   <blank>
    Salário   R$   5.000,00      Aluguel    R$   1.800,00
    Freela    R$   1.200,00      Mercado    R$     950,00
    Total     R$   6.200,00      Total      R$   2.750,00

Heuristic rules:
  - An anchor is a month-name cell whose next row contains both "Entrada"
    and "Saída" within a few columns to its right.
  - Each label's column holds the descriptions; the amount is two columns
    further right (the column in between holds the "R$" symbol).
  - Items are read until either side reaches a "Total" row.  Sides are
    independent: a row with an empty or unparseable side only skips that
    side.
  - Outflows are ordered by descending amount; equal amounts keep their
    row order.
  - Anchors are keyed by the month text as written.  When the same text
    anchors two blocks, the later block replaces the earlier one.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from detection.base import Scanner
from detection.constants import INFLOW_LABEL, OUTFLOW_LABEL
from dto.anchor import BlockAnchor, ColumnGroup
from dto.grid import Grid
from dto.output import LineItem, PeriodDetail
from dto.scan import ScanOutcome
from utils.normalizers import (
    CURRENCY_TOKEN,
    is_month,
    is_total,
    iso_date,
    normalize_label,
    parse_currency,
)

logger = logging.getLogger(__name__)


class MonthlyDetailScanner(Scanner):

    # ------------------------------------------------------------------
    # Anchors
    # ------------------------------------------------------------------

    def find_anchors(self, grid: Grid) -> List[BlockAnchor]:
        """Every month-name cell followed by an Entrada/Saída sub-header."""
        anchors: List[BlockAnchor] = []
        probe = self.bounds.subheader_probe_cols
        for r in range(grid.num_rows):
            row = grid.row(r)
            for c in range(min(len(row), self.bounds.anchor_scan_cols)):
                value = row[c]
                if not value or not is_month(value):
                    continue
                below = {normalize_label(v) for v in grid.window(r + 1, c, probe)}
                if INFLOW_LABEL in below and OUTFLOW_LABEL in below:
                    anchors.append(BlockAnchor(period=value, row=r, col=c))
        return anchors

    def locate_column_groups(
        self, grid: Grid, anchor: BlockAnchor
    ) -> Optional[Tuple[ColumnGroup, ColumnGroup]]:
        """
        Return the (inflow, outflow) column groups of a block, or ``None``
        when either label is missing from the sub-header window.
        """
        header = [
            normalize_label(v)
            for v in grid.window(
                anchor.row + 1, anchor.col, self.bounds.subheader_window_cols
            )
        ]
        if INFLOW_LABEL not in header or OUTFLOW_LABEL not in header:
            return None

        offset = self.bounds.amount_offset
        inflow_col = anchor.col + header.index(INFLOW_LABEL)
        outflow_col = anchor.col + header.index(OUTFLOW_LABEL)
        return (
            ColumnGroup(description_col=inflow_col, amount_col=inflow_col + offset),
            ColumnGroup(description_col=outflow_col, amount_col=outflow_col + offset),
        )

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    @staticmethod
    def _read_item(
        grid: Grid,
        row: int,
        group: ColumnGroup,
        outcome: ScanOutcome,
    ) -> Optional[LineItem]:
        description = grid.cell(row, group.description_col)
        if not description or normalize_label(description) == CURRENCY_TOKEN:
            return None

        amount = parse_currency(grid.value(row, group.amount_col))
        if amount is None:
            # The amount column is assumed to sit two columns right of the
            # description; a number in the gap means the layout moved.
            between = (group.description_col + group.amount_col) // 2
            if parse_currency(grid.value(row, between)) is not None:
                outcome.note(
                    f"row {row}: amount for {description!r} found in column "
                    f"{between}, expected column {group.amount_col} "
                    f"(possible column drift)"
                )
            return None

        return LineItem(description=description, amount=amount)

    def extract_block(
        self,
        grid: Grid,
        anchor: BlockAnchor,
        inflow: ColumnGroup,
        outflow: ColumnGroup,
        outcome: ScanOutcome,
    ) -> PeriodDetail:
        inflow_items: List[LineItem] = []
        outflow_items: List[LineItem] = []

        start = anchor.row + 2
        stop = min(grid.num_rows, start + self.bounds.block_max_rows)
        for r in range(start, stop):
            if is_total(grid.cell(r, inflow.description_col)) or is_total(
                grid.cell(r, outflow.description_col)
            ):
                break

            item = self._read_item(grid, r, inflow, outcome)
            if item is not None:
                inflow_items.append(item)
            item = self._read_item(grid, r, outflow, outcome)
            if item is not None:
                outflow_items.append(item)

        # sorted() is stable, so ties keep row order
        outflow_items = sorted(outflow_items, key=lambda i: i.amount, reverse=True)

        return PeriodDetail(
            iso_date=iso_date(anchor.period, self.year),
            inflow_items=inflow_items,
            outflow_items=outflow_items,
        )

    # ------------------------------------------------------------------
    # Scan
    # ------------------------------------------------------------------

    def scan(self, grid: Grid) -> ScanOutcome[Dict[str, PeriodDetail]]:
        outcome: ScanOutcome[Dict[str, PeriodDetail]] = ScanOutcome(value={})

        anchors = self.find_anchors(grid)
        if not anchors:
            outcome.note("no monthly detail blocks found")

        for anchor in anchors:
            groups = self.locate_column_groups(grid, anchor)
            if groups is None:
                outcome.note(
                    f"block {anchor.period!r} at row {anchor.row}, column "
                    f"{anchor.col}: sub-header lacks Entrada or Saída, skipped"
                )
                continue

            detail = self.extract_block(grid, anchor, *groups, outcome)
            if anchor.period in outcome.value:
                outcome.note(
                    f"block {anchor.period!r} at row {anchor.row}, column "
                    f"{anchor.col} replaces an earlier block with the same label"
                )
            outcome.value[anchor.period] = detail

            logger.debug(
                "Block %r at (%d, %d): %d inflow(s), %d outflow(s)",
                anchor.period,
                anchor.row,
                anchor.col,
                len(detail.inflow_items),
                len(detail.outflow_items),
            )

        return outcome
