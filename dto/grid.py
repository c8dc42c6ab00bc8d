"""
Grid: the dense, row-major view of a worksheet that every scanner
receives.

``rows`` holds each cell stringified and trimmed; labels, descriptions and
free text are read from there.  ``values`` mirrors ``rows`` but keeps
numeric cells as numbers, so amounts typed as numbers are never pushed
through the BRL text rules.

Reads outside the grid return an empty string instead of raising, so
scanners can probe neighbouring cells without bounds checks.
"""

from __future__ import annotations

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict


class Grid(BaseModel):
    """Immutable 0-indexed grid of trimmed text cells."""

    model_config = ConfigDict(frozen=True)

    rows: Tuple[Tuple[str, ...], ...] = ()
    values: Tuple[Tuple[Any, ...], ...] = ()

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def num_cols(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def is_empty(self) -> bool:
        return not any(cell for row in self.rows for cell in row)

    def cell(self, row: int, col: int) -> str:
        if row < 0 or col < 0 or row >= len(self.rows):
            return ""
        cells = self.rows[row]
        return cells[col] if col < len(cells) else ""

    def value(self, row: int, col: int) -> Any:
        """Raw value: the number for numeric cells, the text otherwise."""
        if row < 0 or col < 0 or row >= len(self.values):
            return self.cell(row, col)
        cells = self.values[row]
        return cells[col] if col < len(cells) else ""

    def row(self, row: int) -> Tuple[str, ...]:
        """Return the given row, or an empty tuple when out of range."""
        if row < 0 or row >= len(self.rows):
            return ()
        return self.rows[row]

    def window(self, row: int, col: int, width: int) -> Tuple[str, ...]:
        """Return ``width`` cells of *row* starting at *col* (padded)."""
        return tuple(self.cell(row, c) for c in range(col, col + width))
