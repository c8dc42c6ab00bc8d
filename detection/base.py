"""
Base class for all grid scanners.

Each scanner looks for one kind of table in a ``Grid`` by content pattern
(header labels, titles, month names) rather than by fixed coordinates,
because the workbook's layout shifts whenever somebody edits it.

``scan`` never raises on a malformed sheet: it returns a ``ScanOutcome``
holding whatever it could extract plus diagnostic notes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from detection.constants import DEFAULT_BOUNDS, ScanBounds, report_year
from dto.grid import Grid
from dto.scan import ScanOutcome


class Scanner(ABC):
    """Interface that every table scanner must implement."""

    def __init__(
        self,
        year: Optional[int] = None,
        bounds: Optional[ScanBounds] = None,
    ):
        self.year = report_year() if year is None else year
        self.bounds = bounds or DEFAULT_BOUNDS

    @abstractmethod
    def scan(self, grid: Grid) -> ScanOutcome:
        """
        Pure heuristic extraction over *grid*.

        Returns the extracted table (empty when it cannot be located) and
        the notes collected along the way.
        """
        ...
