"""
ScanOutcome: what every scanner returns.

Scanners never raise on malformed sheets.  Instead they return whatever
they could extract (possibly empty) together with human-readable notes
describing what was skipped, so callers can log or assert on them.
"""

from __future__ import annotations

from typing import Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ScanOutcome(BaseModel, Generic[T]):
    value: T
    notes: List[str] = []

    def note(self, message: str) -> None:
        self.notes.append(message)
