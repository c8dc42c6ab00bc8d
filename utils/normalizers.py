"""
Scalar normalisers shared by every scanner.

  - ``parse_currency``: "R$ 1.234,56" → 1234.56 (BRL convention: "." for
    thousands, "," for decimals).
  - ``month_number`` / ``iso_date``: Portuguese month names → month
    number → "YYYY-MM-01".
  - ``normalize_label``: trimmed, lower-cased, accent-free text used for
    every label comparison.
"""

from __future__ import annotations

import math
import re
import unicodedata
from types import MappingProxyType
from typing import Any, Mapping, Optional

TOTAL_LABEL = "total"
CURRENCY_TOKEN = "r$"

_CURRENCY_PREFIX_RE = re.compile(r"R\$\s?", re.IGNORECASE)
# Plain decimal literal only: float() would also accept "nan", "inf"
# and "1_000", none of which are amounts.
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def normalize_label(text: Any) -> str:
    """Trim, lower-case and strip diacritics ("Março " → "marco")."""
    if text is None:
        return ""
    decomposed = unicodedata.normalize("NFKD", str(text).strip().lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _build_month_table() -> Mapping[str, int]:
    names = {
        "janeiro": 1,
        "fevereiro": 2,
        "março": 3,
        "marco": 3,
        "abril": 4,
        "maio": 5,
        "junho": 6,
        "julho": 7,
        "agosto": 8,
        "setembro": 9,
        "outubro": 10,
        "novembro": 11,
        "dezembro": 12,
    }
    return MappingProxyType({normalize_label(k): v for k, v in names.items()})


MONTHS: Mapping[str, int] = _build_month_table()


def parse_currency(value: Any) -> Optional[float]:
    """
    Convert a BRL-formatted cell into a float.

    Numbers pass through unchanged.  Returns ``None`` for blanks and for
    anything that is not a number once the currency marker and thousands
    separators are removed.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None

    text = str(value).strip()
    if not text:
        return None

    cleaned = _CURRENCY_PREFIX_RE.sub("", text)
    cleaned = cleaned.replace(".", "").replace(",", ".").strip()
    if not _NUMBER_RE.match(cleaned):
        return None

    number = float(cleaned)
    return number if math.isfinite(number) else None


def month_number(text: Any) -> Optional[int]:
    return MONTHS.get(normalize_label(text))


def is_month(text: Any) -> bool:
    return month_number(text) is not None


def is_total(text: Any) -> bool:
    return normalize_label(text) == TOTAL_LABEL


def iso_date(month_text: Any, year: int) -> Optional[str]:
    """Return "YYYY-MM-01" for a month name, ``None`` otherwise."""
    month = month_number(month_text)
    if month is None:
        return None
    return f"{year:04d}-{month:02d}-01"
