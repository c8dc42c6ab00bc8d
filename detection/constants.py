import os

from pydantic import BaseModel

# Settings are read on each call so values loaded from .env after import
# still apply.


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else default


def report_year() -> int:
    return _env_int("REPORT_YEAR", 2026)


def series_a_title() -> str:
    return os.getenv("SERIES_A_TITLE", "Nubank")


def series_b_title() -> str:
    return os.getenv("SERIES_B_TITLE", "Santander")


# Normalised (lower-case, accent-free) labels the scanners look for.
INFLOW_LABEL = "entrada"
OUTFLOW_LABEL = "saida"
NET_LABEL = "liquido"


class ScanBounds(BaseModel):
    """How far each scanner is allowed to look, in rows / columns."""

    # Primary table: rows searched for the Entrada/Saída/Líquido header.
    header_scan_rows: int = 80
    # Mini tables: data rows read after the title row, i.e. rows
    # title+1 .. title+40 inclusive.  Set to 39 to stop one row earlier
    # (exclusive upper bound title+40).
    series_max_rows: int = 40
    # Monthly blocks: columns searched for month-name anchors.
    anchor_scan_cols: int = 250
    # Columns of the next row that must hold both Entrada and Saída.
    subheader_probe_cols: int = 20
    # Columns of the sub-header searched for each label's offset.
    subheader_window_cols: int = 30
    # Item rows read below the sub-header, i.e. rows anchor+2 ..
    # anchor+61 inclusive.  Set to 58 for an exclusive upper bound of
    # anchor+60.
    block_max_rows: int = 60
    # Distance from a description column to its amount column.
    amount_offset: int = 2


DEFAULT_BOUNDS = ScanBounds()
