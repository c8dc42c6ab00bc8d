"""Grid builders for scanner tests."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from dto.grid import Grid
from extractors.grid import build_grid


def place(cells: Dict[Tuple[int, int], object], rows: int, cols: int) -> Grid:
    """Build a grid of the given size with values at ``(row, col)``."""
    raw: List[List[object]] = [[None] * cols for _ in range(rows)]
    for (r, c), value in cells.items():
        raw[r][c] = value
    return build_grid(raw)


def block_cells(
    month: str,
    row: int,
    col: int,
    items: Sequence[Tuple[str, str, str, str]],
    outflow_offset: int = 4,
) -> Dict[Tuple[int, int], object]:
    """
    Cells for one monthly detail block anchored at ``(row, col)``.

    *items* rows are ``(inflow_desc, inflow_amount, outflow_desc,
    outflow_amount)``; amounts go two columns right of descriptions with
    an "R$" cell in between.  Empty descriptions also leave the "R$" cell
    empty.
    """
    out_col = col + outflow_offset
    cells: Dict[Tuple[int, int], object] = {
        (row, col): month,
        (row + 1, col): "Entrada",
        (row + 1, out_col): "Saída",
    }
    for i, (e_desc, e_val, s_desc, s_val) in enumerate(items):
        r = row + 2 + i
        for desc_col, desc, val in ((col, e_desc, e_val), (out_col, s_desc, s_val)):
            cells[(r, desc_col)] = desc
            cells[(r, desc_col + 1)] = "R$" if desc else ""
            cells[(r, desc_col + 2)] = val
    return cells
