"""Shared fixtures: small grids laid out like the real cash-flow sheet."""

from __future__ import annotations

from typing import Dict, Tuple

import pytest

from dto.grid import Grid

from tests.helpers import block_cells, place


@pytest.fixture
def dashboard_grid() -> Grid:
    """A sheet with all four tables at shifted positions."""
    cells: Dict[Tuple[int, int], object] = {
        (0, 0): "Fluxo de caixa 2026",
        (2, 0): "Mês",
        (2, 1): "Entrada",
        (2, 2): "Saída",
        (2, 3): "Líquido",
        (2, 4): "Diferença M-1",
        (2, 5): "Crescimento",
        (3, 0): "Janeiro",
        (3, 1): "R$ 6.200,00",
        (3, 2): "R$ 2.750,00",
        (3, 3): "R$ 3.450,00",
        (3, 4): "",
        (3, 5): "",
        (4, 0): "Fevereiro",
        (4, 1): 5000,
        (4, 2): 3100.5,
        (4, 3): 1899.5,
        (4, 4): "-1.550,50",
        (4, 5): "-45%",
        (5, 0): "Total",
        (5, 1): "R$ 11.200,00",
        (7, 0): "Nubank",
        (8, 0): "Janeiro",
        (8, 1): "R$ 800,00",
        (9, 0): "Março",
        (9, 1): "R$ 640,10",
        (10, 0): "Total",
        (12, 0): "Santander",
        (13, 0): "Fevereiro",
        (13, 1): "R$ 120,00",
    }
    cells.update(
        block_cells(
            "Janeiro",
            15,
            8,
            [
                ("Salário", "R$ 5.000,00", "Aluguel", "R$ 1.800,00"),
                ("Freela", "1.200,00", "Mercado", "950,00"),
                ("Total", "6.200,00", "Total", "2.750,00"),
            ],
        )
    )
    cells.update(
        block_cells(
            "Fevereiro",
            15,
            16,
            [
                ("Salário", "5.000,00", "Aluguel", "1.800,00"),
                ("", "", "Luz", "300,50"),
                ("", "", "Mercado", "1.000,00"),
            ],
        )
    )
    return place(cells, 22, 24)
