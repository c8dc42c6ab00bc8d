"""
Top-level output DTOs for the persisted JSON document.

    ExtractionResult
      ├─ meta:          {year, updatedAt}
      ├─ dashboard:     {tabela1: [SummaryRow], tabela2: [SeriesPoint],
      │                  tabela3: [SeriesPoint]}
      └─ detalheMensal: {"<month as written>": PeriodDetail}

Python attribute names are English; the serialised (alias) names are the
ones the dashboard page reads and must not change.  Always dump with
``by_alias=True``.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _AliasedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# -------------------------------------------------------------------
# Dashboard tables
# -------------------------------------------------------------------


class SummaryRow(_AliasedModel):
    """One month of the primary Entrada / Saída / Líquido table."""

    period: str = Field(alias="month")
    iso_date: Optional[str] = Field(default=None, alias="date")
    inflow: Optional[float] = Field(default=None, alias="entrada")
    outflow: Optional[float] = Field(default=None, alias="saida")
    net: Optional[float] = Field(default=None, alias="liquido")
    delta_previous: Optional[float] = Field(default=None, alias="diferenca_m1")
    growth_label: Optional[str] = Field(default=None, alias="crescimento")


class SeriesPoint(_AliasedModel):
    """One month of a single-column mini table (e.g. a card's spending)."""

    period: str = Field(alias="month")
    iso_date: Optional[str] = Field(default=None, alias="date")
    outflow: Optional[float] = Field(default=None, alias="saida")


class Dashboard(_AliasedModel):
    primary: List[SummaryRow] = Field(default_factory=list, alias="tabela1")
    series_a: List[SeriesPoint] = Field(default_factory=list, alias="tabela2")
    series_b: List[SeriesPoint] = Field(default_factory=list, alias="tabela3")


# -------------------------------------------------------------------
# Monthly detail blocks
# -------------------------------------------------------------------


class LineItem(_AliasedModel):
    description: str = Field(alias="desc")
    amount: float


class PeriodDetail(_AliasedModel):
    iso_date: Optional[str] = Field(default=None, alias="date")
    inflow_items: List[LineItem] = Field(default_factory=list, alias="entradas")
    outflow_items: List[LineItem] = Field(default_factory=list, alias="saidas")


# -------------------------------------------------------------------
# Envelope
# -------------------------------------------------------------------


class Meta(_AliasedModel):
    year: int
    generated_at: str = Field(alias="updatedAt")


class ExtractionResult(_AliasedModel):
    meta: Meta
    dashboard: Dashboard = Field(default_factory=Dashboard)
    details: Dict[str, PeriodDetail] = Field(
        default_factory=dict, alias="detalheMensal"
    )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
