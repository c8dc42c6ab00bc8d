from pydantic import BaseModel


class BlockAnchor(BaseModel):
    """A month-name cell directly above an Entrada/Saída sub-header."""
    period: str
    row: int
    col: int


class ColumnGroup(BaseModel):
    """Description / amount column pair for one side of a monthly block."""
    description_col: int
    amount_col: int
