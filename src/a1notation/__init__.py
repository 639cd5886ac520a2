"""Parse, classify and render spreadsheet A1 notation."""

from __future__ import annotations

from .builder import (
    A1NotationBuilder,
    cell,
    cell_range,
    column,
    columns,
    row,
    rows,
    with_sheet,
)
from .coordinates import Column, Row
from .errors import UnboundedDimensionError
from .notation import A1_NOTATION_ADAPTER, A1Notation, CellRef, RangeRef, SheetRef, parse
from .sheet_name import SheetName

__all__ = [
    "A1_NOTATION_ADAPTER",
    "A1Notation",
    "A1NotationBuilder",
    "CellRef",
    "Column",
    "RangeRef",
    "Row",
    "SheetName",
    "SheetRef",
    "UnboundedDimensionError",
    "cell",
    "cell_range",
    "column",
    "columns",
    "parse",
    "row",
    "rows",
    "with_sheet",
]
