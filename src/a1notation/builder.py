from __future__ import annotations

from .coordinates import Column, Row
from .notation import CellRef, RangeRef, SheetRef
from .sheet_name import SheetName

ColumnLike = str | Column
RowLike = int | Row


class A1NotationBuilder:
    """Fluent factory for references, optionally bound to one sheet.

    Column letters are case-insensitive here (``"aa"`` builds ``AA``); each
    value object validates its own input.
    """

    def __init__(self, sheet: str | SheetName | None = None) -> None:
        if sheet is None or isinstance(sheet, SheetName):
            self._sheet = sheet
        else:
            self._sheet = SheetName(sheet)

    @property
    def sheet(self) -> SheetName | None:
        """Sheet every built reference is qualified by, if any."""
        return self._sheet

    def row(self, row: RowLike) -> RangeRef:
        """Whole-row reference like ``5:5``."""
        value = _as_row(row)
        return RangeRef(sheet=self._sheet, top=value, bottom=value)

    def rows(self, start: RowLike, end: RowLike) -> RangeRef:
        """Whole-rows reference like ``1:10``; ``start`` must not exceed ``end``."""
        top = _as_row(start)
        bottom = _as_row(end)
        if top.number > bottom.number:
            raise ValueError(f"Invalid row bounds: {top.number} > {bottom.number}")
        return RangeRef(sheet=self._sheet, top=top, bottom=bottom)

    def column(self, column: ColumnLike) -> RangeRef:
        """Whole-column reference like ``A:A``."""
        value = _as_column(column)
        return RangeRef(sheet=self._sheet, left=value, right=value)

    def columns(self, start: ColumnLike, end: ColumnLike) -> RangeRef:
        """Whole-columns reference like ``A:Z``."""
        return RangeRef(
            sheet=self._sheet, left=_as_column(start), right=_as_column(end)
        )

    def cell(self, column: ColumnLike, row: RowLike) -> CellRef:
        """Single cell reference like ``B2``."""
        return CellRef(sheet=self._sheet, column=_as_column(column), row=_as_row(row))

    def range(
        self,
        start_column: ColumnLike,
        start_row: RowLike,
        end_column: ColumnLike,
        end_row: RowLike,
    ) -> RangeRef:
        """Rectangular range like ``A1:C10``."""
        return RangeRef(
            sheet=self._sheet,
            left=_as_column(start_column),
            top=_as_row(start_row),
            right=_as_column(end_column),
            bottom=_as_row(end_row),
        )

    def sheet_only(self) -> SheetRef:
        """Reference to the bound sheet itself.

        Raises:
            RuntimeError: If the builder has no sheet.
        """
        if self._sheet is None:
            raise RuntimeError("Sheet name is not set")
        return SheetRef(sheet=self._sheet)


def with_sheet(sheet: str) -> A1NotationBuilder:
    """Return a builder whose references are qualified by ``sheet``.

    Args:
        sheet: Plain sheet name, without surrounding quotes.

    Raises:
        ValueError: If the name is empty.
    """
    if not sheet:
        raise ValueError("Sheet name must not be empty")
    return A1NotationBuilder(sheet)


def row(value: RowLike) -> RangeRef:
    """Sheetless whole-row reference like ``5:5``."""
    return A1NotationBuilder().row(value)


def rows(start: RowLike, end: RowLike) -> RangeRef:
    """Sheetless whole-rows reference like ``1:10``."""
    return A1NotationBuilder().rows(start, end)


def column(value: ColumnLike) -> RangeRef:
    """Sheetless whole-column reference like ``A:A``."""
    return A1NotationBuilder().column(value)


def columns(start: ColumnLike, end: ColumnLike) -> RangeRef:
    """Sheetless whole-columns reference like ``A:Z``."""
    return A1NotationBuilder().columns(start, end)


def cell(column: ColumnLike, row: RowLike) -> CellRef:
    """Sheetless cell reference like ``B2``."""
    return A1NotationBuilder().cell(column, row)


def cell_range(
    start_column: ColumnLike,
    start_row: RowLike,
    end_column: ColumnLike,
    end_row: RowLike,
) -> RangeRef:
    """Sheetless rectangular range like ``A1:C10``."""
    return A1NotationBuilder().range(start_column, start_row, end_column, end_row)


def _as_column(value: ColumnLike) -> Column:
    """Return ``value`` as a validated Column."""
    return value if isinstance(value, Column) else Column(value)


def _as_row(value: RowLike) -> Row:
    """Return ``value`` as a validated Row."""
    return value if isinstance(value, Row) else Row(value)
