"""A1 notation references: single cells, ranges and sheet-only references.

Examples of accepted input::

    A1            single cell
    A1:C10        rectangular range
    A:C           whole-column range
    5:9           whole-row range
    Sheet1!B2     sheet-qualified cell
    'My Sheet'!A:A
    'Jon\\'s_Data'!A1:D5
    Sheet1        sheet-only reference

A bare word that is not a cell (``Sheet1``) names a sheet. ``A1`` without
quotes is always a cell; ``'A1'`` is the sheet called A1.
"""

from __future__ import annotations

import logging
from typing import Annotated, ClassVar, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from .coordinates import Column, Row
from .errors import UnboundedDimensionError
from .references import (
    extract_column,
    extract_row,
    is_cell,
    is_column_only,
    is_range,
    is_row_only,
    is_sheet_only,
    is_whole_column_range,
    is_whole_row_range,
)
from .sheet_name import SheetName
from .stringifiers import cell_str, sheet_name_str, sheet_prefix
from .types import NotationType, RangeShape

logger = logging.getLogger(__name__)


class CellRef(BaseModel):
    """Reference to one cell, optionally qualified by a sheet."""

    model_config = ConfigDict(frozen=True)

    notation_type: ClassVar[NotationType] = "A1"

    kind: Literal["cell"] = "cell"
    sheet: SheetName | None = None
    column: Column
    row: Row

    @classmethod
    def from_notation(cls, notation: str) -> CellRef:
        """Build a cell from text already classified as a cell."""
        ref = SheetName.ref_part(notation)
        return cls(
            sheet=SheetName.from_notation(notation),
            column=extract_column(ref),
            row=extract_row(ref),
        )

    def render(self) -> str:
        """Return the notation with its sheet prefix, if any."""
        return _with_prefix(self.sheet, self.render_short())

    def render_short(self) -> str:
        """Return the notation without the sheet prefix."""
        return cell_str(self.column, self.row)

    def width(self) -> int:
        """Return 1; a cell spans one column."""
        return 1

    def height(self) -> int:
        """Return 1; a cell spans one row."""
        return 1

    def __str__(self) -> str:
        return self.render()


class RangeRef(BaseModel):
    """Rectangular, whole-column or whole-row range.

    Endpoints keep the order they were given in; ``F10:C10`` is not
    normalized to ``C10:F10``.
    """

    model_config = ConfigDict(frozen=True)

    notation_type: ClassVar[NotationType] = "A1"

    kind: Literal["range"] = "range"
    sheet: SheetName | None = None
    left: Column | None = None
    right: Column | None = None
    top: Row | None = None
    bottom: Row | None = None

    @model_validator(mode="after")
    def _validate_shape(self) -> RangeRef:
        has_columns = self.left is not None and self.right is not None
        has_rows = self.top is not None and self.bottom is not None
        no_columns = self.left is None and self.right is None
        no_rows = self.top is None and self.bottom is None
        if (has_columns and (has_rows or no_rows)) or (has_rows and no_columns):
            return self
        raise ValueError(
            "Range needs left/right columns, top/bottom rows, or all four bounds."
        )

    @classmethod
    def from_notation(cls, notation: str) -> RangeRef:
        """Build a range from text already classified as a range."""
        sheet = SheetName.from_notation(notation)
        ref = SheetName.ref_part(notation)
        start, sep, end = ref.partition(":")
        if not sep:
            raise ValueError(f"Invalid A1 range reference: {notation}")
        if is_column_only(start) and is_column_only(end):
            return cls(sheet=sheet, left=Column(start), right=Column(end))
        if is_row_only(start) and is_row_only(end):
            return cls(sheet=sheet, top=Row(int(start)), bottom=Row(int(end)))
        return cls(
            sheet=sheet,
            left=extract_column(start),
            top=extract_row(start),
            right=extract_column(end),
            bottom=extract_row(end),
        )

    def shape(self) -> RangeShape:
        """Return which axes bound this range."""
        if self.columns_only():
            return "columns"
        if self.rows_only():
            return "rows"
        return "rectangular"

    def columns_only(self) -> bool:
        """Return True for a whole-column range like ``A:C``."""
        return self.top is None and self.bottom is None

    def rows_only(self) -> bool:
        """Return True for a whole-row range like ``1:10``."""
        return self.left is None and self.right is None

    def render(self) -> str:
        """Return the notation with its sheet prefix, if any."""
        return _with_prefix(self.sheet, self.render_short())

    def render_short(self) -> str:
        """Return ``A:C``, ``1:10`` or ``A1:C10`` without the sheet prefix."""
        left, right, top, bottom = self.left, self.right, self.top, self.bottom
        if top is None or bottom is None:
            return f"{left}:{right}"
        if left is None or right is None:
            return f"{top}:{bottom}"
        return f"{cell_str(left, top)}:{cell_str(right, bottom)}"

    def width(self) -> int:
        """Return the number of columns spanned.

        Raises:
            UnboundedDimensionError: For a whole-row range.
        """
        if self.left is None or self.right is None:
            raise UnboundedDimensionError(
                f"Width cannot be determined for whole-row range: {self}"
            )
        return abs(self.right.index0() - self.left.index0()) + 1

    def height(self) -> int:
        """Return the number of rows spanned.

        Raises:
            UnboundedDimensionError: For a whole-column range.
        """
        if self.top is None or self.bottom is None:
            raise UnboundedDimensionError(
                f"Height cannot be determined for whole-column range: {self}"
            )
        return abs(self.bottom.index0() - self.top.index0()) + 1

    def __str__(self) -> str:
        return self.render()


class SheetRef(BaseModel):
    """Reference to a whole sheet, rendered without a trailing ``!``."""

    model_config = ConfigDict(frozen=True)

    notation_type: ClassVar[NotationType] = "A1"

    kind: Literal["sheet"] = "sheet"
    sheet: SheetName

    @classmethod
    def from_notation(cls, notation: str) -> SheetRef:
        """Build a sheet reference from a quoted or bare sheet token."""
        return cls(sheet=SheetName.parse(notation))

    def render(self) -> str:
        """Return the sheet name, quoted when needed, without ``!``."""
        return sheet_name_str(self.sheet)

    def render_short(self) -> str:
        """Return an empty string; a sheet reference has no cell part."""
        return ""

    def width(self) -> int:
        """Always raises; a sheet has no column bounds."""
        raise UnboundedDimensionError(
            f"Width cannot be determined for sheet-only reference: {self}"
        )

    def height(self) -> int:
        """Always raises; a sheet has no row bounds."""
        raise UnboundedDimensionError(
            f"Height cannot be determined for sheet-only reference: {self}"
        )

    def __str__(self) -> str:
        return self.render()


A1Notation = Annotated[CellRef | RangeRef | SheetRef, Field(discriminator="kind")]

A1_NOTATION_ADAPTER: Final[TypeAdapter[A1Notation]] = TypeAdapter(A1Notation)


def parse(notation: str) -> CellRef | RangeRef | SheetRef:
    """Parse A1 notation text into a cell, range or sheet reference.

    Args:
        notation: Text such as ``A1``, ``Sheet1!A1:C3``, ``A:A`` or ``'My Sheet'``.

    Returns:
        Parsed reference; ``str()`` of it reproduces canonical input exactly.

    Raises:
        ValueError: If the text is empty or not a supported A1 notation.
    """
    if not notation:
        raise ValueError("A1 notation must not be empty")
    has_sheet = "!" in notation
    ref = SheetName.ref_part(notation)

    if not has_sheet and is_sheet_only(notation):
        logger.debug("A1 notation %r classified as sheet-only.", notation)
        return SheetRef.from_notation(notation)
    if is_cell(ref):
        logger.debug("A1 notation %r classified as cell.", notation)
        return CellRef.from_notation(notation)
    if is_range(ref) or is_whole_column_range(ref) or is_whole_row_range(ref):
        logger.debug("A1 notation %r classified as range.", notation)
        return RangeRef.from_notation(notation)
    raise ValueError(f"Unsupported A1 notation: {notation}")


def _with_prefix(sheet: SheetName | None, short: str) -> str:
    """Prepend the rendered sheet prefix when a sheet is set."""
    if sheet is None:
        return short
    return f"{sheet_prefix(sheet)}{short}"
