"""Recognizers and splitters for the reference part of an A1 notation.

Every recognizer matches the whole string. Cell and range recognizers accept
uppercase column letters only; lowercase tokens are left to the caller.
"""

from __future__ import annotations

import re

from .coordinates import Column, Row

_FIRST_DIGIT_PATTERN = re.compile(r"[0-9]")
_DIGITS_PATTERN = re.compile(r"[0-9]+")
_CELL = r"[A-Z]+[1-9][0-9]*"
_ROW = r"[1-9][0-9]*"
_CELL_PATTERN = re.compile(_CELL)
_RANGE_PATTERN = re.compile(rf"{_CELL}:{_CELL}")
_WHOLE_COLUMN_RANGE_PATTERN = re.compile(r"[A-Z]+:[A-Z]+")
_WHOLE_ROW_RANGE_PATTERN = re.compile(rf"{_ROW}:{_ROW}")
_QUOTED_SHEET_PATTERN = re.compile(r"'(?:[^'\\]|\\')+'")
_UNQUOTED_SHEET_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_ ]*")
_COLUMN_ONLY_PATTERN = re.compile(r"[A-Za-z]+")
_ROW_ONLY_PATTERN = re.compile(_ROW)


def extract_column(ref: str) -> Column:
    """Return the column letters of a cell token such as ``AB12``.

    Raises:
        ValueError: If the token has no digits or no letters before them.
    """
    boundary = _first_digit_index(ref)
    return Column(ref[:boundary])


def extract_row(ref: str) -> Row:
    """Return the row number of a cell token such as ``AB12``.

    Raises:
        ValueError: If the token has no digits or non-digits after the boundary.
    """
    boundary = _first_digit_index(ref)
    digits = ref[boundary:]
    if not _DIGITS_PATTERN.fullmatch(digits):
        raise ValueError(f"Invalid A1 cell reference: {ref}")
    return Row(int(digits))


def _first_digit_index(ref: str) -> int:
    """Return the index splitting column letters from row digits."""
    match = _FIRST_DIGIT_PATTERN.search(ref)
    if match is None:
        raise ValueError(f"Invalid A1 cell reference: {ref}")
    return match.start()


def is_cell(value: str) -> bool:
    """Return True for a single cell like ``A1`` or ``BC42``."""
    return _CELL_PATTERN.fullmatch(value) is not None


def is_range(value: str) -> bool:
    """Return True for a rectangular range like ``A1:C10``."""
    return _RANGE_PATTERN.fullmatch(value) is not None


def is_whole_column_range(value: str) -> bool:
    """Return True for a whole-column range like ``A:C``."""
    return _WHOLE_COLUMN_RANGE_PATTERN.fullmatch(value) is not None


def is_whole_row_range(value: str) -> bool:
    """Return True for a whole-row range like ``1:10``."""
    return _WHOLE_ROW_RANGE_PATTERN.fullmatch(value) is not None


def is_quoted_sheet(value: str) -> bool:
    """Return True for quoted sheet names like ``'My Sheet'`` or ``'Jon\\'s'``."""
    return _QUOTED_SHEET_PATTERN.fullmatch(value) is not None


def is_sheet_only(value: str) -> bool:
    """Return True when the whole string names a sheet and nothing else.

    Cell-shaped words (``A1``) are not sheets; identifier-like words that
    merely end in digits (``Sheet1``) are.
    """
    if is_quoted_sheet(value):
        return True
    if is_cell(value):
        return False
    return _UNQUOTED_SHEET_PATTERN.fullmatch(value) is not None


def is_column_only(value: str) -> bool:
    """Return True for a column-only token like ``A`` or ``bc``."""
    return _COLUMN_ONLY_PATTERN.fullmatch(value) is not None


def is_row_only(value: str) -> bool:
    """Return True for a row-only token like ``1`` or ``123``."""
    return _ROW_ONLY_PATTERN.fullmatch(value) is not None
