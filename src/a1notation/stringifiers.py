from __future__ import annotations

import re

from .coordinates import Column, Row
from .sheet_name import SheetName

_PLAIN_SHEET_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def sheet_name_str(sheet: SheetName) -> str:
    """Render a sheet name, quoting it unless it is identifier-like."""
    name = sheet.name
    if _PLAIN_SHEET_NAME_PATTERN.fullmatch(name):
        return name
    escaped = name.replace("'", "\\'")
    return f"'{escaped}'"


def sheet_prefix(sheet: SheetName) -> str:
    """Render the sheet part including the trailing ``!``."""
    return f"{sheet_name_str(sheet)}!"


def cell_str(column: Column, row: Row) -> str:
    """Render a cell like ``B2``."""
    return f"{column.render()}{row.render()}"
