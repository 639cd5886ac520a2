from __future__ import annotations

from typing import Literal

NotationType = Literal["A1"]
NotationKind = Literal["cell", "range", "sheet"]
RangeShape = Literal["rectangular", "columns", "rows"]
OutputFormat = Literal["json", "text"]
