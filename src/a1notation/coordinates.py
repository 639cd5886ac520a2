from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator

_COLUMN_LETTERS_PATTERN = re.compile(r"[A-Za-z]+")


class Column(BaseModel):
    """Column identity stored as uppercase letters (A, B, ..., Z, AA, ...)."""

    model_config = ConfigDict(frozen=True)

    letters: str

    def __init__(self, letters: str, **data: Any) -> None:
        super().__init__(letters=letters, **data)

    @field_validator("letters")
    @classmethod
    def _validate_letters(cls, value: str) -> str:
        if not _COLUMN_LETTERS_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid column letters: {value!r}")
        return value.upper()

    @classmethod
    def from_index(cls, index: int) -> Column:
        """Build a column from its 1-based index (1 -> A, 27 -> AA).

        Args:
            index: Positive 1-based column index.

        Returns:
            Column whose ``index1()`` equals ``index``.

        Raises:
            ValueError: If the index is not positive.
        """
        if index < 1:
            raise ValueError(f"Column index must be positive: {index}")
        chunks: list[str] = []
        current = index
        while current > 0:
            current -= 1
            chunks.append(chr(ord("A") + (current % 26)))
            current //= 26
        return cls("".join(reversed(chunks)))

    def index1(self) -> int:
        """Return the 1-based column index (A=1, Z=26, AA=27)."""
        result = 0
        for char in self.letters:
            result = result * 26 + (ord(char) - ord("A") + 1)
        return result

    def index0(self) -> int:
        """Return the 0-based column index."""
        return self.index1() - 1

    def render(self) -> str:
        """Return the column letters."""
        return self.letters

    def __str__(self) -> str:
        return self.letters


class Row(BaseModel):
    """Positive 1-based row number."""

    model_config = ConfigDict(frozen=True)

    number: StrictInt

    def __init__(self, number: int, **data: Any) -> None:
        super().__init__(number=number, **data)

    @field_validator("number")
    @classmethod
    def _validate_number(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"Row number must be positive: {value}")
        return value

    def index0(self) -> int:
        """Return the 0-based row index."""
        return self.number - 1

    def render(self) -> str:
        """Return the row number as decimal text."""
        return str(self.number)

    def __str__(self) -> str:
        return str(self.number)
