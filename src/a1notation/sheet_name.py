from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class SheetName(BaseModel):
    """Sheet identifier held in its plain (unquoted, unescaped) form.

    Quoted tokens such as ``'Jon\\'s Data'`` are accepted by ``parse``: the
    outer quotes are removed and backslash-escaped quotes are unescaped.
    """

    model_config = ConfigDict(frozen=True)

    name: str

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Sheet name must not be empty")
        return value

    @classmethod
    def parse(cls, token: str) -> SheetName:
        """Parse a quoted or bare sheet token.

        Args:
            token: Sheet part of a notation, e.g. ``Sheet1`` or ``'My Sheet'``.

        Returns:
            Parsed sheet name.

        Raises:
            ValueError: If the token or the resulting name is empty.
        """
        if not token:
            raise ValueError("Sheet name must not be empty")
        if len(token) >= 2 and token[0] == "'" and token[-1] == "'":
            return cls(token[1:-1].replace("\\'", "'"))
        return cls(token)

    @classmethod
    def from_notation(cls, notation: str) -> SheetName | None:
        """Return the sheet named before the first ``!``, or None without one."""
        if notation is None:
            raise ValueError("A1 notation must not be empty")
        bang = notation.find("!")
        if bang < 0:
            return None
        return cls.parse(notation[:bang])

    @staticmethod
    def ref_part(notation: str) -> str:
        """Return the text after the first ``!``, or the whole notation."""
        bang = notation.find("!")
        return notation[bang + 1 :] if bang >= 0 else notation

    def __str__(self) -> str:
        return self.name
