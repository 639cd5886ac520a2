from __future__ import annotations

import pytest

from a1notation import UnboundedDimensionError, parse


@pytest.mark.parametrize(
    "text,expected",
    [
        ("A1", 1),
        ("Sheet1!Z99", 1),
        ("B3:E9", 4),
        ("F10:C10", 4),
        ("C2:C8", 1),
        ("A:D", 4),
        ("D:A", 4),
        ("AA:AZ", 26),
    ],
)
def test_width(text: str, expected: int) -> None:
    assert parse(text).width() == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("A1", 1),
        ("C2:C8", 7),
        ("B3:E9", 7),
        ("C8:C2", 7),
        ("5:9", 5),
        ("9:5", 5),
        ("Sheet1!1:1", 1),
    ],
)
def test_height(text: str, expected: int) -> None:
    assert parse(text).height() == expected


@pytest.mark.parametrize("text", ["11:15", "Data!3:3", "Sheet1", "'My Sheet'"])
def test_width_unbounded(text: str) -> None:
    with pytest.raises(UnboundedDimensionError, match="Width cannot be determined"):
        parse(text).width()


@pytest.mark.parametrize("text", ["M:Q", "Data!A:A", "Sheet1", "'My Sheet'"])
def test_height_unbounded(text: str) -> None:
    with pytest.raises(UnboundedDimensionError, match="Height cannot be determined"):
        parse(text).height()


def test_unbounded_message_names_notation() -> None:
    with pytest.raises(UnboundedDimensionError, match="whole-column range: Data!M:Q"):
        parse("Data!M:Q").height()
