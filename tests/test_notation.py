from __future__ import annotations

import logging

import pytest

from a1notation import (
    A1_NOTATION_ADAPTER,
    CellRef,
    Column,
    RangeRef,
    Row,
    SheetName,
    SheetRef,
    parse,
)


@pytest.mark.parametrize(
    "text",
    [
        "A1",
        "B2",
        "Z999",
        "AA10",
        "A1:B2",
        "C3:D4",
        "A:A",
        "Z:Z",
        "1:1",
        "1:10",
        "Sheet1!A1",
        "Sheet1!A1:B2",
        "Data_2025!A:A",
        "Data_2025!1:10",
        "'My Custom Sheet'!A1:D5",
        "'My Custom Sheet'!A:A",
        "'My Custom Sheet'",
        "'Jon\\'s_Data'!A1:D5",
        "'Лист 1'!B2:C3",
        "Sheet1",
        "'Finance Q4'",
        "F10:C10",
    ],
)
def test_round_trip(text: str) -> None:
    assert parse(text).render() == text
    assert str(parse(text)) == text


def test_parse_cell() -> None:
    notation = parse("Sheet1!AB12")
    assert isinstance(notation, CellRef)
    assert notation.kind == "cell"
    assert notation.sheet == SheetName("Sheet1")
    assert notation.column == Column("AB")
    assert notation.row == Row(12)
    assert notation.render_short() == "AB12"


def test_parse_rectangular_range() -> None:
    notation = parse("'My Sheet'!B3:E9")
    assert isinstance(notation, RangeRef)
    assert notation.shape() == "rectangular"
    assert notation.sheet == SheetName("My Sheet")
    assert (notation.left, notation.top) == (Column("B"), Row(3))
    assert (notation.right, notation.bottom) == (Column("E"), Row(9))
    assert notation.render_short() == "B3:E9"


def test_parse_whole_column_range() -> None:
    notation = parse("A:D")
    assert isinstance(notation, RangeRef)
    assert notation.shape() == "columns"
    assert notation.columns_only()
    assert not notation.rows_only()
    assert notation.top is None and notation.bottom is None


def test_parse_whole_row_range() -> None:
    notation = parse("Data!5:9")
    assert isinstance(notation, RangeRef)
    assert notation.shape() == "rows"
    assert notation.rows_only()
    assert notation.left is None and notation.right is None
    assert notation.render_short() == "5:9"


def test_parse_sheet_only() -> None:
    notation = parse("'Jon\\'s'")
    assert isinstance(notation, SheetRef)
    assert notation.sheet.name == "Jon's"
    assert notation.render() == "'Jon\\'s'"
    assert notation.render_short() == ""


def test_bare_word_ending_in_digits_is_a_sheet() -> None:
    notation = parse("Sheet1")
    assert isinstance(notation, SheetRef)
    assert notation.sheet == SheetName("Sheet1")


def test_explicit_sheet_prefix_forces_cell_parsing() -> None:
    assert isinstance(parse("A1"), CellRef)
    assert isinstance(parse("'A1'"), SheetRef)
    assert isinstance(parse("A1!B2"), CellRef)


def test_lowercase_cell_token_is_not_a_cell() -> None:
    assert isinstance(parse("a1"), SheetRef)
    with pytest.raises(ValueError, match="Unsupported A1 notation"):
        parse("Sheet1!a1")


def test_bare_sheet_with_space_is_rendered_quoted() -> None:
    notation = parse("Sheet 2")
    assert isinstance(notation, SheetRef)
    assert notation.render() == "'Sheet 2'"


@pytest.mark.parametrize(
    "text",
    ["A1:", ":B2", "A1:B", "A:B2", "A0:B1", "Sheet1!", "A1-B2", "0:5", "a:c", "1Sheet"],
)
def test_parse_rejects_unsupported(text: str) -> None:
    with pytest.raises(ValueError, match="Unsupported A1 notation"):
        parse(text)


def test_parse_rejects_empty() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        parse("")


def test_parse_rejects_empty_sheet_prefix() -> None:
    with pytest.raises(ValueError, match="Sheet name must not be empty"):
        parse("!A1")


def test_parse_logs_classification(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="a1notation.notation"):
        parse("A1:B2")
    assert "classified as range" in caplog.text


def test_range_rejects_partial_bounds() -> None:
    with pytest.raises(ValueError, match="Range needs"):
        RangeRef(left=Column("A"), top=Row(1))
    with pytest.raises(ValueError, match="Range needs"):
        RangeRef(left=Column("A"), right=Column("B"), top=Row(1))
    with pytest.raises(ValueError, match="Range needs"):
        RangeRef()


def test_notations_compare_by_value() -> None:
    assert parse("Sheet1!A1") == CellRef(
        sheet=SheetName("Sheet1"), column=Column("A"), row=Row(1)
    )
    assert parse("A:C") == RangeRef(left=Column("A"), right=Column("C"))
    assert parse("C:A") != parse("A:C")


def test_notation_type_is_a1() -> None:
    assert parse("A1").notation_type == "A1"
    assert parse("A:A").notation_type == "A1"
    assert parse("Sheet1").notation_type == "A1"


@pytest.mark.parametrize("text", ["Sheet1!B2", "'My Sheet'!A1:C3", "5:9", "'Jon\\'s'"])
def test_adapter_loads_dumped_notation(text: str) -> None:
    notation = parse(text)
    loaded = A1_NOTATION_ADAPTER.validate_python(notation.model_dump())
    assert loaded == notation
    assert loaded.render() == text


def test_adapter_dispatches_on_kind() -> None:
    loaded = A1_NOTATION_ADAPTER.validate_json(
        '{"kind": "range", "left": {"letters": "b"}, "right": {"letters": "d"}}'
    )
    assert isinstance(loaded, RangeRef)
    assert loaded.render() == "B:D"


def test_adapter_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        A1_NOTATION_ADAPTER.validate_python({"kind": "formula"})


def test_model_validate_builds_nested_values() -> None:
    notation = CellRef.model_validate(
        {"sheet": {"name": "My Sheet"}, "column": {"letters": "a"}, "row": {"number": 1}}
    )
    assert notation.render() == "'My Sheet'!A1"


def test_adapter_reports_invalid_nested_values_as_value_error() -> None:
    with pytest.raises(ValueError, match="Invalid column letters"):
        A1_NOTATION_ADAPTER.validate_python(
            {"kind": "cell", "column": {"letters": "A1"}, "row": {"number": 1}}
        )
    with pytest.raises(ValueError):
        A1_NOTATION_ADAPTER.validate_json(
            '{"kind": "cell", "column": {"letters": "A"}, "row": {"number": "1"}}'
        )
