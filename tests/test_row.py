import pytest

from gridtab.format import Format
from gridtab.row import Cell, Row


def test_add_cell_accepts_text_and_sets_parent():
    row = Row()
    cell = row.add_cell("hello")
    assert cell.text == "hello"
    assert cell.row is row
    assert len(row) == 1
    assert row[0] is cell
    assert row.cell(0) is cell


def test_iteration_keeps_order():
    row = Row(["a", "b", Cell("c")])
    assert [cell.text for cell in row] == ["a", "b", "c"]


def test_index_out_of_range():
    row = Row(["a"])
    with pytest.raises(IndexError):
        row[3]
    with pytest.raises(IndexError):
        row.cell(3)
    assert len(row) == 1
    assert row[0].text == "a"


def test_row_format_is_persistent():
    row = Row()
    row.format().padding_top(4)
    assert row.format().settings.padding_top == 4


def test_effective_format_precedence():
    row = Row(["x"])
    row.format().padding_top(2).padding_bottom(3)
    row[0].format().padding_top(5)
    settings = row[0].effective_format.settings
    assert settings.padding_top == 5
    assert settings.padding_bottom == 3
    assert settings.border_left == "|"


def test_single_line_cell_height():
    row = Row(["hello"])
    assert row.cell_height(0, 10) == 1


def test_padding_adds_to_height():
    plain = Row(["hello"])
    padded = Row(["hello"])
    padded[0].format().padding_top(2).padding_bottom(3)
    assert padded.cell_height(0, 10) == plain.cell_height(0, 10) + 2 + 3


def test_embedded_newlines_are_respected():
    text = "one\ntwo\nthree"
    row = Row([text])
    assert row.cell_height(0, 100) == text.count("\n") + 1


def test_trailing_newline_does_not_add_line():
    assert Row(["a\nb\n"]).cell_height(0, 50) == Row(["a\nb"]).cell_height(0, 50)


def test_wrapping_increases_height():
    text = "alpha beta gamma delta"
    row = Row([text])
    narrow = row.cell_height(0, 8)
    wide = row.cell_height(0, 100)
    assert wide == 1
    assert narrow > wide


def test_computed_height_is_maximum():
    row = Row(["short", "a\nb\nc\nd"])
    widths = [20, 20]
    assert row.computed_height(widths) == max(
        row.cell_height(0, 20), row.cell_height(1, 20)
    )


def test_computed_height_needs_widths_for_all_cells():
    row = Row(["a", "b"])
    with pytest.raises(IndexError):
        row.computed_height([10])


def test_empty_row_heights():
    row = Row()
    assert row.configured_height() == 0
    assert row.computed_height([]) == 0


def test_configured_height_takes_largest():
    row = Row(["a", "b", "c"])
    row[0].format().height(3)
    row[2].format().height(5)
    assert row.configured_height() == 5


def test_configured_height_from_row_format():
    row = Row(["a", "b"])
    row.format().height(4)
    assert row.configured_height() == 4


def test_cell_format_is_chainable():
    cell = Cell("x")
    returned = cell.format().width(7)
    assert returned is cell.format()
    assert isinstance(returned, Format) and cell.format().settings.width == 7