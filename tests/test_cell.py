from lsrender.cell import TextCell, TextCellContents, blank, display_width, paint
from lsrender.style import Colour, Style


def test_empty_string():
    assert display_width("") == 0


def test_test_string():
    assert display_width("Diss Playwidth") == 14


def test_addition():
    assert display_width("/usr/bin/") + display_width("drinking") == 17


def test_addition_usize():
    assert display_width("/usr/bin/") + 8 == 17


def test_wide_characters():
    assert display_width("日本") == 4


def test_control_characters_take_no_width():
    assert display_width("a\nb") == 2


def test_paint_cell():
    cell = paint(Colour.RED.bold(), "3005")
    assert cell.width == 4
    assert list(cell) == [Colour.RED.bold().paint("3005")]


def test_blank_cell():
    cell = blank(Colour.GREEN.italic())
    assert cell.width == 1
    assert list(cell) == [Colour.GREEN.italic().paint("-")]


def test_add_spaces():
    cell = paint(Colour.BLUE.normal(), "ab")
    cell.add_spaces(3)
    assert cell.width == 5
    assert cell.contents[-1] == Style().paint("   ")


def test_push():
    cell = TextCell()
    cell.push(Colour.CYAN.paint("x"), 4)
    assert cell.width == 4
    assert len(cell) == 1


def test_append():
    cell = paint(Colour.RED.normal(), "ab")
    cell.append(paint(Colour.BLUE.normal(), "cde"))
    assert cell.width == 5
    assert [s.text for s in cell] == ["ab", "cde"]


def test_promote_computes_width():
    contents = TextCellContents([Style().paint("abc"), Colour.RED.paint("日")])
    cell = contents.promote()
    assert cell.width == 5
    assert cell.contents == contents


def test_default_cell_is_empty():
    cell = TextCell()
    assert cell.width == 0
    assert cell.render() == ""


def test_render_joins_strings():
    cell = paint(Style(), "ab")
    cell.add_spaces(2)
    assert cell.render() == "ab  "


def test_cells_compare_equal():
    assert paint(Colour.RED.blink(), "3005") == paint(Colour.RED.blink(), "3005")
    assert paint(Colour.RED.blink(), "3005") != paint(Colour.RED.normal(), "3005")