import pytest

from lsrender.style import RESET, Colour, Style, StyledText, fixed, render_strings


def test_red_prefix():
    assert Colour.RED.normal().prefix() == "\x1b[31m"


def test_bold_red_prefix():
    assert Colour.RED.bold().prefix() == "\x1b[1;31m"


def test_fixed_on_background_prefix():
    assert fixed(90).on(Colour.BLUE).prefix() == "\x1b[44;38;5;90m"


def test_plain_style_has_no_prefix():
    assert Style().prefix() == ""
    assert Style().is_plain()


def test_coloured_style_is_not_plain():
    assert not Colour.GREEN.italic().is_plain()


def test_plain_render_is_text():
    assert Style().paint("hello").render() == "hello"


def test_styled_render_wraps_text():
    style = Colour.CYAN.underline()
    rendered = style.paint("abc").render()
    assert rendered == style.prefix() + "abc" + RESET
    assert str(style.paint("abc")) == rendered


def test_colour_paint_matches_normal_style():
    assert Colour.BLUE.paint("x") == StyledText(Colour.BLUE.normal(), "x")


def test_fixed_normal_equals_foreground_style():
    assert fixed(90).normal() == Style(foreground=fixed(90))


def test_styles_differ_by_attribute():
    assert Colour.RED.blink() != Colour.RED.normal()


@pytest.mark.parametrize("n", [-1, 256])
def test_fixed_out_of_range(n):
    with pytest.raises(ValueError):
        fixed(n)


def test_render_strings_same_style_merges():
    style = Colour.RED.bold()
    merged = render_strings([style.paint("a"), style.paint("b")])
    assert merged == style.paint("ab").render()


def test_render_strings_plain_is_concatenation():
    strings = [Style().paint("one"), Style().paint(" "), Style().paint("two")]
    assert render_strings(strings) == "one two"


def test_render_strings_empty():
    assert render_strings([]) == ""


def test_render_strings_removing_attribute_resets():
    first = Colour.RED.bold()
    second = Colour.RED.normal()
    out = render_strings([first.paint("a"), second.paint("b")])
    assert out == first.prefix() + "a" + RESET + second.prefix() + "b" + RESET


def test_render_strings_adding_attribute_extends():
    first = Colour.RED.normal()
    second = Colour.RED.bold()
    out = render_strings([first.paint("a"), second.paint("b")])
    assert out == first.prefix() + "a" + Style(is_bold=True).prefix() + "b" + RESET


def test_render_strings_to_plain_ends_without_trailing_reset():
    first = Colour.GREEN.normal()
    out = render_strings([first.paint("a"), Style().paint("b")])
    assert out == first.prefix() + "a" + RESET + "b"