from lsrender.cell import blank, paint
from lsrender.render.blocks import render_blocks
from lsrender.style import Colour


class TestColours:
    def block_count(self):
        return Colour.RED.blink()

    def no_blocks(self):
        return Colour.GREEN.italic()


def test_blocklessness():
    assert render_blocks(None, TestColours()) == blank(Colour.GREEN.italic())


def test_blockfulity():
    assert render_blocks(3005, TestColours()) == paint(Colour.RED.blink(), "3005")


def test_zero_blocks_is_not_blank():
    cell = render_blocks(0, TestColours())
    assert cell == paint(Colour.RED.blink(), "0")