"""Rendering of the block count column."""

from __future__ import annotations

from typing import Protocol

from lsrender.cell import TextCell, blank, paint
from lsrender.style import Style


class BlocksColours(Protocol):
    """The styles used for the block count column."""

    def block_count(self) -> Style: ...

    def no_blocks(self) -> Style: ...


def render_blocks(blocks: int | None, colours: BlocksColours) -> TextCell:
    """The block count, or a hyphen if the file has none."""
    if blocks is None:
        return blank(colours.no_blocks())
    return paint(colours.block_count(), str(blocks))