"""Rendering of the inode column."""

from __future__ import annotations

from lsrender.cell import TextCell, paint
from lsrender.style import Style


def render_inode(inode: int, style: Style) -> TextCell:
    """The inode number in the given style."""
    return paint(style, str(inode))