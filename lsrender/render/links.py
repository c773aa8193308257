"""Rendering of the hard link count column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from lsrender.cell import TextCell, paint
from lsrender.numeric import NumericLocale
from lsrender.style import Style


class LinksColours(Protocol):
    """The styles used for the link count column."""

    def normal(self) -> Style: ...

    def multi_link_file(self) -> Style: ...


@dataclass(frozen=True)
class Links:
    """A file's hard link count, and whether that count is noteworthy."""

    count: int
    multiple: bool = False

    def render(self, colours: LinksColours, numeric: NumericLocale) -> TextCell:
        style = colours.multi_link_file() if self.multiple else colours.normal()
        return paint(style, numeric.format_int(self.count))