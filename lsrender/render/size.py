"""Rendering of the file size column."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from lsrender.cell import TextCell, TextCellContents, blank, display_width, paint
from lsrender.numeric import NumericLocale
from lsrender.style import Style


class Prefix(Enum):
    """A decimal or binary unit prefix, valued by its symbol."""

    KILO = "k"
    MEGA = "M"
    GIGA = "G"
    TERA = "T"
    PETA = "P"
    EXA = "E"
    ZETTA = "Z"
    YOTTA = "Y"
    KIBI = "Ki"
    MEBI = "Mi"
    GIBI = "Gi"
    TEBI = "Ti"
    PEBI = "Pi"
    EXBI = "Ei"
    ZEBI = "Zi"
    YOBI = "Yi"

    def symbol(self) -> str:
        return self.value


_DECIMAL = (
    Prefix.KILO, Prefix.MEGA, Prefix.GIGA, Prefix.TERA,
    Prefix.PETA, Prefix.EXA, Prefix.ZETTA, Prefix.YOTTA,
)
_BINARY = (
    Prefix.KIBI, Prefix.MEBI, Prefix.GIBI, Prefix.TEBI,
    Prefix.PEBI, Prefix.EXBI, Prefix.ZEBI, Prefix.YOBI,
)


class SizeFormat(Enum):
    """How file sizes are written."""

    DECIMAL_BYTES = "decimal"
    BINARY_BYTES = "binary"
    JUST_BYTES = "bytes"


class SizeColours(Protocol):
    """The styles used for the size column."""

    def size(self, prefix: Prefix | None) -> Style: ...

    def unit(self, prefix: Prefix | None) -> Style: ...

    def no_size(self) -> Style: ...

    def major(self) -> Style: ...

    def comma(self) -> Style: ...

    def minor(self) -> Style: ...


@dataclass(frozen=True)
class DeviceIDs:
    """The major and minor device numbers of a device file."""

    major: int
    minor: int

    def render(self, colours: SizeColours) -> TextCell:
        major = str(self.major)
        minor = str(self.minor)
        contents = TextCellContents([
            colours.major().paint(major),
            colours.comma().paint(","),
            colours.minor().paint(minor),
        ])
        return TextCell(contents, len(major) + 1 + len(minor))


def number_prefix(size: float, binary: bool) -> tuple[Prefix | None, float]:
    """Scale a number down by a unit prefix.

    Returns ``(None, size)`` when the number is below one kilo, otherwise the
    largest prefix that applies and the scaled value.
    """
    kilo = 1024.0 if binary else 1000.0
    prefixes = _BINARY if binary else _DECIMAL
    n = abs(float(size))
    count = 0
    while n >= kilo and count < len(prefixes):
        n /= kilo
        count += 1
    if count == 0:
        return None, float(size)
    return prefixes[count - 1], math.copysign(n, size)


def _round_half_away(n: float) -> int:
    return int(math.copysign(math.floor(abs(n) + 0.5), n))


def render_size(
    size: int | DeviceIDs | None,
    colours: SizeColours,
    size_format: SizeFormat,
    numerics: NumericLocale,
) -> TextCell:
    """A file's size, a pair of device numbers, or a hyphen for no size."""
    if size is None:
        return blank(colours.no_size())
    if isinstance(size, DeviceIDs):
        return size.render(colours)

    if size_format is SizeFormat.JUST_BYTES:
        # The binary prefix picks the style; the number is written in full.
        prefix, _ = number_prefix(size, binary=True)
        return paint(colours.size(prefix), numerics.format_int(size))

    prefix, n = number_prefix(size, binary=size_format is SizeFormat.BINARY_BYTES)
    if prefix is None:
        return paint(colours.size(None), numerics.format_int(int(n)))

    symbol = prefix.symbol()
    number = numerics.format_float(n, 1) if n < 10 else numerics.format_int(_round_half_away(n))
    contents = TextCellContents([
        colours.size(prefix).paint(number),
        colours.unit(prefix).paint(symbol),
    ])
    return TextCell(contents, display_width(number) + len(symbol))