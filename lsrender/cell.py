"""Text cells holding styled strings together with their display width."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from wcwidth import wcwidth

from lsrender.style import Style, StyledText, render_strings


def display_width(text: str) -> int:
    """The number of terminal columns that a string occupies."""
    return sum(max(wcwidth(c), 0) for c in text)


@dataclass
class TextCellContents:
    """The styled strings of a cell, without a cached width."""

    strings: list[StyledText] = field(default_factory=list)

    def __iter__(self) -> Iterator[StyledText]:
        return iter(self.strings)

    def __len__(self) -> int:
        return len(self.strings)

    def __getitem__(self, index):
        return self.strings[index]

    def width(self) -> int:
        return sum(display_width(s.text) for s in self.strings)

    def promote(self) -> TextCell:
        """Turn these contents into a full cell with a computed width."""
        return TextCell(contents=self, width=self.width())

    def render(self) -> str:
        return render_strings(self.strings)


@dataclass
class TextCell:
    """A table cell: styled strings and their combined display width."""

    contents: TextCellContents = field(default_factory=TextCellContents)
    width: int = 0

    def __iter__(self) -> Iterator[StyledText]:
        return iter(self.contents)

    def __len__(self) -> int:
        return len(self.contents)

    def add_spaces(self, count: int) -> None:
        """Append the given number of unstyled spaces."""
        self.width += count
        self.contents.strings.append(Style().paint(" " * count))

    def push(self, string: StyledText, extra_width: int) -> None:
        self.contents.strings.append(string)
        self.width += extra_width

    def append(self, other: TextCell) -> None:
        self.width += other.width
        self.contents.strings.extend(other.contents.strings)

    def render(self) -> str:
        return self.contents.render()


def paint(style: Style, text: str) -> TextCell:
    """A cell holding the given text in the given style."""
    return TextCell(TextCellContents([style.paint(text)]), display_width(text))


def blank(style: Style) -> TextCell:
    """A cell holding a single hyphen, used in place of an empty value."""
    return TextCell(TextCellContents([style.paint("-")]), 1)