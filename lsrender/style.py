"""Terminal text styles: colours, attributes and styled strings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import ClassVar

RESET = "\x1b[0m"

_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("is_bold", "1"),
    ("is_dimmed", "2"),
    ("is_italic", "3"),
    ("is_underline", "4"),
    ("is_blink", "5"),
    ("is_reverse", "7"),
    ("is_hidden", "8"),
    ("is_strikethrough", "9"),
)


@dataclass(frozen=True)
class Colour:
    """A terminal colour: one of the eight basic colours or a 256-colour index."""

    index: int
    extended: bool = False

    BLACK: ClassVar[Colour]
    RED: ClassVar[Colour]
    GREEN: ClassVar[Colour]
    YELLOW: ClassVar[Colour]
    BLUE: ClassVar[Colour]
    PURPLE: ClassVar[Colour]
    CYAN: ClassVar[Colour]
    WHITE: ClassVar[Colour]

    def __post_init__(self) -> None:
        limit = 256 if self.extended else 8
        if not 0 <= self.index < limit:
            raise ValueError(f"colour index out of range: {self.index}")

    def foreground_code(self) -> str:
        return f"38;5;{self.index}" if self.extended else f"3{self.index}"

    def background_code(self) -> str:
        return f"48;5;{self.index}" if self.extended else f"4{self.index}"

    def normal(self) -> Style:
        return Style(foreground=self)

    def bold(self) -> Style:
        return Style(foreground=self, is_bold=True)

    def italic(self) -> Style:
        return Style(foreground=self, is_italic=True)

    def underline(self) -> Style:
        return Style(foreground=self, is_underline=True)

    def blink(self) -> Style:
        return Style(foreground=self, is_blink=True)

    def on(self, background: Colour) -> Style:
        return Style(foreground=self, background=background)

    def paint(self, text: str) -> StyledText:
        return self.normal().paint(text)


Colour.BLACK = Colour(0)
Colour.RED = Colour(1)
Colour.GREEN = Colour(2)
Colour.YELLOW = Colour(3)
Colour.BLUE = Colour(4)
Colour.PURPLE = Colour(5)
Colour.CYAN = Colour(6)
Colour.WHITE = Colour(7)


def fixed(n: int) -> Colour:
    """A colour from the 256-colour palette."""
    return Colour(n, extended=True)


@dataclass(frozen=True)
class Style:
    """A set of colours and attributes applied to a piece of text."""

    foreground: Colour | None = None
    background: Colour | None = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    def paint(self, text: str) -> StyledText:
        return StyledText(self, text)

    def is_plain(self) -> bool:
        return self == Style()

    def prefix(self) -> str:
        """The escape sequence that switches the terminal to this style."""
        if self.is_plain():
            return ""
        codes = [code for name, code in _ATTRIBUTES if getattr(self, name)]
        if self.background is not None:
            codes.append(self.background.background_code())
        if self.foreground is not None:
            codes.append(self.foreground.foreground_code())
        return "\x1b[" + ";".join(codes) + "m"


@dataclass(frozen=True)
class StyledText:
    """A string coupled with the style it is painted in."""

    style: Style
    text: str

    def render(self) -> str:
        if self.style.is_plain():
            return self.text
        return self.style.prefix() + self.text + RESET

    def __str__(self) -> str:
        return self.render()


def _transition(first: Style, following: Style) -> str:
    """The escape codes needed to move from one style to the next."""
    if first == following:
        return ""
    for name, _ in _ATTRIBUTES:
        if getattr(first, name) and not getattr(following, name):
            return RESET + following.prefix()
    if first.foreground is not None and following.foreground is None:
        return RESET + following.prefix()
    if first.background is not None and following.background is None:
        return RESET + following.prefix()

    extra = {
        f.name: getattr(following, f.name) and not getattr(first, f.name)
        for f in fields(Style)
        if f.name.startswith("is_")
    }
    extra_style = Style(
        foreground=following.foreground if following.foreground != first.foreground else None,
        background=following.background if following.background != first.background else None,
        **extra,
    )
    return extra_style.prefix()


def render_strings(strings: Iterable[StyledText]) -> str:
    """Render a run of styled strings, emitting only the style changes needed."""
    parts: list[str] = []
    previous: StyledText | None = None
    for item in strings:
        if previous is None:
            parts.append(item.style.prefix())
        else:
            parts.append(_transition(previous.style, item.style))
        parts.append(item.text)
        previous = item
    if previous is not None and not previous.style.is_plain():
        parts.append(RESET)
    return "".join(parts)