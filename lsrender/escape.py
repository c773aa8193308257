"""Escaping of control characters in file names."""

from __future__ import annotations

from lsrender.style import Style, StyledText

_NAMED_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n"}


def _is_printable(c: str) -> bool:
    return c >= " " and c != "\x7f"


def _escape_char(c: str) -> str:
    return _NAMED_ESCAPES.get(c, f"\\u{{{ord(c):x}}}")


def escape(string: str, good: Style, bad: Style) -> list[StyledText]:
    """Split a string into styled pieces, escaping control characters.

    Printable characters are painted with ``good``; control characters are
    replaced by an escape sequence painted with ``bad``.
    """
    if all(_is_printable(c) for c in string):
        return [good.paint(string)]
    return [
        good.paint(c) if _is_printable(c) else bad.paint(_escape_char(c))
        for c in string
    ]