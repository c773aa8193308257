"""Rendering of the timestamp columns."""

from __future__ import annotations

from datetime import tzinfo

from lsrender.cell import TextCell, paint
from lsrender.style import Style
from lsrender.time import TimeFormat


def render_time(time: int | None, style: Style, tz: tzinfo | None, format: TimeFormat) -> TextCell:
    """A timestamp in nanoseconds since the epoch, or a hyphen if there is none.

    The time is shown in ``tz`` when one is given, and without a zone otherwise.
    """
    if time is None:
        datestamp = "-"
    elif tz is not None:
        datestamp = format.format_zoned(time, tz)
    else:
        datestamp = format.format_local(time)
    return paint(style, datestamp)