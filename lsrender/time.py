"""Timestamp formatting.

Timestamps are integers counting nanoseconds since the Unix epoch, as
returned in the ``st_*time_ns`` fields of ``os.stat``.
"""

from __future__ import annotations

import calendar
import os
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum
from functools import cache
from zoneinfo import ZoneInfo

from lsrender.cell import display_width

ZONEINFO_DIR = "/usr/share/zoneinfo"
LOCALTIME = "/etc/localtime"

_NANOS = 1_000_000_000
_NAIVE_EPOCH = datetime(1970, 1, 1)
_UTC_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@cache
def _current_year() -> int:
    return datetime.now(timezone.utc).year


@cache
def _maximum_month_width() -> int:
    # Only the first eleven month names are considered.
    return max(display_width(calendar.month_abbr[month]) for month in range(1, 12))


def _is_recent(date: datetime) -> bool:
    return date.year == _current_year()


def _pad(text: str, width: int) -> str:
    return text + " " * max(width - display_width(text), 0)


def _default(date: datetime) -> str:
    month = calendar.month_abbr[date.month]
    width = _maximum_month_width()
    if width in (4, 5):
        month = _pad(month, width)
    if _is_recent(date):
        tail = f"{date.hour:02}:{date.minute:02}"
    else:
        tail = f"{date.year:>5}"
    return f"{date.day:>2} {month} {tail}"


def _iso(date: datetime) -> str:
    if _is_recent(date):
        return f"{date.month:02}-{date.day:02} {date.hour:02}:{date.minute:02}"
    return f"{date.year:04}-{date.month:02}-{date.day:02}"


def _long(date: datetime) -> str:
    return f"{date.year:04}-{date.month:02}-{date.day:02} {date.hour:02}:{date.minute:02}"


def _full(date: datetime, nanos: int) -> str:
    return (
        f"{date.year:04}-{date.month:02}-{date.day:02} "
        f"{date.hour:02}:{date.minute:02}:{date.second:02}.{nanos:09}"
    )


def _offset_suffix(offset: timedelta) -> str:
    seconds = int(offset.total_seconds())
    sign = -1 if seconds < 0 else 1
    hours = sign * (abs(seconds) // 3600)
    minutes = (abs(seconds) // 60) % 60
    return f" {hours:+03}{minutes:02}"


class TimeFormat(Enum):
    """The styles in which a timestamp can be written."""

    DEFAULT_FORMAT = "default"
    ISO_FORMAT = "iso"
    LONG_ISO = "long-iso"
    FULL_ISO = "full-iso"

    def _format(self, date: datetime, nanos: int) -> str:
        if self is TimeFormat.DEFAULT_FORMAT:
            return _default(date)
        if self is TimeFormat.ISO_FORMAT:
            return _iso(date)
        if self is TimeFormat.LONG_ISO:
            return _long(date)
        return _full(date, nanos)

    def format_local(self, time: int) -> str:
        """Format a timestamp without a time zone, as UTC."""
        seconds, nanos = divmod(time, _NANOS)
        date = _NAIVE_EPOCH + timedelta(seconds=seconds)
        return self._format(date, nanos)

    def format_zoned(self, time: int, zone: tzinfo) -> str:
        """Format a timestamp as seen in the given time zone."""
        seconds, nanos = divmod(time, _NANOS)
        date = (_UTC_EPOCH + timedelta(seconds=seconds)).astimezone(zone)
        text = self._format(date, nanos)
        if self is TimeFormat.FULL_ISO:
            text += _offset_suffix(date.utcoffset() or timedelta(0))
        return text


def determine_time_zone(environ: Mapping[str, str] | None = None) -> ZoneInfo:
    """Load the time zone named by ``TZ``, or the system's local zone.

    Raises ``OSError`` if the zone file cannot be read and ``ValueError`` if
    it is not a valid zone file.
    """
    env = os.environ if environ is None else environ
    name = env.get("TZ")
    if name is None:
        path = LOCALTIME
    elif name.startswith("/"):
        path = name
    else:
        path = f"{ZONEINFO_DIR}/{name.removeprefix(':')}"

    with open(path, "rb") as handle:
        return ZoneInfo.from_file(handle, key=path)