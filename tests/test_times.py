from datetime import timedelta, timezone

import pytest

from lsrender.render.times import render_time
from lsrender.style import Colour
from lsrender.time import TimeFormat

STYLE = Colour.BLUE.bold()
NANOS = 1_000_000_000


def test_missing_time_is_a_hyphen():
    cell = render_time(None, STYLE, None, TimeFormat.LONG_ISO)
    assert [s.text for s in cell] == ["-"]
    assert cell.width == 1
    assert cell.contents[0].style == STYLE


def test_missing_time_ignores_zone():
    cell = render_time(None, STYLE, timezone.utc, TimeFormat.FULL_ISO)
    assert [s.text for s in cell] == ["-"]


def test_epoch_long_iso_without_zone():
    cell = render_time(0, STYLE, None, TimeFormat.LONG_ISO)
    assert cell.contents[0].text == "1970-01-01 00:00"
    assert cell.width == len("1970-01-01 00:00")


@pytest.mark.parametrize("fmt", list(TimeFormat))
def test_without_zone_uses_local_format(fmt):
    time = 1_500_000_000 * NANOS + 123
    cell = render_time(time, STYLE, None, fmt)
    assert cell.contents[0].text == fmt.format_local(time)
    assert cell.contents[0].style == STYLE


@pytest.mark.parametrize("fmt", list(TimeFormat))
def test_with_zone_uses_zoned_format(fmt):
    zone = timezone(timedelta(hours=5, minutes=30))
    time = 1_500_000_000 * NANOS
    cell = render_time(time, STYLE, zone, fmt)
    assert cell.contents[0].text == fmt.format_zoned(time, zone)
    assert cell.width == len(cell.contents[0].text)


def test_zone_shifts_the_hour():
    zone = timezone(timedelta(hours=2))
    local = render_time(0, STYLE, None, TimeFormat.LONG_ISO).contents[0].text
    zoned = render_time(0, STYLE, zone, TimeFormat.LONG_ISO).contents[0].text
    assert local != zoned
    assert zoned.startswith("1970-01-01 02")