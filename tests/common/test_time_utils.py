from datetime import date

import pytest

from src.edutrack.edutrack.common.time_utils import (
    ScanTime,
    format_minute,
    parse_iso_date,
    parse_scan_time,
    parse_window,
    to_display_date,
    to_iso_date,
    week_of_month,
    weekday_name,
)
from src.edutrack.edutrack.core.exceptions import FormatError


def test_parse_window():
    assert parse_window("08:00 - 08:45") == (480, 525)
    assert parse_window("8:00-9:30") == (480, 570)


@pytest.mark.parametrize(
    "value",
    ["08:00 08:45", "08:00 - ", "8h - 9h", "25:00 - 26:00", "08:61 - 09:00", "09:00 - 08:00", "09:00 - 09:00", None],
)
def test_parse_window_rejects_malformed(value):
    with pytest.raises(FormatError):
        parse_window(value)


def test_parse_scan_time():
    t = parse_scan_time("08:05:09")

    assert t == ScanTime(8, 5, 9)
    assert t.minute_of_day == 485
    assert t.seconds_of_day == 485 * 60 + 9
    assert str(t) == "08:05:09"


@pytest.mark.parametrize("value", ["08:05", "08:60:00", "24:00:00", "08:00:60", "abc", "", 805])
def test_parse_scan_time_rejects_malformed(value):
    with pytest.raises(FormatError):
        parse_scan_time(value)


def test_display_date_conversion():
    assert to_display_date("2024-03-08") == "08/03/2024"
    assert to_iso_date("08/03/2024") == "2024-03-08"
    assert to_display_date("2024-03-08", display_format="%m/%d/%Y") == "03/08/2024"


@pytest.mark.parametrize("value", ["2024-3-8", "2024-02-30", "08/03/2024", ""])
def test_parse_iso_date_rejects_malformed(value):
    with pytest.raises(FormatError):
        parse_iso_date(value)


def test_to_iso_date_rejects_malformed():
    with pytest.raises(FormatError):
        to_iso_date("2024-03-08")


@pytest.mark.parametrize(
    "day, week",
    [(1, 1), (7, 1), (8, 2), (14, 2), (15, 3), (28, 4), (29, 5), (31, 5)],
)
def test_week_of_month(day, week):
    assert week_of_month(date(2024, 3, day)) == week


def test_weekday_name_and_minute_format():
    assert weekday_name(date(2024, 3, 4)) == "Monday"
    assert format_minute(525) == "08:45"
