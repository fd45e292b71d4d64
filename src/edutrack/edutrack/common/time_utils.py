from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime

from ..core.constants import DISPLAY_DATE_FORMAT, ISO_DATE_FORMAT, WEEK_LENGTH_DAYS, WEEKDAYS
from ..core.exceptions import FormatError

_WINDOW_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*-\s*(\d{1,2}):(\d{2})\s*$")
_SCAN_RE = re.compile(r"^\s*(\d{1,2}):(\d{2}):(\d{2})\s*$")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True, order=True)
class ScanTime:
    """Wall-clock time of one tap (same day, same locale)."""

    hour: int
    minute: int
    second: int = 0

    @property
    def minute_of_day(self) -> int:
        return self.hour * 60 + self.minute

    @property
    def seconds_of_day(self) -> int:
        return self.minute_of_day * 60 + self.second

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


def _clock_minutes(hour: str, minute: str, raw: str) -> int:
    h, m = int(hour), int(minute)
    if h > 23 or m > 59:
        raise FormatError(f"Giờ không hợp lệ: {raw!r}")
    return h * 60 + m


def parse_window(value: str) -> tuple[int, int]:
    """Parse "HH:MM - HH:MM" into a (start, end) minute-of-day pair.

    End must be strictly after start; windows never wrap past midnight.
    """
    if not isinstance(value, str):
        raise FormatError(f"Khung giờ không hợp lệ: {value!r}")
    match = _WINDOW_RE.match(value)
    if not match:
        raise FormatError(f"Khung giờ không hợp lệ: {value!r}")

    start = _clock_minutes(match.group(1), match.group(2), value)
    end = _clock_minutes(match.group(3), match.group(4), value)
    if end <= start:
        raise FormatError(f"Giờ kết thúc phải sau giờ bắt đầu: {value!r}")
    return start, end


def parse_scan_time(value: str) -> ScanTime:
    """Parse "HH:MM:SS" into ScanTime."""
    if not isinstance(value, str):
        raise FormatError(f"Thời điểm quét không hợp lệ: {value!r}")
    match = _SCAN_RE.match(value)
    if not match:
        raise FormatError(f"Thời điểm quét không hợp lệ: {value!r}")

    hour, minute, second = (int(g) for g in match.groups())
    if hour > 23 or minute > 59 or second > 59:
        raise FormatError(f"Thời điểm quét không hợp lệ: {value!r}")
    return ScanTime(hour, minute, second)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        raise FormatError(f"Ngày không hợp lệ: {value!r}")
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise FormatError(f"Ngày không hợp lệ: {value!r}") from e


def to_display_date(value: str, *, display_format: str = DISPLAY_DATE_FORMAT) -> str:
    return parse_iso_date(value).strftime(display_format)


def to_iso_date(value: str, *, display_format: str = DISPLAY_DATE_FORMAT) -> str:
    try:
        parsed = datetime.strptime(value, display_format).date()
    except (TypeError, ValueError) as e:
        raise FormatError(f"Ngày không hợp lệ: {value!r}") from e
    return parsed.strftime(ISO_DATE_FORMAT)


def week_of_month(day: date) -> int:
    """Simple calendar partition: days 1-7 are week 1, 8-14 week 2, ... (not ISO)."""
    return math.ceil(day.day / WEEK_LENGTH_DAYS)


def weekday_name(day: date) -> str:
    return WEEKDAYS[day.weekday()]


def format_minute(minute_of_day: int) -> str:
    return f"{minute_of_day // 60:02d}:{minute_of_day % 60:02d}"


def format_hours(hours: float) -> str:
    return f"{hours:.2f}"
