from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..common.time_utils import format_minute, parse_window
from ..common.validators import require_non_empty
from ..core.exceptions import FormatError


@dataclass(frozen=True)
class ScheduleWindow:
    """Thực thể miền (domain): một tiết/ca trong thời khoá biểu theo thứ.

    start/end are minutes of day with start < end.
    """

    subject: str
    start: int
    end: int
    weekday: Optional[str] = None

    def __post_init__(self):
        if not (0 <= self.start < self.end <= 24 * 60):
            raise FormatError(f"Khung giờ không hợp lệ: {self.start}-{self.end}")

    @classmethod
    def from_entry(cls, entry: Mapping, *, weekday: Optional[str] = None) -> "ScheduleWindow":
        """Build from the store shape ``{"subject": ..., "time": "HH:MM - HH:MM"}``."""
        if not isinstance(entry, Mapping):
            raise FormatError(f"Tiết học không hợp lệ: {entry!r}")
        start, end = parse_window(entry.get("time"))
        subject = require_non_empty(entry.get("subject") or "", "subject")
        return cls(subject=subject, start=start, end=end, weekday=weekday)

    @property
    def label(self) -> str:
        return f"{format_minute(self.start)} - {format_minute(self.end)}"
