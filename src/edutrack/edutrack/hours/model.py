from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.time_utils import ScanTime, format_hours


@dataclass(frozen=True)
class DailyHours:
    """Read-model: khung giờ làm việc trong ngày, tính từ toàn bộ lần quét."""

    first: Optional[ScanTime]
    last: Optional[ScanTime]
    hours: float

    def to_dict(self) -> dict:
        return {
            "first": str(self.first) if self.first else None,
            "last": str(self.last) if self.last else None,
            "hours": round(self.hours, 2),
            "hours_label": format_hours(self.hours),
        }
