from __future__ import annotations

from typing import Sequence

from ...attendance.model import ScanEvent
from ..model import DailyHours
from .base import HoursCalculator


class SpanHoursCalculator(HoursCalculator):
    """Standard rule: last scan - first scan of the day, not below 0."""

    def daily_hours(self, scans: Sequence[ScanEvent]) -> DailyHours:
        if not scans:
            return DailyHours(first=None, last=None, hours=0.0)

        first = min(s.time for s in scans)
        last = max(s.time for s in scans)
        seconds = last.seconds_of_day - first.seconds_of_day
        return DailyHours(first=first, last=last, hours=max(seconds / 3600, 0.0))
