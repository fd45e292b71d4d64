from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping

from ..attendance.model import ScanEvent
from ..common.time_utils import weekday_name
from ..schedules.model import ScheduleWindow


@dataclass(frozen=True)
class FeedSnapshot:
    """One explicit snapshot of the live feed; the engine never reads the store itself.

    people:      uid -> display name
    schedules:   uid -> weekday -> windows sorted by start
    attendance:  YYYY-MM-DD -> uid -> scans of that day
    """

    people: Mapping[str, str] = field(default_factory=dict)
    schedules: Mapping[str, Mapping[str, tuple[ScheduleWindow, ...]]] = field(default_factory=dict)
    attendance: Mapping[str, Mapping[str, tuple[ScanEvent, ...]]] = field(default_factory=dict)
    grace_minutes: float = 0

    def windows_for(self, uid: str, day: date) -> tuple[ScheduleWindow, ...]:
        return tuple(self.schedules.get(uid, {}).get(weekday_name(day), ()))

    def scans_for(self, uid: str, day: date) -> tuple[ScanEvent, ...]:
        return tuple(self.attendance.get(day.isoformat(), {}).get(uid, ()))

    def scans_by_date(self, uid: str) -> dict[str, tuple[ScanEvent, ...]]:
        """Date key -> that person's scans, only for dates where the person has a log."""
        return {key: tuple(per_person[uid]) for key, per_person in sorted(self.attendance.items()) if uid in per_person}
