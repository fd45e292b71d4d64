from __future__ import annotations

from typing import Optional

from ...common.time_utils import ScanTime
from ...core.enums import SlotStatus
from ...schedules.model import ScheduleWindow
from .base import SlotStatusStrategy, StatusDecision


class LateStrategy(SlotStatusStrategy):
    """Late check-in."""

    def decide(self, *, window: ScheduleWindow, check_in: Optional[ScanTime], grace_minutes: float) -> StatusDecision:
        late_minutes = (check_in.seconds_of_day - window.start * 60) // 60 if check_in else 0
        return StatusDecision(status=SlotStatus.LATE, note=f"Muộn {late_minutes} phút")
