from __future__ import annotations

from typing import Optional

from ...common.time_utils import ScanTime
from ...core.enums import SlotStatus
from ...schedules.model import ScheduleWindow
from .base import SlotStatusStrategy, StatusDecision


class MissingStrategy(SlotStatusStrategy):
    """No scan was attributed to the window."""

    def decide(self, *, window: ScheduleWindow, check_in: Optional[ScanTime], grace_minutes: float) -> StatusDecision:
        return StatusDecision(status=SlotStatus.MISSING)
