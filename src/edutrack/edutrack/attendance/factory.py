from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.time_utils import ScanTime
from ..schedules.model import ScheduleWindow
from .strategies.base import SlotStatusStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.missing_strategy import MissingStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class SlotStatusFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_slot(self, *, window: ScheduleWindow, check_in: Optional[ScanTime], grace_minutes: float) -> SlotStatusStrategy:
        if check_in is None:
            return MissingStrategy()

        # Equality with start + grace is still on time.
        if check_in.seconds_of_day <= (window.start + grace_minutes) * 60:
            return PresentStrategy()
        return LateStrategy()
