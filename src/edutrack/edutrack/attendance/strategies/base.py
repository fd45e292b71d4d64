from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...common.time_utils import ScanTime
from ...core.enums import SlotStatus
from ...schedules.model import ScheduleWindow


@dataclass(frozen=True)
class StatusDecision:
    status: SlotStatus
    note: Optional[str] = None


class SlotStatusStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a slot's attendance status."""

    @abstractmethod
    def decide(self, *, window: ScheduleWindow, check_in: Optional[ScanTime], grace_minutes: float) -> StatusDecision:
        raise NotImplementedError
