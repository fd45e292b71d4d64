from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import ScanEvent
from ..model import DailyHours


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def daily_hours(self, scans: Sequence[ScanEvent]) -> DailyHours:
        raise NotImplementedError
