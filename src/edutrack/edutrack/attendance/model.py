from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.time_utils import ScanTime
from ..core.enums import SlotStatus
from ..schedules.model import ScheduleWindow


@dataclass(frozen=True, order=True)
class ScanEvent:
    """Thực thể miền (domain): một lần quẹt thẻ/quét mã trong ngày.

    Ordering and equality only look at the time of day; two taps at the same
    second are interchangeable.
    """

    time: ScanTime
    method: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        return str(self.time)


@dataclass(frozen=True)
class ReconciliationResult:
    """Read-model: kết quả đối soát cho một tiết (không lưu trữ)."""

    window: ScheduleWindow
    check_in: Optional[ScanTime]
    check_out: Optional[ScanTime]
    status: SlotStatus
    note: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "subject": self.window.subject,
            "time": self.window.label,
            "check_in": str(self.check_in) if self.check_in else None,
            "check_out": str(self.check_out) if self.check_out else None,
            "status": self.status.value,
            "note": self.note,
        }
