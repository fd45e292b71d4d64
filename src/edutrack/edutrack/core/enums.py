from __future__ import annotations

from enum import Enum


class SlotStatus(str, Enum):
    """Outcome of reconciling one schedule window."""

    PRESENT = "present"
    LATE = "late"
    MISSING = "missing"


class MatchKind(str, Enum):
    """How a scan fell into a window: inside [start, end] or only in the grace buffer."""

    STRICT = "strict"
    BUFFER = "buffer"


class ReportMode(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
