from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.exceptions import FormatError, ValidationError
from .model import ScheduleWindow


def sort_windows(windows: Iterable[ScheduleWindow]) -> list[ScheduleWindow]:
    """Stable ascending sort by start; windows sharing a start keep their input order."""
    return sorted(windows, key=lambda w: w.start)


def require_sorted(windows: Sequence[ScheduleWindow]) -> None:
    """Reject windows that are not in non-decreasing start order.

    Window order decides tie-breaks during reconciliation, so it is never
    inferred silently.
    """
    for prev, cur in zip(windows, windows[1:]):
        if cur.start < prev.start:
            raise ValidationError(
                f"Danh sách tiết phải sắp xếp theo giờ bắt đầu: {prev.subject} ({prev.label}) đứng trước {cur.subject} ({cur.label})"
            )


def windows_from_entries(entries, *, weekday: Optional[str] = None) -> list[ScheduleWindow]:
    """Parse a list of ``{subject, time}`` entries and sort them by start."""
    if entries is None:
        return []
    if isinstance(entries, dict):
        # realtime stores serialise arrays as index-keyed objects
        entries = [entries[k] for k in sorted(entries, key=_index_key)]
    if not isinstance(entries, (list, tuple)):
        raise FormatError(f"Thời khoá biểu không hợp lệ: {entries!r}")
    return sort_windows(ScheduleWindow.from_entry(e, weekday=weekday) for e in entries)


def _index_key(key) -> tuple:
    text = str(key)
    return (0, int(text), text) if text.isdigit() else (1, 0, text)
