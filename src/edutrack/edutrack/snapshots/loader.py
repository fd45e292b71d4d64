from __future__ import annotations

import logging
from typing import Any, Mapping

from ..attendance.model import ScanEvent
from ..common.time_utils import parse_iso_date, parse_scan_time
from ..common.validators import require_grace_minutes
from ..core.constants import DEFAULT_GRACE_MINUTES, WEEKDAYS
from ..core.exceptions import FormatError
from ..schedules.model import ScheduleWindow
from ..schedules.service import windows_from_entries
from .model import FeedSnapshot

logger = logging.getLogger(__name__)

_WEEKDAY_LOOKUP = {name.lower(): name for name in WEEKDAYS}


def parse_scan_entries(raw: Any) -> tuple[ScanEvent, ...]:
    """Parse one person's log for one day.

    Accepts a list, or a push-key -> entry mapping as the realtime store writes
    it. Each entry is ``{"time": "HH:MM:SS", "method": ...}`` or a bare time string.
    """
    if raw is None:
        return ()
    if isinstance(raw, Mapping):
        entries = list(raw.values())
    elif isinstance(raw, (list, tuple)):
        entries = list(raw)
    else:
        raise FormatError(f"Nhật ký quét không hợp lệ: {raw!r}")

    out: list[ScanEvent] = []
    for entry in entries:
        if isinstance(entry, str):
            out.append(ScanEvent(time=parse_scan_time(entry)))
        elif isinstance(entry, Mapping):
            out.append(ScanEvent(time=parse_scan_time(entry.get("time")), method=entry.get("method")))
        else:
            raise FormatError(f"Lần quét không hợp lệ: {entry!r}")
    return tuple(out)


def _weekday_key(value: str) -> str:
    name = _WEEKDAY_LOOKUP.get(str(value).strip().lower())
    if not name:
        raise FormatError(f"Thứ không hợp lệ: {value!r}")
    return name


def _load_people(raw: Any) -> dict[str, str]:
    if not isinstance(raw, Mapping):
        raise FormatError(f"Danh sách giáo viên không hợp lệ: {raw!r}")
    people: dict[str, str] = {}
    for uid, info in raw.items():
        if isinstance(info, Mapping):
            people[str(uid)] = str(info.get("name") or uid)
        else:
            people[str(uid)] = str(info or uid)
    return people


def _load_schedules(raw: Any) -> dict[str, dict[str, tuple[ScheduleWindow, ...]]]:
    if not isinstance(raw, Mapping):
        raise FormatError(f"Thời khoá biểu không hợp lệ: {raw!r}")
    schedules: dict[str, dict[str, tuple[ScheduleWindow, ...]]] = {}
    for uid, by_day in raw.items():
        if not isinstance(by_day, Mapping):
            raise FormatError(f"Thời khoá biểu của {uid} không hợp lệ")
        days: dict[str, tuple[ScheduleWindow, ...]] = {}
        for day, entries in by_day.items():
            weekday = _weekday_key(day)
            days[weekday] = tuple(windows_from_entries(entries, weekday=weekday))
        schedules[str(uid)] = days
    return schedules


def _load_attendance(raw: Any) -> dict[str, dict[str, tuple[ScanEvent, ...]]]:
    if not isinstance(raw, Mapping):
        raise FormatError(f"Dữ liệu chấm công không hợp lệ: {raw!r}")
    attendance: dict[str, dict[str, tuple[ScanEvent, ...]]] = {}
    for key, per_person in raw.items():
        parse_iso_date(key)
        if not isinstance(per_person, Mapping):
            raise FormatError(f"Dữ liệu chấm công ngày {key} không hợp lệ")
        attendance[key] = {str(uid): parse_scan_entries(log) for uid, log in per_person.items()}
    return attendance


def load_attendance(raw: Any) -> dict[str, dict[str, tuple[ScanEvent, ...]]]:
    """Parse only the ``attendance`` subtree (date -> uid -> log)."""
    return _load_attendance(raw or {})


def load_snapshot(raw: Mapping, *, default_grace: float = DEFAULT_GRACE_MINUTES) -> FeedSnapshot:
    """Build a FeedSnapshot from the raw store payload.

    A missing ``config.grace_minutes`` falls back to ``default_grace``; a present
    but invalid one is rejected.
    """
    if not isinstance(raw, Mapping):
        raise FormatError("Snapshot phải là một đối tượng JSON")

    config = raw.get("config") or {}
    if not isinstance(config, Mapping):
        raise FormatError(f"Cấu hình không hợp lệ: {config!r}")
    grace = config.get("grace_minutes")
    grace_minutes = require_grace_minutes(default_grace if grace is None else grace)

    snapshot = FeedSnapshot(
        people=_load_people(raw.get("teachers") or {}),
        schedules=_load_schedules(raw.get("schedules") or {}),
        attendance=_load_attendance(raw.get("attendance") or {}),
        grace_minutes=grace_minutes,
    )
    logger.debug(
        "Nạp snapshot: %d giáo viên, %d lịch, %d ngày chấm công (ân hạn %s phút)",
        len(snapshot.people),
        len(snapshot.schedules),
        len(snapshot.attendance),
        grace_minutes,
    )
    return snapshot
