from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import ScanEvent
from ..common.time_utils import format_hours, parse_iso_date, week_of_month
from ..core.enums import ReportMode
from ..core.exceptions import FormatError, ValidationError
from .calculator.base import HoursCalculator
from .calculator.span_calculator import SpanHoursCalculator
from .model import DailyHours

logger = logging.getLogger(__name__)

_MONTH_RE = re.compile(r"^\d{4}-\d{2}$")

ScansByDate = Mapping[str, Mapping[str, Sequence[ScanEvent]]]


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


def _require_mode(mode) -> ReportMode:
    try:
        return ReportMode(mode)
    except ValueError as e:
        raise ValidationError(f"Chế độ báo cáo không hợp lệ: {mode!r}") from e


def _require_month(month: str) -> str:
    if not isinstance(month, str) or not _MONTH_RE.match(month):
        raise FormatError(f"Tháng không hợp lệ (YYYY-MM): {month!r}")
    return month


def _require_week(week) -> int:
    if isinstance(week, bool):
        raise ValidationError(f"Tuần không hợp lệ: {week!r}")
    try:
        value = int(week)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Tuần không hợp lệ: {week!r}") from e
    if value < 1:
        raise ValidationError(f"Tuần không hợp lệ: {week!r}")
    return value


class HoursAggregator:
    """Reduce a person's scans into worked hours, ignoring schedule windows."""

    def __init__(self, *, calculator: Optional[HoursCalculator] = None):
        self._calculator = calculator or SpanHoursCalculator()

    def daily_hours(self, scans: Sequence[ScanEvent]) -> DailyHours:
        return self._calculator.daily_hours(list(scans))

    def dates_in_period(self, by_date: ScansByDate, *, mode, month: str, week=None) -> list[str]:
        """Date keys of ``by_date`` falling in the month (and week-of-month when weekly)."""
        mode = _require_mode(mode)
        month = _require_month(month)
        week = _require_week(week) if mode is ReportMode.WEEKLY else None

        out: list[str] = []
        for key in sorted(by_date):
            day = parse_iso_date(key)
            if key[:7] != month:
                continue
            if week is not None and week_of_month(day) != week:
                continue
            out.append(key)
        return out

    def period_hours(self, by_date: ScansByDate, person: str, mode, month: str, week=None) -> float:
        total = 0.0
        for key in self.dates_in_period(by_date, mode=mode, month=month, week=week):
            total += self.daily_hours(by_date[key].get(person, ())).hours
        return total

    def build_period_report(
        self,
        by_date: ScansByDate,
        *,
        mode,
        month: str,
        week=None,
        people: Optional[Mapping[str, str]] = None,
    ) -> ReportData:
        """Per-day rows plus per-person totals (largest total first)."""
        dates = self.dates_in_period(by_date, mode=mode, month=month, week=week)
        names = dict(people) if people is not None else {uid: uid for uid in _all_people(by_date, dates)}

        totals: dict[str, float] = {uid: 0.0 for uid in names}
        out_rows: list[dict] = []

        for key in dates:
            for uid in sorted(names):
                scans = by_date[key].get(uid, ())
                if not scans:
                    continue
                daily = self.daily_hours(scans)
                totals[uid] += daily.hours
                out_rows.append(
                    {
                        "work_date": key,
                        "user_id": uid,
                        "full_name": names[uid],
                        "first": str(daily.first),
                        "last": str(daily.last),
                        "worked_hours": format_hours(daily.hours),
                    }
                )

        summary = [
            {
                "user_id": uid,
                "full_name": names[uid],
                "total_hours": round(total, 2),
                "total_hours_label": format_hours(total),
            }
            for uid, total in totals.items()
        ]
        summary.sort(key=lambda x: (-x["total_hours"], x["user_id"]))

        logger.debug("Báo cáo %s %s (tuần %s): %d ngày, %d dòng", mode, month, week, len(dates), len(out_rows))
        return ReportData(rows=out_rows, summary=summary)


def _all_people(by_date: ScansByDate, dates: Iterable[str]) -> set[str]:
    people: set[str] = set()
    for key in dates:
        people.update(by_date[key])
    return people


def daily_hours(scans: Sequence[ScanEvent]) -> DailyHours:
    return HoursAggregator().daily_hours(scans)


def period_hours(by_date: ScansByDate, person: str, mode, month: str, week=None) -> float:
    return HoursAggregator().period_hours(by_date, person, mode, month, week)
