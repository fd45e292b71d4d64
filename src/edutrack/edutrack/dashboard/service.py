from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable

from ..attendance.model import ReconciliationResult
from ..attendance.reconciler import SlotReconciler
from ..common.time_utils import to_display_date, weekday_name
from ..core.constants import DISPLAY_DATE_FORMAT
from ..core.enums import SlotStatus
from ..hours.service import HoursAggregator, ReportData
from ..snapshots.model import FeedSnapshot


@dataclass(frozen=True)
class BoardRowUI:
    user_id: str
    full_name: str
    present: bool
    slots: list[dict]
    first: str
    last: str
    hours: str

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "full_name": self.full_name,
            "present": self.present,
            "status": "Có mặt" if self.present else "Vắng",
            "css_class": "bg-success" if self.present else "bg-danger",
            "slots": self.slots,
            "first": self.first,
            "last": self.last,
            "hours": self.hours,
        }


class DashboardService:
    """Live monitor / period summary built on top of the pure engine.

    A new snapshot means a full recomputation; nothing is cached between calls.
    """

    def __init__(
        self,
        aggregator: HoursAggregator,
        *,
        reconciler_factory: Callable[[float], SlotReconciler] = SlotReconciler,
        display_date_format: str = DISPLAY_DATE_FORMAT,
    ):
        self._aggregator = aggregator
        self._reconciler_factory = reconciler_factory
        self._display_date_format = display_date_format

    def daily_board(self, snapshot: FeedSnapshot, day: date) -> dict:
        reconciler = self._reconciler_factory(snapshot.grace_minutes)

        rows = []
        for uid, name in sorted(snapshot.people.items(), key=lambda kv: (kv[1].lower(), kv[0])):
            scans = snapshot.scans_for(uid, day)
            results = reconciler.reconcile(snapshot.windows_for(uid, day), scans)
            daily = self._aggregator.daily_hours(scans)
            rows.append(
                BoardRowUI(
                    user_id=uid,
                    full_name=name,
                    present=bool(scans),
                    slots=[self._slot_to_ui(r) for r in results],
                    first=str(daily.first) if daily.first else "--",
                    last=str(daily.last) if daily.last else "--",
                    hours=f"{daily.hours:.2f}",
                ).to_dict()
            )

        iso = day.isoformat()
        return {
            "date": iso,
            "display_date": to_display_date(iso, display_format=self._display_date_format),
            "weekday": weekday_name(day),
            "grace_minutes": snapshot.grace_minutes,
            "rows": rows,
        }

    def period_summary(self, snapshot: FeedSnapshot, *, mode, month: str, week=None) -> ReportData:
        return self._aggregator.build_period_report(
            snapshot.attendance,
            mode=mode,
            month=month,
            week=week,
            people=snapshot.people,
        )

    def person_hours(self, snapshot: FeedSnapshot, uid: str, *, mode, month: str, week=None) -> dict:
        """One person's worked hours per day and in total for the period."""
        by_date = {key: {uid: scans} for key, scans in snapshot.scans_by_date(uid).items()}
        dates = self._aggregator.dates_in_period(by_date, mode=mode, month=month, week=week)
        days = {key: self._aggregator.daily_hours(by_date[key][uid]).to_dict() for key in dates}
        total = self._aggregator.period_hours(by_date, uid, mode, month, week)
        return {
            "user_id": uid,
            "full_name": snapshot.people.get(uid, uid),
            "days": days,
            "hours": round(total, 2),
            "hours_label": f"{total:.2f}",
        }

    def _slot_to_ui(self, r: ReconciliationResult) -> dict:
        label = {
            SlotStatus.PRESENT: "Có mặt",
            SlotStatus.LATE: "Đi muộn",
            SlotStatus.MISSING: "Vắng",
        }.get(r.status, r.status.value)

        css = {
            SlotStatus.PRESENT: "bg-success",
            SlotStatus.LATE: "bg-warning text-dark",
            SlotStatus.MISSING: "bg-danger",
        }.get(r.status, "bg-secondary")

        data = r.to_dict()
        data.update(
            {
                "check_in": data["check_in"] or "--",
                "check_out": data["check_out"] or "--",
                "label": label,
                "css_class": css,
            }
        )
        return data
