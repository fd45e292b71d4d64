from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import SlotStatusFactory
from .attendance.reconciler import SlotReconciler
from .common.validators import parse_grace_setting
from .core.constants import DEFAULT_GRACE_MINUTES, DISPLAY_DATE_FORMAT
from .dashboard.service import DashboardService
from .hours.calculator.span_calculator import SpanHoursCalculator
from .hours.service import HoursAggregator


@dataclass(frozen=True)
class Container:
    grace_minutes: float
    display_date_format: str

    reconciler: SlotReconciler
    aggregator: HoursAggregator
    dashboard_service: DashboardService


def build_container(*, grace_minutes=DEFAULT_GRACE_MINUTES, display_date_format: str = DISPLAY_DATE_FORMAT) -> Container:
    grace_minutes = parse_grace_setting(grace_minutes)

    reconciler = SlotReconciler(grace_minutes, status_factory=SlotStatusFactory())
    aggregator = HoursAggregator(calculator=SpanHoursCalculator())
    dashboard_service = DashboardService(aggregator, display_date_format=display_date_format)

    return Container(
        grace_minutes=grace_minutes,
        display_date_format=display_date_format,
        reconciler=reconciler,
        aggregator=aggregator,
        dashboard_service=dashboard_service,
    )
