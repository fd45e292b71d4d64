from __future__ import annotations

import json
from datetime import date
from pathlib import Path

from src.edutrack.edutrack.attendance.reconciler import SlotReconciler
from src.edutrack.edutrack.dashboard.service import DashboardService
from src.edutrack.edutrack.hours.service import HoursAggregator
from src.edutrack.edutrack.snapshots.loader import load_snapshot

SAMPLE = Path(__file__).resolve().parents[1] / "examples" / "sample_snapshot.json"
MONDAY = date(2024, 3, 4)


def _snapshot(**overrides):
    raw = json.loads(SAMPLE.read_text(encoding="utf-8"))
    raw.update(overrides)
    return load_snapshot(raw)


def test_daily_board_rows():
    board = DashboardService(HoursAggregator()).daily_board(_snapshot(), MONDAY)

    assert board["display_date"] == "04/03/2024"
    assert board["weekday"] == "Monday"
    assert [r["full_name"] for r in board["rows"]] == ["Nguyen Thi Lan", "Tran Van Minh"]

    lan = board["rows"][0]
    assert lan["present"] is True
    assert lan["first"] == "07:58:12"
    assert lan["last"] == "09:36:02"
    assert lan["hours"] == "1.63"

    math, physics = lan["slots"]
    assert (math["subject"], math["check_in"], math["check_out"], math["status"]) == ("Math", "07:58:12", "--", "present")
    assert (physics["check_in"], physics["check_out"], physics["status"]) == ("08:57:40", "09:36:02", "late")
    assert physics["css_class"] == "bg-warning text-dark"

    minh = board["rows"][1]
    assert minh["slots"][0]["status"] == "late"
    assert minh["hours"] == "0.00"


def test_board_uses_snapshot_grace():
    board = DashboardService(HoursAggregator()).daily_board(_snapshot(config={"grace_minutes": 15}), MONDAY)

    minh = board["rows"][1]
    assert board["grace_minutes"] == 15
    assert minh["slots"][0]["status"] == "present"


def test_board_day_without_scans_marks_absent():
    board = DashboardService(HoursAggregator()).daily_board(_snapshot(), date(2024, 3, 11))

    for row in board["rows"]:
        assert row["present"] is False
        assert row["first"] == "--"
        assert all(slot["status"] == "missing" for slot in row["slots"])


def test_board_builds_one_reconciler_per_snapshot():
    seen = []

    def factory(grace):
        seen.append(grace)
        return SlotReconciler(grace)

    DashboardService(HoursAggregator(), reconciler_factory=factory).daily_board(_snapshot(), MONDAY)

    assert seen == [5]


def test_period_summary_uses_registry_names():
    report = DashboardService(HoursAggregator()).period_summary(_snapshot(), mode="monthly", month="2024-03")

    assert [s["full_name"] for s in report.summary] == ["Nguyen Thi Lan", "Tran Van Minh"]
    assert report.summary[0]["total_hours_label"] == "1.63"


def test_person_hours_breakdown():
    result = DashboardService(HoursAggregator()).person_hours(_snapshot(), "A1B2C3D4", mode="monthly", month="2024-03")

    assert result["full_name"] == "Nguyen Thi Lan"
    assert list(result["days"]) == ["2024-03-04"]
    assert result["days"]["2024-03-04"]["first"] == "07:58:12"
    assert result["hours_label"] == "1.63"


def test_person_hours_outside_week_is_zero():
    result = DashboardService(HoursAggregator()).person_hours(
        _snapshot(), "A1B2C3D4", mode="weekly", month="2024-03", week=2
    )

    assert result["days"] == {}
    assert result["hours"] == 0
