from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.edutrack.edutrack.main import create_app

SAMPLE = Path(__file__).resolve().parents[1] / "examples" / "sample_snapshot.json"


@pytest.fixture()
def client():
    app = create_app("config.testing")
    return app.test_client()


def _snapshot():
    return json.loads(SAMPLE.read_text(encoding="utf-8"))


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "grace_minutes": 5}


def test_reconcile_sorts_windows_and_returns_input_slots(client):
    resp = client.post(
        "/api/reconcile",
        json={
            "windows": [
                {"subject": "Physics", "time": "08:50 - 09:35"},
                {"subject": "Math", "time": "08:00 - 08:45"},
            ],
            "scans": [{"time": "08:06:00", "method": "rfid"}, "08:50:00"],
        },
    )

    data = resp.get_json()
    assert resp.status_code == 200
    assert [r["subject"] for r in data["results"]] == ["Math", "Physics"]
    assert data["results"][0]["status"] == "late"
    assert data["results"][1]["check_in"] == "08:50:00"


def test_reconcile_with_request_grace(client):
    resp = client.post(
        "/api/reconcile",
        json={"windows": [{"subject": "Math", "time": "08:00 - 08:45"}], "scans": ["08:06:00"], "grace_minutes": 10},
    )

    assert resp.get_json()["results"][0]["status"] == "present"


def test_reconcile_malformed_window(client):
    resp = client.post("/api/reconcile", json={"windows": [{"subject": "Math", "time": "8 to 9"}], "scans": []})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "format_error"


def test_reconcile_negative_grace(client):
    resp = client.post("/api/reconcile", json={"windows": [], "scans": [], "grace_minutes": -1})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "config_error"


def test_non_json_body_rejected(client):
    resp = client.post("/api/daily-hours", data="hello", content_type="text/plain")

    assert resp.status_code == 400


def test_daily_hours(client):
    resp = client.post("/api/daily-hours", json={"scans": ["12:00:00", "08:00:00", "17:00:00"]})

    data = resp.get_json()
    assert data["first"] == "08:00:00"
    assert data["last"] == "17:00:00"
    assert data["hours"] == 9.0


def test_period_hours_weekly(client):
    attendance = {
        "2024-03-07": {"T1": ["08:00:00", "10:00:00"]},
        "2024-03-08": {"T1": ["08:00:00", "09:00:00"]},
        "2024-03-14": {"T1": ["08:00:00", "09:30:00"]},
    }

    resp = client.post(
        "/api/period-hours",
        json={"attendance": attendance, "person": "T1", "mode": "weekly", "month": "2024-03", "week": 2},
    )

    assert resp.get_json()["hours"] == 2.5


def test_period_hours_bad_mode(client):
    resp = client.post("/api/period-hours", json={"attendance": {}, "person": "T1", "mode": "daily", "month": "2024-03"})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_board(client):
    resp = client.post("/api/board", json={"snapshot": _snapshot(), "date": "2024-03-04"})

    data = resp.get_json()
    assert resp.status_code == 200
    assert data["display_date"] == "04/03/2024"
    assert len(data["rows"]) == 2


def test_report_json(client):
    resp = client.post("/api/report", json={"snapshot": _snapshot(), "mode": "monthly", "month": "2024-03"})

    data = resp.get_json()
    assert len(data["rows"]) == 2
    assert data["summary"][0]["user_id"] == "A1B2C3D4"


def test_report_csv(client):
    resp = client.post("/api/report.csv", json={"snapshot": _snapshot(), "mode": "weekly", "month": "2024-03", "week": 1})

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "hours_2024-03_w1.csv" in resp.headers["Content-Disposition"]
    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "work_date,user_id,full_name,first,last,worked_hours"
    assert lines[1].startswith("2024-03-04,A1B2C3D4,Nguyen Thi Lan,07:58:12,09:36:02,1.63")


def test_period_hours_requires_person(client):
    resp = client.post("/api/period-hours", json={"attendance": {}, "mode": "monthly", "month": "2024-03"})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_reconcile_string_grace_rejected(client):
    resp = client.post("/api/reconcile", json={"windows": [], "scans": [], "grace_minutes": "10"})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "config_error"
