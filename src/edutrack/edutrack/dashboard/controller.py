from __future__ import annotations

import csv
import io
import logging
from datetime import date
from functools import wraps

from flask import Flask, jsonify, request

from ..attendance.reconciler import SlotReconciler
from ..common.time_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..container import Container
from ..core.exceptions import ConfigError, DomainError, FormatError
from ..schedules.service import windows_from_entries
from ..snapshots.loader import load_attendance, load_snapshot, parse_scan_entries

logger = logging.getLogger(__name__)


def _error_kind(e: DomainError) -> str:
    if isinstance(e, FormatError):
        return "format_error"
    if isinstance(e, ConfigError):
        return "config_error"
    return "validation_error"


def register(app: Flask, container: Container) -> None:
    def api_view(view):
        """Translate domain errors into JSON 400 responses."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return jsonify({"success": False, "error": _error_kind(e), "message": str(e)}), 400
            except Exception:
                logger.exception("Lỗi hệ thống khi xử lý %s", request.path)
                return jsonify({"success": False, "error": "internal_error", "message": "Lỗi hệ thống"}), 500

        return wrapper

    def _payload() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise FormatError("Dữ liệu gửi lên phải là một đối tượng JSON")
        return data

    def _reconciler_for(data: dict) -> SlotReconciler:
        grace = data.get("grace_minutes")
        if grace is None:
            return container.reconciler
        return SlotReconciler(grace)

    def _snapshot(data: dict):
        return load_snapshot(data.get("snapshot") or {}, default_grace=container.grace_minutes)

    def _period_args(data: dict) -> dict:
        return {"mode": data.get("mode"), "month": data.get("month"), "week": data.get("week")}

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        return jsonify({"success": True, "grace_minutes": container.grace_minutes})

    @app.route("/api/reconcile", methods=["POST"], endpoint="api_reconcile")
    @api_view
    def api_reconcile():
        data = _payload()
        reconciler = _reconciler_for(data)
        windows = windows_from_entries(data.get("windows") or [])
        scans = parse_scan_entries(data.get("scans") or [])

        results = reconciler.reconcile(windows, scans)
        return jsonify({"success": True, "results": [r.to_dict() for r in results]})

    @app.route("/api/daily-hours", methods=["POST"], endpoint="api_daily_hours")
    @api_view
    def api_daily_hours():
        data = _payload()
        daily = container.aggregator.daily_hours(parse_scan_entries(data.get("scans") or []))
        return jsonify({"success": True, **daily.to_dict()})

    @app.route("/api/period-hours", methods=["POST"], endpoint="api_period_hours")
    @api_view
    def api_period_hours():
        data = _payload()
        person = require_non_empty(data.get("person"), "person")
        by_date = load_attendance(data.get("attendance"))
        hours = container.aggregator.period_hours(by_date, person, **_period_args(data))
        return jsonify({"success": True, "person": person, "hours": round(hours, 2)})

    @app.route("/api/board", methods=["POST"], endpoint="api_board")
    @api_view
    def api_board():
        data = _payload()
        day = parse_iso_date(data["date"]) if data.get("date") else date.today()
        board = container.dashboard_service.daily_board(_snapshot(data), day)
        return jsonify({"success": True, **board})

    @app.route("/api/report", methods=["POST"], endpoint="api_report")
    @api_view
    def api_report():
        data = _payload()
        report = container.dashboard_service.period_summary(_snapshot(data), **_period_args(data))
        return jsonify({"success": True, "rows": report.rows, "summary": report.summary})

    @app.route("/api/report.csv", methods=["POST"], endpoint="api_report_csv")
    @api_view
    def api_report_csv():
        data = _payload()
        args = _period_args(data)
        report = container.dashboard_service.period_summary(_snapshot(data), **args)

        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=[
                "work_date",
                "user_id",
                "full_name",
                "first",
                "last",
                "worked_hours",
            ],
        )
        writer.writeheader()
        for row in report.rows:
            writer.writerow(row)

        filename = f"hours_{args['month']}" + (f"_w{args['week']}" if args["mode"] == "weekly" else "") + ".csv"
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
