"""Example: dùng service layer (không qua Flask).

Load a snapshot of the live feed and print the board for one day plus the
monthly hours summary.
"""

import importlib
import json
from datetime import date
from pathlib import Path

from config import get_settings_module

from src.edutrack.edutrack.container import build_container
from src.edutrack.edutrack.snapshots.loader import load_snapshot


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(grace_minutes=settings.GRACE_MINUTES, display_date_format=settings.DISPLAY_DATE_FORMAT)

    raw = json.loads((Path(__file__).parent / "sample_snapshot.json").read_text(encoding="utf-8"))
    snapshot = load_snapshot(raw, default_grace=container.grace_minutes)

    board = container.dashboard_service.daily_board(snapshot, date(2024, 3, 4))
    for row in board["rows"]:
        print(row["full_name"], row["status"], row["first"], row["last"], row["hours"])
        for slot in row["slots"]:
            print("   ", slot["subject"], slot["time"], slot["check_in"], slot["check_out"], slot["label"])

    report = container.dashboard_service.period_summary(snapshot, mode="monthly", month="2024-03")
    print(report.summary)


if __name__ == "__main__":
    main()
