from __future__ import annotations

import argparse
import importlib
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.edutrack.edutrack.container import build_container
from src.edutrack.edutrack.core.exceptions import DomainError
from src.edutrack.edutrack.snapshots.loader import load_snapshot


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print worked hours per teacher from a snapshot JSON file.")
    parser.add_argument("snapshot", type=Path)
    parser.add_argument("--month", required=True, help="YYYY-MM")
    parser.add_argument("--week", type=int, help="week of month (1-5); implies weekly mode")
    parser.add_argument("--person", help="only this uid, with a per-day breakdown")
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    container = build_container(grace_minutes=settings.GRACE_MINUTES, display_date_format=settings.DISPLAY_DATE_FORMAT)
    period = {
        "mode": "weekly" if args.week is not None else "monthly",
        "month": args.month,
        "week": args.week,
    }

    try:
        raw = json.loads(args.snapshot.read_text(encoding="utf-8"))
        snapshot = load_snapshot(raw, default_grace=container.grace_minutes)
        if args.person:
            person = container.dashboard_service.person_hours(snapshot, args.person, **period)
        else:
            report = container.dashboard_service.period_summary(snapshot, **period)
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.person:
        for key, day in person["days"].items():
            print(f"{key}  {day['first']} - {day['last']}  {day['hours_label']:>8}")
        print(f"{person['user_id']:<12} {person['full_name']:<24} {person['hours_label']:>8}")
        return 0

    for row in report.summary:
        print(f"{row['user_id']:<12} {row['full_name']:<24} {row['total_hours_label']:>8}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
