#!/usr/bin/env python3
"""
Create weekly workload report from an exported calendar.

Loads events from a JSON export, classifies them, evaluates workload rules,
scores burnout risk, records the run in SQLite and writes an Excel report.

Usage:
    uv run python src/scripts/create_weekly_report.py --events data/events.json --date 2025-11-07
"""

import argparse
import sqlite3
import sys
import traceback
from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import CALENDAR_TIMEZONE, DB_PATH, DEFAULT_CALENDAR_ID, OUTPUT_DIR
from core.database import create_report_record, generate_report_name, insert_violations
from core.dates import end_of_week, start_of_week
from core.settings import load_settings
from core.validation import validate_events
from services.analysis import analyze_schedule
from services.calendar import load_events_file
from services.reports import create_workload_excel_report
from services.workload import workload_summary_text


# =============================================================================
# DATE UTILITIES
# =============================================================================


def get_weekly_date_range(as_of_date_str: str | None, week_starts_on: int = 0) -> tuple[date, date]:
    """
    Calculate date range for weekly report.

    Args:
        as_of_date_str: Optional date string (YYYY-MM-DD). Uses today if None.
        week_starts_on: First day of the week, 0 = Sunday

    Returns:
        Tuple of (week_start, week_end) for the week containing the as-of date
    """
    if as_of_date_str:
        as_of = datetime.strptime(as_of_date_str, "%Y-%m-%d").date()
    else:
        as_of = date.today()

    return start_of_week(as_of, week_starts_on), end_of_week(as_of, week_starts_on)


# =============================================================================
# MAIN
# =============================================================================


def main(events_file: Path, as_of_date_str: str | None = None):
    """Main entry point."""
    try:
        settings = load_settings()
        tz = ZoneInfo(CALENDAR_TIMEZONE) if CALENDAR_TIMEZONE else None

        # 1. Calculate date range
        start_date, end_date = get_weekly_date_range(as_of_date_str, settings.week_starts_on)
        today = datetime.strptime(as_of_date_str, "%Y-%m-%d").date() if as_of_date_str else date.today()
        print(f"Generating workload report for {start_date} to {end_date}")

        # 2. Load events
        events = load_events_file(events_file, DEFAULT_CALENDAR_ID, tz)
        print(f"Loaded {len(events)} events from {events_file}")

        problems = validate_events(events)
        for problem in problems:
            print(f"  Warning: {problem}")

        # 3. Analyze
        result = analyze_schedule(events, start_date, end_date, settings, today=today)
        print(f"Work events: {len(result.work_events)}")
        print(f"Violations: {len(result.violations)}")
        print(
            f"This week: "
            f"{workload_summary_text(result.weekly_summary.level, result.weekly_summary.total_work_hours)}"
        )
        print(f"Burnout risk: {result.risk.level.value} ({result.risk.score}/100)")

        # 4. Create database records
        conn = sqlite3.connect(DB_PATH)
        try:
            report_name = generate_report_name("workload_weekly_report", end_date, conn)
            report_id = create_report_record(
                conn, "workload_weekly_report", report_name, start_date, end_date, result.risk
            )
            insert_violations(conn, report_id, result.violations)
        finally:
            conn.close()
        print(f"\nCreated report: {report_name} (ID: {report_id})")

        # 5. Generate Excel file
        output_path = OUTPUT_DIR / "reports" / "weekly" / f"{report_name}.xlsx"
        create_workload_excel_report(result, output_path)

        print("\nDone!")

    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate weekly workload report")
    parser.add_argument("--events", required=True, type=Path, help="Calendar events JSON export")
    parser.add_argument(
        "--date",
        help="As-of date (YYYY-MM-DD). Reports the week containing this date. Defaults to today.",
    )
    args = parser.parse_args()

    main(args.events, args.date)
