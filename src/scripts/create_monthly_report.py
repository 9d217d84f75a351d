#!/usr/bin/env python3
"""
Create monthly workload report from an exported calendar.

Generates Excel report with four sheets:
- Burnout Risk: score, level and contributing factors
- Daily Workload: one row per day of the month
- Violations: every rule violation found in the month
- Services: service mix and top clients

Usage:
    uv run python src/scripts/create_monthly_report.py --events data/events.json --month 2025-11
"""

import argparse
import sqlite3
import sys
import traceback
from datetime import date
from pathlib import Path
from zoneinfo import ZoneInfo

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import CALENDAR_TIMEZONE, DB_PATH, DEFAULT_CALENDAR_ID, OUTPUT_DIR
from core.database import create_report_record, generate_report_name, insert_violations
from core.dates import month_range
from core.settings import load_settings
from services.analysis import analyze_schedule
from services.calendar import load_events_file
from services.reports import create_workload_excel_report


# =============================================================================
# DATE UTILITIES
# =============================================================================


def get_monthly_date_range(month_str: str | None) -> tuple[date, date]:
    """
    Calculate date range for monthly report.

    Args:
        month_str: Optional month string (YYYY-MM). Uses previous month if None.

    Returns:
        Tuple of (first_of_month, last_of_month)
    """
    if month_str:
        year, month = map(int, month_str.split("-"))
        target_date = date(year, month, 1)
    else:
        # Default to previous month
        today = date.today()
        if today.month == 1:
            target_date = date(today.year - 1, 12, 1)
        else:
            target_date = date(today.year, today.month - 1, 1)

    return month_range(target_date)


# =============================================================================
# MAIN
# =============================================================================


def main(events_file: Path, month_str: str | None = None):
    """Main entry point for monthly report."""
    try:
        settings = load_settings()
        tz = ZoneInfo(CALENDAR_TIMEZONE) if CALENDAR_TIMEZONE else None

        # 1. Calculate date range (full month)
        start_date, end_date = get_monthly_date_range(month_str)
        print(f"Generating monthly workload report for {start_date} to {end_date}")

        # 2. Load events
        events = load_events_file(events_file, DEFAULT_CALENDAR_ID, tz)
        print(f"Loaded {len(events)} events from {events_file}")

        # 3. Analyze; the weekly rule and score look at the month's last week
        result = analyze_schedule(events, start_date, end_date, settings, today=end_date)
        print(f"Work events: {len(result.work_events)}")
        print(f"Violations: {len(result.violations)}")
        print(f"Burnout risk: {result.risk.level.value} ({result.risk.score}/100)")

        # 4. Create database records
        conn = sqlite3.connect(DB_PATH)
        try:
            report_name = generate_report_name("workload_monthly_report", end_date, conn)
            report_id = create_report_record(
                conn, "workload_monthly_report", report_name, start_date, end_date, result.risk
            )
            insert_violations(conn, report_id, result.violations)
        finally:
            conn.close()
        print(f"\nCreated report: {report_name} (ID: {report_id})")

        # 5. Generate Excel file
        output_path = OUTPUT_DIR / "reports" / "monthly" / f"{report_name}.xlsx"
        create_workload_excel_report(result, output_path)

        print("\nDone!")

    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate monthly workload report")
    parser.add_argument("--events", required=True, type=Path, help="Calendar events JSON export")
    parser.add_argument("--month", help="Month (YYYY-MM). Defaults to previous month.")
    args = parser.parse_args()

    main(args.events, args.month)
