"""
Tests for the weekly and monthly report scripts.
"""

import json
import sqlite3
from datetime import date

import pytest
from openpyxl import load_workbook

import scripts.create_monthly_report as monthly
import scripts.create_weekly_report as weekly
from scripts.init_db import create_database


@pytest.fixture
def workspace(tmp_path, monkeypatch, generated_raw_events):
    """Temporary database, output dir and events export for a script run."""
    db_path = tmp_path / "workload.db"
    create_database(db_path)
    events_file = tmp_path / "events.json"
    events_file.write_text(json.dumps(generated_raw_events), encoding="utf-8")

    for module in (weekly, monthly):
        monkeypatch.setattr(module, "DB_PATH", db_path)
        monkeypatch.setattr(module, "OUTPUT_DIR", tmp_path / "output")
        monkeypatch.setattr(module, "CALENDAR_TIMEZONE", "")

    return tmp_path, db_path, events_file


class TestDateRanges:
    def test_week_containing_date(self):
        assert weekly.get_weekly_date_range("2025-01-15") == (date(2025, 1, 12), date(2025, 1, 18))

    def test_week_starting_monday(self):
        assert weekly.get_weekly_date_range("2025-01-12", week_starts_on=1) == (
            date(2025, 1, 6),
            date(2025, 1, 12),
        )

    def test_explicit_month(self):
        assert monthly.get_monthly_date_range("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))

    def test_default_is_previous_month(self):
        start, end = monthly.get_monthly_date_range(None)
        today = date.today()
        assert start.day == 1
        assert end < today.replace(day=1)
        assert (end.year, end.month) == (start.year, start.month)


class TestRuns:
    def test_weekly_report(self, workspace):
        tmp_path, db_path, events_file = workspace

        weekly.main(events_file, "2025-01-15")

        output = tmp_path / "output" / "reports" / "weekly" / "workload_weekly_report_2025_01_18_a.xlsx"
        assert output.exists()
        assert load_workbook(output).sheetnames == ["Burnout Risk", "Daily Workload", "Violations", "Services"]

        conn = sqlite3.connect(db_path)
        try:
            row = conn.execute("SELECT type, start_date, end_date FROM reports").fetchone()
        finally:
            conn.close()
        assert row == ("workload_weekly_report", "2025-01-12", "2025-01-18")

    def test_monthly_report(self, workspace):
        tmp_path, db_path, events_file = workspace

        monthly.main(events_file, "2025-01")

        output = tmp_path / "output" / "reports" / "monthly" / "workload_monthly_report_2025_01_a.xlsx"
        assert output.exists()

    def test_missing_events_file_exits(self, workspace):
        tmp_path, _, _ = workspace
        with pytest.raises(SystemExit) as exc_info:
            weekly.main(tmp_path / "nope.json", "2025-01-15")
        assert exc_info.value.code == 1
