"""
Tests for report-run persistence in SQLite.
"""

import sqlite3
from datetime import date

import pytest

from core.database import create_report_record, generate_report_name, insert_violations
from models.rules import BurnoutRisk, RiskLevel, RuleViolation, Severity, ViolationType
from scripts.init_db import create_database


@pytest.fixture
def conn(tmp_path):
    db_path = tmp_path / "db" / "workload.db"
    create_database(db_path)
    connection = sqlite3.connect(db_path)
    yield connection
    connection.close()


@pytest.fixture
def risk():
    violation = RuleViolation(
        type=ViolationType.MAX_HOURS_DAY,
        severity=Severity.WARNING,
        title="Long Day Ahead",
        description="11.0 hours scheduled (max: 10)",
        metric=11.0,
        threshold=10,
        date=date(2025, 1, 13),
    )
    return BurnoutRisk(level=RiskLevel.LOW, score=10, factors=[], violations=[violation])


class TestSchema:
    def test_tables_created(self, conn):
        tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
        assert {"reports", "violations", "api_requests", "api_request_details"} <= tables

    def test_idempotent(self, tmp_path):
        db_path = tmp_path / "workload.db"
        create_database(db_path)
        create_database(db_path)
        assert db_path.exists()


class TestReportNames:
    def test_first_weekly_name(self, conn):
        name = generate_report_name("workload_weekly_report", date(2025, 1, 18), conn)
        assert name == "workload_weekly_report_2025_01_18_a"

    def test_monthly_name_uses_month(self, conn):
        name = generate_report_name("workload_monthly_report", date(2025, 1, 31), conn)
        assert name == "workload_monthly_report_2025_01_a"

    def test_suffix_increments(self, conn, risk):
        first = generate_report_name("workload_weekly_report", date(2025, 1, 18), conn)
        create_report_record(
            conn, "workload_weekly_report", first, date(2025, 1, 12), date(2025, 1, 18), risk
        )
        second = generate_report_name("workload_weekly_report", date(2025, 1, 18), conn)
        assert second == "workload_weekly_report_2025_01_18_b"


class TestRecords:
    def test_report_and_violations(self, conn, risk):
        report_id = create_report_record(
            conn,
            "workload_weekly_report",
            "workload_weekly_report_2025_01_18_a",
            date(2025, 1, 12),
            date(2025, 1, 18),
            risk,
        )
        insert_violations(conn, report_id, risk.violations)

        report = conn.execute(
            "SELECT risk_level, risk_score, start_date FROM reports WHERE id = ?", (report_id,)
        ).fetchone()
        assert report == ("low", 10, "2025-01-12")

        rows = conn.execute(
            "SELECT type, severity, metric, threshold, violation_date FROM violations WHERE report_id = ?",
            (report_id,),
        ).fetchall()
        assert rows == [("max-hours-day", "warning", 11.0, 10.0, "2025-01-13")]

    def test_unknown_report_type_rejected(self, conn, risk):
        with pytest.raises(sqlite3.IntegrityError):
            create_report_record(conn, "workload_daily_report", "x", date(2025, 1, 1), date(2025, 1, 2), risk)
