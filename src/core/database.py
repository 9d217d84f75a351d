"""
SQLite database operations for workload report runs.
"""

import sqlite3
from datetime import date

from models.rules import BurnoutRisk, RuleViolation


def generate_report_name(report_type: str, as_of_date: date, conn: sqlite3.Connection) -> str:
    """
    Generate unique report name with auto-incremented suffix.

    Example: workload_weekly_report_2025_11_07_a, workload_monthly_report_2025_11_a
    """
    # Monthly reports use YYYY_MM format, weekly reports use YYYY_MM_DD format
    if "monthly" in report_type:
        date_str = as_of_date.strftime("%Y_%m")
    else:
        date_str = as_of_date.strftime("%Y_%m_%d")
    base_pattern = f"{report_type}_{date_str}_"

    cursor = conn.cursor()
    cursor.execute(
        "SELECT name FROM reports WHERE name LIKE ? ORDER BY name DESC",
        (f"{base_pattern}%",),
    )
    existing = cursor.fetchall()

    if not existing:
        return f"{base_pattern}a"

    highest_suffix = "a"
    for (name,) in existing:
        suffix = name.replace(base_pattern, "")
        if suffix and suffix > highest_suffix:
            highest_suffix = suffix

    next_suffix = chr(ord(highest_suffix) + 1)
    return f"{base_pattern}{next_suffix}"


def create_report_record(
    conn: sqlite3.Connection,
    report_type: str,
    report_name: str,
    start_date: date,
    end_date: date,
    risk: BurnoutRisk,
) -> int:
    """Create report record and return report_id."""
    cursor = conn.cursor()
    cursor.execute(
        """
        INSERT INTO reports (type, name, start_date, end_date, risk_level, risk_score)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (
            report_type,
            report_name,
            start_date.isoformat(),
            end_date.isoformat(),
            risk.level.value,
            risk.score,
        ),
    )
    conn.commit()
    return cursor.lastrowid


def insert_violations(conn: sqlite3.Connection, report_id: int, violations: list[RuleViolation]):
    """Insert all violations linked to report_id."""
    cursor = conn.cursor()
    for violation in violations:
        cursor.execute(
            """
            INSERT INTO violations (
                report_id, type, severity, title, description,
                metric, threshold, violation_date
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                report_id,
                violation.type.value,
                violation.severity.value,
                violation.title,
                violation.description,
                violation.metric,
                violation.threshold,
                violation.date.isoformat() if violation.date else None,
            ),
        )
    conn.commit()
