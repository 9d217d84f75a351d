"""
Workload report generation in Excel format.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from core.config import (
    CLIENT_HEADERS,
    DAILY_HEADERS,
    SERVICE_HEADERS,
    TOP_CLIENTS_LIMIT,
    VIOLATION_HEADERS,
)
from models.events import CalendarEvent, ServiceType
from services.analysis import AnalysisResult
from services.durations import duration_in_range
from services.event_processor import service_type_label
from services.workload import format_hours, workload_color, workload_label


def format_date_display(d: date) -> str:
    """Format date as M/D/YYYY (platform-safe, no zero-padding)."""
    return f"{d.month}/{d.day}/{d.year}"


def format_date_short(d: date) -> str:
    """Format date as 'Mon D' (platform-safe, e.g., 'Nov 7')."""
    return f"{d.strftime('%b')} {d.day}"


# =============================================================================
# BREAKDOWNS
# =============================================================================


@dataclass
class ServiceBreakdown:
    label: str
    count: int
    minutes: int
    percentage: float


@dataclass
class ClientStats:
    name: str
    visit_count: int
    total_minutes: int


def _event_minutes(event: CalendarEvent) -> int:
    # Whole-event minutes with the overnight cap applied once
    return duration_in_range(event, event.start, event.end)


def service_breakdown(events: list[CalendarEvent]) -> list[ServiceBreakdown]:
    """Visit counts and minutes per service type, most frequent first."""
    work_events = [e for e in events if e.is_work_event]
    totals: dict[str, list[int]] = defaultdict(lambda: [0, 0])

    for event in work_events:
        service_type = event.service_info.type if event.service_info else ServiceType.OTHER
        entry = totals[service_type_label(service_type)]
        entry[0] += 1
        entry[1] += _event_minutes(event)

    total = len(work_events) or 1
    rows = [
        ServiceBreakdown(label=label, count=count, minutes=minutes, percentage=count / total * 100)
        for label, (count, minutes) in totals.items()
    ]
    return sorted(rows, key=lambda r: r.count, reverse=True)


def top_clients(events: list[CalendarEvent], limit: int = TOP_CLIENTS_LIMIT) -> list[ClientStats]:
    """Clients ranked by visit count."""
    totals: dict[str, list[int]] = defaultdict(lambda: [0, 0])
    for event in events:
        if event.is_work_event and event.client_name:
            entry = totals[event.client_name]
            entry[0] += 1
            entry[1] += _event_minutes(event)

    rows = [
        ClientStats(name=name, visit_count=count, total_minutes=minutes)
        for name, (count, minutes) in totals.items()
    ]
    return sorted(rows, key=lambda r: r.visit_count, reverse=True)[:limit]


# =============================================================================
# EXCEL REPORT GENERATION
# =============================================================================


def _write_headers(ws, headers: list[str]):
    for col_idx, header in enumerate(headers, start=1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        cell.font = Font(bold=True)


def _level_fill(level) -> PatternFill:
    color = workload_color(level).lstrip("#")
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def write_daily_sheet(ws, result: AnalysisResult):
    """
    Write the Daily Workload sheet.

    One row per day in the range plus a totals row; the Level cell is
    shaded with the level's color.
    """
    _write_headers(ws, DAILY_HEADERS)

    row_idx = 1
    for row_idx, metrics in enumerate(result.daily_metrics, start=2):
        row_data = [
            format_date_display(metrics.date),
            metrics.date.strftime("%a"),
            metrics.event_count,
            round(metrics.work_minutes / 60, 2),
            round(metrics.travel_minutes / 60, 2),
            round(metrics.total_minutes / 60, 2),
            workload_label(metrics.level),
        ]
        for col_idx, value in enumerate(row_data, start=1):
            ws.cell(row=row_idx, column=col_idx, value=value)
        ws.cell(row=row_idx, column=len(row_data)).fill = _level_fill(metrics.level)

    # Totals row with SUM formulas over the numeric columns
    total_row = row_idx + 1
    ws.cell(row=total_row, column=1, value="Total").font = Font(bold=True)
    for col_idx in range(3, 7):
        col_letter = get_column_letter(col_idx)
        ws.cell(row=total_row, column=col_idx, value=f"=SUM({col_letter}2:{col_letter}{row_idx})")


def write_violations_sheet(ws, result: AnalysisResult):
    _write_headers(ws, VIOLATION_HEADERS)

    for row_idx, violation in enumerate(result.violations, start=2):
        row_data = [
            format_date_display(violation.date) if violation.date else "",
            violation.type.value,
            violation.severity.value,
            violation.title,
            violation.description,
            round(violation.metric, 2),
            violation.threshold,
        ]
        for col_idx, value in enumerate(row_data, start=1):
            ws.cell(row=row_idx, column=col_idx, value=value)


def write_risk_sheet(ws, result: AnalysisResult):
    risk = result.risk
    weekly = result.weekly_summary
    summary = result.range_summary

    rows = [
        ("Period", f"{format_date_display(result.start_date)} - {format_date_display(result.end_date)}"),
        ("Risk level", risk.level.value.title()),
        ("Risk score", risk.score),
        ("Work hours (period)", format_hours(summary.total_work_hours)),
        ("Travel hours (period)", format_hours(summary.total_travel_hours)),
        ("Average daily hours", round(summary.average_daily_hours, 2)),
        ("Busiest day", f"{format_date_short(summary.busiest_day.date)} ({format_hours(summary.busiest_day.hours)})"),
        ("Visits (period)", summary.event_count),
        ("This week", workload_label(weekly.level)),
    ]
    for row_idx, (label, value) in enumerate(rows, start=1):
        ws.cell(row=row_idx, column=1, value=label).font = Font(bold=True)
        ws.cell(row=row_idx, column=2, value=value)

    factors_row = len(rows) + 2
    ws.cell(row=factors_row, column=1, value="Contributing factors").font = Font(bold=True)
    for offset, factor in enumerate(risk.factors or ["None"], start=1):
        ws.cell(row=factors_row + offset, column=1, value=factor)


def write_services_sheet(ws, result: AnalysisResult):
    _write_headers(ws, SERVICE_HEADERS)
    for row_idx, row in enumerate(service_breakdown(result.events), start=2):
        ws.cell(row=row_idx, column=1, value=row.label)
        ws.cell(row=row_idx, column=2, value=row.count)
        ws.cell(row=row_idx, column=3, value=round(row.minutes / 60, 2))
        ws.cell(row=row_idx, column=4, value=round(row.percentage, 1))

    client_col = len(SERVICE_HEADERS) + 2
    for col_offset, header in enumerate(CLIENT_HEADERS):
        ws.cell(row=1, column=client_col + col_offset, value=header).font = Font(bold=True)
    for row_idx, client in enumerate(top_clients(result.events), start=2):
        ws.cell(row=row_idx, column=client_col, value=client.name)
        ws.cell(row=row_idx, column=client_col + 1, value=client.visit_count)
        ws.cell(row=row_idx, column=client_col + 2, value=round(client.total_minutes / 60, 2))


def create_workload_excel_report(result: AnalysisResult, output_path: Path):
    """
    Create the Excel workload report.

    Sheet 1: "Burnout Risk" - score, level, factors and period summary
    Sheet 2: "Daily Workload" - one row per day with a totals row
    Sheet 3: "Violations" - every rule violation, any severity
    Sheet 4: "Services" - service breakdown and top clients
    """
    wb = Workbook()

    ws_risk = wb.active
    ws_risk.title = "Burnout Risk"
    write_risk_sheet(ws_risk, result)

    write_daily_sheet(wb.create_sheet(title="Daily Workload"), result)
    write_violations_sheet(wb.create_sheet(title="Violations"), result)
    write_services_sheet(wb.create_sheet(title="Services"), result)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(str(output_path))
    print(f"Saved Excel report to: {output_path}")
