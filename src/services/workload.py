"""
Workload aggregation: per-day metrics, period summaries and display helpers.
"""

from datetime import date

from core.dates import each_day, end_of_week, month_range, start_of_week
from core.thresholds import comfortable_if_idle, level_for_period
from models.events import CalendarEvent
from models.settings import AppSettings
from models.workload import (
    BusiestDay,
    Period,
    WorkloadLevel,
    WorkloadMetrics,
    WorkloadSummary,
)
from services.durations import duration_for_day, event_overlaps_day
from services.event_processor import ensure_classified

WORKLOAD_COLORS = {
    WorkloadLevel.NONE: "#E5E7EB",
    WorkloadLevel.COMFORTABLE: "#10B981",
    WorkloadLevel.BUSY: "#F59E0B",
    WorkloadLevel.HIGH: "#F97316",
    WorkloadLevel.BURNOUT: "#EF4444",
}

WORKLOAD_LABELS = {
    WorkloadLevel.NONE: "Free",
    WorkloadLevel.COMFORTABLE: "Comfortable",
    WorkloadLevel.BUSY: "Busy",
    WorkloadLevel.HIGH: "High",
    WorkloadLevel.BURNOUT: "Burnout Risk",
}


def work_events_for_day(events: list[CalendarEvent], day: date) -> list[CalendarEvent]:
    """Work events overlapping the day, in start order."""
    day_events = []
    for event in events:
        event = ensure_classified(event)
        if event.is_work_event and event_overlaps_day(event, day):
            day_events.append(event)
    return sorted(day_events, key=lambda e: e.start)


def work_minutes_for_day(events: list[CalendarEvent], day: date) -> int:
    return sum(duration_for_day(event, day) for event in work_events_for_day(events, day))


def estimate_travel_minutes(work_events: list[CalendarEvent], leg_minutes: int = 15) -> int:
    """
    Fixed-estimate travel time for a day's visits.

    Two legs (there and back) per visit, or one when the visit is at the same
    location as the visit just before it.
    """
    legs = 0
    previous = None
    for event in sorted(work_events, key=lambda e: e.start):
        if previous is not None and event.location and event.location == previous.location:
            legs += 1
        else:
            legs += 2
        previous = event
    return legs * leg_minutes


def metrics_for_day(day: date, events: list[CalendarEvent], settings: AppSettings) -> WorkloadMetrics:
    work_events = work_events_for_day(events, day)
    work_minutes = sum(duration_for_day(event, day) for event in work_events)

    travel_minutes = 0
    if settings.include_travel_time:
        travel_minutes = estimate_travel_minutes(work_events, settings.travel_leg_minutes)

    total_minutes = work_minutes + travel_minutes

    return WorkloadMetrics(
        date=day,
        work_minutes=work_minutes,
        travel_minutes=travel_minutes,
        total_minutes=total_minutes,
        event_count=len(work_events),
        level=comfortable_if_idle(
            level_for_period(total_minutes / 60, Period.DAILY, settings.thresholds)
        ),
    )


def metrics_for_range(
    start: date, end: date, events: list[CalendarEvent], settings: AppSettings
) -> list[WorkloadMetrics]:
    """One WorkloadMetrics per calendar day from start to end, inclusive."""
    return [metrics_for_day(day, events, settings) for day in each_day(start, end)]


def period_range(period: Period, reference: date, week_starts_on: int = 0) -> tuple[date, date]:
    period = Period(period)
    if period == Period.WEEKLY:
        return start_of_week(reference, week_starts_on), end_of_week(reference, week_starts_on)
    if period == Period.MONTHLY:
        return month_range(reference)
    return reference, reference


def summarize_metrics(
    period: Period, metrics: list[WorkloadMetrics], settings: AppSettings
) -> WorkloadSummary:
    """Roll daily metrics up into one summary with the busiest day."""
    total_work_minutes = sum(m.work_minutes for m in metrics)
    total_travel_minutes = sum(m.travel_minutes for m in metrics)
    total_hours = (total_work_minutes + total_travel_minutes) / 60

    busiest = BusiestDay(date=metrics[0].date, hours=0.0)
    for m in metrics:
        if m.total_hours > busiest.hours:
            busiest = BusiestDay(date=m.date, hours=m.total_hours)

    return WorkloadSummary(
        period=Period(period),
        start_date=metrics[0].date,
        end_date=metrics[-1].date,
        total_work_hours=total_work_minutes / 60,
        total_travel_hours=total_travel_minutes / 60,
        average_daily_hours=total_hours / len(metrics),
        busiest_day=busiest,
        level=comfortable_if_idle(level_for_period(total_hours, period, settings.thresholds)),
        event_count=sum(m.event_count for m in metrics),
    )


def workload_summary(
    period: Period, events: list[CalendarEvent], settings: AppSettings, reference: date
) -> WorkloadSummary:
    """Summary for the day, week or month containing `reference`."""
    start, end = period_range(period, reference, settings.week_starts_on)
    return summarize_metrics(period, metrics_for_range(start, end, events, settings), settings)


def workload_color(level: WorkloadLevel) -> str:
    return WORKLOAD_COLORS[WorkloadLevel(level)]


def workload_label(level: WorkloadLevel) -> str:
    return WORKLOAD_LABELS[WorkloadLevel(level)]


def format_hours(hours: float) -> str:
    """Format hours for display, e.g. 45 min, 3h, 2h 30m."""
    if hours < 1:
        return f"{round(hours * 60)} min"
    whole = int(hours)
    minutes = round((hours - whole) * 60)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    if minutes == 0:
        return f"{whole}h"
    return f"{whole}h {minutes}m"


def workload_summary_text(level: WorkloadLevel, hours: float) -> str:
    hours_text = f"{round(hours * 60)}m" if hours < 1 else f"{hours:.1f}h"
    messages = {
        WorkloadLevel.NONE: "No visits scheduled",
        WorkloadLevel.COMFORTABLE: f"{hours_text} scheduled - Light day",
        WorkloadLevel.BUSY: f"{hours_text} scheduled - Moderate workload",
        WorkloadLevel.HIGH: f"{hours_text} scheduled - Heavy workload",
        WorkloadLevel.BURNOUT: f"{hours_text} scheduled - Consider rescheduling",
    }
    return messages[WorkloadLevel(level)]
