"""
Rules engine: evaluates a schedule against workload limits.

Produces a fresh list of RuleViolation values on every call. Nothing is
filtered by severity and nothing is remembered between calls.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from functools import reduce

from core.config import (
    CRITICAL_DAILY_HOURS_MARGIN,
    CRITICAL_STREAK_MARGIN,
    CRITICAL_VISITS_MARGIN,
    CRITICAL_WEEKLY_HOURS_MARGIN,
    WEEKEND_HOURS_LIMIT,
)
from core.dates import each_day, end_of_week, is_weekend, start_of_week
from core.thresholds import comfortable_if_idle, level_for_limit
from models.events import CalendarEvent
from models.rules import (
    BurnoutIndicators,
    RuleViolation,
    Severity,
    ThresholdStatus,
    ViolationType,
)
from models.settings import AppSettings, WorkloadRules
from models.workload import BUSY_LEVELS, BusiestDay, Period, WorkloadLevel
from services.workload import work_events_for_day, work_minutes_for_day, workload_color

INDICATOR_MESSAGES = {
    WorkloadLevel.BURNOUT: "Your schedule is extremely heavy this week. Consider declining new bookings.",
    WorkloadLevel.HIGH: "Heavy workload this week. Make sure to schedule breaks.",
    WorkloadLevel.BUSY: "Busy week ahead. Keep an eye on your energy levels.",
    WorkloadLevel.COMFORTABLE: "Workload looks comfortable this week.",
}


def _severity(metric: float, limit: float, critical_margin: float) -> Severity:
    return Severity.CRITICAL if metric > limit + critical_margin else Severity.WARNING


# =============================================================================
# PER-DAY CHECKS
# =============================================================================


def check_day(events: list[CalendarEvent], day: date, rules: WorkloadRules) -> list[RuleViolation]:
    """Visit-count and hours checks for one day."""
    violations = []
    day_events = work_events_for_day(events, day)
    visit_count = len(day_events)

    if visit_count > rules.max_visits_per_day:
        violations.append(
            RuleViolation(
                type=ViolationType.MAX_VISITS_DAY,
                severity=_severity(visit_count, rules.max_visits_per_day, CRITICAL_VISITS_MARGIN),
                title="Too Many Visits",
                description=f"{visit_count} visits scheduled (max: {rules.max_visits_per_day})",
                metric=visit_count,
                threshold=rules.max_visits_per_day,
                date=day,
                recommendation="Consider rescheduling some visits to another day.",
            )
        )

    total_hours = work_minutes_for_day(day_events, day) / 60
    if total_hours > rules.max_hours_per_day:
        violations.append(
            RuleViolation(
                type=ViolationType.MAX_HOURS_DAY,
                severity=_severity(total_hours, rules.max_hours_per_day, CRITICAL_DAILY_HOURS_MARGIN),
                title="Long Day Ahead",
                description=f"{total_hours:.1f} hours scheduled (max: {rules.max_hours_per_day})",
                metric=total_hours,
                threshold=rules.max_hours_per_day,
                date=day,
                recommendation="Plan for extra rest before or after this busy day.",
            )
        )

    return violations


def would_violate_rules(
    existing_events: list[CalendarEvent], candidate: CalendarEvent, rules: WorkloadRules
) -> list[RuleViolation]:
    """What-if check: violations on the candidate's day if it were booked."""
    return check_day([*existing_events, candidate], candidate.start.date(), rules)


# =============================================================================
# WEEKLY CHECK
# =============================================================================


def check_week(
    events: list[CalendarEvent], today: date, rules: WorkloadRules, week_starts_on: int = 0
) -> list[RuleViolation]:
    """Hours for the calendar week containing `today`."""
    week_start = start_of_week(today, week_starts_on)
    week_end = end_of_week(today, week_starts_on)
    weekly_hours = sum(work_minutes_for_day(events, day) for day in each_day(week_start, week_end)) / 60

    if weekly_hours <= rules.max_hours_per_week:
        return []

    return [
        RuleViolation(
            type=ViolationType.MAX_HOURS_WEEK,
            severity=_severity(weekly_hours, rules.max_hours_per_week, CRITICAL_WEEKLY_HOURS_MARGIN),
            title="High Load Week",
            description=f"{weekly_hours:.1f} hours this week (max: {rules.max_hours_per_week})",
            metric=weekly_hours,
            threshold=rules.max_hours_per_week,
            date=week_start,
            recommendation="Consider blocking off some time for yourself this week.",
        )
    ]


# =============================================================================
# BUSY STREAKS
# =============================================================================


@dataclass(frozen=True)
class Streak:
    length: int = 0
    start: date | None = None


def _close_streak(streak: Streak, rules: WorkloadRules) -> tuple[RuleViolation, ...]:
    if streak.length <= rules.max_consecutive_busy_days or streak.start is None:
        return ()
    return (
        RuleViolation(
            type=ViolationType.CONSECUTIVE_BUSY_DAYS,
            severity=_severity(streak.length, rules.max_consecutive_busy_days, CRITICAL_STREAK_MARGIN),
            title="Long Busy Streak",
            description=f"{streak.length} busy days in a row",
            metric=streak.length,
            threshold=rules.max_consecutive_busy_days,
            date=streak.start,
            recommendation="Schedule a lighter day or day off to recover.",
        ),
    )


def find_busy_streaks(days: list[tuple[date, bool]], rules: WorkloadRules) -> list[RuleViolation]:
    """
    Fold over (day, is_busy) pairs in order, emitting one violation per
    streak longer than the limit, dated at the streak's first day.
    """

    def step(acc, day_flag):
        streak, violations = acc
        day, busy = day_flag
        if busy:
            return Streak(streak.length + 1, streak.start or day), violations
        return Streak(), violations + _close_streak(streak, rules)

    final_streak, violations = reduce(step, days, (Streak(), ()))
    return list(violations + _close_streak(final_streak, rules))


def day_is_busy(events: list[CalendarEvent], day: date, rules: WorkloadRules) -> bool:
    """Busy or worse, judged against a percentage of the daily hour cap."""
    hours = work_minutes_for_day(events, day) / 60
    level = level_for_limit(hours, rules.max_hours_per_day, rules.warning_threshold_percent)
    return level in BUSY_LEVELS


def check_consecutive_busy_days(
    events: list[CalendarEvent], days: list[date], rules: WorkloadRules
) -> list[RuleViolation]:
    return find_busy_streaks([(day, day_is_busy(events, day, rules)) for day in days], rules)


# =============================================================================
# WEEKEND WORK
# =============================================================================


def check_weekend_work(events: list[CalendarEvent], days: list[date]) -> list[RuleViolation]:
    violations = []
    for day in days:
        if not is_weekend(day):
            continue
        hours = work_minutes_for_day(events, day) / 60
        if hours > WEEKEND_HOURS_LIMIT:
            day_name = day.strftime("%A")
            violations.append(
                RuleViolation(
                    type=ViolationType.WEEKEND_OVERWORK,
                    severity=Severity.INFO,
                    title="Weekend Work",
                    description=f"{hours:.1f} hours scheduled on {day_name}",
                    metric=hours,
                    threshold=WEEKEND_HOURS_LIMIT,
                    date=day,
                    recommendation="Balance work with rest time on weekends when possible.",
                )
            )
    return violations


# =============================================================================
# FULL EVALUATION
# =============================================================================


def default_date_range(today: date, week_starts_on: int = 0) -> tuple[date, date]:
    """This week plus next week."""
    return start_of_week(today, week_starts_on), end_of_week(today + timedelta(days=7), week_starts_on)


def evaluate(
    events: list[CalendarEvent],
    date_range: tuple[date, date] | None,
    rules: WorkloadRules,
    today: date | None = None,
    week_starts_on: int = 0,
) -> list[RuleViolation]:
    """
    Run every rule over the date range (inclusive).

    Order: per-day checks by day, weekly check, busy streaks, weekend work.
    """
    today = today or date.today()
    start, end = date_range or default_date_range(today, week_starts_on)
    days = each_day(start, end)

    violations = []
    for day in days:
        violations.extend(check_day(events, day, rules))
    violations.extend(check_week(events, today, rules, week_starts_on))
    violations.extend(check_consecutive_busy_days(events, days, rules))
    if rules.warn_on_weekend_work:
        violations.extend(check_weekend_work(events, days))
    return violations


# =============================================================================
# DASHBOARD INDICATORS
# =============================================================================


def burnout_indicators(
    events: list[CalendarEvent], settings: AppSettings, today: date | None = None
) -> BurnoutIndicators:
    """Current week's load judged against the weekly hour cap."""
    today = today or date.today()
    rules = settings.rules
    days = each_day(
        start_of_week(today, settings.week_starts_on), end_of_week(today, settings.week_starts_on)
    )

    busiest_day = None
    weekly_minutes = 0
    for day in days:
        minutes = work_minutes_for_day(events, day)
        weekly_minutes += minutes
        if busiest_day is None or minutes / 60 > busiest_day.hours:
            busiest_day = BusiestDay(date=day, hours=minutes / 60)

    weekly_hours = weekly_minutes / 60
    level = comfortable_if_idle(
        level_for_limit(weekly_hours, rules.max_hours_per_week, rules.warning_threshold_percent)
    )

    return BurnoutIndicators(
        is_high_load=level in (WorkloadLevel.HIGH, WorkloadLevel.BURNOUT),
        level=level,
        weekly_hours=weekly_hours,
        daily_average=weekly_hours / 7,
        busiest_day=busiest_day,
        message=INDICATOR_MESSAGES[level],
        color=workload_color(level),
    )


def threshold_status(hours: float, period: Period, rules: WorkloadRules) -> ThresholdStatus:
    """How close `hours` is to the daily or weekly cap."""
    limit = rules.max_hours_per_week if Period(period) == Period.WEEKLY else rules.max_hours_per_day
    level = comfortable_if_idle(level_for_limit(hours, limit, rules.warning_threshold_percent))

    return ThresholdStatus(
        level=level,
        percentage=min(hours / limit * 100, 100),
        remaining=max(limit - hours, 0),
        color=workload_color(level),
    )
