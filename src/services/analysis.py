"""
End-to-end schedule analysis: classify, aggregate, evaluate, score.
"""

from dataclasses import dataclass
from datetime import date

from models.events import CalendarEvent
from models.rules import BurnoutRisk, RuleViolation
from models.settings import AppSettings
from models.workload import Period, WorkloadMetrics, WorkloadSummary
from services.burnout import assess
from services.event_processor import classify_events
from services.rules_engine import evaluate
from services.workload import metrics_for_range, summarize_metrics, workload_summary


@dataclass
class AnalysisResult:
    """Everything derived from one batch of events."""

    start_date: date
    end_date: date
    events: list[CalendarEvent]
    daily_metrics: list[WorkloadMetrics]
    range_summary: WorkloadSummary
    weekly_summary: WorkloadSummary
    violations: list[RuleViolation]
    risk: BurnoutRisk

    @property
    def work_events(self) -> list[CalendarEvent]:
        return [e for e in self.events if e.is_work_event]


def analyze_schedule(
    events: list[CalendarEvent],
    start: date,
    end: date,
    settings: AppSettings,
    today: date | None = None,
) -> AnalysisResult:
    """
    Run the whole pipeline over [start, end] for a batch of raw events.

    Raises:
        ValueError: if end is before start
    """
    if end < start:
        raise ValueError(f"Date range end {end} is before start {start}")

    today = today or date.today()
    classified = classify_events(events)

    daily_metrics = metrics_for_range(start, end, classified, settings)
    violations = evaluate(
        classified,
        (start, end),
        settings.rules,
        today=today,
        week_starts_on=settings.week_starts_on,
    )
    risk = assess(violations, classified, settings, today=today)

    # Range summaries use the period whose bands best fit the range length
    span = (end - start).days + 1
    range_period = Period.DAILY if span == 1 else Period.WEEKLY if span <= 7 else Period.MONTHLY

    return AnalysisResult(
        start_date=start,
        end_date=end,
        events=classified,
        daily_metrics=daily_metrics,
        range_summary=summarize_metrics(range_period, daily_metrics, settings),
        weekly_summary=workload_summary(Period.WEEKLY, classified, settings, today),
        violations=violations,
        risk=risk,
    )
