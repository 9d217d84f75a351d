"""
Burnout risk scoring.

Combines rule violations with the current week's fixed-band workload level
into a 0-100 score, a risk level and a list of contributing factors.
"""

from datetime import date

from core.config import (
    BUSY_STREAK_POINTS,
    CRITICAL_VIOLATION_POINTS,
    RISK_LEVEL_CUTOFFS,
    WARNING_VIOLATION_POINTS,
    WEEKLY_BURNOUT_POINTS,
    WEEKLY_HIGH_POINTS,
)
from models.events import CalendarEvent
from models.rules import BurnoutRisk, RiskLevel, RuleViolation, Severity, ViolationType
from models.settings import AppSettings
from models.workload import Period, WorkloadLevel
from services.workload import workload_summary


def risk_level_for(score: int) -> RiskLevel:
    for level, cutoff in RISK_LEVEL_CUTOFFS:
        if score >= cutoff:
            return RiskLevel(level)
    return RiskLevel.LOW


def assess(
    violations: list[RuleViolation],
    events: list[CalendarEvent],
    settings: AppSettings,
    today: date | None = None,
) -> BurnoutRisk:
    """Score burnout risk. `violations` is carried through as given."""
    factors = []
    score = 0

    critical_count = sum(1 for v in violations if v.severity == Severity.CRITICAL)
    warning_count = sum(1 for v in violations if v.severity == Severity.WARNING)

    score += critical_count * CRITICAL_VIOLATION_POINTS
    score += warning_count * WARNING_VIOLATION_POINTS

    if critical_count > 0:
        factors.append("Multiple critical workload violations")
    if warning_count > 2:
        factors.append("Several workload warnings")

    weekly = workload_summary(Period.WEEKLY, events, settings, today or date.today())
    if weekly.level == WorkloadLevel.BURNOUT:
        score += WEEKLY_BURNOUT_POINTS
        factors.append("Weekly hours exceed high threshold")
    elif weekly.level == WorkloadLevel.HIGH:
        score += WEEKLY_HIGH_POINTS
        factors.append("Heavy weekly schedule")

    if any(v.type == ViolationType.CONSECUTIVE_BUSY_DAYS for v in violations):
        score += BUSY_STREAK_POINTS
        factors.append("Extended periods without rest")

    score = max(0, min(score, 100))

    return BurnoutRisk(
        level=risk_level_for(score),
        score=score,
        factors=factors,
        violations=violations,
    )
