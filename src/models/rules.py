"""
Rule violations and burnout assessment results.
"""

from dataclasses import dataclass
import datetime as dt
from enum import Enum

from models.workload import BusiestDay, WorkloadLevel


class ViolationType(str, Enum):
    MAX_VISITS_DAY = "max-visits-day"
    MAX_HOURS_DAY = "max-hours-day"
    MAX_HOURS_WEEK = "max-hours-week"
    CONSECUTIVE_BUSY_DAYS = "consecutive-busy-days"
    WEEKEND_OVERWORK = "weekend-overwork"


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class RuleViolation:
    """One way a schedule exceeds a configured limit."""

    type: ViolationType
    severity: Severity
    title: str
    description: str
    metric: float
    threshold: float
    date: dt.date | None = None
    recommendation: str | None = None


@dataclass(frozen=True)
class BurnoutRisk:
    """Aggregate burnout score (0-100) with the violations behind it."""

    level: RiskLevel
    score: int
    factors: list[str]
    violations: list[RuleViolation]


@dataclass(frozen=True)
class BurnoutIndicators:
    """Dashboard view of the current week."""

    is_high_load: bool
    level: WorkloadLevel
    weekly_hours: float
    daily_average: float
    busiest_day: BusiestDay | None
    message: str
    color: str


@dataclass(frozen=True)
class ThresholdStatus:
    level: WorkloadLevel
    percentage: float
    remaining: float
    color: str
