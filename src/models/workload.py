"""
Workload levels, threshold sources and aggregated workload figures.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class WorkloadLevel(str, Enum):
    """Discrete workload band. NONE only applies to days with no work."""

    NONE = "none"
    COMFORTABLE = "comfortable"
    BUSY = "busy"
    HIGH = "high"
    BURNOUT = "burnout"


class Period(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


# Levels that count toward a busy streak
BUSY_LEVELS = frozenset({WorkloadLevel.BUSY, WorkloadLevel.HIGH, WorkloadLevel.BURNOUT})


@dataclass(frozen=True)
class FixedBands:
    """Three ascending hour boundaries; anything above `high` is burnout."""

    comfortable: float
    busy: float
    high: float


@dataclass(frozen=True)
class PercentageOfLimit:
    """Bands derived from a single hour cap and a warning percentage."""

    limit: float
    warning_percent: float = 80

    def bands(self) -> FixedBands:
        return FixedBands(
            comfortable=self.limit * 0.5,
            busy=self.limit * self.warning_percent / 100,
            high=self.limit,
        )


ThresholdSource = FixedBands | PercentageOfLimit


@dataclass(frozen=True)
class WorkloadThresholds:
    """Fixed bands per period (hours)."""

    daily: FixedBands = field(default_factory=lambda: FixedBands(4, 6, 8))
    weekly: FixedBands = field(default_factory=lambda: FixedBands(25, 35, 45))
    monthly: FixedBands = field(default_factory=lambda: FixedBands(100, 140, 180))

    def for_period(self, period: Period) -> FixedBands:
        return getattr(self, Period(period).value)


@dataclass(frozen=True)
class WorkloadMetrics:
    """Workload figures for a single calendar day (minutes)."""

    date: date
    work_minutes: int
    travel_minutes: int
    total_minutes: int
    event_count: int
    level: WorkloadLevel

    @property
    def total_hours(self) -> float:
        return self.total_minutes / 60


@dataclass(frozen=True)
class BusiestDay:
    date: date
    hours: float


@dataclass(frozen=True)
class WorkloadSummary:
    """Aggregated workload for a day, week or month."""

    period: Period
    start_date: date
    end_date: date
    total_work_hours: float
    total_travel_hours: float
    average_daily_hours: float
    busiest_day: BusiestDay
    level: WorkloadLevel
    event_count: int
