"""
Settings snapshot read by the analysis engine.

The engine never writes settings; callers build one of these (see
core.settings.load_settings) and pass it into every call.
"""

from dataclasses import dataclass, field

from models.workload import WorkloadThresholds


@dataclass(frozen=True)
class WorkloadRules:
    """Configurable limits for the rules engine."""

    max_visits_per_day: int = 8
    max_hours_per_day: float = 10
    max_hours_per_week: float = 50
    max_consecutive_busy_days: int = 5
    min_break_minutes: int = 30
    warn_on_weekend_work: bool = True
    warning_threshold_percent: float = 80


@dataclass(frozen=True)
class AppSettings:
    thresholds: WorkloadThresholds = field(default_factory=WorkloadThresholds)
    rules: WorkloadRules = field(default_factory=WorkloadRules)
    include_travel_time: bool = True
    travel_leg_minutes: int = 15
    week_starts_on: int = 0  # 0 = Sunday ... 6 = Saturday


DEFAULT_SETTINGS = AppSettings()
