"""
Build the settings snapshot handed to the analysis engine.

This is the settings owner: values come from core.config (and therefore the
environment), and inconsistent values are rejected here before they can
reach the threshold mapper.
"""

from dataclasses import replace

from core.config import (
    DEFAULT_THRESHOLD_HOURS,
    INCLUDE_TRAVEL_TIME,
    MAX_CONSECUTIVE_BUSY_DAYS,
    MAX_HOURS_PER_DAY,
    MAX_HOURS_PER_WEEK,
    MAX_VISITS_PER_DAY,
    MIN_BREAK_MINUTES,
    TRAVEL_LEG_MINUTES,
    WARN_ON_WEEKEND_WORK,
    WARNING_THRESHOLD_PERCENT,
    WEEK_STARTS_ON,
)
from core.validation import validate_settings
from models.settings import AppSettings, WorkloadRules
from models.workload import FixedBands, WorkloadThresholds


def ensure_valid(settings: AppSettings) -> AppSettings:
    """
    Return settings unchanged if usable.

    Raises:
        ValueError: listing every problem, one per line
    """
    errors = validate_settings(settings)
    if errors:
        raise ValueError("Invalid workload settings:\n" + "\n".join(errors))
    return settings


def load_settings(**overrides) -> AppSettings:
    """
    Settings from configuration, with optional field overrides.

    Example:
        load_settings(include_travel_time=False)
    """
    thresholds = WorkloadThresholds(
        **{period: FixedBands(*hours) for period, hours in DEFAULT_THRESHOLD_HOURS.items()}
    )
    rules = WorkloadRules(
        max_visits_per_day=MAX_VISITS_PER_DAY,
        max_hours_per_day=MAX_HOURS_PER_DAY,
        max_hours_per_week=MAX_HOURS_PER_WEEK,
        max_consecutive_busy_days=MAX_CONSECUTIVE_BUSY_DAYS,
        min_break_minutes=MIN_BREAK_MINUTES,
        warn_on_weekend_work=WARN_ON_WEEKEND_WORK,
        warning_threshold_percent=WARNING_THRESHOLD_PERCENT,
    )
    settings = AppSettings(
        thresholds=thresholds,
        rules=rules,
        include_travel_time=INCLUDE_TRAVEL_TIME,
        travel_leg_minutes=TRAVEL_LEG_MINUTES,
        week_starts_on=WEEK_STARTS_ON,
    )
    return ensure_valid(replace(settings, **overrides))
