"""
Map an hours figure onto a workload level.

Two threshold sources are supported: fixed three-tier bands (one set per
period) and bands derived from a single hour cap. Both go through level_for
so the boundary arithmetic lives in one place. Boundaries are assumed to be
ascending; callers are expected to validate them (see core.validation).
"""

from models.workload import (
    FixedBands,
    PercentageOfLimit,
    Period,
    ThresholdSource,
    WorkloadLevel,
    WorkloadThresholds,
)


def resolve_bands(source: ThresholdSource) -> FixedBands:
    if isinstance(source, PercentageOfLimit):
        return source.bands()
    return source


def level_for(hours: float, source: ThresholdSource) -> WorkloadLevel:
    """
    Return the workload level for `hours`.

    A boundary value belongs to the lower band, so exactly `busy` hours is
    BUSY, not HIGH. Zero or negative hours is NONE.
    """
    if hours <= 0:
        return WorkloadLevel.NONE

    bands = resolve_bands(source)
    if hours <= bands.comfortable:
        return WorkloadLevel.COMFORTABLE
    if hours <= bands.busy:
        return WorkloadLevel.BUSY
    if hours <= bands.high:
        return WorkloadLevel.HIGH
    return WorkloadLevel.BURNOUT


def level_for_period(
    hours: float, period: Period, thresholds: WorkloadThresholds
) -> WorkloadLevel:
    """Level under the fixed bands configured for a period."""
    return level_for(hours, thresholds.for_period(period))


def level_for_limit(hours: float, limit: float, warning_percent: float) -> WorkloadLevel:
    """Level under bands derived from a single hour cap."""
    return level_for(hours, PercentageOfLimit(limit=limit, warning_percent=warning_percent))


def comfortable_if_idle(level: WorkloadLevel) -> WorkloadLevel:
    """NONE is a display-only level; metrics and summaries report idle time as COMFORTABLE."""
    return WorkloadLevel.COMFORTABLE if level == WorkloadLevel.NONE else level
