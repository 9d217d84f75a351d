"""
Settings and event sanity checks.

These return human-readable problem messages instead of raising; the caller
decides whether a problem is fatal (settings) or informational (events).
"""

from models.events import CalendarEvent
from models.settings import AppSettings, WorkloadRules
from models.workload import FixedBands, Period, WorkloadThresholds


def validate_bands(bands: FixedBands, label: str) -> list[str]:
    """Check that a period's boundaries are positive and strictly ascending."""
    errors = []
    if bands.comfortable <= 0:
        errors.append(f"{label}: comfortable must be positive, got {bands.comfortable}")
    if bands.comfortable >= bands.busy:
        errors.append(
            f"{label}: comfortable ({bands.comfortable}) must be below busy ({bands.busy})"
        )
    if bands.busy >= bands.high:
        errors.append(f"{label}: busy ({bands.busy}) must be below high ({bands.high})")
    return errors


def validate_thresholds(thresholds: WorkloadThresholds) -> list[str]:
    errors = []
    for period in Period:
        errors.extend(validate_bands(thresholds.for_period(period), period.value))
    return errors


def validate_rules(rules: WorkloadRules) -> list[str]:
    errors = []
    if rules.max_visits_per_day < 1:
        errors.append(f"max_visits_per_day must be at least 1, got {rules.max_visits_per_day}")
    if rules.max_hours_per_day <= 0:
        errors.append(f"max_hours_per_day must be positive, got {rules.max_hours_per_day}")
    if rules.max_hours_per_week <= 0:
        errors.append(f"max_hours_per_week must be positive, got {rules.max_hours_per_week}")
    if rules.max_consecutive_busy_days < 1:
        errors.append(
            f"max_consecutive_busy_days must be at least 1, got {rules.max_consecutive_busy_days}"
        )
    if rules.min_break_minutes < 0:
        errors.append(f"min_break_minutes cannot be negative, got {rules.min_break_minutes}")
    # Percentage-derived bands need 50% < warning% < 100% to stay ascending
    if not 50 < rules.warning_threshold_percent < 100:
        errors.append(
            "warning_threshold_percent must be between 50 and 100 (exclusive), "
            f"got {rules.warning_threshold_percent}"
        )
    return errors


def validate_settings(settings: AppSettings) -> list[str]:
    """All problems with a settings snapshot; empty when it is usable."""
    errors = validate_thresholds(settings.thresholds) + validate_rules(settings.rules)
    if settings.travel_leg_minutes < 0:
        errors.append(f"travel_leg_minutes cannot be negative, got {settings.travel_leg_minutes}")
    if not 0 <= settings.week_starts_on <= 6:
        errors.append(f"week_starts_on must be 0-6, got {settings.week_starts_on}")
    return errors


def validate_events(events: list[CalendarEvent]) -> list[str]:
    """
    Describe malformed events.

    The engine already treats these safely (personal, zero minutes); the
    messages are surfaced so users can fix their calendar.
    """
    problems = []
    seen_ids: set[tuple[str, str]] = set()

    for event in events:
        label = event.title.strip() or event.id
        if not event.title.strip():
            problems.append(f"Event {event.id}: empty title, treated as personal")
        if event.end < event.start:
            problems.append(f"Event '{label}': ends before it starts, counted as 0 minutes")
        elif event.end == event.start and not event.all_day:
            problems.append(f"Event '{label}': zero-length")

        key = (event.calendar_id, event.id)
        if key in seen_ids:
            problems.append(f"Event '{label}': duplicate id {event.id} in calendar {event.calendar_id}")
        seen_ids.add(key)

    return problems
