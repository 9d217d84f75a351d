"""
How many minutes of an event fall on a given day or inside a given range.

Overnight events are capped at 12 hours per day (or per range), so this must
be evaluated once per (event, day) pair; the cap does not apply to the
event's total length.
"""

from datetime import date, datetime

from core.config import OVERNIGHT_DAILY_CAP_MINUTES
from core.dates import day_bounds, minutes_between
from models.events import CalendarEvent
from services.event_processor import is_overnight_event


def _is_overnight(event: CalendarEvent) -> bool:
    if event.is_overnight_event is not None:
        return event.is_overnight_event
    return is_overnight_event(event)


def event_overlaps_range(event: CalendarEvent, range_start: datetime, range_end: datetime) -> bool:
    """Half-open overlap of [start, end) with [range_start, range_end]."""
    if event.end < event.start:
        return False
    return event.start <= range_end and event.end > range_start


def event_overlaps_day(event: CalendarEvent, day: date) -> bool:
    day_start, day_end = day_bounds(day, event.start.tzinfo)
    return event_overlaps_range(event, day_start, day_end)


def duration_in_range(event: CalendarEvent, range_start: datetime, range_end: datetime) -> int:
    """Minutes of the event inside the range, clipped and overnight-capped."""
    if not event_overlaps_range(event, range_start, range_end):
        return 0

    effective_start = max(event.start, range_start)
    effective_end = min(event.end, range_end)
    minutes = minutes_between(effective_start, effective_end)

    if _is_overnight(event):
        minutes = min(minutes, OVERNIGHT_DAILY_CAP_MINUTES)

    return max(0, minutes)


def duration_for_day(event: CalendarEvent, day: date) -> int:
    """Minutes of the event on one calendar day."""
    day_start, day_end = day_bounds(day, event.start.tzinfo)
    return duration_in_range(event, day_start, day_end)
