"""
Data models for calendar events and the visit metadata derived from them.

Events are immutable; classification returns an enriched copy rather than
mutating the event it was given.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ServiceType(str, Enum):
    """Kind of pet-sitting visit, inferred from the event title."""

    DROP_IN = "drop-in"
    WALK = "walk"
    OVERNIGHT = "overnight"
    HOUSESIT = "housesit"
    MEET_GREET = "meet-greet"
    NAIL_TRIM = "nail-trim"
    OTHER = "other"


@dataclass(frozen=True)
class ServiceInfo:
    """Service metadata parsed from a work event title."""

    type: ServiceType
    duration: int  # minutes
    pet_name: str | None = None


@dataclass(frozen=True)
class CalendarEvent:
    """
    A calendar entry as supplied by the calendar source.

    The last four fields are filled in by the classifier; None means the
    event has not been classified yet.
    """

    id: str
    calendar_id: str
    title: str
    start: datetime
    end: datetime
    all_day: bool = False
    status: str = "confirmed"
    description: str | None = None
    location: str | None = None
    is_work_event: bool | None = None
    is_overnight_event: bool | None = None
    client_name: str | None = None
    service_info: ServiceInfo | None = None
