"""
Event classification: work vs personal, client name and service metadata.

All functions are pure and never raise on odd titles; anything that cannot
be recognised is treated as personal time.
"""

from dataclasses import replace

from core.config import (
    CLIENT_NAME_SEPARATORS,
    DEFAULT_VISIT_MINUTES,
    HOUSESIT_MINUTES,
    OVERNIGHT_MIN_HOURS,
    OVERNIGHT_MINUTES,
)
from core.dates import minutes_between
from core.patterns import (
    CLASSIFICATION_PATTERNS,
    CLIENT_PREFIX,
    DROP_IN,
    HOUSESIT,
    MEET_AND_GREET,
    MINUTES_SUFFIX,
    NAIL_TRIM,
    OVERNIGHT,
    PERSONAL_PATTERNS,
    WALK,
    WORK_PATTERNS,
    TitlePattern,
)
from models.events import CalendarEvent, ServiceInfo, ServiceType

SERVICE_TYPE_LABELS = {
    ServiceType.DROP_IN: "Drop-In Visit",
    ServiceType.WALK: "Walk",
    ServiceType.OVERNIGHT: "Overnight",
    ServiceType.HOUSESIT: "Housesit",
    ServiceType.MEET_GREET: "Meet & Greet",
    ServiceType.NAIL_TRIM: "Nail Trim",
    ServiceType.OTHER: "Other",
}

# Service type precedence when several markers appear in one title
SERVICE_TYPE_PATTERNS = (
    (MEET_AND_GREET, ServiceType.MEET_GREET),
    (HOUSESIT, ServiceType.HOUSESIT),
    (OVERNIGHT, ServiceType.OVERNIGHT),
    (NAIL_TRIM, ServiceType.NAIL_TRIM),
    (WALK, ServiceType.WALK),
    (DROP_IN, ServiceType.DROP_IN),
)

FIXED_SERVICE_MINUTES = {
    ServiceType.HOUSESIT: HOUSESIT_MINUTES,
    ServiceType.OVERNIGHT: OVERNIGHT_MINUTES,
}


def match_title(title: str | None) -> TitlePattern | None:
    """First pattern in CLASSIFICATION_PATTERNS matching the title, if any."""
    if not title or not title.strip():
        return None
    for pattern in CLASSIFICATION_PATTERNS:
        if pattern.matches(title):
            return pattern
    return None


def is_definitely_personal(title: str) -> bool:
    return any(pattern.matches(title) for pattern in PERSONAL_PATTERNS)


def matches_work_pattern(title: str) -> bool:
    return any(pattern.matches(title) for pattern in WORK_PATTERNS)


def is_work_event(title: str | None) -> bool:
    """True when the title reads like a pet-sitting visit."""
    pattern = match_title(title)
    return pattern is not None and pattern.is_work


def is_overnight_event(event: CalendarEvent) -> bool:
    """
    Housesit/overnight marker in the title, or a long stay (8h+) that
    crosses midnight.
    """
    title = event.title or ""
    if HOUSESIT.matches(title) or OVERNIGHT.matches(title):
        return True

    duration_hours = minutes_between(event.start, event.end) / 60
    return duration_hours >= OVERNIGHT_MIN_HOURS and event.start.date() != event.end.date()


def overnight_nights(event: CalendarEvent) -> int:
    """Number of nights for an overnight event (at least 1), 0 otherwise."""
    if not is_overnight_event(event):
        return 0
    nights = int((event.end - event.start).total_seconds() // (24 * 60 * 60))
    return max(1, nights)


def extract_client_name(title: str) -> str:
    """
    Client/pet name from the title.

    "Fluffy & Max - 30" -> "Fluffy & Max"; otherwise the text before the
    first known separator; otherwise the whole title.
    """
    match = CLIENT_PREFIX.regex.match(title)
    if match:
        return match.group(1).strip()

    for separator in CLIENT_NAME_SEPARATORS:
        idx = title.find(separator)
        if idx > 0:
            return title[:idx].strip()

    return title.strip()


def extract_service_info(title: str) -> ServiceInfo:
    """Service type and expected duration for a work event title."""
    duration = DEFAULT_VISIT_MINUTES
    minutes_match = MINUTES_SUFFIX.regex.search(title)
    if minutes_match:
        duration = int(minutes_match.group(1))

    service_type = ServiceType.OTHER
    for pattern, candidate in SERVICE_TYPE_PATTERNS:
        if pattern.matches(title):
            service_type = candidate
            break
    else:
        if minutes_match:
            service_type = ServiceType.DROP_IN

    duration = FIXED_SERVICE_MINUTES.get(service_type, duration)

    return ServiceInfo(
        type=service_type,
        duration=duration,
        pet_name=extract_client_name(title),
    )


def classify(event: CalendarEvent) -> CalendarEvent:
    """Return a copy of the event with work/overnight flags and metadata set."""
    if not is_work_event(event.title):
        return replace(
            event,
            is_work_event=False,
            is_overnight_event=False,
            client_name=None,
            service_info=None,
        )

    return replace(
        event,
        is_work_event=True,
        is_overnight_event=is_overnight_event(event),
        client_name=extract_client_name(event.title),
        service_info=extract_service_info(event.title),
    )


def classify_events(events: list[CalendarEvent]) -> list[CalendarEvent]:
    return [classify(event) for event in events]


def ensure_classified(event: CalendarEvent) -> CalendarEvent:
    """Classify only if the event has not been classified yet."""
    if event.is_work_event is None:
        return classify(event)
    return event


def service_type_label(service_type: ServiceType) -> str:
    return SERVICE_TYPE_LABELS.get(service_type, "Other")
