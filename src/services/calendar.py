"""
Calendar event parsing from Google Calendar API payloads and JSON exports.

Fetching (OAuth, paging) happens elsewhere; this module only turns already
fetched event dicts into CalendarEvent values. Timestamps are normalised to
naive wall-clock time: offset-aware values are converted to `tz` when one is
given (otherwise they keep their own offset's wall time) before the offset is
dropped, so one batch never mixes aware and naive datetimes.
"""

import json
from datetime import date, datetime, tzinfo
from pathlib import Path

from models.events import CalendarEvent


def parse_timestamp(value: dict | None, tz: tzinfo | None = None) -> tuple[datetime | None, bool]:
    """
    Parse a Google `start`/`end` object.

    Returns:
        (datetime, is_all_day). All-day entries carry a bare `date`.
    """
    if not value:
        return None, False
    if value.get("dateTime"):
        parsed = datetime.fromisoformat(value["dateTime"].replace("Z", "+00:00"))
        if parsed.tzinfo is not None and tz is not None:
            parsed = parsed.astimezone(tz)
        return parsed.replace(tzinfo=None), False
    if value.get("date"):
        day = date.fromisoformat(value["date"])
        return datetime(day.year, day.month, day.day), True
    return None, False


def parse_event(
    raw: dict, calendar_id: str = "primary", tz: tzinfo | None = None
) -> CalendarEvent | None:
    """Parse one raw event. Returns None for cancelled or undated entries."""
    status = raw.get("status") or "confirmed"
    if status == "cancelled":
        return None

    try:
        start, all_day = parse_timestamp(raw.get("start"), tz)
        end, _ = parse_timestamp(raw.get("end"), tz)
    except ValueError as e:
        print(f"  Skipping event {raw.get('id', '?')}: bad timestamp ({e})")
        return None

    if start is None or end is None:
        return None

    return CalendarEvent(
        id=str(raw.get("id", "")),
        calendar_id=raw.get("calendarId", calendar_id),
        title=raw.get("summary") or "",
        start=start,
        end=end,
        all_day=all_day,
        status=status,
        description=raw.get("description"),
        location=raw.get("location"),
    )


def parse_events(
    raw_events: list[dict], calendar_id: str = "primary", tz: tzinfo | None = None
) -> list[CalendarEvent]:
    events = []
    for raw in raw_events:
        parsed = parse_event(raw, calendar_id, tz)
        if parsed is not None:
            events.append(parsed)
    return events


def load_events_file(
    path: Path, calendar_id: str = "primary", tz: tzinfo | None = None
) -> list[CalendarEvent]:
    """
    Load events from a JSON export: either a list of events or a Google
    `events.list` response with an `items` array.
    """
    if not path.exists():
        raise FileNotFoundError(f"Events file not found: {path}")

    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    if isinstance(payload, dict):
        calendar_id = payload.get("calendarId", calendar_id)
        payload = payload.get("items", [])
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of events or an 'items' array in {path}")

    return parse_events(payload, calendar_id, tz)
