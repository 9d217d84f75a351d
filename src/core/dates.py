"""
Date helpers: day windows, day iteration and week/month ranges.
"""

import calendar
from datetime import date, datetime, time, timedelta, tzinfo

# Last instant of a day, matching millisecond-resolution calendar clients
END_OF_DAY = time(23, 59, 59, 999000)


def day_bounds(day: date, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Return the [00:00:00.000, 23:59:59.999] window for a calendar day."""
    return (
        datetime.combine(day, time.min, tzinfo=tz),
        datetime.combine(day, END_OF_DAY, tzinfo=tz),
    )


def each_day(start: date, end: date) -> list[date]:
    """All calendar days from start to end, inclusive. Empty if end < start."""
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def js_weekday(day: date) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def start_of_week(day: date, week_starts_on: int = 0) -> date:
    return day - timedelta(days=(js_weekday(day) - week_starts_on) % 7)


def end_of_week(day: date, week_starts_on: int = 0) -> date:
    return start_of_week(day, week_starts_on) + timedelta(days=6)


def month_range(day: date) -> tuple[date, date]:
    _, last_day = calendar.monthrange(day.year, day.month)
    return day.replace(day=1), day.replace(day=last_day)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, rounded to the nearest minute."""
    return round((end - start).total_seconds() / 60)
