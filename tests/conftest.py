"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

# Add src (and the fixture generators) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent / "fixtures"))

from generate_events import generate_events  # noqa: E402

from models.events import CalendarEvent  # noqa: E402
from models.settings import AppSettings  # noqa: E402


# Wednesday; its Sunday-start week runs 2025-01-12 .. 2025-01-18
REFERENCE_DAY = date(2025, 1, 15)


@pytest.fixture
def make_event():
    """Factory for CalendarEvent values with sensible defaults."""
    counter = {"n": 0}

    def _make(
        title: str,
        start: datetime,
        minutes: int = 30,
        end: datetime | None = None,
        **kwargs,
    ) -> CalendarEvent:
        counter["n"] += 1
        return CalendarEvent(
            id=kwargs.pop("id", f"evt-{counter['n']}"),
            calendar_id=kwargs.pop("calendar_id", "primary"),
            title=title,
            start=start,
            end=end or start + timedelta(minutes=minutes),
            **kwargs,
        )

    return _make


@pytest.fixture
def visits_on(make_event):
    """`count` back-to-back 30 minute drop-ins starting at 8am on `day`."""

    def _visits(day: date, count: int, minutes: int = 30, pet: str = "Fluffy") -> list[CalendarEvent]:
        first = datetime(day.year, day.month, day.day, 8, 0)
        return [
            make_event(f"{pet} - 30", first + timedelta(minutes=minutes * i), minutes=minutes)
            for i in range(count)
        ]

    return _visits


@pytest.fixture
def work_block(make_event):
    """One work event of `hours` starting at 7am on `day`."""

    def _block(day: date, hours: float, title: str = "Rex - walk") -> CalendarEvent:
        return make_event(title, datetime(day.year, day.month, day.day, 7, 0), minutes=int(hours * 60))

    return _block


@pytest.fixture
def settings():
    return AppSettings()


@pytest.fixture
def no_travel_settings():
    return AppSettings(include_travel_time=False)


@pytest.fixture
def reference_day():
    return REFERENCE_DAY


@pytest.fixture
def generated_raw_events():
    """A seeded month of raw Google-style events."""
    return generate_events(date(2025, 1, 1), days=31, seed=42)
