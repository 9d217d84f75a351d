#!/usr/bin/env python3
"""
Generate a month of pet-sitting calendar events as a Google Calendar export.

The output (`events.json`, an `events.list`-style payload with an `items`
array) can be fed to the weekly/monthly report scripts, and the generator is
also used by the test suite through `generate_events()`.
"""

import json
import random
from datetime import date, datetime, timedelta
from pathlib import Path

from faker import Faker

OUTPUT_FILE = Path(__file__).parent / "events.json"

PET_NAMES = [
    "Fluffy",
    "Biscuit",
    "Luna",
    "Rex",
    "Mochi",
    "Pepper",
    "Ziggy",
    "Waffles",
    "Nala",
    "Copper",
    "Pickles",
    "Juniper",
]

# Title templates per service, filled with a pet name
VISIT_TEMPLATES = {
    "drop_in": ["{pet} - 30", "{pet} - 15", "{pet} - 45", "{pet} drop-in"],
    "walk": ["{pet} walk 30", "{pet} - walk 60", "{pet} walking 45"],
    "meet_greet": ["{pet} - M&G", "{pet} Meet & Greet"],
    "nail_trim": ["{pet} - nail trim"],
}
VISIT_MINUTES = {
    "drop_in": [15, 30, 45],
    "walk": [30, 45, 60],
    "meet_greet": [30],
    "nail_trim": [15, 20],
}

PERSONAL_TITLES = [
    "✨ off ✨",
    "Dentist",
    "Lunch with Sam",
    "Admin",
    "Gym",
    "Blocked",
]


def _timed(start: datetime, end: datetime) -> dict:
    return {"start": {"dateTime": start.isoformat()}, "end": {"dateTime": end.isoformat()}}


def generate_event(fake: Faker, title: str, start: datetime, end: datetime, location: str | None = None) -> dict:
    """Generate a single raw Google Calendar event."""
    event = {
        "id": fake.uuid4(),
        "summary": title,
        "status": "confirmed",
        **_timed(start, end),
    }
    if location:
        event["location"] = location
    return event


def generate_day(fake: Faker, rng: random.Random, day: date, clients: dict[str, str]) -> list[dict]:
    """Visits for one day between 7am and 8pm, sometimes with a personal block."""
    events = []
    current = datetime(day.year, day.month, day.day, 7, 0)
    day_end = datetime(day.year, day.month, day.day, 20, 0)
    visit_count = rng.randint(0, 9)

    for _ in range(visit_count):
        service = rng.choices(
            ["drop_in", "walk", "meet_greet", "nail_trim"],
            weights=[0.6, 0.3, 0.05, 0.05],
            k=1,
        )[0]
        pet = rng.choice(list(clients))
        minutes = rng.choice(VISIT_MINUTES[service])
        end = current + timedelta(minutes=minutes)
        if end > day_end:
            break

        title = rng.choice(VISIT_TEMPLATES[service]).format(pet=pet)
        events.append(generate_event(fake, title, current, end, clients[pet]))
        current = end + timedelta(minutes=rng.choice([15, 30, 60, 90]))

    if rng.random() < 0.2:
        block_start = datetime(day.year, day.month, day.day, 12, 0)
        events.append(
            generate_event(fake, rng.choice(PERSONAL_TITLES), block_start, block_start + timedelta(hours=1))
        )

    return events


def generate_events(start: date, days: int = 30, seed: int | None = None) -> list[dict]:
    """
    Generate raw events for `days` days from `start`, plus one overnight stay
    and one all-day day off.
    """
    fake = Faker()
    rng = random.Random(seed)
    if seed is not None:
        Faker.seed(seed)

    clients = {pet: fake.street_address() for pet in PET_NAMES}
    events = []
    for offset in range(days):
        events.extend(generate_day(fake, rng, start + timedelta(days=offset), clients))

    # One overnight stay crossing two midnights
    stay_start = datetime(start.year, start.month, start.day, 18, 0) + timedelta(days=min(3, days - 1))
    events.append(
        generate_event(
            fake,
            f"{rng.choice(PET_NAMES)} - Overnight",
            stay_start,
            stay_start + timedelta(hours=38),
            clients[PET_NAMES[0]],
        )
    )

    day_off = start + timedelta(days=min(5, days - 1))
    events.append(
        {
            "id": fake.uuid4(),
            "summary": "✨ off ✨",
            "status": "confirmed",
            "start": {"date": day_off.isoformat()},
            "end": {"date": (day_off + timedelta(days=1)).isoformat()},
        }
    )

    return events


def main():
    today = date.today()
    events = generate_events(today.replace(day=1), days=30)

    with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
        json.dump({"calendarId": "primary", "items": events}, f, indent=2, ensure_ascii=False)

    print(f"Generated {len(events)} events")
    print(f"Saved to: {OUTPUT_FILE}")


if __name__ == "__main__":
    main()
