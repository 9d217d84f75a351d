"""
Tests for event classification: work vs personal, client names and service info.
"""

from datetime import datetime

import pytest

from core.patterns import CLASSIFICATION_PATTERNS, PERSONAL_PATTERNS, WORK_PATTERNS
from models.events import ServiceType
from services.event_processor import (
    classify,
    classify_events,
    ensure_classified,
    extract_client_name,
    extract_service_info,
    is_definitely_personal,
    is_overnight_event,
    is_work_event,
    match_title,
    matches_work_pattern,
    overnight_nights,
    service_type_label,
)


class TestPatternOrdering:
    def test_personal_patterns_come_first(self):
        personal_count = len(PERSONAL_PATTERNS)
        assert CLASSIFICATION_PATTERNS[:personal_count] == PERSONAL_PATTERNS
        assert CLASSIFICATION_PATTERNS[personal_count:] == WORK_PATTERNS
        assert all(not p.is_work for p in PERSONAL_PATTERNS)
        assert all(p.is_work for p in WORK_PATTERNS)


class TestIsWorkEvent:
    @pytest.mark.parametrize(
        "title",
        [
            "Fluffy - 30",
            "Buddy walk 30",
            "Rex HS",
            "Bella & Max - Overnight",
            "Max - MG",
            "Luna drop-in",
            "Mochi - nail trim",
        ],
    )
    def test_visit_titles_are_work(self, title):
        assert is_work_event(title) is True

    @pytest.mark.parametrize(
        "title",
        [
            "✨ off ✨",
            "Dentist",
            "Lunch with Max - 30",
            "Admin",
            "Gym",
            "Vacation",
            "Random errand",
        ],
    )
    def test_personal_titles_are_not_work(self, title):
        assert is_work_event(title) is False

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_empty_titles_are_personal(self, title):
        assert is_work_event(title) is False
        assert match_title(title) is None

    def test_pattern_group_checks(self):
        assert is_definitely_personal("Lunch with Max - 30") is True
        assert matches_work_pattern("Lunch with Max - 30") is True
        assert is_definitely_personal("Fluffy - 30") is False
        assert matches_work_pattern("Random errand") is False

    def test_personal_beats_work_when_both_match(self):
        pattern = match_title("Lunch with Max - 30")
        assert pattern is not None
        assert pattern.name == "meals"
        assert pattern.is_work is False


class TestClientName:
    def test_name_before_dash(self):
        assert extract_client_name("Fluffy & Max - 30") == "Fluffy & Max"

    def test_name_before_other_separator(self):
        assert extract_client_name("Biscuit 2 | 30") == "Biscuit 2"

    def test_whole_title_without_separator(self):
        assert extract_client_name("Buddy walk 30") == "Buddy walk 30"


class TestServiceInfo:
    def test_minutes_suffix_means_drop_in(self):
        info = extract_service_info("Fluffy - 30")
        assert info.type == ServiceType.DROP_IN
        assert info.duration == 30
        assert info.pet_name == "Fluffy"

    @pytest.mark.parametrize("minutes", [15, 20, 30, 45, 60])
    def test_every_recognised_suffix(self, minutes):
        title = f"Fluffy - {minutes}"
        info = extract_service_info(title)
        assert matches_work_pattern(title) is True
        assert info.type == ServiceType.DROP_IN
        assert info.duration == minutes

    def test_unlisted_number_is_not_a_duration(self):
        info = extract_service_info("Fluffy - 25")
        assert info.type == ServiceType.OTHER
        assert info.duration == 30

    def test_walk_with_minutes(self):
        info = extract_service_info("Buddy walk 45")
        assert info.type == ServiceType.WALK
        assert info.duration == 45

    def test_housesit_has_fixed_duration(self):
        info = extract_service_info("Rex HS 30")
        assert info.type == ServiceType.HOUSESIT
        assert info.duration == 24 * 60

    def test_overnight_has_fixed_duration(self):
        info = extract_service_info("Bella - Overnight")
        assert info.type == ServiceType.OVERNIGHT
        assert info.duration == 12 * 60

    def test_meet_and_greet_takes_precedence(self):
        info = extract_service_info("Max - MG walk")
        assert info.type == ServiceType.MEET_GREET
        assert info.duration == 30

    def test_nail_trim_defaults_to_thirty_minutes(self):
        info = extract_service_info("Mochi - nail trim")
        assert info.type == ServiceType.NAIL_TRIM
        assert info.duration == 30

    def test_unrecognised_service_is_other(self):
        info = extract_service_info("Pepper - checkup")
        assert info.type == ServiceType.OTHER
        assert info.duration == 30

    def test_labels(self):
        assert service_type_label(ServiceType.DROP_IN) == "Drop-In Visit"
        assert service_type_label(ServiceType.MEET_GREET) == "Meet & Greet"


class TestOvernight:
    def test_marker_in_title(self, make_event):
        event = make_event("Rex HS", datetime(2025, 1, 10, 9, 0), minutes=60)
        assert is_overnight_event(event) is True

    def test_long_event_crossing_midnight(self, make_event):
        event = make_event("Luna - sit", datetime(2025, 1, 10, 20, 0), minutes=10 * 60)
        assert is_overnight_event(event) is True

    def test_long_event_same_day_is_not_overnight(self, make_event):
        event = make_event("Luna - sit", datetime(2025, 1, 10, 7, 0), minutes=10 * 60)
        assert is_overnight_event(event) is False

    def test_short_event_crossing_midnight_is_not_overnight(self, make_event):
        event = make_event("Luna - 30", datetime(2025, 1, 10, 23, 45), minutes=30)
        assert is_overnight_event(event) is False

    def test_nights(self, make_event):
        stay = make_event("Rex - Overnight", datetime(2025, 1, 10, 18, 0), minutes=38 * 60)
        assert overnight_nights(stay) == 1
        short = make_event("Rex - 30", datetime(2025, 1, 10, 9, 0))
        assert overnight_nights(short) == 0


class TestClassify:
    def test_work_event_enriched_copy(self, make_event):
        event = make_event("Fluffy - 30", datetime(2025, 1, 13, 9, 0))
        classified = classify(event)

        assert classified is not event
        assert event.is_work_event is None
        assert classified.is_work_event is True
        assert classified.is_overnight_event is False
        assert classified.client_name == "Fluffy"
        assert classified.service_info.type == ServiceType.DROP_IN
        assert classified.service_info.duration == 30

    def test_personal_event_has_no_metadata(self, make_event):
        classified = classify(make_event("✨ off ✨", datetime(2025, 1, 13, 0, 0), minutes=24 * 60))
        assert classified.is_work_event is False
        assert classified.is_overnight_event is False
        assert classified.client_name is None
        assert classified.service_info is None

    def test_classification_is_idempotent(self, make_event):
        event = make_event("Buddy walk 30", datetime(2025, 1, 13, 9, 0))
        once = classify(event)
        assert classify(once) == once
        assert ensure_classified(once) is once

    def test_classify_events_preserves_order(self, make_event):
        events = [
            make_event("Dentist", datetime(2025, 1, 13, 9, 0)),
            make_event("Fluffy - 30", datetime(2025, 1, 13, 8, 0)),
        ]
        classified = classify_events(events)
        assert [e.id for e in classified] == [e.id for e in events]
        assert [e.is_work_event for e in classified] == [False, True]
