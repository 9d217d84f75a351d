"""
Tests for the end-to-end analysis pipeline.
"""

from datetime import date, timedelta

import pytest

from models.rules import ViolationType
from models.workload import Period
from services.analysis import analyze_schedule
from services.calendar import parse_events

MONDAY = date(2025, 1, 13)


class TestAnalyzeSchedule:
    def test_week_with_streak(self, work_block, no_travel_settings):
        events = [work_block(MONDAY + timedelta(days=i), 6) for i in range(6)]
        result = analyze_schedule(events, MONDAY, MONDAY + timedelta(days=6), no_travel_settings, today=MONDAY)

        assert len(result.daily_metrics) == 7
        assert len(result.work_events) == 6
        assert result.range_summary.period == Period.WEEKLY
        assert result.range_summary.total_work_hours == pytest.approx(36)
        assert result.weekly_summary.start_date == date(2025, 1, 12)
        assert ViolationType.CONSECUTIVE_BUSY_DAYS in {v.type for v in result.violations}
        assert result.risk.violations is result.violations
        assert result.risk.score >= 15

    def test_single_day_uses_daily_bands(self, settings):
        result = analyze_schedule([], MONDAY, MONDAY, settings, today=MONDAY)
        assert result.range_summary.period == Period.DAILY

    def test_long_range_uses_monthly_bands(self, settings):
        result = analyze_schedule([], date(2025, 1, 1), date(2025, 1, 31), settings, today=MONDAY)
        assert result.range_summary.period == Period.MONTHLY
        assert result.risk.score == 0

    def test_inverted_range_rejected(self, settings):
        with pytest.raises(ValueError):
            analyze_schedule([], MONDAY, MONDAY - timedelta(days=1), settings)

    def test_generated_month_holds_together(self, generated_raw_events, settings):
        events = parse_events(generated_raw_events)
        result = analyze_schedule(events, date(2025, 1, 1), date(2025, 1, 31), settings, today=MONDAY)

        assert len(result.daily_metrics) == 31
        for metrics in result.daily_metrics:
            assert metrics.work_minutes >= 0
            assert metrics.total_minutes == metrics.work_minutes + metrics.travel_minutes
        assert 0 <= result.risk.score <= 100
        assert all(e.is_work_event is not None for e in result.events)
