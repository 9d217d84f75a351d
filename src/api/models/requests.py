"""Pydantic request models for API endpoints."""

from dataclasses import replace
from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator

from core.config import MAX_RANGE_DAYS
from core.settings import load_settings
from models.events import CalendarEvent
from models.settings import AppSettings, WorkloadRules
from models.workload import FixedBands, WorkloadThresholds


class EventIn(BaseModel):
    """A raw calendar event. Offset-aware timestamps are reduced to wall-clock time."""

    id: str
    calendar_id: str = "primary"
    title: str = ""
    start: datetime
    end: datetime
    all_day: bool = False
    status: str = "confirmed"
    description: str | None = None
    location: str | None = None

    def to_event(self) -> CalendarEvent:
        return CalendarEvent(
            id=self.id,
            calendar_id=self.calendar_id,
            title=self.title,
            start=self.start.replace(tzinfo=None),
            end=self.end.replace(tzinfo=None),
            all_day=self.all_day,
            status=self.status,
            description=self.description,
            location=self.location,
        )


class BandsIn(BaseModel):
    comfortable: float = Field(gt=0)
    busy: float = Field(gt=0)
    high: float = Field(gt=0)

    @model_validator(mode="after")
    def check_ascending(self):
        if not self.comfortable < self.busy < self.high:
            raise ValueError(
                f"Thresholds must be strictly ascending "
                f"(comfortable {self.comfortable} < busy {self.busy} < high {self.high})"
            )
        return self

    def to_bands(self) -> FixedBands:
        return FixedBands(self.comfortable, self.busy, self.high)


class ThresholdsIn(BaseModel):
    daily: BandsIn | None = None
    weekly: BandsIn | None = None
    monthly: BandsIn | None = None


class RulesIn(BaseModel):
    max_visits_per_day: int | None = Field(default=None, gt=0)
    max_hours_per_day: float | None = Field(default=None, gt=0)
    max_hours_per_week: float | None = Field(default=None, gt=0)
    max_consecutive_busy_days: int | None = Field(default=None, gt=0)
    min_break_minutes: int | None = Field(default=None, ge=0)
    warn_on_weekend_work: bool | None = None
    warning_threshold_percent: float | None = Field(default=None, gt=50, lt=100)


class SettingsIn(BaseModel):
    """
    Partial settings. Anything omitted falls back to the server's configured
    defaults; the merged result is validated again by the settings owner.
    """

    thresholds: ThresholdsIn | None = None
    rules: RulesIn | None = None
    include_travel_time: bool | None = None
    travel_leg_minutes: int | None = Field(default=None, ge=0)
    week_starts_on: int | None = Field(default=None, ge=0, le=6)

    def to_settings(self) -> AppSettings:
        base = load_settings()

        thresholds: WorkloadThresholds = base.thresholds
        if self.thresholds:
            thresholds = replace(
                thresholds,
                **{
                    period: bands.to_bands()
                    for period, bands in (
                        ("daily", self.thresholds.daily),
                        ("weekly", self.thresholds.weekly),
                        ("monthly", self.thresholds.monthly),
                    )
                    if bands is not None
                },
            )

        rules: WorkloadRules = base.rules
        if self.rules:
            rules = replace(rules, **self.rules.model_dump(exclude_none=True))

        overrides = {
            key: value
            for key, value in (
                ("include_travel_time", self.include_travel_time),
                ("travel_leg_minutes", self.travel_leg_minutes),
                ("week_starts_on", self.week_starts_on),
            )
            if value is not None
        }
        return load_settings(thresholds=thresholds, rules=rules, **overrides)


def resolve_settings(settings: SettingsIn | None) -> AppSettings:
    return settings.to_settings() if settings else load_settings()


class ClassifyRequest(BaseModel):
    events: list[EventIn]


class AnalyzeRequest(BaseModel):
    events: list[EventIn]
    start_date: date
    end_date: date
    today: date | None = None
    settings: SettingsIn | None = None

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError(f"end_date {self.end_date} is before start_date {self.start_date}")
        span = (self.end_date - self.start_date).days + 1
        if span > MAX_RANGE_DAYS:
            raise ValueError(f"Date range spans {span} days (max: {MAX_RANGE_DAYS})")
        return self


class CheckRequest(BaseModel):
    """What-if: would booking `candidate` on top of `events` break a rule?"""

    events: list[EventIn]
    candidate: EventIn
    settings: SettingsIn | None = None
