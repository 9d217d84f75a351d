"""Pydantic response models for API endpoints."""

import datetime as dt

from pydantic import BaseModel, ConfigDict

from models.events import ServiceType
from models.rules import RiskLevel, Severity, ViolationType
from models.workload import Period, WorkloadLevel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    database_available: bool
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    TOO_MANY_EVENTS = "TOO_MANY_EVENTS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# DOMAIN VIEWS (built from the engine's dataclasses)
# =============================================================================


class _FromAttributes(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ServiceInfoOut(_FromAttributes):
    type: ServiceType
    duration: int
    pet_name: str | None = None


class EventOut(_FromAttributes):
    id: str
    calendar_id: str
    title: str
    start: dt.datetime
    end: dt.datetime
    all_day: bool
    location: str | None = None
    is_work_event: bool | None = None
    is_overnight_event: bool | None = None
    client_name: str | None = None
    service_info: ServiceInfoOut | None = None


class MetricsOut(_FromAttributes):
    date: dt.date
    work_minutes: int
    travel_minutes: int
    total_minutes: int
    event_count: int
    level: WorkloadLevel


class BusiestDayOut(_FromAttributes):
    date: dt.date
    hours: float


class SummaryOut(_FromAttributes):
    period: Period
    start_date: dt.date
    end_date: dt.date
    total_work_hours: float
    total_travel_hours: float
    average_daily_hours: float
    busiest_day: BusiestDayOut
    level: WorkloadLevel
    event_count: int


class ViolationOut(_FromAttributes):
    type: ViolationType
    severity: Severity
    title: str
    description: str
    metric: float
    threshold: float
    date: dt.date | None = None
    recommendation: str | None = None


class RiskOut(_FromAttributes):
    level: RiskLevel
    score: int
    factors: list[str]


class IndicatorsOut(_FromAttributes):
    is_high_load: bool
    level: WorkloadLevel
    weekly_hours: float
    daily_average: float
    busiest_day: BusiestDayOut | None = None
    message: str
    color: str


# =============================================================================
# ENDPOINT RESPONSES
# =============================================================================


class ClassifyResponse(BaseModel):
    events: list[EventOut]
    work_event_count: int
    warnings: list[str] = []


class AnalyzeResponse(BaseModel):
    start_date: dt.date
    end_date: dt.date
    daily_metrics: list[MetricsOut]
    range_summary: SummaryOut
    weekly_summary: SummaryOut
    violations: list[ViolationOut]
    risk: RiskOut
    indicators: IndicatorsOut
    warnings: list[str] = []


class CheckResponse(BaseModel):
    would_violate: bool
    violations: list[ViolationOut]
