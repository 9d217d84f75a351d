"""Event classification and workload analysis endpoints."""

import asyncio
import sqlite3
import time
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import verify_api_key
from api.logging import RequestLog, log_request
from api.models.requests import (
    AnalyzeRequest,
    CheckRequest,
    ClassifyRequest,
    EventIn,
    resolve_settings,
)
from api.models.responses import (
    AnalyzeResponse,
    CheckResponse,
    ClassifyResponse,
    ErrorCodes,
    EventOut,
    IndicatorsOut,
    MetricsOut,
    RiskOut,
    SummaryOut,
    ViolationOut,
)
from core.config import MAX_EVENTS_PER_REQUEST
from core.validation import validate_events
from models.events import CalendarEvent
from services.analysis import analyze_schedule
from services.event_processor import classify, classify_events
from services.rules_engine import burnout_indicators, would_violate_rules

router = APIRouter(prefix="/v1")


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def _to_events(events_in: list[EventIn]) -> list[CalendarEvent]:
    if len(events_in) > MAX_EVENTS_PER_REQUEST:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail={
                "error": f"Request exceeds maximum of {MAX_EVENTS_PER_REQUEST} events",
                "code": ErrorCodes.TOO_MANY_EVENTS,
                "details": [f"Received: {len(events_in)} events"],
            },
        )
    return [event.to_event() for event in events_in]


@asynccontextmanager
async def logged_request(request: Request, event_count: int):
    """
    Time the request, map failures to the standard error format, and
    always write a RequestLog row.
    """
    start_time = time.time()
    request_log = RequestLog(
        endpoint=request.url.path,
        method=request.method,
        client_ip=get_client_ip(request),
        event_count=event_count,
    )

    try:
        yield request_log
        request_log.status_code = 200

    except HTTPException as e:
        request_log.status_code = e.status_code
        if isinstance(e.detail, dict):
            request_log.error_code = e.detail.get("code")
            request_log.error_message = e.detail.get("error")
            request_log.add_details("validation_error", e.detail.get("details", []))
        else:
            request_log.error_message = str(e.detail)
        raise

    except ValueError as e:
        # Settings or date range rejected by the engine
        error_msg = str(e)
        details = [d.strip() for d in error_msg.split("\n") if d.strip()]
        request_log.status_code = 422
        request_log.error_code = ErrorCodes.VALIDATION_ERROR
        request_log.error_message = error_msg
        request_log.add_details("validation_error", details)

        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail={
                "error": "Workload settings validation failed",
                "code": ErrorCodes.VALIDATION_ERROR,
                "details": details,
            },
        ) from e

    except Exception as e:
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Internal server error",
                "code": ErrorCodes.INTERNAL_ERROR,
                "details": [],
            },
        ) from e

    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        # A failed log write never fails the request
        try:
            log_request(request_log)
        except sqlite3.Error as e:
            print(f"Request log not written ({request_log.request_id}): {e}")


@router.post("/events/classify", response_model=ClassifyResponse)
async def classify_events_endpoint(
    request: Request,
    body: ClassifyRequest,
    _api_key: str = Depends(verify_api_key),
):
    """Classify events as work or personal and extract client/service details."""
    async with logged_request(request, len(body.events)) as request_log:
        events = _to_events(body.events)
        warnings = validate_events(events)
        request_log.add_details("event_warning", warnings)

        classified = await asyncio.to_thread(classify_events, events)

        return ClassifyResponse(
            events=[EventOut.model_validate(e) for e in classified],
            work_event_count=sum(1 for e in classified if e.is_work_event),
            warnings=warnings,
        )


def _analyze_in_thread(body: AnalyzeRequest, events: list[CalendarEvent]):
    settings = resolve_settings(body.settings)
    result = analyze_schedule(events, body.start_date, body.end_date, settings, today=body.today)
    indicators = burnout_indicators(result.events, settings, today=body.today)
    return result, indicators


@router.post("/workload/analyze", response_model=AnalyzeResponse)
async def analyze_workload_endpoint(
    request: Request,
    body: AnalyzeRequest,
    _api_key: str = Depends(verify_api_key),
):
    """
    Analyze a schedule over [start_date, end_date].

    Returns per-day metrics, range and weekly summaries, rule violations,
    the burnout risk score and this week's dashboard indicators.
    """
    async with logged_request(request, len(body.events)) as request_log:
        events = _to_events(body.events)
        warnings = validate_events(events)
        request_log.add_details("event_warning", warnings)

        result, indicators = await asyncio.to_thread(_analyze_in_thread, body, events)

        request_log.record_outcome(result.violations, result.risk)

        return AnalyzeResponse(
            start_date=result.start_date,
            end_date=result.end_date,
            daily_metrics=[MetricsOut.model_validate(m) for m in result.daily_metrics],
            range_summary=SummaryOut.model_validate(result.range_summary),
            weekly_summary=SummaryOut.model_validate(result.weekly_summary),
            violations=[ViolationOut.model_validate(v) for v in result.violations],
            risk=RiskOut.model_validate(result.risk),
            indicators=IndicatorsOut.model_validate(indicators),
            warnings=warnings,
        )


@router.post("/workload/check", response_model=CheckResponse)
async def check_booking_endpoint(
    request: Request,
    body: CheckRequest,
    _api_key: str = Depends(verify_api_key),
):
    """What-if check for a candidate booking against the day's limits."""
    async with logged_request(request, len(body.events) + 1) as request_log:
        events = _to_events(body.events)
        candidate = classify(body.candidate.to_event())
        rules = resolve_settings(body.settings).rules

        violations = await asyncio.to_thread(would_violate_rules, events, candidate, rules)
        request_log.record_outcome(violations)

        return CheckResponse(
            would_violate=bool(violations),
            violations=[ViolationOut.model_validate(v) for v in violations],
        )
