"""API Pydantic models."""

from .requests import AnalyzeRequest, CheckRequest, ClassifyRequest, EventIn, SettingsIn
from .responses import (
    AnalyzeResponse,
    CheckResponse,
    ClassifyResponse,
    ErrorCodes,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "CheckRequest",
    "CheckResponse",
    "ClassifyRequest",
    "ClassifyResponse",
    "ErrorCodes",
    "ErrorResponse",
    "EventIn",
    "HealthResponse",
    "SettingsIn",
]
