"""SQLite request logging for the workload API."""

import sqlite3
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from core.config import DB_PATH
from models.rules import BurnoutRisk, RuleViolation

DETAIL_TYPES = ("validation_error", "event_warning", "warning")


@dataclass
class RequestLog:
    """One API call: who asked, how many events, and what the engine found."""

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    event_count: int | None = None
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0
    violation_count: int | None = None
    risk_score: int | None = None
    details: list[tuple[str, str]] = field(default_factory=list)

    def add_details(self, detail_type: str, messages: Iterable[str]) -> None:
        if detail_type not in DETAIL_TYPES:
            raise ValueError(f"Unknown detail type: {detail_type}")
        self.details.extend((detail_type, message) for message in messages)

    def record_outcome(
        self, violations: list[RuleViolation], risk: BurnoutRisk | None = None
    ) -> None:
        self.violation_count = len(violations)
        if risk is not None:
            self.risk_score = risk.score


def log_request(log: RequestLog) -> None:
    """Write one api_requests row plus its api_request_details rows."""
    conn = sqlite3.connect(DB_PATH)
    try:
        with conn:
            conn.execute(
                """
                INSERT INTO api_requests (
                    request_id, timestamp, endpoint, method, client_ip,
                    event_count, status_code, error_code, error_message,
                    processing_time_ms, violation_count, risk_score
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    log.request_id,
                    log.timestamp,
                    log.endpoint,
                    log.method,
                    log.client_ip,
                    log.event_count,
                    log.status_code,
                    log.error_code,
                    log.error_message,
                    log.processing_time_ms,
                    log.violation_count,
                    log.risk_score,
                ),
            )
            conn.executemany(
                "INSERT INTO api_request_details (request_id, detail_type, message) VALUES (?, ?, ?)",
                [(log.request_id, detail_type, message) for detail_type, message in log.details],
            )
    finally:
        conn.close()
