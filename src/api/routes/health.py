"""Health check endpoint."""

import sqlite3
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.models.responses import HealthResponse
from core.config import API_VERSION, DB_PATH

router = APIRouter()

REQUIRED_TABLES = {"api_requests", "api_request_details"}


def database_problem() -> str | None:
    """Return why request logging can't work, or None when it can."""
    if not DB_PATH.exists():
        return "Database not found; run scripts/init_db.py"

    conn = sqlite3.connect(DB_PATH)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
    except sqlite3.Error as e:
        return f"Database unreadable: {e}"
    finally:
        conn.close()

    missing = REQUIRED_TABLES - {row[0] for row in rows}
    if missing:
        return f"Database missing tables: {', '.join(sorted(missing))}"
    return None


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns 200 if the request-log database is ready, 503 otherwise.
    """
    problem = database_problem()
    timestamp = datetime.now(timezone.utc).isoformat()

    if problem is None:
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            database_available=True,
            timestamp=timestamp,
        )
    return JSONResponse(
        status_code=503,
        content=HealthResponse(
            status="unhealthy",
            version=API_VERSION,
            database_available=False,
            timestamp=timestamp,
            error=problem,
        ).model_dump(),
    )
