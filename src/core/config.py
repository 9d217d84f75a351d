"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = Path(os.environ.get("WORKLOAD_DB_PATH", PROJECT_ROOT / "data" / "db" / "workload.db"))
OUTPUT_DIR = PROJECT_ROOT / "output"

# =============================================================================
# CALENDAR CONFIGURATION
# =============================================================================

# IANA zone that aware timestamps are converted to, e.g. "America/New_York".
# Empty keeps each timestamp's own offset.
CALENDAR_TIMEZONE = os.environ.get("CALENDAR_TIMEZONE", "")
DEFAULT_CALENDAR_ID = os.environ.get("DEFAULT_CALENDAR_ID", "primary")

# =============================================================================
# VISIT METERING
# =============================================================================

TRAVEL_LEG_MINUTES = 15
OVERNIGHT_DAILY_CAP_MINUTES = 12 * 60
OVERNIGHT_MIN_HOURS = 8

DEFAULT_VISIT_MINUTES = 30
HOUSESIT_MINUTES = 24 * 60
OVERNIGHT_MINUTES = 12 * 60

# Separators tried (in order) when a title has no "Name - " prefix
CLIENT_NAME_SEPARATORS = (" - ", " – ", " — ", " | ", " @ ")

# =============================================================================
# RULE LIMITS
# =============================================================================

WEEKEND_HOURS_LIMIT = 4
CRITICAL_VISITS_MARGIN = 2
CRITICAL_DAILY_HOURS_MARGIN = 2
CRITICAL_WEEKLY_HOURS_MARGIN = 10
CRITICAL_STREAK_MARGIN = 2

MAX_VISITS_PER_DAY = int(os.environ.get("MAX_VISITS_PER_DAY", "8"))
MAX_HOURS_PER_DAY = float(os.environ.get("MAX_HOURS_PER_DAY", "10"))
MAX_HOURS_PER_WEEK = float(os.environ.get("MAX_HOURS_PER_WEEK", "50"))
MAX_CONSECUTIVE_BUSY_DAYS = int(os.environ.get("MAX_CONSECUTIVE_BUSY_DAYS", "5"))
MIN_BREAK_MINUTES = int(os.environ.get("MIN_BREAK_MINUTES", "30"))
WARN_ON_WEEKEND_WORK = os.environ.get("WARN_ON_WEEKEND_WORK", "true").lower() == "true"
WARNING_THRESHOLD_PERCENT = float(os.environ.get("WARNING_THRESHOLD_PERCENT", "80"))

INCLUDE_TRAVEL_TIME = os.environ.get("INCLUDE_TRAVEL_TIME", "true").lower() == "true"
WEEK_STARTS_ON = int(os.environ.get("WEEK_STARTS_ON", "0"))  # 0 = Sunday

# =============================================================================
# WORKLOAD THRESHOLDS (hours: comfortable, busy, high)
# =============================================================================

DEFAULT_THRESHOLD_HOURS = {
    "daily": (4, 6, 8),
    "weekly": (25, 35, 45),
    "monthly": (100, 140, 180),
}

# =============================================================================
# BURNOUT SCORING
# =============================================================================

CRITICAL_VIOLATION_POINTS = 20
WARNING_VIOLATION_POINTS = 10
WEEKLY_BURNOUT_POINTS = 25
WEEKLY_HIGH_POINTS = 15
BUSY_STREAK_POINTS = 15

RISK_LEVEL_CUTOFFS = (("critical", 70), ("high", 50), ("moderate", 30))

# =============================================================================
# REPORT CONFIGURATION
# =============================================================================

DAILY_HEADERS = ["Date", "Day", "Visits", "Work Hours", "Travel Hours", "Total Hours", "Level"]
VIOLATION_HEADERS = ["Date", "Type", "Severity", "Title", "Description", "Metric", "Threshold"]
SERVICE_HEADERS = ["Service", "Visits", "Hours", "% of Visits"]
CLIENT_HEADERS = ["Client", "Visits", "Hours"]
TOP_CLIENTS_LIMIT = 10

# =============================================================================
# API CONFIGURATION
# =============================================================================

WORKLOAD_API_KEY = os.environ.get("WORKLOAD_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
MAX_EVENTS_PER_REQUEST = int(os.environ.get("MAX_EVENTS_PER_REQUEST", "5000"))
MAX_RANGE_DAYS = int(os.environ.get("MAX_RANGE_DAYS", "366"))
API_VERSION = "1.0.0"
