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
DB_PATH = Path(
    os.environ.get("CALENDAR_DB_PATH", PROJECT_ROOT / "data" / "db" / "calendar.db")
)

# =============================================================================
# EVENT STORE
# =============================================================================

STORE_KEY = "calendarEvents"  # Single key holding the whole collection
VIDEO_TYPES = ("none", "zoom", "meet")

# =============================================================================
# TIMELINE LAYOUT
# =============================================================================

SLOT_MINUTES = 15
SLOTS_PER_DAY = 24 * 60 // SLOT_MINUTES  # 96

# =============================================================================
# ADD-EVENT DEFAULTS
# =============================================================================

DEFAULT_EVENT_TITLE = "My New Event"
DEFAULT_DURATION_MINS = 60
START_ROUNDING_MINUTES = 5  # New events start at the next 5-minute boundary

# =============================================================================
# API CONFIGURATION
# =============================================================================

CALENDAR_API_KEY = os.environ.get("CALENDAR_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
REQUEST_LOG_ENABLED = os.environ.get("REQUEST_LOG_ENABLED", "true").lower() == "true"
API_VERSION = "1.0.0"
