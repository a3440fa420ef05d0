"""
config.py - Environment settings and app constants
"""

import os


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Marketplace API
# ---------------------------------------------------------------------------

API_URL = os.environ.get("CASEBOARD_API_URL", "http://localhost:5000/api").rstrip("/")
API_TOKEN = os.environ.get("CASEBOARD_API_TOKEN") or None
REQUEST_TIMEOUT_SECONDS = _env_float("CASEBOARD_TIMEOUT", 10.0)

# ---------------------------------------------------------------------------
# App constants
# ---------------------------------------------------------------------------

APP_TITLE = "Caseboard"
APP_VERSION = "0.1.0"

# ---------------------------------------------------------------------------
# Color palette
# ---------------------------------------------------------------------------

COLOR_ACTIVE = "#2da44e"  # green
COLOR_PENDING = "#bf8700"  # amber
COLOR_CLOSED = "#8250df"  # purple
COLOR_BG = "#F0F2F5"
COLOR_CARD = "#FFFFFF"
COLOR_BORDER = "#D0D7DE"
COLOR_TEXT_MUTED = "#656D76"
COLOR_TEXT_MAIN = "#1F2328"
COLOR_PRIMARY = "#0969DA"
COLOR_DANGER = "#CF222E"

# AppBar
COLOR_APPBAR_BG = "#FFFFFF"
COLOR_APPBAR_FG = "#1F2328"

# UI constants
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
SHADOW_ELEVATION = 2
SEARCH_DEBOUNCE_SECONDS = 0.5

# Filters / paging
FILTER_PRESET_LIMIT = 10
DEFAULT_PAGE_SIZE = 10
CASES_PAGE_SIZE = 6
DOCUMENTS_PAGE_SIZE = 8
RATE_CARDS_PAGE_SIZE = 8
HEARINGS_PAGE_SIZE = 8
NOTIFICATIONS_PAGE_SIZE = 10
NOTIFICATION_FETCH_LIMIT = 100
