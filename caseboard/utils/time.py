"""
time.py - time utilities
Single responsibility: timestamps written by the app and ISO 8601 values read
from the API.
"""
from datetime import datetime, timezone
from typing import Any


def now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


def parse_timestamp(value: Any) -> datetime | None:
    """ISO 8601 string or datetime to a naive UTC datetime; None when unparseable."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt
