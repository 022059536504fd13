import pandas as pd

from utils.config import DISPLAY_TIMEZONE, INVALID_DATE, NOT_AVAILABLE


def format_date_time(value):
    """
    Format an API timestamp for display in India time.
    e.g. '2024-01-05T09:34:00.000Z' -> 'Jan 05, 2024, 03:04 PM'
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return NOT_AVAILABLE

    # bare numbers are epoch milliseconds
    unit = "ms" if isinstance(value, (int, float)) and not isinstance(value, bool) else None
    ts = pd.to_datetime(value, utc=True, errors="coerce", unit=unit)
    if pd.isna(ts):
        return INVALID_DATE

    return ts.tz_convert(DISPLAY_TIMEZONE).strftime("%b %d, %Y, %I:%M %p")


def or_na(value):
    """Display 'N/A' for empty values."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, float) and pd.isna(value):
        return NOT_AVAILABLE
    return value if value else NOT_AVAILABLE


def nested_get(mapping, dotted_key, default=None):
    """
    Lookup 'userId.username' style keys, tolerating missing or non-dict levels.
    """
    current = mapping
    for part in dotted_key.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current if current is not None else default
