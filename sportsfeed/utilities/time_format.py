"""Time formatting utilities for event time display."""

from datetime import datetime
from zoneinfo import ZoneInfo

# Shown when an upstream timestamp cannot be parsed
UNKNOWN_TIME_DISPLAY = "TBD"


def parse_iso_datetime(value: str | None) -> datetime | None:
    """Parse an upstream ISO-8601 timestamp.

    ESPN sends minute precision with a Z suffix ("2025-03-01T20:00Z"),
    365Scores sends a full offset ("2025-03-01T20:00:00+00:00").
    Naive values are treated as UTC.

    Returns:
        Aware datetime, or None if the value is missing or unparseable
    """
    if not value or not isinstance(value, str):
        return None
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    return dt


def format_clock_time(value: str | None, timezone: ZoneInfo) -> str:
    """Format an event start as a local 2-digit clock time.

    Examples:
        >>> format_clock_time("2025-03-01T20:00Z", ZoneInfo("America/New_York"))
        '03:00 PM'
        >>> format_clock_time("not a date", ZoneInfo("UTC"))
        'TBD'
    """
    dt = parse_iso_datetime(value)
    if dt is None:
        return UNKNOWN_TIME_DISPLAY
    return dt.astimezone(timezone).strftime("%I:%M %p")
