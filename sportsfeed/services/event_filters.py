"""Event list filtering and ordering for feed consumers.

live     -> only live events
upcoming -> only scheduled events
Ordering: two scheduled events compare by start time, anything else by name.
"""

import functools

from sportsfeed.core import EventState, SportEvent
from sportsfeed.utilities import parse_iso_datetime

STATUS_FILTERS = {
    "live": EventState.LIVE,
    "upcoming": EventState.SCHEDULED,
}


def _start_key(event: SportEvent) -> float:
    dt = parse_iso_datetime(event.date)
    return dt.timestamp() if dt else float("inf")


def _compare(a: SportEvent, b: SportEvent) -> int:
    if a.status is EventState.SCHEDULED and b.status is EventState.SCHEDULED:
        ka, kb = _start_key(a), _start_key(b)
    else:
        ka, kb = a.name, b.name
    return (ka > kb) - (ka < kb)


def sort_events(events: list[SportEvent]) -> list[SportEvent]:
    """Scheduled events by start time, everything else by name (stable)."""
    return sorted(events, key=functools.cmp_to_key(_compare))


def select_events(
    events: list[SportEvent],
    status: str | None = None,
    limit: int | None = None,
) -> list[SportEvent]:
    """Filter by status, sort, and truncate.

    Args:
        events: Normalized events
        status: 'live', 'upcoming', or None for all
        limit: Maximum events to return, None for all

    Raises:
        ValueError: unknown status filter
    """
    if status is not None:
        if status not in STATUS_FILTERS:
            raise ValueError(f"Unknown status filter '{status}'")
        wanted = STATUS_FILTERS[status]
        events = [e for e in events if e.status is wanted]
    events = sort_events(events)
    if limit is not None:
        events = events[:limit]
    return events
