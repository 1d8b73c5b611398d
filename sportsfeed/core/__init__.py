"""Core types."""

from sportsfeed.core.types import (
    FINISHED_TIME_DISPLAY,
    LIVE_TIME_DISPLAY,
    Competitor,
    EventState,
    FetchOutcome,
    FetchStatus,
    SportEvent,
)

__all__ = [
    "FINISHED_TIME_DISPLAY",
    "LIVE_TIME_DISPLAY",
    "Competitor",
    "EventState",
    "FetchOutcome",
    "FetchStatus",
    "SportEvent",
]
