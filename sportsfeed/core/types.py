"""Core data types for sportsfeed.

All data structures are pure dataclasses with attribute access.
Every provider's payload is normalized into SportEvent; the wire
form (camelCase JSON) comes from to_dict().
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventState(str, Enum):
    """Canonical lifecycle state of an event. Always derived, never supplied."""

    SCHEDULED = "scheduled"
    LIVE = "live"
    FINISHED = "finished"


class FetchStatus(str, Enum):
    """How an upstream fetch resolved."""

    OK = "ok"
    RATE_LIMITED = "rate_limited"
    MALFORMED = "malformed"
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"


# Fixed time displays for non-scheduled events
LIVE_TIME_DISPLAY = "LIVE NOW!"
FINISHED_TIME_DISPLAY = "Full Time"


@dataclass(frozen=True)
class Competitor:
    """One side of a head-to-head event."""

    id: str | None
    name: str
    short_name: str
    score: Any = None  # raw upstream score, as supplied

    def to_dict(self) -> dict:
        data = {"id": self.id, "name": self.name, "shortName": self.short_name}
        if self.score is not None:
            data["score"] = self.score
        return data


@dataclass(frozen=True)
class SportEvent:
    """A single sporting event in provider-independent form.

    competitors/scores are None for individual sports (combat, racing, golf)
    and parallel lists otherwise.
    """

    id: str
    name: str
    short_name: str
    league: str
    date: str  # ISO-8601 as supplied upstream
    status: EventState
    status_text: str
    time_display: str
    link: str
    sport_type: str
    provider: str
    competitors: tuple[Competitor, ...] | None = None
    scores: tuple[int | None, ...] | None = None

    def __post_init__(self) -> None:
        if (self.competitors is None) != (self.scores is None):
            raise ValueError("competitors and scores must both be set or both be None")
        if self.competitors is not None and len(self.competitors) != len(self.scores):
            raise ValueError("competitors and scores must be the same length")

    @property
    def is_team_event(self) -> bool:
        return self.competitors is not None

    def to_dict(self) -> dict:
        """Convert to the camelCase JSON shape served by the API."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "shortName": self.short_name,
            "league": self.league,
            "date": self.date,
            "status": self.status.value,
            "statusText": self.status_text,
            "timeDisplay": self.time_display,
        }
        if self.competitors is not None:
            data["competitors"] = [c.to_dict() for c in self.competitors]
            data["scores"] = list(self.scores)
        data["link"] = self.link
        data["sportType"] = self.sport_type
        data["provider"] = self.provider
        return data


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one upstream fetch. payload is always a dict, possibly the empty shape."""

    status: FetchStatus
    payload: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK
