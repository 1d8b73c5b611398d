"""Service layer - aggregation and league routing."""

from sportsfeed.services.aggregator import (
    AggregationResult,
    AllSportsScope,
    LeagueScope,
    SportsAggregator,
    SportScope,
    WorkResult,
)
from sportsfeed.services.event_filters import select_events
from sportsfeed.services.league_registry import (
    LeagueMapping,
    UnknownLeagueError,
    UnknownRouteError,
    UnknownSportError,
    WorkItem,
    get_league,
)

__all__ = [
    "AggregationResult",
    "AllSportsScope",
    "LeagueMapping",
    "LeagueScope",
    "SportScope",
    "SportsAggregator",
    "UnknownLeagueError",
    "UnknownRouteError",
    "UnknownSportError",
    "WorkItem",
    "WorkResult",
    "get_league",
    "select_events",
]
