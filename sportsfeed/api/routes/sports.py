"""Sports feed endpoints.

GET /sports                  - fixed multi-sport, multi-provider feed
GET /sports/{sport}          - every featured league of one sport
GET /sports/{sport}/{league} - one league

Optional query parameters on all three:
    status=live|upcoming  filter events by state
    limit=N               cap each event list at N (after sorting)
When either is given, lists are sorted (scheduled by start time, others by
name); otherwise events keep upstream order.
"""

import logging
from datetime import UTC, datetime
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sportsfeed.api.dependencies import get_aggregator
from sportsfeed.api.models import (
    AllSportsResponse,
    ErrorResponse,
    LeagueInfo,
    LeagueResponse,
    SportResponse,
)
from sportsfeed.core import SportEvent
from sportsfeed.providers.espn import league_full_name
from sportsfeed.services import (
    AggregationResult,
    AllSportsScope,
    LeagueScope,
    SportsAggregator,
    SportScope,
    UnknownRouteError,
    get_league,
    select_events,
)

logger = logging.getLogger(__name__)

router = APIRouter()

FETCH_FAILED_MESSAGE = "Failed to fetch sports data"

StatusFilter = Literal["live", "upcoming"]

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _timestamp() -> str:
    """Current UTC time, e.g. '2025-03-01T20:00:00.123Z'."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _serialize(
    events: list[SportEvent],
    status_filter: str | None,
    limit: int | None,
) -> list[dict]:
    if status_filter is not None or limit is not None:
        events = select_events(events, status=status_filter, limit=limit)
    return [event.to_dict() for event in events]


def _serialize_groups(
    grouped: dict[str, list[SportEvent]],
    status_filter: str | None,
    limit: int | None,
) -> dict[str, list[dict]]:
    serialized = {key: _serialize(events, status_filter, limit) for key, events in grouped.items()}
    # Filtering can empty a group; only groups with events are reported
    return {key: events for key, events in serialized.items() if events}


def _aggregate(aggregator: SportsAggregator, scope, context: str) -> AggregationResult:
    """Run an aggregation, mapping failures to HTTP errors."""
    try:
        return aggregator.aggregate(scope)
    except UnknownRouteError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
    except Exception:
        logger.exception(f"Error in {context} sports API")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=FETCH_FAILED_MESSAGE,
        ) from None


@router.get(
    "/sports",
    response_model=AllSportsResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def get_all_sports(
    status_filter: StatusFilter | None = Query(default=None, alias="status"),
    limit: int | None = Query(default=None, ge=1, le=500),
    aggregator: SportsAggregator = Depends(get_aggregator),
):
    """Events across all featured sports, grouped by sport."""
    result = _aggregate(aggregator, AllSportsScope(), "all")
    return AllSportsResponse(
        timestamp=_timestamp(),
        data=_serialize_groups(result.grouped, status_filter, limit),
    )


@router.get(
    "/sports/{sport}",
    response_model=SportResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def get_sport(
    sport: str,
    status_filter: StatusFilter | None = Query(default=None, alias="status"),
    limit: int | None = Query(default=None, ge=1, le=500),
    aggregator: SportsAggregator = Depends(get_aggregator),
):
    """Events for every featured league of a sport."""
    result = _aggregate(aggregator, SportScope(sport), sport)
    return SportResponse(
        timestamp=_timestamp(),
        sport_type=sport,
        events=_serialize(result.flat, status_filter, limit),
        events_by_league=_serialize_groups(result.grouped, status_filter, limit),
    )


@router.get(
    "/sports/{sport}/{league}",
    response_model=LeagueResponse,
    responses=ERROR_RESPONSES,
    response_model_exclude_none=True,
)
def get_sport_league(
    sport: str,
    league: str,
    status_filter: StatusFilter | None = Query(default=None, alias="status"),
    limit: int | None = Query(default=None, ge=1, le=500),
    aggregator: SportsAggregator = Depends(get_aggregator),
):
    """Events for one league."""
    result = _aggregate(aggregator, LeagueScope(sport, league), f"{sport}/{league}")
    mapping = get_league(sport, league)
    payload = result.results[0].payload if result.results else {}

    return LeagueResponse(
        timestamp=_timestamp(),
        sport_type=sport,
        league=LeagueInfo(
            slug=league,
            name=mapping.provider_league_id,
            full_name=league_full_name(payload, mapping.display_name),
        ),
        events=_serialize(result.flat, status_filter, limit),
    )
