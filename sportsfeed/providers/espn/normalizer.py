"""ESPN scoreboard normalizer.

Pure mapping from a raw scoreboard payload to SportEvent records.
No I/O and no hidden state: the same payload always yields the same events.
"""

import logging
from zoneinfo import ZoneInfo

from sportsfeed.config import get_user_timezone
from sportsfeed.core import (
    FINISHED_TIME_DISPLAY,
    LIVE_TIME_DISPLAY,
    Competitor,
    EventState,
    SportEvent,
)
from sportsfeed.providers.common import as_dict, as_id, as_text, first_dict, parse_score
from sportsfeed.providers.espn.constants import INDIVIDUAL_SPORTS, STATE_MAP
from sportsfeed.utilities import build_watch_link, format_clock_time

logger = logging.getLogger(__name__)

PROVIDER = "espn"


def league_label(payload: dict, sport: str) -> str:
    """League abbreviation from scoreboard metadata, falling back to the sport."""
    return as_text(first_dict(payload.get("leagues")).get("abbreviation")) or sport


def league_full_name(payload: dict, fallback: str) -> str:
    """Full league name from scoreboard metadata (e.g. 'English Premier League')."""
    return as_text(first_dict(payload.get("leagues")).get("name")) or fallback


def _resolve_state(event: dict) -> tuple[EventState, str]:
    state = as_dict(as_dict(event.get("status")).get("type")).get("state")
    if not isinstance(state, str):
        state = "pre"
    return STATE_MAP.get(state, STATE_MAP["pre"])


def _time_display(state: EventState, date_str: str | None, timezone: ZoneInfo) -> str:
    if state is EventState.LIVE:
        return LIVE_TIME_DISPLAY
    if state is EventState.FINISHED:
        return FINISHED_TIME_DISPLAY
    return format_clock_time(date_str, timezone)


def _parse_competitor(data: dict) -> Competitor:
    team = as_dict(data.get("team"))
    return Competitor(
        id=as_id(data.get("id")),
        name=as_text(team.get("displayName")),
        short_name=as_text(team.get("shortDisplayName")),
        score=data.get("score"),
    )


def normalize_event(
    event: dict,
    sport: str,
    league: str,
    timezone: ZoneInfo,
    watch_base_url: str | None = None,
) -> SportEvent:
    """Normalize one scoreboard event."""
    name = as_text(event.get("name"))
    state, status_text = _resolve_state(event)
    date_str = as_text(event.get("date"))

    competitors = None
    scores = None
    if sport in INDIVIDUAL_SPORTS:
        link = build_watch_link(name, watch_base_url)
    else:
        raw_competitors = first_dict(event.get("competitions")).get("competitors")
        if not isinstance(raw_competitors, list):
            raw_competitors = []
        raw_competitors = [c for c in raw_competitors if isinstance(c, dict)]
        competitors = tuple(_parse_competitor(c) for c in raw_competitors)
        scores = tuple(parse_score(c.get("score")) for c in raw_competitors)
        link = build_watch_link(" vs ".join(c.short_name for c in competitors), watch_base_url)

    return SportEvent(
        id=as_id(event.get("id")) or "",
        name=name,
        short_name=as_text(event.get("shortName")) or name,
        league=league,
        date=date_str,
        status=state,
        status_text=status_text,
        time_display=_time_display(state, date_str, timezone),
        link=link,
        sport_type=sport,
        provider=PROVIDER,
        competitors=competitors,
        scores=scores,
    )


def normalize_scoreboard(
    payload: dict | None,
    sport: str,
    timezone: ZoneInfo | None = None,
    watch_base_url: str | None = None,
) -> list[SportEvent]:
    """Normalize an ESPN scoreboard payload.

    Args:
        payload: Raw scoreboard JSON ({"events": [...], "leagues": [...]})
        sport: Canonical sport category the scoreboard was fetched for
        timezone: Zone for scheduled clock times, defaults to the user timezone
        watch_base_url: Watch page base URL, defaults to config

    Returns:
        Events in upstream order; [] when 'events' is missing or malformed
    """
    if not isinstance(payload, dict):
        return []
    events = payload.get("events")
    if not isinstance(events, list):
        return []

    timezone = timezone or get_user_timezone()
    league = league_label(payload, sport)

    normalized = []
    for event in events:
        if not isinstance(event, dict):
            logger.warning(f"Skipping malformed ESPN event in {league}: {event!r:.80}")
            continue
        normalized.append(normalize_event(event, sport, league, timezone, watch_base_url))
    return normalized
