"""365Scores games normalizer.

Pure mapping from a raw games payload to SportEvent records.

Status mapping is closed-set membership on the free-text statusText:
finished for the known final strings, scheduled for the known pre-game and
abandoned strings, and live for everything else. Any new upstream status
string therefore reads as live; those are logged at DEBUG so they can be
spotted and added to the known sets.
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
from sportsfeed.utilities import build_watch_link, format_clock_time

logger = logging.getLogger(__name__)

PROVIDER = "365scores"

# This provider is only used for soccer
SPORT_TYPE = "soccer"

UNKNOWN_LEAGUE = "Unknown League"
DEFAULT_STATUS_TEXT = "Scheduled"

FINISHED_STATUSES = frozenset({
    "Ended",
    "Final",
    "Final (OT)",
    "After Penalties",
    "Final (SO)",
    "Final (Ex)",
})

# Known statuses that are neither live nor finished
NOT_STARTED_STATUSES = frozenset({
    "Scheduled",
    "WalkOver",
    "Postponed",
    "Abandoned",
})


def resolve_state(status_text: str) -> EventState:
    """Map a statusText to a canonical state."""
    if status_text in FINISHED_STATUSES:
        return EventState.FINISHED
    if status_text in NOT_STARTED_STATUSES:
        return EventState.SCHEDULED
    logger.debug(f"Treating 365Scores status '{status_text}' as live")
    return EventState.LIVE


def _parse_competitor(data: dict) -> Competitor:
    name = as_text(data.get("name"))
    return Competitor(
        id=as_id(data.get("id")),
        name=name,
        short_name=name,
        score=data.get("score"),
    )


def normalize_game(
    game: dict,
    league: str,
    timezone: ZoneInfo,
    watch_base_url: str | None = None,
) -> SportEvent:
    """Normalize one 365Scores game."""
    home_raw = as_dict(game.get("homeCompetitor"))
    away_raw = as_dict(game.get("awayCompetitor"))
    home = _parse_competitor(home_raw)
    away = _parse_competitor(away_raw)
    matchup = f"{home.name} vs {away.name}"

    status_text = as_text(game.get("statusText")) or DEFAULT_STATUS_TEXT
    state = resolve_state(status_text)
    start_time = as_text(game.get("startTime"))

    if state is EventState.LIVE:
        time_display = LIVE_TIME_DISPLAY
    elif state is EventState.FINISHED:
        time_display = FINISHED_TIME_DISPLAY
    else:
        time_display = format_clock_time(start_time, timezone)

    return SportEvent(
        id=as_id(game.get("id")) or "",
        name=matchup,
        short_name=matchup,
        league=league,
        date=start_time,
        status=state,
        status_text=status_text,
        time_display=time_display,
        link=build_watch_link(matchup, watch_base_url),
        sport_type=SPORT_TYPE,
        provider=PROVIDER,
        competitors=(home, away),
        scores=(parse_score(home_raw.get("score")), parse_score(away_raw.get("score"))),
    )


def normalize_games(
    payload: dict | None,
    timezone: ZoneInfo | None = None,
    watch_base_url: str | None = None,
) -> list[SportEvent]:
    """Normalize a 365Scores games payload.

    Args:
        payload: Raw JSON ({"games": [...], "competitions": [...]})
        timezone: Zone for scheduled clock times, defaults to the user timezone
        watch_base_url: Watch page base URL, defaults to config

    Returns:
        Events in upstream order; [] when 'games' is missing or malformed
    """
    if not isinstance(payload, dict):
        return []
    games = payload.get("games")
    if not isinstance(games, list):
        return []

    timezone = timezone or get_user_timezone()
    league = as_text(first_dict(payload.get("competitions")).get("name")) or UNKNOWN_LEAGUE

    normalized = []
    for game in games:
        if not isinstance(game, dict):
            logger.warning(f"Skipping malformed 365Scores game in {league}: {game!r:.80}")
            continue
        normalized.append(normalize_game(game, league, timezone, watch_base_url))
    return normalized
