"""Static league registry.

Single source of truth for (sport, league slug) -> provider league routing,
and for the fixed league lists behind the per-sport and all-sports feeds.
Immutable; loaded once at import.
"""

from dataclasses import dataclass
from types import MappingProxyType

from sportsfeed.providers import ESPN, SCORES365


class UnknownRouteError(ValueError):
    """Requested sport or league is not in the registry."""


class UnknownSportError(UnknownRouteError):
    def __init__(self, sport: str):
        self.sport = sport
        super().__init__(f"Sport type '{sport}' not supported")


class UnknownLeagueError(UnknownRouteError):
    def __init__(self, sport: str, league_slug: str):
        self.sport = sport
        self.league_slug = league_slug
        super().__init__(f"League '{league_slug}' not supported for sport type '{sport}'")


@dataclass(frozen=True)
class LeagueMapping:
    """Mapping from a canonical league to a provider league."""

    sport: str
    slug: str
    provider: str
    provider_league_id: str
    display_name: str


@dataclass(frozen=True)
class WorkItem:
    """One provider fetch + normalize unit within an aggregation.

    group_key is the key the item's events are grouped under.
    """

    provider: str
    sport: str
    provider_league_id: str
    group_key: str


def _espn(sport: str, slug: str, league_id: str, display_name: str) -> LeagueMapping:
    return LeagueMapping(sport, slug, ESPN, league_id, display_name)


_LEAGUES: tuple[LeagueMapping, ...] = (
    # Soccer
    _espn("soccer", "premier-league", "ENG.1", "Premier League"),
    _espn("soccer", "la-liga", "ESP.1", "La Liga"),
    _espn("soccer", "serie-a", "ITA.1", "Serie A"),
    _espn("soccer", "bundesliga", "GER.1", "Bundesliga"),
    _espn("soccer", "ligue-1", "FRA.1", "Ligue 1"),
    _espn("soccer", "champions-league", "UEFA.CHAMPIONS", "UEFA Champions League"),
    _espn("soccer", "europa-league", "UEFA.EUROPA", "UEFA Europa League"),
    _espn("soccer", "mls", "USA.1", "MLS"),
    # Basketball
    _espn("basketball", "nba", "nba", "NBA"),
    _espn("basketball", "wnba", "wnba", "WNBA"),
    # Baseball
    _espn("baseball", "mlb", "mlb", "MLB"),
    # Hockey
    _espn("hockey", "nhl", "nhl", "NHL"),
    # American Football
    _espn("football", "nfl", "nfl", "NFL"),
    _espn("football", "college", "college-football", "NCAA Football"),
    # MMA
    _espn("mma", "ufc", "ufc", "UFC"),
    _espn("mma", "pfl", "pfl", "PFL"),
    _espn("mma", "bellator", "bellator", "Bellator"),
    # Racing
    _espn("racing", "f1", "f1", "Formula 1"),
    _espn("racing", "indycar", "irl", "IndyCar"),
    _espn("racing", "nascar", "nascar", "NASCAR"),
    # Golf
    _espn("golf", "pga", "pga", "PGA Tour"),
    _espn("golf", "lpga", "lpga", "LPGA Tour"),
    _espn("golf", "champions", "champions-tour", "PGA Tour Champions"),
    _espn("golf", "liv", "liv", "LIV Golf"),
)

# (sport, slug) -> mapping
LEAGUES: MappingProxyType = MappingProxyType({(lg.sport, lg.slug): lg for lg in _LEAGUES})

# Ordered ESPN league ids fetched for GET /sports/{sport}
SPORT_FEEDS: MappingProxyType = MappingProxyType({
    "soccer": ("ESP.1", "ENG.1", "ITA.1", "GER.1"),
    "basketball": ("nba",),
    "baseball": ("mlb",),
    "hockey": ("nhl",),
    "football": ("nfl",),
    "mma": ("ufc", "pfl", "bellator"),
    "racing": ("f1", "irl", "nascar"),
    "golf": ("pga",),
})

# Ordered work items for GET /sports, grouped by sport
ALL_SPORTS_FEED: tuple[WorkItem, ...] = (
    WorkItem(ESPN, "soccer", "ESP.1", "soccer"),
    WorkItem(ESPN, "soccer", "ENG.1", "soccer"),
    WorkItem(ESPN, "basketball", "nba", "basketball"),
    WorkItem(ESPN, "baseball", "mlb", "baseball"),
    WorkItem(ESPN, "hockey", "nhl", "hockey"),
    WorkItem(ESPN, "football", "nfl", "football"),
    # Premier League. 365Scores competition 103 (NBA) is not fetched: this
    # provider normalizes every game as soccer.
    WorkItem(SCORES365, "soccer", "7", "soccer"),
)


def is_supported_sport(sport: str) -> bool:
    return sport in SPORT_FEEDS


def get_league(sport: str, league_slug: str) -> LeagueMapping:
    """Resolve a (sport, slug) pair.

    Raises:
        UnknownSportError: sport has no registered leagues
        UnknownLeagueError: sport is known but the slug is not
    """
    if not is_supported_sport(sport):
        raise UnknownSportError(sport)
    mapping = LEAGUES.get((sport, league_slug))
    if mapping is None:
        raise UnknownLeagueError(sport, league_slug)
    return mapping


def league_work_items(sport: str, league_slug: str) -> list[WorkItem]:
    mapping = get_league(sport, league_slug)
    return [
        WorkItem(mapping.provider, mapping.sport, mapping.provider_league_id, mapping.provider_league_id)
    ]


def sport_work_items(sport: str) -> list[WorkItem]:
    if not is_supported_sport(sport):
        raise UnknownSportError(sport)
    return [WorkItem(ESPN, sport, league_id, league_id) for league_id in SPORT_FEEDS[sport]]


def all_sports_work_items() -> list[WorkItem]:
    return list(ALL_SPORTS_FEED)
