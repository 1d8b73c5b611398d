"""Shared fixtures: raw provider payload builders and fake provider clients."""

from zoneinfo import ZoneInfo

import pytest

from sportsfeed.core import FetchOutcome, FetchStatus

UTC = ZoneInfo("UTC")


# =============================================================================
# PAYLOAD BUILDERS
# =============================================================================


def build_espn_competitor(team_id, name, short_name, score=None):
    data = {"id": team_id, "team": {"displayName": name, "shortDisplayName": short_name}}
    if score is not None:
        data["score"] = score
    return data


def build_espn_event(
    event_id="401",
    name="Chelsea at Arsenal",
    short_name="CHE @ ARS",
    date="2025-03-01T20:00Z",
    state="pre",
    competitors=None,
):
    event = {
        "id": event_id,
        "name": name,
        "shortName": short_name,
        "date": date,
        "status": {"type": {"state": state}},
    }
    if competitors is not None:
        event["competitions"] = [{"competitors": competitors}]
    return event


def build_espn_payload(events, abbreviation="EPL", league_name="English Premier League"):
    return {
        "leagues": [{"abbreviation": abbreviation, "name": league_name}],
        "events": events,
    }


def build_365_game(
    game_id=4001,
    home="Arsenal",
    away="Chelsea",
    status_text="Scheduled",
    start_time="2025-03-01T20:00:00+00:00",
    home_score=-1,
    away_score=-1,
):
    game = {
        "id": game_id,
        "startTime": start_time,
        "homeCompetitor": {"id": 101, "name": home, "score": home_score},
        "awayCompetitor": {"id": 102, "name": away, "score": away_score},
    }
    if status_text is not None:
        game["statusText"] = status_text
    return game


def build_365_payload(games, competition="Premier League"):
    return {"competitions": [{"name": competition}], "games": games}


@pytest.fixture
def espn_event():
    return build_espn_event


@pytest.fixture
def espn_competitor():
    return build_espn_competitor


@pytest.fixture
def espn_payload():
    return build_espn_payload


@pytest.fixture
def scores365_game():
    return build_365_game


@pytest.fixture
def scores365_payload():
    return build_365_payload


@pytest.fixture
def utc():
    return UTC


# =============================================================================
# FAKE PROVIDER CLIENTS
# =============================================================================


class FakeProviderClients:
    """Stands in for ProviderClients; answers from a table of canned outcomes.

    responses: {(provider, league_id): FetchOutcome | Exception}
    Unlisted leagues answer with an OK empty payload.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []
        self.closed = False

    def fetch(self, provider, sport, provider_league_id, as_of=None):
        self.calls.append((provider, sport, provider_league_id, as_of))
        response = self.responses.get((provider, provider_league_id))
        if isinstance(response, Exception):
            raise response
        if response is None:
            empty = {"games": []} if provider == "365scores" else {"events": []}
            return FetchOutcome(FetchStatus.OK, empty)
        return response

    def close(self):
        self.closed = True


@pytest.fixture
def make_clients():
    """Factory: make_clients({(provider, league_id): outcome_or_exception})."""
    return FakeProviderClients
