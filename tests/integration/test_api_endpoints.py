"""Integration tests for API endpoints.

Runs the real app through FastAPI TestClient, with the aggregator's provider
clients replaced by canned upstream payloads. No network access.
"""

import re

import pytest
from fastapi.testclient import TestClient

from sportsfeed.api.app import create_app
from sportsfeed.api.dependencies import get_aggregator
from sportsfeed.core import FetchOutcome, FetchStatus
from sportsfeed.services import SportsAggregator
from sportsfeed.services.league_registry import LEAGUES

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def _ok(payload):
    return FetchOutcome(FetchStatus.OK, payload)


@pytest.fixture
def upstream(make_clients, espn_event, espn_competitor, espn_payload, scores365_game, scores365_payload):
    """Canned upstream responses for a handful of leagues."""
    arsenal_chelsea = espn_event(
        event_id="epl1",
        name="Chelsea at Arsenal",
        state="in",
        competitors=[
            espn_competitor("1", "Arsenal", "ARS", "2"),
            espn_competitor("2", "Chelsea", "CHE", "1"),
        ],
    )
    villa_spurs = espn_event(
        event_id="epl2",
        name="Tottenham at Aston Villa",
        state="pre",
        date="2025-03-01T17:30Z",
        competitors=[
            espn_competitor("3", "Aston Villa", "AVL"),
            espn_competitor("4", "Tottenham", "TOT"),
        ],
    )
    return make_clients({
        ("espn", "ENG.1"): _ok(espn_payload([arsenal_chelsea, villa_spurs])),
        ("espn", "nba"): FetchOutcome(FetchStatus.RATE_LIMITED, {"events": []}),
        ("espn", "ufc"): _ok(
            espn_payload(
                [espn_event(event_id="ufc1", name="Fighter A vs Fighter B", state="pre")],
                abbreviation="UFC",
                league_name="UFC",
            )
        ),
        ("365scores", "7"): _ok(
            scores365_payload([scores365_game(game_id=77, status_text="Final (OT)", home_score=1, away_score=0)])
        ),
    })


@pytest.fixture
def client(upstream, utc):
    """Test client whose aggregator uses canned upstream data and no pacing."""
    app = create_app()
    aggregator = SportsAggregator(upstream, spacing_seconds=0, timezone=utc)
    app.dependency_overrides[get_aggregator] = lambda: aggregator
    with TestClient(app) as client:
        yield client


# =============================================================================
# HEALTH CHECK
# =============================================================================


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health_check(self, client):
        """Health endpoint returns healthy."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"]


# =============================================================================
# ALL SPORTS
# =============================================================================


class TestAllSportsEndpoint:
    """GET /sports"""

    def test_envelope(self, client):
        """Response carries success, timestamp and data."""
        response = client.get("/sports")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert TIMESTAMP_RE.match(data["timestamp"])
        assert isinstance(data["data"], dict)

    def test_grouped_by_sport(self, client):
        """Soccer from both providers; rate-limited NBA is absent."""
        data = client.get("/sports").json()["data"]
        assert list(data) == ["soccer"]
        assert [e["id"] for e in data["soccer"]] == ["epl1", "epl2", "77"]
        assert [e["provider"] for e in data["soccer"]] == ["espn", "espn", "365scores"]

    def test_event_wire_shape(self, client):
        """Events are camelCase with parallel competitors and scores."""
        event = client.get("/sports").json()["data"]["soccer"][0]
        assert event["shortName"] == "CHE @ ARS"
        assert event["status"] == "live"
        assert event["statusText"] == "Live"
        assert event["timeDisplay"] == "LIVE NOW!"
        assert event["sportType"] == "soccer"
        assert [c["shortName"] for c in event["competitors"]] == ["ARS", "CHE"]
        assert event["scores"] == [2, 1]
        assert event["link"].endswith("#ARS%20vs%20CHE")

    def test_365scores_game(self, client):
        """365Scores game is normalized to the same shape."""
        event = client.get("/sports").json()["data"]["soccer"][2]
        assert event["name"] == "Arsenal vs Chelsea"
        assert event["status"] == "finished"
        assert event["timeDisplay"] == "Full Time"
        assert event["scores"] == [1, 0]

    def test_status_filter(self, client):
        """status=upcoming keeps only scheduled events."""
        data = client.get("/sports?status=upcoming").json()["data"]
        assert [e["id"] for e in data["soccer"]] == ["epl2"]

    def test_filter_can_empty_every_group(self, make_clients, utc):
        """Groups emptied by a filter are dropped."""
        app = create_app()
        aggregator = SportsAggregator(make_clients(), spacing_seconds=0, timezone=utc)
        app.dependency_overrides[get_aggregator] = lambda: aggregator
        with TestClient(app) as client:
            data = client.get("/sports?status=live").json()
        assert data["data"] == {}


# =============================================================================
# SPORT
# =============================================================================


class TestSportEndpoint:
    """GET /sports/{sport}"""

    def test_soccer(self, client):
        """Flat events plus events grouped by league id."""
        response = client.get("/sports/soccer")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["sportType"] == "soccer"
        assert [e["id"] for e in data["events"]] == ["epl1", "epl2"]
        assert list(data["eventsByLeague"]) == ["ENG.1"]

    def test_individual_sport_has_no_competitors(self, client):
        """MMA events carry a name link and no competitors."""
        data = client.get("/sports/mma").json()
        event = data["events"][0]
        assert event["name"] == "Fighter A vs Fighter B"
        assert "competitors" not in event
        assert "scores" not in event
        assert event["link"].endswith("#Fighter%20A%20vs%20Fighter%20B")
        assert list(data["eventsByLeague"]) == ["ufc"]

    def test_all_upstreams_failing_is_empty_success(self, client):
        """A rate-limited league is an empty success, not an error."""
        response = client.get("/sports/basketball")
        assert response.status_code == 200
        data = response.json()
        assert data["events"] == []
        assert data["eventsByLeague"] == {}

    def test_limit_sorts_and_truncates(self, client):
        """limit caps the event list."""
        data = client.get("/sports/soccer?limit=1").json()
        assert len(data["events"]) == 1

    def test_unknown_sport(self, client):
        """Unsupported sport is a 400 with the error envelope."""
        response = client.get("/sports/curling")
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Sport type 'curling' not supported"}


# =============================================================================
# LEAGUE
# =============================================================================


class TestLeagueEndpoint:
    """GET /sports/{sport}/{league}"""

    @pytest.mark.parametrize("sport,league", sorted(LEAGUES))
    def test_every_supported_pair(self, client, sport, league):
        """Every registered league answers 200."""
        response = client.get(f"/sports/{sport}/{league}")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["sportType"] == sport
        assert data["league"]["slug"] == league

    def test_league_info(self, client):
        """League info comes from the scoreboard metadata."""
        data = client.get("/sports/soccer/premier-league").json()
        assert data["league"] == {
            "slug": "premier-league",
            "name": "ENG.1",
            "fullName": "English Premier League",
        }
        assert [e["id"] for e in data["events"]] == ["epl1", "epl2"]

    def test_full_name_falls_back_to_display_name(self, client):
        """No upstream metadata: fullName is the registry display name."""
        data = client.get("/sports/hockey/nhl").json()
        assert data["league"]["fullName"] == "NHL"
        assert data["events"] == []

    def test_unknown_league(self, client):
        """Unsupported league is a 400."""
        response = client.get("/sports/soccer/eredivisie")
        assert response.status_code == 400
        assert response.json()["error"] == "League 'eredivisie' not supported for sport type 'soccer'"

    def test_unknown_sport(self, client):
        response = client.get("/sports/curling/worlds")
        assert response.status_code == 400
        assert response.json()["success"] is False


# =============================================================================
# ERRORS
# =============================================================================


class TestErrorHandling:
    """Validation and unexpected failures."""

    def test_invalid_status(self, client):
        """Unknown status filter is a 400."""
        response = client.get("/sports?status=finished")
        assert response.status_code == 400
        assert response.json()["success"] is False

    @pytest.mark.parametrize("limit", ["0", "501", "ten"])
    def test_invalid_limit(self, client, limit):
        """limit must be an integer in 1..500."""
        response = client.get(f"/sports/soccer?limit={limit}")
        assert response.status_code == 400

    def test_unexpected_failure_is_500(self):
        """Failures outside a work item are reported generically."""

        class BrokenAggregator:
            def aggregate(self, scope):
                raise RuntimeError("registry exploded")

        app = create_app()
        app.dependency_overrides[get_aggregator] = lambda: BrokenAggregator()
        with TestClient(app) as client:
            response = client.get("/sports/soccer")
        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Failed to fetch sports data"}

    def test_unknown_path_uses_error_envelope(self, client):
        response = client.get("/sports/soccer/premier-league/extra")
        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_failure_after_aggregation_uses_error_envelope(self):
        """Errors raised while building the response still get the envelope."""

        class HollowAggregator:
            def aggregate(self, scope):
                return object()

        app = create_app()
        app.dependency_overrides[get_aggregator] = lambda: HollowAggregator()
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/sports/hockey")
        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"success": False, "error": "Failed to fetch sports data"}

    def test_numeric_upstream_names_are_served(self, make_clients, espn_event, espn_payload, utc):
        """Odd-typed upstream display fields do not break serialization."""
        event = espn_event(event_id=7, name="Bruins at Rangers", short_name=42)
        clients = make_clients({("espn", "nhl"): _ok(espn_payload([event], abbreviation=1))})
        app = create_app()
        aggregator = SportsAggregator(clients, spacing_seconds=0, timezone=utc)
        app.dependency_overrides[get_aggregator] = lambda: aggregator
        with TestClient(app) as client:
            response = client.get("/sports/hockey/nhl")
        assert response.status_code == 200
        served = response.json()["events"][0]
        assert served["id"] == "7"
        assert served["shortName"] == "42"
        assert served["league"] == "1"
