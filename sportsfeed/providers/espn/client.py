"""ESPN scoreboard API HTTP client.

Fetch and return JSON - no data transformation.
No auth required.
"""

from datetime import date

import httpx

from sportsfeed.config import Config
from sportsfeed.core import FetchOutcome
from sportsfeed.providers.base import UpstreamClient
from sportsfeed.providers.espn.constants import UNDATED_SPORTS


class ESPNClient(UpstreamClient):
    """Client for ESPN's public site API."""

    name = "espn"
    EMPTY_PAYLOAD = {"events": []}

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        super().__init__(
            base_url or Config.ESPN_API_BASE,
            user_agent=user_agent,
            timeout=timeout,
            transport=transport,
        )

    def get_scoreboard(self, sport: str, league: str, as_of: date | None = None) -> FetchOutcome:
        """Fetch the scoreboard for a league.

        Args:
            sport: ESPN sport path segment (e.g., 'soccer', 'basketball')
            league: ESPN league id (e.g., 'ENG.1', 'nba')
            as_of: Scoreboard date, defaults to today. Ignored for sports
                   with sparse schedules (mma, racing), which are fetched
                   without a dates filter.

        Returns:
            FetchOutcome; payload is {"events": []} on any failure
        """
        params = None
        if sport not in UNDATED_SPORTS:
            params = {"dates": (as_of or date.today()).strftime("%Y%m%d")}
        return self.fetch_json(f"{sport}/{league}/scoreboard", params=params, label=league)
