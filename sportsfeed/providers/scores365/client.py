"""365Scores games API HTTP client.

Fetch and return JSON - no data transformation.
No auth required.
"""

import httpx

from sportsfeed.config import Config
from sportsfeed.core import FetchOutcome
from sportsfeed.providers.base import UpstreamClient

# Web app type; the API rejects requests without it
APP_TYPE_ID = 5


class Scores365Client(UpstreamClient):
    """Client for the 365Scores web games listing."""

    name = "365scores"
    EMPTY_PAYLOAD = {"games": [], "competitions": []}

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        super().__init__(
            base_url or Config.SCORES365_API_BASE,
            user_agent=user_agent,
            timeout=timeout,
            transport=transport,
        )

    def get_current_games(self, competition_id: str) -> FetchOutcome:
        """Fetch current games for a competition.

        Args:
            competition_id: 365Scores competition id (e.g., '7' for Premier League)

        Returns:
            FetchOutcome; payload is {"games": [], "competitions": []} on any failure
        """
        return self.fetch_json(
            "web/games/current/",
            params={"appTypeId": APP_TYPE_ID, "competitions": competition_id},
            label=f"competition {competition_id}",
        )
