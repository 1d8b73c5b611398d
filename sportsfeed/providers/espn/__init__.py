"""ESPN provider - scoreboard-style API."""

from sportsfeed.providers.espn.client import ESPNClient
from sportsfeed.providers.espn.normalizer import league_full_name, normalize_scoreboard

__all__ = ["ESPNClient", "league_full_name", "normalize_scoreboard"]
