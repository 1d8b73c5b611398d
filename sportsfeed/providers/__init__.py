"""Provider layer - upstream sports data providers.

This is the SINGLE place where providers are wired up. Each provider is a
client (fetch) plus a normalizer (pure mapping to SportEvent); dispatch is
by provider name through the closed tables below.

Adding a new provider:
1. Create provider module (providers/newprovider/) with client + normalizer
2. Add its name, fetch and normalize entries here
3. Add league mappings to services/league_registry.py
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from zoneinfo import ZoneInfo

from sportsfeed.core import FetchOutcome, SportEvent
from sportsfeed.providers.espn import ESPNClient, normalize_scoreboard
from sportsfeed.providers.scores365 import Scores365Client, normalize_games

ESPN = "espn"
SCORES365 = "365scores"

Normalizer = Callable[[dict, str, ZoneInfo | None], list[SportEvent]]


def _normalize_espn(payload: dict, sport: str, timezone: ZoneInfo | None = None) -> list[SportEvent]:
    return normalize_scoreboard(payload, sport, timezone=timezone)


def _normalize_365(payload: dict, sport: str, timezone: ZoneInfo | None = None) -> list[SportEvent]:
    # Single-sport provider; the requested sport does not change the mapping
    return normalize_games(payload, timezone=timezone)


NORMALIZERS: dict[str, Normalizer] = {
    ESPN: _normalize_espn,
    SCORES365: _normalize_365,
}


def normalize(
    provider: str,
    payload: dict,
    sport: str,
    timezone: ZoneInfo | None = None,
) -> list[SportEvent]:
    """Normalize a raw payload with the given provider's normalizer."""
    try:
        normalizer = NORMALIZERS[provider]
    except KeyError:
        raise ValueError(f"Unknown provider: {provider}") from None
    return normalizer(payload, sport, timezone)


@dataclass
class ProviderClients:
    """One pooled client per provider, shared across requests."""

    espn: ESPNClient = field(default_factory=ESPNClient)
    scores365: Scores365Client = field(default_factory=Scores365Client)

    def fetch(
        self,
        provider: str,
        sport: str,
        provider_league_id: str,
        as_of: date | None = None,
    ) -> FetchOutcome:
        """Fetch one provider league. Never raises for upstream failures."""
        if provider == ESPN:
            return self.espn.get_scoreboard(sport, provider_league_id, as_of)
        if provider == SCORES365:
            return self.scores365.get_current_games(provider_league_id)
        raise ValueError(f"Unknown provider: {provider}")

    def close(self) -> None:
        self.espn.close()
        self.scores365.close()


__all__ = [
    "ESPN",
    "NORMALIZERS",
    "SCORES365",
    "ESPNClient",
    "ProviderClients",
    "Scores365Client",
    "normalize",
]
