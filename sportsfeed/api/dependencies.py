"""FastAPI dependencies for dependency injection."""

from functools import lru_cache

from sportsfeed.providers import ProviderClients
from sportsfeed.services import SportsAggregator


@lru_cache
def get_provider_clients() -> ProviderClients:
    """Singleton provider clients (pooled HTTP connections)."""
    return ProviderClients()


@lru_cache
def get_aggregator() -> SportsAggregator:
    """Singleton SportsAggregator over the shared provider clients."""
    return SportsAggregator(get_provider_clients())
