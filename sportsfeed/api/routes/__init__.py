"""API route modules."""

from sportsfeed.api.routes import health, sports

__all__ = ["health", "sports"]
