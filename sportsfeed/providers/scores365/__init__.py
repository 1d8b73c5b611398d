"""365Scores provider - games-listing API."""

from sportsfeed.providers.scores365.client import Scores365Client
from sportsfeed.providers.scores365.normalizer import normalize_games

__all__ = ["Scores365Client", "normalize_games"]
