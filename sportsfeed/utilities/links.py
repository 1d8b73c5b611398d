"""Watch-page deep links."""

from urllib.parse import quote

from sportsfeed.config import Config

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(text: str) -> str:
    """Percent-encode text the way browsers' encodeURIComponent does."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def build_watch_link(text: str, base_url: str | None = None) -> str:
    """Build the watch-page link for an event.

    Args:
        text: Event name or "Home vs Away" matchup
        base_url: Watch page base; defaults to Config.WATCH_BASE_URL

    Returns:
        URL with the encoded text as fragment, e.g.
        "https://www.sportsurge.uno/#Arsenal%20vs%20Chelsea"
    """
    return f"{base_url or Config.WATCH_BASE_URL}#{encode_uri_component(text)}"
