"""Application configuration.

Single source of truth for all configuration values.
Loads from environment variables with .env file support.
"""

import os
from pathlib import Path
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

VERSION = "1.0.0"

# Load .env file from project root
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"
load_dotenv(_ENV_FILE)

# Browser-like agent; some providers reject unknown clients
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Config:
    """Application configuration singleton.

    All configuration values should be accessed through this class.
    Values are loaded from environment variables with sensible defaults.
    """

    # Timezone used for scheduled kickoff times (timeDisplay)
    USER_TIMEZONE: str = os.getenv("USER_TIMEZONE", "America/New_York")

    # API
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))

    # Upstream providers (no auth required)
    ESPN_API_BASE: str = os.getenv(
        "ESPN_API_BASE",
        "https://site.api.espn.com/apis/site/v2/sports",
    )
    SCORES365_API_BASE: str = os.getenv(
        "SCORES365_API_BASE",
        "https://webws.365scores.com",
    )
    UPSTREAM_USER_AGENT: str = os.getenv("UPSTREAM_USER_AGENT", DEFAULT_USER_AGENT)
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "10.0"))

    # Spacing between paced upstream dispatches (item i waits i * spacing)
    FETCH_SPACING_MS: int = int(os.getenv("FETCH_SPACING_MS", "500"))

    # Deep links to the watch page
    WATCH_BASE_URL: str = os.getenv("WATCH_BASE_URL", "https://www.sportsurge.uno/")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str | None = os.getenv("LOG_DIR") or None

    @classmethod
    def get_timezone(cls) -> ZoneInfo:
        """Get the user timezone as a ZoneInfo object."""
        return ZoneInfo(cls.USER_TIMEZONE)

    @classmethod
    def reload(cls) -> None:
        """Reload configuration from environment.

        Useful for testing or runtime config changes.
        """
        load_dotenv(_ENV_FILE, override=True)
        cls.USER_TIMEZONE = os.getenv("USER_TIMEZONE", "America/New_York")
        cls.API_HOST = os.getenv("API_HOST", "0.0.0.0")
        cls.API_PORT = int(os.getenv("API_PORT", "8000"))
        cls.ESPN_API_BASE = os.getenv(
            "ESPN_API_BASE",
            "https://site.api.espn.com/apis/site/v2/sports",
        )
        cls.SCORES365_API_BASE = os.getenv("SCORES365_API_BASE", "https://webws.365scores.com")
        cls.UPSTREAM_USER_AGENT = os.getenv("UPSTREAM_USER_AGENT", DEFAULT_USER_AGENT)
        cls.REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10.0"))
        cls.FETCH_SPACING_MS = int(os.getenv("FETCH_SPACING_MS", "500"))
        cls.WATCH_BASE_URL = os.getenv("WATCH_BASE_URL", "https://www.sportsurge.uno/")
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        cls.LOG_DIR = os.getenv("LOG_DIR") or None


def get_user_timezone() -> ZoneInfo:
    """Get the configured user timezone."""
    return Config.get_timezone()
