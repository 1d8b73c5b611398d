"""ESPN provider constants."""

from sportsfeed.core import EventState

# Map ESPN status.type.state to our canonical states and labels
STATE_MAP = {
    "pre": (EventState.SCHEDULED, "Scheduled"),
    "in": (EventState.LIVE, "Live"),
    "post": (EventState.FINISHED, "Finished"),
}

# Sports without head-to-head competitors
INDIVIDUAL_SPORTS = frozenset({"mma", "racing", "golf"})

# Sparse schedules - scoreboard is fetched without a dates filter
UNDATED_SPORTS = frozenset({"mma", "racing"})
