"""Multi-source event aggregation.

Builds the work items for a request scope, dispatches them through a paced
delay queue, normalizes each result and merges everything into flat and
grouped views.

Pacing: item i is dispatched i * spacing after the aggregation starts
(500ms by default). This is a heuristic against upstream rate limiting,
not a guarantee. All items are joined before aggregate() returns.

Fault isolation: the upstream clients already degrade failures to empty
payloads; anything else that goes wrong inside one item is logged and
yields zero events for that item only.
"""

import logging
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date, datetime
from zoneinfo import ZoneInfo

from sportsfeed.config import Config, get_user_timezone
from sportsfeed.core import FetchOutcome, SportEvent
from sportsfeed.providers import ProviderClients, normalize
from sportsfeed.services.league_registry import (
    WorkItem,
    all_sports_work_items,
    league_work_items,
    sport_work_items,
)

logger = logging.getLogger(__name__)


# =============================================================================
# REQUEST SCOPES
# =============================================================================


@dataclass(frozen=True)
class LeagueScope:
    """One league of one sport."""

    sport: str
    league_slug: str


@dataclass(frozen=True)
class SportScope:
    """Every featured league of one sport."""

    sport: str


@dataclass(frozen=True)
class AllSportsScope:
    """The fixed cross-provider, multi-sport feed."""


Scope = LeagueScope | SportScope | AllSportsScope


def work_items_for(scope: Scope) -> list[WorkItem]:
    """Build the ordered work items for a scope.

    Raises:
        UnknownSportError / UnknownLeagueError: scope not in the registry
    """
    if isinstance(scope, LeagueScope):
        return league_work_items(scope.sport, scope.league_slug)
    if isinstance(scope, SportScope):
        return sport_work_items(scope.sport)
    if isinstance(scope, AllSportsScope):
        return all_sports_work_items()
    raise TypeError(f"Unsupported scope: {scope!r}")


# =============================================================================
# RESULTS
# =============================================================================


@dataclass
class WorkResult:
    """Outcome of one work item."""

    item: WorkItem
    outcome: FetchOutcome | None
    events: list[SportEvent] = field(default_factory=list)
    error: str | None = None

    @property
    def payload(self) -> dict:
        return self.outcome.payload if self.outcome else {}


@dataclass
class AggregationResult:
    """Merged output of an aggregation.

    flat: all events in work-item order
    grouped: events by work item group key; keys with no events are absent
    results: per-item results, in work-item order
    """

    flat: list[SportEvent] = field(default_factory=list)
    grouped: dict[str, list[SportEvent]] = field(default_factory=dict)
    results: list[WorkResult] = field(default_factory=list)


def merge_results(results: list[WorkResult]) -> AggregationResult:
    """Merge per-item results into flat and grouped views."""
    merged = AggregationResult(results=list(results))
    for result in results:
        if not result.events:
            continue
        merged.flat.extend(result.events)
        merged.grouped.setdefault(result.item.group_key, []).extend(result.events)
    return merged


# =============================================================================
# AGGREGATOR
# =============================================================================


class SportsAggregator:
    """Fetch + normalize + merge for a request scope.

    Usage:
        aggregator = SportsAggregator(ProviderClients())
        result = aggregator.aggregate(SportScope("soccer"))
        result.flat, result.grouped
    """

    def __init__(
        self,
        clients: ProviderClients,
        spacing_seconds: float | None = None,
        timezone: ZoneInfo | None = None,
        sleep: Callable[[float], None] = time.sleep,
        today: Callable[[], date] | None = None,
    ):
        """
        Args:
            clients: Provider clients used for every fetch
            spacing_seconds: Pacing interval between dispatches, defaults to
                             Config.FETCH_SPACING_MS
            timezone: Zone for scheduled clock times and "today"
            sleep: Sleep function (injectable for tests)
            today: Date provider for dated scoreboards (injectable for tests)
        """
        self._clients = clients
        self._spacing = (
            spacing_seconds if spacing_seconds is not None else Config.FETCH_SPACING_MS / 1000.0
        )
        self._timezone = timezone
        self._sleep = sleep
        self._today = today

    @property
    def timezone(self) -> ZoneInfo:
        return self._timezone or get_user_timezone()

    def dispatch_delay(self, index: int) -> float:
        """Seconds to wait before dispatching the index-th work item."""
        return index * self._spacing

    def _as_of(self) -> date:
        if self._today:
            return self._today()
        return datetime.now(self.timezone).date()

    def _run_item(self, index: int, item: WorkItem, as_of: date) -> WorkResult:
        delay = self.dispatch_delay(index)
        if delay > 0:
            self._sleep(delay)

        try:
            outcome = self._clients.fetch(item.provider, item.sport, item.provider_league_id, as_of)
            events = normalize(item.provider, outcome.payload, item.sport, self.timezone)
        except Exception as e:
            logger.warning(
                f"Work item {item.provider}/{item.sport}/{item.provider_league_id} failed: {e}",
                exc_info=True,
            )
            return WorkResult(item=item, outcome=None, error=str(e))

        logger.debug(
            f"{item.provider}/{item.sport}/{item.provider_league_id}: "
            f"{outcome.status.value}, {len(events)} events"
        )
        return WorkResult(item=item, outcome=outcome, events=events)

    def run(self, items: list[WorkItem]) -> list[WorkResult]:
        """Dispatch work items through the delay queue and join them all.

        Returns:
            One WorkResult per item, in item order
        """
        if not items:
            return []

        as_of = self._as_of()
        with ThreadPoolExecutor(max_workers=len(items)) as executor:
            futures = [
                executor.submit(self._run_item, index, item, as_of)
                for index, item in enumerate(items)
            ]
            return [future.result() for future in futures]

    def aggregate(self, scope: Scope) -> AggregationResult:
        """Aggregate every work item of a scope.

        Raises:
            UnknownSportError / UnknownLeagueError: before any fetch is made
        """
        items = work_items_for(scope)
        started = time.monotonic()
        merged = merge_results(self.run(items))
        logger.info(
            f"Aggregated {scope}: {len(merged.flat)} events from {len(items)} sources "
            f"in {time.monotonic() - started:.1f}s"
        )
        return merged
