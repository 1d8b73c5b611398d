"""Tests for event filtering and ordering."""

import pytest

from sportsfeed.core import EventState, SportEvent
from sportsfeed.services.event_filters import select_events, sort_events


def make_event(event_id, name, status=EventState.SCHEDULED, date="2025-03-01T20:00Z"):
    return SportEvent(
        id=event_id,
        name=name,
        short_name=name,
        league="NBA",
        date=date,
        status=status,
        status_text=status.value.title(),
        time_display="",
        link="",
        sport_type="basketball",
        provider="espn",
        competitors=(),
        scores=(),
    )


class TestSortEvents:
    def test_scheduled_by_start_time(self):
        late = make_event("1", "A", date="2025-03-01T23:00Z")
        early = make_event("2", "B", date="2025-03-01T18:00Z")
        assert [e.id for e in sort_events([late, early])] == ["2", "1"]

    def test_unparseable_start_sorts_last(self):
        tbd = make_event("1", "A", date="TBD")
        dated = make_event("2", "B")
        assert [e.id for e in sort_events([tbd, dated])] == ["2", "1"]

    def test_live_events_by_name(self):
        b = make_event("1", "Bulls at Celtics", status=EventState.LIVE)
        a = make_event("2", "Ajax vs PSV", status=EventState.LIVE)
        assert [e.id for e in sort_events([b, a])] == ["2", "1"]


class TestSelectEvents:
    def test_live_filter(self):
        events = [
            make_event("1", "A", status=EventState.LIVE),
            make_event("2", "B"),
            make_event("3", "C", status=EventState.FINISHED),
        ]
        assert [e.id for e in select_events(events, status="live")] == ["1"]

    def test_upcoming_filter(self):
        events = [make_event("1", "A", status=EventState.LIVE), make_event("2", "B")]
        assert [e.id for e in select_events(events, status="upcoming")] == ["2"]

    def test_limit(self):
        events = [make_event(str(i), f"Game {i}", date=f"2025-03-0{i}T20:00Z") for i in range(1, 6)]
        assert [e.id for e in select_events(events, limit=2)] == ["1", "2"]

    def test_no_filter_returns_all(self):
        events = [make_event("1", "A"), make_event("2", "B")]
        assert len(select_events(events)) == 2

    def test_unknown_status_raises(self):
        with pytest.raises(ValueError):
            select_events([], status="finished")
