"""Tests for the sportapi fetcher."""

from datetime import date

import httpx
import pytest

from matchcast.exceptions import ConfigurationError, UpstreamFetchError
from matchcast.fetchers import ScheduledEvent, SportApiFetcher

from tests.fixtures.factories import create_event_payload
from tests.fixtures.http import SportApiStub


class TestFetchScheduledEvents:
    """Tests for SportApiFetcher.fetch_scheduled_events."""

    @pytest.mark.asyncio
    async def test_parses_events(self):
        """Events are mapped in source order."""
        stub = SportApiStub(events=[
            create_event_payload(event_id=1, home="Arsenal", away="Chelsea"),
            create_event_payload(event_id=2, home="Inter", away="Milan", tournament="Serie A"),
        ])

        async with stub.factory()() as fetcher:
            events = await fetcher.fetch_scheduled_events(date(2025, 3, 1))

        assert [e.external_id for e in events] == ["1", "2"]
        assert events[0].match_name == "Arsenal vs Chelsea"
        assert events[1].league_name == "Serie A"
        assert events[0].home_team_id == 42
        assert events[0].away_team_id == 38

    @pytest.mark.asyncio
    async def test_request_path_and_headers(self):
        """Requests the date path with RapidAPI headers."""
        stub = SportApiStub()

        async with stub.factory()() as fetcher:
            await fetcher.fetch_scheduled_events(date(2025, 3, 1))

        request = stub.requests[0]
        assert request.url.path.endswith("/sport/football/scheduled-events/2025-03-01")
        assert request.headers["X-RapidAPI-Key"] == "test-key"
        assert "X-RapidAPI-Host" in request.headers

    @pytest.mark.asyncio
    async def test_missing_names_default(self):
        """Missing team and tournament names get placeholders."""
        stub = SportApiStub(events=[{"id": 7, "homeTeam": {}, "awayTeam": None}])

        async with stub.factory()() as fetcher:
            events = await fetcher.fetch_scheduled_events(date(2025, 3, 1))

        assert events[0].match_name == "Unknown vs Unknown"
        assert events[0].league_name == "Unknown League"
        assert events[0].start_timestamp is None

    @pytest.mark.asyncio
    async def test_non_200_raises(self):
        """A failing source raises UpstreamFetchError carrying the status."""
        stub = SportApiStub(events_status=503)

        async with stub.factory()() as fetcher:
            with pytest.raises(UpstreamFetchError) as exc_info:
                await fetcher.fetch_scheduled_events(date(2025, 3, 1))

        assert exc_info.value.upstream_status == 503
        assert "503" in exc_info.value.message
        assert exc_info.value.body == "upstream unavailable"

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        """Connection failures are reported as UpstreamFetchError."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom", request=request)

        async with SportApiFetcher(api_key="k", transport=httpx.MockTransport(handler)) as fetcher:
            with pytest.raises(UpstreamFetchError):
                await fetcher.fetch_scheduled_events(date(2025, 3, 1))


class TestFetchTeamForm:
    """Tests for SportApiFetcher.fetch_team_form."""

    @pytest.mark.asyncio
    async def test_form_string_limited_to_five(self):
        stub = SportApiStub(forms={42: ["W", "W", "D", "L", "W", "L", "L"]})

        async with stub.factory()() as fetcher:
            form = await fetcher.fetch_team_form(42)

        assert form == "WWDLW"
        assert stub.requests[0].url.path.endswith("/team/42/form/football")

    @pytest.mark.asyncio
    async def test_empty_form(self):
        stub = SportApiStub(forms={42: []})

        async with stub.factory()() as fetcher:
            assert await fetcher.fetch_team_form(42) == "N/A"

    @pytest.mark.asyncio
    async def test_non_200_returns_none(self):
        stub = SportApiStub()

        async with stub.factory()() as fetcher:
            assert await fetcher.fetch_team_form(99) is None


class TestScheduledEvent:
    """Tests for ScheduledEvent helpers."""

    def test_match_date_from_timestamp(self):
        event = ScheduledEvent("1", "A", "B", "MLS", start_timestamp=1740835800)

        assert event.match_date(fallback=date(2000, 1, 1)) == date(2025, 3, 1)

    def test_match_date_fallback(self):
        event = ScheduledEvent("1", "A", "B", "MLS")

        assert event.match_date(fallback=date(2025, 3, 2)) == date(2025, 3, 2)


def test_missing_api_key(monkeypatch):
    """Constructing without a key is a configuration error."""
    from matchcast.config import get_settings

    monkeypatch.setattr(get_settings(), "sports_api_key", None)

    with pytest.raises(ConfigurationError):
        SportApiFetcher()
