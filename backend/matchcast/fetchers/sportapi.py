"""RapidAPI sportapi data fetcher."""

import logging
from datetime import date
from typing import Any

import httpx

from matchcast.config import get_settings
from matchcast.exceptions import ConfigurationError, UpstreamFetchError
from matchcast.fetchers.base import DataFetcher, ScheduledEvent

logger = logging.getLogger(__name__)


class SportApiFetcher(DataFetcher):
    """
    Data fetcher for the sportapi service on RapidAPI.

    Endpoints used:
        /sport/{sport}/scheduled-events/{YYYY-MM-DD}
        /team/{team_id}/form/{sport}
    """

    def __init__(self, api_key: str | None = None, transport: httpx.AsyncBaseTransport | None = None):
        settings = get_settings()
        api_key = api_key or settings.sports_api_key
        if not api_key:
            raise ConfigurationError("SPORTS_API_KEY is not configured")

        super().__init__(
            headers={
                "X-RapidAPI-Key": api_key,
                "X-RapidAPI-Host": settings.sports_api_host,
            },
            transport=transport,
        )
        self.base_url = settings.sports_api_base_url.rstrip("/")
        self.sport = settings.sport
        self.form_results = settings.form_results

    async def fetch_scheduled_events(self, day: date) -> list[ScheduledEvent]:
        """
        Fetch scheduled events for a date.

        Args:
            day: Calendar date to query

        Returns:
            Events in source order

        Raises:
            UpstreamFetchError: on a non-200 response or transport failure
        """
        url = f"{self.base_url}/sport/{self.sport}/scheduled-events/{day.isoformat()}"

        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            raise UpstreamFetchError(f"Match source unreachable: {e}") from e

        if response.status_code != 200:
            body = response.text[:500]
            logger.error(f"Match source error {response.status_code}: {body}")
            raise UpstreamFetchError(
                f"Match source error: {response.status_code}",
                upstream_status=response.status_code,
                body=body,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamFetchError("Match source returned invalid JSON") from e

        events = [self._parse_event(raw) for raw in payload.get("events") or []]
        logger.info(f"Fetched {len(events)} scheduled events for {day.isoformat()}")
        return events

    async def fetch_team_form(self, team_id: int) -> str | None:
        """
        Fetch a team's recent form.

        Returns:
            Result letters of the latest matches, "N/A" when the source has none,
            or None on a non-200 response
        """
        url = f"{self.base_url}/team/{team_id}/form/{self.sport}"
        response = await self.client.get(url)

        if response.status_code != 200:
            return None

        form = response.json().get("form") or []
        letters = "".join(str(item.get("type", "")) for item in form[: self.form_results])
        return letters or "N/A"

    def _parse_event(self, raw: dict[str, Any]) -> ScheduledEvent:
        home = raw.get("homeTeam") or {}
        away = raw.get("awayTeam") or {}
        tournament = raw.get("tournament") or {}
        event_id = raw.get("id")

        return ScheduledEvent(
            external_id=str(event_id) if event_id is not None else None,
            home_team=home.get("name") or "Unknown",
            away_team=away.get("name") or "Unknown",
            league_name=tournament.get("name") or "Unknown League",
            home_team_id=home.get("id"),
            away_team_id=away.get("id"),
            start_timestamp=raw.get("startTimestamp"),
        )
