"""Base data fetcher."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, timezone

import httpx

from matchcast.config import get_settings

settings = get_settings()


@dataclass
class ScheduledEvent:
    """Scheduled fixture from external source."""

    external_id: str | None
    home_team: str
    away_team: str
    league_name: str
    home_team_id: int | None = None
    away_team_id: int | None = None
    start_timestamp: int | None = None  # unix seconds

    @property
    def match_name(self) -> str:
        return f"{self.home_team} vs {self.away_team}"

    def match_date(self, fallback: date) -> date:
        """Kick-off date in UTC, or the fallback when the source gave no timestamp."""
        if self.start_timestamp is None:
            return fallback
        return datetime.fromtimestamp(self.start_timestamp, tz=timezone.utc).date()


class DataFetcher(ABC):
    """Base class for external match data fetchers."""

    def __init__(self, headers: dict[str, str] | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.client = httpx.AsyncClient(
            headers=headers,
            timeout=settings.request_timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @abstractmethod
    async def fetch_scheduled_events(self, day: date) -> list[ScheduledEvent]:
        """Fetch fixtures scheduled on a date."""
        pass

    @abstractmethod
    async def fetch_team_form(self, team_id: int) -> str | None:
        """Fetch a team's recent results as a compact string (e.g. "WWDLW")."""
        pass
