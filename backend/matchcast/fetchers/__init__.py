"""External data fetchers."""

from matchcast.fetchers.base import DataFetcher, ScheduledEvent
from matchcast.fetchers.sportapi import SportApiFetcher

__all__ = [
    "DataFetcher",
    "ScheduledEvent",
    "SportApiFetcher",
]
