"""Match ingestion and prediction generation pipeline."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from matchcast.config import get_settings
from matchcast.exceptions import (
    ConfigurationError,
    LLMError,
    PersistenceError,
    QuotaExhaustedError,
    RateLimitedError,
    UpstreamFetchError,
)
from matchcast.fetchers import DataFetcher, ScheduledEvent, SportApiFetcher
from matchcast.llm import LLMClient, ParsedPrediction, parse_prediction_response
from matchcast.llm.prompts import build_prediction_messages
from matchcast.models import RunStatus
from matchcast.models.base import utcnow
from matchcast.models.prediction import new_prediction_id
from matchcast.repositories import AutomationLogRepository, PredictionRepository

logger = logging.getLogger(__name__)

FUNCTION_NAME = "fetch-matches"
PENDING_PREDICTION = "Analysis pending"
PENDING_CONFIDENCE = 50


def filter_events(events: list[ScheduledEvent], leagues: list[str]) -> list[ScheduledEvent]:
    """Keep events whose league name contains one of the leagues (case-insensitive)."""
    wanted = [league.lower() for league in leagues]
    return [
        event for event in events
        if any(league in event.league_name.lower() for league in wanted)
    ]


@dataclass
class BatchResult:
    """Predictions gathered during one run, before they are stored."""

    records: list[dict[str, Any]] = field(default_factory=list)
    matches: list[str] = field(default_factory=list)
    analyses_generated: int = 0
    stopped_early: bool = False
    seen_event_ids: set[str] = field(default_factory=set)
    seen_matches: set[tuple[str, date]] = field(default_factory=set)

    def remember(self, external_id: str | None, match_name: str, match_date: date) -> None:
        if external_id is not None:
            self.seen_event_ids.add(external_id)
        self.seen_matches.add((match_name, match_date))

    def has_seen(self, external_id: str | None, match_name: str, match_date: date) -> bool:
        if external_id is not None and external_id in self.seen_event_ids:
            return True
        return (match_name, match_date) in self.seen_matches


@dataclass
class IngestionSummary:
    """Outcome of a pipeline run."""

    matches: list[str]
    analyses_generated: int
    deleted_count: int
    stopped_early: bool
    execution_time_ms: int

    @property
    def matches_processed(self) -> int:
        return len(self.matches)


class IngestionService:
    """
    Pulls today's fixtures, generates a prediction for each new one and
    stores them in a single batch.

    External calls are issued one at a time. Every invocation writes a
    ``started`` automation log followed by exactly one ``success`` or
    ``error`` log.
    """

    def __init__(
        self,
        session: AsyncSession,
        fetcher_factory: Callable[[], DataFetcher] | None = None,
        llm_factory: Callable[[], LLMClient] | None = None,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
    ):
        self.session = session
        self.settings = get_settings()
        self.prediction_repo = PredictionRepository(session)
        self.log_repo = AutomationLogRepository(session)
        self.fetcher_factory = fetcher_factory or SportApiFetcher
        self.llm_factory = llm_factory or LLMClient
        self.sleep = sleep or asyncio.sleep
        self._started_at = time.monotonic()

    async def run(self, target_date: date | None = None) -> IngestionSummary:
        """
        Run the pipeline once.

        Args:
            target_date: Date whose fixtures are fetched (defaults to today)

        Returns:
            IngestionSummary

        Raises:
            ConfigurationError: credentials missing
            UpstreamFetchError: the match source failed
            PersistenceError: the batch insert failed
        """
        self._started_at = time.monotonic()
        target_date = target_date or date.today()

        try:
            fetcher, llm = await self._open_clients()
        except ConfigurationError as e:
            await self._log(RunStatus.ERROR, error_details=e.message)
            raise

        await self._log(RunStatus.STARTED, message="Match ingestion started")
        logger.info(f"Match ingestion started for {target_date.isoformat()}")

        batch = BatchResult()
        try:
            async with fetcher, llm:
                deleted_count = await self._purge_stale()

                events = await fetcher.fetch_scheduled_events(target_date)
                candidates = filter_events(events, self.settings.important_leagues)
                logger.info(f"Filtered {len(events)} events to {len(candidates)} in tracked leagues")

                batch = await self._generate_predictions(
                    fetcher, llm, candidates[: self.settings.max_matches_per_run], target_date
                )

            await self._insert(batch)

        except Exception as e:
            await self.session.rollback()
            await self._log(
                RunStatus.ERROR,
                error_details=self._describe(e),
                matches_processed=len(batch.matches),
                analyses_generated=batch.analyses_generated,
            )
            raise

        message = f"{len(batch.matches)} matches processed, {batch.analyses_generated} analyses generated"
        await self._log(
            RunStatus.SUCCESS,
            message=message,
            matches_processed=len(batch.matches),
            analyses_generated=batch.analyses_generated,
        )
        logger.info(f"Match ingestion completed: {message}")

        return IngestionSummary(
            matches=batch.matches,
            analyses_generated=batch.analyses_generated,
            deleted_count=deleted_count,
            stopped_early=batch.stopped_early,
            execution_time_ms=self._elapsed_ms(),
        )

    async def _open_clients(self) -> tuple[DataFetcher, LLMClient]:
        fetcher = self.fetcher_factory()
        try:
            llm = self.llm_factory()
        except ConfigurationError:
            await fetcher.close()
            raise
        return fetcher, llm

    async def _purge_stale(self) -> int:
        """Delete predictions older than the retention window. Best-effort."""
        cutoff = datetime.now(timezone.utc) - timedelta(days=self.settings.retention_days)
        try:
            deleted = await self.prediction_repo.delete_created_before(cutoff)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning(f"Retention sweep failed: {e}")
            return 0

        if deleted:
            logger.info(f"Cleaned up {deleted} old predictions")
        return deleted

    async def _generate_predictions(
        self,
        fetcher: DataFetcher,
        llm: LLMClient,
        candidates: list[ScheduledEvent],
        target_date: date,
    ) -> BatchResult:
        batch = BatchResult()

        for event in candidates:
            match_name = event.match_name
            match_date = event.match_date(fallback=target_date)

            if await self._is_duplicate(event, match_date, batch):
                logger.info(f"Match already exists: {match_name} ({event.external_id})")
                continue

            logger.info(f"Processing new match: {match_name} ({event.league_name})")
            team_context = await self._gather_team_context(fetcher, event)
            messages = build_prediction_messages(
                match_name, event.league_name, match_date, team_context
            )

            try:
                text = await llm.complete(messages)
            except RateLimitedError:
                logger.warning(
                    f"Rate limited on {match_name}, waiting {self.settings.rate_limit_delay}s"
                )
                await self.sleep(self.settings.rate_limit_delay)
                continue
            except QuotaExhaustedError:
                logger.warning("LLM credits exhausted, stopping")
                batch.stopped_early = True
                break
            except LLMError as e:
                logger.error(f"Prediction failed for {match_name}: {e}")
                batch.records.append(self._pending_record(event, match_date))
            else:
                parsed = parse_prediction_response(text)
                if not parsed.is_complete:
                    logger.warning(f"Response for {match_name} missing fields: {parsed.missing}")
                batch.records.append(self._prediction_record(event, match_date, parsed))
                batch.analyses_generated += 1
                logger.info(f"Prediction generated for {match_name} (confidence {parsed.confidence_score}%)")

            batch.matches.append(match_name)
            batch.remember(event.external_id, match_name, match_date)
            await self.sleep(self.settings.llm_call_delay)

        return batch

    async def _is_duplicate(self, event: ScheduledEvent, match_date: date, batch: BatchResult) -> bool:
        if batch.has_seen(event.external_id, event.match_name, match_date):
            return True
        return await self.prediction_repo.exists_for_event(
            event.external_id, event.match_name, match_date
        )

    async def _gather_team_context(self, fetcher: DataFetcher, event: ScheduledEvent) -> list[str]:
        """Recent form lines for both teams. Failures only drop context."""
        lines = []
        teams = [
            (event.home_team_id, event.home_team),
            (event.away_team_id, event.away_team),
        ]
        try:
            for team_id, team_name in teams:
                if team_id is None:
                    continue
                form = await fetcher.fetch_team_form(team_id)
                if form:
                    lines.append(f"{team_name} last {self.settings.form_results} results: {form}")
            await self.sleep(self.settings.form_fetch_delay)
        except Exception as e:
            logger.warning(f"Could not fetch team form for {event.match_name}: {e}")
        return lines

    def _fixture_fields(self, event: ScheduledEvent, match_date: date) -> dict[str, Any]:
        now = utcnow()
        return {
            "id": new_prediction_id(),
            "match_name": event.match_name,
            "external_event_id": event.external_id,
            "league_name": event.league_name,
            "home_team": event.home_team,
            "away_team": event.away_team,
            "match_date": match_date,
            "created_at": now,
            "last_updated": now,
        }

    def _prediction_record(
        self, event: ScheduledEvent, match_date: date, parsed: ParsedPrediction
    ) -> dict[str, Any]:
        return {
            **self._fixture_fields(event, match_date),
            "prediction": parsed.prediction,
            "confidence_score": parsed.confidence_score,
            "win_probability": parsed.win_probability,
            "score_prediction": parsed.score_prediction or None,
            "reasoning": parsed.reasoning or None,
            "analysis": parsed.analysis or None,
            "model_name": self.settings.prediction_model_name,
        }

    def _pending_record(self, event: ScheduledEvent, match_date: date) -> dict[str, Any]:
        return {
            **self._fixture_fields(event, match_date),
            "prediction": PENDING_PREDICTION,
            "confidence_score": PENDING_CONFIDENCE,
            "win_probability": None,
            "score_prediction": None,
            "reasoning": None,
            "analysis": None,
            "model_name": self.settings.pending_model_name,
        }

    async def _insert(self, batch: BatchResult) -> None:
        if not batch.records:
            return
        try:
            await self.prediction_repo.create_many(batch.records)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Insert of {len(batch.records)} predictions failed: {e}")
            raise PersistenceError(f"Database insert error: {e}") from e
        logger.info(f"Inserted {len(batch.records)} new predictions")

    async def _log(
        self,
        status: RunStatus,
        message: str | None = None,
        error_details: str | None = None,
        matches_processed: int | None = None,
        analyses_generated: int | None = None,
    ) -> None:
        """Append an automation log. A failing log write never fails the run."""
        try:
            await self.log_repo.create({
                "function_name": FUNCTION_NAME,
                "status": status.value,
                "message": message,
                "error_details": error_details,
                "matches_processed": matches_processed,
                "analyses_generated": analyses_generated,
                "execution_time_ms": self._elapsed_ms(),
            })
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to write automation log: {e}")

    def _elapsed_ms(self) -> int:
        return int((time.monotonic() - self._started_at) * 1000)

    @staticmethod
    def _describe(error: Exception) -> str:
        if isinstance(error, UpstreamFetchError) and error.body:
            return f"{error.message} - {error.body}"
        return str(error)
