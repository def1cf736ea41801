"""Prediction repository."""

from datetime import date, datetime

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from matchcast.models import Prediction
from matchcast.repositories.base import BaseRepository


class PredictionRepository(BaseRepository[Prediction]):
    """Repository for Prediction model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Prediction, session)

    async def get_by_external_event_id(self, external_event_id: str) -> Prediction | None:
        """Get prediction by the match source's event id."""
        result = await self.session.execute(
            select(Prediction).where(Prediction.external_event_id == external_event_id)
        )
        return result.scalar_one_or_none()

    async def exists_by_match(self, match_name: str, match_date: date) -> bool:
        """Check whether a prediction exists for a match name on a date."""
        result = await self.session.execute(
            select(Prediction.id)
            .where(
                Prediction.match_name == match_name,
                Prediction.match_date == match_date,
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def exists_for_event(
        self,
        external_event_id: str | None,
        match_name: str,
        match_date: date,
    ) -> bool:
        """Check both dedup keys: event id first, then name and date."""
        if external_event_id is not None:
            if await self.get_by_external_event_id(external_event_id) is not None:
                return True
        return await self.exists_by_match(match_name, match_date)

    async def delete_created_before(self, cutoff: datetime) -> int:
        """Delete predictions created before the cutoff. Returns deleted count."""
        result = await self.session.execute(
            delete(Prediction)
            .where(Prediction.created_at < cutoff)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
        return result.rowcount or 0

    async def get_latest(self, limit: int = 100) -> list[Prediction]:
        """Get newest predictions first."""
        result = await self.session.execute(
            select(Prediction)
            .order_by(Prediction.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_latest_created_at(self) -> datetime | None:
        """Get creation time of the newest prediction."""
        result = await self.session.execute(select(func.max(Prediction.created_at)))
        return result.scalar_one_or_none()
