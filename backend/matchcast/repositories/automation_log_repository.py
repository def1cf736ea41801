"""Automation log repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from matchcast.models import AutomationLog
from matchcast.repositories.base import BaseRepository


class AutomationLogRepository(BaseRepository[AutomationLog]):
    """Repository for AutomationLog model."""

    def __init__(self, session: AsyncSession):
        super().__init__(AutomationLog, session)

    async def get_recent(
        self, limit: int = 10, function_name: str | None = None
    ) -> list[AutomationLog]:
        """Get latest run records, optionally for one function."""
        query = select(AutomationLog)
        if function_name:
            query = query.where(AutomationLog.function_name == function_name)
        query = query.order_by(
            AutomationLog.created_at.desc(), AutomationLog.id.desc()
        ).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
