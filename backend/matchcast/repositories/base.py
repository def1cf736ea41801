"""Shared query helpers for repositories."""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from matchcast.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic repository bound to one model and one session.

    Writes only flush; committing is left to the caller so a service can
    group several writes in one transaction.
    """

    def __init__(self, model: type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    def _where(self, query: Select, filters: dict[str, Any] | None) -> Select:
        for key, value in (filters or {}).items():
            if value is not None and hasattr(self.model, key):
                query = query.where(getattr(self.model, key) == value)
        return query

    async def get(self, id: Any) -> ModelType | None:
        """Get a record by primary key."""
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        filters: dict[str, Any] | None = None,
    ) -> list[ModelType]:
        """Get a page of records matching equality filters."""
        query = self._where(select(self.model), filters).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        query = self._where(select(func.count()).select_from(self.model), filters)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def create(self, data: dict[str, Any]) -> ModelType:
        """Add one record and load its generated columns."""
        instance = self.model(**data)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def create_many(self, rows: list[dict[str, Any]]) -> int:
        """Insert all rows in one statement. Returns the row count."""
        if not rows:
            return 0
        await self.session.execute(insert(self.model), rows)
        await self.session.flush()
        return len(rows)

    async def update(self, id: Any, data: dict[str, Any]) -> ModelType | None:
        """Overwrite the given columns. Returns None when the record is missing."""
        instance = await self.get(id)
        if instance is None:
            return None

        for key, value in data.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, id: Any) -> bool:
        instance = await self.get(id)
        if instance is None:
            return False
        await self.session.delete(instance)
        await self.session.flush()
        return True
