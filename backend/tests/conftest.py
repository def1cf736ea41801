"""Shared test fixtures."""

import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from matchcast.database import Base
from matchcast.models import Prediction

from tests.fixtures.factories import create_prediction
from tests.fixtures.http import RecordingSleep


@pytest.fixture
async def db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session with transaction rollback."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def test_prediction(db_session: AsyncSession) -> Prediction:
    """Create a sample prediction for testing."""
    prediction = create_prediction(
        match_name="Arsenal vs Chelsea",
        external_event_id="1001",
        match_date=date(2025, 3, 1),
    )
    db_session.add(prediction)
    await db_session.commit()
    return prediction


@pytest.fixture
async def stale_prediction(db_session: AsyncSession) -> Prediction:
    """Create a prediction older than the retention window."""
    prediction = create_prediction(
        match_name="Lazio vs Roma",
        external_event_id="900",
        league_name="Serie A",
        match_date=date(2025, 2, 20),
        created_at=datetime.now(timezone.utc) - timedelta(days=3),
    )
    db_session.add(prediction)
    await db_session.commit()
    return prediction


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    """Sleep replacement that records requested delays."""
    return RecordingSleep()
