"""Shared fixtures for API integration tests."""

from collections.abc import Callable
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from matchcast.api.functions import get_analysis_service, get_ingestion_service
from matchcast.database import get_db
from matchcast.main import app
from matchcast.services import AnalysisService, IngestionService

from tests.fixtures.http import LLMStub, RecordingSleep, SportApiStub


@pytest.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API tests."""
    # Create a dependency override that uses the test session
    async def get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = get_test_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def use_stubs(db_session: AsyncSession) -> Callable[[SportApiStub, LLMStub], None]:
    """Route both function services through stub upstreams."""

    def install(sport: SportApiStub, llm: LLMStub) -> None:
        app.dependency_overrides[get_ingestion_service] = lambda: IngestionService(
            db_session,
            fetcher_factory=sport.factory(),
            llm_factory=llm.factory(),
            sleep=RecordingSleep(),
        )
        app.dependency_overrides[get_analysis_service] = lambda: AnalysisService(
            db_session, llm_factory=llm.factory()
        )

    return install
