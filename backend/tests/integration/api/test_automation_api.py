"""Integration tests for Automation API."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from tests.fixtures.factories import create_automation_log


class TestAutomationAPI:
    """Tests for /api/automation endpoints."""

    @pytest.mark.asyncio
    async def test_logs_newest_first(self, client: AsyncClient, db_session):
        now = datetime.now(timezone.utc)
        db_session.add(create_automation_log(status="started", created_at=now - timedelta(seconds=5)))
        db_session.add(create_automation_log(
            status="success",
            created_at=now,
            message="2 matches processed, 2 analyses generated",
            matches_processed=2,
            analyses_generated=2,
        ))
        await db_session.commit()

        response = await client.get("/api/automation/logs")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert data["items"][0]["status"] == "success"
        assert data["items"][0]["matches_processed"] == 2
        assert data["items"][1]["status"] == "started"

    @pytest.mark.asyncio
    async def test_logs_filtered_by_function(self, client: AsyncClient, db_session):
        db_session.add(create_automation_log(function_name="fetch-matches"))
        db_session.add(create_automation_log(function_name="other"))
        await db_session.commit()

        response = await client.get("/api/automation/logs", params={"function_name": "fetch-matches"})

        assert response.json()["total"] == 1

    @pytest.mark.asyncio
    async def test_status_empty(self, client: AsyncClient):
        response = await client.get("/api/automation/status")

        assert response.status_code == 200
        assert response.json() == {
            "total_predictions": 0,
            "latest_prediction_at": None,
            "last_run": None,
        }

    @pytest.mark.asyncio
    async def test_status(self, client: AsyncClient, db_session, test_prediction):
        db_session.add(create_automation_log(status="error", error_details="Match source error: 500"))
        await db_session.commit()

        response = await client.get("/api/automation/status")

        data = response.json()
        assert data["total_predictions"] == 1
        assert data["latest_prediction_at"] is not None
        assert data["last_run"]["status"] == "error"
        assert data["last_run"]["error_details"] == "Match source error: 500"


class TestRootEndpoints:
    """Tests for / and /health."""

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.json() == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_root(self, client: AsyncClient):
        response = await client.get("/")

        assert response.json()["status"] == "running"
