"""Automation run history API routes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from matchcast.database import get_db
from matchcast.schemas import (
    AutomationLogListResponse,
    AutomationLogResponse,
    AutomationStatusResponse,
)
from matchcast.services import PredictionService

router = APIRouter(prefix="/automation", tags=["automation"])


@router.get("/logs", response_model=AutomationLogListResponse)
async def get_automation_logs(
    limit: int = Query(10, ge=1, le=100),
    function_name: str | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Get latest automation run records."""
    service = PredictionService(db)
    logs = await service.get_automation_logs(limit, function_name)
    items = [AutomationLogResponse.model_validate(log) for log in logs]
    return AutomationLogListResponse(items=items, total=len(items))


@router.get("/status", response_model=AutomationStatusResponse)
async def get_automation_status(
    db: AsyncSession = Depends(get_db),
):
    """Get prediction count, latest prediction time and last run."""
    service = PredictionService(db)
    return await service.get_automation_status()
