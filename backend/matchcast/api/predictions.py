"""Prediction API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from matchcast.database import get_db
from matchcast.schemas import PredictionListResponse, PredictionResponse
from matchcast.services import PredictionService

router = APIRouter(prefix="/predictions", tags=["predictions"])


@router.get("", response_model=PredictionListResponse)
async def get_predictions(
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
):
    """Get predictions, newest first."""
    service = PredictionService(db)
    predictions = await service.get_predictions(limit)
    items = [PredictionResponse.model_validate(p) for p in predictions]
    return PredictionListResponse(items=items, total=len(items))


@router.get("/{prediction_id}", response_model=PredictionResponse)
async def get_prediction(
    prediction_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Get a prediction by ID."""
    service = PredictionService(db)
    prediction = await service.get_prediction(prediction_id)
    if not prediction:
        raise HTTPException(status_code=404, detail="Prediction not found")
    return prediction
