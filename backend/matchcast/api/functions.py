"""Callable backend function routes (pipeline run and prediction analysis)."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from matchcast.database import get_db
from matchcast.schemas import (
    AnalyzePredictionRequest,
    AnalyzePredictionResponse,
    FetchMatchesRequest,
    FetchMatchesResponse,
)
from matchcast.services import AnalysisService, IngestionService

router = APIRouter(tags=["functions"])


def get_ingestion_service(db: AsyncSession = Depends(get_db)) -> IngestionService:
    """Dependency for the ingestion pipeline."""
    return IngestionService(db)


def get_analysis_service(db: AsyncSession = Depends(get_db)) -> AnalysisService:
    """Dependency for the analysis service."""
    return AnalysisService(db)


@router.post(
    "/fetch-matches",
    response_model=FetchMatchesResponse,
    response_model_exclude_none=True,
)
async def fetch_matches(
    request: FetchMatchesRequest | None = None,
    service: IngestionService = Depends(get_ingestion_service),
):
    """Fetch today's fixtures and generate predictions for new ones."""
    target_date = request.target_date if request else None
    summary = await service.run(target_date)

    return FetchMatchesResponse(
        success=True,
        message=(
            f"{summary.matches_processed} new matches processed, "
            f"{summary.analyses_generated} analyses generated"
        ),
        matches=summary.matches,
        analyses_generated=summary.analyses_generated,
        deleted_old_matches=summary.deleted_count,
    )


@router.post(
    "/analyze-prediction",
    response_model=AnalyzePredictionResponse,
    response_model_exclude_none=True,
)
async def analyze_prediction(
    request: AnalyzePredictionRequest,
    service: AnalysisService = Depends(get_analysis_service),
):
    """Generate commentary for a stored prediction."""
    analysis = await service.analyze(request.prediction_id)
    return AnalyzePredictionResponse(success=True, analysis=analysis)
