"""Business logic services."""

from matchcast.services.analysis_service import AnalysisService
from matchcast.services.ingestion_service import IngestionService, IngestionSummary
from matchcast.services.prediction_service import PredictionService

__all__ = [
    "IngestionService",
    "IngestionSummary",
    "AnalysisService",
    "PredictionService",
]
