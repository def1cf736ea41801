"""Pydantic schemas."""

from matchcast.schemas.automation import (
    AutomationLogListResponse,
    AutomationLogResponse,
    AutomationStatusResponse,
)
from matchcast.schemas.common import BaseSchema, RunStatusEnum
from matchcast.schemas.functions import (
    AnalyzePredictionRequest,
    AnalyzePredictionResponse,
    FetchMatchesRequest,
    FetchMatchesResponse,
    FunctionResponse,
)
from matchcast.schemas.prediction import PredictionListResponse, PredictionResponse

__all__ = [
    # Common
    "BaseSchema",
    "RunStatusEnum",
    # Prediction
    "PredictionResponse",
    "PredictionListResponse",
    # Automation
    "AutomationLogResponse",
    "AutomationLogListResponse",
    "AutomationStatusResponse",
    # Functions
    "FetchMatchesRequest",
    "FetchMatchesResponse",
    "AnalyzePredictionRequest",
    "AnalyzePredictionResponse",
    "FunctionResponse",
]
