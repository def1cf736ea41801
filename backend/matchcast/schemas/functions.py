"""Schemas for the callable backend functions."""

from datetime import date

from pydantic import ConfigDict, Field

from matchcast.schemas.common import BaseSchema


class FetchMatchesRequest(BaseSchema):
    """Optional body for a pipeline run."""

    model_config = ConfigDict(populate_by_name=True)

    target_date: date | None = Field(None, alias="date", description="Fixture date, defaults to today")


class AnalyzePredictionRequest(BaseSchema):
    """Request to analyze a stored prediction."""

    model_config = ConfigDict(populate_by_name=True)

    prediction_id: str = Field(..., alias="predictionId", min_length=1)


class FunctionResponse(BaseSchema):
    """Envelope returned by both functions."""

    success: bool
    message: str | None = None
    matches: list[str] | None = None
    error: str | None = None


class FetchMatchesResponse(FunctionResponse):
    """Pipeline run result."""

    analyses_generated: int = 0
    deleted_old_matches: int = 0


class AnalyzePredictionResponse(FunctionResponse):
    """Analysis result."""

    analysis: str | None = None
