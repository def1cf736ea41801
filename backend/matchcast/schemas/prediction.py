"""Prediction schemas."""

from datetime import date, datetime

from pydantic import Field

from matchcast.schemas.common import BaseSchema


class PredictionResponse(BaseSchema):
    """Prediction response schema."""

    id: str
    match_name: str
    external_event_id: str | None = None
    league_name: str | None = None
    home_team: str | None = None
    away_team: str | None = None
    match_date: date | None = None
    prediction: str
    confidence_score: int = Field(..., ge=0, le=100, description="Model confidence")
    win_probability: int | None = Field(None, ge=0, le=100, description="Home win probability")
    score_prediction: str | None = None
    reasoning: str | None = None
    analysis: str | None = None
    model_name: str
    created_at: datetime
    last_updated: datetime


class PredictionListResponse(BaseSchema):
    """Prediction list response."""

    items: list[PredictionResponse]
    total: int
