"""Automation log schemas."""

from datetime import datetime

from matchcast.schemas.common import BaseSchema, RunStatusEnum


class AutomationLogResponse(BaseSchema):
    """Automation log response schema."""

    id: int
    function_name: str
    status: RunStatusEnum
    message: str | None = None
    matches_processed: int | None = None
    analyses_generated: int | None = None
    error_details: str | None = None
    execution_time_ms: int | None = None
    created_at: datetime


class AutomationLogListResponse(BaseSchema):
    """Automation log list response."""

    items: list[AutomationLogResponse]
    total: int


class AutomationStatusResponse(BaseSchema):
    """Store summary shown next to the run history."""

    total_predictions: int
    latest_prediction_at: datetime | None = None
    last_run: AutomationLogResponse | None = None
