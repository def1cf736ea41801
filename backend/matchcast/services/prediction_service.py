"""Read-side queries behind the dashboard feed."""

from sqlalchemy.ext.asyncio import AsyncSession

from matchcast.models import AutomationLog, Prediction
from matchcast.repositories import AutomationLogRepository, PredictionRepository
from matchcast.schemas import AutomationLogResponse, AutomationStatusResponse


class PredictionService:
    """Service for prediction and automation log reads."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.prediction_repo = PredictionRepository(session)
        self.log_repo = AutomationLogRepository(session)

    async def get_prediction(self, prediction_id: str) -> Prediction | None:
        """Get a prediction by ID."""
        return await self.prediction_repo.get(prediction_id)

    async def get_predictions(self, limit: int = 100) -> list[Prediction]:
        """Get newest predictions first."""
        return await self.prediction_repo.get_latest(limit)

    async def get_automation_logs(
        self, limit: int = 10, function_name: str | None = None
    ) -> list[AutomationLog]:
        """Get latest automation run records."""
        return await self.log_repo.get_recent(limit, function_name)

    async def get_automation_status(self) -> AutomationStatusResponse:
        """Summarize the store for the automation panel."""
        total = await self.prediction_repo.count()
        latest_created_at = await self.prediction_repo.get_latest_created_at()
        latest_logs = await self.log_repo.get_recent(limit=1)

        return AutomationStatusResponse(
            total_predictions=total,
            latest_prediction_at=latest_created_at,
            last_run=AutomationLogResponse.model_validate(latest_logs[0]) if latest_logs else None,
        )
