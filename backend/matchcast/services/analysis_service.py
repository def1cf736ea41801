"""Follow-up analysis for an existing prediction."""

import logging
from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from matchcast.exceptions import PredictionNotFoundError
from matchcast.llm import LLMClient
from matchcast.llm.prompts import build_analysis_messages
from matchcast.repositories import PredictionRepository

logger = logging.getLogger(__name__)


class AnalysisService:
    """Service that asks the LLM for commentary on a stored prediction."""

    def __init__(
        self,
        session: AsyncSession,
        llm_factory: Callable[[], LLMClient] | None = None,
    ):
        self.session = session
        self.prediction_repo = PredictionRepository(session)
        self.llm_factory = llm_factory or LLMClient

    async def analyze(self, prediction_id: str) -> str:
        """
        Generate and store an analysis for a prediction.

        Overwrites any previous analysis. The record is left untouched when
        the LLM call fails.

        Raises:
            PredictionNotFoundError: no prediction with this id
            LLMError: the LLM call failed (RateLimitedError / QuotaExhaustedError for 429 / 402)
        """
        prediction = await self.prediction_repo.get(prediction_id)
        if prediction is None:
            raise PredictionNotFoundError(f"Prediction not found: {prediction_id}")

        logger.info(f"Analyzing prediction: {prediction.match_name}")
        messages = build_analysis_messages(
            prediction.match_name, prediction.prediction, prediction.model_name
        )

        async with self.llm_factory() as llm:
            text = (await llm.complete(messages)).strip()

        await self.prediction_repo.update(prediction.id, {"analysis": text})
        await self.session.commit()
        logger.info(f"Analysis stored for {prediction.match_name}")
        return text
