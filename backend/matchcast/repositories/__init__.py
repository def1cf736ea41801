"""Data access repositories."""

from matchcast.repositories.automation_log_repository import AutomationLogRepository
from matchcast.repositories.base import BaseRepository
from matchcast.repositories.prediction_repository import PredictionRepository

__all__ = [
    "BaseRepository",
    "PredictionRepository",
    "AutomationLogRepository",
]
