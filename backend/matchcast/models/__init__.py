"""SQLAlchemy models."""

from matchcast.models.automation_log import AutomationLog, RunStatus
from matchcast.models.prediction import Prediction

__all__ = [
    "Prediction",
    "AutomationLog",
    "RunStatus",
]
