"""API routers."""

from matchcast.api.automation import router as automation_router
from matchcast.api.functions import router as functions_router
from matchcast.api.predictions import router as predictions_router

__all__ = [
    "functions_router",
    "predictions_router",
    "automation_router",
]
