"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from matchcast.api import automation_router, functions_router, predictions_router
from matchcast.config import get_settings
from matchcast.database import init_db
from matchcast.exceptions import MatchcastError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    await init_db()
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="AI match prediction backend",
    lifespan=lifespan,
)

# CORS middleware for the dashboard
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MatchcastError)
async def matchcast_error_handler(request: Request, exc: MatchcastError):
    """Report application errors as a function envelope."""
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message},
    )


FUNCTION_PATHS = {f"/api{route.path}" for route in functions_router.routes}


def _describe_validation_error(error: dict) -> str:
    field = ".".join(str(part) for part in error["loc"] if part != "body") or "body"
    return f"{field}: {error['msg']}"


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report invalid function bodies as a function envelope."""
    if request.url.path not in FUNCTION_PATHS:
        return await request_validation_exception_handler(request, exc)

    problems = "; ".join(_describe_validation_error(error) for error in exc.errors())
    return JSONResponse(
        status_code=422,
        content={"success": False, "error": f"Invalid request: {problems}"},
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register API routers
app.include_router(functions_router, prefix="/api")
app.include_router(predictions_router, prefix="/api")
app.include_router(automation_router, prefix="/api")
