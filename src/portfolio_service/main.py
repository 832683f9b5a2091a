"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from portfolio_service.config.settings import get_settings
from portfolio_service.config.logging_config import setup_logging
from portfolio_service.api.routers import buckets_router, positions_router, dates_router
from portfolio_service.core.exceptions import AppError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    yield
    # Shutdown (in-memory state is dropped with the process)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Position tracking, bucket grouping and valuation",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(buckets_router)
app.include_router(positions_router)
app.include_router(dates_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    logger.info("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
