"""
VibeCast - Main FastAPI Application

This module initializes the FastAPI application with its middleware,
routers and the process-wide trend analyzer.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vibecast.ai.trend_analyzer import TrendAnalyzer
from vibecast.api.v1.api import api_router
from vibecast.core.config import settings
from vibecast.core.exceptions import VibeCastException
from vibecast.core.logging import get_logger, setup_logging
from vibecast.services.farcaster_client import FarcasterClient

logger = get_logger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    setup_logging()
    logger.info(
        "VibeCast starting",
        neynar_configured=app.state.farcaster_client.is_configured,
        trend_cache_ttl_seconds=app.state.trend_analyzer.cache.ttl_seconds,
    )
    yield
    logger.info("VibeCast shutting down")


def create_application(
    farcaster_client: Optional[FarcasterClient] = None,
    trend_analyzer: Optional[TrendAnalyzer] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Trend-driven content challenges from Farcaster",
        version=VERSION,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # One client and one analyzer (with its cache) per application
    app.state.farcaster_client = farcaster_client or FarcasterClient()
    app.state.trend_analyzer = trend_analyzer or TrendAnalyzer(source=app.state.farcaster_client)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin).rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.exception_handler(VibeCastException)
    async def vibecast_exception_handler(request: Request, exc: VibeCastException):
        """Handle VibeCast custom exceptions."""
        logger.error(
            "VibeCast exception",
            error_code=exc.error_code,
            message=exc.message,
            details=exc.details,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "details": exc.details
            }
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors."""
        logger.warning("Validation error", errors=exc.errors(), path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": jsonable_errors(exc)
            }
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "HTTP_ERROR",
                "message": exc.detail
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error("Unexpected error", exc_info=True, path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred"
            }
        )

    @app.get("/")
    async def root():
        """Root endpoint for health check."""
        return {
            "message": "VibeCast Challenges",
            "version": VERSION,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


def jsonable_errors(exc: RequestValidationError):
    """Validation errors with their (possibly non-JSON) ctx values stringified."""
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(error)
    return errors


app = create_application()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "vibecast.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
