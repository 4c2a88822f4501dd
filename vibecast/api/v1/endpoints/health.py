"""
Health check endpoints for VibeCast.

This module provides health check and system status endpoints
for monitoring and diagnostics.
"""

import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from vibecast.ai.trend_analyzer import TrendAnalyzer
from vibecast.api.dependencies import get_farcaster_client, get_trend_analyzer
from vibecast.core.logging import get_logger
from vibecast.models.base import SystemHealth
from vibecast.services.farcaster_client import FarcasterClient

logger = get_logger(__name__)
router = APIRouter()

_STARTED_AT = time.monotonic()


def _uptime_seconds() -> float:
    return round(time.monotonic() - _STARTED_AT, 3)


@router.get("/", response_model=SystemHealth)
async def health_check(client: FarcasterClient = Depends(get_farcaster_client)):
    """Basic health check endpoint."""
    health = SystemHealth()
    # Trend data still flows from the fallback dataset without a key.
    health.add_service_status("neynar", "healthy" if client.is_configured else "degraded")
    health.add_metric("uptime_seconds", _uptime_seconds())
    return health


@router.get("/detailed", response_model=SystemHealth)
async def detailed_health_check(
    client: FarcasterClient = Depends(get_farcaster_client),
    analyzer: TrendAnalyzer = Depends(get_trend_analyzer),
):
    """Detailed health check with component status."""
    health = SystemHealth()

    if client.is_configured:
        health.add_service_status("neynar", "healthy")
    else:
        health.add_service_status("neynar", "degraded")
        health.errors.append("NEYNAR_API_KEY not configured; serving fallback casts")

    cache_state = analyzer.cache.state()
    health.add_service_status("trend_cache", "healthy")
    health.add_metric("uptime_seconds", _uptime_seconds())
    health.add_metric("trend_cache_fresh", int(cache_state == "fresh"))
    health.add_metric("trend_cache_ttl_seconds", analyzer.cache.ttl_seconds)

    cache_age = analyzer.cache.age()
    if cache_age is not None:
        health.add_metric("trend_cache_age_seconds", round(cache_age, 3))

    return health


@router.get("/ready")
async def readiness_check(request: Request):
    """Kubernetes readiness probe endpoint."""
    if getattr(request.app.state, "trend_analyzer", None) is None:
        return JSONResponse(status_code=503, content={"status": "not ready"})
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """Kubernetes liveness probe endpoint."""
    return {"status": "alive"}
