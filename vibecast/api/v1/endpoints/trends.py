"""
Trend analysis endpoints for VibeCast.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from vibecast.ai.trend_analyzer import TrendAnalyzer
from vibecast.api.dependencies import get_trend_analyzer
from vibecast.core.logging import get_logger
from vibecast.models.base import CastOrigin
from vibecast.models.trends import TrendAnalysis

logger = get_logger(__name__)
router = APIRouter()


class TrendResponse(BaseModel):
    """Response model for the current trend analysis."""
    success: bool = True
    analysis: TrendAnalysis
    cached: bool
    source: CastOrigin
    generated_at: Optional[datetime] = None


@router.get("/", response_model=TrendResponse)
async def get_trends(analyzer: TrendAnalyzer = Depends(get_trend_analyzer)):
    """Current trend analysis (cached for the configured TTL)."""
    cached = analyzer.cache.state() == "fresh"
    snapshot = await analyzer.current_trends()
    return TrendResponse(
        analysis=snapshot.analysis,
        cached=cached,
        source=snapshot.source,
        generated_at=snapshot.generated_at,
    )


@router.delete("/cache")
async def clear_trend_cache(analyzer: TrendAnalyzer = Depends(get_trend_analyzer)):
    """Drop the cached analysis so the next request re-runs the pipeline."""
    analyzer.cache.clear()
    logger.info("Trend cache cleared")
    return {"success": True, "message": "Trend cache cleared"}
