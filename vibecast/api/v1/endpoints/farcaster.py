"""
Farcaster proxy endpoints for VibeCast.

Exposes the trending feed the analyzer consumes, with the same fallback
substitution, plus per-user data from Neynar.
User casts and profiles have no fallback data; an unavailable feed is a 503.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Path, Query
from pydantic import BaseModel

from vibecast.ai.interests import analyze_user_interests
from vibecast.ai.trend_analyzer import TrendAnalyzer
from vibecast.api.dependencies import get_farcaster_client, get_trend_analyzer
from vibecast.core.exceptions import NotFoundError, SourceUnavailable
from vibecast.core.logging import get_logger, log_error
from vibecast.models.base import CastOrigin
from vibecast.models.casts import FarcasterUser
from vibecast.models.trends import UserInterests
from vibecast.services.farcaster_client import FarcasterClient

logger = get_logger(__name__)
router = APIRouter()


class TrendingCastsResponse(BaseModel):
    """Response model for trending casts."""
    success: bool = True
    data: List[Dict[str, Any]]
    source: CastOrigin


class UserCastsResponse(BaseModel):
    """Response model for a user's recent casts."""
    success: bool = True
    fid: int
    data: List[Dict[str, Any]]


class UserResponse(BaseModel):
    """Response model for a user profile."""
    success: bool = True
    data: FarcasterUser


class InterestsResponse(BaseModel):
    """Response model for user interests."""
    success: bool = True
    fid: int
    interests: UserInterests
    source: CastOrigin


@router.get("/trending", response_model=TrendingCastsResponse)
async def get_trending_casts(
    limit: int = Query(50, ge=1, le=100),
    analyzer: TrendAnalyzer = Depends(get_trend_analyzer),
):
    """Trending casts, or the fallback dataset when Neynar is unavailable."""
    casts, origin = await analyzer.load_casts(limit)
    return TrendingCastsResponse(
        data=[cast.to_neynar() for cast in casts[:limit]],
        source=origin,
    )


@router.get("/interests/{fid}", response_model=InterestsResponse)
async def get_user_interests(
    fid: int = Path(..., ge=1),
    limit: int = Query(50, ge=1, le=150),
    client: FarcasterClient = Depends(get_farcaster_client),
):
    """Interests inferred from a user's recent casts."""
    try:
        casts = await client.fetch_user_casts(fid, limit)
    except SourceUnavailable as e:
        logger.warning("Using default interests", **log_error(e, {"fid": fid}))
        return InterestsResponse(fid=fid, interests=UserInterests.default(), source=CastOrigin.FALLBACK)

    return InterestsResponse(
        fid=fid,
        interests=analyze_user_interests(casts),
        source=CastOrigin.NEYNAR,
    )


@router.get("/casts/{fid}", response_model=UserCastsResponse)
async def get_user_casts(
    fid: int = Path(..., ge=1),
    limit: int = Query(25, ge=1, le=150),
    client: FarcasterClient = Depends(get_farcaster_client),
):
    """A user's recent casts."""
    casts = await client.fetch_user_casts(fid, limit)
    return UserCastsResponse(fid=fid, data=[cast.to_neynar() for cast in casts])


@router.get("/user/{fid}", response_model=UserResponse)
async def get_user(
    fid: int = Path(..., ge=1),
    client: FarcasterClient = Depends(get_farcaster_client),
):
    """A user's Farcaster profile."""
    user = await client.fetch_user(fid)
    if user is None:
        raise NotFoundError("user", str(fid))
    return UserResponse(data=user)
