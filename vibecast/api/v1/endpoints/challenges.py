"""
Challenge endpoints for VibeCast.

Serves the AI-generated daily challenges and accepts manually created
challenges. Nothing is persisted here; the content store that consumes
these responses owns deduplication and status advancement.
"""

from datetime import datetime, timedelta
from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, validator

from vibecast.ai.trend_analyzer import TrendAnalyzer
from vibecast.api.dependencies import get_trend_analyzer
from vibecast.core.logging import get_logger
from vibecast.models.base import ChallengeStatus, utcnow
from vibecast.models.challenges import Challenge

logger = get_logger(__name__)
router = APIRouter()


class ChallengeListResponse(BaseModel):
    """Response model for the daily challenge list."""
    success: bool = True
    challenges: List[Challenge]
    timestamp: datetime


class CreateChallengeRequest(BaseModel):
    """Request model for manually created challenges."""
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    category: str = "general"
    duration_hours: int = Field(default=24, ge=1, le=24 * 7)

    @validator("title")
    def title_not_blank(cls, v):
        if not v.strip():
            raise ValueError("title cannot be blank")
        return v.strip()


class CreateChallengeResponse(BaseModel):
    """Response model for challenge creation."""
    success: bool = True
    challenge_id: str
    message: str
    challenge: Challenge


@router.get("/", response_model=ChallengeListResponse)
async def list_daily_challenges(analyzer: TrendAnalyzer = Depends(get_trend_analyzer)):
    """AI challenges derived from current Farcaster trends."""
    challenges = await analyzer.generate_daily_challenges()
    logger.info("Served daily challenges", count=len(challenges))
    return ChallengeListResponse(challenges=challenges, timestamp=utcnow())


@router.post("/", response_model=CreateChallengeResponse, status_code=status.HTTP_201_CREATED)
async def create_challenge(request: CreateChallengeRequest):
    """Create a challenge from user input."""
    now = utcnow()
    challenge_id = f"challenge_{int(now.timestamp() * 1000)}"
    challenge = Challenge(
        id=challenge_id,
        title=request.title,
        description=request.description,
        category=request.category,
        status=ChallengeStatus.ACTIVE,
        created_at=now,
        end_time=now + timedelta(hours=request.duration_hours),
        ai_generated=False,
    )
    logger.info("Created challenge", challenge_id=challenge_id, title=challenge.title)
    return CreateChallengeResponse(
        challenge_id=challenge_id,
        message="Challenge created successfully",
        challenge=challenge,
    )
