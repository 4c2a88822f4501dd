"""
Challenge and submission models for VibeCast.

Challenges are created by the challenge synthesizer (or the manual create
endpoint). Status advancement belongs to the consumer; `status_at` derives
the status a challenge should have at a given moment.
"""

from datetime import datetime, timedelta
from typing import List, Optional
from pydantic import BaseModel, Field, validator

from vibecast.core.config import settings
from vibecast.models.base import ChallengeStatus, SubmissionType, utcnow


class Submission(BaseModel):
    """A user's entry into a challenge."""
    id: str
    challenge_id: str
    type: SubmissionType
    content: str
    title: str
    author: str
    author_id: str
    created_at: datetime = Field(default_factory=utcnow)
    likes: int = 0
    shares: int = 0
    votes: int = 0
    ipfs_hash: Optional[str] = None


class Challenge(BaseModel):
    """A content challenge shown to users."""
    id: str
    title: str
    description: str
    category: str
    status: ChallengeStatus = ChallengeStatus.ACTIVE
    created_at: datetime
    end_time: datetime
    trending_topics: List[str] = Field(default_factory=list)
    submissions: List[Submission] = Field(default_factory=list)
    total_likes: int = 0
    ai_generated: bool = True
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)

    @validator("end_time")
    def end_after_start(cls, v, values):
        created_at = values.get("created_at")
        if created_at is not None and v <= created_at:
            raise ValueError("end_time must be after created_at")
        return v

    def status_at(self, now: datetime, voting_hours: Optional[int] = None) -> ChallengeStatus:
        """Status this challenge should have at `now`."""
        if voting_hours is None:
            voting_hours = settings.CHALLENGE_VOTING_HOURS
        if now < self.end_time:
            return ChallengeStatus.ACTIVE
        if now < self.end_time + timedelta(hours=voting_hours):
            return ChallengeStatus.VOTING
        return ChallengeStatus.COMPLETED
