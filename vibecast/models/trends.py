"""
Trend analysis result models for VibeCast.
"""

from datetime import datetime
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, validator

from vibecast.models.base import CastOrigin, Sentiment


class TrendAnalysis(BaseModel):
    """Output of one trend pipeline run. Superseded, never mutated."""

    model_config = ConfigDict(frozen=True)

    # immutable sequences; one cached analysis is shared by every caller
    topics: Tuple[str, ...] = Field(default_factory=tuple, max_length=5)
    sentiment: Sentiment = Sentiment.NEUTRAL
    engagement: float = Field(default=0.0, ge=0.0)
    keywords: Tuple[str, ...] = Field(default_factory=tuple, max_length=10)
    suggested_prompts: Tuple[str, ...] = Field(default_factory=tuple, max_length=5)
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)

    @validator("topics", "keywords")
    def no_duplicates(cls, v):
        if len(set(v)) != len(v):
            raise ValueError("entries must be unique")
        return v


class TrendSnapshot(BaseModel):
    """A served analysis with the data it came from."""

    model_config = ConfigDict(frozen=True)

    analysis: TrendAnalysis
    source: CastOrigin
    # None when the fixed fallback analysis is served
    generated_at: Optional[datetime] = None


class UserInterests(BaseModel):
    """Interests inferred from a single user's recent casts."""
    topics: List[str] = Field(default_factory=list)
    channels: List[str] = Field(default_factory=list)
    engagement_score: float = 0.0
    categories: Dict[str, float] = Field(default_factory=dict)

    @classmethod
    def default(cls) -> "UserInterests":
        """Interests reported when the user's casts cannot be fetched."""
        return cls(
            topics=["crypto", "web3"],
            channels=["general"],
            engagement_score=0.0,
            categories={"general": 1},
        )
