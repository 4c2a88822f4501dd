"""
Base models and common types for VibeCast.

This module defines the foundational enums and shared structures
used throughout the application.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Union
from pydantic import BaseModel, Field


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


class Sentiment(str, Enum):
    """Enumeration of aggregate sentiment classes."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class ChallengeStatus(str, Enum):
    """Enumeration of challenge lifecycle states."""
    ACTIVE = "active"
    VOTING = "voting"
    COMPLETED = "completed"


class SubmissionType(str, Enum):
    """Enumeration of submission content types."""
    IMAGE = "image"
    TEXT = "text"
    LINK = "link"


class CastOrigin(str, Enum):
    """Where a batch of casts came from."""
    NEYNAR = "neynar"
    FALLBACK = "fallback"


class SystemHealth(BaseModel):
    """Model for system health status."""
    status: str = "healthy"  # healthy, degraded, unhealthy
    timestamp: datetime = Field(default_factory=utcnow)
    services: Dict[str, str] = Field(default_factory=dict)  # service_name -> status
    metrics: Dict[str, Union[int, float]] = Field(default_factory=dict)
    errors: List[str] = Field(default_factory=list)

    def is_healthy(self) -> bool:
        """Check if system is healthy."""
        return self.status == "healthy"

    def add_service_status(self, service: str, status: str):
        """Add service status."""
        self.services[service] = status
        if status != "healthy" and self.status == "healthy":
            self.status = "degraded"

    def add_metric(self, name: str, value: Union[int, float]):
        """Add system metric."""
        self.metrics[name] = value
