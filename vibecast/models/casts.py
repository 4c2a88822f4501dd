"""
Farcaster cast and user models for VibeCast.

Casts are the input unit of the trend pipeline. They are produced by the
Farcaster client (or the fallback dataset) and never mutated afterwards.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

from vibecast.models.base import utcnow


class Cast(BaseModel):
    """A single Farcaster cast with its engagement counters."""

    model_config = ConfigDict(frozen=True)

    id: str
    author_handle: str
    text: str
    created_at: datetime = Field(default_factory=utcnow)
    like_count: int = Field(default=0, ge=0)
    reshare_count: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    channel_id: Optional[str] = None
    author_fid: Optional[int] = None
    author_display_name: Optional[str] = None
    author_follower_count: Optional[int] = None

    @property
    def engagement(self) -> int:
        """Total interactions: likes + reshares + replies."""
        return self.like_count + self.reshare_count + self.reply_count

    @property
    def reaction_engagement(self) -> int:
        """Likes + reshares, used for topic boosting."""
        return self.like_count + self.reshare_count

    @classmethod
    def from_neynar(cls, payload: Dict[str, Any]) -> "Cast":
        """
        Build a cast from a Neynar v2 cast object.

        Missing reaction counters default to 0. Raises KeyError or
        pydantic's ValidationError when required fields are absent.
        """
        author = payload.get("author") or {}
        reactions = payload.get("reactions") or {}
        channel = payload.get("channel") or {}

        data: Dict[str, Any] = {
            "id": payload["hash"],
            "author_handle": author.get("username") or "unknown",
            "text": payload["text"],
            "like_count": reactions.get("likes_count") or 0,
            "reshare_count": reactions.get("recasts_count") or 0,
            "reply_count": (payload.get("replies") or {}).get("count")
            or reactions.get("replies_count")
            or 0,
            "channel_id": channel.get("id"),
            "author_fid": author.get("fid"),
            "author_display_name": author.get("display_name"),
            "author_follower_count": author.get("follower_count"),
        }
        if payload.get("timestamp"):
            data["created_at"] = payload["timestamp"]
        return cls(**data)

    def to_neynar(self) -> Dict[str, Any]:
        """Serialize in the shape the Farcaster proxy endpoint returns."""
        return {
            "hash": self.id,
            "author": {
                "fid": self.author_fid,
                "username": self.author_handle,
                "display_name": self.author_display_name,
                "follower_count": self.author_follower_count,
            },
            "text": self.text,
            "timestamp": self.created_at.isoformat(),
            "reactions": {
                "likes_count": self.like_count,
                "recasts_count": self.reshare_count,
                "replies_count": self.reply_count,
            },
            "channel": {"id": self.channel_id} if self.channel_id else None,
        }


class FarcasterUser(BaseModel):
    """Public profile of a Farcaster user."""

    model_config = ConfigDict(frozen=True)

    fid: int
    username: str
    display_name: Optional[str] = None
    pfp_url: Optional[str] = None
    follower_count: int = Field(default=0, ge=0)
    following_count: int = Field(default=0, ge=0)
    bio: Optional[str] = None
    verified: bool = False

    @classmethod
    def from_neynar(cls, payload: Dict[str, Any]) -> "FarcasterUser":
        """Build a user from a Neynar v2 user object."""
        profile = payload.get("profile") or {}
        return cls(
            fid=payload["fid"],
            username=payload["username"],
            display_name=payload.get("display_name"),
            pfp_url=payload.get("pfp_url"),
            follower_count=payload.get("follower_count") or 0,
            following_count=payload.get("following_count") or 0,
            bio=(profile.get("bio") or {}).get("text"),
            verified=bool(payload.get("power_badge")),
        )
