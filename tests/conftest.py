"""
Pytest configuration and fixtures for VibeCast tests.

This module provides common test fixtures and configuration
for the test suite.
"""

from datetime import datetime, timezone
from typing import List, Optional

import pytest
from httpx import ASGITransport, AsyncClient

from vibecast.ai.trend_analyzer import TrendAnalyzer
from vibecast.core.exceptions import SourceUnavailable
from vibecast.main import create_application
from vibecast.models.casts import Cast
from vibecast.services.farcaster_client import FarcasterClient
from vibecast.services.trend_cache import TrendCache


FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FakeSource:
    """Content source returning canned casts and counting calls."""

    def __init__(self, casts: Optional[List[Cast]] = None, error: Optional[Exception] = None):
        self.casts = casts or []
        self.error = error
        self.calls = 0
        self.limits: List[int] = []

    async def fetch_recent_posts(self, limit: int) -> List[Cast]:
        self.calls += 1
        self.limits.append(limit)
        if self.error is not None:
            raise self.error
        return self.casts[:limit]


def make_cast(
    text: str,
    likes: int = 0,
    reshares: int = 0,
    replies: int = 0,
    index: int = 0,
    channel_id: Optional[str] = None,
) -> Cast:
    """Build a cast with sensible defaults."""
    return Cast(
        id=f"0x{index:06x}",
        author_handle=f"user{index}",
        text=text,
        created_at=FIXED_NOW,
        like_count=likes,
        reshare_count=reshares,
        reply_count=replies,
        channel_id=channel_id,
    )


@pytest.fixture
def clock():
    """Fake monotonic clock for cache tests."""
    return FakeClock()


@pytest.fixture
def sample_casts():
    """A small mixed-topic batch of casts."""
    return [
        make_cast("Bitcoin and ethereum are pumping, so bullish on crypto #bitcoin", 120, 30, 10, index=1),
        make_cast("New NFT collection minting on zora today, the art is amazing", 80, 20, 5, index=2),
        make_cast("Farcaster community keeps building great social tools", 40, 10, 8, index=3),
        make_cast("AI agents playing the game of defi, what a future", 60, 15, 3, index=4),
    ]


@pytest.fixture
def fake_source(sample_casts):
    """Content source serving the sample casts."""
    return FakeSource(sample_casts)


@pytest.fixture
def failing_source():
    """Content source that always reports the feed as unavailable."""
    return FakeSource(error=SourceUnavailable("neynar", "HTTP 402"))


@pytest.fixture
def analyzer(fake_source, clock):
    """Trend analyzer with an isolated cache and fixed time."""
    cache = TrendCache(ttl_seconds=600, clock=clock)
    return TrendAnalyzer(source=fake_source, cache=cache, clock=lambda: FIXED_NOW)


@pytest.fixture
def app(analyzer):
    """Application wired to the test analyzer and an unconfigured client."""
    return create_application(
        farcaster_client=FarcasterClient(api_key=""),
        trend_analyzer=analyzer,
    )


@pytest.fixture
async def client(app):
    """Create a test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
