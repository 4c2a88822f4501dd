"""
Unit tests for VibeCast data models.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from vibecast.models.base import ChallengeStatus, Sentiment, SystemHealth
from vibecast.models.casts import Cast
from vibecast.models.challenges import Challenge
from vibecast.models.trends import TrendAnalysis
from vibecast.services.fallback_data import FALLBACK_ANALYSIS
from tests.conftest import FIXED_NOW, make_cast


def make_challenge(**overrides):
    data = {
        "id": "challenge_1",
        "title": "Create a meme about crypto's latest surge",
        "description": "Show the community what is trending",
        "category": "crypto",
        "created_at": FIXED_NOW,
        "end_time": FIXED_NOW + timedelta(hours=24),
    }
    data.update(overrides)
    return Challenge(**data)


class TestCast:
    """Tests for the Cast model."""

    def test_engagement(self):
        cast = make_cast("gm", likes=5, reshares=3, replies=2)
        assert cast.engagement == 10
        assert cast.reaction_engagement == 8

    def test_frozen(self):
        cast = make_cast("gm")
        with pytest.raises(ValidationError):
            cast.like_count = 100

    def test_negative_counters_rejected(self):
        with pytest.raises(ValidationError):
            Cast(id="0x1", author_handle="user", text="gm", like_count=-1)

    def test_from_neynar(self):
        cast = Cast.from_neynar({
            "hash": "0xabc",
            "author": {"fid": 3, "username": "dwr", "display_name": "Dan", "follower_count": 1000},
            "text": "Building on farcaster",
            "timestamp": "2025-06-01T10:00:00Z",
            "reactions": {"likes_count": 12, "recasts_count": 4, "replies_count": 1},
            "channel": {"id": "farcaster"},
        })

        assert cast.id == "0xabc"
        assert cast.author_handle == "dwr"
        assert cast.author_fid == 3
        assert cast.engagement == 17
        assert cast.channel_id == "farcaster"
        assert cast.created_at.year == 2025

    def test_from_neynar_missing_counters(self):
        cast = Cast.from_neynar({"hash": "0xabc", "text": "gm"})

        assert cast.engagement == 0
        assert cast.author_handle == "unknown"

    def test_from_neynar_requires_text(self):
        with pytest.raises(KeyError):
            Cast.from_neynar({"hash": "0xabc"})

    def test_to_neynar(self):
        cast = make_cast("gm", likes=2, reshares=1, replies=4, index=9, channel_id="base")

        payload = cast.to_neynar()

        assert payload["hash"] == cast.id
        assert payload["author"]["username"] == "user9"
        assert payload["reactions"] == {"likes_count": 2, "recasts_count": 1, "replies_count": 4}
        assert payload["channel"] == {"id": "base"}
        assert Cast.from_neynar(payload).engagement == cast.engagement


class TestTrendAnalysis:
    """Tests for the TrendAnalysis model."""

    def test_defaults(self):
        analysis = TrendAnalysis()
        assert analysis.sentiment == Sentiment.NEUTRAL
        assert analysis.confidence == 0.5

    @pytest.mark.parametrize("overrides", [
        {"confidence": 1.5},
        {"confidence": -0.1},
        {"engagement": -1.0},
        {"topics": ["a", "b", "c", "d", "e", "f"]},
        {"topics": ["crypto", "crypto"]},
        {"keywords": [f"word{i}" for i in range(11)]},
        {"keywords": ["moon", "moon"]},
        {"suggested_prompts": ["p"] * 6},
    ])
    def test_bounds(self, overrides):
        with pytest.raises(ValidationError):
            TrendAnalysis(**overrides)

    def test_frozen(self):
        analysis = TrendAnalysis()
        with pytest.raises(ValidationError):
            analysis.confidence = 0.9

    def test_sequences_cannot_be_changed_in_place(self):
        analysis = TrendAnalysis(topics=["crypto", "nft"], keywords=["crypto"], suggested_prompts=["p"])

        assert analysis.topics == ("crypto", "nft")
        for field in (analysis.topics, analysis.keywords, analysis.suggested_prompts):
            with pytest.raises(AttributeError):
                field.append("extra")

    def test_shared_fallback_analysis_is_immutable(self):
        with pytest.raises(AttributeError):
            FALLBACK_ANALYSIS.topics.append("injected")
        assert len(FALLBACK_ANALYSIS.topics) == 5


class TestChallenge:
    """Tests for the Challenge model."""

    def test_defaults(self):
        challenge = make_challenge()

        assert challenge.status == ChallengeStatus.ACTIVE
        assert challenge.submissions == []
        assert challenge.total_likes == 0
        assert challenge.ai_generated is True

    @pytest.mark.parametrize("offset", [timedelta(0), timedelta(hours=-1)])
    def test_end_time_after_creation(self, offset):
        with pytest.raises(ValidationError):
            make_challenge(end_time=FIXED_NOW + offset)

    def test_status_at(self):
        challenge = make_challenge()
        end = challenge.end_time

        assert challenge.status_at(FIXED_NOW) == ChallengeStatus.ACTIVE
        assert challenge.status_at(end - timedelta(seconds=1)) == ChallengeStatus.ACTIVE
        assert challenge.status_at(end) == ChallengeStatus.VOTING
        assert challenge.status_at(end + timedelta(hours=11, minutes=59)) == ChallengeStatus.VOTING
        assert challenge.status_at(end + timedelta(hours=12)) == ChallengeStatus.COMPLETED

    def test_status_at_custom_voting_window(self):
        challenge = make_challenge()
        moment = challenge.end_time + timedelta(hours=2)

        assert challenge.status_at(moment, voting_hours=1) == ChallengeStatus.COMPLETED


class TestSystemHealth:
    """Tests for the SystemHealth model."""

    def test_service_status_and_metrics(self):
        health = SystemHealth(status="healthy")

        health.add_service_status("neynar", "degraded")
        health.add_metric("uptime_seconds", 12.5)

        assert health.status == "degraded"
        assert health.is_healthy() is False
        assert health.services == {"neynar": "degraded"}
        assert health.metrics == {"uptime_seconds": 12.5}
