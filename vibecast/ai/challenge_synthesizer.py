"""
Prompt and challenge synthesis.

Turns a TrendAnalysis into human-readable content prompts and a fixed
batch of daily challenges built from templates.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from vibecast.core.config import settings
from vibecast.models.base import ChallengeStatus, Sentiment
from vibecast.models.challenges import Challenge
from vibecast.models.trends import TrendAnalysis

logger = logging.getLogger(__name__)

MAX_PROMPTS = 5
PROMPT_TOPICS = 3
HOT_TREND_ENGAGEMENT = 100

CONTENT_TYPES = ("meme", "GIF", "video", "artwork", "story")

SENTIMENT_MODIFIERS: Dict[Sentiment, Tuple[str, ...]] = {
    Sentiment.POSITIVE: ("celebrating", "showcasing", "hyping"),
    Sentiment.NEGATIVE: ("reacting to", "commenting on", "analyzing"),
    Sentiment.NEUTRAL: ("exploring", "discussing", "explaining"),
}

MARKET_MOOD: Dict[Sentiment, str] = {
    Sentiment.POSITIVE: "bullish",
    Sentiment.NEGATIVE: "bearish",
    Sentiment.NEUTRAL: "mixed",
}


@dataclass(frozen=True)
class ChallengeTemplate:
    """Title, description and category for one synthesized challenge."""
    title: str
    description: str
    category: str


def generate_prompts(topics: Sequence[str], sentiment: Sentiment, engagement: float) -> List[str]:
    """
    Suggest content prompts for the current trends.

    One prompt per top-three topic, then an engagement-driven prompt and
    a sentiment-driven prompt where they apply. Capped at five.
    """
    modifiers = SENTIMENT_MODIFIERS[sentiment]
    prompts = []

    for index, topic in enumerate(topics[:PROMPT_TOPICS]):
        content_type = CONTENT_TYPES[index % len(CONTENT_TYPES)]
        modifier = modifiers[index % len(modifiers)]
        prompts.append(f"Create a viral {content_type} {modifier} {topic}'s latest developments")

    if engagement > HOT_TREND_ENGAGEMENT:
        prompts.append("Create content about the hottest trend everyone's talking about")

    if sentiment == Sentiment.POSITIVE:
        prompts.append("Make a celebration post about the bullish crypto market")
    elif sentiment == Sentiment.NEGATIVE:
        prompts.append("Create a reaction meme to recent market movements")

    return prompts[:MAX_PROMPTS]


def build_templates(analysis: TrendAnalysis) -> List[ChallengeTemplate]:
    """The three daily challenge templates for an analysis."""
    lead_topic = analysis.topics[0] if analysis.topics else None
    second_topic = analysis.topics[1] if len(analysis.topics) > 1 else None
    sentiment = Sentiment(analysis.sentiment).value
    mood = MARKET_MOOD[Sentiment(analysis.sentiment)]

    return [
        ChallengeTemplate(
            title=f"Create a meme about {lead_topic or 'crypto'}'s latest surge",
            description=(
                f"The {lead_topic or 'crypto'} community is buzzing! Create viral content that "
                f"captures the current sentiment. Based on {analysis.engagement:.0f} average "
                f"engagement from trending casts."
            ),
            category=lead_topic or "crypto",
        ),
        ChallengeTemplate(
            title=f"Show your take on {second_topic or 'DeFi'} innovation",
            description=(
                f"{second_topic or 'DeFi'} is trending with {sentiment} sentiment. Share your "
                f"perspective on the latest developments in this space."
            ),
            category=second_topic or "defi",
        ),
        ChallengeTemplate(
            title=f"React to the {mood} market vibes",
            description=(
                f"Current market sentiment is {sentiment} based on {len(analysis.keywords)} "
                f"trending keywords. Create content that reflects or challenges this mood."
            ),
            category="trading",
        ),
    ]


def _epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def build_daily_challenges(
    analysis: TrendAnalysis,
    now: datetime,
    duration_hours: Optional[int] = None,
) -> List[Challenge]:
    """
    Build exactly three active, AI-generated challenges from an analysis.

    Args:
        analysis: Trend analysis (real or fallback)
        now: Creation time shared by the batch
        duration_hours: Challenge length, defaults to CHALLENGE_DURATION_HOURS

    Returns:
        Challenges with ids ``challenge_{epoch_ms}_{index}``
    """
    if duration_hours is None:
        duration_hours = settings.CHALLENGE_DURATION_HOURS
    end_time = now + timedelta(hours=duration_hours)
    stamp = _epoch_ms(now)

    challenges = [
        Challenge(
            id=f"challenge_{stamp}_{index}",
            title=template.title,
            description=template.description,
            category=template.category,
            status=ChallengeStatus.ACTIVE,
            created_at=now,
            end_time=end_time,
            trending_topics=list(analysis.topics),
            submissions=[],
            total_likes=0,
            ai_generated=True,
            confidence=analysis.confidence,
        )
        for index, template in enumerate(build_templates(analysis))
    ]
    logger.info(f"Synthesized {len(challenges)} challenges from topics {analysis.topics}")
    return challenges


def fallback_challenges(now: datetime, duration_hours: Optional[int] = None) -> List[Challenge]:
    """The single hardcoded challenge served when synthesis fails."""
    if duration_hours is None:
        duration_hours = settings.CHALLENGE_DURATION_HOURS
    return [
        Challenge(
            id=f"challenge_fallback_{_epoch_ms(now)}",
            title="Create content about the hottest crypto trend",
            description=(
                "Share your take on what's trending in crypto right now. This challenge was "
                "generated when real trend data wasn't available."
            ),
            category="crypto",
            status=ChallengeStatus.ACTIVE,
            created_at=now,
            end_time=now + timedelta(hours=duration_hours),
            trending_topics=["crypto", "bitcoin", "ethereum"],
            submissions=[],
            total_likes=0,
            ai_generated=True,
            confidence=0.5,
        )
    ]
