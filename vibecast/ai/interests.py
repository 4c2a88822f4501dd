"""User interest analysis from a single user's recent casts."""

import re
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from vibecast.ai.engagement import mean_engagement
from vibecast.models.casts import Cast
from vibecast.models.trends import UserInterests

MAX_INTEREST_TOPICS = 10
MAX_CHANNELS = 5

_HASHTAG_PATTERN = re.compile(r"#\w+")

INTEREST_CATEGORIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "crypto": ("bitcoin", "ethereum", "crypto", "defi", "nft", "web3", "blockchain"),
    "tech": ("ai", "ml", "tech", "coding", "development", "programming"),
    "social": ("community", "social", "friends", "network", "people"),
    "art": ("art", "design", "creative", "artist", "visual", "aesthetic"),
    "gaming": ("game", "gaming", "play", "esports", "gamer"),
    "finance": ("finance", "trading", "investment", "money", "market"),
})


def _append_unique(items: List[str], value: str, limit: int):
    if value not in items and len(items) < limit:
        items.append(value)


def analyze_user_interests(casts: Sequence[Cast]) -> UserInterests:
    """
    Infer a user's interests from their casts.

    Topics are hashtags in order of first appearance, channels the distinct
    channel ids. Each category accumulates (keywords matched in a cast) x
    (that cast's engagement).
    """
    topics: List[str] = []
    channels: List[str] = []
    categories: Dict[str, float] = {}

    for cast in casts:
        text = cast.text.lower()

        for tag in _HASHTAG_PATTERN.findall(text):
            _append_unique(topics, tag[1:], MAX_INTEREST_TOPICS)

        if cast.channel_id:
            _append_unique(channels, cast.channel_id, MAX_CHANNELS)

        for category, keywords in INTEREST_CATEGORIES.items():
            matches = sum(1 for keyword in keywords if keyword in text)
            if matches > 0:
                categories[category] = categories.get(category, 0) + matches * cast.engagement

    return UserInterests(
        topics=topics,
        channels=channels,
        engagement_score=mean_engagement(casts),
        categories=categories,
    )
