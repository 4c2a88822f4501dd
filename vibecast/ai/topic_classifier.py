"""
Topic classification against fixed keyword tables.

Each category is scored by the frequency of its keywords in the corpus,
boosted by the engagement of the casts that mention them.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from vibecast.models.casts import Cast

logger = logging.getLogger(__name__)

MAX_TOPICS = 5
ENGAGEMENT_BOOST = 0.1

TOPIC_CATEGORIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "crypto": ("bitcoin", "ethereum", "crypto", "btc", "eth", "defi", "web3", "blockchain"),
    "memecoins": ("dogecoin", "shib", "pepe", "doge", "meme", "memecoin"),
    "nft": ("nft", "opensea", "zora", "art", "collection", "mint"),
    "ai": ("ai", "artificial", "intelligence", "machine", "learning", "gpt"),
    "gaming": ("gaming", "game", "play", "esports", "metaverse"),
    "social": ("farcaster", "warpcast", "social", "community", "network"),
})


def score_topics(
    freq: Mapping[str, int],
    casts: Sequence[Cast],
    categories: Mapping[str, Sequence[str]] = TOPIC_CATEGORIES,
) -> Dict[str, float]:
    """
    Score every category that has at least one keyword in the corpus.

    A keyword contributes its frequency plus 0.1 x the likes and reshares
    of every cast whose lowercased text contains it. Keywords absent from
    the frequency map contribute nothing. Zero-score categories are omitted.
    """
    lowered = [(cast.text.lower(), cast.reaction_engagement) for cast in casts]
    scores: Dict[str, float] = {}

    for category, keywords in categories.items():
        score = 0.0
        for keyword in keywords:
            count = freq.get(keyword, 0)
            if not count:
                continue
            score += count
            boost = sum(engagement for text, engagement in lowered if keyword in text)
            score += boost * ENGAGEMENT_BOOST
        if score > 0:
            scores[category] = score

    return scores


def rank_topics(scores: Mapping[str, float], limit: int = MAX_TOPICS) -> List[str]:
    """Category names by descending score; equal scores sort alphabetically."""
    ranked = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    return [name for name, _ in ranked[:limit]]


def extract_trending_topics(freq: Mapping[str, int], casts: Sequence[Cast]) -> List[str]:
    """Top five categories for a corpus."""
    scores = score_topics(freq, casts)
    logger.debug(f"Topic scores: {scores}")
    return rank_topics(scores)
