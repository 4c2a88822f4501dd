"""
Lexicon-based sentiment scoring.

Counts substring matches of fixed positive and negative word lists (no
stemming, no word boundaries) and applies a 1.2 ratio threshold so that
near-tied corpora stay neutral.
"""

import re
from dataclasses import dataclass
from typing import Sequence

from vibecast.models.base import Sentiment

SENTIMENT_RATIO = 1.2

POSITIVE_WORDS = (
    "moon", "bullish", "pump", "surge", "up", "rise", "good", "great",
    "amazing", "incredible", "bright", "future", "building", "innovation",
    "excited", "love", "awesome", "fantastic", "excellent", "outstanding",
    "revolutionary",
)

NEGATIVE_WORDS = (
    "dump", "crash", "down", "fall", "bad", "terrible", "bearish", "decline",
    "regret", "disappointed", "worried", "concerned", "problem", "issue", "fail",
)


@dataclass(frozen=True)
class SentimentCounts:
    """Raw lexicon match counts for a corpus."""
    positive: int
    negative: int


def count_matches(text: str, words: Sequence[str]) -> int:
    """Total non-overlapping occurrences of each word in text."""
    return sum(len(re.findall(re.escape(word), text)) for word in words)


def count_sentiment(text: str) -> SentimentCounts:
    lowered = text.lower()
    return SentimentCounts(
        positive=count_matches(lowered, POSITIVE_WORDS),
        negative=count_matches(lowered, NEGATIVE_WORDS),
    )


def classify(counts: SentimentCounts) -> Sentiment:
    """Apply the ratio threshold to a pair of counts."""
    if counts.positive > counts.negative * SENTIMENT_RATIO:
        return Sentiment.POSITIVE
    if counts.negative > counts.positive * SENTIMENT_RATIO:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def analyze_sentiment(text: str) -> Sentiment:
    """Classify the overall mood of a corpus."""
    return classify(count_sentiment(text))
