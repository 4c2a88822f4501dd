"""
Unit tests for topic classification.
"""

import pytest

from vibecast.ai.lexical import extract_words, word_frequency
from vibecast.ai.topic_classifier import (
    MAX_TOPICS, TOPIC_CATEGORIES, extract_trending_topics, rank_topics, score_topics
)
from tests.conftest import make_cast


def _freq(casts):
    return word_frequency(extract_words(" ".join(cast.text for cast in casts)))


class TestScoreTopics:
    """Tests for category scoring."""

    def test_bitcoin_batch_scores_crypto(self):
        casts = [make_cast("Stacking bitcoin every day", likes=80, reshares=20, index=i) for i in range(50)]

        scores = score_topics(_freq(casts), casts)

        assert scores == {"crypto": pytest.approx(50 + 0.1 * 5000)}

    def test_boost_uses_likes_and_reshares_only(self):
        casts = [make_cast("ethereum", likes=10, reshares=5, replies=100)]

        scores = score_topics(_freq(casts), casts)

        assert scores["crypto"] == pytest.approx(1 + 0.1 * 15)

    def test_keywords_absent_from_frequency_do_not_boost(self):
        # "eth" is a substring of "ethereum" but never a token here
        casts = [make_cast("ethereum", likes=10)]

        scores = score_topics({"ethereum": 1}, casts)

        assert scores["crypto"] == pytest.approx(2.0)

    def test_zero_score_categories_dropped(self):
        casts = [make_cast("nothing relevant here at all")]
        assert score_topics(_freq(casts), casts) == {}

    def test_empty_input(self):
        assert score_topics({}, []) == {}

    def test_multiple_categories(self):
        casts = [
            make_cast("zora mint collection", likes=10, index=1),
            make_cast("farcaster community", likes=0, index=2),
        ]

        scores = score_topics(_freq(casts), casts)

        assert set(scores) == {"nft", "social"}
        assert scores["nft"] == pytest.approx(3 + 0.1 * 30)
        assert scores["social"] == pytest.approx(2.0)


class TestRankTopics:
    """Tests for ranking."""

    def test_sorted_descending(self):
        assert rank_topics({"crypto": 1.0, "nft": 3.0, "ai": 2.0}) == ["nft", "ai", "crypto"]

    def test_ties_break_alphabetically(self):
        assert rank_topics({"social": 2.0, "crypto": 2.0, "nft": 3.0}) == ["nft", "crypto", "social"]

    def test_truncates_to_five(self):
        scores = {name: float(i + 1) for i, name in enumerate(TOPIC_CATEGORIES)}
        ranked = rank_topics(scores)
        assert len(ranked) == MAX_TOPICS
        assert len(set(ranked)) == len(ranked)
        assert ranked[0] == "social"


class TestExtractTrendingTopics:
    """Tests for the combined topic extraction."""

    def test_crypto_in_top_topics(self):
        casts = [make_cast("bitcoin to the moon", likes=90, reshares=10, index=i) for i in range(50)]
        topics = extract_trending_topics(_freq(casts), casts)
        assert topics[0] == "crypto"

    def test_all_categories_present_yields_five(self):
        text = "bitcoin doge zora gpt gaming farcaster"
        casts = [make_cast(text)]
        topics = extract_trending_topics(_freq(casts), casts)
        assert len(topics) == 5
        assert len(set(topics)) == 5
