"""
Unit tests for engagement aggregation and confidence estimation.
"""

import itertools

import pytest

from vibecast.ai.confidence import calculate_confidence
from vibecast.ai.engagement import mean_engagement
from tests.conftest import make_cast


class TestMeanEngagement:
    """Tests for mean per-cast engagement."""

    def test_empty_batch_is_zero(self):
        assert mean_engagement([]) == 0.0

    def test_mean_of_likes_reshares_replies(self):
        casts = [
            make_cast("a cast", likes=10, reshares=5, replies=5, index=1),
            make_cast("another cast", index=2),
        ]
        assert mean_engagement(casts) == pytest.approx(10.0)

    def test_non_negative(self, sample_casts):
        assert mean_engagement(sample_casts) > 0


class TestCalculateConfidence:
    """Tests for the heuristic confidence estimate."""

    @pytest.mark.parametrize("cast_count,topic_count,engagement,expected", [
        (0, 0, 0.0, 0.5),
        (49, 2, 50.0, 0.5),
        (50, 0, 0.0, 0.7),
        (100, 0, 0.0, 0.8),
        (0, 3, 0.0, 0.6),
        (0, 5, 0.0, 0.7),
        (0, 0, 50.5, 0.6),
        (0, 0, 100.5, 0.7),
        (49, 3, 50.0, 0.6),
    ])
    def test_thresholds(self, cast_count, topic_count, engagement, expected):
        assert calculate_confidence(cast_count, topic_count, engagement) == pytest.approx(expected)

    def test_clamped_to_one(self):
        assert calculate_confidence(1000, 5, 5000.0) == 1.0

    def test_bounded_and_monotonic(self):
        cast_counts = [0, 49, 50, 99, 100, 500]
        topic_counts = [0, 2, 3, 4, 5]
        engagements = [0.0, 50.0, 51.0, 100.0, 101.0, 1000.0]

        for casts, topics, engagement in itertools.product(cast_counts, topic_counts, engagements):
            value = calculate_confidence(casts, topics, engagement)
            assert 0.0 <= value <= 1.0

        for topics, engagement in itertools.product(topic_counts, engagements):
            values = [calculate_confidence(c, topics, engagement) for c in cast_counts]
            assert values == sorted(values)

        for casts, engagement in itertools.product(cast_counts, engagements):
            values = [calculate_confidence(casts, t, engagement) for t in topic_counts]
            assert values == sorted(values)

        for casts, topics in itertools.product(cast_counts, topic_counts):
            values = [calculate_confidence(casts, topics, e) for e in engagements]
            assert values == sorted(values)
