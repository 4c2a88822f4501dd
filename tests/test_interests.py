"""
Unit tests for user interest analysis.
"""

import pytest

from vibecast.ai.interests import analyze_user_interests
from vibecast.models.trends import UserInterests
from tests.conftest import make_cast


class TestAnalyzeUserInterests:
    """Tests for interests inferred from a user's casts."""

    def test_hashtags_channels_and_categories(self):
        casts = [
            make_cast("#bitcoin #defi", likes=10, index=1),
            make_cast("#gaming tonight", likes=5, index=2, channel_id="games"),
        ]

        interests = analyze_user_interests(casts)

        assert interests.topics == ["bitcoin", "defi", "gaming"]
        assert interests.channels == ["games"]
        assert interests.engagement_score == pytest.approx(7.5)
        assert interests.categories == {"crypto": 20, "gaming": 5}

    def test_caps(self):
        casts = [
            make_cast(f"#tag{i} #extra{i}", index=i, channel_id=f"channel{i}")
            for i in range(8)
        ]

        interests = analyze_user_interests(casts)

        assert len(interests.topics) == 10
        assert interests.topics[:2] == ["tag0", "extra0"]
        assert interests.channels == [f"channel{i}" for i in range(5)]

    def test_repeated_hashtags_counted_once(self):
        casts = [make_cast("#zora mint", index=1), make_cast("#zora again", index=2)]
        assert analyze_user_interests(casts).topics == ["zora"]

    def test_empty(self):
        interests = analyze_user_interests([])

        assert interests.topics == []
        assert interests.channels == []
        assert interests.engagement_score == 0.0
        assert interests.categories == {}


class TestDefaultInterests:
    """Tests for the interests reported when a user's casts are unavailable."""

    def test_default(self):
        interests = UserInterests.default()

        assert interests.topics == ["crypto", "web3"]
        assert interests.channels == ["general"]
        assert interests.engagement_score == 0.0
        assert interests.categories == {"general": 1}
