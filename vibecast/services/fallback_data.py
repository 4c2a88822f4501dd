"""
Fixed fallback data for the trend pipeline.

FALLBACK_CASTS replaces the live feed when Neynar is unavailable so the
analysis never runs on empty input. FALLBACK_ANALYSIS is served when the
pipeline itself fails; it is never cached.
"""

from datetime import datetime, timezone
from typing import Tuple

from vibecast.models.base import Sentiment
from vibecast.models.casts import Cast
from vibecast.models.trends import TrendAnalysis

_EPOCH = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

FALLBACK_CASTS: Tuple[Cast, ...] = (
    Cast(
        id="0x123abc",
        author_handle="cryptoking",
        author_fid=1,
        author_display_name="Crypto King",
        text=(
            "Dogecoin to the moon! The 2025 surge is just getting started. "
            "Who else is hodling? #dogecoin #crypto #moon #bullish"
        ),
        created_at=_EPOCH,
        like_count=234,
        reshare_count=45,
        reply_count=23,
    ),
    Cast(
        id="0x456def",
        author_handle="ethdev",
        author_fid=2,
        author_display_name="ETH Developer",
        text=(
            "Ethereum 2025 upgrades are game-changing! The scalability improvements are "
            "incredible. Building the future of web3 #ethereum #blockchain #defi #scaling"
        ),
        created_at=_EPOCH,
        like_count=189,
        reshare_count=67,
        reply_count=34,
    ),
    Cast(
        id="0x789ghi",
        author_handle="defifarmer",
        author_fid=3,
        author_display_name="DeFi Farmer",
        text=(
            "DeFi summer is back! Yields are looking juicy across all protocols. "
            "Time to get farming! #defi #yield #farming #protocols #liquidity"
        ),
        created_at=_EPOCH,
        like_count=156,
        reshare_count=28,
        reply_count=19,
    ),
    Cast(
        id="0xmeme1",
        author_handle="meme_lord",
        author_fid=9,
        author_display_name="Meme Lord",
        text=(
            "When you see your portfolio pumping but remember you sold yesterday "
            "#crypto #memes #trading #fomo #regret"
        ),
        created_at=_EPOCH,
        like_count=445,
        reshare_count=123,
        reply_count=67,
    ),
    Cast(
        id="0xai1",
        author_handle="ai_researcher",
        author_fid=10,
        author_display_name="AI Researcher",
        text=(
            "AI agents trading crypto autonomously... we're living in the future! "
            "The intersection of AI and DeFi is mind-blowing #ai #crypto #automation #future"
        ),
        created_at=_EPOCH,
        like_count=278,
        reshare_count=89,
        reply_count=45,
    ),
)

FALLBACK_ANALYSIS = TrendAnalysis(
    topics=["crypto", "defi", "nft", "ethereum", "bitcoin"],
    sentiment=Sentiment.POSITIVE,
    engagement=75.5,
    keywords=["crypto", "defi", "ethereum", "bitcoin", "nft", "web3", "blockchain", "trading", "moon", "bullish"],
    suggested_prompts=[
        "Create a viral meme celebrating crypto's latest surge",
        "Make a GIF about DeFi innovation in 2025",
        "Create artwork showcasing NFT creativity",
    ],
    confidence=0.7,
)
