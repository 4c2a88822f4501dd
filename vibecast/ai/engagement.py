"""Engagement aggregation over a batch of casts."""

from typing import Sequence

from vibecast.models.casts import Cast


def mean_engagement(casts: Sequence[Cast]) -> float:
    """Mean likes + reshares + replies per cast; 0.0 for an empty batch."""
    if not casts:
        return 0.0
    return sum(cast.engagement for cast in casts) / len(casts)
