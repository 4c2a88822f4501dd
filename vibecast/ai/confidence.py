"""
Heuristic confidence estimation for a trend analysis.

This is not a statistical confidence. It starts at 0.5 and rewards
larger samples, more diverse topics and higher engagement, each through
two cumulative thresholds, then clamps to 1.0. The result is monotonically
non-decreasing in every input.
"""

BASE_CONFIDENCE = 0.5
MAX_CONFIDENCE = 1.0

# (threshold, bonus) pairs; each satisfied threshold adds its bonus.
SAMPLE_SIZE_STEPS = ((50, 0.2), (100, 0.1))
TOPIC_COUNT_STEPS = ((3, 0.1), (5, 0.1))
ENGAGEMENT_STEPS = ((50, 0.1), (100, 0.1))


def calculate_confidence(cast_count: int, topic_count: int, engagement: float) -> float:
    confidence = BASE_CONFIDENCE

    for threshold, bonus in SAMPLE_SIZE_STEPS:
        if cast_count >= threshold:
            confidence += bonus

    for threshold, bonus in TOPIC_COUNT_STEPS:
        if topic_count >= threshold:
            confidence += bonus

    # engagement thresholds are strict
    for threshold, bonus in ENGAGEMENT_STEPS:
        if engagement > threshold:
            confidence += bonus

    return round(min(confidence, MAX_CONFIDENCE), 4)
