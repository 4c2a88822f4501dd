"""
Trend Analyzer for VibeCast.

This module orchestrates the trend-to-challenge pipeline: it fetches recent
casts, extracts words, classifies topics, scores sentiment, aggregates
engagement, estimates confidence and synthesizes daily challenges. Every
stage reports an explicit StageResult and every failure maps to a fallback,
so callers always receive a usable result.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple

from vibecast.ai.challenge_synthesizer import (
    build_daily_challenges, fallback_challenges, generate_prompts
)
from vibecast.ai.confidence import calculate_confidence
from vibecast.ai.engagement import mean_engagement
from vibecast.ai.lexical import extract_keywords, extract_words, word_frequency
from vibecast.ai.sentiment import analyze_sentiment
from vibecast.ai.stages import Err, ErrorKind, Ok, StageResult
from vibecast.ai.topic_classifier import extract_trending_topics
from vibecast.core.config import settings
from vibecast.core.exceptions import (
    AnalysisFailure, SourceUnavailable, SynthesisFailure
)
from vibecast.models.base import CastOrigin, utcnow
from vibecast.models.casts import Cast
from vibecast.models.challenges import Challenge
from vibecast.models.trends import TrendAnalysis, TrendSnapshot
from vibecast.services.fallback_data import FALLBACK_ANALYSIS, FALLBACK_CASTS
from vibecast.services.farcaster_client import ContentSource
from vibecast.services.trend_cache import TREND_CACHE_KEY, TrendCache

logger = logging.getLogger(__name__)


def run_analysis(casts: Sequence[Cast]) -> TrendAnalysis:
    """
    Analyze a batch of casts. Pure function of its input.

    An empty batch yields no topics, zero engagement and base confidence.
    """
    corpus = " ".join(cast.text.lower() for cast in casts)
    freq = word_frequency(extract_words(corpus))

    topics = extract_trending_topics(freq, casts)
    sentiment = analyze_sentiment(corpus)
    engagement = mean_engagement(casts)
    keywords = extract_keywords(freq, topics)
    prompts = generate_prompts(topics, sentiment, engagement)
    confidence = calculate_confidence(len(casts), len(topics), engagement)

    return TrendAnalysis(
        topics=topics,
        sentiment=sentiment,
        engagement=engagement,
        keywords=keywords,
        suggested_prompts=prompts,
        confidence=confidence,
    )


class TrendAnalyzer:
    """
    Trend analysis and challenge generation over a Farcaster content source.

    One instance is built per process and injected where needed; it owns
    its cache, so separate instances never share state.
    """

    def __init__(
        self,
        source: ContentSource,
        cache: Optional[TrendCache[TrendSnapshot]] = None,
        fetch_limit: Optional[int] = None,
        clock: Callable[[], datetime] = utcnow,
        fallback_casts: Sequence[Cast] = FALLBACK_CASTS,
    ):
        self.source = source
        self.cache = cache or TrendCache(
            ttl_seconds=settings.TREND_CACHE_TTL_SECONDS,
            single_flight=settings.TREND_SINGLE_FLIGHT,
        )
        self.fetch_limit = fetch_limit or settings.TREND_FETCH_LIMIT
        self.fallback_casts = tuple(fallback_casts)
        self._clock = clock

    async def fetch_casts(self, limit: Optional[int] = None) -> StageResult[List[Cast]]:
        """Fetch stage: one attempt against the content source."""
        try:
            casts = await self.source.fetch_recent_posts(limit or self.fetch_limit)
        except SourceUnavailable as e:
            return Err(ErrorKind.SOURCE_UNAVAILABLE, e)
        except Exception as e:
            logger.error(f"Content source raised unexpectedly: {e!r}", exc_info=True)
            return Err(ErrorKind.SOURCE_UNAVAILABLE, SourceUnavailable("content_source", repr(e)))
        return Ok(list(casts))

    async def load_casts(self, limit: Optional[int] = None) -> Tuple[List[Cast], CastOrigin]:
        """
        Casts for analysis, substituting the fallback dataset when the
        source fails or returns nothing.
        """
        result = await self.fetch_casts(limit)
        if isinstance(result, Err):
            logger.warning(f"Using fallback casts: {result.error.message}")
            return list(self.fallback_casts), CastOrigin.FALLBACK
        if not result.value:
            logger.warning("Content source returned no casts, using fallback casts")
            return list(self.fallback_casts), CastOrigin.FALLBACK
        return result.value, CastOrigin.NEYNAR

    def analyze(self, casts: Sequence[Cast]) -> StageResult[TrendAnalysis]:
        """Analysis stage: extraction, classification and scoring."""
        try:
            return Ok(run_analysis(casts))
        except Exception as e:
            logger.error(f"Trend analysis failed: {e!r}", exc_info=True)
            return Err(ErrorKind.ANALYSIS_FAILURE, AnalysisFailure("analysis", repr(e)))

    async def _run_pipeline(self) -> Optional[TrendSnapshot]:
        casts, origin = await self.load_casts()
        result = self.analyze(casts)
        if isinstance(result, Err):
            return None

        analysis = result.value
        logger.info(
            f"Trend analysis completed from {origin.value}: {len(casts)} casts, "
            f"topics={list(analysis.topics)}, sentiment={analysis.sentiment.value}, "
            f"confidence={analysis.confidence:.2f}"
        )
        return TrendSnapshot(analysis=analysis, source=origin, generated_at=self._clock())

    async def current_trends(self) -> TrendSnapshot:
        """
        Current trend analysis with its source, cached for the configured TTL.

        Returns:
            A fresh or cached snapshot; when the pipeline fails, the fallback
            analysis (uncached) with source fallback and no generation time
        """
        snapshot = await self.cache.get_or_compute(self._run_pipeline, TREND_CACHE_KEY)
        if snapshot is None:
            logger.warning("Serving fallback trend analysis")
            return TrendSnapshot(analysis=FALLBACK_ANALYSIS, source=CastOrigin.FALLBACK)
        return snapshot

    async def analyze_trends(self) -> TrendAnalysis:
        """Current trend analysis; see current_trends."""
        return (await self.current_trends()).analysis

    def synthesize(self, analysis: TrendAnalysis, now: datetime) -> StageResult[List[Challenge]]:
        """Synthesis stage: templates to challenge records."""
        try:
            return Ok(build_daily_challenges(analysis, now))
        except Exception as e:
            logger.error(f"Challenge synthesis failed: {e!r}", exc_info=True)
            return Err(ErrorKind.SYNTHESIS_FAILURE, SynthesisFailure(repr(e)))

    async def generate_daily_challenges(self) -> List[Challenge]:
        """
        Today's AI challenges.

        Returns:
            Three challenges built from the current analysis, or the single
            fallback challenge when synthesis fails
        """
        now = self._clock()
        try:
            analysis = await self.analyze_trends()
        except Exception as e:
            logger.error(f"Failed to obtain trend analysis: {e!r}", exc_info=True)
            return fallback_challenges(now)

        result = self.synthesize(analysis, now)
        if isinstance(result, Err):
            return fallback_challenges(now)
        return result.value
