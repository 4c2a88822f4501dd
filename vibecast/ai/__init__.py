"""
AI module for VibeCast.

This module contains the trend analysis pipeline: lexical extraction,
topic classification, sentiment and engagement scoring, confidence
estimation and challenge synthesis.
"""

from vibecast.ai.trend_analyzer import TrendAnalyzer, run_analysis

__all__ = ["TrendAnalyzer", "run_analysis"]
