"""
FastAPI dependencies for VibeCast.

The Farcaster client and trend analyzer are built once per application in
create_application and stored on app.state; these dependencies hand them
to the endpoints, and tests pass isolated instances to create_application.
"""

from fastapi import Request

from vibecast.ai.trend_analyzer import TrendAnalyzer
from vibecast.services.farcaster_client import FarcasterClient


def get_farcaster_client(request: Request) -> FarcasterClient:
    """The process-wide Farcaster client."""
    return request.app.state.farcaster_client


def get_trend_analyzer(request: Request) -> TrendAnalyzer:
    """The process-wide trend analyzer."""
    return request.app.state.trend_analyzer
