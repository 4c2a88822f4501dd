"""
Main API router for VibeCast v1.

This module aggregates all API endpoints and provides the main router
for the FastAPI application.
"""

from fastapi import APIRouter

from vibecast.api.v1.endpoints import challenges, farcaster, health, trends

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(challenges.router, prefix="/challenges", tags=["challenges"])
api_router.include_router(trends.router, prefix="/trends", tags=["trends"])
api_router.include_router(farcaster.router, prefix="/farcaster", tags=["farcaster"])
