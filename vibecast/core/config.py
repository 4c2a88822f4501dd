"""
Configuration management for VibeCast.

This module handles all application settings using Pydantic Settings
for type validation and environment variable management.
"""

from typing import List, Optional, Union
from pydantic import AnyHttpUrl, validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Project Information
    PROJECT_NAME: str = "VibeCast Challenges"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = []

    @validator("BACKEND_CORS_ORIGINS", pre=True)
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Neynar (Farcaster) Configuration
    NEYNAR_API_KEY: Optional[str] = None
    NEYNAR_BASE_URL: str = "https://api.neynar.com/v2"
    NEYNAR_TIMEOUT_SECONDS: float = 10.0

    # Trend Analysis
    TREND_FETCH_LIMIT: int = 100
    TREND_CACHE_TTL_SECONDS: float = 600.0  # 10 minutes
    TREND_SINGLE_FLIGHT: bool = True

    # Challenges
    CHALLENGE_DURATION_HOURS: int = 24
    CHALLENGE_VOTING_HOURS: int = 12

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
