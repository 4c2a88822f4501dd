"""
Farcaster content source backed by the Neynar v2 API.

Each call makes exactly one HTTP request. Any failure (missing API key,
network error, timeout, non-2xx status such as 402 Payment Required, or an
unparseable body) raises SourceUnavailable; retrying or substituting
fallback data is the caller's job.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx
from pydantic import ValidationError as PydanticValidationError

from vibecast.core.config import settings
from vibecast.core.exceptions import SourceUnavailable, ValidationError
from vibecast.models.casts import Cast, FarcasterUser

logger = logging.getLogger(__name__)

SOURCE_NAME = "neynar"


class ContentSource(Protocol):
    """Anything that can supply a bounded batch of recent casts."""

    async def fetch_recent_posts(self, limit: int) -> List[Cast]:
        ...


class FarcasterClient:
    """Thin async client for the Neynar feed endpoints."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.NEYNAR_API_KEY
        self.base_url = (base_url or settings.NEYNAR_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.NEYNAR_TIMEOUT_SECONDS
        self._transport = transport

        if not self.api_key:
            logger.warning("Neynar API key not configured. Farcaster feed requests will fail over to fallback data.")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_headers(self) -> Dict[str, str]:
        return {
            "api_key": self.api_key or "",
            "accept": "application/json",
        }

    async def fetch_recent_posts(self, limit: int) -> List[Cast]:
        """
        Fetch up to `limit` trending casts.

        Args:
            limit: Maximum number of casts, must be positive

        Returns:
            At most `limit` casts; malformed entries are skipped

        Raises:
            ValidationError: If limit is not positive
            SourceUnavailable: If the feed cannot be fetched
        """
        self._validate_limit(limit)
        payload = await self._get("/farcaster/feed/trending", {"limit": limit})
        casts = self._parse_casts(payload)[:limit]
        logger.info(f"Fetched {len(casts)} trending casts from Neynar")
        return casts

    async def fetch_user_casts(self, fid: int, limit: int = 50) -> List[Cast]:
        """Fetch up to `limit` recent casts authored by `fid`."""
        self._validate_limit(limit)
        self._validate_fid(fid)
        payload = await self._get("/farcaster/feed/user/casts", {"fid": fid, "limit": limit})
        casts = self._parse_casts(payload)[:limit]
        logger.info(f"Fetched {len(casts)} casts for fid {fid}")
        return casts

    async def fetch_user(self, fid: int) -> Optional[FarcasterUser]:
        """
        Fetch the profile of `fid`.

        Returns:
            The user, or None when Neynar knows no such fid

        Raises:
            ValidationError: If fid is not positive
            SourceUnavailable: If the profile cannot be fetched or parsed
        """
        self._validate_fid(fid)
        payload = await self._get("/farcaster/user/bulk", {"fids": fid})
        users = payload.get("users")
        if not isinstance(users, list):
            raise SourceUnavailable(SOURCE_NAME, "response has no 'users' list")
        if not users:
            return None

        try:
            return FarcasterUser.from_neynar(users[0])
        except (KeyError, TypeError, AttributeError, PydanticValidationError) as e:
            raise SourceUnavailable(SOURCE_NAME, f"malformed user for fid {fid}: {e}") from e

    @staticmethod
    def _validate_limit(limit: int):
        if limit <= 0:
            raise ValidationError("limit must be a positive integer", {"limit": limit})

    @staticmethod
    def _validate_fid(fid: int):
        if fid <= 0:
            raise ValidationError("fid must be a positive integer", {"fid": fid})

    async def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            raise SourceUnavailable(SOURCE_NAME, "API key not configured")

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(path, params=params, headers=self._get_headers())
                response.raise_for_status()
                payload = response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"Neynar returned HTTP {status_code} for {path}")
            raise SourceUnavailable(
                SOURCE_NAME,
                f"HTTP {status_code}",
                {"source": SOURCE_NAME, "status_code": status_code, "path": path},
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Neynar request to {path} failed: {e!r}")
            raise SourceUnavailable(SOURCE_NAME, f"request failed: {e!r}") from e
        except ValueError as e:
            logger.error(f"Neynar returned an unparseable body for {path}: {e}")
            raise SourceUnavailable(SOURCE_NAME, "invalid JSON body") from e

        if not isinstance(payload, dict):
            raise SourceUnavailable(SOURCE_NAME, "unexpected response shape")
        return payload

    @staticmethod
    def _parse_casts(payload: Dict[str, Any]) -> List[Cast]:
        raw_casts = payload.get("casts")
        if not isinstance(raw_casts, list):
            raise SourceUnavailable(SOURCE_NAME, "response has no 'casts' list")

        casts = []
        for raw in raw_casts:
            try:
                casts.append(Cast.from_neynar(raw))
            except (KeyError, TypeError, AttributeError, PydanticValidationError) as e:
                logger.warning(f"Skipping malformed cast: {e}")
        return casts
