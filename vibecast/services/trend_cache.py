"""
Single-entry TTL cache for trend analysis results.

Entries are overwritten last-write-wins. With single-flight enabled,
concurrent misses for the same key share one in-flight computation instead
of each running the pipeline.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

TREND_CACHE_KEY = "trend_analysis"


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached value and the clock reading when it was stored."""
    value: T
    stored_at: float


class TrendCache(Generic[T]):
    """In-memory TTL cache, process lifetime only."""

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        single_flight: bool = True,
    ):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self.single_flight = single_flight
        self._clock = clock
        self._entries: Dict[str, CacheEntry[T]] = {}
        self._in_flight: Dict[str, "asyncio.Future[Optional[T]]"] = {}

    def age(self, key: str = TREND_CACHE_KEY) -> Optional[float]:
        """Seconds since the entry was stored, or None when empty."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        return self._clock() - entry.stored_at

    def get(self, key: str = TREND_CACHE_KEY) -> Optional[T]:
        """Return the entry if it is younger than the TTL."""
        age = self.age(key)
        if age is None or age >= self.ttl_seconds:
            return None
        return self._entries[key].value

    def set(self, value: T, key: str = TREND_CACHE_KEY):
        self._entries[key] = CacheEntry(value=value, stored_at=self._clock())

    def clear(self, key: str = TREND_CACHE_KEY):
        self._entries.pop(key, None)

    def state(self, key: str = TREND_CACHE_KEY) -> str:
        """One of 'empty', 'fresh' or 'stale'."""
        age = self.age(key)
        if age is None:
            return "empty"
        return "fresh" if age < self.ttl_seconds else "stale"

    async def get_or_compute(
        self,
        compute: Callable[[], Awaitable[Optional[T]]],
        key: str = TREND_CACHE_KEY,
    ) -> Optional[T]:
        """
        Serve a fresh entry or run `compute`.

        `compute` returns the value to cache, or None to signal a failure
        that must not be cached. Callers waiting on a shared computation
        receive the same result, including None.
        """
        cached = self.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {key}")
            return cached

        if not self.single_flight:
            return await self._compute_and_store(compute, key)

        pending = self._in_flight.get(key)
        while pending is not None:
            logger.debug(f"Joining in-flight computation for {key}")
            try:
                return await asyncio.shield(pending)
            except asyncio.CancelledError:
                # a cancelled owner hands the computation to its waiters
                if not pending.cancelled():
                    raise
            logger.debug(f"In-flight computation for {key} was cancelled, retrying")
            cached = self.get(key)
            if cached is not None:
                return cached
            pending = self._in_flight.get(key)

        future: "asyncio.Future[Optional[T]]" = asyncio.get_running_loop().create_future()
        self._in_flight[key] = future
        try:
            result = await self._compute_and_store(compute, key)
        except asyncio.CancelledError:
            future.cancel()
            raise
        except Exception as e:
            future.set_exception(e)
            # waiters surface the exception; mark it retrieved for the owner
            future.exception()
            raise
        else:
            future.set_result(result)
            return result
        finally:
            self._in_flight.pop(key, None)

    async def _compute_and_store(
        self,
        compute: Callable[[], Awaitable[Optional[T]]],
        key: str,
    ) -> Optional[T]:
        result = await compute()
        if result is not None:
            self.set(result, key)
        return result
