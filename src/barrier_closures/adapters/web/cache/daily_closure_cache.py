"""Single-slot daily closure cache."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from barrier_closures.domain.clock import utc_now
from barrier_closures.domain.contracts.closure_cache import ClosureCacheProtocol
from barrier_closures.domain.models.cache_entry import CacheEntry

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import date, timedelta

    from barrier_closures.domain.models.closure_result import ClosureResult

logger = logging.getLogger(__name__)


class DailyClosureCache(ClosureCacheProtocol):
    """In-memory cache holding at most one closure result, keyed by calendar day.

    Expiry is detected lazily on ``get``; a stale or other-day entry stays in
    the slot until the next ``put`` replaces it.
    """

    def __init__(self, ttl: timedelta, clock: Callable[[], datetime] = utc_now) -> None:
        """Initialize the cache.

        Args:
            ttl: Maximum age of a cached result.
            clock: Source of the current instant.
        """
        self._ttl = ttl
        self._clock = clock
        self._entry: CacheEntry | None = None

    @property
    def entry(self) -> CacheEntry | None:
        """The current slot content, or None while empty."""
        return self._entry

    def get(self, today: date) -> ClosureResult | None:
        """Get the cached result for a day.

        Args:
            today: The calendar day being requested.

        Returns:
            The cached result if it is for ``today`` and younger than the TTL,
            otherwise None.
        """
        entry = self._entry
        if entry is None:
            logger.debug(f"Cache empty for {today}")
            return None

        if entry.date != today:
            logger.debug(f"Cache holds {entry.date}, requested {today}")
            return None

        age = self._clock() - entry.generated_at
        if age >= self._ttl:
            logger.debug(f"Cache entry for {today} is stale (age {age})")
            return None

        return entry.result

    def put(self, today: date, result: ClosureResult, generated_at: datetime) -> None:
        """Replace the slot with a freshly computed result.

        Args:
            today: The calendar day the result was computed for.
            result: The computed closure result.
            generated_at: The instant the result was produced.
        """
        self._entry = CacheEntry(date=today, generated_at=generated_at, result=result)
        logger.debug(f"Cached {len(result.intervals)} interval(s) for {today}")

    def clear(self) -> None:
        """Empty the slot."""
        self._entry = None
