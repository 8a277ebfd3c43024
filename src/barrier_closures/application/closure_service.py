"""Application service (use case) answering today's barrier closures."""

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import UTC, date, datetime, tzinfo
from typing import TYPE_CHECKING, Any

from barrier_closures.application.interval_computer import IntervalComputer
from barrier_closures.domain.clock import utc_now
from barrier_closures.domain.models import ClosureResult, ScheduleEntry
from barrier_closures.domain.ports.closure_provider import ClosureProvider

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from barrier_closures.domain.contracts import ClosureCacheProtocol
    from barrier_closures.domain.ports import ScheduleFetcher


class ClosureService(ClosureProvider):
    """Serves the closure result of a day from cache, refreshing it on a miss."""

    def __init__(
        self,
        fetcher: "ScheduleFetcher",
        cache: "ClosureCacheProtocol",
        parse_schedule: Callable[[dict[str, Any]], Sequence[ScheduleEntry]],
        station: str,
        closed_before_min: int,
        closed_after_min: int,
        zone: tzinfo = UTC,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the service.

        Args:
            fetcher: Source of raw schedule payloads.
            cache: Cache for the computed result of the day.
            parse_schedule: Turns a raw payload into schedule entries.
            station: Station code queried.
            closed_before_min: Minutes closed before each arrival.
            closed_after_min: Minutes closed after each arrival.
            zone: Timezone that defines "today" and naive arrival times.
            clock: Source of the current instant.
        """
        self._fetcher = fetcher
        self._cache = cache
        self._parse_schedule = parse_schedule
        self.station = station
        self.closed_before_min = closed_before_min
        self.closed_after_min = closed_after_min
        self._zone = zone
        self._clock = clock
        # Coalesces concurrent refreshes so only one upstream call is in flight
        self._refresh_lock = asyncio.Lock()

    def today(self) -> date:
        """Current calendar day in the service timezone."""
        return self._clock().astimezone(self._zone).date()

    async def get_closures(self, today: date | None = None) -> ClosureResult:
        """Get the closure result for a day, fetching it on a cache miss.

        Args:
            today: Day to answer for, defaults to the current day.

        Returns:
            The closure result for the day.

        Raises:
            ClosureError: Fetching the schedule failed; the cache is left as is.
        """
        day = today or self.today()

        cached = self._cache.get(day)
        if cached is not None:
            logger.debug(f"Serving closures for {day} from cache")
            return cached

        async with self._refresh_lock:
            # Another request may have refreshed while we waited
            cached = self._cache.get(day)
            if cached is not None:
                return cached
            return await self._refresh(day)

    async def _refresh(self, day: date) -> ClosureResult:
        """Fetch, compute and cache the result for a day."""
        payload = await self._fetcher.fetch(day, self.station)
        entries = self._parse_schedule(payload)
        intervals = IntervalComputer.compute(
            entries, self.closed_before_min, self.closed_after_min, default_tz=self._zone
        )
        result = ClosureResult(
            intervals=intervals,
            station=self.station,
            date=day,
            closed_before_min=self.closed_before_min,
            closed_after_min=self.closed_after_min,
        )
        self._cache.put(day, result, self._clock())
        logger.info(
            f"Computed {len(intervals)} closure interval(s) from {len(entries)} "
            f"schedule entries for {day}"
        )
        return result
