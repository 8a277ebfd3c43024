"""Turns schedule entries into ordered barrier closure intervals."""

import logging
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta, tzinfo

from barrier_closures.domain.models import ClosureInterval, ScheduleEntry

logger = logging.getLogger(__name__)

# Title used when the provider gives neither a short nor a full title
FALLBACK_TITLE = "Электропоезд"


class IntervalComputer:
    """Pure transform from schedule entries to closure intervals.

    Entries without an arrival timestamp or service descriptor, and entries
    whose arrival does not parse, are partial upstream records and are dropped
    without failing the batch.
    """

    @staticmethod
    def compute(
        entries: Sequence[ScheduleEntry],
        before_min: int,
        after_min: int,
        default_tz: tzinfo = UTC,
    ) -> tuple[ClosureInterval, ...]:
        """Compute closure intervals sorted by start.

        Args:
            entries: Schedule entries in provider order.
            before_min: Minutes the barrier closes before each arrival.
            after_min: Minutes the barrier stays closed after each arrival.
            default_tz: Timezone for arrival timestamps without an offset.

        Returns:
            Intervals ascending by start; equal starts keep input order.

        Raises:
            ValueError: If an offset is negative.
        """
        if before_min < 0 or after_min < 0:
            raise ValueError("Closure offsets must be non-negative minutes")

        before = timedelta(minutes=before_min)
        after = timedelta(minutes=after_min)

        intervals = []
        for entry in entries:
            interval = IntervalComputer._build_interval(entry, before, after, default_tz)
            if interval is not None:
                intervals.append(interval)

        dropped = len(entries) - len(intervals)
        if dropped:
            logger.debug(f"Dropped {dropped} of {len(entries)} schedule entries as malformed")

        # sorted() is stable, equal starts keep provider order
        return tuple(sorted(intervals, key=lambda i: i.start))

    @staticmethod
    def _build_interval(
        entry: ScheduleEntry, before: timedelta, after: timedelta, default_tz: tzinfo
    ) -> ClosureInterval | None:
        """Build the interval for one entry, or None if the entry is malformed."""
        if not entry.arrival or entry.thread is None:
            return None

        arrival = IntervalComputer.parse_arrival(entry.arrival, default_tz)
        if arrival is None:
            return None

        try:
            start = arrival - before
            end = arrival + after
        except OverflowError:
            return None

        thread = entry.thread
        return ClosureInterval(
            start=start,
            end=end,
            arrival=arrival,
            title=IntervalComputer.resolve_title(thread.short_title, thread.title),
            number=thread.number or "",
            stops=entry.stops or thread.stops or "",
            days=entry.days or thread.days or "",
        )

    @staticmethod
    def parse_arrival(value: str, default_tz: tzinfo = UTC) -> datetime | None:
        """Parse an ISO 8601 arrival timestamp into a UTC instant.

        Timestamps without an offset are taken to be in ``default_tz``.
        Returns None when the value is not a valid date/time or falls outside
        the representable range once converted to UTC.
        """
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except (ValueError, TypeError):
            return None

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=default_tz)
        try:
            return parsed.astimezone(UTC)
        except OverflowError:
            return None

    @staticmethod
    def resolve_title(short_title: str | None, title: str | None) -> str:
        """First non-empty of short title, full title, fallback label."""
        return short_title or title or FALLBACK_TITLE
