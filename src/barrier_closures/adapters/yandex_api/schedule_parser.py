"""Parser for Yandex.Rasp station schedule responses."""

import logging
from typing import Any

from barrier_closures.domain.models import ScheduleEntry, ServiceDescriptor

logger = logging.getLogger(__name__)


class ScheduleParser:
    """Parses the raw schedule payload into ScheduleEntry objects."""

    @staticmethod
    def parse_schedule(payload: dict[str, Any]) -> list[ScheduleEntry]:
        """Parse the ``schedule`` array of a response.

        Args:
            payload: Decoded JSON object returned by the schedule endpoint.

        Returns:
            One entry per object in the array, in provider order. A missing or
            non-list ``schedule`` yields an empty list.
        """
        schedule = payload.get("schedule")
        if not isinstance(schedule, list):
            logger.debug("Response has no schedule array")
            return []

        return [ScheduleParser._parse_entry(item) for item in schedule if isinstance(item, dict)]

    @staticmethod
    def _parse_entry(item: dict[str, Any]) -> ScheduleEntry:
        """Parse a single schedule item."""
        return ScheduleEntry(
            arrival=ScheduleParser._text(item.get("arrival")),
            thread=ScheduleParser._parse_thread(item.get("thread")),
            days=ScheduleParser._text(item.get("days")),
            stops=ScheduleParser._text(item.get("stops")),
        )

    @staticmethod
    def _parse_thread(thread: Any) -> ServiceDescriptor | None:
        """Parse the service descriptor, None unless it is an object."""
        if not isinstance(thread, dict):
            return None

        return ServiceDescriptor(
            short_title=ScheduleParser._text(thread.get("short_title")),
            title=ScheduleParser._text(thread.get("title")),
            number=ScheduleParser._text(thread.get("number")),
            days=ScheduleParser._text(thread.get("days")),
            stops=ScheduleParser._text(thread.get("stops")),
        )

    @staticmethod
    def _text(value: Any) -> str | None:
        """Normalize a scalar field to a string."""
        if value is None or isinstance(value, dict | list):
            return None
        if isinstance(value, str):
            return value
        return str(value)
