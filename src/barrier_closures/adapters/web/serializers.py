"""JSON rendering of closure results."""

from datetime import UTC, datetime
from typing import Any

from barrier_closures.domain.models import ClosureInterval, ClosureResult


def format_instant(value: datetime) -> str:
    """Format an instant as ISO 8601 UTC with milliseconds, e.g. 2024-05-01T09:55:00.000Z."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def serialize_interval(interval: ClosureInterval) -> dict[str, str]:
    """Serialize one closure interval."""
    return {
        "start": format_instant(interval.start),
        "end": format_instant(interval.end),
        "arrival": format_instant(interval.arrival),
        "title": interval.title,
        "number": interval.number,
        "stops": interval.stops,
        "days": interval.days,
    }


def serialize_result(result: ClosureResult) -> dict[str, Any]:
    """Serialize a closure result into the /api/closures response body."""
    return {
        "intervals": [serialize_interval(i) for i in result.intervals],
        "meta": {
            "station": result.station,
            "date": result.date.isoformat(),
            "closedBeforeMin": result.closed_before_min,
            "closedAfterMin": result.closed_after_min,
        },
    }
