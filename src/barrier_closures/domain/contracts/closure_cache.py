"""Protocol for caching the closure result of the current day."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import date, datetime

    from barrier_closures.domain.models.closure_result import ClosureResult


class ClosureCacheProtocol(Protocol):
    """Protocol for a per-day closure result cache."""

    def get(self, today: "date") -> "ClosureResult | None":
        """Get the cached result for a day.

        Args:
            today: The calendar day being requested.

        Returns:
            The cached result if it was computed for that day and is still fresh,
            otherwise None.
        """
        ...

    def put(self, today: "date", result: "ClosureResult", generated_at: "datetime") -> None:
        """Store a freshly computed result, replacing whatever was cached.

        Args:
            today: The calendar day the result was computed for.
            result: The computed closure result.
            generated_at: The instant the result was produced.
        """
        ...
