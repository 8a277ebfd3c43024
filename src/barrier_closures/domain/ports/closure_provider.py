"""Closure provider port."""

from datetime import date
from typing import Protocol

from barrier_closures.domain.models.closure_result import ClosureResult


class ClosureProvider(Protocol):
    """Port for answering which windows the barrier is closed on a day."""

    async def get_closures(self, today: date | None = None) -> ClosureResult:
        """Get the closure result for a day, defaulting to the current day."""
        ...
