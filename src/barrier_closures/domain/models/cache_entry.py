"""Cache entry domain model."""

from dataclasses import dataclass
from datetime import date, datetime

from barrier_closures.domain.models.closure_result import ClosureResult


@dataclass(frozen=True)
class CacheEntry:
    """The cached closure result together with the day and instant it was computed."""

    date: date
    generated_at: datetime
    result: ClosureResult
