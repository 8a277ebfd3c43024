"""Domain models for barrier closures."""

from barrier_closures.domain.models.cache_entry import CacheEntry
from barrier_closures.domain.models.closure_interval import ClosureInterval
from barrier_closures.domain.models.closure_result import ClosureResult
from barrier_closures.domain.models.error_details import ErrorDetails
from barrier_closures.domain.models.schedule_entry import ScheduleEntry, ServiceDescriptor

__all__ = [
    "CacheEntry",
    "ClosureInterval",
    "ClosureResult",
    "ErrorDetails",
    "ScheduleEntry",
    "ServiceDescriptor",
]
