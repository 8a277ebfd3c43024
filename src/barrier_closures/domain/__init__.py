"""Domain layer - core models, errors and interfaces."""

from barrier_closures.domain.errors import (
    ClosureError,
    ConfigurationError,
    ProviderError,
    TransportError,
)
from barrier_closures.domain.models import (
    CacheEntry,
    ClosureInterval,
    ClosureResult,
    ScheduleEntry,
    ServiceDescriptor,
)
from barrier_closures.domain.ports import ClosureProvider, ScheduleFetcher

__all__ = [
    "CacheEntry",
    "ClosureError",
    "ClosureInterval",
    "ClosureProvider",
    "ClosureResult",
    "ConfigurationError",
    "ProviderError",
    "ScheduleEntry",
    "ScheduleFetcher",
    "ServiceDescriptor",
    "TransportError",
]
