"""Ports (interfaces) for the ports-and-adapters architecture."""

from barrier_closures.domain.ports.closure_provider import ClosureProvider
from barrier_closures.domain.ports.schedule_fetcher import ScheduleFetcher

__all__ = ["ClosureProvider", "ScheduleFetcher"]
