"""Application layer - use cases."""

from barrier_closures.application.closure_service import ClosureService
from barrier_closures.application.interval_computer import FALLBACK_TITLE, IntervalComputer

__all__ = ["FALLBACK_TITLE", "ClosureService", "IntervalComputer"]
