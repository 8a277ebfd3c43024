"""Caches used by the web adapter."""

from barrier_closures.adapters.web.cache.daily_closure_cache import DailyClosureCache

__all__ = ["DailyClosureCache"]
