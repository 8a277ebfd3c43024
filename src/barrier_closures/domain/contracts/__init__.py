"""Protocols shared between the application and adapter layers."""

from barrier_closures.domain.contracts.closure_cache import ClosureCacheProtocol

__all__ = ["ClosureCacheProtocol"]
