"""Default clock shared by the cache and the closure service."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current instant in UTC."""
    return datetime.now(UTC)
