"""Schedule entry domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceDescriptor:
    """A scheduled train run as described by the provider ("thread")."""

    short_title: str | None = None
    title: str | None = None
    number: str | None = None
    days: str | None = None
    stops: str | None = None


@dataclass(frozen=True)
class ScheduleEntry:
    """A single arrival record from the provider schedule.

    Either field may be missing; such entries are kept here as-is and
    dropped later when closure intervals are computed.
    """

    arrival: str | None
    thread: ServiceDescriptor | None
    days: str | None = None
    stops: str | None = None
