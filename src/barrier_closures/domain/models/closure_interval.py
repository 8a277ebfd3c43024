"""Closure interval domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ClosureInterval:
    """Time window during which the barrier is modeled as closed around one arrival."""

    start: datetime
    end: datetime
    arrival: datetime
    title: str
    number: str = ""
    stops: str = ""
    days: str = ""
