"""Closure result domain model."""

from dataclasses import dataclass
from datetime import date

from barrier_closures.domain.models.closure_interval import ClosureInterval


@dataclass(frozen=True)
class ClosureResult:
    """Ordered closure intervals for one station and day, with the offsets used."""

    intervals: tuple[ClosureInterval, ...]
    station: str
    date: date
    closed_before_min: int
    closed_after_min: int
