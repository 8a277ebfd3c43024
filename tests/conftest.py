"""Shared fixtures for barrier closures tests."""

from datetime import UTC, datetime, timedelta

import pytest

from barrier_closures.domain.models import ScheduleEntry, ServiceDescriptor


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


def make_entry(
    arrival: str | None = "2024-05-01T10:00:00+00:00",
    short_title: str | None = "6602",
    title: str | None = "Москва — Серпухов",
    number: str | None = "6602",
    days: str | None = None,
    stops: str | None = None,
    with_thread: bool = True,
) -> ScheduleEntry:
    """Build a schedule entry with sensible defaults."""
    thread = (
        ServiceDescriptor(short_title=short_title, title=title, number=number)
        if with_thread
        else None
    )
    return ScheduleEntry(arrival=arrival, thread=thread, days=days, stops=stops)


@pytest.fixture
def clock() -> FakeClock:
    """Clock fixed at 2024-05-01 09:00 UTC."""
    return FakeClock(datetime(2024, 5, 1, 9, 0, tzinfo=UTC))
