"""Yandex.Rasp API adapters."""

from barrier_closures.adapters.yandex_api.http_client import YandexScheduleFetcher
from barrier_closures.adapters.yandex_api.schedule_parser import ScheduleParser

__all__ = ["ScheduleParser", "YandexScheduleFetcher"]
