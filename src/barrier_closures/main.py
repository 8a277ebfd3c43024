"""Main entry point for the barrier closures application."""

import asyncio
import logging
import sys

import aiohttp

from barrier_closures.adapters.config import AppConfig
from barrier_closures.adapters.web import WebAdapter
from barrier_closures.adapters.web.cache import DailyClosureCache
from barrier_closures.adapters.yandex_api import ScheduleParser, YandexScheduleFetcher
from barrier_closures.application import ClosureService
from barrier_closures.domain.clock import utc_now

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    if not config.yandex_rasp_api_key:
        # Not fatal: each request answers with a configuration error instead
        logger.warning("YANDEX_RASP_API_KEY is not set, /api/closures will fail")

    logger.info(
        f"Station {config.station_code}, closed {config.closed_before_min} min before / "
        f"{config.closed_after_min} min after arrival, cache TTL {config.cache_ttl}"
    )

    # One aiohttp session for the process lifetime
    async with aiohttp.ClientSession() as session:
        fetcher = YandexScheduleFetcher(
            session,
            api_key=config.yandex_rasp_api_key,
            result_timezone=config.result_timezone,
            url=config.yandex_api_url,
            timeout_seconds=config.yandex_api_timeout,
        )
        service = ClosureService(
            fetcher=fetcher,
            cache=DailyClosureCache(ttl=config.cache_ttl, clock=utc_now),
            parse_schedule=ScheduleParser.parse_schedule,
            station=config.station_code,
            closed_before_min=config.closed_before_min,
            closed_after_min=config.closed_after_min,
            zone=config.zone,
            clock=utc_now,
        )
        web_adapter = WebAdapter(service, config)

        try:
            await web_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await web_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
