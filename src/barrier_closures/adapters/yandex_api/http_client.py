"""HTTP client for the Yandex.Rasp station schedule.

API Documentation: https://yandex.ru/dev/rasp/doc/ru/reference/schedule-on-station
"""

import asyncio
import json
import logging
from datetime import date
from typing import TYPE_CHECKING, Any

import aiohttp

from barrier_closures.adapters.api_request_logger import log_api_request
from barrier_closures.adapters.yandex_api.constants import (
    API_KEY_SETTING,
    DEFAULT_HEADERS,
    EVENT,
    TRANSPORT_TYPES,
    YANDEX_SCHEDULE_URL,
)
from barrier_closures.domain.errors import ConfigurationError, ProviderError, TransportError
from barrier_closures.domain.ports.schedule_fetcher import ScheduleFetcher

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class YandexScheduleFetcher(ScheduleFetcher):
    """Fetches the arrival schedule of a station, one request per call.

    No retries are made here; a failed call raises a typed error and the
    caller decides what to do with it.
    """

    def __init__(
        self,
        session: "ClientSession",
        api_key: str | None,
        result_timezone: str = "Europe/Moscow",
        url: str = YANDEX_SCHEDULE_URL,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            session: Shared aiohttp ClientSession.
            api_key: Yandex.Rasp API key; a missing key fails each fetch.
            result_timezone: Timezone the provider should express times in.
            url: Schedule endpoint.
            timeout_seconds: Optional total timeout per request.
        """
        self._session = session
        self._api_key = api_key
        self._result_timezone = result_timezone
        self._url = url
        self._timeout = (
            aiohttp.ClientTimeout(total=timeout_seconds) if timeout_seconds is not None else None
        )

    def build_params(self, day: date, station: str) -> dict[str, str]:
        """Build the query parameters for one schedule request."""
        if not self._api_key:
            raise ConfigurationError(API_KEY_SETTING)

        return {
            "apikey": self._api_key,
            "station": station,
            "transport_types": TRANSPORT_TYPES,
            "event": EVENT,
            "date": day.isoformat(),
            "result_timezone": self._result_timezone,
        }

    async def fetch(self, day: date, station: str) -> dict[str, Any]:
        """Fetch the raw schedule payload for a station and day.

        Args:
            day: Calendar day to fetch.
            station: Yandex.Rasp station code.

        Returns:
            Decoded JSON object of the response.

        Raises:
            ConfigurationError: The API key is not configured.
            ProviderError: The API answered with a non-success status.
            TransportError: The request failed or the body is not a JSON object.
        """
        params = self.build_params(day, station)
        log_api_request("GET", self._url, params=params, headers=DEFAULT_HEADERS)
        logger.info(f"Fetching arrivals for station {station} on {params['date']}")

        request_kwargs: dict[str, Any] = {"params": params, "headers": DEFAULT_HEADERS}
        if self._timeout is not None:
            request_kwargs["timeout"] = self._timeout

        try:
            async with self._session.get(self._url, **request_kwargs) as response:
                return await self._handle_response(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error requesting Yandex.Rasp schedule: {e!r}")
            raise TransportError(str(e) or e.__class__.__name__) from e

    async def _handle_response(self, response: "ClientResponse") -> dict[str, Any]:
        """Check the status and decode the response body."""
        if not 200 <= response.status < 300:
            error_text = await response.text(errors="replace")
            logger.error(
                f"Yandex.Rasp returned status {response.status}: {error_text[:200]}"
            )
            raise ProviderError(response.status, error_text)

        try:
            data = json.loads(await response.text())
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Yandex.Rasp returned an undecodable body: {e}")
            raise TransportError(str(e)) from e

        if not isinstance(data, dict):
            raise TransportError("Response body is not a JSON object")
        return data
