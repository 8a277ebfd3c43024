"""Behavior-focused tests for YandexScheduleFetcher."""

import asyncio
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from barrier_closures.adapters.yandex_api import YandexScheduleFetcher
from barrier_closures.adapters.yandex_api.constants import YANDEX_SCHEDULE_URL
from barrier_closures.domain.errors import ConfigurationError, ProviderError, TransportError

DAY = date(2024, 5, 1)
STATION = "s9603463"


def make_session(status: int = 200, text: str = '{"schedule": []}') -> MagicMock:
    """Build a mock aiohttp session whose get() yields a response with the given status/body."""
    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=text)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.get.return_value = context
    return session


def make_raw_session(status: int, body: bytes) -> MagicMock:
    """Build a mock session whose response decodes raw bytes as UTF-8, like aiohttp does."""
    session = make_session(status=status)
    response = session.get.return_value.__aenter__.return_value

    async def text(encoding: str | None = None, errors: str = "strict") -> str:
        return body.decode(encoding or "utf-8", errors)

    response.text = AsyncMock(side_effect=text)
    return session


class TestRequest:
    """Tests for the outgoing request."""

    @pytest.mark.asyncio
    async def test_when_fetching_then_sends_fixed_query_parameters(self) -> None:
        """Given a configured key, when fetching, then the fixed parameters are sent."""
        session = make_session()
        fetcher = YandexScheduleFetcher(session, api_key="secret", result_timezone="Europe/Moscow")

        await fetcher.fetch(DAY, STATION)

        session.get.assert_called_once()
        args, kwargs = session.get.call_args
        assert args[0] == YANDEX_SCHEDULE_URL
        assert kwargs["params"] == {
            "apikey": "secret",
            "station": STATION,
            "transport_types": "suburban",
            "event": "arrival",
            "date": "2024-05-01",
            "result_timezone": "Europe/Moscow",
        }
        assert "timeout" not in kwargs

    @pytest.mark.asyncio
    async def test_when_timeout_configured_then_passed_to_request(self) -> None:
        """Given a timeout, when fetching, then it is passed as a ClientTimeout."""
        session = make_session()
        fetcher = YandexScheduleFetcher(session, api_key="secret", timeout_seconds=5)

        await fetcher.fetch(DAY, STATION)

        timeout = session.get.call_args.kwargs["timeout"]
        assert isinstance(timeout, aiohttp.ClientTimeout)
        assert timeout.total == 5

    @pytest.mark.asyncio
    async def test_when_success_then_returns_decoded_payload(self) -> None:
        """Given a 200 response, when fetching, then the JSON object is returned."""
        session = make_session(text='{"schedule": [{"arrival": "2024-05-01T10:00:00+03:00"}]}')
        fetcher = YandexScheduleFetcher(session, api_key="secret")

        payload = await fetcher.fetch(DAY, STATION)

        assert payload == {"schedule": [{"arrival": "2024-05-01T10:00:00+03:00"}]}


class TestFailures:
    """Tests for typed failures."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("api_key", [None, ""])
    async def test_when_api_key_missing_then_configuration_error_without_request(
        self, api_key: str | None
    ) -> None:
        """Given no API key, when fetching, then ConfigurationError and no network call."""
        session = make_session()
        fetcher = YandexScheduleFetcher(session, api_key=api_key)

        with pytest.raises(ConfigurationError, match="YANDEX_RASP_API_KEY"):
            await fetcher.fetch(DAY, STATION)

        session.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_when_status_not_ok_then_provider_error_with_truncated_body(self) -> None:
        """Given a 403 with a long body, when fetching, then ProviderError carries status and 300 chars."""
        session = make_session(status=403, text="x" * 1000)
        fetcher = YandexScheduleFetcher(session, api_key="secret")

        with pytest.raises(ProviderError) as exc_info:
            await fetcher.fetch(DAY, STATION)

        assert exc_info.value.status == 403
        assert exc_info.value.http_status == 403
        assert exc_info.value.body == "x" * 300

    @pytest.mark.asyncio
    async def test_when_status_not_ok_with_short_body_then_body_kept(self) -> None:
        """Given a 500 with a short body, when fetching, then the body is kept whole."""
        session = make_session(status=500, text='{"error": "oops"}')
        fetcher = YandexScheduleFetcher(session, api_key="secret")

        with pytest.raises(ProviderError) as exc_info:
            await fetcher.fetch(DAY, STATION)

        assert exc_info.value.body == '{"error": "oops"}'

    @pytest.mark.asyncio
    async def test_when_connection_fails_then_transport_error(self) -> None:
        """Given a connection failure, when fetching, then TransportError carries the cause."""
        session = MagicMock()
        session.get.side_effect = aiohttp.ClientConnectionError("connection refused")
        fetcher = YandexScheduleFetcher(session, api_key="secret")

        with pytest.raises(TransportError) as exc_info:
            await fetcher.fetch(DAY, STATION)

        assert exc_info.value.detail == "connection refused"
        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

    @pytest.mark.asyncio
    async def test_when_request_times_out_then_transport_error(self) -> None:
        """Given a timeout, when fetching, then TransportError names the timeout."""
        session = MagicMock()
        session.get.side_effect = asyncio.TimeoutError()
        fetcher = YandexScheduleFetcher(session, api_key="secret")

        with pytest.raises(TransportError) as exc_info:
            await fetcher.fetch(DAY, STATION)

        assert exc_info.value.detail == "TimeoutError"

    @pytest.mark.asyncio
    async def test_when_body_not_json_then_transport_error(self) -> None:
        """Given a 200 with an HTML body, when fetching, then TransportError."""
        session = make_session(text="<html>maintenance</html>")
        fetcher = YandexScheduleFetcher(session, api_key="secret")

        with pytest.raises(TransportError):
            await fetcher.fetch(DAY, STATION)

    @pytest.mark.asyncio
    async def test_when_body_is_json_array_then_transport_error(self) -> None:
        """Given a 200 with a JSON array, when fetching, then TransportError."""
        session = make_session(text="[]")
        fetcher = YandexScheduleFetcher(session, api_key="secret")

        with pytest.raises(TransportError, match="not a JSON object"):
            await fetcher.fetch(DAY, STATION)

    @pytest.mark.asyncio
    async def test_when_body_not_utf8_then_transport_error(self) -> None:
        """Given a 200 whose body is not valid UTF-8, when fetching, then TransportError."""
        session = make_raw_session(200, b'{"schedule": "\xff\xfe"}')
        fetcher = YandexScheduleFetcher(session, api_key="secret")

        with pytest.raises(TransportError) as exc_info:
            await fetcher.fetch(DAY, STATION)

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_when_error_page_not_utf8_then_provider_error_keeps_excerpt(self) -> None:
        """Given a 502 error page in cp1251, when fetching, then ProviderError still carries the body."""
        page = "<html>Сервис недоступен</html>".encode("cp1251")
        session = make_raw_session(502, page)
        fetcher = YandexScheduleFetcher(session, api_key="secret")

        with pytest.raises(ProviderError) as exc_info:
            await fetcher.fetch(DAY, STATION)

        assert exc_info.value.status == 502
        assert exc_info.value.body.startswith("<html>")
        assert exc_info.value.body.endswith("</html>")
        assert "�" in exc_info.value.body
