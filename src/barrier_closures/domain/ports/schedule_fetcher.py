"""Schedule fetcher port."""

from datetime import date
from typing import Any, Protocol


class ScheduleFetcher(Protocol):
    """Port for retrieving the raw arrival schedule of a station."""

    async def fetch(self, day: date, station: str) -> dict[str, Any]:
        """Fetch the raw schedule payload for a station and day.

        Raises:
            ConfigurationError: The provider credential is missing.
            ProviderError: The provider answered with a non-success status.
            TransportError: The request or response decoding failed.
        """
        ...
