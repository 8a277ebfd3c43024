"""12-factor configuration adapter using environment variables and a .env file."""

from datetime import timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")

    # Yandex.Rasp API configuration
    yandex_rasp_api_key: str | None = Field(
        default=None, description="API key for the Yandex.Rasp schedule API"
    )
    yandex_api_url: str = Field(
        default="https://api.rasp.yandex.net/v3.0/schedule/",
        description="Schedule endpoint of the Yandex.Rasp API",
    )
    yandex_api_timeout: int = Field(
        default=10, gt=0, description="Timeout for Yandex.Rasp API requests in seconds"
    )
    station_code: str = Field(
        default="s9603463",
        description="Yandex.Rasp code of the station next to the crossing (Udelnaya)",
    )
    result_timezone: str = Field(
        default="Europe/Moscow",
        description="Timezone the provider expresses arrival times in (IANA timezone name)",
    )

    # Closure model: minutes the barrier is closed before/after an arrival
    closed_before_min: int = Field(
        default=3, ge=0, description="Minutes the barrier closes before an arrival"
    )
    closed_after_min: int = Field(
        default=2, ge=0, description="Minutes the barrier stays closed after an arrival"
    )

    # Cache configuration
    cache_ttl_minutes: int = Field(
        default=180, gt=0, description="Maximum age of the cached daily result in minutes"
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        ge=0,
        description="Maximum number of requests allowed per IP address per minute (0 disables)",
    )

    # Front end
    public_dir: str = Field(
        default="public", description="Directory with the static front end files"
    )

    @field_validator("result_timezone")
    @classmethod
    def validate_result_timezone(cls, v: str) -> str:
        """Validate the result timezone is a known IANA timezone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"result_timezone must be a valid IANA timezone: {v}") from e
        return v

    @property
    def zone(self) -> ZoneInfo:
        """The result timezone as a tzinfo object."""
        return ZoneInfo(self.result_timezone)

    @property
    def cache_ttl(self) -> timedelta:
        """The cache time-to-live."""
        return timedelta(minutes=self.cache_ttl_minutes)
